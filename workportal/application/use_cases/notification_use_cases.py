"""
Notification use cases for the application layer.
Notifications are written by event handlers; users can only read them and mark them read.
"""

import logging
from typing import List

from workportal.application.use_cases.base_use_case import (
    AuthorizedUseCase,
    CommandUseCase,
    QueryUseCase,
    PaginatedQueryUseCase,
)
from workportal.application.dto.notification_dto import (
    ListNotificationsRequestDTO,
    NotificationResponseDTO,
)
from workportal.domain.models.base import EntityNotFoundError
from workportal.domain.models.profile import Profile
from workportal.domain.repositories.notification_repository import NotificationRepository
from workportal.domain.services.visibility_service import VisibilityService


logger = logging.getLogger(__name__)


class ListNotificationsUseCase(
    AuthorizedUseCase,
    PaginatedQueryUseCase[ListNotificationsRequestDTO, List[NotificationResponseDTO]]
):
    """The caller's notifications, newest first."""

    def __init__(
        self,
        notification_repository: NotificationRepository,
        default_page_size: int = 50,
        max_page_size: int = 100,
    ):
        super().__init__(default_page_size=default_page_size, max_page_size=max_page_size)
        self.notification_repository = notification_repository

    async def _execute_business_logic(
        self,
        request: ListNotificationsRequestDTO,
        actor: Profile
    ) -> List[NotificationResponseDTO]:
        notifications = self.notification_repository.find_by_user(
            actor.id,
            unread_only=request.unread_only,
            limit=self.page_size(request),
            offset=request.offset,
        )
        return [NotificationResponseDTO.from_domain(n) for n in notifications]


class MarkNotificationReadUseCase(AuthorizedUseCase, CommandUseCase[str, NotificationResponseDTO]):
    """Mark one of the caller's notifications as read."""

    def __init__(self, notification_repository: NotificationRepository):
        super().__init__()
        self.notification_repository = notification_repository
        self.visibility = VisibilityService()

    async def _execute_command_logic(self, request: str, actor: Profile) -> NotificationResponseDTO:
        notification = self.notification_repository.find_by_id(request)
        if notification is None:
            raise EntityNotFoundError("Notification", request)
        self.visibility.require_notification_owner(actor, notification)

        if not notification.read:
            self.notification_repository.mark_read(notification.id)
            notification.read = True
        return NotificationResponseDTO.from_domain(notification)


class MarkAllNotificationsReadUseCase(AuthorizedUseCase, CommandUseCase[None, int]):
    """Mark every unread notification of the caller as read. Returns how many changed."""

    def __init__(self, notification_repository: NotificationRepository):
        super().__init__()
        self.notification_repository = notification_repository

    async def _execute_command_logic(self, request: None, actor: Profile) -> int:
        changed = self.notification_repository.mark_all_read(actor.id)
        logger.debug(f"Marked {changed} notification(s) read for {actor.id}")
        return changed


class CountUnreadNotificationsUseCase(AuthorizedUseCase, QueryUseCase[None, int]):

    def __init__(self, notification_repository: NotificationRepository):
        super().__init__()
        self.notification_repository = notification_repository

    async def _execute_business_logic(self, request: None, actor: Profile) -> int:
        return self.notification_repository.count_unread(actor.id)

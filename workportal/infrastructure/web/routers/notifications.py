"""
Notification router.
"""

from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, Query

from workportal.application.dto.base_dto import CountResponseDTO
from workportal.application.dto.notification_dto import ListNotificationsRequestDTO, NotificationResponseDTO
from workportal.application.use_cases.notification_use_cases import (
    ListNotificationsUseCase,
    MarkNotificationReadUseCase,
    MarkAllNotificationsReadUseCase,
    CountUnreadNotificationsUseCase,
)
from workportal.config import get_settings
from workportal.domain.models.profile import Profile
from workportal.infrastructure.auth.dependencies import get_current_profile
from workportal.infrastructure.web.dependencies import NotificationRepo
from workportal.infrastructure.web.middleware.error_handler import unwrap_result


router = APIRouter()

CurrentProfile = Annotated[Profile, Depends(get_current_profile)]


@router.get("", response_model=List[NotificationResponseDTO])
async def list_notifications(
    actor: CurrentProfile,
    repository: NotificationRepo,
    unread_only: bool = Query(False),
    limit: Optional[int] = Query(None, ge=1),
    offset: int = Query(0, ge=0)
):
    request = ListNotificationsRequestDTO(unread_only=unread_only, limit=limit, offset=offset)
    settings = get_settings()
    use_case = ListNotificationsUseCase(repository, settings.default_page_size, settings.max_page_size)
    return unwrap_result(await use_case.execute(request, actor))


@router.get("/unread-count", response_model=CountResponseDTO)
async def unread_count(actor: CurrentProfile, repository: NotificationRepo):
    count = unwrap_result(await CountUnreadNotificationsUseCase(repository).execute(None, actor))
    return CountResponseDTO(count=count)


@router.post("/read-all", response_model=CountResponseDTO)
async def mark_all_read(actor: CurrentProfile, repository: NotificationRepo):
    updated = unwrap_result(await MarkAllNotificationsReadUseCase(repository).execute(None, actor))
    return CountResponseDTO(count=updated)


@router.post("/{notification_id}/read", response_model=NotificationResponseDTO)
async def mark_read(notification_id: str, actor: CurrentProfile, repository: NotificationRepo):
    return unwrap_result(await MarkNotificationReadUseCase(repository).execute(notification_id, actor))

"""
Notification DTOs for the application layer.
"""

from typing import Optional
from pydantic import Field

from workportal.domain.models.notification import Notification
from .base_dto import ResponseDTO, PageRequestDTO


class ListNotificationsRequestDTO(PageRequestDTO):
    unread_only: bool = Field(default=False, description="Only unread notifications")


class NotificationResponseDTO(ResponseDTO):
    user_id: str
    title: str
    message: str
    type: str
    link: Optional[str] = None
    read: bool

    @classmethod
    def from_domain(cls, notification: Notification) -> "NotificationResponseDTO":
        return cls(
            id=notification.id,
            created_at=notification.created_at,
            user_id=notification.user_id,
            title=notification.title,
            message=notification.message,
            type=notification.type,
            link=notification.link,
            read=notification.read,
        )

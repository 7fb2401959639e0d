"""
Notification mapper for converting between domain entities and storage records.
"""

from typing import Any, Dict

from workportal.domain.models.notification import Notification
from workportal.infrastructure.db.models import NotificationModel
from .base_mapper import to_utc, iso


class NotificationMapper:

    def domain_to_model(self, notification: Notification) -> NotificationModel:
        return NotificationModel(
            id=notification.id,
            user_id=notification.user_id,
            title=notification.title,
            message=notification.message,
            type=notification.type,
            link=notification.link,
            read=notification.read,
            created_at=notification.created_at,
        )

    def model_to_domain(self, model: NotificationModel) -> Notification:
        created_at = to_utc(model.created_at)
        return Notification(
            id=model.id,
            user_id=model.user_id,
            title=model.title,
            message=model.message,
            type=model.type,
            link=model.link,
            read=bool(model.read),
            created_at=created_at,
            updated_at=created_at,
        )

    def row_to_domain(self, row: Dict[str, Any]) -> Notification:
        created_at = to_utc(row.get("created_at"))
        return Notification(
            id=row["id"],
            user_id=row["user_id"],
            title=row.get("title") or "",
            message=row.get("message") or "",
            type=row.get("type") or "",
            link=row.get("link"),
            read=bool(row.get("read")),
            created_at=created_at,
            updated_at=created_at,
        )

    def domain_to_row(self, notification: Notification) -> Dict[str, Any]:
        return {
            "id": notification.id,
            "user_id": notification.user_id,
            "title": notification.title,
            "message": notification.message,
            "type": notification.type,
            "link": notification.link,
            "read": notification.read,
            "created_at": iso(notification.created_at),
        }

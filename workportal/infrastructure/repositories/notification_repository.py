"""
Notification repository implementations.
"""

from typing import List, Optional

from workportal.domain.models.notification import Notification
from workportal.domain.repositories.notification_repository import NotificationRepository
from workportal.infrastructure.db.models import NotificationModel
from workportal.infrastructure.mappers.notification_mapper import NotificationMapper
from .base import SQLAlchemyRepository, SupabaseRepository


class SQLAlchemyNotificationRepository(SQLAlchemyRepository, NotificationRepository):
    """SQLAlchemy implementation of notification repository."""

    entity_name = "Notification"

    def __init__(self, session):
        super().__init__(session)
        self.mapper = NotificationMapper()

    def create(self, notification: Notification) -> Notification:
        self._insert(self.mapper.domain_to_model(notification))
        return notification

    def find_by_id(self, notification_id: str) -> Optional[Notification]:
        with self._translate_errors():
            model = self.session.query(NotificationModel).filter_by(id=notification_id).first()
        return self.mapper.model_to_domain(model) if model else None

    def find_by_user(
        self,
        user_id: str,
        unread_only: bool = False,
        limit: Optional[int] = None,
        offset: int = 0
    ) -> List[Notification]:
        query = self.session.query(NotificationModel).filter(NotificationModel.user_id == user_id)
        if unread_only:
            query = query.filter(NotificationModel.read.is_(False))

        with self._translate_errors():
            query = query.order_by(NotificationModel.created_at.desc())
            if offset:
                query = query.offset(offset)
            if limit:
                query = query.limit(limit)
            models = query.all()
        return [self.mapper.model_to_domain(m) for m in models]

    def mark_read(self, notification_id: str) -> None:
        with self._translate_errors():
            self.session.query(NotificationModel).filter(NotificationModel.id == notification_id).update(
                {NotificationModel.read: True}, synchronize_session="fetch"
            )

    def mark_all_read(self, user_id: str) -> int:
        with self._translate_errors():
            return (
                self.session.query(NotificationModel)
                .filter(NotificationModel.user_id == user_id, NotificationModel.read.is_(False))
                .update({NotificationModel.read: True}, synchronize_session="fetch")
            )

    def count_unread(self, user_id: str) -> int:
        with self._translate_errors():
            return (
                self.session.query(NotificationModel)
                .filter(NotificationModel.user_id == user_id, NotificationModel.read.is_(False))
                .count()
            )


class SupabaseNotificationRepository(SupabaseRepository, NotificationRepository):
    """PostgREST implementation of notification repository."""

    table_name = "notifications"
    entity_name = "Notification"

    def __init__(self, client):
        super().__init__(client)
        self.mapper = NotificationMapper()

    def create(self, notification: Notification) -> Notification:
        response = self._execute(self._table().insert(self.mapper.domain_to_row(notification)))
        row = self._single(response)
        return self.mapper.row_to_domain(row) if row else notification

    def find_by_id(self, notification_id: str) -> Optional[Notification]:
        response = self._execute(self._table().select("*").eq("id", notification_id).limit(1))
        row = self._single(response)
        return self.mapper.row_to_domain(row) if row else None

    def find_by_user(
        self,
        user_id: str,
        unread_only: bool = False,
        limit: Optional[int] = None,
        offset: int = 0
    ) -> List[Notification]:
        query = self._table().select("*").eq("user_id", user_id)
        if unread_only:
            query = query.eq("read", False)
        query = query.order("created_at", desc=True)
        if limit:
            query = query.range(offset, offset + limit - 1)
        response = self._execute(query)
        return [self.mapper.row_to_domain(row) for row in response.data or []]

    def mark_read(self, notification_id: str) -> None:
        self._execute(self._table().update({"read": True}).eq("id", notification_id))

    def mark_all_read(self, user_id: str) -> int:
        response = self._execute(
            self._table().update({"read": True}).eq("user_id", user_id).eq("read", False)
        )
        return len(response.data or [])

    def count_unread(self, user_id: str) -> int:
        response = self._execute(
            self._table().select("id", count="exact").eq("user_id", user_id).eq("read", False)
        )
        return response.count or 0

"""
Request-scoped dependencies for FastAPI routers.
Selects the storage backend from settings and builds repositories on top of it.
"""

from functools import lru_cache
from typing import Annotated, Any, Iterator

from fastapi import Depends
from sqlalchemy.orm import Session

from workportal.config import get_settings
from workportal.domain.events.base import EventDispatcher
from workportal.domain.repositories import (
    ProfileRepository,
    ProjectRepository,
    DeliverableRepository,
    MessageRepository,
    InvoiceRepository,
    NotificationRepository,
)
from workportal.domain.services.auth_service import AuthProvider
from workportal.infrastructure.db.database import get_db
from workportal.infrastructure.db.supabase_client import create_auth_client, get_supabase_client
from workportal.infrastructure.events.event_setup import build_event_dispatcher
from workportal.infrastructure.auth.supabase_auth import SupabaseAuthService
from workportal.infrastructure.repositories import (
    SQLAlchemyProfileRepository, SupabaseProfileRepository,
    SQLAlchemyProjectRepository, SupabaseProjectRepository,
    SQLAlchemyDeliverableRepository, SupabaseDeliverableRepository,
    SQLAlchemyMessageRepository, SupabaseMessageRepository,
    SQLAlchemyInvoiceRepository, SupabaseInvoiceRepository,
    SQLAlchemyNotificationRepository, SupabaseNotificationRepository,
)


def get_store() -> Iterator[Any]:
    """
    The request's storage handle: a SQLAlchemy session (one unit of work per
    request) or the shared Supabase client.
    """
    if get_settings().uses_sqlalchemy:
        yield from get_db()
    else:
        yield get_supabase_client()


Store = Annotated[Any, Depends(get_store)]


def _build(store: Any, sqlalchemy_cls, supabase_cls):
    if isinstance(store, Session):
        return sqlalchemy_cls(store)
    return supabase_cls(store)


def get_profile_repository(store: Store) -> ProfileRepository:
    return _build(store, SQLAlchemyProfileRepository, SupabaseProfileRepository)


def get_project_repository(store: Store) -> ProjectRepository:
    return _build(store, SQLAlchemyProjectRepository, SupabaseProjectRepository)


def get_deliverable_repository(store: Store) -> DeliverableRepository:
    return _build(store, SQLAlchemyDeliverableRepository, SupabaseDeliverableRepository)


def get_message_repository(store: Store) -> MessageRepository:
    return _build(store, SQLAlchemyMessageRepository, SupabaseMessageRepository)


def get_invoice_repository(store: Store) -> InvoiceRepository:
    return _build(store, SQLAlchemyInvoiceRepository, SupabaseInvoiceRepository)


def get_notification_repository(store: Store) -> NotificationRepository:
    return _build(store, SQLAlchemyNotificationRepository, SupabaseNotificationRepository)


def get_event_dispatcher(
    notification_repository: Annotated[NotificationRepository, Depends(get_notification_repository)]
) -> EventDispatcher:
    return build_event_dispatcher(notification_repository)


@lru_cache()
def get_auth_provider() -> AuthProvider:
    return SupabaseAuthService(create_auth_client(), get_supabase_client())


ProfileRepo = Annotated[ProfileRepository, Depends(get_profile_repository)]
ProjectRepo = Annotated[ProjectRepository, Depends(get_project_repository)]
DeliverableRepo = Annotated[DeliverableRepository, Depends(get_deliverable_repository)]
MessageRepo = Annotated[MessageRepository, Depends(get_message_repository)]
InvoiceRepo = Annotated[InvoiceRepository, Depends(get_invoice_repository)]
NotificationRepo = Annotated[NotificationRepository, Depends(get_notification_repository)]
Dispatcher = Annotated[EventDispatcher, Depends(get_event_dispatcher)]
Auth = Annotated[AuthProvider, Depends(get_auth_provider)]

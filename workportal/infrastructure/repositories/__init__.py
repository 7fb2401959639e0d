from .profile_repository import SQLAlchemyProfileRepository, SupabaseProfileRepository
from .project_repository import SQLAlchemyProjectRepository, SupabaseProjectRepository
from .deliverable_repository import SQLAlchemyDeliverableRepository, SupabaseDeliverableRepository
from .message_repository import SQLAlchemyMessageRepository, SupabaseMessageRepository
from .invoice_repository import SQLAlchemyInvoiceRepository, SupabaseInvoiceRepository
from .notification_repository import SQLAlchemyNotificationRepository, SupabaseNotificationRepository

__all__ = [
    "SQLAlchemyProfileRepository",
    "SupabaseProfileRepository",
    "SQLAlchemyProjectRepository",
    "SupabaseProjectRepository",
    "SQLAlchemyDeliverableRepository",
    "SupabaseDeliverableRepository",
    "SQLAlchemyMessageRepository",
    "SupabaseMessageRepository",
    "SQLAlchemyInvoiceRepository",
    "SupabaseInvoiceRepository",
    "SQLAlchemyNotificationRepository",
    "SupabaseNotificationRepository",
]

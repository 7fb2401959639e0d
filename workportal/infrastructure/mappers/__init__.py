"""
Mappers between domain entities, SQLAlchemy models and PostgREST rows.
"""

from .profile_mapper import ProfileMapper
from .project_mapper import ProjectMapper
from .deliverable_mapper import DeliverableMapper
from .message_mapper import MessageMapper
from .invoice_mapper import InvoiceMapper
from .notification_mapper import NotificationMapper

__all__ = [
    "ProfileMapper",
    "ProjectMapper",
    "DeliverableMapper",
    "MessageMapper",
    "InvoiceMapper",
    "NotificationMapper",
]

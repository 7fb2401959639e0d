"""
Repository interfaces for the domain layer.
This module exports all repository interfaces (ports) for dependency injection.
"""

from .profile_repository import ProfileRepository
from .project_repository import ProjectRepository
from .deliverable_repository import DeliverableRepository
from .message_repository import MessageRepository
from .invoice_repository import InvoiceRepository
from .notification_repository import NotificationRepository

__all__ = [
    "ProfileRepository",
    "ProjectRepository",
    "DeliverableRepository",
    "MessageRepository",
    "InvoiceRepository",
    "NotificationRepository",
]

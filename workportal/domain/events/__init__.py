"""
Domain events for the application.
Lifecycle events are turned into notifications by handlers in the infrastructure layer.
"""

from .base import DomainEvent, EventHandler, EventDispatcher
from .project_events import ProjectApplied, ProjectCancelled
from .deliverable_events import DeliverableSubmitted, DeliverableReviewed
from .invoice_events import InvoiceCreated, InvoicePaid

__all__ = [
    "DomainEvent",
    "EventHandler",
    "EventDispatcher",
    "ProjectApplied",
    "ProjectCancelled",
    "DeliverableSubmitted",
    "DeliverableReviewed",
    "InvoiceCreated",
    "InvoicePaid",
]

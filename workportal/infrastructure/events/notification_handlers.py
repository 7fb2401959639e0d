"""
Event handlers that turn lifecycle events into in-app notifications.
"""

import logging

from workportal.domain.events.base import EventHandler, DomainEvent
from workportal.domain.events.deliverable_events import DeliverableSubmitted, DeliverableReviewed
from workportal.domain.events.invoice_events import InvoiceCreated
from workportal.domain.events.project_events import ProjectApplied
from workportal.domain.models.notification import Notification, NotificationType
from workportal.domain.repositories.notification_repository import NotificationRepository


logger = logging.getLogger(__name__)


class LoggingEventHandler(EventHandler):
    """Global handler that records every dispatched event in the log."""

    def can_handle(self, event: DomainEvent) -> bool:
        return True

    async def handle(self, event: DomainEvent) -> None:
        logger.info(f"Event {event.event_type} ({event.event_id}) at {event.occurred_at.isoformat()}")


class NotificationEventHandler(EventHandler):
    """
    Writes one notification per qualifying event.

    Failures propagate to the dispatcher, which logs them; the command that
    produced the event has already committed its primary write by then.
    """

    def __init__(self, notification_repository: NotificationRepository):
        self.notification_repository = notification_repository

    def can_handle(self, event: DomainEvent) -> bool:
        return isinstance(event, (ProjectApplied, DeliverableSubmitted, DeliverableReviewed, InvoiceCreated))

    async def handle(self, event: DomainEvent) -> None:
        notification = self.build_notification(event)
        if notification is None:
            return
        notification.ensure_id()
        self.notification_repository.create(notification)
        logger.info(f"Notified {notification.user_id} of {event.event_type} ({notification.type})")

    def build_notification(self, event: DomainEvent):
        if isinstance(event, ProjectApplied):
            return Notification(
                user_id=event.client_id,
                title="Project Application",
                message=f"{event.freelancer_name} has applied to your project: {event.project_title}",
                type=NotificationType.APPLICATION,
                link=f"/projects/{event.project_id}",
            )

        if isinstance(event, DeliverableSubmitted):
            return Notification(
                user_id=event.client_id,
                title="Deliverable Submitted",
                message=(
                    f"{event.freelancer_name} submitted version {event.deliverable_version} "
                    f"for your project: {event.project_title}"
                ),
                type=NotificationType.DELIVERABLE,
                link=f"/projects/{event.project_id}",
            )

        if isinstance(event, DeliverableReviewed):
            if event.approved:
                title = "Deliverable Approved"
                message = f"Your work on {event.project_title} was approved"
            else:
                title = "Revision Requested"
                message = f"The client requested changes to your work on {event.project_title}"
            if event.feedback:
                message = f"{message}: {event.feedback}"
            return Notification(
                user_id=event.freelancer_id,
                title=title,
                message=message,
                type=NotificationType.REVIEW,
                link=f"/projects/{event.project_id}",
            )

        if isinstance(event, InvoiceCreated):
            return Notification(
                user_id=event.client_id,
                title="New Invoice",
                message=f"{event.freelancer_name} sent you an invoice for {event.amount} on {event.project_title}",
                type=NotificationType.INVOICE,
                link=f"/invoices/{event.invoice_id}",
            )

        return None

"""
Event system setup.
Builds a dispatcher with the notification and logging handlers registered.
"""

import logging

from workportal.domain.events.base import EventDispatcher
from workportal.domain.repositories.notification_repository import NotificationRepository
from .notification_handlers import LoggingEventHandler, NotificationEventHandler


logger = logging.getLogger(__name__)

NOTIFYING_EVENTS = ("ProjectApplied", "DeliverableSubmitted", "DeliverableReviewed", "InvoiceCreated")


def build_event_dispatcher(notification_repository: NotificationRepository) -> EventDispatcher:
    """
    Dispatcher for one request.
    The notification handler writes through the request's own repository.
    """
    dispatcher = EventDispatcher()

    dispatcher.register_global_handler(LoggingEventHandler())

    notification_handler = NotificationEventHandler(notification_repository)
    for event_type in NOTIFYING_EVENTS:
        dispatcher.register_handler(event_type, notification_handler)

    logger.debug(f"Event handlers registered: {dispatcher.get_registered_handlers()}")
    return dispatcher

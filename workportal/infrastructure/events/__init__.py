from .event_setup import build_event_dispatcher
from .notification_handlers import LoggingEventHandler, NotificationEventHandler

__all__ = ["build_event_dispatcher", "LoggingEventHandler", "NotificationEventHandler"]

"""
Base classes for domain events and event handling.
Provides the foundation for event-driven architecture.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Any, List, Optional
from datetime import datetime
from dataclasses import dataclass, field

from workportal.domain.models.base import utcnow, new_id


logger = logging.getLogger(__name__)


@dataclass
class DomainEvent(ABC):
    """Base class for all domain events."""

    event_id: str = field(default_factory=new_id)
    occurred_at: datetime = field(default_factory=utcnow)
    event_type: str = field(init=False)
    version: int = field(default=1)

    def __post_init__(self):
        """Set event type based on class name."""
        if not hasattr(self, 'event_type') or not self.event_type:
            self.event_type = self.__class__.__name__

    def to_dict(self) -> Dict[str, Any]:
        """Convert event to dictionary for serialization."""
        return {
            "event_id": self.event_id,
            "event_type": self.event_type,
            "occurred_at": self.occurred_at.isoformat(),
            "version": self.version,
            "data": self._get_event_data()
        }

    @abstractmethod
    def _get_event_data(self) -> Dict[str, Any]:
        """Get event-specific data for serialization."""
        pass


class EventHandler(ABC):
    """Base class for event handlers."""

    @abstractmethod
    async def handle(self, event: DomainEvent) -> None:
        """Handle a domain event."""
        pass

    @abstractmethod
    def can_handle(self, event: DomainEvent) -> bool:
        """Check if this handler can process the given event."""
        pass


class EventDispatcher:
    """
    Dispatches domain events to registered handlers.

    Handlers run one after another in registration order. A failing handler is
    logged and skipped; it never stops the remaining handlers and never
    propagates to the code that published the event.
    """

    def __init__(self):
        self._handlers: Dict[str, List[EventHandler]] = {}
        self._global_handlers: List[EventHandler] = []
        self._event_log: List[Dict[str, Any]] = []

    def register_handler(self, event_type: str, handler: EventHandler) -> None:
        """Register an event handler for specific event type."""
        if event_type not in self._handlers:
            self._handlers[event_type] = []

        self._handlers[event_type].append(handler)
        logger.debug(f"Registered handler {handler.__class__.__name__} for {event_type}")

    def register_global_handler(self, handler: EventHandler) -> None:
        """Register a handler that receives all events."""
        self._global_handlers.append(handler)
        logger.debug(f"Registered global handler {handler.__class__.__name__}")

    async def dispatch(self, event: DomainEvent) -> None:
        """Dispatch event to all registered handlers."""
        self._event_log.append(event.to_dict())

        logger.info(f"Dispatching event: {event.event_type} (ID: {event.event_id})")

        specific_handlers = self._handlers.get(event.event_type, [])
        all_handlers = specific_handlers + [
            h for h in self._global_handlers
            if h.can_handle(event)
        ]

        if not all_handlers:
            logger.warning(f"No handlers registered for event: {event.event_type}")
            return

        # Sequential: handlers may share the request's database session.
        for handler in all_handlers:
            await self._safe_handle(handler, event)

        logger.debug(f"Dispatched {event.event_type} to {len(all_handlers)} handler(s)")

    async def dispatch_all(self, events: List[DomainEvent]) -> None:
        for event in events:
            await self.dispatch(event)

    async def _safe_handle(self, handler: EventHandler, event: DomainEvent) -> None:
        """Safely execute event handler with error handling."""
        try:
            await handler.handle(event)
            logger.debug(f"Handler {handler.__class__.__name__} processed {event.event_type}")
        except Exception as e:
            logger.error(
                f"Handler {handler.__class__.__name__} failed to process "
                f"{event.event_type}: {str(e)}"
            )

    def get_event_log(self, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """Get recent events from the log."""
        events = sorted(self._event_log, key=lambda x: x['occurred_at'], reverse=True)
        return events[:limit] if limit else events

    def get_registered_handlers(self) -> Dict[str, List[str]]:
        """Get information about registered handlers."""
        result = {}

        for event_type, handlers in self._handlers.items():
            result[event_type] = [h.__class__.__name__ for h in handlers]

        if self._global_handlers:
            result["global"] = [h.__class__.__name__ for h in self._global_handlers]

        return result

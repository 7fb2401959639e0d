"""
Base use case classes for the application layer.
Provides common patterns and structure for use case implementations.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, TypeVar, Generic, List
from dataclasses import dataclass
from datetime import datetime

from pydantic import ValidationError as PydanticValidationError

from workportal.domain.events.base import DomainEvent, EventDispatcher
from workportal.domain.models.base import (
    DomainException,
    ValidationError,
    AuthenticationError,
    utcnow,
)
from workportal.domain.models.profile import Profile


logger = logging.getLogger(__name__)

T = TypeVar('T')
R = TypeVar('R')


@dataclass
class UseCaseResult(Generic[T]):
    """Result wrapper for use case operations."""

    success: bool
    data: Optional[T] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None

    @classmethod
    def success_result(cls, data: T, metadata: Optional[Dict[str, Any]] = None) -> "UseCaseResult[T]":
        """Create a successful result."""
        return cls(success=True, data=data, metadata=metadata)

    @classmethod
    def error_result(
        cls,
        error: str,
        error_code: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None
    ) -> "UseCaseResult[T]":
        """Create an error result."""
        return cls(
            success=False,
            error=error,
            error_code=error_code,
            metadata=metadata
        )

    @classmethod
    def from_exception(cls, exc: Exception) -> "UseCaseResult[T]":
        """Create error result from exception."""
        if isinstance(exc, DomainException):
            result = cls.error_result(exc.message, exc.code)
            field = getattr(exc, "field", None)
            if field:
                result.metadata = {"field": field}
            return result
        return cls.error_result("An unexpected error occurred", "UNKNOWN_ERROR")


class BaseUseCase(ABC, Generic[T, R]):
    """
    Base class for all use cases.

    `execute` never raises for domain failures: they come back as an error
    result carrying the exception's code. Anything else is logged with its
    traceback and returned as UNKNOWN_ERROR.
    """

    def __init__(self):
        self.execution_start: Optional[datetime] = None
        self.execution_end: Optional[datetime] = None

    async def execute(self, request: T, actor: Optional[Profile] = None) -> UseCaseResult[R]:
        """
        Execute the use case on behalf of `actor`, the caller's resolved profile.
        """
        self.execution_start = utcnow()

        try:
            await self._validate_request(request, actor)

            result = await self._execute_business_logic(request, actor)

            self.execution_end = utcnow()
            execution_time = (self.execution_end - self.execution_start).total_seconds()

            return UseCaseResult.success_result(
                result,
                metadata={
                    "execution_time_seconds": execution_time,
                    "executed_at": self.execution_end.isoformat()
                }
            )

        except Exception as exc:
            self.execution_end = utcnow()
            execution_time = (self.execution_end - self.execution_start).total_seconds()

            if isinstance(exc, DomainException):
                logger.info(f"{self.__class__.__name__} rejected: {exc.code}: {exc.message}")
            else:
                logger.exception(f"{self.__class__.__name__} failed unexpectedly")

            error_result = UseCaseResult.from_exception(exc)
            error_result.metadata = {
                **(error_result.metadata or {}),
                "execution_time_seconds": execution_time,
                "failed_at": self.execution_end.isoformat(),
                "exception_type": type(exc).__name__
            }

            return error_result

    async def _validate_request(self, request: T, actor: Optional[Profile]) -> None:
        """
        Validate the request. Override in subclasses if needed.
        """
        if hasattr(request, 'model_validate') and hasattr(request, 'model_dump'):
            try:
                request.model_validate(request.model_dump())
            except PydanticValidationError as e:
                error = e.errors()[0]
                field = ".".join(str(part) for part in error.get("loc", ())) or None
                raise ValidationError(error.get("msg", "Invalid request"), field)

    @abstractmethod
    async def _execute_business_logic(self, request: T, actor: Optional[Profile]) -> R:
        """
        Execute the core business logic. Must be implemented by subclasses.
        """
        pass


class QueryUseCase(BaseUseCase[T, R]):
    """
    Base class for query use cases (read operations).
    """
    pass


class CommandUseCase(BaseUseCase[T, R]):
    """
    Base class for command use cases (write operations).

    Events recorded during the command are published only after the command
    logic returned, and publishing is best-effort: a failed notification is
    logged and the command still succeeds.
    """

    def __init__(self, event_dispatcher: Optional[EventDispatcher] = None):
        super().__init__()
        self.event_dispatcher = event_dispatcher
        self.events: List[DomainEvent] = []

    async def _execute_business_logic(self, request: T, actor: Optional[Profile]) -> R:
        self.events.clear()
        result = await self._execute_command_logic(request, actor)
        await self._publish_events()
        return result

    @abstractmethod
    async def _execute_command_logic(self, request: T, actor: Optional[Profile]) -> R:
        """Execute the command logic. Must be implemented by subclasses."""
        pass

    def _record(self, event: DomainEvent) -> None:
        self.events.append(event)

    async def _publish_events(self) -> None:
        """Publish collected domain events."""
        if self.event_dispatcher is None:
            if self.events:
                logger.debug(f"No dispatcher configured; dropping {len(self.events)} event(s)")
            self.events.clear()
            return

        for event in self.events:
            try:
                await self.event_dispatcher.dispatch(event)
            except Exception as e:
                logger.error(f"Failed to publish {event.event_type} ({event.event_id}): {str(e)}")

        self.events.clear()


class AuthorizedUseCase(BaseUseCase[T, R]):
    """
    Mixin for use cases that require a signed-in, provisioned actor.
    """

    async def _validate_request(self, request: T, actor: Optional[Profile]) -> None:
        """Validate request with authorization check."""
        await super()._validate_request(request, actor)

        if actor is None:
            raise AuthenticationError("Authentication required")

        await self._check_authorization(request, actor)

    async def _check_authorization(self, request: T, actor: Profile) -> None:
        """Check if the actor is authorized. Override in subclasses."""
        pass


class PaginatedQueryUseCase(QueryUseCase[T, R]):
    """
    Base class for paginated query use cases.
    """

    def __init__(self, default_page_size: int = 50, max_page_size: int = 100):
        super().__init__()
        self.default_page_size = default_page_size
        self.max_page_size = max_page_size

    async def _validate_request(self, request: T, actor: Optional[Profile]) -> None:
        """Validate paginated request."""
        await super()._validate_request(request, actor)

        limit = getattr(request, 'limit', None)
        if limit is not None:
            if limit > self.max_page_size:
                raise ValidationError(f"Page size cannot exceed {self.max_page_size}", "limit")
            if limit < 1:
                raise ValidationError("Page size must be positive", "limit")

    def page_size(self, request: T) -> int:
        """Requested page size, or the configured default."""
        limit = getattr(request, 'limit', None)
        return limit if limit is not None else self.default_page_size

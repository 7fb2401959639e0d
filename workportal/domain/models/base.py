"""
Base entity and domain exceptions for the domain layer.
This module contains the foundational classes for all domain entities.
"""

from datetime import datetime, timezone
from typing import Optional, Any, Dict
from abc import ABC
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
import uuid


def utcnow() -> datetime:
    """Current instant as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def new_id() -> str:
    """Generate an opaque identifier for a new entity."""
    return str(uuid.uuid4())


@dataclass
class BaseEntity(ABC):
    """
    Base class for all domain entities.
    Provides common attributes and behavior for all entities.
    """

    id: Optional[str] = None
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    def __post_init__(self):
        """Initialize entity after creation."""
        if self.created_at is None:
            self.created_at = utcnow()
        if self.updated_at is None:
            self.updated_at = self.created_at

    def __eq__(self, other: Any) -> bool:
        """Entities are equal if they have the same ID and are of the same type."""
        if not isinstance(other, self.__class__):
            return False
        if self.id is None or other.id is None:
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on entity ID."""
        if self.id is None:
            return hash(id(self))
        return hash((self.__class__.__name__, self.id))

    def mark_as_updated(self) -> None:
        """Update the updated_at timestamp."""
        self.updated_at = utcnow()

    def ensure_id(self) -> str:
        """Assign an identifier if the entity does not have one yet."""
        if self.id is None:
            self.id = new_id()
        return self.id

    def validate(self) -> None:
        """
        Validate the entity's state.
        Should be overridden by subclasses to implement specific validation rules.
        Raises ValidationError if the entity is in an invalid state.
        """
        pass

    def to_dict(self) -> Dict[str, Any]:
        """Convert entity to dictionary representation."""
        data = {}
        for key, value in self.__dict__.items():
            if key.startswith('_'):
                continue
            if isinstance(value, datetime):
                data[key] = value.isoformat()
            elif isinstance(value, Enum):
                data[key] = value.value
            elif isinstance(value, Decimal):
                data[key] = str(value)
            elif isinstance(value, (set, frozenset)):
                data[key] = sorted(value)
            else:
                data[key] = value
        return data


@dataclass
class AggregateRoot(BaseEntity):
    """
    Base class for aggregate roots.
    Aggregate roots are the entry points to aggregates.
    """

    version: int = field(default=1)

    def increment_version(self) -> None:
        """Increment the aggregate version."""
        self.version += 1
        self.mark_as_updated()


class DomainException(Exception):
    """Base exception for domain errors."""

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class ValidationError(DomainException):
    """Exception raised when entity or request validation fails."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, "VALIDATION_ERROR")
        self.field = field


class EntityNotFoundError(DomainException):
    """Exception raised when an entity is absent or not yet provisioned."""

    def __init__(self, entity_type: str, entity_id: Any):
        message = f"{entity_type} with id {entity_id} not found"
        super().__init__(message, "ENTITY_NOT_FOUND")
        self.entity_type = entity_type
        self.entity_id = entity_id


class ForbiddenError(DomainException):
    """Exception raised when the actor lacks the role or ownership for an action."""

    def __init__(self, message: str = "You are not allowed to perform this action", code: str = "FORBIDDEN"):
        super().__init__(message, code)


class ProfileNotProvisionedError(ForbiddenError):
    """The principal is signed in but has no profile row yet."""

    def __init__(self, user_id: str):
        super().__init__(
            "Your profile has not been set up yet. Complete sign-up before continuing.",
            "PROFILE_NOT_PROVISIONED"
        )
        self.user_id = user_id


class InvalidStateError(DomainException):
    """Exception raised when an action is attempted from a state that does not permit it."""

    def __init__(self, message: str):
        super().__init__(message, "INVALID_STATE")


class ConflictError(DomainException):
    """Exception raised when a concurrent writer won the race for the same row."""

    def __init__(self, message: str):
        super().__init__(message, "CONFLICT")


class UpstreamUnavailableError(DomainException):
    """Exception raised when the store or auth provider cannot be reached."""

    def __init__(self, message: str = "The service is temporarily unavailable. Please try again."):
        super().__init__(message, "UPSTREAM_UNAVAILABLE")


class AuthenticationError(DomainException):
    """Exception raised when credentials or tokens are rejected."""

    def __init__(self, message: str):
        super().__init__(message, "AUTHENTICATION_FAILED")


class ProfileProvisioningError(DomainException):
    """
    The auth principal was created but its profile row was not.
    Safe to retry: the profile insert is keyed by the principal id.
    """

    def __init__(self, user_id: str, reason: str):
        super().__init__(
            f"Your account was created but your profile could not be saved ({reason}). "
            "Please retry to finish setting up your account.",
            "PROFILE_PROVISIONING_FAILED"
        )
        self.user_id = user_id
        self.reason = reason

"""
Domain models for the freelance marketplace.
This module exports all domain entities and the domain exception hierarchy.
"""

# Base classes
from .base import (
    BaseEntity,
    AggregateRoot,
    DomainException,
    ValidationError,
    EntityNotFoundError,
    ForbiddenError,
    ProfileNotProvisionedError,
    InvalidStateError,
    ConflictError,
    UpstreamUnavailableError,
    AuthenticationError,
    ProfileProvisioningError,
    utcnow,
)

# Domain entities
from .profile import (
    Profile,
    UserRole,
    Capability,
    ROLE_CAPABILITIES,
    capabilities_for,
)

from .project import (
    Project,
    ProjectStatus,
    ProjectAction,
    StatusTransition,
    TRANSITIONS,
)

from .deliverable import (
    Deliverable,
    DeliverableStatus,
    ReviewDecision,
)

from .message import Message

from .invoice import (
    Invoice,
    InvoiceStatus,
)

from .notification import (
    Notification,
    NotificationType,
)

__all__ = [
    "BaseEntity",
    "AggregateRoot",
    "DomainException",
    "ValidationError",
    "EntityNotFoundError",
    "ForbiddenError",
    "ProfileNotProvisionedError",
    "InvalidStateError",
    "ConflictError",
    "UpstreamUnavailableError",
    "AuthenticationError",
    "ProfileProvisioningError",
    "utcnow",
    "Profile",
    "UserRole",
    "Capability",
    "ROLE_CAPABILITIES",
    "capabilities_for",
    "Project",
    "ProjectStatus",
    "ProjectAction",
    "StatusTransition",
    "TRANSITIONS",
    "Deliverable",
    "DeliverableStatus",
    "ReviewDecision",
    "Message",
    "Invoice",
    "InvoiceStatus",
    "Notification",
    "NotificationType",
]

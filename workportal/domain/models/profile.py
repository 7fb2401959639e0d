"""
Profile domain model.
A profile is the marketplace identity of a signed-in principal: either a client
who posts projects or a freelancer who works on them.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Dict, FrozenSet, Iterable, Optional, Set

from workportal.domain.models.base import AggregateRoot, ValidationError


class UserRole(str, Enum):
    """Marketplace roles. The set is closed: every profile is exactly one of these."""
    CLIENT = "client"
    FREELANCER = "freelancer"


class Capability(str, Enum):
    """Actions a role may take, independent of any particular project."""
    POST_PROJECT = "post_project"
    APPLY_TO_PROJECT = "apply_to_project"
    SUBMIT_DELIVERABLE = "submit_deliverable"
    REVIEW_DELIVERABLE = "review_deliverable"
    CANCEL_PROJECT = "cancel_project"
    SEND_MESSAGE = "send_message"
    CREATE_INVOICE = "create_invoice"
    PAY_INVOICE = "pay_invoice"


ROLE_CAPABILITIES: Dict[UserRole, FrozenSet[Capability]] = {
    UserRole.CLIENT: frozenset({
        Capability.POST_PROJECT,
        Capability.REVIEW_DELIVERABLE,
        Capability.CANCEL_PROJECT,
        Capability.SEND_MESSAGE,
        Capability.PAY_INVOICE,
    }),
    UserRole.FREELANCER: frozenset({
        Capability.APPLY_TO_PROJECT,
        Capability.SUBMIT_DELIVERABLE,
        Capability.SEND_MESSAGE,
        Capability.CREATE_INVOICE,
    }),
}


def capabilities_for(role: UserRole) -> FrozenSet[Capability]:
    """Capability set granted to a role."""
    return ROLE_CAPABILITIES[role]


@dataclass(frozen=True)
class ProfileSummary:
    """Public face of a profile, shown next to the records it owns."""

    full_name: str
    avatar_url: Optional[str] = None


@dataclass
class Profile(AggregateRoot):
    """
    Profile aggregate root.
    Keyed by the auth principal id; created once at sign-up and mutated only by its owner.
    """

    full_name: str = ""
    role: UserRole = UserRole.FREELANCER
    bio: Optional[str] = None
    hourly_rate: Optional[Decimal] = None
    skills: Set[str] = field(default_factory=set)
    rating: Optional[Decimal] = None
    total_reviews: Optional[int] = None
    avatar_url: Optional[str] = None

    def __post_init__(self):
        super().__post_init__()
        if isinstance(self.role, str) and not isinstance(self.role, UserRole):
            self.role = UserRole(self.role)
        self.skills = {skill.strip() for skill in (self.skills or set()) if skill and skill.strip()}
        self.validate()

    def validate(self) -> None:
        if not self.full_name or not self.full_name.strip():
            raise ValidationError("Full name is required", "full_name")
        if len(self.full_name) > 255:
            raise ValidationError("Full name too long (max 255 characters)", "full_name")
        if self.hourly_rate is not None and self.hourly_rate < 0:
            raise ValidationError("Hourly rate cannot be negative", "hourly_rate")

    @classmethod
    def create(cls, user_id: str, full_name: str, role: UserRole) -> "Profile":
        """Factory used at sign-up: the profile id is the auth principal id."""
        if not user_id:
            raise ValidationError("User ID is required", "id")
        return cls(id=user_id, full_name=full_name.strip(), role=role)

    @property
    def is_client(self) -> bool:
        return self.role == UserRole.CLIENT

    @property
    def is_freelancer(self) -> bool:
        return self.role == UserRole.FREELANCER

    @property
    def capabilities(self) -> FrozenSet[Capability]:
        return capabilities_for(self.role)

    def can(self, capability: Capability) -> bool:
        """Check whether this profile's role grants a capability."""
        return capability in self.capabilities

    def update_details(
        self,
        full_name: Optional[str] = None,
        bio: Optional[str] = None,
        avatar_url: Optional[str] = None,
        hourly_rate: Optional[Decimal] = None,
        skills: Optional[Iterable[str]] = None,
    ) -> None:
        """Apply owner-editable changes. Role and rating are never changed here."""
        if self.is_client and (hourly_rate is not None or skills is not None):
            raise ValidationError("Only freelancers can set an hourly rate or skills", "role")
        if full_name is not None:
            self.full_name = full_name.strip()
        if bio is not None:
            self.bio = bio
        if avatar_url is not None:
            self.avatar_url = avatar_url
        if hourly_rate is not None:
            self.hourly_rate = hourly_rate
        if skills is not None:
            self.skills = {skill.strip() for skill in skills if skill and skill.strip()}
        self.validate()
        self.increment_version()

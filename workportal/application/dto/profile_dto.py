"""
Profile DTOs for the application layer.
"""

from decimal import Decimal
from typing import List, Optional
from pydantic import Field, validator

from workportal.domain.models.profile import Profile, ProfileSummary, UserRole
from workportal.infrastructure.validation.validators import secure_url_validator
from .base_dto import RequestDTO, ResponseDTO, BaseDTO


class UpdateProfileRequestDTO(RequestDTO):
    """Owner-editable profile fields. Role, rating and review count are not editable."""

    full_name: Optional[str] = Field(default=None, min_length=1, max_length=200, description="Full name")
    bio: Optional[str] = Field(default=None, max_length=2000, description="Short biography")
    hourly_rate: Optional[Decimal] = Field(default=None, ge=0, description="Hourly rate (freelancers only)")
    skills: Optional[List[str]] = Field(default=None, max_length=50, description="Skills (freelancers only)")
    avatar_url: Optional[str] = Field(default=None, max_length=500, description="Avatar URL")

    @validator('avatar_url')
    def validate_avatar_url(cls, v):
        return secure_url_validator(v)

    @validator('skills')
    def normalize_skills(cls, v):
        if v is None:
            return v
        return [skill.strip() for skill in v if skill and skill.strip()]


class ProfileResponseDTO(ResponseDTO):
    """Public profile representation."""

    full_name: str
    role: UserRole
    bio: Optional[str] = None
    hourly_rate: Optional[Decimal] = None
    skills: List[str] = Field(default_factory=list)
    rating: Optional[Decimal] = None
    total_reviews: Optional[int] = None
    avatar_url: Optional[str] = None

    @classmethod
    def from_domain(cls, profile: Profile) -> "ProfileResponseDTO":
        return cls(
            id=profile.id,
            created_at=profile.created_at,
            full_name=profile.full_name,
            role=profile.role,
            bio=profile.bio,
            hourly_rate=profile.hourly_rate,
            skills=sorted(profile.skills),
            rating=profile.rating,
            total_reviews=profile.total_reviews,
            avatar_url=profile.avatar_url,
        )


class ProfileSummaryDTO(BaseDTO):
    """Name and avatar shown next to a record the profile owns."""

    full_name: str
    avatar_url: Optional[str] = None

    @classmethod
    def from_domain(cls, summary: ProfileSummary) -> "ProfileSummaryDTO":
        return cls(full_name=summary.full_name, avatar_url=summary.avatar_url)


class CapabilitiesResponseDTO(BaseDTO):
    """Capabilities granted by the caller's role, for building role-specific navigation."""

    role: UserRole
    capabilities: List[str]

    @classmethod
    def from_domain(cls, profile: Profile) -> "CapabilitiesResponseDTO":
        return cls(
            role=profile.role,
            capabilities=sorted(capability.value for capability in profile.capabilities),
        )

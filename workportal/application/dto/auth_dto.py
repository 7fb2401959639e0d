"""
Authentication DTOs for the application layer.
"""

from typing import Optional
from pydantic import EmailStr, Field, validator

from workportal.domain.models.profile import UserRole
from .base_dto import RequestDTO, BaseDTO
from .profile_dto import ProfileResponseDTO


class SignUpRequestDTO(RequestDTO):
    """New account plus the profile that goes with it."""

    email: EmailStr = Field(description="Email address")
    password: str = Field(min_length=6, max_length=128, description="Password")
    full_name: str = Field(min_length=1, max_length=200, description="Full name")
    role: UserRole = Field(description="Marketplace role")

    @validator('full_name')
    def strip_full_name(cls, v):
        v = v.strip()
        if not v:
            raise ValueError('Full name cannot be blank')
        return v


class SignInRequestDTO(RequestDTO):
    email: EmailStr = Field(description="Email address")
    password: str = Field(min_length=1, description="Password")


class ProvisionProfileRequestDTO(RequestDTO):
    """Retry path for a signed-up principal whose profile insert failed."""

    full_name: str = Field(min_length=1, max_length=200, description="Full name")
    role: UserRole = Field(description="Marketplace role")


class SessionResponseDTO(BaseDTO):
    """Tokens for the signed-in principal and its profile, when provisioned."""

    user_id: str
    email: Optional[str] = None
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    expires_at: Optional[int] = None
    token_type: str = "bearer"
    profile: Optional[ProfileResponseDTO] = None
    requires_confirmation: bool = Field(
        default=False,
        description="True when the provider did not issue tokens because the email must be confirmed first"
    )

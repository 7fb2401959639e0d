"""
Authentication use cases for the application layer.
Sign-up creates the auth principal and then its profile; the provisioning
use case is the retry path when the second step failed.
"""

import logging
from typing import Optional

from workportal.application.use_cases.base_use_case import (
    BaseUseCase,
    CommandUseCase,
)
from workportal.application.dto.auth_dto import (
    SignUpRequestDTO,
    SignInRequestDTO,
    ProvisionProfileRequestDTO,
    SessionResponseDTO,
)
from workportal.application.dto.profile_dto import ProfileResponseDTO
from workportal.domain.models.base import (
    ConflictError,
    DomainException,
    ProfileProvisioningError,
)
from workportal.domain.models.profile import Profile, UserRole
from workportal.domain.repositories.profile_repository import ProfileRepository
from workportal.domain.services.auth_service import AuthProvider, AuthSession


logger = logging.getLogger(__name__)


def provision_profile(
    profile_repository: ProfileRepository,
    user_id: str,
    full_name: str,
    role: UserRole,
) -> Profile:
    """
    Insert the profile for a principal, or return the one already there.

    Safe to repeat with the same arguments. A profile that already exists with a
    different role is a ConflictError.
    """
    existing = profile_repository.find_by_id(user_id)
    if existing is not None:
        if existing.role != role:
            raise ConflictError(
                f"A {existing.role.value} profile already exists for this account"
            )
        return existing

    profile = Profile.create(user_id, full_name, role)
    try:
        return profile_repository.create(profile)
    except ConflictError:
        # Another request provisioned it between the read and the insert.
        existing = profile_repository.find_by_id(user_id)
        if existing is not None and existing.role == role:
            return existing
        raise


def _session_response(session: AuthSession, profile: Optional[Profile]) -> SessionResponseDTO:
    return SessionResponseDTO(
        user_id=session.user_id,
        email=session.email,
        access_token=session.access_token,
        refresh_token=session.refresh_token,
        expires_at=session.expires_at,
        profile=ProfileResponseDTO.from_domain(profile) if profile else None,
        requires_confirmation=session.access_token is None,
    )


class SignUpUseCase(CommandUseCase[SignUpRequestDTO, SessionResponseDTO]):
    """Create an account and exactly one profile keyed by the new principal id."""

    def __init__(
        self,
        auth_provider: AuthProvider,
        profile_repository: ProfileRepository,
        redirect_url: Optional[str] = None
    ):
        super().__init__()
        self.auth_provider = auth_provider
        self.profile_repository = profile_repository
        self.redirect_url = redirect_url

    async def _execute_command_logic(self, request: SignUpRequestDTO, actor: Optional[Profile]) -> SessionResponseDTO:
        role = UserRole(request.role)
        session = self.auth_provider.sign_up(
            request.email,
            request.password,
            metadata={"full_name": request.full_name, "role": role.value},
            redirect_to=self.redirect_url,
        )
        logger.info(f"Created auth principal {session.user_id}")

        try:
            profile = provision_profile(
                self.profile_repository, session.user_id, request.full_name, role
            )
        except DomainException as e:
            logger.error(f"Profile provisioning failed for {session.user_id}: {e.message}")
            raise ProfileProvisioningError(session.user_id, e.message)

        return _session_response(session, profile)


class SignInUseCase(BaseUseCase[SignInRequestDTO, SessionResponseDTO]):
    """Exchange credentials for a session. The profile is attached when it exists."""

    def __init__(self, auth_provider: AuthProvider, profile_repository: ProfileRepository):
        super().__init__()
        self.auth_provider = auth_provider
        self.profile_repository = profile_repository

    async def _execute_business_logic(self, request: SignInRequestDTO, actor: Optional[Profile]) -> SessionResponseDTO:
        session = self.auth_provider.sign_in(request.email, request.password)
        profile = self.profile_repository.find_by_id(session.user_id)
        if profile is None:
            logger.warning(f"Principal {session.user_id} signed in without a provisioned profile")
        return _session_response(session, profile)


class SignOutUseCase(BaseUseCase[str, bool]):
    """Revoke the caller's session. The request is the access token."""

    def __init__(self, auth_provider: AuthProvider):
        super().__init__()
        self.auth_provider = auth_provider

    async def _execute_business_logic(self, request: str, actor: Optional[Profile]) -> bool:
        self.auth_provider.sign_out(request)
        return True


class ProvisionProfileUseCase(CommandUseCase[ProvisionProfileRequestDTO, ProfileResponseDTO]):
    """
    Retry path for a principal whose profile insert failed during sign-up.

    The principal id comes from the verified token, not from the request body,
    so this runs before any profile exists and takes the id explicitly.
    """

    def __init__(self, profile_repository: ProfileRepository, user_id: str):
        super().__init__()
        self.profile_repository = profile_repository
        self.user_id = user_id

    async def _execute_command_logic(
        self,
        request: ProvisionProfileRequestDTO,
        actor: Optional[Profile]
    ) -> ProfileResponseDTO:
        profile = provision_profile(
            self.profile_repository,
            self.user_id,
            request.full_name,
            UserRole(request.role),
        )
        logger.info(f"Profile provisioned for {self.user_id} as {profile.role.value}")
        return ProfileResponseDTO.from_domain(profile)

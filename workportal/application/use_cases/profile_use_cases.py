"""
Profile use cases for the application layer.
"""

import logging
from typing import Optional

from workportal.application.use_cases.base_use_case import (
    AuthorizedUseCase,
    CommandUseCase,
    QueryUseCase,
)
from workportal.application.dto.base_dto import to_update_dict
from workportal.application.dto.profile_dto import (
    UpdateProfileRequestDTO,
    ProfileResponseDTO,
    CapabilitiesResponseDTO,
)
from workportal.domain.models.base import EntityNotFoundError
from workportal.domain.models.profile import Profile
from workportal.domain.repositories.profile_repository import ProfileRepository


logger = logging.getLogger(__name__)


class GetProfileUseCase(AuthorizedUseCase, QueryUseCase[Optional[str], ProfileResponseDTO]):
    """Fetch a profile by id, or the caller's own profile when no id is given."""

    def __init__(self, profile_repository: ProfileRepository):
        super().__init__()
        self.profile_repository = profile_repository

    async def _execute_business_logic(self, request: Optional[str], actor: Profile) -> ProfileResponseDTO:
        if request is None or request == actor.id:
            return ProfileResponseDTO.from_domain(actor)

        profile = self.profile_repository.find_by_id(request)
        if profile is None:
            raise EntityNotFoundError("Profile", request)
        return ProfileResponseDTO.from_domain(profile)


class UpdateProfileUseCase(AuthorizedUseCase, CommandUseCase[UpdateProfileRequestDTO, ProfileResponseDTO]):
    """Owner-only update of the caller's own profile."""

    def __init__(self, profile_repository: ProfileRepository):
        super().__init__()
        self.profile_repository = profile_repository

    async def _execute_command_logic(self, request: UpdateProfileRequestDTO, actor: Profile) -> ProfileResponseDTO:
        changes = to_update_dict(request)
        actor.update_details(**changes)
        saved = self.profile_repository.update(actor)
        logger.info(f"Profile {actor.id} updated: {sorted(changes)}")
        return ProfileResponseDTO.from_domain(saved)


class GetCapabilitiesUseCase(AuthorizedUseCase, QueryUseCase[None, CapabilitiesResponseDTO]):
    """The caller's role and the capabilities it grants."""

    async def _execute_business_logic(self, request: None, actor: Profile) -> CapabilitiesResponseDTO:
        return CapabilitiesResponseDTO.from_domain(actor)

"""
Profile router.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from workportal.application.dto.profile_dto import (
    UpdateProfileRequestDTO,
    ProfileResponseDTO,
    CapabilitiesResponseDTO,
)
from workportal.application.use_cases.profile_use_cases import (
    GetProfileUseCase,
    UpdateProfileUseCase,
    GetCapabilitiesUseCase,
)
from workportal.domain.models.profile import Profile
from workportal.infrastructure.auth.dependencies import get_current_profile, get_current_user_id
from workportal.infrastructure.web.dependencies import ProfileRepo
from workportal.infrastructure.web.middleware.error_handler import unwrap_result


router = APIRouter()

CurrentProfile = Annotated[Profile, Depends(get_current_profile)]


@router.get("/me", response_model=ProfileResponseDTO)
async def get_my_profile(
    user_id: Annotated[str, Depends(get_current_user_id)],
    profile_repository: ProfileRepo
):
    """The caller's profile. 404 until sign-up has provisioned it."""
    profile = profile_repository.find_by_id(user_id)
    if profile is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Profile not found. Finish sign-up with POST /auth/profile.",
        )
    return unwrap_result(await GetProfileUseCase(profile_repository).execute(None, profile))


@router.patch("/me", response_model=ProfileResponseDTO)
async def update_my_profile(
    request: UpdateProfileRequestDTO,
    actor: CurrentProfile,
    profile_repository: ProfileRepo
):
    """
    Update the caller's own profile.

    - **full_name**, **bio**, **hourly_rate**, **skills**, **avatar_url**
    """
    return unwrap_result(await UpdateProfileUseCase(profile_repository).execute(request, actor))


@router.get("/me/capabilities", response_model=CapabilitiesResponseDTO)
async def get_my_capabilities(actor: CurrentProfile):
    """The caller's role and what it allows, for building role-specific navigation."""
    return unwrap_result(await GetCapabilitiesUseCase().execute(None, actor))


@router.get("/{profile_id}", response_model=ProfileResponseDTO)
async def get_profile(profile_id: str, actor: CurrentProfile, profile_repository: ProfileRepo):
    return unwrap_result(await GetProfileUseCase(profile_repository).execute(profile_id, actor))

"""
Authentication router.
Account creation, sign-in/out and the profile provisioning retry.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status

from workportal.application.dto.auth_dto import (
    SignUpRequestDTO,
    SignInRequestDTO,
    ProvisionProfileRequestDTO,
    SessionResponseDTO,
)
from workportal.application.dto.base_dto import AckResponseDTO
from workportal.application.dto.profile_dto import ProfileResponseDTO
from workportal.application.use_cases.auth_use_cases import (
    SignUpUseCase,
    SignInUseCase,
    SignOutUseCase,
    ProvisionProfileUseCase,
)
from workportal.config import get_settings
from workportal.infrastructure.auth.dependencies import get_access_token, get_current_user_id
from workportal.infrastructure.web.dependencies import Auth, ProfileRepo
from workportal.infrastructure.web.middleware.error_handler import unwrap_result


logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=SessionResponseDTO)
async def register(request: SignUpRequestDTO, auth_provider: Auth, profile_repository: ProfileRepo):
    """
    Create an account and its profile.

    When sign-up succeeds but the profile cannot be saved the response is 502;
    retry with POST /auth/profile using the returned session.
    """
    use_case = SignUpUseCase(auth_provider, profile_repository, get_settings().signup_redirect_url)
    return unwrap_result(await use_case.execute(request))


@router.post("/login", response_model=SessionResponseDTO)
async def login(request: SignInRequestDTO, auth_provider: Auth, profile_repository: ProfileRepo):
    use_case = SignInUseCase(auth_provider, profile_repository)
    return unwrap_result(await use_case.execute(request))


@router.post("/logout", response_model=AckResponseDTO)
async def logout(token: Annotated[str, Depends(get_access_token)], auth_provider: Auth):
    unwrap_result(await SignOutUseCase(auth_provider).execute(token))
    return AckResponseDTO(message="Signed out")


@router.post("/profile", status_code=status.HTTP_201_CREATED, response_model=ProfileResponseDTO)
async def provision_profile(
    request: ProvisionProfileRequestDTO,
    user_id: Annotated[str, Depends(get_current_user_id)],
    profile_repository: ProfileRepo
):
    """Create the caller's profile if sign-up could not. Repeating the call is harmless."""
    use_case = ProvisionProfileUseCase(profile_repository, user_id)
    return unwrap_result(await use_case.execute(request))

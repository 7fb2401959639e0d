"""
Authentication dependencies for FastAPI.
Turns the bearer token into a principal id and then into the caller's profile.
"""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from workportal.domain.models.base import AuthenticationError, EntityNotFoundError, ProfileNotProvisionedError
from workportal.domain.models.profile import Profile
from workportal.domain.repositories.profile_repository import ProfileRepository
from workportal.domain.services.identity_service import ProfileResolver
from workportal.infrastructure.auth.jwt_handler import JWTHandler
from workportal.infrastructure.web.dependencies import get_profile_repository


# Security scheme
security = HTTPBearer(auto_error=False)

jwt_handler = JWTHandler()


def get_jwt_handler() -> JWTHandler:
    """Dependency to get JWT handler."""
    return jwt_handler


async def get_access_token(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(security)]
) -> str:
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return credentials.credentials


async def get_current_user_id(
    token: Annotated[str, Depends(get_access_token)],
    handler: Annotated[JWTHandler, Depends(get_jwt_handler)]
) -> str:
    """
    FastAPI dependency to get current authenticated user ID.

    Raises:
        HTTPException: 401 if the token is missing or invalid
    """
    try:
        return handler.get_user_id(token)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        )


async def get_current_profile(
    user_id: Annotated[str, Depends(get_current_user_id)],
    profile_repository: Annotated[ProfileRepository, Depends(get_profile_repository)]
) -> Profile:
    """
    The caller's profile.

    Raises:
        ProfileNotProvisionedError: signed in, but sign-up never created the profile row
    """
    try:
        return ProfileResolver(profile_repository).resolve(user_id)
    except EntityNotFoundError:
        raise ProfileNotProvisionedError(user_id)

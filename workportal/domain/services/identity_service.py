"""
Identity service.
Resolves a signed-in principal id to its marketplace profile.
"""

import logging

from workportal.domain.models.base import EntityNotFoundError
from workportal.domain.models.profile import Profile
from workportal.domain.repositories.profile_repository import ProfileRepository


logger = logging.getLogger(__name__)


class ProfileResolver:
    """Looks up the profile for the current principal."""

    def __init__(self, profile_repository: ProfileRepository):
        self.profile_repository = profile_repository

    def resolve(self, principal_id: str) -> Profile:
        """
        Return the principal's profile.

        Raises EntityNotFoundError when the profile row does not exist yet, which
        happens between account creation and profile provisioning.
        """
        profile = self.profile_repository.find_by_id(principal_id)
        if profile is None:
            logger.info(f"Profile not provisioned yet for principal {principal_id}")
            raise EntityNotFoundError("Profile", principal_id)
        return profile

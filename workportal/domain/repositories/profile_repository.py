"""
Profile repository interface.
Defines the contract for profile persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from workportal.domain.models.profile import Profile


class ProfileRepository(ABC):
    """Repository interface for Profile aggregate."""

    @abstractmethod
    def find_by_id(self, profile_id: str) -> Optional[Profile]:
        """
        Find a profile by its ID (the auth principal id).
        Returns None if the profile has not been provisioned.
        """
        pass

    @abstractmethod
    def find_by_ids(self, profile_ids: List[str]) -> List[Profile]:
        pass

    @abstractmethod
    def create(self, profile: Profile) -> Profile:
        """
        Insert a new profile keyed by its principal id.
        Raises ConflictError if a profile with that id already exists.
        """
        pass

    @abstractmethod
    def update(self, profile: Profile) -> Profile:
        """Persist owner-editable profile fields."""
        pass

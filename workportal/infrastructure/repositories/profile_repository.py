"""
Profile repository implementations.
"""

from typing import List, Optional

from workportal.domain.models.base import EntityNotFoundError
from workportal.domain.models.profile import Profile
from workportal.domain.repositories.profile_repository import ProfileRepository
from workportal.infrastructure.db.models import ProfileModel
from workportal.infrastructure.mappers.profile_mapper import ProfileMapper
from .base import SQLAlchemyRepository, SupabaseRepository


class SQLAlchemyProfileRepository(SQLAlchemyRepository, ProfileRepository):
    """SQLAlchemy implementation of profile repository."""

    entity_name = "Profile"

    def __init__(self, session):
        super().__init__(session)
        self.mapper = ProfileMapper()

    def find_by_id(self, profile_id: str) -> Optional[Profile]:
        with self._translate_errors():
            model = self.session.query(ProfileModel).filter_by(id=profile_id).first()
        return self.mapper.model_to_domain(model) if model else None

    def find_by_ids(self, profile_ids: List[str]) -> List[Profile]:
        if not profile_ids:
            return []
        with self._translate_errors():
            models = self.session.query(ProfileModel).filter(ProfileModel.id.in_(profile_ids)).all()
        return [self.mapper.model_to_domain(m) for m in models]

    def create(self, profile: Profile) -> Profile:
        self._insert(self.mapper.domain_to_model(profile))
        return profile

    def update(self, profile: Profile) -> Profile:
        with self._translate_errors():
            model = self.session.query(ProfileModel).filter_by(id=profile.id).first()
            if not model:
                raise EntityNotFoundError("Profile", profile.id)
            model.full_name = profile.full_name
            model.bio = profile.bio
            model.hourly_rate = profile.hourly_rate
            model.skills = sorted(profile.skills)
            model.avatar_url = profile.avatar_url
            model.updated_at = profile.updated_at
            self.session.flush()
        return profile


class SupabaseProfileRepository(SupabaseRepository, ProfileRepository):
    """PostgREST implementation of profile repository."""

    table_name = "profiles"
    entity_name = "Profile"

    def __init__(self, client):
        super().__init__(client)
        self.mapper = ProfileMapper()

    def find_by_id(self, profile_id: str) -> Optional[Profile]:
        response = self._execute(self._table().select("*").eq("id", profile_id).limit(1))
        row = self._single(response)
        return self.mapper.row_to_domain(row) if row else None

    def find_by_ids(self, profile_ids: List[str]) -> List[Profile]:
        if not profile_ids:
            return []
        response = self._execute(self._table().select("*").in_("id", list(profile_ids)))
        return [self.mapper.row_to_domain(row) for row in response.data or []]

    def create(self, profile: Profile) -> Profile:
        response = self._execute(self._table().insert(self.mapper.domain_to_row(profile)))
        row = self._single(response)
        return self.mapper.row_to_domain(row) if row else profile

    def update(self, profile: Profile) -> Profile:
        response = self._execute(
            self._table().update(self.mapper.editable_fields(profile)).eq("id", profile.id)
        )
        row = self._single(response)
        if row is None:
            raise EntityNotFoundError("Profile", profile.id)
        return self.mapper.row_to_domain(row)

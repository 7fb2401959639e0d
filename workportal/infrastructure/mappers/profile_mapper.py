"""
Profile mapper for converting between domain entities and storage records.
"""

from typing import Any, Dict

from workportal.domain.models.profile import Profile, UserRole
from workportal.infrastructure.db.models import ProfileModel
from .base_mapper import to_utc, to_decimal, money, iso


class ProfileMapper:
    """Maps between Profile and ProfileModel / `profiles` rows."""

    def domain_to_model(self, profile: Profile) -> ProfileModel:
        return ProfileModel(
            id=profile.id,
            full_name=profile.full_name,
            role=profile.role.value,
            bio=profile.bio,
            hourly_rate=profile.hourly_rate,
            skills=sorted(profile.skills),
            rating=profile.rating,
            total_reviews=profile.total_reviews,
            avatar_url=profile.avatar_url,
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )

    def model_to_domain(self, model: ProfileModel) -> Profile:
        return Profile(
            id=model.id,
            full_name=model.full_name,
            role=UserRole(model.role),
            bio=model.bio,
            hourly_rate=to_decimal(model.hourly_rate),
            skills=set(model.skills or []),
            rating=to_decimal(model.rating),
            total_reviews=model.total_reviews,
            avatar_url=model.avatar_url,
            created_at=to_utc(model.created_at),
            updated_at=to_utc(model.updated_at),
        )

    def row_to_domain(self, row: Dict[str, Any]) -> Profile:
        return Profile(
            id=row["id"],
            full_name=row.get("full_name") or "",
            role=UserRole(row["role"]),
            bio=row.get("bio"),
            hourly_rate=to_decimal(row.get("hourly_rate")),
            skills=set(row.get("skills") or []),
            rating=to_decimal(row.get("rating")),
            total_reviews=row.get("total_reviews"),
            avatar_url=row.get("avatar_url"),
            created_at=to_utc(row.get("created_at")),
            updated_at=to_utc(row.get("updated_at")),
        )

    def domain_to_row(self, profile: Profile) -> Dict[str, Any]:
        """Insert payload. Rating and review count are left to their column defaults."""
        return {
            "id": profile.id,
            "full_name": profile.full_name,
            "role": profile.role.value,
            "bio": profile.bio,
            "hourly_rate": money(profile.hourly_rate),
            "skills": sorted(profile.skills),
            "avatar_url": profile.avatar_url,
            "created_at": iso(profile.created_at),
            "updated_at": iso(profile.updated_at),
        }

    def editable_fields(self, profile: Profile) -> Dict[str, Any]:
        """Columns an owner may change."""
        return {
            "full_name": profile.full_name,
            "bio": profile.bio,
            "hourly_rate": money(profile.hourly_rate),
            "skills": sorted(profile.skills),
            "avatar_url": profile.avatar_url,
            "updated_at": iso(profile.updated_at),
        }

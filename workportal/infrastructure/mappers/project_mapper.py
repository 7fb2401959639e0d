"""
Project mapper for converting between domain entities and storage records.
"""

from typing import Any, Dict, Optional

from workportal.domain.models.profile import ProfileSummary
from workportal.domain.models.project import Project, ProjectStatus
from workportal.infrastructure.db.models import ProjectModel
from .base_mapper import to_utc, to_date, to_decimal, money, iso


class ProjectMapper:
    """Maps between Project and ProjectModel / `projects` rows."""

    @staticmethod
    def _summary(source: Any) -> Optional[ProfileSummary]:
        """Client summary from a loaded ProfileModel or an embedded `client` object."""
        if not source:
            return None
        if isinstance(source, dict):
            return ProfileSummary(full_name=source.get("full_name") or "", avatar_url=source.get("avatar_url"))
        return ProfileSummary(full_name=source.full_name, avatar_url=source.avatar_url)

    def domain_to_model(self, project: Project) -> ProjectModel:
        return ProjectModel(
            id=project.id,
            client_id=project.client_id,
            freelancer_id=project.freelancer_id,
            title=project.title,
            description=project.description,
            budget=project.budget,
            deadline=project.deadline,
            status=project.status.value,
            created_at=project.created_at,
            updated_at=project.updated_at,
        )

    def model_to_domain(self, model: ProjectModel) -> Project:
        return Project(
            id=model.id,
            client_id=model.client_id,
            freelancer_id=model.freelancer_id,
            title=model.title,
            description=model.description,
            budget=to_decimal(model.budget),
            deadline=to_date(model.deadline),
            status=ProjectStatus(model.status),
            created_at=to_utc(model.created_at),
            updated_at=to_utc(model.updated_at),
            client=self._summary(model.client),
        )

    def row_to_domain(self, row: Dict[str, Any]) -> Project:
        return Project(
            id=row["id"],
            client_id=row["client_id"],
            freelancer_id=row.get("freelancer_id"),
            title=row.get("title") or "",
            description=row.get("description") or "",
            budget=to_decimal(row.get("budget")),
            deadline=to_date(row.get("deadline")),
            status=ProjectStatus(row.get("status") or ProjectStatus.OPEN.value),
            created_at=to_utc(row.get("created_at")),
            updated_at=to_utc(row.get("updated_at")),
            client=self._summary(row.get("client")),
        )

    def domain_to_row(self, project: Project) -> Dict[str, Any]:
        return {
            "id": project.id,
            "client_id": project.client_id,
            "freelancer_id": project.freelancer_id,
            "title": project.title,
            "description": project.description,
            "budget": money(project.budget),
            "deadline": iso(project.deadline),
            "status": project.status.value,
            "created_at": iso(project.created_at),
            "updated_at": iso(project.updated_at),
        }

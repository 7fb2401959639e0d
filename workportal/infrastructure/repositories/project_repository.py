"""
Project repository implementations.

Status and assignment changes are single conditional UPDATEs. The number of rows
they touched tells the caller whether the expected state still held.
"""

import logging
from typing import Dict, List, Optional

from sqlalchemy import false, func, or_
from sqlalchemy.orm import joinedload

from workportal.domain.models.base import utcnow
from workportal.domain.models.project import Project, ProjectStatus
from workportal.domain.repositories.project_repository import ProjectRepository
from workportal.domain.services.visibility_service import ProjectScope
from workportal.infrastructure.db.models import ProjectModel
from workportal.infrastructure.mappers.base_mapper import iso
from workportal.infrastructure.mappers.project_mapper import ProjectMapper
from .base import SQLAlchemyRepository, SupabaseRepository


logger = logging.getLogger(__name__)

# Every read embeds the posting client's public profile
PROJECT_COLUMNS = "*, client:profiles!client_id(full_name, avatar_url)"


def scope_clause(scope: ProjectScope):
    """SQL predicate matching any part of the scope; matches nothing for an empty scope."""
    clauses = []
    if scope.client_id is not None:
        clauses.append(ProjectModel.client_id == scope.client_id)
    if scope.include_open:
        clauses.append(ProjectModel.status == ProjectStatus.OPEN.value)
    if scope.freelancer_id is not None:
        clauses.append(ProjectModel.freelancer_id == scope.freelancer_id)
    return or_(*clauses) if clauses else false()


class SQLAlchemyProjectRepository(SQLAlchemyRepository, ProjectRepository):
    """SQLAlchemy implementation of project repository."""

    entity_name = "Project"

    def __init__(self, session):
        super().__init__(session)
        self.mapper = ProjectMapper()

    def create(self, project: Project) -> Project:
        self._insert(self.mapper.domain_to_model(project))
        return project

    def find_by_id(self, project_id: str) -> Optional[Project]:
        with self._translate_errors():
            model = (
                self.session.query(ProjectModel)
                .options(joinedload(ProjectModel.client))
                .filter_by(id=project_id)
                .first()
            )
        return self.mapper.model_to_domain(model) if model else None

    def find_in_scope(
        self,
        scope: ProjectScope,
        status: Optional[ProjectStatus] = None,
        limit: Optional[int] = None,
        offset: int = 0
    ) -> List[Project]:
        query = (
            self.session.query(ProjectModel)
            .options(joinedload(ProjectModel.client))
            .filter(scope_clause(scope))
        )
        if status is not None:
            query = query.filter(ProjectModel.status == status.value)
        query = query.order_by(ProjectModel.created_at.desc(), ProjectModel.id)

        if offset:
            query = query.offset(offset)
        if limit:
            query = query.limit(limit)

        with self._translate_errors():
            models = query.all()
        return [self.mapper.model_to_domain(model) for model in models]

    def count_by_status(self, scope: ProjectScope) -> Dict[ProjectStatus, int]:
        with self._translate_errors():
            rows = (
                self.session.query(ProjectModel.status, func.count(ProjectModel.id))
                .filter(scope_clause(scope))
                .group_by(ProjectModel.status)
                .all()
            )
        return {ProjectStatus(status): count for status, count in rows}

    def claim(self, project_id: str, freelancer_id: str) -> bool:
        with self._translate_errors():
            updated = (
                self.session.query(ProjectModel)
                .filter(
                    ProjectModel.id == project_id,
                    ProjectModel.status == ProjectStatus.OPEN.value,
                    ProjectModel.freelancer_id.is_(None),
                )
                .update(
                    {
                        ProjectModel.freelancer_id: freelancer_id,
                        ProjectModel.status: ProjectStatus.IN_PROGRESS.value,
                        ProjectModel.updated_at: utcnow(),
                    },
                    synchronize_session="fetch",
                )
            )
        logger.debug(f"claim({project_id}, {freelancer_id}) affected {updated} row(s)")
        return updated == 1

    def compare_and_set_status(
        self,
        project_id: str,
        expected_status: ProjectStatus,
        new_status: ProjectStatus,
        expected_freelancer_id: Optional[str] = None
    ) -> bool:
        query = self.session.query(ProjectModel).filter(
            ProjectModel.id == project_id,
            ProjectModel.status == expected_status.value,
        )
        if expected_freelancer_id is not None:
            query = query.filter(ProjectModel.freelancer_id == expected_freelancer_id)

        with self._translate_errors():
            updated = query.update(
                {ProjectModel.status: new_status.value, ProjectModel.updated_at: utcnow()},
                synchronize_session="fetch",
            )
        logger.debug(
            f"compare_and_set_status({project_id}, {expected_status.value} -> {new_status.value}) "
            f"affected {updated} row(s)"
        )
        return updated == 1


class SupabaseProjectRepository(SupabaseRepository, ProjectRepository):
    """PostgREST implementation of project repository."""

    table_name = "projects"
    entity_name = "Project"

    def __init__(self, client):
        super().__init__(client)
        self.mapper = ProjectMapper()

    @staticmethod
    def scope_predicate(scope: ProjectScope) -> Optional[str]:
        """PostgREST `or` filter for a scope, or None when the scope matches nothing."""
        parts = []
        if scope.client_id is not None:
            parts.append(f"client_id.eq.{scope.client_id}")
        if scope.include_open:
            parts.append(f"status.eq.{ProjectStatus.OPEN.value}")
        if scope.freelancer_id is not None:
            parts.append(f"freelancer_id.eq.{scope.freelancer_id}")
        return ",".join(parts) if parts else None

    def create(self, project: Project) -> Project:
        response = self._execute(self._table().insert(self.mapper.domain_to_row(project)))
        row = self._single(response)
        return self.mapper.row_to_domain(row) if row else project

    def find_by_id(self, project_id: str) -> Optional[Project]:
        response = self._execute(self._table().select(PROJECT_COLUMNS).eq("id", project_id).limit(1))
        row = self._single(response)
        return self.mapper.row_to_domain(row) if row else None

    def find_in_scope(
        self,
        scope: ProjectScope,
        status: Optional[ProjectStatus] = None,
        limit: Optional[int] = None,
        offset: int = 0
    ) -> List[Project]:
        predicate = self.scope_predicate(scope)
        if predicate is None:
            return []

        query = self._table().select(PROJECT_COLUMNS).or_(predicate)
        if status is not None:
            query = query.eq("status", status.value)
        query = query.order("created_at", desc=True)
        if limit:
            query = query.range(offset, offset + limit - 1)
        elif offset:
            query = query.offset(offset)

        response = self._execute(query)
        return [self.mapper.row_to_domain(row) for row in response.data or []]

    def count_by_status(self, scope: ProjectScope) -> Dict[ProjectStatus, int]:
        predicate = self.scope_predicate(scope)
        if predicate is None:
            return {}
        counts = {}
        for status in ProjectStatus:
            response = self._execute(
                self._table()
                .select("id", count="exact", head=True)
                .or_(predicate)
                .eq("status", status.value)
            )
            if response.count:
                counts[status] = response.count
        return counts

    def claim(self, project_id: str, freelancer_id: str) -> bool:
        response = self._execute(
            self._table()
            .update({
                "freelancer_id": freelancer_id,
                "status": ProjectStatus.IN_PROGRESS.value,
                "updated_at": iso(utcnow()),
            })
            .eq("id", project_id)
            .eq("status", ProjectStatus.OPEN.value)
            .is_("freelancer_id", "null")
        )
        updated = len(response.data or [])
        logger.debug(f"claim({project_id}, {freelancer_id}) affected {updated} row(s)")
        return updated == 1

    def compare_and_set_status(
        self,
        project_id: str,
        expected_status: ProjectStatus,
        new_status: ProjectStatus,
        expected_freelancer_id: Optional[str] = None
    ) -> bool:
        query = (
            self._table()
            .update({"status": new_status.value, "updated_at": iso(utcnow())})
            .eq("id", project_id)
            .eq("status", expected_status.value)
        )
        if expected_freelancer_id is not None:
            query = query.eq("freelancer_id", expected_freelancer_id)

        response = self._execute(query)
        return len(response.data or []) == 1

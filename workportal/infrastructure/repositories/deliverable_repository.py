"""
Deliverable repository implementations.
"""

from typing import List, Optional

from sqlalchemy import func

from workportal.domain.models.deliverable import Deliverable, DeliverableStatus
from workportal.domain.repositories.deliverable_repository import DeliverableRepository
from workportal.infrastructure.db.models import DeliverableModel
from workportal.infrastructure.mappers.deliverable_mapper import DeliverableMapper
from .base import SQLAlchemyRepository, SupabaseRepository


class SQLAlchemyDeliverableRepository(SQLAlchemyRepository, DeliverableRepository):
    """SQLAlchemy implementation of deliverable repository."""

    entity_name = "Deliverable"

    def __init__(self, session):
        super().__init__(session)
        self.mapper = DeliverableMapper()

    def create(self, deliverable: Deliverable) -> Deliverable:
        self._insert(self.mapper.domain_to_model(deliverable))
        return deliverable

    def find_by_id(self, deliverable_id: str) -> Optional[Deliverable]:
        with self._translate_errors():
            model = self.session.query(DeliverableModel).filter_by(id=deliverable_id).first()
        return self.mapper.model_to_domain(model) if model else None

    def find_by_project(self, project_id: str) -> List[Deliverable]:
        with self._translate_errors():
            models = (
                self.session.query(DeliverableModel)
                .filter(DeliverableModel.project_id == project_id)
                .order_by(DeliverableModel.version.desc(), DeliverableModel.created_at.desc())
                .all()
            )
        return [self.mapper.model_to_domain(m) for m in models]

    def latest_version(self, project_id: str, freelancer_id: str) -> int:
        with self._translate_errors():
            version = (
                self.session.query(func.max(DeliverableModel.version))
                .filter(
                    DeliverableModel.project_id == project_id,
                    DeliverableModel.freelancer_id == freelancer_id,
                )
                .scalar()
            )
        return version or 0

    def record_review(self, deliverable: Deliverable, expected_status: DeliverableStatus) -> bool:
        with self._translate_errors():
            updated = (
                self.session.query(DeliverableModel)
                .filter(
                    DeliverableModel.id == deliverable.id,
                    DeliverableModel.status == expected_status.value,
                )
                .update(
                    {
                        DeliverableModel.status: deliverable.status.value,
                        DeliverableModel.feedback: deliverable.feedback,
                        DeliverableModel.reviewed_at: deliverable.reviewed_at,
                    },
                    synchronize_session="fetch",
                )
            )
        return updated == 1


class SupabaseDeliverableRepository(SupabaseRepository, DeliverableRepository):
    """PostgREST implementation of deliverable repository."""

    table_name = "deliverables"
    entity_name = "Deliverable"

    def __init__(self, client):
        super().__init__(client)
        self.mapper = DeliverableMapper()

    def create(self, deliverable: Deliverable) -> Deliverable:
        response = self._execute(self._table().insert(self.mapper.domain_to_row(deliverable)))
        row = self._single(response)
        return self.mapper.row_to_domain(row) if row else deliverable

    def find_by_id(self, deliverable_id: str) -> Optional[Deliverable]:
        response = self._execute(self._table().select("*").eq("id", deliverable_id).limit(1))
        row = self._single(response)
        return self.mapper.row_to_domain(row) if row else None

    def find_by_project(self, project_id: str) -> List[Deliverable]:
        response = self._execute(
            self._table().select("*").eq("project_id", project_id).order("version", desc=True)
        )
        return [self.mapper.row_to_domain(row) for row in response.data or []]

    def latest_version(self, project_id: str, freelancer_id: str) -> int:
        response = self._execute(
            self._table()
            .select("version")
            .eq("project_id", project_id)
            .eq("freelancer_id", freelancer_id)
            .order("version", desc=True)
            .limit(1)
        )
        row = self._single(response)
        return int(row["version"]) if row else 0

    def record_review(self, deliverable: Deliverable, expected_status: DeliverableStatus) -> bool:
        response = self._execute(
            self._table()
            .update(self.mapper.review_fields(deliverable))
            .eq("id", deliverable.id)
            .eq("status", expected_status.value)
        )
        return len(response.data or []) == 1

"""
Deliverable mapper for converting between domain entities and storage records.
"""

from typing import Any, Dict

from workportal.domain.models.deliverable import Deliverable, DeliverableStatus
from workportal.infrastructure.db.models import DeliverableModel
from .base_mapper import to_utc, iso


class DeliverableMapper:

    def domain_to_model(self, deliverable: Deliverable) -> DeliverableModel:
        return DeliverableModel(
            id=deliverable.id,
            project_id=deliverable.project_id,
            freelancer_id=deliverable.freelancer_id,
            title=deliverable.title,
            description=deliverable.description,
            file_url=deliverable.file_url,
            version=deliverable.version,
            status=deliverable.status.value,
            submitted_at=deliverable.submitted_at,
            reviewed_at=deliverable.reviewed_at,
            feedback=deliverable.feedback,
            created_at=deliverable.created_at,
        )

    def model_to_domain(self, model: DeliverableModel) -> Deliverable:
        return Deliverable(
            id=model.id,
            project_id=model.project_id,
            freelancer_id=model.freelancer_id,
            title=model.title,
            description=model.description,
            file_url=model.file_url,
            version=model.version,
            status=DeliverableStatus(model.status),
            submitted_at=to_utc(model.submitted_at),
            reviewed_at=to_utc(model.reviewed_at),
            feedback=model.feedback,
            created_at=to_utc(model.created_at),
            updated_at=to_utc(model.reviewed_at or model.created_at),
        )

    def row_to_domain(self, row: Dict[str, Any]) -> Deliverable:
        return Deliverable(
            id=row["id"],
            project_id=row["project_id"],
            freelancer_id=row["freelancer_id"],
            title=row.get("title") or "",
            description=row.get("description"),
            file_url=row.get("file_url"),
            version=row.get("version") or 1,
            status=DeliverableStatus(row.get("status") or DeliverableStatus.PENDING.value),
            submitted_at=to_utc(row.get("submitted_at")),
            reviewed_at=to_utc(row.get("reviewed_at")),
            feedback=row.get("feedback"),
            created_at=to_utc(row.get("created_at")),
            updated_at=to_utc(row.get("reviewed_at") or row.get("created_at")),
        )

    def domain_to_row(self, deliverable: Deliverable) -> Dict[str, Any]:
        return {
            "id": deliverable.id,
            "project_id": deliverable.project_id,
            "freelancer_id": deliverable.freelancer_id,
            "title": deliverable.title,
            "description": deliverable.description,
            "file_url": deliverable.file_url,
            "version": deliverable.version,
            "status": deliverable.status.value,
            "submitted_at": iso(deliverable.submitted_at),
            "reviewed_at": iso(deliverable.reviewed_at),
            "feedback": deliverable.feedback,
            "created_at": iso(deliverable.created_at),
        }

    def review_fields(self, deliverable: Deliverable) -> Dict[str, Any]:
        return {
            "status": deliverable.status.value,
            "feedback": deliverable.feedback,
            "reviewed_at": iso(deliverable.reviewed_at),
        }

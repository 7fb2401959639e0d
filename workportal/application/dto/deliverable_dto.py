"""
Deliverable DTOs for the application layer.
"""

from typing import Optional
from datetime import datetime
from pydantic import Field, validator

from workportal.domain.models.deliverable import Deliverable, DeliverableStatus, ReviewDecision
from workportal.infrastructure.validation.validators import secure_url_validator
from .base_dto import RequestDTO, ResponseDTO
from .project_dto import ProjectResponseDTO


class SubmitDeliverableRequestDTO(RequestDTO):
    title: str = Field(min_length=1, max_length=200, description="Deliverable title")
    description: Optional[str] = Field(default=None, max_length=5000, description="What was delivered")
    file_url: Optional[str] = Field(default=None, max_length=1000, description="Link to the delivered files")

    @validator('file_url')
    def validate_file_url(cls, v):
        return secure_url_validator(v)


class ReviewDeliverableRequestDTO(RequestDTO):
    decision: ReviewDecision = Field(description="approved or revision_requested")
    feedback: Optional[str] = Field(default=None, max_length=5000, description="Feedback for the freelancer")


class DeliverableResponseDTO(ResponseDTO):
    project_id: str
    freelancer_id: str
    title: str
    description: Optional[str] = None
    file_url: Optional[str] = None
    version: int
    status: DeliverableStatus
    submitted_at: Optional[datetime] = None
    reviewed_at: Optional[datetime] = None
    feedback: Optional[str] = None

    @classmethod
    def from_domain(cls, deliverable: Deliverable) -> "DeliverableResponseDTO":
        return cls(
            id=deliverable.id,
            created_at=deliverable.created_at,
            project_id=deliverable.project_id,
            freelancer_id=deliverable.freelancer_id,
            title=deliverable.title,
            description=deliverable.description,
            file_url=deliverable.file_url,
            version=deliverable.version,
            status=deliverable.status,
            submitted_at=deliverable.submitted_at,
            reviewed_at=deliverable.reviewed_at,
            feedback=deliverable.feedback,
        )


class DeliverableWithProjectResponseDTO(DeliverableResponseDTO):
    """A deliverable together with the project state it left behind."""

    project: ProjectResponseDTO

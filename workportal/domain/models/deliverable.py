"""
Deliverable domain model.
Work submitted by the assigned freelancer for the client to review.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from workportal.domain.models.base import (
    BaseEntity,
    ValidationError,
    InvalidStateError,
    utcnow,
)


class DeliverableStatus(str, Enum):
    PENDING = "pending"
    SUBMITTED = "submitted"
    APPROVED = "approved"
    REVISION_REQUESTED = "revision_requested"


class ReviewDecision(str, Enum):
    """Outcome a client can give a submitted deliverable."""
    APPROVED = "approved"
    REVISION_REQUESTED = "revision_requested"


@dataclass
class Deliverable(BaseEntity):
    """
    A versioned piece of work. Each resubmission is a new row whose version is
    one higher than the previous submission for the same project and freelancer.
    """

    project_id: str = ""
    freelancer_id: str = ""
    title: str = ""
    description: Optional[str] = None
    file_url: Optional[str] = None
    version: int = 1
    status: DeliverableStatus = DeliverableStatus.PENDING
    submitted_at: Optional[datetime] = None
    reviewed_at: Optional[datetime] = None
    feedback: Optional[str] = None

    def __post_init__(self):
        super().__post_init__()
        if isinstance(self.status, str) and not isinstance(self.status, DeliverableStatus):
            self.status = DeliverableStatus(self.status)
        self.validate()

    def validate(self) -> None:
        if not self.project_id:
            raise ValidationError("Project ID is required", "project_id")
        if not self.freelancer_id:
            raise ValidationError("Freelancer ID is required", "freelancer_id")
        if not self.title or not self.title.strip():
            raise ValidationError("Deliverable title is required", "title")
        if self.version < 1:
            raise ValidationError("Deliverable version must be positive", "version")

    @classmethod
    def submit(
        cls,
        project_id: str,
        freelancer_id: str,
        title: str,
        version: int,
        description: Optional[str] = None,
        file_url: Optional[str] = None,
    ) -> "Deliverable":
        """Create a deliverable already in the submitted state."""
        return cls(
            project_id=project_id,
            freelancer_id=freelancer_id,
            title=title.strip() if title else title,
            description=description,
            file_url=file_url,
            version=version,
            status=DeliverableStatus.SUBMITTED,
            submitted_at=utcnow(),
        )

    def review(self, decision: ReviewDecision, feedback: Optional[str] = None) -> None:
        """Record the client's decision on a submitted deliverable."""
        if self.status != DeliverableStatus.SUBMITTED:
            raise InvalidStateError(
                f"Only submitted deliverables can be reviewed (this one is {self.status.value})"
            )
        self.status = DeliverableStatus(decision.value)
        self.feedback = feedback
        self.reviewed_at = utcnow()
        self.mark_as_updated()

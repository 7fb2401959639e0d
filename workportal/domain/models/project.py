"""
Project domain model.
A project is posted by a client, claimed by one freelancer and moves through a
fixed lifecycle:

    open -> in_progress -> in_review -> completed
    open | in_progress -> cancelled

in_review can also fall back to in_progress when the client asks for a revision.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Dict, FrozenSet, Optional

from workportal.domain.models.base import (
    AggregateRoot,
    ValidationError,
    InvalidStateError,
)
from workportal.domain.models.profile import ProfileSummary


class ProjectStatus(str, Enum):
    """Project lifecycle states."""
    OPEN = "open"
    IN_PROGRESS = "in_progress"
    IN_REVIEW = "in_review"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in (ProjectStatus.COMPLETED, ProjectStatus.CANCELLED)

    @property
    def requires_freelancer(self) -> bool:
        return self in (ProjectStatus.IN_PROGRESS, ProjectStatus.IN_REVIEW, ProjectStatus.COMPLETED)

    @property
    def is_active(self) -> bool:
        return self in (ProjectStatus.IN_PROGRESS, ProjectStatus.IN_REVIEW)


class ProjectAction(str, Enum):
    """Lifecycle commands that change a project's status."""
    APPLY = "apply"
    SUBMIT_WORK = "submit_work"
    REQUEST_REVISION = "request_revision"
    COMPLETE = "complete"
    CANCEL = "cancel"


@dataclass(frozen=True)
class StatusTransition:
    """One edge of the lifecycle graph."""

    action: ProjectAction
    sources: FrozenSet[ProjectStatus]
    target: ProjectStatus

    def allows(self, status: ProjectStatus) -> bool:
        return status in self.sources


TRANSITIONS: Dict[ProjectAction, StatusTransition] = {
    ProjectAction.APPLY: StatusTransition(
        ProjectAction.APPLY,
        frozenset({ProjectStatus.OPEN}),
        ProjectStatus.IN_PROGRESS,
    ),
    ProjectAction.SUBMIT_WORK: StatusTransition(
        ProjectAction.SUBMIT_WORK,
        frozenset({ProjectStatus.IN_PROGRESS}),
        ProjectStatus.IN_REVIEW,
    ),
    ProjectAction.REQUEST_REVISION: StatusTransition(
        ProjectAction.REQUEST_REVISION,
        frozenset({ProjectStatus.IN_REVIEW}),
        ProjectStatus.IN_PROGRESS,
    ),
    ProjectAction.COMPLETE: StatusTransition(
        ProjectAction.COMPLETE,
        frozenset({ProjectStatus.IN_REVIEW}),
        ProjectStatus.COMPLETED,
    ),
    ProjectAction.CANCEL: StatusTransition(
        ProjectAction.CANCEL,
        frozenset({ProjectStatus.OPEN, ProjectStatus.IN_PROGRESS}),
        ProjectStatus.CANCELLED,
    ),
}


@dataclass
class Project(AggregateRoot):
    """
    Project aggregate root.

    `status` and `freelancer_id` only change through the lifecycle methods below.
    Persisting those changes is the repository's job and is always done as a
    compare-and-set against the status the transition started from.
    """

    client_id: str = ""
    title: str = ""
    description: str = ""
    budget: Optional[Decimal] = None
    deadline: Optional[date] = None
    freelancer_id: Optional[str] = None
    status: ProjectStatus = ProjectStatus.OPEN
    client: Optional[ProfileSummary] = field(default=None, compare=False)

    def __post_init__(self):
        super().__post_init__()
        if isinstance(self.status, str) and not isinstance(self.status, ProjectStatus):
            self.status = ProjectStatus(self.status)
        self.validate()

    def validate(self) -> None:
        if not self.client_id or not self.client_id.strip():
            raise ValidationError("Client ID is required", "client_id")
        if not self.title or not self.title.strip():
            raise ValidationError("Project title is required", "title")
        if len(self.title) > 200:
            raise ValidationError("Project title too long (max 200 characters)", "title")
        if not self.description or not self.description.strip():
            raise ValidationError("Project description is required", "description")
        if self.budget is not None and self.budget < 0:
            raise ValidationError("Budget cannot be negative", "budget")
        if self.status == ProjectStatus.OPEN and self.freelancer_id is not None:
            raise ValidationError("An open project cannot have an assigned freelancer", "freelancer_id")
        if self.status.requires_freelancer and self.freelancer_id is None:
            raise ValidationError(
                f"A project in status '{self.status.value}' must have an assigned freelancer",
                "freelancer_id"
            )

    @classmethod
    def create(
        cls,
        client_id: str,
        title: str,
        description: str,
        budget: Optional[Decimal] = None,
        deadline: Optional[date] = None,
    ) -> "Project":
        """Factory method for a newly posted project. Always starts open and unassigned."""
        return cls(
            client_id=client_id,
            title=title.strip() if title else title,
            description=description.strip() if description else description,
            budget=budget,
            deadline=deadline,
        )

    # Participants

    def is_owned_by(self, profile_id: str) -> bool:
        return self.client_id == profile_id

    def is_assigned_to(self, profile_id: str) -> bool:
        return self.freelancer_id is not None and self.freelancer_id == profile_id

    def is_participant(self, profile_id: str) -> bool:
        """Client and assigned freelancer are the only participants."""
        return self.is_owned_by(profile_id) or self.is_assigned_to(profile_id)

    # Lifecycle

    def transition_for(self, action: ProjectAction) -> StatusTransition:
        """
        Return the transition for an action, or raise InvalidStateError if the
        current status does not permit it.
        """
        if self.status.is_terminal:
            raise InvalidStateError(
                f"Project is {self.status.value}; no further changes are allowed"
            )
        transition = TRANSITIONS[action]
        if not transition.allows(self.status):
            raise InvalidStateError(
                f"Cannot {action.value.replace('_', ' ')} a project that is "
                f"{self.status.value.replace('_', ' ')}"
            )
        return transition

    def assign(self, freelancer_id: str) -> None:
        """open -> in_progress, claiming the project for a freelancer."""
        if self.freelancer_id is not None:
            raise InvalidStateError("Project already has an assigned freelancer")
        transition = self.transition_for(ProjectAction.APPLY)
        self.freelancer_id = freelancer_id
        self._move_to(transition)

    def submit_for_review(self) -> None:
        self._move_to(self.transition_for(ProjectAction.SUBMIT_WORK))

    def request_revision(self) -> None:
        self._move_to(self.transition_for(ProjectAction.REQUEST_REVISION))

    def complete(self) -> None:
        self._move_to(self.transition_for(ProjectAction.COMPLETE))

    def cancel(self) -> None:
        self._move_to(self.transition_for(ProjectAction.CANCEL))

    def _move_to(self, transition: StatusTransition) -> None:
        self.status = transition.target
        self.increment_version()

    @property
    def accepts_invoices(self) -> bool:
        return self.status == ProjectStatus.COMPLETED and self.freelancer_id is not None

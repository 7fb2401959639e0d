"""
Deliverable use cases for the application layer.
Submitting work moves the project into review; reviewing it either completes
the project or sends it back for revision.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from workportal.application.use_cases.base_use_case import (
    AuthorizedUseCase,
    CommandUseCase,
    QueryUseCase,
)
from workportal.application.use_cases.project_use_cases import load_project, project_response
from workportal.application.dto.deliverable_dto import (
    SubmitDeliverableRequestDTO,
    ReviewDeliverableRequestDTO,
    DeliverableResponseDTO,
    DeliverableWithProjectResponseDTO,
)
from workportal.domain.events.base import EventDispatcher
from workportal.domain.events.deliverable_events import DeliverableSubmitted, DeliverableReviewed
from workportal.domain.models.base import ConflictError, EntityNotFoundError, InvalidStateError
from workportal.domain.models.deliverable import Deliverable, DeliverableStatus, ReviewDecision
from workportal.domain.models.profile import Profile
from workportal.domain.models.project import ProjectAction, ProjectStatus
from workportal.domain.repositories.deliverable_repository import DeliverableRepository
from workportal.domain.repositories.project_repository import ProjectRepository
from workportal.domain.services.lifecycle_service import ProjectLifecycleService
from workportal.domain.services.visibility_service import VisibilityService


logger = logging.getLogger(__name__)


@dataclass
class SubmitDeliverableCommand:
    project_id: str
    data: SubmitDeliverableRequestDTO


@dataclass
class ReviewDeliverableCommand:
    deliverable_id: str
    data: ReviewDeliverableRequestDTO


def _with_project(deliverable: Deliverable, project_dto) -> DeliverableWithProjectResponseDTO:
    return DeliverableWithProjectResponseDTO(
        **DeliverableResponseDTO.from_domain(deliverable).model_dump(),
        project=project_dto,
    )


class SubmitDeliverableUseCase(
    AuthorizedUseCase,
    CommandUseCase[SubmitDeliverableCommand, DeliverableWithProjectResponseDTO]
):
    """
    The assigned freelancer submits work: in_progress -> in_review.

    The project status is claimed first with a guarded update. If recording the
    deliverable then fails, the status is put back with the reverse guarded update.
    """

    def __init__(
        self,
        project_repository: ProjectRepository,
        deliverable_repository: DeliverableRepository,
        event_dispatcher: Optional[EventDispatcher] = None
    ):
        super().__init__(event_dispatcher)
        self.project_repository = project_repository
        self.deliverable_repository = deliverable_repository
        self.lifecycle = ProjectLifecycleService()

    async def _execute_command_logic(
        self,
        request: SubmitDeliverableCommand,
        actor: Profile
    ) -> DeliverableWithProjectResponseDTO:
        project = load_project(self.project_repository, request.project_id)
        transition = self.lifecycle.authorize(actor, project, ProjectAction.SUBMIT_WORK)

        version = self.deliverable_repository.latest_version(project.id, actor.id) + 1

        moved = self.project_repository.compare_and_set_status(
            project.id,
            expected_status=ProjectStatus.IN_PROGRESS,
            new_status=transition.target,
            expected_freelancer_id=actor.id,
        )
        if not moved:
            raise ConflictError("The project changed while the work was being submitted; reload and try again")

        deliverable = Deliverable.submit(
            project_id=project.id,
            freelancer_id=actor.id,
            title=request.data.title,
            version=version,
            description=request.data.description,
            file_url=request.data.file_url,
        )
        deliverable.ensure_id()

        try:
            saved = self.deliverable_repository.create(deliverable)
        except Exception:
            logger.error(f"Recording deliverable for project {project.id} failed; restoring in_progress")
            self.project_repository.compare_and_set_status(
                project.id,
                expected_status=transition.target,
                new_status=ProjectStatus.IN_PROGRESS,
                expected_freelancer_id=actor.id,
            )
            raise

        project.submit_for_review()
        logger.info(f"Deliverable v{saved.version} submitted for project {project.id}")

        self._record(DeliverableSubmitted(
            deliverable_id=saved.id,
            project_id=project.id,
            project_title=project.title,
            client_id=project.client_id,
            freelancer_id=actor.id,
            freelancer_name=actor.full_name,
            deliverable_version=saved.version,
        ))

        return _with_project(saved, project_response(project, actor, self.lifecycle))


class ReviewDeliverableUseCase(
    AuthorizedUseCase,
    CommandUseCase[ReviewDeliverableCommand, DeliverableWithProjectResponseDTO]
):
    """
    The owning client reviews a submitted deliverable.

    approved: in_review -> completed. revision_requested: in_review -> in_progress,
    after which the freelancer can resubmit with the next version.
    """

    def __init__(
        self,
        project_repository: ProjectRepository,
        deliverable_repository: DeliverableRepository,
        event_dispatcher: Optional[EventDispatcher] = None
    ):
        super().__init__(event_dispatcher)
        self.project_repository = project_repository
        self.deliverable_repository = deliverable_repository
        self.lifecycle = ProjectLifecycleService()

    async def _execute_command_logic(
        self,
        request: ReviewDeliverableCommand,
        actor: Profile
    ) -> DeliverableWithProjectResponseDTO:
        deliverable = self.deliverable_repository.find_by_id(request.deliverable_id)
        if deliverable is None:
            raise EntityNotFoundError("Deliverable", request.deliverable_id)
        project = load_project(self.project_repository, deliverable.project_id)

        decision = ReviewDecision(request.data.decision)
        action = ProjectAction.COMPLETE if decision == ReviewDecision.APPROVED else ProjectAction.REQUEST_REVISION
        transition = self.lifecycle.authorize(actor, project, action)

        if not project.is_assigned_to(deliverable.freelancer_id):
            raise InvalidStateError("This deliverable is not from the project's assigned freelancer")

        deliverable.review(decision, request.data.feedback)

        moved = self.project_repository.compare_and_set_status(
            project.id,
            expected_status=ProjectStatus.IN_REVIEW,
            new_status=transition.target,
        )
        if not moved:
            raise ConflictError("The project changed while the review was being saved; reload and try again")

        if not self.deliverable_repository.record_review(deliverable, expected_status=DeliverableStatus.SUBMITTED):
            self.project_repository.compare_and_set_status(
                project.id,
                expected_status=transition.target,
                new_status=ProjectStatus.IN_REVIEW,
            )
            raise ConflictError("This deliverable was reviewed by another request")

        if action == ProjectAction.COMPLETE:
            project.complete()
        else:
            project.request_revision()
        logger.info(f"Deliverable {deliverable.id} {decision.value}; project {project.id} is now {project.status.value}")

        self._record(DeliverableReviewed(
            deliverable_id=deliverable.id,
            project_id=project.id,
            project_title=project.title,
            freelancer_id=deliverable.freelancer_id,
            decision=decision.value,
            feedback=deliverable.feedback,
        ))

        return _with_project(deliverable, project_response(project, actor, self.lifecycle))


class ListDeliverablesUseCase(AuthorizedUseCase, QueryUseCase[str, List[DeliverableResponseDTO]]):
    """Deliverables of a project, newest version first. Participants only."""

    def __init__(self, project_repository: ProjectRepository, deliverable_repository: DeliverableRepository):
        super().__init__()
        self.project_repository = project_repository
        self.deliverable_repository = deliverable_repository
        self.visibility = VisibilityService()

    async def _execute_business_logic(self, request: str, actor: Profile) -> List[DeliverableResponseDTO]:
        project = load_project(self.project_repository, request)
        self.visibility.require_participant(actor, project)
        return [
            DeliverableResponseDTO.from_domain(d)
            for d in self.deliverable_repository.find_by_project(project.id)
        ]

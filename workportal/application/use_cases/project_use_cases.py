"""
Project use cases for the application layer.
Implements posting, browsing and the apply/cancel lifecycle commands.
"""

import logging
from typing import Optional

from workportal.application.use_cases.base_use_case import (
    AuthorizedUseCase,
    CommandUseCase,
    QueryUseCase,
    PaginatedQueryUseCase,
)
from workportal.application.dto.project_dto import (
    CreateProjectRequestDTO,
    ListProjectsRequestDTO,
    ProjectResponseDTO,
    ProjectListResponseDTO,
)
from workportal.domain.events.base import EventDispatcher
from workportal.domain.events.project_events import ProjectApplied, ProjectCancelled
from workportal.domain.models.base import ConflictError, EntityNotFoundError
from workportal.domain.models.profile import Profile, ProfileSummary
from workportal.domain.models.project import Project, ProjectAction, ProjectStatus
from workportal.domain.repositories.project_repository import ProjectRepository
from workportal.domain.services.lifecycle_service import ProjectLifecycleService
from workportal.domain.services.visibility_service import VisibilityService


logger = logging.getLogger(__name__)


def load_project(project_repository: ProjectRepository, project_id: str) -> Project:
    project = project_repository.find_by_id(project_id)
    if project is None:
        raise EntityNotFoundError("Project", project_id)
    return project


def project_response(
    project: Project,
    actor: Profile,
    lifecycle: Optional[ProjectLifecycleService] = None
) -> ProjectResponseDTO:
    """Project DTO annotated with the actions the actor can take next."""
    lifecycle = lifecycle or ProjectLifecycleService()
    return ProjectResponseDTO.from_domain(project, lifecycle.available_actions(actor, project))


class CreateProjectUseCase(AuthorizedUseCase, CommandUseCase[CreateProjectRequestDTO, ProjectResponseDTO]):
    """Use case for posting a new project. Clients only."""

    def __init__(self, project_repository: ProjectRepository):
        super().__init__()
        self.project_repository = project_repository
        self.lifecycle = ProjectLifecycleService()

    async def _check_authorization(self, request: CreateProjectRequestDTO, actor: Profile) -> None:
        self.lifecycle.ensure_can_post(actor)

    async def _execute_command_logic(self, request: CreateProjectRequestDTO, actor: Profile) -> ProjectResponseDTO:
        project = Project.create(
            client_id=actor.id,
            title=request.title,
            description=request.description,
            budget=request.budget,
            deadline=request.deadline,
        )
        project.ensure_id()

        saved = self.project_repository.create(project)
        if saved.client is None:
            saved.client = ProfileSummary(full_name=actor.full_name, avatar_url=actor.avatar_url)
        logger.info(f"Project {saved.id} posted by client {actor.id}")

        return project_response(saved, actor, self.lifecycle)


class ListProjectsUseCase(AuthorizedUseCase, PaginatedQueryUseCase[ListProjectsRequestDTO, ProjectListResponseDTO]):
    """
    Projects visible to the caller, newest first.
    Clients see their own projects; freelancers see open projects plus their assignments.
    """

    def __init__(self, project_repository: ProjectRepository, default_page_size: int = 50, max_page_size: int = 100):
        super().__init__(default_page_size=default_page_size, max_page_size=max_page_size)
        self.project_repository = project_repository
        self.visibility = VisibilityService()
        self.lifecycle = ProjectLifecycleService()

    async def _execute_business_logic(self, request: ListProjectsRequestDTO, actor: Profile) -> ProjectListResponseDTO:
        scope = self.visibility.project_scope(actor)
        status = ProjectStatus(request.status) if request.status else None
        limit = self.page_size(request)

        projects = self.project_repository.find_in_scope(
            scope, status=status, limit=limit, offset=request.offset
        )
        counts = self.project_repository.count_by_status(scope)
        total = counts.get(status, 0) if status else sum(counts.values())

        return ProjectListResponseDTO(
            projects=[project_response(p, actor, self.lifecycle) for p in projects],
            total=total,
            limit=limit,
            offset=request.offset,
        )


class GetProjectUseCase(AuthorizedUseCase, QueryUseCase[str, ProjectResponseDTO]):
    """Direct project fetch. Projects outside the caller's scope are Forbidden."""

    def __init__(self, project_repository: ProjectRepository):
        super().__init__()
        self.project_repository = project_repository
        self.visibility = VisibilityService()
        self.lifecycle = ProjectLifecycleService()

    async def _execute_business_logic(self, request: str, actor: Profile) -> ProjectResponseDTO:
        project = load_project(self.project_repository, request)
        self.visibility.require_project_visible(actor, project)
        return project_response(project, actor, self.lifecycle)


class ApplyToProjectUseCase(AuthorizedUseCase, CommandUseCase[str, ProjectResponseDTO]):
    """
    A freelancer claims an open project.

    The claim is a single guarded update; when it changes no row another
    freelancer got there first and the caller receives ConflictError.
    """

    def __init__(self, project_repository: ProjectRepository, event_dispatcher: Optional[EventDispatcher] = None):
        super().__init__(event_dispatcher)
        self.project_repository = project_repository
        self.lifecycle = ProjectLifecycleService()

    async def _execute_command_logic(self, request: str, actor: Profile) -> ProjectResponseDTO:
        project = load_project(self.project_repository, request)
        self.lifecycle.authorize(actor, project, ProjectAction.APPLY)

        if not self.project_repository.claim(project.id, actor.id):
            logger.info(f"Freelancer {actor.id} lost the race to apply to project {project.id}")
            raise ConflictError("This project has already been claimed")

        project.assign(actor.id)
        logger.info(f"Project {project.id} assigned to freelancer {actor.id}")

        self._record(ProjectApplied(
            project_id=project.id,
            project_title=project.title,
            client_id=project.client_id,
            freelancer_id=actor.id,
            freelancer_name=actor.full_name,
        ))

        return project_response(project, actor, self.lifecycle)


class CancelProjectUseCase(AuthorizedUseCase, CommandUseCase[str, ProjectResponseDTO]):
    """The owning client cancels an open or in-progress project."""

    def __init__(self, project_repository: ProjectRepository, event_dispatcher: Optional[EventDispatcher] = None):
        super().__init__(event_dispatcher)
        self.project_repository = project_repository
        self.lifecycle = ProjectLifecycleService()

    async def _execute_command_logic(self, request: str, actor: Profile) -> ProjectResponseDTO:
        project = load_project(self.project_repository, request)
        transition = self.lifecycle.authorize(actor, project, ProjectAction.CANCEL)
        previous_status = project.status

        updated = self.project_repository.compare_and_set_status(
            project.id,
            expected_status=previous_status,
            new_status=transition.target,
        )
        if not updated:
            raise ConflictError("The project changed while it was being cancelled; reload and try again")

        project.cancel()
        logger.info(f"Project {project.id} cancelled from {previous_status.value}")

        self._record(ProjectCancelled(
            project_id=project.id,
            client_id=project.client_id,
            previous_status=previous_status.value,
        ))

        return project_response(project, actor, self.lifecycle)

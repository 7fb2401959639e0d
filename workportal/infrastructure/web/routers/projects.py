"""
Project router.
Posting, browsing and the lifecycle commands, plus the project-scoped
deliverable, message and invoice collections.
"""

from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, Query, status

from workportal.application.dto.deliverable_dto import (
    SubmitDeliverableRequestDTO,
    DeliverableResponseDTO,
    DeliverableWithProjectResponseDTO,
)
from workportal.application.dto.invoice_dto import (
    CreateInvoiceRequestDTO,
    ListInvoicesRequestDTO,
    InvoiceResponseDTO,
)
from workportal.application.dto.message_dto import (
    SendMessageRequestDTO,
    ListMessagesRequestDTO,
    MessageResponseDTO,
)
from workportal.application.dto.project_dto import (
    CreateProjectRequestDTO,
    ListProjectsRequestDTO,
    ProjectResponseDTO,
    ProjectListResponseDTO,
)
from workportal.application.use_cases.deliverable_use_cases import (
    SubmitDeliverableCommand,
    SubmitDeliverableUseCase,
    ListDeliverablesUseCase,
)
from workportal.application.use_cases.invoice_use_cases import (
    CreateInvoiceCommand,
    CreateInvoiceUseCase,
    ListInvoicesUseCase,
)
from workportal.application.use_cases.message_use_cases import (
    ListMessagesQuery,
    SendMessageCommand,
    SendMessageUseCase,
    ListProjectMessagesUseCase,
)
from workportal.application.use_cases.project_use_cases import (
    CreateProjectUseCase,
    ListProjectsUseCase,
    GetProjectUseCase,
    ApplyToProjectUseCase,
    CancelProjectUseCase,
)
from workportal.config import get_settings
from workportal.domain.models.profile import Profile
from workportal.domain.models.project import ProjectStatus
from workportal.infrastructure.auth.dependencies import get_current_profile
from workportal.infrastructure.web.dependencies import (
    DeliverableRepo,
    Dispatcher,
    InvoiceRepo,
    MessageRepo,
    ProjectRepo,
)
from workportal.infrastructure.web.middleware.error_handler import unwrap_result


router = APIRouter()

CurrentProfile = Annotated[Profile, Depends(get_current_profile)]


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ProjectResponseDTO)
async def create_project(request: CreateProjectRequestDTO, actor: CurrentProfile, repository: ProjectRepo):
    """
    Post a new project. Clients only.

    - **title**: Project title (required)
    - **description**: What needs doing (required)
    - **budget**: Budget amount
    - **deadline**: Deadline date
    """
    return unwrap_result(await CreateProjectUseCase(repository).execute(request, actor))


@router.get("", response_model=ProjectListResponseDTO)
async def list_projects(
    actor: CurrentProfile,
    repository: ProjectRepo,
    limit: Optional[int] = Query(None, ge=1, description="Number of projects to return"),
    offset: int = Query(0, ge=0, description="Number of projects to skip"),
    project_status: Optional[ProjectStatus] = Query(None, alias="status", description="Filter by project status"),
):
    """
    Projects visible to the caller.

    Clients get the projects they posted. Freelancers get open projects plus the
    ones assigned to them.
    """
    request = ListProjectsRequestDTO(limit=limit, offset=offset, status=project_status)
    settings = get_settings()
    use_case = ListProjectsUseCase(repository, settings.default_page_size, settings.max_page_size)
    return unwrap_result(await use_case.execute(request, actor))


@router.get("/{project_id}", response_model=ProjectResponseDTO)
async def get_project(project_id: str, actor: CurrentProfile, repository: ProjectRepo):
    return unwrap_result(await GetProjectUseCase(repository).execute(project_id, actor))


@router.post("/{project_id}/apply", response_model=ProjectResponseDTO)
async def apply_to_project(project_id: str, actor: CurrentProfile, repository: ProjectRepo, dispatcher: Dispatcher):
    """
    Claim an open project. The first freelancer to apply is assigned;
    later applicants get 409.
    """
    use_case = ApplyToProjectUseCase(repository, dispatcher)
    return unwrap_result(await use_case.execute(project_id, actor))


@router.post("/{project_id}/cancel", response_model=ProjectResponseDTO)
async def cancel_project(project_id: str, actor: CurrentProfile, repository: ProjectRepo, dispatcher: Dispatcher):
    """Cancel an open or in-progress project. Owning client only."""
    use_case = CancelProjectUseCase(repository, dispatcher)
    return unwrap_result(await use_case.execute(project_id, actor))


# Deliverables

@router.get("/{project_id}/deliverables", response_model=List[DeliverableResponseDTO])
async def list_deliverables(
    project_id: str,
    actor: CurrentProfile,
    repository: ProjectRepo,
    deliverable_repository: DeliverableRepo
):
    use_case = ListDeliverablesUseCase(repository, deliverable_repository)
    return unwrap_result(await use_case.execute(project_id, actor))


@router.post(
    "/{project_id}/deliverables",
    status_code=status.HTTP_201_CREATED,
    response_model=DeliverableWithProjectResponseDTO
)
async def submit_deliverable(
    project_id: str,
    request: SubmitDeliverableRequestDTO,
    actor: CurrentProfile,
    repository: ProjectRepo,
    deliverable_repository: DeliverableRepo,
    dispatcher: Dispatcher
):
    """Submit work for review. Assigned freelancer only, while the project is in progress."""
    use_case = SubmitDeliverableUseCase(repository, deliverable_repository, dispatcher)
    return unwrap_result(await use_case.execute(SubmitDeliverableCommand(project_id, request), actor))


# Messages

@router.get("/{project_id}/messages", response_model=List[MessageResponseDTO])
async def list_messages(
    project_id: str,
    actor: CurrentProfile,
    repository: ProjectRepo,
    message_repository: MessageRepo,
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0)
):
    page = ListMessagesRequestDTO(limit=limit, offset=offset)
    use_case = ListProjectMessagesUseCase(repository, message_repository)
    return unwrap_result(await use_case.execute(ListMessagesQuery(project_id, page), actor))


@router.post("/{project_id}/messages", status_code=status.HTTP_201_CREATED, response_model=MessageResponseDTO)
async def send_message(
    project_id: str,
    request: SendMessageRequestDTO,
    actor: CurrentProfile,
    repository: ProjectRepo,
    message_repository: MessageRepo
):
    use_case = SendMessageUseCase(repository, message_repository, get_settings().message_max_length)
    return unwrap_result(await use_case.execute(SendMessageCommand(project_id, request), actor))


# Invoices

@router.get("/{project_id}/invoices", response_model=List[InvoiceResponseDTO])
async def list_project_invoices(
    project_id: str,
    actor: CurrentProfile,
    repository: ProjectRepo,
    invoice_repository: InvoiceRepo
):
    use_case = ListInvoicesUseCase(repository, invoice_repository)
    return unwrap_result(await use_case.execute(ListInvoicesRequestDTO(project_id=project_id), actor))


@router.post("/{project_id}/invoices", status_code=status.HTTP_201_CREATED, response_model=InvoiceResponseDTO)
async def create_invoice(
    project_id: str,
    request: CreateInvoiceRequestDTO,
    actor: CurrentProfile,
    repository: ProjectRepo,
    invoice_repository: InvoiceRepo,
    dispatcher: Dispatcher
):
    """Invoice the client for a completed project. Assigned freelancer only."""
    use_case = CreateInvoiceUseCase(repository, invoice_repository, dispatcher)
    return unwrap_result(await use_case.execute(CreateInvoiceCommand(project_id, request), actor))

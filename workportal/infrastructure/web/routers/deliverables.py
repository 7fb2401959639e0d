"""
Deliverable router.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from workportal.application.dto.deliverable_dto import (
    ReviewDeliverableRequestDTO,
    DeliverableWithProjectResponseDTO,
)
from workportal.application.use_cases.deliverable_use_cases import (
    ReviewDeliverableCommand,
    ReviewDeliverableUseCase,
)
from workportal.domain.models.profile import Profile
from workportal.infrastructure.auth.dependencies import get_current_profile
from workportal.infrastructure.web.dependencies import DeliverableRepo, Dispatcher, ProjectRepo
from workportal.infrastructure.web.middleware.error_handler import unwrap_result


router = APIRouter()


@router.post("/{deliverable_id}/review", response_model=DeliverableWithProjectResponseDTO)
async def review_deliverable(
    deliverable_id: str,
    request: ReviewDeliverableRequestDTO,
    actor: Annotated[Profile, Depends(get_current_profile)],
    repository: ProjectRepo,
    deliverable_repository: DeliverableRepo,
    dispatcher: Dispatcher
):
    """
    Review a submitted deliverable. Owning client only.

    - **decision**: `approved` completes the project, `revision_requested` sends it back
    - **feedback**: Optional note to the freelancer
    """
    use_case = ReviewDeliverableUseCase(repository, deliverable_repository, dispatcher)
    return unwrap_result(await use_case.execute(ReviewDeliverableCommand(deliverable_id, request), actor))

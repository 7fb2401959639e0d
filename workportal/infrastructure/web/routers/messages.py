"""
Message router.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from workportal.application.dto.message_dto import MessageResponseDTO
from workportal.application.use_cases.message_use_cases import MarkMessageReadUseCase
from workportal.domain.models.profile import Profile
from workportal.infrastructure.auth.dependencies import get_current_profile
from workportal.infrastructure.web.dependencies import MessageRepo, ProjectRepo
from workportal.infrastructure.web.middleware.error_handler import unwrap_result


router = APIRouter()


@router.post("/{message_id}/read", response_model=MessageResponseDTO)
async def mark_message_read(
    message_id: str,
    actor: Annotated[Profile, Depends(get_current_profile)],
    repository: ProjectRepo,
    message_repository: MessageRepo
):
    use_case = MarkMessageReadUseCase(repository, message_repository)
    return unwrap_result(await use_case.execute(message_id, actor))

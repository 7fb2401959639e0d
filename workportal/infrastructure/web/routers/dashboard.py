"""
Dashboard router.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from workportal.application.dto.dashboard_dto import DashboardStatsResponseDTO
from workportal.application.use_cases.dashboard_use_cases import GetDashboardStatsUseCase
from workportal.domain.models.profile import Profile
from workportal.infrastructure.auth.dependencies import get_current_profile
from workportal.infrastructure.web.dependencies import InvoiceRepo, MessageRepo, NotificationRepo, ProjectRepo
from workportal.infrastructure.web.middleware.error_handler import unwrap_result


router = APIRouter()


@router.get("/stats", response_model=DashboardStatsResponseDTO)
async def get_stats(
    actor: Annotated[Profile, Depends(get_current_profile)],
    repository: ProjectRepo,
    invoice_repository: InvoiceRepo,
    notification_repository: NotificationRepo,
    message_repository: MessageRepo
):
    use_case = GetDashboardStatsUseCase(
        repository, invoice_repository, notification_repository, message_repository
    )
    return unwrap_result(await use_case.execute(None, actor))

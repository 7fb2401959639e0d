"""
Dashboard use cases for the application layer.
"""

from decimal import Decimal

from workportal.application.use_cases.base_use_case import AuthorizedUseCase, QueryUseCase
from workportal.application.dto.dashboard_dto import DashboardStatsResponseDTO
from workportal.domain.models.profile import Profile
from workportal.domain.models.project import ProjectStatus
from workportal.domain.repositories.invoice_repository import InvoiceRepository
from workportal.domain.repositories.message_repository import MessageRepository
from workportal.domain.repositories.notification_repository import NotificationRepository
from workportal.domain.repositories.project_repository import ProjectRepository
from workportal.domain.services.visibility_service import VisibilityService


class GetDashboardStatsUseCase(AuthorizedUseCase, QueryUseCase[None, DashboardStatsResponseDTO]):
    """
    Headline numbers for the caller.

    Counts cover the projects the caller takes part in: the ones a client owns or
    the ones a freelancer is assigned to. Open marketplace listings are not counted
    for freelancers.
    """

    def __init__(
        self,
        project_repository: ProjectRepository,
        invoice_repository: InvoiceRepository,
        notification_repository: NotificationRepository,
        message_repository: MessageRepository
    ):
        super().__init__()
        self.project_repository = project_repository
        self.invoice_repository = invoice_repository
        self.notification_repository = notification_repository
        self.message_repository = message_repository
        self.visibility = VisibilityService()

    async def _execute_business_logic(self, request: None, actor: Profile) -> DashboardStatsResponseDTO:
        scope = self.visibility.engagement_scope(actor)
        counts = self.project_repository.count_by_status(scope)

        active = sum(counts.get(status, 0) for status in ProjectStatus if status.is_active)
        unread_messages = self.message_repository.count_unread_for_recipient(scope, actor.id)
        paid_total = self.invoice_repository.total_paid(actor.id) or Decimal("0")

        return DashboardStatsResponseDTO(
            role=actor.role,
            total_projects=sum(counts.values()),
            active_projects=active,
            completed_projects=counts.get(ProjectStatus.COMPLETED, 0),
            open_projects=counts.get(ProjectStatus.OPEN, 0),
            unread_notifications=self.notification_repository.count_unread(actor.id),
            unread_messages=unread_messages,
            total_earnings=paid_total if actor.is_freelancer else None,
            total_spent=paid_total if actor.is_client else None,
        )

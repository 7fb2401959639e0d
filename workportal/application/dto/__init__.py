"""
Data transfer objects for the application layer.
"""

from .base_dto import (
    BaseDTO,
    RequestDTO,
    ResponseDTO,
    PageRequestDTO,
    HealthCheckResponseDTO,
    AckResponseDTO,
    CountResponseDTO,
)
from .auth_dto import (
    SignUpRequestDTO,
    SignInRequestDTO,
    ProvisionProfileRequestDTO,
    SessionResponseDTO,
)
from .profile_dto import (
    UpdateProfileRequestDTO,
    ProfileResponseDTO,
    ProfileSummaryDTO,
    CapabilitiesResponseDTO,
)
from .project_dto import (
    CreateProjectRequestDTO,
    ListProjectsRequestDTO,
    ProjectResponseDTO,
    ProjectListResponseDTO,
)
from .deliverable_dto import (
    SubmitDeliverableRequestDTO,
    ReviewDeliverableRequestDTO,
    DeliverableResponseDTO,
    DeliverableWithProjectResponseDTO,
)
from .message_dto import SendMessageRequestDTO, ListMessagesRequestDTO
from .message_dto import MessageResponseDTO
from .invoice_dto import CreateInvoiceRequestDTO, ListInvoicesRequestDTO, InvoiceResponseDTO
from .notification_dto import ListNotificationsRequestDTO, NotificationResponseDTO
from .dashboard_dto import DashboardStatsResponseDTO

__all__ = [
    "BaseDTO",
    "RequestDTO",
    "ResponseDTO",
    "PageRequestDTO",
    "HealthCheckResponseDTO",
    "AckResponseDTO",
    "CountResponseDTO",
    "SignUpRequestDTO",
    "SignInRequestDTO",
    "ProvisionProfileRequestDTO",
    "SessionResponseDTO",
    "UpdateProfileRequestDTO",
    "ProfileResponseDTO",
    "ProfileSummaryDTO",
    "CapabilitiesResponseDTO",
    "CreateProjectRequestDTO",
    "ListProjectsRequestDTO",
    "ProjectResponseDTO",
    "ProjectListResponseDTO",
    "SubmitDeliverableRequestDTO",
    "ReviewDeliverableRequestDTO",
    "DeliverableResponseDTO",
    "DeliverableWithProjectResponseDTO",
    "SendMessageRequestDTO",
    "ListMessagesRequestDTO",
    "MessageResponseDTO",
    "CreateInvoiceRequestDTO",
    "ListInvoicesRequestDTO",
    "InvoiceResponseDTO",
    "ListNotificationsRequestDTO",
    "NotificationResponseDTO",
    "DashboardStatsResponseDTO",
]

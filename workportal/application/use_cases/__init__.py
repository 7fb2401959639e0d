"""
Use cases for the application layer.
Each use case runs one command or query on behalf of a resolved profile.
"""

from .base_use_case import UseCaseResult, BaseUseCase, CommandUseCase, QueryUseCase, AuthorizedUseCase
from .auth_use_cases import SignUpUseCase, SignInUseCase, SignOutUseCase, ProvisionProfileUseCase
from .profile_use_cases import GetProfileUseCase, UpdateProfileUseCase, GetCapabilitiesUseCase
from .project_use_cases import (
    CreateProjectUseCase,
    ListProjectsUseCase,
    GetProjectUseCase,
    ApplyToProjectUseCase,
    CancelProjectUseCase,
)
from .deliverable_use_cases import (
    SubmitDeliverableCommand,
    ReviewDeliverableCommand,
    SubmitDeliverableUseCase,
    ReviewDeliverableUseCase,
    ListDeliverablesUseCase,
)
from .message_use_cases import (
    SendMessageCommand,
    ListMessagesQuery,
    SendMessageUseCase,
    ListProjectMessagesUseCase,
    MarkMessageReadUseCase,
)
from .invoice_use_cases import (
    CreateInvoiceCommand,
    CreateInvoiceUseCase,
    MarkInvoicePaidUseCase,
    GetInvoiceUseCase,
    ListInvoicesUseCase,
)
from .notification_use_cases import (
    ListNotificationsUseCase,
    MarkNotificationReadUseCase,
    MarkAllNotificationsReadUseCase,
    CountUnreadNotificationsUseCase,
)
from .dashboard_use_cases import GetDashboardStatsUseCase

__all__ = [
    "UseCaseResult",
    "BaseUseCase",
    "CommandUseCase",
    "QueryUseCase",
    "AuthorizedUseCase",
    "SignUpUseCase",
    "SignInUseCase",
    "SignOutUseCase",
    "ProvisionProfileUseCase",
    "GetProfileUseCase",
    "UpdateProfileUseCase",
    "GetCapabilitiesUseCase",
    "CreateProjectUseCase",
    "ListProjectsUseCase",
    "GetProjectUseCase",
    "ApplyToProjectUseCase",
    "CancelProjectUseCase",
    "SubmitDeliverableCommand",
    "ReviewDeliverableCommand",
    "SubmitDeliverableUseCase",
    "ReviewDeliverableUseCase",
    "ListDeliverablesUseCase",
    "SendMessageCommand",
    "ListMessagesQuery",
    "SendMessageUseCase",
    "ListProjectMessagesUseCase",
    "MarkMessageReadUseCase",
    "CreateInvoiceCommand",
    "CreateInvoiceUseCase",
    "MarkInvoicePaidUseCase",
    "GetInvoiceUseCase",
    "ListInvoicesUseCase",
    "ListNotificationsUseCase",
    "MarkNotificationReadUseCase",
    "MarkAllNotificationsReadUseCase",
    "CountUnreadNotificationsUseCase",
    "GetDashboardStatsUseCase",
]

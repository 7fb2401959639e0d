"""
Invoice use cases for the application layer.
Invoices are issued by the assigned freelancer once a project is completed and
paid by the project's client.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from workportal.application.use_cases.base_use_case import (
    AuthorizedUseCase,
    CommandUseCase,
    QueryUseCase,
)
from workportal.application.use_cases.project_use_cases import load_project
from workportal.application.dto.invoice_dto import (
    CreateInvoiceRequestDTO,
    ListInvoicesRequestDTO,
    InvoiceResponseDTO,
)
from workportal.domain.events.base import EventDispatcher
from workportal.domain.events.invoice_events import InvoiceCreated, InvoicePaid
from workportal.domain.models.base import (
    EntityNotFoundError,
    ForbiddenError,
    InvalidStateError,
    utcnow,
)
from workportal.domain.models.invoice import Invoice, InvoiceStatus
from workportal.domain.models.profile import Capability, Profile
from workportal.domain.repositories.invoice_repository import InvoiceRepository
from workportal.domain.repositories.project_repository import ProjectRepository
from workportal.domain.services.visibility_service import VisibilityService


logger = logging.getLogger(__name__)


@dataclass
class CreateInvoiceCommand:
    project_id: str
    data: CreateInvoiceRequestDTO


def load_invoice(invoice_repository: InvoiceRepository, invoice_id: str) -> Invoice:
    invoice = invoice_repository.find_by_id(invoice_id)
    if invoice is None:
        raise EntityNotFoundError("Invoice", invoice_id)
    return invoice


class CreateInvoiceUseCase(AuthorizedUseCase, CommandUseCase[CreateInvoiceCommand, InvoiceResponseDTO]):
    """The assigned freelancer invoices the client for a completed project."""

    def __init__(
        self,
        project_repository: ProjectRepository,
        invoice_repository: InvoiceRepository,
        event_dispatcher: Optional[EventDispatcher] = None
    ):
        super().__init__(event_dispatcher)
        self.project_repository = project_repository
        self.invoice_repository = invoice_repository

    async def _execute_command_logic(self, request: CreateInvoiceCommand, actor: Profile) -> InvoiceResponseDTO:
        project = load_project(self.project_repository, request.project_id)

        if not actor.can(Capability.CREATE_INVOICE) or not project.is_assigned_to(actor.id):
            raise ForbiddenError("Only the assigned freelancer can invoice this project")
        if not project.accepts_invoices:
            raise InvalidStateError(
                f"Invoices can only be created for completed projects (this one is "
                f"{project.status.value.replace('_', ' ')})"
            )

        invoice = Invoice(
            project_id=project.id,
            client_id=project.client_id,
            freelancer_id=actor.id,
            amount=request.data.amount,
            description=request.data.description,
            due_date=request.data.due_date,
            status=InvoiceStatus.SENT.value,
        )
        invoice.ensure_id()

        saved = self.invoice_repository.create(invoice)
        logger.info(f"Invoice {saved.id} for {saved.amount} created on project {project.id}")

        self._record(InvoiceCreated(
            invoice_id=saved.id,
            project_id=project.id,
            project_title=project.title,
            client_id=project.client_id,
            freelancer_id=actor.id,
            freelancer_name=actor.full_name,
            amount=saved.amount,
        ))

        return InvoiceResponseDTO.from_domain(saved)


class MarkInvoicePaidUseCase(AuthorizedUseCase, CommandUseCase[str, InvoiceResponseDTO]):
    """
    The invoice's client records payment.
    Only status and paid_at change; paying twice is InvalidStateError.
    """

    def __init__(self, invoice_repository: InvoiceRepository, event_dispatcher: Optional[EventDispatcher] = None):
        super().__init__(event_dispatcher)
        self.invoice_repository = invoice_repository
        self.visibility = VisibilityService()

    async def _execute_command_logic(self, request: str, actor: Profile) -> InvoiceResponseDTO:
        invoice = load_invoice(self.invoice_repository, request)
        self.visibility.require_invoice_visible(actor, invoice)
        if not actor.can(Capability.PAY_INVOICE) or invoice.client_id != actor.id:
            raise ForbiddenError("Only the invoiced client can pay this invoice")

        paid_at = utcnow()
        invoice.mark_paid(paid_at)

        if not self.invoice_repository.mark_paid(invoice.id, paid_at):
            raise InvalidStateError("Invoice has already been paid")
        logger.info(f"Invoice {invoice.id} paid by client {actor.id}")

        self._record(InvoicePaid(
            invoice_id=invoice.id,
            project_id=invoice.project_id,
            client_id=invoice.client_id,
            freelancer_id=invoice.freelancer_id,
            amount=invoice.amount,
        ))

        return InvoiceResponseDTO.from_domain(invoice)


class GetInvoiceUseCase(AuthorizedUseCase, QueryUseCase[str, InvoiceResponseDTO]):
    """Direct invoice fetch. Only the invoice's client and freelancer may see it."""

    def __init__(self, invoice_repository: InvoiceRepository):
        super().__init__()
        self.invoice_repository = invoice_repository
        self.visibility = VisibilityService()

    async def _execute_business_logic(self, request: str, actor: Profile) -> InvoiceResponseDTO:
        invoice = load_invoice(self.invoice_repository, request)
        self.visibility.require_invoice_visible(actor, invoice)
        return InvoiceResponseDTO.from_domain(invoice)


class ListInvoicesUseCase(AuthorizedUseCase, QueryUseCase[ListInvoicesRequestDTO, List[InvoiceResponseDTO]]):
    """
    The caller's invoices, newest first.
    Filtering by project requires being one of its participants.
    """

    def __init__(self, project_repository: ProjectRepository, invoice_repository: InvoiceRepository):
        super().__init__()
        self.project_repository = project_repository
        self.invoice_repository = invoice_repository
        self.visibility = VisibilityService()

    async def _execute_business_logic(self, request: ListInvoicesRequestDTO, actor: Profile) -> List[InvoiceResponseDTO]:
        if request.project_id:
            project = load_project(self.project_repository, request.project_id)
            self.visibility.require_participant(actor, project)

        invoices = self.invoice_repository.find_for_party(
            actor.id, project_id=request.project_id, status=request.status
        )
        return [InvoiceResponseDTO.from_domain(i) for i in invoices]

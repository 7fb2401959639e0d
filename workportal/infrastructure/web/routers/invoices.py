"""
Invoice router.
"""

from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, Query

from workportal.application.dto.invoice_dto import ListInvoicesRequestDTO, InvoiceResponseDTO
from workportal.application.use_cases.invoice_use_cases import (
    GetInvoiceUseCase,
    ListInvoicesUseCase,
    MarkInvoicePaidUseCase,
)
from workportal.domain.models.profile import Profile
from workportal.infrastructure.auth.dependencies import get_current_profile
from workportal.infrastructure.web.dependencies import Dispatcher, InvoiceRepo, ProjectRepo
from workportal.infrastructure.web.middleware.error_handler import unwrap_result


router = APIRouter()

CurrentProfile = Annotated[Profile, Depends(get_current_profile)]


@router.get("", response_model=List[InvoiceResponseDTO])
async def list_invoices(
    actor: CurrentProfile,
    repository: ProjectRepo,
    invoice_repository: InvoiceRepo,
    project_id: Optional[str] = Query(None, description="Only invoices for this project"),
    invoice_status: Optional[str] = Query(None, alias="status", description="Filter by invoice status")
):
    """Invoices the caller sent (freelancer) or received (client)."""
    request = ListInvoicesRequestDTO(project_id=project_id, status=invoice_status)
    return unwrap_result(await ListInvoicesUseCase(repository, invoice_repository).execute(request, actor))


@router.get("/{invoice_id}", response_model=InvoiceResponseDTO)
async def get_invoice(invoice_id: str, actor: CurrentProfile, invoice_repository: InvoiceRepo):
    return unwrap_result(await GetInvoiceUseCase(invoice_repository).execute(invoice_id, actor))


@router.post("/{invoice_id}/pay", response_model=InvoiceResponseDTO)
async def pay_invoice(
    invoice_id: str,
    actor: CurrentProfile,
    invoice_repository: InvoiceRepo,
    dispatcher: Dispatcher
):
    """Record payment. Invoiced client only; paying twice is 409."""
    use_case = MarkInvoicePaidUseCase(invoice_repository, dispatcher)
    return unwrap_result(await use_case.execute(invoice_id, actor))

"""
Invoice DTOs for the application layer.
"""

from typing import Optional
from datetime import date, datetime
from decimal import Decimal
from pydantic import Field

from workportal.domain.models.invoice import Invoice
from .base_dto import RequestDTO, ResponseDTO


class CreateInvoiceRequestDTO(RequestDTO):
    """DTO for invoice creation requests."""

    amount: Decimal = Field(gt=0, max_digits=12, decimal_places=2, description="Invoice amount")
    description: Optional[str] = Field(default=None, max_length=2000, description="Invoice description")
    due_date: Optional[date] = Field(default=None, description="Payment due date")


class ListInvoicesRequestDTO(RequestDTO):
    project_id: Optional[str] = Field(default=None, description="Only invoices for this project")
    status: Optional[str] = Field(default=None, max_length=50, description="Filter by status")


class InvoiceResponseDTO(ResponseDTO):
    """DTO for invoice responses."""

    project_id: str
    client_id: str
    freelancer_id: str
    amount: Decimal
    description: Optional[str] = None
    due_date: Optional[date] = None
    status: str
    paid_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, invoice: Invoice) -> "InvoiceResponseDTO":
        return cls(
            id=invoice.id,
            created_at=invoice.created_at,
            project_id=invoice.project_id,
            client_id=invoice.client_id,
            freelancer_id=invoice.freelancer_id,
            amount=invoice.amount,
            description=invoice.description,
            due_date=invoice.due_date,
            status=invoice.status,
            paid_at=invoice.paid_at,
        )

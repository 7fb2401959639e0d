"""
Invoice domain model.
Issued by the assigned freelancer once a project is completed. The amount is fixed
at creation; payment only changes the status and stamps paid_at.
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from workportal.domain.models.base import (
    BaseEntity,
    ValidationError,
    InvalidStateError,
    utcnow,
)


class InvoiceStatus(str, Enum):
    """Well-known invoice statuses. The stored status is free-form text."""
    DRAFT = "draft"
    SENT = "sent"
    PAID = "paid"
    CANCELLED = "cancelled"


@dataclass
class Invoice(BaseEntity):

    project_id: str = ""
    client_id: str = ""
    freelancer_id: str = ""
    amount: Decimal = Decimal("0")
    description: Optional[str] = None
    due_date: Optional[date] = None
    status: str = InvoiceStatus.SENT.value
    paid_at: Optional[datetime] = None

    def __post_init__(self):
        super().__post_init__()
        if not isinstance(self.amount, Decimal):
            self.amount = Decimal(str(self.amount))
        if isinstance(self.status, InvoiceStatus):
            self.status = self.status.value
        self.validate()

    def validate(self) -> None:
        if not self.project_id:
            raise ValidationError("Project ID is required", "project_id")
        if not self.client_id:
            raise ValidationError("Client ID is required", "client_id")
        if not self.freelancer_id:
            raise ValidationError("Freelancer ID is required", "freelancer_id")
        if self.amount <= 0:
            raise ValidationError("Invoice amount must be greater than zero", "amount")
        if not self.status or not self.status.strip():
            raise ValidationError("Invoice status is required", "status")

    @property
    def is_paid(self) -> bool:
        return self.paid_at is not None or self.status == InvoiceStatus.PAID.value

    def is_party(self, profile_id: str) -> bool:
        return profile_id in (self.client_id, self.freelancer_id)

    def mark_paid(self, paid_at: Optional[datetime] = None) -> None:
        if self.is_paid:
            raise InvalidStateError("Invoice has already been paid")
        if self.status == InvoiceStatus.CANCELLED.value:
            raise InvalidStateError("A cancelled invoice cannot be paid")
        self.status = InvoiceStatus.PAID.value
        self.paid_at = paid_at or utcnow()
        self.mark_as_updated()

"""
Invoice mapper for converting between domain entities and storage records.
"""

from typing import Any, Dict

from workportal.domain.models.invoice import Invoice
from workportal.infrastructure.db.models import InvoiceModel
from .base_mapper import to_utc, to_date, to_decimal, money, iso


class InvoiceMapper:
    """Maps between Invoice and InvoiceModel / `invoices` rows."""

    def domain_to_model(self, invoice: Invoice) -> InvoiceModel:
        return InvoiceModel(
            id=invoice.id,
            project_id=invoice.project_id,
            client_id=invoice.client_id,
            freelancer_id=invoice.freelancer_id,
            amount=invoice.amount,
            description=invoice.description,
            due_date=invoice.due_date,
            status=invoice.status,
            paid_at=invoice.paid_at,
            created_at=invoice.created_at,
        )

    def model_to_domain(self, model: InvoiceModel) -> Invoice:
        return Invoice(
            id=model.id,
            project_id=model.project_id,
            client_id=model.client_id,
            freelancer_id=model.freelancer_id,
            amount=to_decimal(model.amount),
            description=model.description,
            due_date=to_date(model.due_date),
            status=model.status,
            paid_at=to_utc(model.paid_at),
            created_at=to_utc(model.created_at),
            updated_at=to_utc(model.paid_at or model.created_at),
        )

    def row_to_domain(self, row: Dict[str, Any]) -> Invoice:
        return Invoice(
            id=row["id"],
            project_id=row["project_id"],
            client_id=row["client_id"],
            freelancer_id=row["freelancer_id"],
            amount=to_decimal(row["amount"]),
            description=row.get("description"),
            due_date=to_date(row.get("due_date")),
            status=row.get("status") or "sent",
            paid_at=to_utc(row.get("paid_at")),
            created_at=to_utc(row.get("created_at")),
            updated_at=to_utc(row.get("paid_at") or row.get("created_at")),
        )

    def domain_to_row(self, invoice: Invoice) -> Dict[str, Any]:
        return {
            "id": invoice.id,
            "project_id": invoice.project_id,
            "client_id": invoice.client_id,
            "freelancer_id": invoice.freelancer_id,
            "amount": money(invoice.amount),
            "description": invoice.description,
            "due_date": iso(invoice.due_date),
            "status": invoice.status,
            "paid_at": iso(invoice.paid_at),
            "created_at": iso(invoice.created_at),
        }

"""
Invoice repository implementations.
Amounts are stored as fixed-point numerics and never rewritten after insert.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import func, or_

from workportal.domain.models.invoice import Invoice, InvoiceStatus
from workportal.domain.repositories.invoice_repository import InvoiceRepository
from workportal.infrastructure.db.models import InvoiceModel
from workportal.infrastructure.mappers.base_mapper import iso, to_decimal
from workportal.infrastructure.mappers.invoice_mapper import InvoiceMapper
from .base import SQLAlchemyRepository, SupabaseRepository


class SQLAlchemyInvoiceRepository(SQLAlchemyRepository, InvoiceRepository):
    """SQLAlchemy implementation of invoice repository."""

    entity_name = "Invoice"

    def __init__(self, session):
        super().__init__(session)
        self.mapper = InvoiceMapper()

    def create(self, invoice: Invoice) -> Invoice:
        self._insert(self.mapper.domain_to_model(invoice))
        return invoice

    def find_by_id(self, invoice_id: str) -> Optional[Invoice]:
        with self._translate_errors():
            model = self.session.query(InvoiceModel).filter_by(id=invoice_id).first()
        return self.mapper.model_to_domain(model) if model else None

    def find_for_party(
        self,
        profile_id: str,
        project_id: Optional[str] = None,
        status: Optional[str] = None
    ) -> List[Invoice]:
        query = self.session.query(InvoiceModel).filter(
            or_(InvoiceModel.client_id == profile_id, InvoiceModel.freelancer_id == profile_id)
        )
        if project_id:
            query = query.filter(InvoiceModel.project_id == project_id)
        if status:
            query = query.filter(InvoiceModel.status == status)

        with self._translate_errors():
            models = query.order_by(InvoiceModel.created_at.desc()).all()
        return [self.mapper.model_to_domain(m) for m in models]

    def mark_paid(self, invoice_id: str, paid_at: datetime) -> bool:
        with self._translate_errors():
            updated = (
                self.session.query(InvoiceModel)
                .filter(
                    InvoiceModel.id == invoice_id,
                    InvoiceModel.paid_at.is_(None),
                    InvoiceModel.status != InvoiceStatus.PAID.value,
                )
                .update(
                    {InvoiceModel.status: InvoiceStatus.PAID.value, InvoiceModel.paid_at: paid_at},
                    synchronize_session="fetch",
                )
            )
        return updated == 1

    def total_paid(self, profile_id: str) -> Decimal:
        with self._translate_errors():
            total = (
                self.session.query(func.sum(InvoiceModel.amount))
                .filter(
                    or_(InvoiceModel.client_id == profile_id, InvoiceModel.freelancer_id == profile_id),
                    InvoiceModel.status == InvoiceStatus.PAID.value,
                )
                .scalar()
            )
        return to_decimal(total) if total is not None else Decimal("0.00")


class SupabaseInvoiceRepository(SupabaseRepository, InvoiceRepository):
    """PostgREST implementation of invoice repository."""

    table_name = "invoices"
    entity_name = "Invoice"

    def __init__(self, client):
        super().__init__(client)
        self.mapper = InvoiceMapper()

    def _party_filter(self, profile_id: str) -> str:
        return f"client_id.eq.{profile_id},freelancer_id.eq.{profile_id}"

    def create(self, invoice: Invoice) -> Invoice:
        response = self._execute(self._table().insert(self.mapper.domain_to_row(invoice)))
        row = self._single(response)
        return self.mapper.row_to_domain(row) if row else invoice

    def find_by_id(self, invoice_id: str) -> Optional[Invoice]:
        response = self._execute(self._table().select("*").eq("id", invoice_id).limit(1))
        row = self._single(response)
        return self.mapper.row_to_domain(row) if row else None

    def find_for_party(
        self,
        profile_id: str,
        project_id: Optional[str] = None,
        status: Optional[str] = None
    ) -> List[Invoice]:
        query = self._table().select("*").or_(self._party_filter(profile_id))
        if project_id:
            query = query.eq("project_id", project_id)
        if status:
            query = query.eq("status", status)

        response = self._execute(query.order("created_at", desc=True))
        return [self.mapper.row_to_domain(row) for row in response.data or []]

    def mark_paid(self, invoice_id: str, paid_at: datetime) -> bool:
        response = self._execute(
            self._table()
            .update({"status": InvoiceStatus.PAID.value, "paid_at": iso(paid_at)})
            .eq("id", invoice_id)
            .is_("paid_at", "null")
            .neq("status", InvoiceStatus.PAID.value)
        )
        return len(response.data or []) == 1

    def total_paid(self, profile_id: str) -> Decimal:
        rows = self._fetch_all(
            lambda: self._table()
            .select("id, amount", count="exact")
            .or_(self._party_filter(profile_id))
            .eq("status", InvoiceStatus.PAID.value)
            .order("id")
        )
        return sum((to_decimal(row["amount"]) for row in rows), Decimal("0.00"))

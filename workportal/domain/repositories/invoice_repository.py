"""
Invoice repository interface.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from workportal.domain.models.invoice import Invoice


class InvoiceRepository(ABC):
    """Repository interface for invoices."""

    @abstractmethod
    def create(self, invoice: Invoice) -> Invoice:
        pass

    @abstractmethod
    def find_by_id(self, invoice_id: str) -> Optional[Invoice]:
        pass

    @abstractmethod
    def find_for_party(
        self,
        profile_id: str,
        project_id: Optional[str] = None,
        status: Optional[str] = None
    ) -> List[Invoice]:
        """Invoices where the profile is the client or the freelancer, newest first."""
        pass

    @abstractmethod
    def mark_paid(self, invoice_id: str, paid_at: datetime) -> bool:
        """
        Set status to paid and stamp paid_at, only if the invoice is unpaid.
        The amount is never touched. Returns True when exactly one row changed.
        """
        pass

    @abstractmethod
    def total_paid(self, profile_id: str) -> Decimal:
        """Sum of paid invoice amounts where the profile is the client or the freelancer."""
        pass

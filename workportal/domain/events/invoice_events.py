"""
Domain events related to invoices.
"""

from decimal import Decimal
from typing import Dict, Any

from .base import DomainEvent


class InvoiceCreated(DomainEvent):
    """Event fired when a freelancer issues an invoice for a completed project."""

    def __init__(self,
                 invoice_id: str,
                 project_id: str,
                 project_title: str,
                 client_id: str,
                 freelancer_id: str,
                 freelancer_name: str,
                 amount: Decimal,
                 **kwargs):
        super().__init__(**kwargs)
        self.invoice_id = invoice_id
        self.project_id = project_id
        self.project_title = project_title
        self.client_id = client_id
        self.freelancer_id = freelancer_id
        self.freelancer_name = freelancer_name
        self.amount = amount

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "invoice_id": self.invoice_id,
            "project_id": self.project_id,
            "project_title": self.project_title,
            "client_id": self.client_id,
            "freelancer_id": self.freelancer_id,
            "freelancer_name": self.freelancer_name,
            "amount": str(self.amount),
        }


class InvoicePaid(DomainEvent):
    """Event fired when the client pays an invoice."""

    def __init__(self,
                 invoice_id: str,
                 project_id: str,
                 client_id: str,
                 freelancer_id: str,
                 amount: Decimal,
                 **kwargs):
        super().__init__(**kwargs)
        self.invoice_id = invoice_id
        self.project_id = project_id
        self.client_id = client_id
        self.freelancer_id = freelancer_id
        self.amount = amount

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "invoice_id": self.invoice_id,
            "project_id": self.project_id,
            "client_id": self.client_id,
            "freelancer_id": self.freelancer_id,
            "amount": str(self.amount),
        }

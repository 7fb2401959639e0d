"""
Unit tests for invoice use cases, run against the in-memory store.
"""

import pytest
from decimal import Decimal
from unittest.mock import Mock

from workportal.application.dto.invoice_dto import CreateInvoiceRequestDTO, ListInvoicesRequestDTO
from workportal.application.use_cases.invoice_use_cases import (
    CreateInvoiceCommand,
    CreateInvoiceUseCase,
    GetInvoiceUseCase,
    ListInvoicesUseCase,
    MarkInvoicePaidUseCase,
)
from workportal.domain.models.project import ProjectStatus
from workportal.infrastructure.events.event_setup import build_event_dispatcher


@pytest.fixture
def completed_project(store, people, open_project):
    store.projects.claim(open_project.id, people.freelancer.id)
    store.projects.compare_and_set_status(open_project.id, ProjectStatus.IN_PROGRESS, ProjectStatus.IN_REVIEW)
    store.projects.compare_and_set_status(open_project.id, ProjectStatus.IN_REVIEW, ProjectStatus.COMPLETED)
    return store.projects.find_by_id(open_project.id)


def invoice_command(project_id, amount="500.00"):
    return CreateInvoiceCommand(
        project_id=project_id,
        data=CreateInvoiceRequestDTO(amount=Decimal(amount), description="Landing page build"),
    )


class TestCreateInvoice:

    @pytest.mark.asyncio
    async def test_assigned_freelancer_invoices_completed_project(self, store, people, completed_project):
        use_case = CreateInvoiceUseCase(store.projects, store.invoices)

        result = await use_case.execute(invoice_command(completed_project.id), people.freelancer)

        assert result.success is True
        assert result.data.amount == Decimal("500.00")
        assert result.data.status == "sent"
        assert result.data.client_id == people.client.id
        assert result.data.paid_at is None

    @pytest.mark.asyncio
    async def test_cannot_invoice_before_completion(self, store, people, open_project):
        store.projects.claim(open_project.id, people.freelancer.id)

        result = await CreateInvoiceUseCase(store.projects, store.invoices).execute(
            invoice_command(open_project.id), people.freelancer
        )

        assert result.error_code == "INVALID_STATE"

    @pytest.mark.asyncio
    async def test_only_assigned_freelancer_can_invoice(self, store, people, completed_project):
        use_case = CreateInvoiceUseCase(store.projects, store.invoices)

        assert (await use_case.execute(invoice_command(completed_project.id), people.other_freelancer)).error_code == "FORBIDDEN"
        assert (await use_case.execute(invoice_command(completed_project.id), people.client)).error_code == "FORBIDDEN"

    @pytest.mark.asyncio
    async def test_invoice_notifies_client(self, store, people, completed_project):
        dispatcher = build_event_dispatcher(store.notifications)

        result = await CreateInvoiceUseCase(store.projects, store.invoices, dispatcher).execute(
            invoice_command(completed_project.id), people.freelancer
        )

        notifications = store.notifications.find_by_user(people.client.id)
        assert len(notifications) == 1
        assert notifications[0].type == "invoice"
        assert notifications[0].link == f"/invoices/{result.data.id}"
        assert "500.00" in notifications[0].message

    @pytest.mark.asyncio
    async def test_failing_notification_does_not_fail_invoice(self, store, people, completed_project):
        """The invoice is kept even when the notification write blows up."""
        dispatcher = build_event_dispatcher(store.notifications)
        store.notifications.create = Mock(side_effect=RuntimeError("store down"))

        result = await CreateInvoiceUseCase(store.projects, store.invoices, dispatcher).execute(
            invoice_command(completed_project.id), people.freelancer
        )

        assert result.success is True
        assert store.invoices.find_by_id(result.data.id) is not None


class TestPayInvoice:

    async def _invoice(self, store, people, project_id):
        result = await CreateInvoiceUseCase(store.projects, store.invoices).execute(
            invoice_command(project_id), people.freelancer
        )
        return result.data

    @pytest.mark.asyncio
    async def test_client_pays_invoice(self, store, people, completed_project):
        invoice = await self._invoice(store, people, completed_project.id)

        result = await MarkInvoicePaidUseCase(store.invoices).execute(invoice.id, people.client)

        assert result.success is True
        assert result.data.status == "paid"
        assert result.data.paid_at is not None
        assert result.data.amount == Decimal("500.00")

        stored = store.invoices.find_by_id(invoice.id)
        assert stored.status == "paid"
        assert stored.paid_at is not None
        assert stored.amount == Decimal("500.00")

    @pytest.mark.asyncio
    async def test_paying_twice_is_invalid_state(self, store, people, completed_project):
        invoice = await self._invoice(store, people, completed_project.id)
        use_case = MarkInvoicePaidUseCase(store.invoices)
        await use_case.execute(invoice.id, people.client)

        result = await use_case.execute(invoice.id, people.client)

        assert result.error_code == "INVALID_STATE"

    @pytest.mark.asyncio
    async def test_freelancer_cannot_pay(self, store, people, completed_project):
        invoice = await self._invoice(store, people, completed_project.id)

        result = await MarkInvoicePaidUseCase(store.invoices).execute(invoice.id, people.freelancer)

        assert result.error_code == "FORBIDDEN"
        assert store.invoices.find_by_id(invoice.id).paid_at is None

    @pytest.mark.asyncio
    async def test_outsider_cannot_see_or_pay(self, store, people, completed_project):
        invoice = await self._invoice(store, people, completed_project.id)

        assert (await GetInvoiceUseCase(store.invoices).execute(invoice.id, people.other_client)).error_code == "FORBIDDEN"
        assert (await MarkInvoicePaidUseCase(store.invoices).execute(invoice.id, people.other_client)).error_code == "FORBIDDEN"


class TestListInvoices:

    @pytest.mark.asyncio
    async def test_parties_see_invoice(self, store, people, completed_project):
        await CreateInvoiceUseCase(store.projects, store.invoices).execute(
            invoice_command(completed_project.id), people.freelancer
        )
        list_invoices = ListInvoicesUseCase(store.projects, store.invoices)

        client_view = await list_invoices.execute(ListInvoicesRequestDTO(), people.client)
        freelancer_view = await list_invoices.execute(
            ListInvoicesRequestDTO(project_id=completed_project.id), people.freelancer
        )
        outsider_view = await list_invoices.execute(ListInvoicesRequestDTO(), people.other_freelancer)

        assert len(client_view.data) == 1
        assert len(freelancer_view.data) == 1
        assert outsider_view.data == []

    @pytest.mark.asyncio
    async def test_filter_by_foreign_project_is_forbidden(self, store, people, completed_project):
        result = await ListInvoicesUseCase(store.projects, store.invoices).execute(
            ListInvoicesRequestDTO(project_id=completed_project.id), people.other_client
        )

        assert result.error_code == "FORBIDDEN"

    @pytest.mark.asyncio
    async def test_status_filter(self, store, people, completed_project):
        await CreateInvoiceUseCase(store.projects, store.invoices).execute(
            invoice_command(completed_project.id), people.freelancer
        )

        result = await ListInvoicesUseCase(store.projects, store.invoices).execute(
            ListInvoicesRequestDTO(status="paid"), people.client
        )

        assert result.data == []

"""
Unit tests for profile and dashboard use cases.
"""

import pytest
from decimal import Decimal

from workportal.application.dto.invoice_dto import CreateInvoiceRequestDTO
from workportal.application.dto.message_dto import SendMessageRequestDTO
from workportal.application.dto.profile_dto import UpdateProfileRequestDTO
from workportal.application.use_cases.dashboard_use_cases import GetDashboardStatsUseCase
from workportal.application.use_cases.invoice_use_cases import (
    CreateInvoiceCommand,
    CreateInvoiceUseCase,
    MarkInvoicePaidUseCase,
)
from workportal.application.use_cases.message_use_cases import SendMessageCommand, SendMessageUseCase
from workportal.application.use_cases.profile_use_cases import (
    GetCapabilitiesUseCase,
    GetProfileUseCase,
    UpdateProfileUseCase,
)
from workportal.domain.models.project import ProjectStatus


class TestProfiles:

    @pytest.mark.asyncio
    async def test_get_own_and_other_profile(self, store, people):
        use_case = GetProfileUseCase(store.profiles)

        own = await use_case.execute(None, people.client)
        other = await use_case.execute(people.freelancer.id, people.client)
        missing = await use_case.execute("nobody", people.client)

        assert own.data.id == people.client.id
        assert other.data.role == "freelancer"
        assert missing.error_code == "ENTITY_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_freelancer_updates_rate_and_skills(self, store, people):
        request = UpdateProfileRequestDTO(bio="Frontend dev", hourly_rate=Decimal("60.00"), skills=["react", "css"])

        result = await UpdateProfileUseCase(store.profiles).execute(request, people.freelancer)

        assert result.success is True
        assert sorted(result.data.skills) == ["css", "react"]
        stored = store.profiles.find_by_id(people.freelancer.id)
        assert stored.bio == "Frontend dev"
        assert stored.hourly_rate == Decimal("60.00")
        assert stored.role == people.freelancer.role

    @pytest.mark.asyncio
    async def test_client_cannot_set_hourly_rate(self, store, people):
        request = UpdateProfileRequestDTO(hourly_rate=Decimal("60.00"))

        result = await UpdateProfileUseCase(store.profiles).execute(request, people.client)

        assert result.error_code == "VALIDATION_ERROR"
        assert store.profiles.find_by_id(people.client.id).hourly_rate is None

    @pytest.mark.asyncio
    async def test_capabilities(self, people):
        result = await GetCapabilitiesUseCase().execute(None, people.client)

        assert result.data.role == "client"
        assert "post_project" in result.data.capabilities
        assert "apply_to_project" not in result.data.capabilities


class TestDashboard:

    def _use_case(self, store):
        return GetDashboardStatsUseCase(store.projects, store.invoices, store.notifications, store.messages)

    @pytest.mark.asyncio
    async def test_empty_dashboard(self, store, people):
        result = await self._use_case(store).execute(None, people.freelancer)

        assert result.data.total_projects == 0
        assert result.data.unread_messages == 0
        assert result.data.total_earnings == Decimal("0")
        assert result.data.total_spent is None

    @pytest.mark.asyncio
    async def test_counts_for_both_sides(self, store, people, open_project):
        store.projects.claim(open_project.id, people.freelancer.id)
        store.projects.compare_and_set_status(open_project.id, ProjectStatus.IN_PROGRESS, ProjectStatus.IN_REVIEW)
        store.projects.compare_and_set_status(open_project.id, ProjectStatus.IN_REVIEW, ProjectStatus.COMPLETED)

        await SendMessageUseCase(store.projects, store.messages).execute(
            SendMessageCommand(open_project.id, SendMessageRequestDTO(content="Thanks!")), people.client
        )
        invoice = (await CreateInvoiceUseCase(store.projects, store.invoices).execute(
            CreateInvoiceCommand(open_project.id, CreateInvoiceRequestDTO(amount=Decimal("500.00"))),
            people.freelancer,
        )).data
        await MarkInvoicePaidUseCase(store.invoices).execute(invoice.id, people.client)

        freelancer_stats = (await self._use_case(store).execute(None, people.freelancer)).data
        client_stats = (await self._use_case(store).execute(None, people.client)).data

        assert freelancer_stats.total_projects == 1
        assert freelancer_stats.completed_projects == 1
        assert freelancer_stats.active_projects == 0
        assert freelancer_stats.unread_messages == 1
        assert freelancer_stats.total_earnings == Decimal("500.00")

        assert client_stats.unread_messages == 0
        assert client_stats.total_spent == Decimal("500.00")
        assert client_stats.total_earnings is None

    @pytest.mark.asyncio
    async def test_open_listings_not_counted_for_freelancers(self, store, people, open_project):
        freelancer_stats = (await self._use_case(store).execute(None, people.freelancer)).data
        client_stats = (await self._use_case(store).execute(None, people.client)).data

        assert freelancer_stats.total_projects == 0
        assert client_stats.total_projects == 1
        assert client_stats.open_projects == 1

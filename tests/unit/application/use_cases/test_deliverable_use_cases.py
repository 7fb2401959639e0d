"""
Unit tests for the submit/review cycle, run against the in-memory store.
"""

import pytest
from unittest.mock import Mock

from workportal.application.dto.deliverable_dto import (
    ReviewDeliverableRequestDTO,
    SubmitDeliverableRequestDTO,
)
from workportal.application.use_cases.deliverable_use_cases import (
    ListDeliverablesUseCase,
    ReviewDeliverableCommand,
    ReviewDeliverableUseCase,
    SubmitDeliverableCommand,
    SubmitDeliverableUseCase,
)
from workportal.domain.models.project import ProjectStatus
from workportal.infrastructure.events.event_setup import build_event_dispatcher


@pytest.fixture
def assigned_project(store, people, open_project):
    store.projects.claim(open_project.id, people.freelancer.id)
    return store.projects.find_by_id(open_project.id)


def submit_command(project_id, title="Homepage mockups"):
    return SubmitDeliverableCommand(
        project_id=project_id,
        data=SubmitDeliverableRequestDTO(title=title, file_url="https://files.example.com/v1.zip"),
    )


def review_command(deliverable_id, decision, feedback=None):
    return ReviewDeliverableCommand(
        deliverable_id=deliverable_id,
        data=ReviewDeliverableRequestDTO(decision=decision, feedback=feedback),
    )


class TestSubmitDeliverable:

    @pytest.mark.asyncio
    async def test_submit_moves_project_to_review(self, store, people, assigned_project):
        use_case = SubmitDeliverableUseCase(store.projects, store.deliverables)

        result = await use_case.execute(submit_command(assigned_project.id), people.freelancer)

        assert result.success is True
        assert result.data.version == 1
        assert result.data.status == "submitted"
        assert result.data.project.status == "in_review"
        assert store.projects.find_by_id(assigned_project.id).status == ProjectStatus.IN_REVIEW

    @pytest.mark.asyncio
    async def test_only_assignee_can_submit(self, store, people, assigned_project):
        use_case = SubmitDeliverableUseCase(store.projects, store.deliverables)

        assert (await use_case.execute(submit_command(assigned_project.id), people.other_freelancer)).error_code == "FORBIDDEN"
        assert (await use_case.execute(submit_command(assigned_project.id), people.client)).error_code == "FORBIDDEN"
        assert store.deliverables.find_by_project(assigned_project.id) == []

    @pytest.mark.asyncio
    async def test_cannot_submit_to_open_project(self, store, people, open_project):
        result = await SubmitDeliverableUseCase(store.projects, store.deliverables).execute(
            submit_command(open_project.id), people.freelancer
        )

        assert result.error_code == "FORBIDDEN"

    @pytest.mark.asyncio
    async def test_cannot_submit_twice_while_in_review(self, store, people, assigned_project):
        use_case = SubmitDeliverableUseCase(store.projects, store.deliverables)
        await use_case.execute(submit_command(assigned_project.id), people.freelancer)

        result = await use_case.execute(submit_command(assigned_project.id, "Again"), people.freelancer)

        assert result.error_code == "INVALID_STATE"
        assert len(store.deliverables.find_by_project(assigned_project.id)) == 1

    @pytest.mark.asyncio
    async def test_failed_insert_restores_in_progress(self, store, people, assigned_project):
        deliverables = Mock(wraps=store.deliverables)
        deliverables.create.side_effect = RuntimeError("insert failed")

        result = await SubmitDeliverableUseCase(store.projects, deliverables).execute(
            submit_command(assigned_project.id), people.freelancer
        )

        assert result.success is False
        assert result.error_code == "UNKNOWN_ERROR"
        assert store.projects.find_by_id(assigned_project.id).status == ProjectStatus.IN_PROGRESS

    @pytest.mark.asyncio
    async def test_submit_notifies_client(self, store, people, assigned_project):
        dispatcher = build_event_dispatcher(store.notifications)

        await SubmitDeliverableUseCase(store.projects, store.deliverables, dispatcher).execute(
            submit_command(assigned_project.id), people.freelancer
        )

        notifications = store.notifications.find_by_user(people.client.id)
        assert len(notifications) == 1
        assert notifications[0].type == "deliverable"
        assert notifications[0].message == (
            "Fiona Freelancer submitted version 1 for your project: Landing page"
        )


class TestReviewDeliverable:

    async def _submit(self, store, people, project_id):
        result = await SubmitDeliverableUseCase(store.projects, store.deliverables).execute(
            submit_command(project_id), people.freelancer
        )
        return result.data

    @pytest.mark.asyncio
    async def test_approval_completes_project(self, store, people, assigned_project):
        deliverable = await self._submit(store, people, assigned_project.id)
        use_case = ReviewDeliverableUseCase(store.projects, store.deliverables)

        result = await use_case.execute(review_command(deliverable.id, "approved", "Looks great"), people.client)

        assert result.success is True
        assert result.data.status == "approved"
        assert result.data.feedback == "Looks great"
        assert result.data.project.status == "completed"
        assert result.data.project.available_actions == []
        assert store.projects.find_by_id(assigned_project.id).status == ProjectStatus.COMPLETED

    @pytest.mark.asyncio
    async def test_revision_then_resubmit_increments_version(self, store, people, assigned_project):
        first = await self._submit(store, people, assigned_project.id)
        review = ReviewDeliverableUseCase(store.projects, store.deliverables)

        revision = await review.execute(
            review_command(first.id, "revision_requested", "Bigger logo"), people.client
        )
        assert revision.data.project.status == "in_progress"
        assert store.projects.find_by_id(assigned_project.id).freelancer_id == people.freelancer.id

        second = await self._submit(store, people, assigned_project.id)
        assert second.version == 2

        listed = await ListDeliverablesUseCase(store.projects, store.deliverables).execute(
            assigned_project.id, people.client
        )
        assert [d.version for d in listed.data] == [2, 1]
        assert [d.status for d in listed.data] == ["submitted", "revision_requested"]

    @pytest.mark.asyncio
    async def test_only_owner_can_review(self, store, people, assigned_project):
        deliverable = await self._submit(store, people, assigned_project.id)
        use_case = ReviewDeliverableUseCase(store.projects, store.deliverables)

        assert (await use_case.execute(review_command(deliverable.id, "approved"), people.freelancer)).error_code == "FORBIDDEN"
        assert (await use_case.execute(review_command(deliverable.id, "approved"), people.other_client)).error_code == "FORBIDDEN"
        assert store.projects.find_by_id(assigned_project.id).status == ProjectStatus.IN_REVIEW

    @pytest.mark.asyncio
    async def test_completed_project_rejects_further_changes(self, store, people, assigned_project):
        deliverable = await self._submit(store, people, assigned_project.id)
        review = ReviewDeliverableUseCase(store.projects, store.deliverables)
        await review.execute(review_command(deliverable.id, "approved"), people.client)

        again = await review.execute(review_command(deliverable.id, "revision_requested"), people.client)
        resubmit = await SubmitDeliverableUseCase(store.projects, store.deliverables).execute(
            submit_command(assigned_project.id), people.freelancer
        )

        assert again.error_code == "INVALID_STATE"
        assert resubmit.error_code == "INVALID_STATE"

    @pytest.mark.asyncio
    async def test_review_notifies_freelancer(self, store, people, assigned_project):
        deliverable = await self._submit(store, people, assigned_project.id)
        dispatcher = build_event_dispatcher(store.notifications)

        await ReviewDeliverableUseCase(store.projects, store.deliverables, dispatcher).execute(
            review_command(deliverable.id, "revision_requested", "Bigger logo"), people.client
        )

        notifications = store.notifications.find_by_user(people.freelancer.id)
        assert [n.title for n in notifications] == ["Revision Requested"]
        assert notifications[0].message.endswith(": Bigger logo")

    @pytest.mark.asyncio
    async def test_unknown_deliverable(self, store, people):
        result = await ReviewDeliverableUseCase(store.projects, store.deliverables).execute(
            review_command("missing", "approved"), people.client
        )

        assert result.error_code == "ENTITY_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_list_requires_participant(self, store, people, assigned_project):
        result = await ListDeliverablesUseCase(store.projects, store.deliverables).execute(
            assigned_project.id, people.other_freelancer
        )

        assert result.error_code == "FORBIDDEN"

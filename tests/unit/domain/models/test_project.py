"""
Unit tests for Project domain model.
"""

import pytest
from decimal import Decimal

from workportal.domain.models.base import ValidationError, InvalidStateError
from workportal.domain.models.project import Project, ProjectStatus, ProjectAction


def _project(**overrides):
    data = {
        "client_id": "client-1",
        "title": "Logo design",
        "description": "A logo for a coffee shop",
    }
    data.update(overrides)
    return Project(**data)


class TestProject:
    """Test cases for Project domain model."""

    def test_create_project_starts_open_and_unassigned(self):
        """A newly posted project is open with no freelancer."""
        project = Project.create(
            client_id="client-1",
            title="  Logo design  ",
            description="A logo for a coffee shop",
            budget=Decimal("300"),
        )

        assert project.status == ProjectStatus.OPEN
        assert project.freelancer_id is None
        assert project.title == "Logo design"
        assert project.budget == Decimal("300")

    def test_status_from_string(self):
        project = _project(status="in_progress", freelancer_id="f-1")
        assert project.status == ProjectStatus.IN_PROGRESS

    def test_blank_title_rejected(self):
        with pytest.raises(ValidationError, match="title is required"):
            _project(title="   ")

    def test_negative_budget_rejected(self):
        with pytest.raises(ValidationError, match="Budget cannot be negative"):
            _project(budget=Decimal("-1"))

    def test_open_project_cannot_have_freelancer(self):
        """Assignment invariant: open implies unassigned."""
        with pytest.raises(ValidationError):
            _project(status=ProjectStatus.OPEN, freelancer_id="f-1")

    @pytest.mark.parametrize("status", [ProjectStatus.IN_PROGRESS, ProjectStatus.IN_REVIEW, ProjectStatus.COMPLETED])
    def test_active_and_completed_projects_need_freelancer(self, status):
        """Assignment invariant: in_progress, in_review and completed require a freelancer."""
        with pytest.raises(ValidationError):
            _project(status=status)

    def test_cancelled_project_may_keep_or_lack_freelancer(self):
        assert _project(status=ProjectStatus.CANCELLED).freelancer_id is None
        assert _project(status=ProjectStatus.CANCELLED, freelancer_id="f-1").freelancer_id == "f-1"

    def test_assign_moves_to_in_progress(self):
        project = _project()

        project.assign("f-1")

        assert project.status == ProjectStatus.IN_PROGRESS
        assert project.freelancer_id == "f-1"
        assert project.version == 2

    def test_assign_twice_rejected(self):
        project = _project()
        project.assign("f-1")

        with pytest.raises(InvalidStateError):
            project.assign("f-2")
        assert project.freelancer_id == "f-1"

    def test_review_cycle_with_revision(self):
        """in_progress -> in_review -> in_progress -> in_review -> completed."""
        project = _project()
        project.assign("f-1")

        project.submit_for_review()
        assert project.status == ProjectStatus.IN_REVIEW

        project.request_revision()
        assert project.status == ProjectStatus.IN_PROGRESS

        project.submit_for_review()
        project.complete()
        assert project.status == ProjectStatus.COMPLETED
        assert project.accepts_invoices is True

    def test_completed_project_is_frozen(self):
        """No transition leaves a terminal state."""
        project = _project(status=ProjectStatus.COMPLETED, freelancer_id="f-1")

        for action in ProjectAction:
            with pytest.raises(InvalidStateError, match="no further changes"):
                project.transition_for(action)

    def test_cancel_from_open_and_in_progress(self):
        open_project = _project()
        open_project.cancel()
        assert open_project.status == ProjectStatus.CANCELLED

        started = _project()
        started.assign("f-1")
        started.cancel()
        assert started.status == ProjectStatus.CANCELLED
        assert started.freelancer_id == "f-1"

    def test_cancel_from_in_review_rejected(self):
        project = _project(status=ProjectStatus.IN_REVIEW, freelancer_id="f-1")

        with pytest.raises(InvalidStateError, match="Cannot cancel a project that is in review"):
            project.cancel()

    def test_submit_from_open_rejected(self):
        with pytest.raises(InvalidStateError):
            _project().submit_for_review()

    def test_participants(self):
        project = _project(status=ProjectStatus.IN_PROGRESS, freelancer_id="f-1")

        assert project.is_participant("client-1")
        assert project.is_participant("f-1")
        assert not project.is_participant("f-2")
        assert not _project().is_assigned_to("f-1")

    def test_accepts_invoices_only_when_completed(self):
        assert _project().accepts_invoices is False
        assert _project(status=ProjectStatus.IN_REVIEW, freelancer_id="f-1").accepts_invoices is False

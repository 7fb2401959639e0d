"""
Unit tests for VisibilityService.
"""

import pytest
from decimal import Decimal

from workportal.domain.models.base import ForbiddenError
from workportal.domain.models.invoice import Invoice
from workportal.domain.models.notification import Notification, NotificationType
from workportal.domain.models.profile import Profile, UserRole
from workportal.domain.models.project import Project, ProjectStatus
from workportal.domain.services.visibility_service import ProjectScope, VisibilityService


class TestVisibilityService:
    """Test cases for read-side authorization."""

    def setup_method(self):
        self.service = VisibilityService()
        self.client = Profile.create("client-1", "Carla", UserRole.CLIENT)
        self.other_client = Profile.create("client-2", "Oscar", UserRole.CLIENT)
        self.freelancer = Profile.create("free-1", "Fiona", UserRole.FREELANCER)
        self.other_freelancer = Profile.create("free-2", "Frank", UserRole.FREELANCER)

        self.open_project = Project(client_id="client-1", title="Open", description="d")
        self.assigned = Project(
            client_id="client-1", title="Assigned", description="d",
            status=ProjectStatus.IN_PROGRESS, freelancer_id="free-1",
        )
        self.foreign = Project(
            client_id="client-2", title="Foreign", description="d",
            status=ProjectStatus.IN_REVIEW, freelancer_id="free-2",
        )

    def test_client_scope(self):
        scope = self.service.project_scope(self.client)

        assert scope == ProjectScope(client_id="client-1")
        assert scope.matches(self.open_project)
        assert scope.matches(self.assigned)
        assert not scope.matches(self.foreign)

    def test_freelancer_scope_includes_open_projects(self):
        scope = self.service.project_scope(self.other_freelancer)

        assert scope.matches(self.open_project)
        assert scope.matches(self.foreign)
        assert not scope.matches(self.assigned)

    def test_engagement_scope_excludes_open_listings(self):
        scope = self.service.engagement_scope(self.freelancer)

        assert scope.matches(self.assigned)
        assert not scope.matches(self.open_project)

    def test_empty_scope_matches_nothing(self):
        assert not ProjectScope().matches(self.open_project)

    def test_filter_projects(self):
        projects = [self.open_project, self.assigned, self.foreign]
        assert self.service.filter_projects(self.other_client, projects) == [self.foreign]

    def test_require_project_visible(self):
        self.service.require_project_visible(self.freelancer, self.open_project)
        with pytest.raises(ForbiddenError):
            self.service.require_project_visible(self.freelancer, self.foreign)

    def test_open_project_visible_but_not_participant(self):
        """Freelancers can browse an open project but not its thread."""
        self.service.require_project_visible(self.freelancer, self.open_project)
        with pytest.raises(ForbiddenError):
            self.service.require_participant(self.freelancer, self.open_project)

    def test_require_participant(self):
        self.service.require_participant(self.client, self.assigned)
        self.service.require_participant(self.freelancer, self.assigned)
        with pytest.raises(ForbiddenError):
            self.service.require_participant(self.other_client, self.assigned)

    def test_require_invoice_visible(self):
        invoice = Invoice(project_id="p", client_id="client-1", freelancer_id="free-1", amount=Decimal("10"))

        self.service.require_invoice_visible(self.client, invoice)
        self.service.require_invoice_visible(self.freelancer, invoice)
        with pytest.raises(ForbiddenError):
            self.service.require_invoice_visible(self.other_freelancer, invoice)

    def test_require_notification_owner(self):
        notification = Notification(
            user_id="client-1", title="t", message="m", type=NotificationType.INVOICE
        )

        assert notification.type == "invoice"
        self.service.require_notification_owner(self.client, notification)
        with pytest.raises(ForbiddenError):
            self.service.require_notification_owner(self.other_client, notification)

"""
Visibility service.
Determines which projects, and which project-scoped records, a profile may see.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional

from workportal.domain.models.base import ForbiddenError
from workportal.domain.models.invoice import Invoice
from workportal.domain.models.notification import Notification
from workportal.domain.models.profile import Profile
from workportal.domain.models.project import Project, ProjectStatus


@dataclass(frozen=True)
class ProjectScope:
    """
    Union of the predicates that make a project visible.
    A project matches if any configured predicate matches.
    """

    client_id: Optional[str] = None
    freelancer_id: Optional[str] = None
    include_open: bool = False

    def matches(self, project: Project) -> bool:
        if self.client_id is not None and project.client_id == self.client_id:
            return True
        if self.include_open and project.status == ProjectStatus.OPEN:
            return True
        if self.freelancer_id is not None and project.freelancer_id == self.freelancer_id:
            return True
        return False


class VisibilityService:
    """Read-side authorization for projects and the records attached to them."""

    def project_scope(self, viewer: Profile) -> ProjectScope:
        """
        Clients see the projects they posted. Freelancers see every open project
        plus the ones assigned to them.
        """
        if viewer.is_client:
            return ProjectScope(client_id=viewer.id)
        return ProjectScope(freelancer_id=viewer.id, include_open=True)

    def engagement_scope(self, viewer: Profile) -> ProjectScope:
        """Projects the viewer is a participant of (no open marketplace listings)."""
        if viewer.is_client:
            return ProjectScope(client_id=viewer.id)
        return ProjectScope(freelancer_id=viewer.id)

    def can_view_project(self, viewer: Profile, project: Project) -> bool:
        return self.project_scope(viewer).matches(project)

    def filter_projects(self, viewer: Profile, projects: Iterable[Project]) -> List[Project]:
        scope = self.project_scope(viewer)
        return [project for project in projects if scope.matches(project)]

    def require_project_visible(self, viewer: Profile, project: Project) -> None:
        if not self.can_view_project(viewer, project):
            raise ForbiddenError("You do not have access to this project")

    def is_participant(self, viewer: Profile, project: Project) -> bool:
        return project.is_participant(viewer.id)

    def require_participant(self, viewer: Profile, project: Project) -> None:
        """Messages, deliverables and invoices are only for the client and the assigned freelancer."""
        if not self.is_participant(viewer, project):
            raise ForbiddenError("Only the project's client and assigned freelancer have access")

    def require_invoice_visible(self, viewer: Profile, invoice: Invoice) -> None:
        if not invoice.is_party(viewer.id):
            raise ForbiddenError("You do not have access to this invoice")

    def require_notification_owner(self, viewer: Profile, notification: Notification) -> None:
        if not notification.belongs_to(viewer.id):
            raise ForbiddenError("You do not have access to this notification")

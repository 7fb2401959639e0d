"""
Project repository interface.
Defines the contract for project persistence, including the guarded status
updates the lifecycle relies on.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from workportal.domain.models.project import Project, ProjectStatus
from workportal.domain.services.visibility_service import ProjectScope


class ProjectRepository(ABC):
    """
    Repository interface for Project aggregate.

    Status and assignment are never written with a plain update. They go through
    `claim` and `compare_and_set_status`, which return False when the row no
    longer matches the expected state.
    """

    @abstractmethod
    def create(self, project: Project) -> Project:
        """Insert a newly posted project."""
        pass

    @abstractmethod
    def find_by_id(self, project_id: str) -> Optional[Project]:
        """
        Find a project by its ID.
        Returns None if not found.
        """
        pass

    @abstractmethod
    def find_in_scope(
        self,
        scope: ProjectScope,
        status: Optional[ProjectStatus] = None,
        limit: Optional[int] = None,
        offset: int = 0
    ) -> List[Project]:
        """
        Find projects matching any predicate of the scope, newest first.
        """
        pass

    @abstractmethod
    def count_by_status(self, scope: ProjectScope) -> Dict[ProjectStatus, int]:
        """Count projects in scope, grouped by status."""
        pass

    @abstractmethod
    def claim(self, project_id: str, freelancer_id: str) -> bool:
        """
        Assign a freelancer and move the project to in_progress, only if it is
        still open and unassigned. Returns True when exactly one row changed.
        """
        pass

    @abstractmethod
    def compare_and_set_status(
        self,
        project_id: str,
        expected_status: ProjectStatus,
        new_status: ProjectStatus,
        expected_freelancer_id: Optional[str] = None
    ) -> bool:
        """
        Move the project to new_status only if its status is still
        expected_status (and, when given, its freelancer is expected_freelancer_id).
        Returns True when exactly one row changed.
        """
        pass

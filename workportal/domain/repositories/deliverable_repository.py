"""
Deliverable repository interface.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from workportal.domain.models.deliverable import Deliverable, DeliverableStatus


class DeliverableRepository(ABC):
    """Repository interface for deliverables."""

    @abstractmethod
    def create(self, deliverable: Deliverable) -> Deliverable:
        """
        Insert a deliverable.
        Raises ConflictError if the version already exists for the project and freelancer.
        """
        pass

    @abstractmethod
    def find_by_id(self, deliverable_id: str) -> Optional[Deliverable]:
        pass

    @abstractmethod
    def find_by_project(self, project_id: str) -> List[Deliverable]:
        """All deliverables for a project, highest version first."""
        pass

    @abstractmethod
    def latest_version(self, project_id: str, freelancer_id: str) -> int:
        """Highest version submitted by the freelancer on the project, 0 if none."""
        pass

    @abstractmethod
    def record_review(self, deliverable: Deliverable, expected_status: DeliverableStatus) -> bool:
        """
        Persist status, feedback and reviewed_at only if the stored status is still
        expected_status. Returns True when exactly one row changed.
        """
        pass

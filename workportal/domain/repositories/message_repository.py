"""
Message repository interface.
Messages are append-only: the only update is the read flag.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from workportal.domain.models.message import Message
from workportal.domain.services.visibility_service import ProjectScope


class MessageRepository(ABC):
    """Repository interface for project messages."""

    @abstractmethod
    def create(self, message: Message) -> Message:
        pass

    @abstractmethod
    def find_by_id(self, message_id: str) -> Optional[Message]:
        pass

    @abstractmethod
    def find_by_project(
        self,
        project_id: str,
        limit: Optional[int] = None,
        offset: int = 0
    ) -> List[Message]:
        """Messages for a project, oldest first."""
        pass

    @abstractmethod
    def mark_read(self, message_id: str) -> None:
        pass

    @abstractmethod
    def count_unread_for_recipient(self, scope: ProjectScope, recipient_id: str) -> int:
        """Unread messages on projects in scope that were not sent by the recipient."""
        pass

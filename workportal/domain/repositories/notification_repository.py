"""
Notification repository interface.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from workportal.domain.models.notification import Notification


class NotificationRepository(ABC):
    """Repository interface for notifications."""

    @abstractmethod
    def create(self, notification: Notification) -> Notification:
        pass

    @abstractmethod
    def find_by_id(self, notification_id: str) -> Optional[Notification]:
        pass

    @abstractmethod
    def find_by_user(
        self,
        user_id: str,
        unread_only: bool = False,
        limit: Optional[int] = None,
        offset: int = 0
    ) -> List[Notification]:
        """Notifications for a recipient, newest first."""
        pass

    @abstractmethod
    def mark_read(self, notification_id: str) -> None:
        pass

    @abstractmethod
    def mark_all_read(self, user_id: str) -> int:
        """Mark every unread notification of the recipient as read. Returns how many changed."""
        pass

    @abstractmethod
    def count_unread(self, user_id: str) -> int:
        pass

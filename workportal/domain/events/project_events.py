"""
Domain events related to the project lifecycle.
"""

from typing import Dict, Any

from .base import DomainEvent


class ProjectApplied(DomainEvent):
    """Event fired when a freelancer claims an open project."""

    def __init__(self,
                 project_id: str,
                 project_title: str,
                 client_id: str,
                 freelancer_id: str,
                 freelancer_name: str,
                 **kwargs):
        super().__init__(**kwargs)
        self.project_id = project_id
        self.project_title = project_title
        self.client_id = client_id
        self.freelancer_id = freelancer_id
        self.freelancer_name = freelancer_name

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "project_id": self.project_id,
            "project_title": self.project_title,
            "client_id": self.client_id,
            "freelancer_id": self.freelancer_id,
            "freelancer_name": self.freelancer_name,
        }


class ProjectCancelled(DomainEvent):
    """Event fired when the owning client cancels a project."""

    def __init__(self,
                 project_id: str,
                 client_id: str,
                 previous_status: str,
                 **kwargs):
        super().__init__(**kwargs)
        self.project_id = project_id
        self.client_id = client_id
        self.previous_status = previous_status

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "project_id": self.project_id,
            "client_id": self.client_id,
            "previous_status": self.previous_status,
        }

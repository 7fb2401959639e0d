"""
Domain events related to deliverables.
"""

from typing import Dict, Any, Optional

from .base import DomainEvent


class DeliverableSubmitted(DomainEvent):
    """Event fired when the assigned freelancer submits work for review."""

    def __init__(self,
                 deliverable_id: str,
                 project_id: str,
                 project_title: str,
                 client_id: str,
                 freelancer_id: str,
                 freelancer_name: str,
                 deliverable_version: int,
                 **kwargs):
        super().__init__(**kwargs)
        self.deliverable_id = deliverable_id
        self.project_id = project_id
        self.project_title = project_title
        self.client_id = client_id
        self.freelancer_id = freelancer_id
        self.freelancer_name = freelancer_name
        self.deliverable_version = deliverable_version

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "deliverable_id": self.deliverable_id,
            "project_id": self.project_id,
            "project_title": self.project_title,
            "client_id": self.client_id,
            "freelancer_id": self.freelancer_id,
            "freelancer_name": self.freelancer_name,
            "deliverable_version": self.deliverable_version,
        }


class DeliverableReviewed(DomainEvent):
    """Event fired when the client approves a deliverable or asks for a revision."""

    def __init__(self,
                 deliverable_id: str,
                 project_id: str,
                 project_title: str,
                 freelancer_id: str,
                 decision: str,
                 feedback: Optional[str] = None,
                 **kwargs):
        super().__init__(**kwargs)
        self.deliverable_id = deliverable_id
        self.project_id = project_id
        self.project_title = project_title
        self.freelancer_id = freelancer_id
        self.decision = decision
        self.feedback = feedback

    @property
    def approved(self) -> bool:
        return self.decision == "approved"

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "deliverable_id": self.deliverable_id,
            "project_id": self.project_id,
            "project_title": self.project_title,
            "freelancer_id": self.freelancer_id,
            "decision": self.decision,
            "feedback": self.feedback,
        }

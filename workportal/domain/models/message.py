"""
Message domain model.
Messages are append-only; the only change ever made is the recipient marking it read.
"""

from dataclasses import dataclass

from workportal.domain.models.base import BaseEntity, ValidationError


@dataclass
class Message(BaseEntity):

    project_id: str = ""
    sender_id: str = ""
    content: str = ""
    read: bool = False

    def __post_init__(self):
        super().__post_init__()
        self.validate()

    def validate(self) -> None:
        if not self.project_id:
            raise ValidationError("Project ID is required", "project_id")
        if not self.sender_id:
            raise ValidationError("Sender ID is required", "sender_id")
        if not self.content or not self.content.strip():
            raise ValidationError("Message content cannot be empty", "content")

    def is_recipient(self, profile_id: str) -> bool:
        return profile_id != self.sender_id

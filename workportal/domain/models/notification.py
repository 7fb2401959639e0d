"""
Notification domain model.
Created only as a side effect of lifecycle events; only the read flag ever changes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from workportal.domain.models.base import BaseEntity, ValidationError


class NotificationType(str, Enum):
    APPLICATION = "application"
    DELIVERABLE = "deliverable"
    REVIEW = "review"
    INVOICE = "invoice"


@dataclass
class Notification(BaseEntity):

    user_id: str = ""
    title: str = ""
    message: str = ""
    type: str = ""
    link: Optional[str] = None
    read: bool = False

    def __post_init__(self):
        super().__post_init__()
        if isinstance(self.type, NotificationType):
            self.type = self.type.value
        self.validate()

    def validate(self) -> None:
        if not self.user_id:
            raise ValidationError("Recipient is required", "user_id")
        if not self.title:
            raise ValidationError("Notification title is required", "title")
        if not self.message:
            raise ValidationError("Notification message is required", "message")
        if not self.type:
            raise ValidationError("Notification type is required", "type")

    def belongs_to(self, profile_id: str) -> bool:
        return self.user_id == profile_id

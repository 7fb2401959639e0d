"""
Message DTOs for the application layer.
"""

from pydantic import Field

from workportal.domain.models.message import Message
from .base_dto import RequestDTO, ResponseDTO, PageRequestDTO


class SendMessageRequestDTO(RequestDTO):
    content: str = Field(min_length=1, description="Message text")


class ListMessagesRequestDTO(PageRequestDTO):
    limit: int = Field(default=100, ge=1, le=500, description="Maximum number of messages")


class MessageResponseDTO(ResponseDTO):
    project_id: str
    sender_id: str
    content: str
    read: bool

    @classmethod
    def from_domain(cls, message: Message) -> "MessageResponseDTO":
        return cls(
            id=message.id,
            created_at=message.created_at,
            project_id=message.project_id,
            sender_id=message.sender_id,
            content=message.content,
            read=message.read,
        )

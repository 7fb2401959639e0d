"""
Message mapper for converting between domain entities and storage records.
"""

from typing import Any, Dict

from workportal.domain.models.message import Message
from workportal.infrastructure.db.models import MessageModel
from .base_mapper import to_utc, iso


class MessageMapper:

    def domain_to_model(self, message: Message) -> MessageModel:
        return MessageModel(
            id=message.id,
            project_id=message.project_id,
            sender_id=message.sender_id,
            content=message.content,
            read=message.read,
            created_at=message.created_at,
        )

    def model_to_domain(self, model: MessageModel) -> Message:
        created_at = to_utc(model.created_at)
        return Message(
            id=model.id,
            project_id=model.project_id,
            sender_id=model.sender_id,
            content=model.content,
            read=bool(model.read),
            created_at=created_at,
            updated_at=created_at,
        )

    def row_to_domain(self, row: Dict[str, Any]) -> Message:
        created_at = to_utc(row.get("created_at"))
        return Message(
            id=row["id"],
            project_id=row["project_id"],
            sender_id=row["sender_id"],
            content=row.get("content") or "",
            read=bool(row.get("read")),
            created_at=created_at,
            updated_at=created_at,
        )

    def domain_to_row(self, message: Message) -> Dict[str, Any]:
        return {
            "id": message.id,
            "project_id": message.project_id,
            "sender_id": message.sender_id,
            "content": message.content,
            "read": message.read,
            "created_at": iso(message.created_at),
        }

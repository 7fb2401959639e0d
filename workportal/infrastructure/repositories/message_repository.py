"""
Message repository implementations.
"""

from typing import List, Optional

from workportal.domain.models.message import Message
from workportal.domain.repositories.message_repository import MessageRepository
from workportal.domain.services.visibility_service import ProjectScope
from workportal.infrastructure.db.models import MessageModel, ProjectModel
from workportal.infrastructure.mappers.message_mapper import MessageMapper
from .base import SQLAlchemyRepository, SupabaseRepository
from .project_repository import SupabaseProjectRepository, scope_clause


class SQLAlchemyMessageRepository(SQLAlchemyRepository, MessageRepository):
    """SQLAlchemy implementation of message repository."""

    entity_name = "Message"

    def __init__(self, session):
        super().__init__(session)
        self.mapper = MessageMapper()

    def create(self, message: Message) -> Message:
        self._insert(self.mapper.domain_to_model(message))
        return message

    def find_by_id(self, message_id: str) -> Optional[Message]:
        with self._translate_errors():
            model = self.session.query(MessageModel).filter_by(id=message_id).first()
        return self.mapper.model_to_domain(model) if model else None

    def find_by_project(
        self,
        project_id: str,
        limit: Optional[int] = None,
        offset: int = 0
    ) -> List[Message]:
        query = (
            self.session.query(MessageModel)
            .filter(MessageModel.project_id == project_id)
            .order_by(MessageModel.created_at.asc())
        )
        if offset:
            query = query.offset(offset)
        if limit:
            query = query.limit(limit)

        with self._translate_errors():
            models = query.all()
        return [self.mapper.model_to_domain(m) for m in models]

    def mark_read(self, message_id: str) -> None:
        with self._translate_errors():
            self.session.query(MessageModel).filter(MessageModel.id == message_id).update(
                {MessageModel.read: True}, synchronize_session="fetch"
            )

    def count_unread_for_recipient(self, scope: ProjectScope, recipient_id: str) -> int:
        with self._translate_errors():
            return (
                self.session.query(MessageModel)
                .join(ProjectModel, MessageModel.project_id == ProjectModel.id)
                .filter(
                    scope_clause(scope),
                    MessageModel.sender_id != recipient_id,
                    MessageModel.read.is_(False),
                )
                .count()
            )


class SupabaseMessageRepository(SupabaseRepository, MessageRepository):
    """PostgREST implementation of message repository."""

    table_name = "messages"
    entity_name = "Message"

    def __init__(self, client):
        super().__init__(client)
        self.mapper = MessageMapper()

    def create(self, message: Message) -> Message:
        response = self._execute(self._table().insert(self.mapper.domain_to_row(message)))
        row = self._single(response)
        return self.mapper.row_to_domain(row) if row else message

    def find_by_id(self, message_id: str) -> Optional[Message]:
        response = self._execute(self._table().select("*").eq("id", message_id).limit(1))
        row = self._single(response)
        return self.mapper.row_to_domain(row) if row else None

    def find_by_project(
        self,
        project_id: str,
        limit: Optional[int] = None,
        offset: int = 0
    ) -> List[Message]:
        query = self._table().select("*").eq("project_id", project_id).order("created_at")
        if limit:
            query = query.range(offset, offset + limit - 1)
        elif offset:
            query = query.offset(offset)
        response = self._execute(query)
        return [self.mapper.row_to_domain(row) for row in response.data or []]

    def mark_read(self, message_id: str) -> None:
        self._execute(self._table().update({"read": True}).eq("id", message_id))

    def count_unread_for_recipient(self, scope: ProjectScope, recipient_id: str) -> int:
        predicate = SupabaseProjectRepository.scope_predicate(scope)
        if predicate is None:
            return 0
        # The inner embed drops messages whose project falls outside the scope
        response = self._execute(
            self._table()
            .select("id, projects!inner(id)", count="exact", head=True)
            .or_(predicate, reference_table="projects")
            .neq("sender_id", recipient_id)
            .eq("read", False)
        )
        return response.count or 0

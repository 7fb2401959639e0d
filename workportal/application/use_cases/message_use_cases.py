"""
Message use cases for the application layer.
Messages belong to a project and are only visible to its client and assigned freelancer.
"""

import logging
from dataclasses import dataclass
from typing import List

from workportal.application.use_cases.base_use_case import (
    AuthorizedUseCase,
    CommandUseCase,
    PaginatedQueryUseCase,
)
from workportal.application.use_cases.project_use_cases import load_project
from workportal.application.dto.message_dto import (
    SendMessageRequestDTO,
    ListMessagesRequestDTO,
    MessageResponseDTO,
)
from workportal.domain.models.base import EntityNotFoundError, ForbiddenError
from workportal.domain.models.message import Message
from workportal.domain.models.profile import Capability, Profile
from workportal.domain.repositories.message_repository import MessageRepository
from workportal.domain.repositories.project_repository import ProjectRepository
from workportal.domain.services.visibility_service import VisibilityService
from workportal.infrastructure.validation.validators import clean_text


logger = logging.getLogger(__name__)


@dataclass
class SendMessageCommand:
    project_id: str
    data: SendMessageRequestDTO


@dataclass
class ListMessagesQuery:
    project_id: str
    page: ListMessagesRequestDTO


class SendMessageUseCase(AuthorizedUseCase, CommandUseCase[SendMessageCommand, MessageResponseDTO]):
    """A participant posts a message on the project thread."""

    def __init__(
        self,
        project_repository: ProjectRepository,
        message_repository: MessageRepository,
        max_length: int = 5000
    ):
        super().__init__()
        self.project_repository = project_repository
        self.message_repository = message_repository
        self.max_length = max_length
        self.visibility = VisibilityService()

    async def _execute_command_logic(self, request: SendMessageCommand, actor: Profile) -> MessageResponseDTO:
        project = load_project(self.project_repository, request.project_id)
        if not actor.can(Capability.SEND_MESSAGE):
            raise ForbiddenError("Your role cannot send messages")
        self.visibility.require_participant(actor, project)

        content = clean_text(request.data.content, max_length=self.max_length, field="content")
        message = Message(project_id=project.id, sender_id=actor.id, content=content)
        message.ensure_id()

        saved = self.message_repository.create(message)
        logger.info(f"Message {saved.id} posted on project {project.id}")
        return MessageResponseDTO.from_domain(saved)


class ListProjectMessagesUseCase(AuthorizedUseCase, PaginatedQueryUseCase[ListMessagesQuery, List[MessageResponseDTO]]):
    """The project thread, oldest first. Participants only."""

    def __init__(self, project_repository: ProjectRepository, message_repository: MessageRepository):
        super().__init__(max_page_size=500)
        self.project_repository = project_repository
        self.message_repository = message_repository
        self.visibility = VisibilityService()

    async def _execute_business_logic(self, request: ListMessagesQuery, actor: Profile) -> List[MessageResponseDTO]:
        project = load_project(self.project_repository, request.project_id)
        self.visibility.require_participant(actor, project)

        messages = self.message_repository.find_by_project(
            project.id, limit=request.page.limit, offset=request.page.offset
        )
        return [MessageResponseDTO.from_domain(m) for m in messages]


class MarkMessageReadUseCase(AuthorizedUseCase, CommandUseCase[str, MessageResponseDTO]):
    """The recipient marks a message read. The sender cannot mark their own message."""

    def __init__(self, project_repository: ProjectRepository, message_repository: MessageRepository):
        super().__init__()
        self.project_repository = project_repository
        self.message_repository = message_repository
        self.visibility = VisibilityService()

    async def _execute_command_logic(self, request: str, actor: Profile) -> MessageResponseDTO:
        message = self.message_repository.find_by_id(request)
        if message is None:
            raise EntityNotFoundError("Message", request)

        project = load_project(self.project_repository, message.project_id)
        self.visibility.require_participant(actor, project)
        if not message.is_recipient(actor.id):
            raise ForbiddenError("Only the recipient can mark a message as read")

        if not message.read:
            self.message_repository.mark_read(message.id)
            message.read = True
        return MessageResponseDTO.from_domain(message)

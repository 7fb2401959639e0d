"""
Unit tests for in-app notifications.
"""

import pytest

from workportal.application.dto.notification_dto import ListNotificationsRequestDTO
from workportal.application.use_cases.notification_use_cases import (
    CountUnreadNotificationsUseCase,
    ListNotificationsUseCase,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadUseCase,
)
from workportal.application.use_cases.project_use_cases import ApplyToProjectUseCase
from workportal.domain.models.notification import Notification, NotificationType
from workportal.infrastructure.events.event_setup import build_event_dispatcher


class TestNotifications:

    async def _apply(self, store, people, project_id):
        dispatcher = build_event_dispatcher(store.notifications)
        await ApplyToProjectUseCase(store.projects, dispatcher).execute(project_id, people.freelancer)

    @pytest.mark.asyncio
    async def test_application_notifies_client(self, store, people, open_project):
        await self._apply(store, people, open_project.id)

        result = await ListNotificationsUseCase(store.notifications).execute(
            ListNotificationsRequestDTO(), people.client
        )

        assert len(result.data) == 1
        notification = result.data[0]
        assert notification.title == "Project Application"
        assert notification.message == "Fiona Freelancer has applied to your project: Landing page"
        assert notification.type == "application"
        assert notification.link == f"/projects/{open_project.id}"
        assert notification.read is False

    @pytest.mark.asyncio
    async def test_only_owner_marks_read(self, store, people, open_project):
        await self._apply(store, people, open_project.id)
        notification = store.notifications.find_by_user(people.client.id)[0]
        mark_read = MarkNotificationReadUseCase(store.notifications)

        assert (await mark_read.execute(notification.id, people.freelancer)).error_code == "FORBIDDEN"

        result = await mark_read.execute(notification.id, people.client)
        assert result.data.read is True

        count = await CountUnreadNotificationsUseCase(store.notifications).execute(None, people.client)
        assert count.data == 0

    @pytest.mark.asyncio
    async def test_mark_all_read(self, store, people, open_project):
        await self._apply(store, people, open_project.id)

        result = await MarkAllNotificationsReadUseCase(store.notifications).execute(None, people.client)
        again = await MarkAllNotificationsReadUseCase(store.notifications).execute(None, people.client)
        unread = await ListNotificationsUseCase(store.notifications).execute(
            ListNotificationsRequestDTO(unread_only=True), people.client
        )

        assert result.data == 1
        assert again.data == 0
        assert unread.data == []

    @pytest.mark.asyncio
    async def test_unknown_notification(self, store, people):
        result = await MarkNotificationReadUseCase(store.notifications).execute("missing", people.client)

        assert result.error_code == "ENTITY_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_configured_page_size(self, store, people, open_project):
        await self._apply(store, people, open_project.id)
        store.notifications.create(Notification(
            user_id=people.client.id, title="Reminder", message="Check your projects", type=NotificationType.REVIEW
        ))
        use_case = ListNotificationsUseCase(store.notifications, default_page_size=1, max_page_size=3)

        page = await use_case.execute(ListNotificationsRequestDTO(), people.client)
        too_big = await use_case.execute(ListNotificationsRequestDTO(limit=4), people.client)

        assert len(page.data) == 1
        assert too_big.error_code == "VALIDATION_ERROR"

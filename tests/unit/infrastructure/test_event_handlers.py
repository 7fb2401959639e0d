"""
Unit tests for the notification event handlers.
"""

import pytest
from decimal import Decimal
from unittest.mock import Mock

from workportal.domain.events.deliverable_events import DeliverableReviewed, DeliverableSubmitted
from workportal.domain.events.invoice_events import InvoiceCreated, InvoicePaid
from workportal.domain.events.project_events import ProjectApplied
from workportal.infrastructure.events.event_setup import build_event_dispatcher
from workportal.infrastructure.events.notification_handlers import NotificationEventHandler


class TestNotificationEventHandler:

    def setup_method(self):
        self.repository = Mock()
        self.handler = NotificationEventHandler(self.repository)

    def test_application(self):
        event = ProjectApplied(
            project_id="p1", project_title="Logo", client_id="c1", freelancer_id="f1", freelancer_name="Fiona"
        )

        notification = self.handler.build_notification(event)

        assert notification.user_id == "c1"
        assert notification.title == "Project Application"
        assert notification.message == "Fiona has applied to your project: Logo"
        assert notification.type == "application"
        assert notification.link == "/projects/p1"

    def test_approved_review(self):
        event = DeliverableReviewed(
            deliverable_id="d1", project_id="p1", project_title="Logo", freelancer_id="f1", decision="approved"
        )

        notification = self.handler.build_notification(event)

        assert notification.user_id == "f1"
        assert notification.title == "Deliverable Approved"
        assert notification.type == "review"

    def test_revision_with_feedback(self):
        event = DeliverableReviewed(
            deliverable_id="d1", project_id="p1", project_title="Logo", freelancer_id="f1",
            decision="revision_requested", feedback="Use the brand colours",
        )

        notification = self.handler.build_notification(event)

        assert notification.title == "Revision Requested"
        assert notification.message.endswith(": Use the brand colours")

    def test_invoice(self):
        event = InvoiceCreated(
            invoice_id="i1", project_id="p1", project_title="Logo", client_id="c1",
            freelancer_id="f1", freelancer_name="Fiona", amount=Decimal("250.00"),
        )

        notification = self.handler.build_notification(event)

        assert notification.link == "/invoices/i1"
        assert notification.message == "Fiona sent you an invoice for 250.00 on Logo"

    def test_non_notifying_event(self):
        event = InvoicePaid(invoice_id="i1", project_id="p1", client_id="c1", freelancer_id="f1", amount=Decimal("1"))

        assert self.handler.can_handle(event) is False
        assert self.handler.build_notification(event) is None

    @pytest.mark.asyncio
    async def test_handle_persists_with_id(self):
        event = DeliverableSubmitted(
            deliverable_id="d1", project_id="p1", project_title="Logo", client_id="c1",
            freelancer_id="f1", freelancer_name="Fiona", deliverable_version=3,
        )

        await self.handler.handle(event)

        saved = self.repository.create.call_args.args[0]
        assert saved.id is not None
        assert saved.message == "Fiona submitted version 3 for your project: Logo"


class TestEventSetup:

    def test_handlers_registered(self):
        dispatcher = build_event_dispatcher(Mock())

        handlers = dispatcher.get_registered_handlers()

        assert handlers["global"] == ["LoggingEventHandler"]
        for event_type in ("ProjectApplied", "DeliverableSubmitted", "DeliverableReviewed", "InvoiceCreated"):
            assert handlers[event_type] == ["NotificationEventHandler"]

    @pytest.mark.asyncio
    async def test_failing_repository_is_contained(self):
        repository = Mock()
        repository.create.side_effect = RuntimeError("store down")
        dispatcher = build_event_dispatcher(repository)

        await dispatcher.dispatch(ProjectApplied(
            project_id="p1", project_title="Logo", client_id="c1", freelancer_id="f1", freelancer_name="Fiona"
        ))

        repository.create.assert_called_once()

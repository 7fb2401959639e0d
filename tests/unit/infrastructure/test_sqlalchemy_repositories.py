"""
Unit tests for the SQLAlchemy repositories against in-memory SQLite.
"""

import pytest
from decimal import Decimal

from workportal.domain.models.base import ConflictError, utcnow
from workportal.domain.models.deliverable import Deliverable, DeliverableStatus, ReviewDecision
from workportal.domain.models.invoice import Invoice
from workportal.domain.models.message import Message
from workportal.domain.models.profile import Profile, ProfileSummary, UserRole
from workportal.domain.models.project import ProjectStatus
from workportal.domain.services.visibility_service import ProjectScope


class TestProjectRepository:

    def test_round_trip(self, store, open_project):
        stored = store.projects.find_by_id(open_project.id)

        assert stored.title == "Landing page"
        assert stored.budget == Decimal("1200.00")
        assert stored.status == ProjectStatus.OPEN
        assert stored.created_at.tzinfo is not None

    def test_reads_carry_client_summary(self, store, people, open_project):
        stored = store.projects.find_by_id(open_project.id)
        listed = store.projects.find_in_scope(ProjectScope(include_open=True))

        assert stored.client == ProfileSummary(full_name="Carla Client", avatar_url=None)
        assert [p.client.full_name for p in listed] == ["Carla Client"]

    def test_offset_without_limit(self, store, people, open_project):
        scope = ProjectScope(client_id=people.client.id)

        assert [p.id for p in store.projects.find_in_scope(scope, offset=0)] == [open_project.id]
        assert store.projects.find_in_scope(scope, offset=1) == []

    def test_claim_succeeds_once(self, store, people, open_project):
        assert store.projects.claim(open_project.id, people.freelancer.id) is True
        assert store.projects.claim(open_project.id, people.other_freelancer.id) is False

        stored = store.projects.find_by_id(open_project.id)
        assert stored.freelancer_id == people.freelancer.id
        assert stored.status == ProjectStatus.IN_PROGRESS

    def test_claim_cancelled_project_fails(self, store, people, open_project):
        store.projects.compare_and_set_status(open_project.id, ProjectStatus.OPEN, ProjectStatus.CANCELLED)

        assert store.projects.claim(open_project.id, people.freelancer.id) is False

    def test_compare_and_set_checks_expected_status(self, store, open_project):
        assert store.projects.compare_and_set_status(
            open_project.id, ProjectStatus.IN_REVIEW, ProjectStatus.COMPLETED
        ) is False
        assert store.projects.find_by_id(open_project.id).status == ProjectStatus.OPEN

    def test_compare_and_set_checks_expected_freelancer(self, store, people, open_project):
        store.projects.claim(open_project.id, people.freelancer.id)

        assert store.projects.compare_and_set_status(
            open_project.id, ProjectStatus.IN_PROGRESS, ProjectStatus.IN_REVIEW,
            expected_freelancer_id=people.other_freelancer.id,
        ) is False
        assert store.projects.compare_and_set_status(
            open_project.id, ProjectStatus.IN_PROGRESS, ProjectStatus.IN_REVIEW,
            expected_freelancer_id=people.freelancer.id,
        ) is True

    def test_scope_queries(self, store, people, open_project):
        store.projects.claim(open_project.id, people.freelancer.id)

        assert [p.id for p in store.projects.find_in_scope(ProjectScope(client_id=people.client.id))] == [open_project.id]
        assert store.projects.find_in_scope(ProjectScope(freelancer_id=people.other_freelancer.id, include_open=True)) == []
        assert store.projects.find_in_scope(ProjectScope()) == []
        assert store.projects.count_by_status(ProjectScope(freelancer_id=people.freelancer.id)) == {
            ProjectStatus.IN_PROGRESS: 1
        }


class TestProfileRepository:

    def test_duplicate_profile_is_conflict(self, store, people):
        duplicate = Profile.create(people.client.id, "Someone Else", UserRole.CLIENT)
        store.session.expunge_all()

        with pytest.raises(ConflictError):
            store.profiles.create(duplicate)

        assert store.profiles.find_by_id(people.client.id).full_name == "Carla Client"

    def test_find_by_ids(self, store, people):
        found = store.profiles.find_by_ids([people.client.id, people.freelancer.id, "missing"])

        assert {p.id for p in found} == {people.client.id, people.freelancer.id}


class TestDeliverableRepository:

    def _deliverable(self, people, project_id, version):
        deliverable = Deliverable.submit(
            project_id=project_id, freelancer_id=people.freelancer.id, title=f"v{version}", version=version
        )
        deliverable.ensure_id()
        return deliverable

    def test_latest_version(self, store, people, open_project):
        assert store.deliverables.latest_version(open_project.id, people.freelancer.id) == 0

        store.deliverables.create(self._deliverable(people, open_project.id, 1))
        store.deliverables.create(self._deliverable(people, open_project.id, 2))

        assert store.deliverables.latest_version(open_project.id, people.freelancer.id) == 2

    def test_duplicate_version_is_conflict(self, store, people, open_project):
        store.deliverables.create(self._deliverable(people, open_project.id, 1))

        with pytest.raises(ConflictError):
            store.deliverables.create(self._deliverable(people, open_project.id, 1))

    def test_record_review_guarded_on_status(self, store, people, open_project):
        deliverable = store.deliverables.create(self._deliverable(people, open_project.id, 1))
        deliverable.review(ReviewDecision.APPROVED, "ok")

        assert store.deliverables.record_review(deliverable, DeliverableStatus.SUBMITTED) is True
        assert store.deliverables.record_review(deliverable, DeliverableStatus.SUBMITTED) is False
        assert store.deliverables.find_by_id(deliverable.id).status == DeliverableStatus.APPROVED


class TestInvoiceAndMessageRepositories:

    def _invoice(self, people, project_id, amount):
        invoice = Invoice(
            project_id=project_id,
            client_id=people.client.id,
            freelancer_id=people.freelancer.id,
            amount=Decimal(amount),
        )
        invoice.ensure_id()
        return invoice

    def test_mark_paid_only_once(self, store, people, open_project):
        invoice = store.invoices.create(self._invoice(people, open_project.id, "500.00"))

        assert store.invoices.mark_paid(invoice.id, utcnow()) is True
        assert store.invoices.mark_paid(invoice.id, utcnow()) is False

        stored = store.invoices.find_by_id(invoice.id)
        assert stored.status == "paid"
        assert stored.amount == Decimal("500.00")

    def test_total_paid(self, store, people, open_project):
        assert store.invoices.total_paid(people.freelancer.id) == Decimal("0.00")

        first = store.invoices.create(self._invoice(people, open_project.id, "500.00"))
        store.invoices.create(self._invoice(people, open_project.id, "250.50"))
        store.invoices.mark_paid(first.id, utcnow())

        assert store.invoices.total_paid(people.freelancer.id) == Decimal("500.00")
        assert store.invoices.total_paid(people.client.id) == Decimal("500.00")
        assert store.invoices.total_paid(people.other_client.id) == Decimal("0.00")

    def test_unread_messages_for_recipient(self, store, people, open_project):
        store.projects.claim(open_project.id, people.freelancer.id)
        for sender in (people.client, people.client, people.freelancer):
            message = Message(project_id=open_project.id, sender_id=sender.id, content="hi")
            message.ensure_id()
            store.messages.create(message)

        freelancer_scope = ProjectScope(freelancer_id=people.freelancer.id)
        assert store.messages.count_unread_for_recipient(freelancer_scope, people.freelancer.id) == 2
        assert store.messages.count_unread_for_recipient(ProjectScope(client_id=people.client.id), people.client.id) == 1
        assert store.messages.count_unread_for_recipient(
            ProjectScope(freelancer_id=people.other_freelancer.id), people.other_freelancer.id
        ) == 0
        assert store.messages.count_unread_for_recipient(ProjectScope(), people.client.id) == 0

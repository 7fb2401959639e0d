"""
Shared fixtures: an in-memory SQLite store and a cast of profiles.
"""

from decimal import Decimal
from types import SimpleNamespace

import pytest
from sqlalchemy.orm import sessionmaker

from workportal.domain.models.base import new_id
from workportal.domain.models.profile import Profile, UserRole
from workportal.domain.models.project import Project
from workportal.infrastructure.db import models  # noqa: F401
from workportal.infrastructure.db.database import Base, create_db_engine
from workportal.infrastructure.repositories import (
    SQLAlchemyProfileRepository,
    SQLAlchemyProjectRepository,
    SQLAlchemyDeliverableRepository,
    SQLAlchemyMessageRepository,
    SQLAlchemyInvoiceRepository,
    SQLAlchemyNotificationRepository,
)


@pytest.fixture
def engine():
    engine = create_db_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session(engine):
    session = sessionmaker(bind=engine, autoflush=False)()
    yield session
    session.rollback()
    session.close()


@pytest.fixture
def store(session):
    """All SQLAlchemy repositories sharing one session."""
    return SimpleNamespace(
        session=session,
        profiles=SQLAlchemyProfileRepository(session),
        projects=SQLAlchemyProjectRepository(session),
        deliverables=SQLAlchemyDeliverableRepository(session),
        messages=SQLAlchemyMessageRepository(session),
        invoices=SQLAlchemyInvoiceRepository(session),
        notifications=SQLAlchemyNotificationRepository(session),
    )


def make_profile(role: UserRole, name: str) -> Profile:
    return Profile.create(new_id(), name, role)


@pytest.fixture
def client_profile():
    return make_profile(UserRole.CLIENT, "Carla Client")


@pytest.fixture
def other_client():
    return make_profile(UserRole.CLIENT, "Oscar Owner")


@pytest.fixture
def freelancer():
    return make_profile(UserRole.FREELANCER, "Fiona Freelancer")


@pytest.fixture
def other_freelancer():
    return make_profile(UserRole.FREELANCER, "Frank Freelancer")


@pytest.fixture
def people(store, client_profile, other_client, freelancer, other_freelancer):
    """The four profiles, persisted."""
    for profile in (client_profile, other_client, freelancer, other_freelancer):
        store.profiles.create(profile)
    return SimpleNamespace(
        client=client_profile,
        other_client=other_client,
        freelancer=freelancer,
        other_freelancer=other_freelancer,
    )


@pytest.fixture
def open_project(store, people):
    project = Project.create(
        client_id=people.client.id,
        title="Landing page",
        description="Build a landing page for the spring launch",
        budget=Decimal("1200.00"),
    )
    project.ensure_id()
    return store.projects.create(project)

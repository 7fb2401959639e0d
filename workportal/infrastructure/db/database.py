"""
Database configuration and session management.
Used when the store is reached through a direct connection instead of PostgREST.
"""

import logging
from typing import Generator, Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import NullPool, StaticPool

from workportal.config import get_settings


logger = logging.getLogger(__name__)

# Create declarative base
Base = declarative_base()

_engine: Optional[Engine] = None
SessionLocal = sessionmaker(autocommit=False, autoflush=False)


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Create an engine for the given URL.

    SQLite needs three adjustments: in-memory databases share one connection,
    the driver's own transaction handling is disabled so SAVEPOINTs work, and
    transactions start with BEGIN IMMEDIATE so concurrent writers queue for the
    write lock instead of failing with "database is locked" on upgrade.
    """
    if not database_url.startswith("sqlite"):
        return create_engine(database_url, poolclass=NullPool, echo=echo)

    kwargs = {"connect_args": {"check_same_thread": False}, "echo": echo}
    if ":memory:" in database_url or database_url in ("sqlite://", "sqlite+pysqlite://"):
        kwargs["poolclass"] = StaticPool
    engine = create_engine(database_url, **kwargs)

    @event.listens_for(engine, "connect")
    def _disable_pysqlite_transactions(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _emit_begin(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")

    return engine


def get_engine() -> Engine:
    """Process-wide engine, created on first use."""
    global _engine
    if _engine is None:
        settings = get_settings()
        url = settings.database_url
        if not url:
            url = "sqlite:///./workportal.db"
            logger.warning(f"DATABASE_URL not set; using {url}")
        _engine = create_db_engine(url, echo=settings.debug)
        SessionLocal.configure(bind=_engine)
        logger.info("Database engine created")
    return _engine


def get_db() -> Generator[Session, None, None]:
    """
    Dependency function to get a database session.
    One session per request: committed when the request succeeds, rolled back otherwise.
    """
    get_engine()
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def create_tables(engine: Optional[Engine] = None) -> None:
    from workportal.infrastructure.db import models  # noqa: F401

    Base.metadata.create_all(bind=engine or get_engine())


def drop_tables(engine: Optional[Engine] = None) -> None:
    from workportal.infrastructure.db import models  # noqa: F401

    Base.metadata.drop_all(bind=engine or get_engine())

"""
Database infrastructure: SQLAlchemy engine/session, table models and the Supabase client.
"""

from .database import Base, SessionLocal, get_db, get_engine, create_db_engine, create_tables, drop_tables

__all__ = [
    "Base",
    "SessionLocal",
    "get_db",
    "get_engine",
    "create_db_engine",
    "create_tables",
    "drop_tables",
]

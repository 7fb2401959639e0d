#!/usr/bin/env python3
"""
Database management script for the WorkPortal backend.
Creates and drops the tables of the direct-connection (SQLAlchemy) store and
mints development tokens. The hosted Supabase schema is managed in Supabase.
"""

import sys

from workportal.infrastructure.auth.jwt_handler import JWTHandler
from workportal.infrastructure.db.database import create_tables, drop_tables, get_engine


def create_database():
    """Create all tables that do not exist yet."""
    engine = get_engine()
    print(f"Creating tables on {engine.url.render_as_string(hide_password=True)}...")
    create_tables(engine)
    print("Done.")


def drop_database():
    """Drop all tables - WARNING: This will drop all data!"""
    response = input("This will drop ALL data. Type 'yes' to continue: ")
    if response.lower() == 'yes':
        drop_tables(get_engine())
        print("Tables dropped.")
    else:
        print("Drop cancelled.")


def reset_database():
    """Drop and recreate all tables."""
    response = input("This will drop ALL data. Type 'yes' to continue: ")
    if response.lower() == 'yes':
        engine = get_engine()
        drop_tables(engine)
        create_tables(engine)
        print("Database reset.")
    else:
        print("Database reset cancelled.")


def issue_token(user_id: str, minutes: int = 60):
    """Print a bearer token for a principal, signed with the configured secret."""
    print(JWTHandler().generate_test_token(user_id, expires_minutes=minutes))


def main():
    """Main CLI function."""
    if len(sys.argv) < 2:
        print("Usage: python manage_db.py [command]")
        print("Commands:")
        print("  create              - Create all tables")
        print("  drop                - Drop all tables (WARNING: drops all data)")
        print("  reset               - Drop and recreate all tables")
        print("  token <user_id> [m] - Print a development bearer token valid for m minutes")
        return

    command_name = sys.argv[1]

    if command_name == "create":
        create_database()
    elif command_name == "drop":
        drop_database()
    elif command_name == "reset":
        reset_database()
    elif command_name == "token":
        if len(sys.argv) < 3:
            print("Usage: python manage_db.py token <user_id> [minutes]")
            return
        minutes = int(sys.argv[3]) if len(sys.argv) > 3 else 60
        issue_token(sys.argv[2], minutes)
    else:
        print(f"Unknown command: {command_name}")


if __name__ == "__main__":
    main()

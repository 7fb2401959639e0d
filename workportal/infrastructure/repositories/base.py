"""
Shared plumbing for repository implementations.
Translates store failures into domain exceptions so use cases never see driver errors.
"""

import logging
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, List

import httpx
from postgrest.exceptions import APIError
from sqlalchemy.exc import DBAPIError, IntegrityError, OperationalError
from sqlalchemy.orm import Session
from supabase import Client

from workportal.domain.models.base import (
    ConflictError,
    ForbiddenError,
    UpstreamUnavailableError,
    ValidationError,
)


logger = logging.getLogger(__name__)

# Postgres error codes surfaced by PostgREST
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"
CHECK_VIOLATION = "23514"
INSUFFICIENT_PRIVILEGE = "42501"
INVALID_TEXT_REPRESENTATION = "22P02"


class SQLAlchemyRepository:
    """Base for repositories backed by a request-scoped SQLAlchemy session."""

    entity_name = "Record"

    def __init__(self, session: Session):
        self.session = session

    @contextmanager
    def _translate_errors(self) -> Iterator[None]:
        try:
            yield
        except IntegrityError as e:
            logger.info(f"{self.entity_name} write rejected by a constraint: {e.orig}")
            raise ConflictError(f"{self.entity_name} conflicts with an existing record")
        except OperationalError as e:
            logger.error(f"Database unavailable: {e.orig}")
            raise UpstreamUnavailableError()
        except DBAPIError as e:
            logger.error(f"Database error on {self.entity_name}: {e.orig}")
            raise UpstreamUnavailableError()

    def _insert(self, model: Any) -> Any:
        """Add a row inside a SAVEPOINT so a failed insert leaves the request transaction usable."""
        with self._translate_errors():
            with self.session.begin_nested():
                self.session.add(model)
        return model


class SupabaseRepository:
    """Base for repositories backed by PostgREST through supabase-py."""

    table_name = ""
    entity_name = "Record"
    batch_size = 1000

    def __init__(self, client: Client):
        self.client = client

    def _table(self):
        return self.client.table(self.table_name)

    def _execute(self, query):
        """Run a PostgREST request, mapping transport and database errors."""
        try:
            return query.execute()
        except APIError as e:
            code = str(e.code) if e.code is not None else ""
            if code == UNIQUE_VIOLATION:
                raise ConflictError(f"{self.entity_name} conflicts with an existing record")
            if code == INSUFFICIENT_PRIVILEGE:
                raise ForbiddenError("The store refused access to this record")
            if code in (FOREIGN_KEY_VIOLATION, CHECK_VIOLATION, INVALID_TEXT_REPRESENTATION):
                raise ValidationError(f"Invalid {self.entity_name.lower()} data: {e.message}")
            logger.error(f"PostgREST error on {self.table_name}: {code} {e.message}")
            raise UpstreamUnavailableError()
        except httpx.HTTPError as e:
            logger.error(f"Store unreachable while querying {self.table_name}: {str(e)}")
            raise UpstreamUnavailableError()

    @staticmethod
    def _single(response):
        data = response.data or []
        return data[0] if data else None

    def _fetch_all(self, build_query: Callable[[], Any]) -> List[Dict[str, Any]]:
        """
        Every row of a query, read in batches.

        PostgREST silently caps a response at its max-rows setting, so the exact
        count reported with each batch decides when to stop. `build_query` must
        return a fresh builder that selects with count="exact" and a stable order.
        """
        rows: List[Dict[str, Any]] = []
        while True:
            start = len(rows)
            response = self._execute(build_query().range(start, start + self.batch_size - 1))
            batch = response.data or []
            rows.extend(batch)
            total = response.count if response.count is not None else len(rows)
            if not batch or len(rows) >= total:
                return rows

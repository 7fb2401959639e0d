"""
Unit tests for the storage conversion helpers.
"""

import pytest
from datetime import datetime, timezone
from decimal import Decimal

from workportal.infrastructure.mappers.base_mapper import to_decimal, to_utc
from workportal.infrastructure.mappers.project_mapper import ProjectMapper


class TestToUtc:

    @pytest.mark.parametrize("raw,microsecond", [
        ("2024-05-01T12:34:56.1+00:00", 100000),
        ("2024-05-01T12:34:56.12+00:00", 120000),
        ("2024-05-01T12:34:56.1234+00:00", 123400),
        ("2024-05-01T12:34:56.12345+00:00", 123450),
        ("2024-05-01T12:34:56.123456+00:00", 123456),
        ("2024-05-01T12:34:56.1234567+00:00", 123456),
    ])
    def test_any_fraction_precision(self, raw, microsecond):
        value = to_utc(raw)

        assert value.microsecond == microsecond
        assert value.tzinfo == timezone.utc

    def test_zulu_and_offsets_are_normalised(self):
        assert to_utc("2024-05-01T10:00:00Z") == datetime(2024, 5, 1, 10, tzinfo=timezone.utc)
        assert to_utc("2024-05-01T12:00:00.5+02:00") == datetime(2024, 5, 1, 10, 0, 0, 500000, tzinfo=timezone.utc)

    def test_naive_values_are_taken_as_utc(self):
        assert to_utc(datetime(2024, 5, 1, 10)).tzinfo == timezone.utc
        assert to_utc(None) is None
        assert to_utc("") is None


class TestProjectMapper:

    def setup_method(self):
        self.mapper = ProjectMapper()
        self.row = {
            "id": "p1",
            "client_id": "c1",
            "freelancer_id": None,
            "title": "Landing page",
            "description": "Spring launch",
            "budget": "1200.00",
            "status": "open",
            "created_at": "2024-05-01T10:00:00.25+00:00",
        }

    def test_row_without_embedded_client(self):
        project = self.mapper.row_to_domain(self.row)

        assert project.client is None
        assert project.budget == to_decimal("1200.00") == Decimal("1200.00")

    def test_embedded_client_becomes_summary(self):
        project = self.mapper.row_to_domain({**self.row, "client": {"full_name": "Carla Client", "avatar_url": None}})

        assert project.client.full_name == "Carla Client"
        assert project.client.avatar_url is None

    def test_summary_is_not_written_back(self):
        project = self.mapper.row_to_domain({**self.row, "client": {"full_name": "Carla Client"}})

        assert "client" not in self.mapper.domain_to_row(project)

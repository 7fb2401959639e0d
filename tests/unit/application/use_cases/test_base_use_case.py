"""
Unit tests for the base use case patterns.
"""

import pytest
from unittest.mock import AsyncMock

from workportal.application.dto.base_dto import PageRequestDTO
from workportal.application.use_cases.base_use_case import (
    AuthorizedUseCase,
    CommandUseCase,
    PaginatedQueryUseCase,
    QueryUseCase,
    UseCaseResult,
)
from workportal.domain.events.base import EventDispatcher
from workportal.domain.events.project_events import ProjectCancelled
from workportal.domain.models.base import ForbiddenError, ValidationError
from workportal.domain.models.profile import Profile, UserRole


class TestUseCaseResult:
    """Test cases for UseCaseResult."""

    def test_success_result(self):
        """Test creating successful result."""
        result = UseCaseResult.success_result({"id": 1, "name": "test"})

        assert result.success is True
        assert result.data == {"id": 1, "name": "test"}
        assert result.error is None
        assert result.error_code is None

    def test_error_result(self):
        """Test creating error result."""
        result = UseCaseResult.error_result("Something went wrong", "TEST_ERROR")

        assert result.success is False
        assert result.data is None
        assert result.error == "Something went wrong"
        assert result.error_code == "TEST_ERROR"

    def test_success_result_with_metadata(self):
        metadata = {"execution_time": 0.1, "timestamp": "2024-01-01"}
        result = UseCaseResult.success_result({"data": "test"}, metadata)

        assert result.metadata == metadata

    def test_from_domain_exception_keeps_code_and_field(self):
        result = UseCaseResult.from_exception(ValidationError("Bad amount", "amount"))

        assert result.error_code == "VALIDATION_ERROR"
        assert result.error == "Bad amount"
        assert result.metadata == {"field": "amount"}

    def test_from_unexpected_exception_hides_details(self):
        result = UseCaseResult.from_exception(RuntimeError("connection string leaked"))

        assert result.error_code == "UNKNOWN_ERROR"
        assert "leaked" not in result.error


class EchoQuery(AuthorizedUseCase, QueryUseCase[str, str]):

    async def _execute_business_logic(self, request, actor):
        if request == "forbidden":
            raise ForbiddenError("nope")
        if request == "boom":
            raise RuntimeError("boom")
        return f"{actor.full_name}:{request}"


class CancelCommand(CommandUseCase[str, str]):

    async def _execute_command_logic(self, request, actor):
        self._record(ProjectCancelled(project_id=request, client_id="c1", previous_status="open"))
        return request


class PageQuery(PaginatedQueryUseCase[PageRequestDTO, int]):

    async def _execute_business_logic(self, request, actor):
        return self.page_size(request)


class TestBaseUseCase:
    """Error handling shared by every use case."""

    def setup_method(self):
        self.actor = Profile.create("u1", "Ada", UserRole.CLIENT)

    @pytest.mark.asyncio
    async def test_success_carries_timing_metadata(self):
        result = await EchoQuery().execute("hi", self.actor)

        assert result.success is True
        assert result.data == "Ada:hi"
        assert "execution_time_seconds" in result.metadata

    @pytest.mark.asyncio
    async def test_authorized_use_case_requires_actor(self):
        result = await EchoQuery().execute("hi", None)

        assert result.success is False
        assert result.error_code == "AUTHENTICATION_FAILED"

    @pytest.mark.asyncio
    async def test_domain_exception_becomes_error_result(self):
        result = await EchoQuery().execute("forbidden", self.actor)

        assert result.error_code == "FORBIDDEN"
        assert result.metadata["exception_type"] == "ForbiddenError"

    @pytest.mark.asyncio
    async def test_unexpected_exception_becomes_unknown_error(self):
        result = await EchoQuery().execute("boom", self.actor)

        assert result.success is False
        assert result.error_code == "UNKNOWN_ERROR"

    @pytest.mark.asyncio
    async def test_events_published_after_command(self):
        dispatcher = EventDispatcher()
        dispatcher.dispatch = AsyncMock()

        result = await CancelCommand(dispatcher).execute("p1")

        assert result.success is True
        dispatcher.dispatch.assert_awaited_once()
        assert dispatcher.dispatch.await_args.args[0].project_id == "p1"

    @pytest.mark.asyncio
    async def test_failed_publish_does_not_fail_command(self):
        dispatcher = EventDispatcher()
        dispatcher.dispatch = AsyncMock(side_effect=RuntimeError("mail server down"))

        result = await CancelCommand(dispatcher).execute("p1")

        assert result.success is True
        assert result.data == "p1"

    @pytest.mark.asyncio
    async def test_page_size_limit(self):
        use_case = PageQuery(max_page_size=10)

        ok = await use_case.execute(PageRequestDTO(limit=10))
        too_big = await use_case.execute(PageRequestDTO(limit=50))

        assert ok.data == 10
        assert too_big.error_code == "VALIDATION_ERROR"
        assert too_big.metadata["field"] == "limit"

    @pytest.mark.asyncio
    async def test_default_page_size_when_limit_omitted(self):
        use_case = PageQuery(default_page_size=7)

        result = await use_case.execute(PageRequestDTO())

        assert result.data == 7

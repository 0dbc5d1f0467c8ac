"""Unit tests for request context storage."""

import asyncio
import re

import pytest

from stratum.core.context import (
    RequestContext,
    current_request_id,
    generate_correlation_id,
    generate_request_id,
)

UUID_PATTERN = r"[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[0-9a-f]{4}-[0-9a-f]{12}"


@pytest.mark.unit
class TestRequestContext:
    """Context variable accessors."""

    def test_set_and_get(self) -> None:
        """Stored IDs are returned until cleared."""
        RequestContext.set_correlation_id("corr-1")
        RequestContext.set_request_id("req-1")

        assert RequestContext.get_correlation_id() == "corr-1"
        assert RequestContext.get_request_id() == "req-1"

        RequestContext.clear()

        assert RequestContext.get_correlation_id() is None
        assert RequestContext.get_request_id() is None

    async def test_tasks_see_their_own_values(self) -> None:
        """Concurrent tasks do not overwrite each other's IDs."""

        async def worker(value: str) -> str | None:
            RequestContext.set_correlation_id(value)
            await asyncio.sleep(0)
            return RequestContext.get_correlation_id()

        results = await asyncio.gather(*(worker(f"id-{i}") for i in range(5)))

        assert results == [f"id-{i}" for i in range(5)]


@pytest.mark.unit
class TestIdGeneration:
    """Identifier formats."""

    def test_correlation_id_is_uuid4(self) -> None:
        """Correlation IDs are bare UUID4 strings."""
        assert re.fullmatch(UUID_PATTERN, generate_correlation_id())

    def test_request_id_is_prefixed(self) -> None:
        """Request IDs carry a ``req-`` prefix."""
        request_id = generate_request_id()

        assert request_id.startswith("req-")
        assert re.fullmatch(UUID_PATTERN, request_id.removeprefix("req-"))

    def test_current_request_id_prefers_bound_value(self) -> None:
        """The bound request ID wins over a generated one."""
        RequestContext.set_request_id("req-bound")

        assert current_request_id() == "req-bound"

    def test_current_request_id_generates_when_unbound(self) -> None:
        """Outside a request a fresh ID is generated."""
        assert current_request_id().startswith("req-")

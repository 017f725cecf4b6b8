"""Tests for the stub remote-call strategy."""

import pytest

from lakehouse_connector.adapters.driven.stub.placeholder import DEFAULT_STUB_RESPONSE, StubRemoteCall
from lakehouse_connector.ports.connector import RequestEnvelope

__all__ = []

REQUEST = RequestEnvelope(url="http://h:8080/api/v1/task/goods", body={"limit": 10}, headers={})


@pytest.mark.asyncio
async def test_stub_returns_default_response() -> None:
    """Stub should return the default canned response."""
    stub = StubRemoteCall()

    assert await stub(REQUEST) == DEFAULT_STUB_RESPONSE
    assert stub.requests == [REQUEST]


@pytest.mark.asyncio
async def test_stub_returns_independent_copies() -> None:
    """Mutating one result should not change the next."""
    stub = StubRemoteCall({"rows": [1, 2, 3]})

    first = await stub(REQUEST)
    first["rows"].append(4)

    assert await stub(REQUEST) == {"rows": [1, 2, 3]}

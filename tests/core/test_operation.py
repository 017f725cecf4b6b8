"""Tests for the connector operation."""

import re
from unittest.mock import AsyncMock

import pytest

from lakehouse_connector.core.errors import NetworkError, ValidationError
from lakehouse_connector.core.operation import (
    build_request,
    build_url,
    execute,
    utc_timestamp,
    validate_config,
)
from lakehouse_connector.ports.connector import ConnectorConfig, RequestEnvelope

__all__ = []


def fixed_clock() -> str:
    return "2024-05-01T12:00:00.000Z"


@pytest.mark.parametrize(
    ("host", "port", "expected"),
    [
        ("127.0.0.1", 8080, "http://127.0.0.1:8080/api/v1/task/goods"),
        ("aihost.example.com", 9000, "http://aihost.example.com:9000/api/v1/task/goods"),
        ("lake", 70000, "http://lake:70000/api/v1/task/goods"),
    ],
)
def test_build_url(host: str, port: int, expected: str) -> None:
    """URL should interpolate host and port verbatim."""
    assert build_url(host, port) == expected


def test_build_request_ignores_prompts() -> None:
    """Request should depend only on host and port."""
    a = build_request(ConnectorConfig(host="h", port=1, user_prompt="first"))
    b = build_request(
        ConnectorConfig(host="h", port=1, user_prompt="second", system_prompt="sys", username="u")
    )

    assert a == b
    assert a.body == {"limit": 10}
    assert a.headers == {"Accept": "application/json", "Content-Type": "application/json"}


def test_build_request_body_is_fresh_copy() -> None:
    """Mutating one request body should not leak into the next."""
    config = ConnectorConfig(host="h", user_prompt="p")
    first = build_request(config)
    first.body["limit"] = 99

    assert build_request(config).body == {"limit": 10}


@pytest.mark.parametrize(
    "config",
    [
        ConnectorConfig(host="", user_prompt="p"),
        ConnectorConfig(host="   ", user_prompt="p"),
        ConnectorConfig(host="h", user_prompt=""),
        ConnectorConfig(host="h", user_prompt="\n\t"),
    ],
)
def test_validate_config_rejects_missing_required(config: ConnectorConfig) -> None:
    """Host and user prompt are required."""
    with pytest.raises(ValidationError, match="is required"):
        validate_config(config)


@pytest.mark.asyncio
async def test_execute_rejects_empty_user_prompt_before_request() -> None:
    """Validation should fail before any network call."""
    request_fn = AsyncMock()

    with pytest.raises(ValidationError):
        await execute(ConnectorConfig(host="127.0.0.1", user_prompt=""), request_fn)

    request_fn.assert_not_called()


@pytest.mark.asyncio
async def test_execute_passes_response_through() -> None:
    """responseData should be the decoded response, unmodified."""
    request_fn = AsyncMock(return_value={"items": []})

    result = await execute(ConnectorConfig(host="h", user_prompt="p"), request_fn)

    assert result.response_data == {"items": []}
    assert result.status == "success"
    request_fn.assert_awaited_once()
    req_arg = request_fn.call_args[0][0]
    assert isinstance(req_arg, RequestEnvelope)
    assert req_arg.url == "http://h:8080/api/v1/task/goods"


@pytest.mark.asyncio
async def test_execute_end_to_end_envelope() -> None:
    """Envelope should echo the request fields and wrap the response."""
    request_fn = AsyncMock(return_value={"rows": [1, 2, 3]})
    config = ConnectorConfig(host="127.0.0.1", port=8080, user_prompt="list top products")

    result = await execute(config, request_fn, clock=fixed_clock)

    assert result.to_json() == {
        "status": "success",
        "timestamp": "2024-05-01T12:00:00.000Z",
        "request": {
            "host": "127.0.0.1",
            "port": 8080,
            "user": "",
            "systemPrompt": "",
            "userPrompt": "list top products",
        },
        "responseData": {"rows": [1, 2, 3]},
    }


@pytest.mark.asyncio
async def test_execute_is_repeatable_with_deterministic_remote() -> None:
    """Repeated runs should differ only in timestamp."""
    request_fn = AsyncMock(return_value={"rows": [1]})
    config = ConnectorConfig(host="h", user_prompt="p", username="alice", system_prompt="s")

    first = (await execute(config, request_fn)).to_json()
    second = (await execute(config, request_fn)).to_json()

    assert first["request"] == second["request"]
    assert first["responseData"] == second["responseData"]


@pytest.mark.asyncio
async def test_execute_propagates_remote_errors() -> None:
    """Strategy errors should propagate unchanged."""
    request_fn = AsyncMock(side_effect=NetworkError("connection refused"))

    with pytest.raises(NetworkError, match="connection refused"):
        await execute(ConnectorConfig(host="h", user_prompt="p"), request_fn)


def test_utc_timestamp_is_iso8601_utc() -> None:
    """Timestamps should be ISO-8601 UTC with millisecond precision."""
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", utc_timestamp())

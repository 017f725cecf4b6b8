"""Tests for connector DTOs."""

import dataclasses

import pytest

from lakehouse_connector.ports.connector import ConnectorConfig, ErrorRecord, ResultEnvelope

__all__ = []


def test_connector_config_is_immutable() -> None:
    """Configuration should not change during a call."""
    config = ConnectorConfig(host="h", user_prompt="p")

    with pytest.raises(dataclasses.FrozenInstanceError):
        config.host = "other"  # type: ignore[misc]


def test_result_envelope_echoes_username_as_user() -> None:
    """Username should be echoed under the 'user' key, password never."""
    config = ConnectorConfig(
        host="h", port=1, user_prompt="p", username="alice", password="pw", system_prompt="s"
    )
    envelope = ResultEnvelope(timestamp="t", config=config, response_data=None)

    assert envelope.to_json()["request"] == {
        "host": "h",
        "port": 1,
        "user": "alice",
        "systemPrompt": "s",
        "userPrompt": "p",
    }


def test_error_record_to_json() -> None:
    """Error records should render item data next to the message."""
    record = ErrorRecord(json={"id": 1}, error="boom")

    assert record.to_json() == {"json": {"id": 1}, "error": "boom"}

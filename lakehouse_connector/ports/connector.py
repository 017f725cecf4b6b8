"""Connector port definitions (DTOs)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

__all__ = ["ConnectorConfig", "RequestEnvelope", "ResultEnvelope", "ErrorRecord"]


@dataclass(slots=True, frozen=True)
class ConnectorConfig:
    """Connection parameters for one connector invocation.

    Attributes:
        host: Address of the lakehouse service.
        user_prompt: Question or instruction supplied by the user.
        port: Port of the lakehouse service.
        username: Echoed in the output; not used for authentication.
        password: Accepted but never sent, echoed or logged.
        system_prompt: Role/behaviour instruction for the remote model.
    """

    host: str
    user_prompt: str
    port: int = 8080
    username: str = ""
    password: str = field(default="", repr=False)
    system_prompt: str = ""


@dataclass(slots=True, frozen=True)
class RequestEnvelope:
    """Outbound HTTP request derived from a ConnectorConfig.

    Attributes:
        url: Target endpoint URL.
        body: JSON-serializable request body.
        headers: HTTP headers sent with the request.
    """

    url: str
    body: dict[str, Any]
    headers: dict[str, str]


@dataclass(slots=True, frozen=True)
class ResultEnvelope:
    """Successful connector output.

    Attributes:
        timestamp: ISO-8601 instant when the call completed.
        config: Configuration the request was built from.
        response_data: Decoded remote response, passed through unmodified.
        status: Always "success".
    """

    timestamp: str
    config: ConnectorConfig
    response_data: Any
    status: str = "success"

    def to_json(self) -> dict[str, Any]:
        """Render the envelope with the host's camelCase keys."""
        return {
            "status": self.status,
            "timestamp": self.timestamp,
            "request": {
                "host": self.config.host,
                "port": self.config.port,
                "user": self.config.username,
                "systemPrompt": self.config.system_prompt,
                "userPrompt": self.config.user_prompt,
            },
            "responseData": self.response_data,
        }


@dataclass(slots=True, frozen=True)
class ErrorRecord:
    """Failure recorded in place of a result in continue-on-failure mode.

    Attributes:
        json: Data of the failing input item, or an empty dict.
        error: Human-readable failure message.
    """

    json: dict[str, Any]
    error: str

    def to_json(self) -> dict[str, Any]:
        return {"json": self.json, "error": self.error}

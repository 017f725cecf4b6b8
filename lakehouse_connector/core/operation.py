"""Connector operation: one configuration in, one result envelope out."""

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from lakehouse_connector.core.errors import ValidationError
from lakehouse_connector.ports.connector import ConnectorConfig, RequestEnvelope, ResultEnvelope
from lakehouse_connector.ports.remote import RemoteCallFn

__all__ = ["build_url", "build_request", "validate_config", "execute", "utc_timestamp"]

logger = logging.getLogger(__name__)

GOODS_TASK_PATH = "/api/v1/task/goods"
# Prompts are not part of the payload; the remote contract only takes a limit.
GOODS_TASK_LIMIT = 10
JSON_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


def utc_timestamp() -> str:
    """Current UTC instant as ISO-8601 with millisecond precision.

    Returns:
        Timestamp such as ``2024-05-01T12:00:00.000Z``.
    """
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_url(host: str, port: int) -> str:
    """Build the goods task endpoint URL.

    Host and port are interpolated verbatim; no resolution or range check.

    Args:
        host: Service host.
        port: Service port.

    Returns:
        ``http://{host}:{port}/api/v1/task/goods``.
    """
    return f"http://{host}:{port}{GOODS_TASK_PATH}"


def build_request(config: ConnectorConfig) -> RequestEnvelope:
    """Derive the outbound request from a configuration."""
    return RequestEnvelope(
        url=build_url(config.host, config.port),
        body={"limit": GOODS_TASK_LIMIT},
        headers=dict(JSON_HEADERS),
    )


def validate_config(config: ConnectorConfig) -> None:
    """Check required fields.

    Args:
        config: Configuration to check.

    Raises:
        ValidationError: If host or user_prompt is empty.
    """
    if not config.host or not config.host.strip():
        raise ValidationError("Parameter 'host' is required")
    if not config.user_prompt or not config.user_prompt.strip():
        raise ValidationError("Parameter 'user_prompt' is required")


async def execute(
    config: ConnectorConfig,
    request_fn: RemoteCallFn,
    clock: Callable[[], str] = utc_timestamp,
) -> ResultEnvelope:
    """Run the connector operation once.

    Steps:
    1. Validate required fields (before any network call).
    2. Build URL, constant JSON body and headers.
    3. Await the remote-call strategy exactly once.
    4. Wrap the decoded response with echoed request metadata.

    Args:
        config: Connection parameters.
        request_fn: Remote-call strategy (real HTTP or stub).
        clock: Returns the completion timestamp.

    Returns:
        Result envelope with status "success".

    Raises:
        ConnectorError: Validation, network, remote or decode failure.
    """
    validate_config(config)
    request = build_request(config)

    logger.debug(f"Sending goods task request to {request.url}")
    response_data = await request_fn(request)

    return ResultEnvelope(
        timestamp=clock(),
        config=config,
        response_data=response_data,
    )

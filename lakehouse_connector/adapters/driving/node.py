"""Workflow-host adapter exposing the connector as a node."""

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from lakehouse_connector.core.batch import run_batch
from lakehouse_connector.core.errors import ValidationError
from lakehouse_connector.core.operation import utc_timestamp
from lakehouse_connector.ports.connector import ConnectorConfig, ResultEnvelope
from lakehouse_connector.ports.remote import RemoteCallFn

__all__ = ["ConnectorNode", "config_from_parameters", "DEFAULT_PARAMETERS"]

logger = logging.getLogger(__name__)

# Parameter names and defaults as declared to the host.
DEFAULT_PARAMETERS: dict[str, Any] = {
    "host": "",
    "port": 8080,
    "username": "",
    "password": "",
    "system_prompt": "",
    "user_prompt": "",
}

Parameters = Mapping[str, Any] | Callable[[int], Mapping[str, Any]]


def config_from_parameters(parameters: Mapping[str, Any]) -> ConnectorConfig:
    """Build a ConnectorConfig from host node parameters.

    Missing keys fall back to DEFAULT_PARAMETERS. Required-field checks
    are left to the connector operation.

    Args:
        parameters: Parameter values keyed by host parameter name.

    Returns:
        Connector configuration.

    Raises:
        ValidationError: If port is not an integer.
    """
    values = {**DEFAULT_PARAMETERS, **parameters}

    raw_port = values["port"]
    if isinstance(raw_port, bool):
        raise ValidationError(f"Parameter 'port' must be an integer (got: {raw_port!r})")
    try:
        port = int(raw_port)
    except (TypeError, ValueError, OverflowError) as e:
        raise ValidationError(f"Parameter 'port' must be an integer (got: {raw_port!r})") from e
    if isinstance(raw_port, float) and raw_port != port:
        raise ValidationError(f"Parameter 'port' must be an integer (got: {raw_port!r})")

    return ConnectorConfig(
        host=str(values["host"] or ""),
        port=port,
        username=str(values["username"] or ""),
        password=str(values["password"] or ""),
        system_prompt=str(values["system_prompt"] or ""),
        user_prompt=str(values["user_prompt"] or ""),
    )


class ConnectorNode:
    """Lakehouse connector node: items and parameters in, output items out."""

    display_name = "Data Lakehouse Connector"
    description = "Connect to the data lakehouse and fetch information from prompts"

    def __init__(
        self,
        request_fn: RemoteCallFn,
        *,
        clock: Callable[[], str] = utc_timestamp,
    ) -> None:
        """Initialize the node.

        Args:
            request_fn: Remote-call strategy (HttpClient.request or a stub).
            clock: Timestamp source for result envelopes.
        """
        self.request_fn = request_fn
        self.clock = clock

    async def execute(
        self,
        items: Sequence[dict[str, Any]],
        parameters: Parameters,
        continue_on_fail: bool = False,
    ) -> list[dict[str, Any]]:
        """Run the node over a batch.

        Args:
            items: Input item data; an empty batch runs once.
            parameters: Parameter mapping, or a callable resolving the
                mapping for an item index.
            continue_on_fail: Record failures instead of raising.

        Returns:
            Output items: ``{"json": envelope}`` for successes,
            ``{"json": item, "error": message}`` for recorded failures.

        Raises:
            ItemExecutionError: First failure, when continue_on_fail is False.
        """

        def config_for(item_index: int) -> ConnectorConfig:
            if callable(parameters):
                return config_from_parameters(parameters(item_index))
            return config_from_parameters(parameters)

        outputs = await run_batch(
            items,
            config_for,
            self.request_fn,
            continue_on_fail=continue_on_fail,
            clock=self.clock,
        )
        logger.info(f"{self.display_name} produced {len(outputs)} item(s)")

        return [
            {"json": out.to_json()} if isinstance(out, ResultEnvelope) else out.to_json()
            for out in outputs
        ]

"""Application entrypoint."""

import asyncio
import json
import logging
from typing import Any

from lakehouse_connector.adapters.driven.config.settings import Settings, load_settings
from lakehouse_connector.adapters.driven.http.client import HttpClient
from lakehouse_connector.adapters.driven.logging.logging_config import configure_logs
from lakehouse_connector.adapters.driven.metrics.http_metrics import Metrics
from lakehouse_connector.adapters.driven.stub.placeholder import StubRemoteCall
from lakehouse_connector.adapters.driving.node import ConnectorNode
from lakehouse_connector.core.errors import ItemExecutionError
from lakehouse_connector.ports.remote import RemoteCallFn

__all__ = ["main", "run_node"]

logger = logging.getLogger(__name__)


async def main() -> int:
    """Run the lakehouse connector once from environment settings.

    Startup sequence:
    1. Configure logging.
    2. Load and validate configuration.
    3. Pick the remote-call strategy (HTTP or stub).
    4. Run one batch and print the output items as JSON.

    Returns:
        Process exit code: 0 on success, 1 on configuration or item failure.
    """
    configure_logs()
    logger.info("Starting lakehouse connector...")

    try:
        settings = load_settings()
    except (RuntimeError, ValueError) as exc:
        logger.error(
            "Configuration error: %s\n"
            "Hint: check CONNECTOR_HOST, CONNECTOR_USER_PROMPT, CONNECTOR_PORT "
            "and that CONNECTOR_INPUT_FILE (if set) is a JSON array of objects.",
            exc,
        )
        return 1

    try:
        if settings.remote_mode == "stub":
            output = await run_node(settings, StubRemoteCall())
        else:
            async with HttpClient(metrics=Metrics()) as http:
                output = await run_node(settings, http.request)
    except ItemExecutionError as e:
        logger.error(f"Connector failed on item {e.item_index}: {e.cause}")
        return 1

    print(json.dumps(output, ensure_ascii=False, indent=2))
    logger.info("Lakehouse connector finished.")
    return 0


async def run_node(settings: Settings, request_fn: RemoteCallFn) -> list[dict[str, Any]]:
    """Execute the connector node over the configured items.

    Args:
        settings: Loaded settings.
        request_fn: Remote-call strategy.

    Returns:
        Output items in batch order.
    """
    node = ConnectorNode(request_fn)
    return await node.execute(
        settings.items,
        settings.to_parameters(),
        continue_on_fail=settings.continue_on_fail,
    )


if __name__ == "__main__":
    try:
        raise SystemExit(asyncio.run(main()))
    except KeyboardInterrupt:
        logging.getLogger(__name__).info("Shutdown requested by user (Ctrl+C).")

"""Sequential batch dispatch with fail-fast or continue-on-failure handling."""

import logging
from collections.abc import Callable, Sequence
from typing import Any

from lakehouse_connector.core.errors import ItemExecutionError
from lakehouse_connector.core.operation import execute, utc_timestamp
from lakehouse_connector.ports.connector import ConnectorConfig, ErrorRecord, ResultEnvelope
from lakehouse_connector.ports.remote import RemoteCallFn

__all__ = ["run_batch", "BatchOutput"]

logger = logging.getLogger(__name__)

BatchOutput = ResultEnvelope | ErrorRecord


async def run_batch(
    items: Sequence[dict[str, Any]],
    config_for: Callable[[int], ConnectorConfig],
    request_fn: RemoteCallFn,
    continue_on_fail: bool = False,
    clock: Callable[[], str] = utc_timestamp,
) -> list[BatchOutput]:
    """Run the connector operation once per input item.

    The node originates flows, so an empty batch still runs once.
    Items are processed one at a time; each request completes before
    the next item starts.

    Args:
        items: Input item data; may be empty.
        config_for: Resolves the configuration for an item index.
        request_fn: Remote-call strategy.
        continue_on_fail: Record failures instead of aborting the batch.
        clock: Timestamp source for result envelopes.

    Returns:
        One output per processed item, in order.

    Raises:
        ItemExecutionError: First failure, in fail-fast mode.
    """
    loop_count = len(items) or 1
    outputs: list[BatchOutput] = []

    for item_index in range(loop_count):
        try:
            config = config_for(item_index)
            outputs.append(await execute(config, request_fn, clock=clock))
        except Exception as e:  # noqa: BLE001
            if not continue_on_fail:
                raise ItemExecutionError(e, item_index=item_index) from e

            logger.warning(f"Item {item_index} failed, continuing: {e}")
            item_data = dict(items[item_index]) if items else {}
            outputs.append(ErrorRecord(json=item_data, error=str(e) or type(e).__name__))

    return outputs

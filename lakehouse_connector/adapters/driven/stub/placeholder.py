"""Stub remote-call strategy returning a canned response."""

import copy
import logging
from typing import Any

from lakehouse_connector.ports.connector import RequestEnvelope

__all__ = ["StubRemoteCall", "DEFAULT_STUB_RESPONSE"]

logger = logging.getLogger(__name__)

DEFAULT_STUB_RESPONSE: dict[str, Any] = {
    "source": "stub",
    "message": "Placeholder data; no request was sent to the lakehouse service.",
    "items": [],
}


class StubRemoteCall:
    """Remote-call strategy that never touches the network.

    Useful for wiring a workflow before the lakehouse service exists.
    Each call returns a fresh deep copy of the canned response.
    """

    def __init__(self, response_data: Any = None) -> None:
        """Initialize the stub.

        Args:
            response_data: Canned response; DEFAULT_STUB_RESPONSE if None.
        """
        self.response_data = DEFAULT_STUB_RESPONSE if response_data is None else response_data
        self.requests: list[RequestEnvelope] = []

    async def __call__(self, req: RequestEnvelope) -> Any:
        self.requests.append(req)
        logger.debug(f"Stub request to {req.url}; returning canned response")
        return copy.deepcopy(self.response_data)

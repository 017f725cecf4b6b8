"""Remote-call port definition (strategy interface)."""

from collections.abc import Awaitable, Callable
from typing import Any

from lakehouse_connector.ports.connector import RequestEnvelope

__all__ = ["RemoteCallFn"]

# Sends one request and returns the decoded JSON response.
# Implementations raise ConnectorError subclasses on failure.
RemoteCallFn = Callable[[RequestEnvelope], Awaitable[Any]]

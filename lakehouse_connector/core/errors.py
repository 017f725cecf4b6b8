"""Error taxonomy for the connector operation."""

from typing import Any

__all__ = [
    "ConnectorError",
    "ValidationError",
    "NetworkError",
    "RemoteError",
    "DecodeError",
    "ItemExecutionError",
]


class ConnectorError(Exception):
    """Base class for connector failures.

    Attributes are read-only: errors are built complete at the failure site.
    """

    def __init__(self, message: str, *, item_index: int | None = None) -> None:
        super().__init__(message)
        self._message = message
        self._item_index = item_index

    @property
    def message(self) -> str:
        return self._message

    @property
    def item_index(self) -> int | None:
        """Position of the failing item in its batch, if known."""
        return self._item_index


class ValidationError(ConnectorError):
    """A required configuration field is missing, empty or malformed."""


class NetworkError(ConnectorError):
    """Connection refused, DNS failure, timeout or other transport error."""


class RemoteError(ConnectorError):
    """The remote service answered with a non-success HTTP status.

    Attributes:
        status: HTTP status code.
        body: Decoded JSON body, or None if the body was not JSON.
    """

    def __init__(self, message: str, *, status: int, body: Any = None) -> None:
        super().__init__(message)
        self._status = status
        self._body = body

    @property
    def status(self) -> int:
        return self._status

    @property
    def body(self) -> Any:
        return self._body


class DecodeError(ConnectorError):
    """The response body is not valid JSON."""


class ItemExecutionError(ConnectorError):
    """Failure of one batch item, raised in fail-fast mode.

    Attributes:
        item_index: Position of the failing item.
        cause: Original exception raised while processing the item.
    """

    def __init__(self, cause: BaseException, *, item_index: int) -> None:
        super().__init__(f"Item {item_index} failed: {cause}", item_index=item_index)
        self._cause = cause

    @property
    def item_index(self) -> int:
        return self._item_index  # type: ignore[return-value]

    @property
    def cause(self) -> BaseException:
        return self._cause

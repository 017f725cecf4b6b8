"""Metrics port definition (interface and DTO)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

__all__ = ["HttpAttemptDto", "MetricsPort"]


@dataclass(slots=True, frozen=True)
class HttpAttemptDto:
    """Immutable snapshot of a single outbound request.

    Attributes:
        started_at_sec: Monotonic seconds when the request left the process.
        finished_at_sec: Monotonic seconds when the response or error arrived.
        is_failed: True on network error or status >= 400.
        status_code: HTTP status code when a response arrived; None otherwise.
    """

    started_at_sec: float
    finished_at_sec: float
    is_failed: bool = False
    status_code: int | None = None


class MetricsPort(Protocol):
    """Interface for recording request metrics.

    Implementations must be async-safe and non-blocking.
    The HTTP client calls update() after each request; callers render
    summaries with __str__().
    """

    def update(self, attempt: HttpAttemptDto, /) -> None:
        """Record a finished request.

        Args:
            attempt: The attempt to record.
        """
        ...

    def __str__(self) -> str:
        """Return concise textual summary for humans.

        Returns:
            Formatted metrics string.
        """
        ...

"""HTTP client adapter performing the real goods task request."""

import asyncio
import json
import logging
from types import TracebackType
from typing import Any

import aiohttp

from lakehouse_connector.core.errors import DecodeError, NetworkError, RemoteError
from lakehouse_connector.ports.connector import RequestEnvelope
from lakehouse_connector.ports.metrics import HttpAttemptDto, MetricsPort

__all__ = ["HttpClient"]

logger = logging.getLogger(__name__)

FIRST_FAILING_HTTP_CODE = 400


class HttpClient:
    """Remote-call strategy backed by an aiohttp session.

    Features:
    - One POST per call, no retry.
    - Maps transport, status and decoding failures to connector errors.
    - Optional metrics collection (latency, failure rate).
    - Context manager for proper resource cleanup.
    """

    def __init__(self, metrics: MetricsPort | None = None) -> None:
        """Initialize HTTP client.

        Args:
            metrics: Optional metrics collector to track requests.
        """
        self.metrics = metrics
        self.session: aiohttp.ClientSession | None = None

    async def __aenter__(self) -> "HttpClient":
        """Enter async context manager (start session).

        Returns:
            Self for use in async with statement.
        """
        self.session = aiohttp.ClientSession()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self.session:
            await self.session.close()

    async def _raw_request(self, req: RequestEnvelope) -> tuple[int, bytes]:
        """Single HTTP POST request.

        The response is released before returning.

        Args:
            req: Request with URL, JSON body and headers.

        Returns:
            Response status and raw body.

        Raises:
            RuntimeError: If session not initialized.
            NetworkError: On connection, DNS or timeout errors.
        """
        if self.session is None:
            raise RuntimeError("Session not initialized; use 'async with' context manager")

        try:
            async with self.session.post(req.url, json=req.body, headers=req.headers) as resp:
                raw = await resp.read()
                status = resp.status
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise NetworkError(f"Request to {req.url} failed: {str(e) or type(e).__name__}") from e
        return status, raw

    async def request(self, req: RequestEnvelope) -> Any:
        """Send the request and decode the JSON response.

        Args:
            req: Request to send.

        Returns:
            Decoded JSON body.

        Raises:
            NetworkError: Transport failure.
            RemoteError: Status >= 400; the body is attached when it is JSON.
            DecodeError: Success status with a non-JSON body.
        """
        loop = asyncio.get_running_loop()
        started = loop.time()
        status: int | None = None

        try:
            status, raw = await self._raw_request(req)
        finally:
            self._record(started, loop.time(), status)

        try:
            data = json.loads(raw)
            is_json = True
        except (json.JSONDecodeError, UnicodeDecodeError):
            data, is_json = None, False

        if status >= FIRST_FAILING_HTTP_CODE:
            raise RemoteError(
                f"Request to {req.url} returned status {status}",
                status=status,
                body=data,
            )
        if not is_json:
            raise DecodeError(f"Response from {req.url} is not valid JSON (status {status})")

        logger.info(f"Request to {req.url} returned status {status}")
        return data

    def _record(self, started: float, finished: float, status: int | None) -> None:
        if not self.metrics:
            return
        self.metrics.update(
            HttpAttemptDto(
                started_at_sec=started,
                finished_at_sec=finished,
                is_failed=status is None or status >= FIRST_FAILING_HTTP_CODE,
                status_code=status,
            )
        )
        logger.info(f"HTTP metrics: {self.metrics}")

"""Default HTTP transport: rate-limited httpx GETs with tenacity retries."""

import asyncio
import logging
import time
from typing import Any

import httpx
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from etherscan_api.exceptions import TransportError

logger = logging.getLogger(__name__)

RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})


class RetryableStatusError(Exception):
    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"HTTP {status_code}")


class HttpTransport:
    """Async JSON-over-HTTP fetcher with simple interval-based rate limiting.

    Connection failures and 429/5xx answers are retried with exponential backoff.
    Error messages never include the request URL, which carries the API key.
    """

    def __init__(
        self,
        rate_per_second: float = 5.0,
        timeout: float = 30.0,
        max_retries: int = 3,
        backoff_seconds: float = 1.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._min_interval = 1.0 / rate_per_second if rate_per_second > 0 else 0.0
        self._last_request_time = 0.0
        self._lock = asyncio.Lock()
        self._max_attempts = max(1, max_retries)
        self._backoff_seconds = backoff_seconds
        self._owns_client = client is None
        self._client = client if client is not None else httpx.AsyncClient(timeout=timeout)

    async def _wait_for_slot(self) -> None:
        async with self._lock:
            now = time.monotonic()
            elapsed = now - self._last_request_time
            if elapsed < self._min_interval:
                await asyncio.sleep(self._min_interval - elapsed)
            self._last_request_time = time.monotonic()

    async def _get(self, url: str) -> httpx.Response:
        await self._wait_for_slot()
        response = await self._client.get(url)
        if response.status_code in RETRYABLE_STATUS_CODES:
            raise RetryableStatusError(response.status_code)
        return response

    async def __call__(self, url: str) -> Any:
        retrying = AsyncRetrying(
            retry=retry_if_exception_type((httpx.TransportError, RetryableStatusError)),
            stop=stop_after_attempt(self._max_attempts),
            wait=wait_exponential(multiplier=self._backoff_seconds, max=30),
            reraise=True,
        )
        try:
            async for attempt in retrying:
                with attempt:
                    number = attempt.retry_state.attempt_number
                    if number > 1:
                        logger.warning("Retrying request (attempt %d/%d)", number, self._max_attempts)
                    response = await self._get(url)
        except RetryableStatusError as exc:
            raise TransportError(f"server answered HTTP {exc.status_code} after {self._max_attempts} attempts") from exc
        except httpx.TransportError as exc:
            raise TransportError(f"request failed: {type(exc).__name__}") from exc

        if response.is_error:
            raise TransportError(f"server answered HTTP {response.status_code}")
        try:
            return response.json()
        except ValueError as exc:
            raise TransportError("response body is not JSON") from exc

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpTransport":
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()

"""Read-through cache for unwrapped response payloads."""

import asyncio
import hashlib
import json
import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any
from urllib.parse import urlencode

from etherscan_api.infra.cache.storage import MemoryStorage, Storage

logger = logging.getLogger(__name__)

KeyDeriver = Callable[[str, Mapping[str, Any]], str]


def _normalize(params: Mapping[str, Any]) -> list[tuple[str, str]]:
    return sorted((name, str(value)) for name, value in params.items() if value is not None)


def derive_key(method: str, params: Mapping[str, Any]) -> str:
    """Stable key for `method` + `params`, independent of parameter order."""
    document = json.dumps([method, [list(pair) for pair in _normalize(params)]], separators=(",", ":"))
    return hashlib.sha256(document.encode()).hexdigest()


def readable_key(method: str, params: Mapping[str, Any]) -> str:
    """Human-readable alternative to `derive_key`, e.g. `account.balance/address=0x…&chainid=1&tag=latest`."""
    return f"{method}/{urlencode(_normalize(params))}"


class Cache:
    """Storage-backed cache keyed by logical request.

    Entries never expire; a cache instance is scoped by whoever owns it. Only
    successfully unwrapped payloads are stored, and concurrent misses for the same
    key share one in-flight fetch.
    """

    def __init__(self, storage: Storage | None = None, derive_key: KeyDeriver = derive_key) -> None:
        self.storage = storage if storage is not None else MemoryStorage()
        self._derive_key = derive_key
        self._pending: dict[str, asyncio.Future[Any]] = {}

    def derive_key(self, method: str, params: Mapping[str, Any]) -> str:
        return self._derive_key(method, params)

    async def get(self, key: str) -> Any:
        return await self.storage.get_item(key)

    async def put(self, key: str, payload: Any) -> None:
        await self.storage.set_item(key, payload)

    async def get_or_fetch(
        self,
        method: str,
        params: Mapping[str, Any],
        fetch: Callable[[], Awaitable[Any]],
    ) -> Any:
        """Return the stored payload for this request, fetching and storing it on a miss."""
        key = self.derive_key(method, params)

        pending = self._pending.get(key)
        if pending is not None:
            logger.debug("Joining in-flight request for %s", method)
            return await asyncio.shield(pending)

        cached = await self.get(key)
        if cached is not None:
            logger.debug("Cache hit for %s", method)
            return cached

        # another caller may have started fetching while storage was awaited
        pending = self._pending.get(key)
        if pending is not None:
            return await asyncio.shield(pending)

        logger.debug("Cache miss for %s", method)
        task = asyncio.ensure_future(self._fetch_and_store(key, fetch))
        self._pending[key] = task
        task.add_done_callback(lambda _: self._pending.pop(key, None))
        return await asyncio.shield(task)

    async def _fetch_and_store(self, key: str, fetch: Callable[[], Awaitable[Any]]) -> Any:
        payload = await fetch()
        await self.put(key, payload)
        return payload

"""Key/value backends for the request cache."""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Protocol
from urllib.parse import quote

logger = logging.getLogger(__name__)


class Storage(Protocol):
    """Anything with async `get_item`/`set_item` can back the cache. `None` means "not stored"."""

    async def get_item(self, key: str) -> Any: ...

    async def set_item(self, key: str, value: Any) -> None: ...


class MemoryStorage:
    """Process-local storage. Lives as long as the instance."""

    def __init__(self) -> None:
        self._items: dict[str, Any] = {}

    async def get_item(self, key: str) -> Any:
        return self._items.get(key)

    async def set_item(self, key: str, value: Any) -> None:
        self._items[key] = value

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._items


class FileStorage:
    """One JSON document per key under `base_dir`. Handy for recorded test fixtures."""

    def __init__(self, base_dir: str | Path) -> None:
        self._base_dir = Path(base_dir)

    def path_for(self, key: str) -> Path:
        return self._base_dir / f"{quote(key, safe='')}.json"

    async def get_item(self, key: str) -> Any:
        return await asyncio.to_thread(self._read, self.path_for(key))

    async def set_item(self, key: str, value: Any) -> None:
        await asyncio.to_thread(self._write, self.path_for(key), value)

    @staticmethod
    def _read(path: Path) -> Any:
        if not path.exists():
            return None
        return json.loads(path.read_text(encoding="utf-8"))

    @staticmethod
    def _write(path: Path, value: Any) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(value, indent=2), encoding="utf-8")
        logger.debug("Wrote cache entry %s", path.name)

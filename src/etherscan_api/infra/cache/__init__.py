from etherscan_api.infra.cache.cache import Cache, derive_key, readable_key
from etherscan_api.infra.cache.storage import FileStorage, MemoryStorage, Storage

__all__ = ["Cache", "FileStorage", "MemoryStorage", "Storage", "derive_key", "readable_key"]

from dependency_injector import containers, providers

from etherscan_api.client import EtherscanClient
from etherscan_api.config import Settings
from etherscan_api.infra.cache import Cache, FileStorage
from etherscan_api.infra.http.transport import HttpTransport


def build_storage(cache_dir: str | None) -> FileStorage | None:
    return FileStorage(cache_dir) if cache_dir else None


def build_cache(storage: FileStorage | None) -> Cache | None:
    # without a cache directory the client talks to the API directly, as `from_settings` does
    return Cache(storage=storage) if storage is not None else None


class Container(containers.DeclarativeContainer):
    settings = providers.Singleton(Settings)

    transport = providers.Singleton(
        HttpTransport,
        rate_per_second=settings.provided.rate_per_second,
        timeout=settings.provided.timeout,
        max_retries=settings.provided.max_retries,
        backoff_seconds=settings.provided.backoff_seconds,
    )

    storage = providers.Singleton(build_storage, cache_dir=settings.provided.cache_dir)

    cache = providers.Singleton(build_cache, storage=storage)

    client = providers.Singleton(
        EtherscanClient,
        api_key=settings.provided.api_key,
        api_url=settings.provided.api_url,
        chain_id=settings.provided.resolved_chain_id,
        transport=transport,
        cache=cache,
    )

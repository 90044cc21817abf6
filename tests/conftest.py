import pytest

from etherscan_api.client import EtherscanClient
from etherscan_api.infra.cache import Cache
from fakes import API_KEY, FakeTransport, ok


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture()
def transport():
    return FakeTransport(ok([]))


@pytest.fixture()
def client(transport):
    return EtherscanClient(API_KEY, transport=transport)


@pytest.fixture()
def cached_client(transport):
    return EtherscanClient(API_KEY, transport=transport, cache=Cache())

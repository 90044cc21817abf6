"""Typed async client for the Etherscan API."""

from etherscan_api.client import EtherscanClient
from etherscan_api.config import Settings
from etherscan_api.domain.enums import BlockTag, Chain, ClosestOption, Operator, Sort
from etherscan_api.exceptions import EtherscanError, ProtocolError, RemoteError, TransportError, ValidationError
from etherscan_api.infra.cache import Cache, FileStorage, MemoryStorage, derive_key, readable_key
from etherscan_api.infra.http.transport import HttpTransport

__all__ = [
    "BlockTag",
    "Cache",
    "Chain",
    "ClosestOption",
    "EtherscanClient",
    "EtherscanError",
    "FileStorage",
    "HttpTransport",
    "MemoryStorage",
    "Operator",
    "ProtocolError",
    "RemoteError",
    "Settings",
    "Sort",
    "TransportError",
    "ValidationError",
    "derive_key",
    "readable_key",
]

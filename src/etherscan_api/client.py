"""Typed async façade over the Etherscan v2 API."""

import logging
from collections.abc import Awaitable, Callable, Mapping, Sequence
from datetime import date
from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter

from etherscan_api.config import DEFAULT_API_URL, Settings
from etherscan_api.domain import codecs
from etherscan_api.domain.enums import BlockTag, BlockType, ClosestOption, NodeClientType, NodeSyncMode, Operator, Sort
from etherscan_api.exceptions import EtherscanError, TransportError, ValidationError
from etherscan_api.infra.cache import Cache, FileStorage
from etherscan_api.infra.envelope import unwrap
from etherscan_api.infra.http.transport import HttpTransport
from etherscan_api.schemas import abi, account, contract, gas_tracker, logs, proxy, stats, transaction
from etherscan_api.schemas import block as blocks
from etherscan_api.schemas.base import build_params, validate
from etherscan_api.schemas.params import (
    BalanceAddresses,
    CreationAddresses,
    EstimateGasParams,
    LogFilter,
    LogPagination,
    NodeSizeQuery,
    Pagination,
    TokenTransferFilter,
    ValidatedBlockQuery,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

Transport = Callable[[str], Awaitable[Any]]
BlockIdentifier = BlockTag | str | int


def _check(name: str, parser: Callable[[Any], T], value: Any) -> T:
    try:
        return parser(value)
    except ValidationError as exc:
        raise ValidationError(exc.message, path=name) from exc


def _tag(value: Any) -> str:
    try:
        return BlockTag(value).value
    except ValueError as exc:
        raise ValidationError(f"invalid block tag: {value!r}", path="tag") from exc


def _storage_position(value: int | str) -> str:
    if isinstance(value, str):
        return codecs.to_quantity(codecs.parse_quantity(value))
    return codecs.to_quantity(value)


class EtherscanClient:
    """One async method per Etherscan operation.

    Inputs are validated before any request is made; results come back as frozen
    pydantic models or plain `int`/`str` values. With a `Cache`, identical requests
    are answered from storage except for endpoints whose answer changes over time.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        api_url: str = DEFAULT_API_URL,
        chain_id: int = 1,
        transport: Transport | None = None,
        cache: Cache | None = None,
    ) -> None:
        self._api_key = api_key or None
        self._api_url = api_url
        self._chain_id = chain_id
        self._owns_transport = transport is None
        self._transport: Transport = transport if transport is not None else HttpTransport()
        self.cache = cache

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        transport: Transport | None = None,
        cache: Cache | None = None,
    ) -> "EtherscanClient":
        owns_transport = transport is None
        if transport is None:
            transport = HttpTransport(
                rate_per_second=settings.rate_per_second,
                timeout=settings.timeout,
                max_retries=settings.max_retries,
                backoff_seconds=settings.backoff_seconds,
            )
        if cache is None and settings.cache_dir:
            cache = Cache(FileStorage(settings.cache_dir))
        client = cls(
            settings.api_key,
            api_url=settings.api_url,
            chain_id=settings.resolved_chain_id,
            transport=transport,
            cache=cache,
        )
        client._owns_transport = owns_transport
        return client

    @property
    def chain_id(self) -> int:
        return self._chain_id

    async def aclose(self) -> None:
        if self._owns_transport and isinstance(self._transport, HttpTransport):
            await self._transport.aclose()

    async def __aenter__(self) -> "EtherscanClient":
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()

    # --- plumbing ------------------------------------------------------------

    async def _request(self, endpoint: str, query: Mapping[str, str]) -> Any:
        module, action = endpoint.split(".", 1)
        params = {"module": module, "action": action, **query}
        if self._api_key:
            params["apikey"] = self._api_key
        url = str(httpx.URL(self._api_url, params=params))

        logger.debug("Requesting %s (chain %d)", endpoint, self._chain_id)
        try:
            payload = await self._transport(url)
        except EtherscanError:
            raise
        except Exception as exc:
            raise TransportError(f"{endpoint}: transport failed with {type(exc).__name__}") from exc
        return unwrap(payload, endpoint)

    async def _fetch(self, module: str, action: str, params: Mapping[str, Any], *, cacheable: bool = True) -> Any:
        endpoint = f"{module}.{action}"
        query = {"chainid": str(self._chain_id)}
        query.update({name: str(value) for name, value in params.items() if value is not None})

        if self.cache is None or not cacheable:
            return await self._request(endpoint, query)
        return await self.cache.get_or_fetch(endpoint, query, lambda: self._request(endpoint, query))

    async def _call(
        self,
        module: str,
        action: str,
        params: Mapping[str, Any],
        schema: TypeAdapter[T],
        *,
        cacheable: bool = True,
    ) -> T:
        payload = await self._fetch(module, action, params, cacheable=cacheable)
        return validate(schema, payload, endpoint=f"{module}.{action}")

    @staticmethod
    def _pagination(
        start_block: int | None, end_block: int | None, page: int | None, offset: int | None, sort: Sort | str | None
    ) -> dict[str, str]:
        return build_params(
            Pagination, start_block=start_block, end_block=end_block, page=page, offset=offset, sort=sort
        ).to_params()

    # --- accounts ------------------------------------------------------------

    async def get_balance(self, address: str, tag: BlockTag | str = BlockTag.LATEST) -> int:
        """Ether balance of `address` in wei."""
        params = {"address": _check("address", codecs.parse_address, address), "tag": _tag(tag)}
        return await self._call("account", "balance", params, stats.WeiResult)

    async def get_balances(
        self, addresses: Sequence[str], tag: BlockTag | str = BlockTag.LATEST
    ) -> list[account.AccountBalance]:
        """Balances of up to 20 addresses in one call."""
        checked = validate(BalanceAddresses, list(addresses), root="addresses")
        params = {"address": ",".join(checked), "tag": _tag(tag)}
        return await self._call("account", "balancemulti", params, account.AccountBalanceList)

    async def get_transactions(
        self,
        address: str,
        *,
        start_block: int | None = None,
        end_block: int | None = None,
        page: int | None = None,
        offset: int | None = None,
        sort: Sort | str | None = None,
    ) -> list[account.Transaction]:
        params = {
            "address": _check("address", codecs.parse_address, address),
            **self._pagination(start_block, end_block, page, offset, sort),
        }
        return await self._call("account", "txlist", params, account.TransactionList)

    async def get_internal_transactions(
        self,
        address: str,
        *,
        start_block: int | None = None,
        end_block: int | None = None,
        page: int | None = None,
        offset: int | None = None,
        sort: Sort | str | None = None,
    ) -> list[account.InternalTransaction]:
        params = {
            "address": _check("address", codecs.parse_address, address),
            **self._pagination(start_block, end_block, page, offset, sort),
        }
        return await self._call("account", "txlistinternal", params, account.InternalTransactionList)

    async def get_internal_transactions_in_transaction(
        self, tx_hash: str
    ) -> list[account.InternalTransactionInTransaction]:
        params = {"txhash": _check("tx_hash", codecs.parse_hash, tx_hash)}
        return await self._call("account", "txlistinternal", params, account.InternalTransactionInTransactionList)

    async def get_internal_transactions_by_block_range(
        self,
        start_block: int,
        end_block: int,
        *,
        page: int | None = None,
        offset: int | None = None,
        sort: Sort | str | None = None,
    ) -> list[account.InternalTransaction]:
        params = self._pagination(
            _check("start_block", codecs.parse_integer, start_block),
            _check("end_block", codecs.parse_integer, end_block),
            page,
            offset,
            sort,
        )
        return await self._call("account", "txlistinternal", params, account.InternalTransactionList)

    async def _token_transfers(
        self,
        action: str,
        schema: TypeAdapter[T],
        address: str | None,
        contract_address: str | None,
        pagination: tuple[Any, ...],
    ) -> T:
        token_filter = build_params(TokenTransferFilter, address=address, contract_address=contract_address)
        params = {**token_filter.to_params(), **self._pagination(*pagination)}
        return await self._call("account", action, params, schema)

    async def get_erc20_transfers(
        self,
        address: str | None = None,
        contract_address: str | None = None,
        *,
        start_block: int | None = None,
        end_block: int | None = None,
        page: int | None = None,
        offset: int | None = None,
        sort: Sort | str | None = None,
    ) -> list[account.Erc20Transfer]:
        """ERC-20 transfers of an account, of a token contract, or of an account within one token."""
        return await self._token_transfers(
            "tokentx",
            account.Erc20TransferList,
            address,
            contract_address,
            (start_block, end_block, page, offset, sort),
        )

    async def get_erc721_transfers(
        self,
        address: str | None = None,
        contract_address: str | None = None,
        *,
        start_block: int | None = None,
        end_block: int | None = None,
        page: int | None = None,
        offset: int | None = None,
        sort: Sort | str | None = None,
    ) -> list[account.Erc721Transfer]:
        return await self._token_transfers(
            "tokennfttx",
            account.Erc721TransferList,
            address,
            contract_address,
            (start_block, end_block, page, offset, sort),
        )

    async def get_erc1155_transfers(
        self,
        address: str | None = None,
        contract_address: str | None = None,
        *,
        start_block: int | None = None,
        end_block: int | None = None,
        page: int | None = None,
        offset: int | None = None,
        sort: Sort | str | None = None,
    ) -> list[account.Erc1155Transfer]:
        return await self._token_transfers(
            "token1155tx",
            account.Erc1155TransferList,
            address,
            contract_address,
            (start_block, end_block, page, offset, sort),
        )

    async def get_blocks_validated_by_address(
        self,
        address: str,
        block_type: BlockType | str | None = None,
        page: int | None = None,
        offset: int | None = None,
    ) -> list[account.ValidatedBlock]:
        query = build_params(ValidatedBlockQuery, block_type=block_type, page=page, offset=offset)
        params = {"address": _check("address", codecs.parse_address, address), **query.to_params()}
        return await self._call("account", "getminedblocks", params, account.ValidatedBlockList)

    async def get_beacon_chain_withdrawals(
        self,
        address: str,
        *,
        start_block: int | None = None,
        end_block: int | None = None,
        page: int | None = None,
        offset: int | None = None,
        sort: Sort | str | None = None,
    ) -> list[account.BeaconWithdrawal]:
        params = {
            "address": _check("address", codecs.parse_address, address),
            **self._pagination(start_block, end_block, page, offset, sort),
        }
        return await self._call("account", "txsBeaconWithdrawal", params, account.BeaconWithdrawalList)

    async def get_erc20_token_balance(
        self, address: str, contract_address: str, tag: BlockTag | str = BlockTag.LATEST
    ) -> int:
        """Token balance in the token's smallest unit."""
        params = {
            "contractaddress": _check("contract_address", codecs.parse_address, contract_address),
            "address": _check("address", codecs.parse_address, address),
            "tag": _tag(tag),
        }
        return await self._call("account", "tokenbalance", params, stats.WeiResult)

    # --- contracts -----------------------------------------------------------

    async def get_abi(self, address: str) -> list[abi.AbiItem]:
        params = {"address": _check("address", codecs.parse_address, address)}
        return await self._call("contract", "getabi", params, abi.AbiResult)

    async def get_source_code(self, address: str) -> list[contract.UnverifiedContract | contract.VerifiedContract]:
        params = {"address": _check("address", codecs.parse_address, address)}
        return await self._call("contract", "getsourcecode", params, contract.ContractSourceList)

    async def get_contract_creation(self, addresses: Sequence[str]) -> list[contract.ContractCreation]:
        """Creator and creation transaction of 1 to 5 contracts."""
        checked = validate(CreationAddresses, list(addresses), root="addresses")
        params = {"contractaddresses": ",".join(checked)}
        return await self._call("contract", "getcontractcreation", params, contract.ContractCreationList)

    # --- transactions --------------------------------------------------------

    async def get_transaction_status(self, tx_hash: str) -> transaction.ExecutionStatus:
        params = {"txhash": _check("tx_hash", codecs.parse_hash, tx_hash)}
        return await self._call("transaction", "getstatus", params, transaction.ExecutionStatusResult)

    async def get_transaction_receipt_status(self, tx_hash: str) -> bool | None:
        """`True` on success, `False` on failure, `None` for pre-Byzantium transactions."""
        params = {"txhash": _check("tx_hash", codecs.parse_hash, tx_hash)}
        result = await self._call("transaction", "gettxreceiptstatus", params, transaction.ReceiptStatusResult)
        return result.status

    # --- blocks --------------------------------------------------------------

    async def get_block_reward(self, block_number: int) -> blocks.BlockReward:
        params = {"blockno": _check("block_number", codecs.parse_integer, block_number)}
        return await self._call("block", "getblockreward", params, blocks.BlockRewardResult)

    async def get_estimated_time_to_block(self, block_number: int) -> blocks.BlockCountdown:
        params = {"blockno": _check("block_number", codecs.parse_integer, block_number)}
        return await self._call("block", "getblockcountdown", params, blocks.BlockCountdownResult, cacheable=False)

    async def get_block_number_by_timestamp(
        self, timestamp: int, closest: ClosestOption | str = ClosestOption.BEFORE
    ) -> int:
        try:
            closest = ClosestOption(closest)
        except ValueError as exc:
            raise ValidationError(f"invalid closest option: {closest!r}", path="closest") from exc
        params = {"timestamp": _check("timestamp", codecs.parse_timestamp, timestamp), "closest": closest.value}
        return await self._call("block", "getblocknobytime", params, blocks.BlockNumberResult)

    # --- logs ----------------------------------------------------------------

    async def get_logs(
        self,
        *,
        address: str | None = None,
        topic0: str | None = None,
        topic1: str | None = None,
        topic2: str | None = None,
        topic3: str | None = None,
        topic0_1_opr: Operator | str | None = None,
        topic0_2_opr: Operator | str | None = None,
        topic0_3_opr: Operator | str | None = None,
        topic1_2_opr: Operator | str | None = None,
        topic1_3_opr: Operator | str | None = None,
        topic2_3_opr: Operator | str | None = None,
        from_block: int | None = None,
        to_block: int | None = None,
        page: int | None = None,
        offset: int | None = None,
    ) -> list[logs.EventLog]:
        """Event logs filtered by emitting address and/or topics."""
        log_filter = build_params(
            LogFilter,
            address=address,
            topic0=topic0,
            topic1=topic1,
            topic2=topic2,
            topic3=topic3,
            topic0_1_opr=topic0_1_opr,
            topic0_2_opr=topic0_2_opr,
            topic0_3_opr=topic0_3_opr,
            topic1_2_opr=topic1_2_opr,
            topic1_3_opr=topic1_3_opr,
            topic2_3_opr=topic2_3_opr,
        )
        pagination = build_params(LogPagination, from_block=from_block, to_block=to_block, page=page, offset=offset)
        params = {**log_filter.to_params(), **pagination.to_params()}
        return await self._call("logs", "getLogs", params, logs.EventLogList)

    # --- JSON-RPC proxy ------------------------------------------------------

    async def get_block_number(self) -> int:
        return await self._call("proxy", "eth_blockNumber", {}, proxy.QuantityResult, cacheable=False)

    async def get_block(self, block: BlockIdentifier = BlockTag.LATEST) -> proxy.Block | None:
        params = {"tag": _check("block", codecs.encode_block, block), "boolean": "false"}
        return await self._call("proxy", "eth_getBlockByNumber", params, proxy.BlockResult)

    async def get_block_with_transactions(
        self, block: BlockIdentifier = BlockTag.LATEST
    ) -> proxy.BlockWithTransactions | None:
        params = {"tag": _check("block", codecs.encode_block, block), "boolean": "true"}
        return await self._call("proxy", "eth_getBlockByNumber", params, proxy.BlockWithTransactionsResult)

    async def get_uncle_block(self, block: BlockIdentifier, index: int) -> proxy.UncleBlock | None:
        params = {
            "tag": _check("block", codecs.encode_block, block),
            "index": _check("index", codecs.to_quantity, index),
        }
        return await self._call("proxy", "eth_getUncleByBlockNumberAndIndex", params, proxy.UncleBlockResult)

    async def get_transaction_count_by_block(self, block: BlockIdentifier) -> int:
        params = {"tag": _check("block", codecs.encode_block, block)}
        return await self._call("proxy", "eth_getBlockTransactionCountByNumber", params, proxy.QuantityResult)

    async def get_transaction(self, tx_hash: str) -> proxy.RpcTransaction | None:
        params = {"txhash": _check("tx_hash", codecs.parse_hash, tx_hash)}
        return await self._call("proxy", "eth_getTransactionByHash", params, proxy.TransactionResult)

    async def get_transaction_by_block_and_index(
        self, block: BlockIdentifier, index: int
    ) -> proxy.RpcTransaction | None:
        params = {
            "tag": _check("block", codecs.encode_block, block),
            "index": _check("index", codecs.to_quantity, index),
        }
        return await self._call("proxy", "eth_getTransactionByBlockNumberAndIndex", params, proxy.TransactionResult)

    async def get_transaction_count(self, address: str, tag: BlockIdentifier = BlockTag.LATEST) -> int:
        """Number of transactions sent from `address` (its next nonce)."""
        params = {
            "address": _check("address", codecs.parse_address, address),
            "tag": _check("tag", codecs.encode_block, tag),
        }
        return await self._call("proxy", "eth_getTransactionCount", params, proxy.QuantityResult)

    async def get_transaction_receipt(self, tx_hash: str) -> proxy.TransactionReceipt | None:
        params = {"txhash": _check("tx_hash", codecs.parse_hash, tx_hash)}
        return await self._call("proxy", "eth_getTransactionReceipt", params, proxy.TransactionReceiptResult)

    async def call(self, to: str, data: str, tag: BlockIdentifier = BlockTag.LATEST) -> str:
        """Execute a read-only message call and return the raw return data."""
        params = {
            "to": _check("to", codecs.parse_address, to),
            "data": _check("data", codecs.parse_hex_string, data),
            "tag": _check("tag", codecs.encode_block, tag),
        }
        return await self._call("proxy", "eth_call", params, proxy.HexResult)

    async def get_code(self, address: str, tag: BlockIdentifier = BlockTag.LATEST) -> str:
        params = {
            "address": _check("address", codecs.parse_address, address),
            "tag": _check("tag", codecs.encode_block, tag),
        }
        return await self._call("proxy", "eth_getCode", params, proxy.HexResult)

    async def get_storage_at(self, address: str, position: int | str, tag: BlockIdentifier = BlockTag.LATEST) -> str:
        params = {
            "address": _check("address", codecs.parse_address, address),
            "position": _check("position", _storage_position, position),
            "tag": _check("tag", codecs.encode_block, tag),
        }
        return await self._call("proxy", "eth_getStorageAt", params, proxy.HexResult)

    async def get_gas_price(self) -> int:
        """Current gas price in wei."""
        return await self._call("proxy", "eth_gasPrice", {}, proxy.QuantityResult, cacheable=False)

    async def estimate_gas(
        self,
        to: str,
        data: str | None = None,
        value: int | str | None = None,
        gas: int | None = None,
        gas_price: int | None = None,
    ) -> int:
        """Gas estimate for a call. `value` is wei as an `int` or ether as a decimal string."""
        query = build_params(EstimateGasParams, to=to, data=data, value=value, gas=gas, gas_price=gas_price)
        return await self._call("proxy", "eth_estimateGas", query.to_params(), proxy.QuantityResult, cacheable=False)

    # --- tokens, gas tracker and stats ----------------------------------------

    async def get_erc20_token_supply(self, contract_address: str) -> int:
        params = {"contractaddress": _check("contract_address", codecs.parse_address, contract_address)}
        return await self._call("stats", "tokensupply", params, stats.WeiResult)

    async def get_estimated_confirmation_time(self, gas_price: int) -> int:
        """Estimated seconds until a transaction paying `gas_price` wei is confirmed."""
        params = {"gasprice": _check("gas_price", codecs.parse_wei, gas_price)}
        return await self._call(
            "gastracker", "gasestimate", params, gas_tracker.ConfirmationTimeResult, cacheable=False
        )

    async def get_gas_oracle(self) -> gas_tracker.GasOracle:
        return await self._call("gastracker", "gasoracle", {}, gas_tracker.GasOracleResult, cacheable=False)

    async def get_ether_supply(self) -> int:
        """Ether in circulation, in wei, excluding ETH2 staking rewards and burnt fees."""
        return await self._call("stats", "ethsupply", {}, stats.WeiResult, cacheable=False)

    async def get_ether2_supply(self) -> stats.Ether2Supply:
        return await self._call("stats", "ethsupply2", {}, stats.Ether2SupplyResult, cacheable=False)

    async def get_last_ether_price(self) -> stats.EtherPrice:
        return await self._call("stats", "ethprice", {}, stats.EtherPriceResult, cacheable=False)

    async def get_ethereum_node_size(
        self,
        start_date: date | str,
        end_date: date | str,
        client_type: NodeClientType | str = NodeClientType.GETH,
        sync_mode: NodeSyncMode | str = NodeSyncMode.DEFAULT,
        sort: Sort | str = Sort.ASC,
    ) -> list[stats.NodeSize]:
        query = build_params(
            NodeSizeQuery,
            start_date=start_date,
            end_date=end_date,
            client_type=client_type,
            sync_mode=sync_mode,
            sort=sort,
        )
        return await self._call("stats", "chainsize", query.to_params(), stats.NodeSizeList)

    async def get_node_count(self) -> stats.NodeCount:
        return await self._call("stats", "nodecount", {}, stats.NodeCountResult, cacheable=False)

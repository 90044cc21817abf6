"""JSON-RPC (`module=proxy`) results: transactions, blocks, uncles and receipts.

All numbers are hex quantities. Fields introduced by later forks (London, Shanghai,
Cancun) are optional so that historical blocks validate.
"""

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BeforeValidator, Discriminator, Field, Tag, TypeAdapter

from etherscan_api.domain.types import Address, HexString, OptionalAddress, Quantity
from etherscan_api.schemas.base import WireModel


class AccessListEntry(WireModel):
    address: Address
    storage_keys: list[HexString]


class _SignedTransaction(WireModel):
    block_hash: HexString | None = None
    block_number: Quantity | None = None
    transaction_index: Quantity | None = None
    hash: HexString
    from_address: Address = Field(alias="from")
    to_address: OptionalAddress = Field(None, alias="to")
    nonce: Quantity
    gas: Quantity
    value: Quantity
    input: HexString
    # signature values are not zero-padded and may have odd length
    v: Quantity | None = None
    r: Quantity
    s: Quantity


class LegacyTransaction(_SignedTransaction):
    type: Literal["0x0"]
    gas_price: Quantity
    chain_id: Quantity | None = None


def _access_list_tag(value: Any) -> Any:
    # some nodes report the EIP-2930 type as a bare number
    if isinstance(value, int) and not isinstance(value, bool) and value == 1:
        return "0x1"
    return value


class AccessListTransaction(_SignedTransaction):
    type: Annotated[Literal["0x1"], BeforeValidator(_access_list_tag)]
    gas_price: Quantity
    chain_id: Quantity
    access_list: list[AccessListEntry]
    y_parity: Quantity | None = None


class FeeMarketTransaction(_SignedTransaction):
    type: Literal["0x2"]
    # effective price once mined
    gas_price: Quantity | None = None
    max_fee_per_gas: Quantity
    max_priority_fee_per_gas: Quantity
    chain_id: Quantity
    access_list: list[AccessListEntry] = Field(default_factory=list)
    y_parity: Quantity | None = None


class BlobTransaction(_SignedTransaction):
    type: Literal["0x3"]
    gas_price: Quantity | None = None
    max_fee_per_gas: Quantity
    max_priority_fee_per_gas: Quantity
    max_fee_per_blob_gas: Quantity
    chain_id: Quantity
    access_list: list[AccessListEntry] = Field(default_factory=list)
    blob_versioned_hashes: list[HexString]
    y_parity: Quantity | None = None


_TRANSACTION_TAGS = {
    "0x0": "legacy",
    "0x1": "access_list",
    1: "access_list",
    "0x2": "fee_market",
    "0x3": "blob",
}


def _transaction_tag(value: Any) -> str | None:
    tag = value.get("type") if isinstance(value, dict) else getattr(value, "type", None)
    if isinstance(tag, bool) or not isinstance(tag, (str, int)):
        return None
    return _TRANSACTION_TAGS.get(tag, str(tag))


RpcTransaction = Annotated[
    Union[
        Annotated[LegacyTransaction, Tag("legacy")],
        Annotated[AccessListTransaction, Tag("access_list")],
        Annotated[FeeMarketTransaction, Tag("fee_market")],
        Annotated[BlobTransaction, Tag("blob")],
    ],
    Discriminator(_transaction_tag),
]


class Withdrawal(WireModel):
    index: Quantity
    validator_index: Quantity
    address: Address
    # gwei
    amount: Quantity


class _BlockHeader(WireModel):
    number: Quantity | None
    hash: HexString | None
    parent_hash: HexString
    nonce: HexString | None = None
    sha3_uncles: HexString = Field(alias="sha3Uncles")
    logs_bloom: HexString | None
    transactions_root: HexString
    state_root: HexString
    receipts_root: HexString
    miner: Address
    difficulty: Quantity
    total_difficulty: Quantity | None = None
    extra_data: HexString
    size: Quantity
    gas_limit: Quantity
    gas_used: Quantity
    timestamp: Quantity
    mix_hash: HexString | None = None
    uncles: list[HexString]
    base_fee_per_gas: Quantity | None = None
    withdrawals_root: HexString | None = None
    blob_gas_used: Quantity | None = None
    excess_blob_gas: Quantity | None = None
    parent_beacon_block_root: HexString | None = None


class UncleBlock(_BlockHeader):
    pass


class Block(_BlockHeader):
    """Block with transaction hashes only."""

    transactions: list[HexString]
    withdrawals: list[Withdrawal] | None = None


class BlockWithTransactions(_BlockHeader):
    transactions: list[RpcTransaction]
    withdrawals: list[Withdrawal] | None = None


class ReceiptLog(WireModel):
    address: Address
    topics: list[HexString]
    data: HexString
    block_number: Quantity
    block_hash: HexString
    transaction_hash: HexString
    transaction_index: Quantity
    log_index: Quantity
    removed: bool


class TransactionReceipt(WireModel):
    block_hash: HexString
    block_number: Quantity
    transaction_hash: HexString
    transaction_index: Quantity
    type: Quantity
    from_address: Address = Field(alias="from")
    to_address: OptionalAddress = Field(None, alias="to")
    contract_address: OptionalAddress = None
    cumulative_gas_used: Quantity
    gas_used: Quantity
    effective_gas_price: Quantity
    blob_gas_used: Quantity | None = None
    blob_gas_price: Quantity | None = None
    logs: list[ReceiptLog]
    logs_bloom: HexString
    # Byzantium replaced the state root with a status flag
    root: HexString | None = None
    status: Quantity | None = None

    @property
    def succeeded(self) -> bool | None:
        return None if self.status is None else self.status == 1


QuantityResult = TypeAdapter(Quantity)
HexResult = TypeAdapter(HexString)
TransactionResult = TypeAdapter(Optional[RpcTransaction])
BlockResult = TypeAdapter(Block | None)
BlockWithTransactionsResult = TypeAdapter(BlockWithTransactions | None)
UncleBlockResult = TypeAdapter(UncleBlock | None)
TransactionReceiptResult = TypeAdapter(TransactionReceipt | None)

from typing import Annotated, Literal

from pydantic import BeforeValidator, Field, TypeAdapter

from etherscan_api.domain import codecs
from etherscan_api.domain.types import (
    Address,
    Bool01,
    HexOrText,
    HexString,
    HexValue,
    Integer,
    OptionalAddress,
    OptionalBool01,
    OptionalString,
    Timestamp,
    Wei,
)
from etherscan_api.schemas.base import WireModel

InternalCallType = Literal["call", "create", "create2", "delegatecall", "staticcall", "suicide"]


class AccountBalance(WireModel):
    account: Address
    balance: Wei


class Transaction(WireModel):
    """Normal (external) transaction as listed by `account.txlist`."""

    block_number: Integer
    block_hash: HexString
    timestamp: Timestamp = Field(alias="timeStamp")
    hash: HexString
    nonce: Integer
    transaction_index: Integer
    from_address: Address = Field(alias="from")
    to_address: OptionalAddress = Field(alias="to")
    value: Wei
    gas: Wei
    gas_price: Wei
    input: HexValue
    method_id: HexValue
    function_name: OptionalString
    contract_address: OptionalAddress
    cumulative_gas_used: Wei
    receipt_status: OptionalBool01 = Field(alias="txreceipt_status")
    gas_used: Wei
    confirmations: Integer
    is_error: Bool01


class InternalTransactionInTransaction(WireModel):
    """Internal transaction listed for a single parent transaction (no hash/trace id on the wire)."""

    block_number: Integer
    timestamp: Timestamp = Field(alias="timeStamp")
    from_address: Address = Field(alias="from")
    to_address: OptionalAddress = Field(alias="to")
    value: Wei
    contract_address: OptionalAddress
    input: HexOrText
    type: InternalCallType
    gas: Wei
    gas_used: Wei
    is_error: Bool01
    err_code: OptionalString


class InternalTransaction(InternalTransactionInTransaction):
    hash: HexString
    trace_id: str


class _TokenTransfer(WireModel):
    block_number: Integer
    timestamp: Timestamp = Field(alias="timeStamp")
    hash: HexString
    nonce: Integer
    block_hash: HexString
    transaction_index: Integer
    from_address: Address = Field(alias="from")
    to_address: Address = Field(alias="to")
    contract_address: Address
    token_name: str
    token_symbol: str
    gas: Wei
    gas_price: Wei
    gas_used: Wei
    cumulative_gas_used: Wei
    # "deprecated" on current API versions
    input: str
    confirmations: Integer


class Erc20Transfer(_TokenTransfer):
    value: Wei
    token_decimal: Integer


class Erc721Transfer(_TokenTransfer):
    token_id: Integer = Field(alias="tokenID")
    token_decimal: Annotated[Literal[0], BeforeValidator(codecs.parse_integer)]


class Erc1155Transfer(_TokenTransfer):
    token_id: Integer = Field(alias="tokenID")
    token_value: Wei


class ValidatedBlock(WireModel):
    block_number: Integer
    timestamp: Timestamp = Field(alias="timeStamp")
    block_reward: Wei


class BeaconWithdrawal(WireModel):
    withdrawal_index: Integer
    validator_index: Integer
    address: Address
    # gwei on the wire
    amount: Integer
    block_number: Integer
    timestamp: Timestamp


AccountBalanceList = TypeAdapter(list[AccountBalance])
TransactionList = TypeAdapter(list[Transaction])
InternalTransactionList = TypeAdapter(list[InternalTransaction])
InternalTransactionInTransactionList = TypeAdapter(list[InternalTransactionInTransaction])
Erc20TransferList = TypeAdapter(list[Erc20Transfer])
Erc721TransferList = TypeAdapter(list[Erc721Transfer])
Erc1155TransferList = TypeAdapter(list[Erc1155Transfer])
ValidatedBlockList = TypeAdapter(list[ValidatedBlock])
BeaconWithdrawalList = TypeAdapter(list[BeaconWithdrawal])

from etherscan_api.schemas.abi import (
    AbiConstructor,
    AbiError,
    AbiEvent,
    AbiFallback,
    AbiFunction,
    AbiItem,
    AbiParameter,
    AbiReceive,
)
from etherscan_api.schemas.account import (
    AccountBalance,
    BeaconWithdrawal,
    Erc20Transfer,
    Erc721Transfer,
    Erc1155Transfer,
    InternalTransaction,
    InternalTransactionInTransaction,
    Transaction,
    ValidatedBlock,
)
from etherscan_api.schemas.block import BlockCountdown, BlockReward, UncleReward
from etherscan_api.schemas.contract import (
    ContractCreation,
    ContractSource,
    SourceFile,
    StandardJsonInput,
    UnverifiedContract,
    VerifiedContract,
)
from etherscan_api.schemas.gas_tracker import GasOracle
from etherscan_api.schemas.logs import EventLog
from etherscan_api.schemas.proxy import (
    AccessListEntry,
    AccessListTransaction,
    BlobTransaction,
    Block,
    BlockWithTransactions,
    FeeMarketTransaction,
    LegacyTransaction,
    ReceiptLog,
    RpcTransaction,
    TransactionReceipt,
    UncleBlock,
    Withdrawal,
)
from etherscan_api.schemas.stats import Ether2Supply, EtherPrice, NodeCount, NodeSize
from etherscan_api.schemas.transaction import ExecutionStatus

__all__ = [
    "AbiConstructor",
    "AbiError",
    "AbiEvent",
    "AbiFallback",
    "AbiFunction",
    "AbiItem",
    "AbiParameter",
    "AbiReceive",
    "AccessListEntry",
    "AccessListTransaction",
    "AccountBalance",
    "BeaconWithdrawal",
    "BlobTransaction",
    "Block",
    "BlockCountdown",
    "BlockReward",
    "BlockWithTransactions",
    "ContractCreation",
    "ContractSource",
    "Erc20Transfer",
    "Erc721Transfer",
    "Erc1155Transfer",
    "Ether2Supply",
    "EtherPrice",
    "EventLog",
    "ExecutionStatus",
    "FeeMarketTransaction",
    "GasOracle",
    "InternalTransaction",
    "InternalTransactionInTransaction",
    "LegacyTransaction",
    "NodeCount",
    "NodeSize",
    "ReceiptLog",
    "RpcTransaction",
    "SourceFile",
    "StandardJsonInput",
    "Transaction",
    "TransactionReceipt",
    "UncleBlock",
    "UncleReward",
    "UnverifiedContract",
    "ValidatedBlock",
    "VerifiedContract",
    "Withdrawal",
]

from etherscan_api.domain.enums.block import BlockTag, BlockType, ClosestOption
from etherscan_api.domain.enums.chain import CHAIN_IDS, Chain
from etherscan_api.domain.enums.query import Operator, Sort
from etherscan_api.domain.enums.stats import NodeClientType, NodeSyncMode

__all__ = [
    "BlockTag",
    "BlockType",
    "CHAIN_IDS",
    "Chain",
    "ClosestOption",
    "NodeClientType",
    "NodeSyncMode",
    "Operator",
    "Sort",
]

from enum import Enum


class BlockTag(str, Enum):
    """Named block parameters accepted by balance and proxy endpoints."""

    EARLIEST = "earliest"
    FINALIZED = "finalized"
    SAFE = "safe"
    LATEST = "latest"
    PENDING = "pending"


class ClosestOption(str, Enum):
    """Direction used by block-number-by-timestamp lookups."""

    BEFORE = "before"
    AFTER = "after"


class BlockType(str, Enum):
    BLOCKS = "blocks"
    UNCLES = "uncles"

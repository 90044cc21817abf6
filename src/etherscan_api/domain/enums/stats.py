from enum import Enum


class NodeClientType(str, Enum):
    GETH = "geth"
    PARITY = "parity"


class NodeSyncMode(str, Enum):
    DEFAULT = "default"
    ARCHIVE = "archive"

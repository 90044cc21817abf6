from enum import Enum


class Sort(str, Enum):
    ASC = "asc"
    DESC = "desc"


class Operator(str, Enum):
    """Boolean operator joining two topic filters in a log query."""

    AND = "and"
    OR = "or"

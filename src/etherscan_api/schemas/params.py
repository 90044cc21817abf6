"""Caller-side parameter models. They validate inputs before any request is built and render wire params."""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, TypeAdapter, model_validator

from etherscan_api.domain import codecs
from etherscan_api.domain.enums import BlockType, NodeClientType, NodeSyncMode, Operator, Sort
from etherscan_api.domain.types import Address, DateInput, HexString

MAX_OFFSET = 10_000  # Etherscan caps page size at 10K records


def _parse_amount(value: Any) -> int:
    """`int` is wei; `str`/`Decimal`-like text is an ether amount."""
    if isinstance(value, str):
        return codecs.parse_ether_as_wei(value)
    return codecs.parse_wei(value)


Amount = Annotated[int, BeforeValidator(_parse_amount)]

BalanceAddresses = TypeAdapter(Annotated[list[Address], Field(min_length=1, max_length=20)])
CreationAddresses = TypeAdapter(Annotated[list[Address], Field(min_length=1, max_length=5)])


def _render(values: dict[str, Any]) -> dict[str, str]:
    rendered: dict[str, str] = {}
    for name, value in values.items():
        if value is None:
            continue
        rendered[name] = value.value if hasattr(value, "value") else str(value)
    return rendered


class ParamsModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class Pagination(ParamsModel):
    """Block-range pagination used by the account endpoints."""

    start_block: int | None = Field(None, ge=0)
    end_block: int | None = Field(None, ge=0)
    page: int | None = Field(None, ge=1)
    offset: int | None = Field(None, ge=1, le=MAX_OFFSET)
    sort: Sort | None = None

    def to_params(self) -> dict[str, str]:
        return _render(
            {
                "startblock": self.start_block,
                "endblock": self.end_block,
                "page": self.page,
                "offset": self.offset,
                "sort": self.sort,
            }
        )


class ValidatedBlockQuery(ParamsModel):
    block_type: BlockType | None = None
    page: int | None = Field(None, ge=1)
    offset: int | None = Field(None, ge=1, le=MAX_OFFSET)

    def to_params(self) -> dict[str, str]:
        return _render({"blocktype": self.block_type, "page": self.page, "offset": self.offset})


class TokenTransferFilter(ParamsModel):
    """Filter by account, by token contract, or by both."""

    address: Address | None = None
    contract_address: Address | None = None

    @model_validator(mode="after")
    def _require_one(self) -> "TokenTransferFilter":
        if self.address is None and self.contract_address is None:
            raise ValueError("address or contract_address is required")
        return self

    def to_params(self) -> dict[str, str]:
        return _render({"address": self.address, "contractaddress": self.contract_address})


_TOPIC_PAIRS = ((0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3))


class LogFilter(ParamsModel):
    """Address and/or topic filter for `logs.getLogs`.

    Operators are named after the wire parameters (`topic0_1_opr` joins topic0 and topic1).
    An operator may only join topics that are present, and two or more topics need at
    least one operator.
    """

    address: Address | None = None
    topic0: HexString | None = None
    topic1: HexString | None = None
    topic2: HexString | None = None
    topic3: HexString | None = None
    topic0_1_opr: Operator | None = None
    topic0_2_opr: Operator | None = None
    topic0_3_opr: Operator | None = None
    topic1_2_opr: Operator | None = None
    topic1_3_opr: Operator | None = None
    topic2_3_opr: Operator | None = None

    def topics(self) -> dict[int, str]:
        values = (self.topic0, self.topic1, self.topic2, self.topic3)
        return {index: topic for index, topic in enumerate(values) if topic is not None}

    def operators(self) -> dict[tuple[int, int], Operator]:
        found = {}
        for first, second in _TOPIC_PAIRS:
            operator = getattr(self, f"topic{first}_{second}_opr")
            if operator is not None:
                found[(first, second)] = operator
        return found

    @model_validator(mode="after")
    def _check_topics(self) -> "LogFilter":
        topics = self.topics()
        if self.address is None and not topics:
            raise ValueError("address or at least one topic is required")
        operators = self.operators()
        for first, second in operators:
            if first not in topics or second not in topics:
                raise ValueError(f"topic{first}_{second}_opr given without both topics")
        if len(topics) > 1 and not operators:
            raise ValueError("multiple topics need an operator")
        return self

    def to_params(self) -> dict[str, str]:
        return _render(self.model_dump())


class LogPagination(ParamsModel):
    from_block: int | None = Field(None, ge=0)
    to_block: int | None = Field(None, ge=0)
    page: int | None = Field(None, ge=1)
    offset: int | None = Field(None, ge=1, le=MAX_OFFSET)

    def to_params(self) -> dict[str, str]:
        return _render(
            {"fromBlock": self.from_block, "toBlock": self.to_block, "page": self.page, "offset": self.offset}
        )


class EstimateGasParams(ParamsModel):
    """`eth_estimateGas` inputs; every number goes on the wire as a hex quantity."""

    to: Address
    data: HexString | None = None
    value: Amount | None = None
    gas: int | None = Field(None, ge=0)
    gas_price: int | None = Field(None, ge=0)

    def to_params(self) -> dict[str, str]:
        quantities = {"value": self.value, "gas": self.gas, "gasPrice": self.gas_price}
        params = {"to": self.to, "data": self.data}
        params.update({name: codecs.to_quantity(value) for name, value in quantities.items() if value is not None})
        return _render(params)


class NodeSizeQuery(ParamsModel):
    start_date: DateInput
    end_date: DateInput
    client_type: NodeClientType = NodeClientType.GETH
    sync_mode: NodeSyncMode = NodeSyncMode.DEFAULT
    sort: Sort = Sort.ASC

    @model_validator(mode="after")
    def _check_range(self) -> "NodeSizeQuery":
        if self.start_date > self.end_date:
            raise ValueError("start_date is after end_date")
        return self

    def to_params(self) -> dict[str, str]:
        return _render(
            {
                "startdate": codecs.format_date(self.start_date),
                "enddate": codecs.format_date(self.end_date),
                "clienttype": self.client_type,
                "syncmode": self.sync_mode,
                "sort": self.sort,
            }
        )

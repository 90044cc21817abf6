"""Solidity ABI items as returned by `contract.getabi` and inside verified source records."""

import json
from typing import Annotated, Any, Literal, Union

from pydantic import BeforeValidator, Discriminator, Field, Tag, TypeAdapter

from etherscan_api.schemas.base import WireModel

StateMutability = Literal["pure", "view", "nonpayable", "payable"]


class AbiParameter(WireModel):
    type: str
    name: str | None = None
    internal_type: str | None = None
    indexed: bool | None = None
    components: list["AbiParameter"] | None = None


class AbiFunction(WireModel):
    type: Literal["function"] = "function"
    name: str
    inputs: list[AbiParameter] = Field(default_factory=list)
    outputs: list[AbiParameter] = Field(default_factory=list)
    state_mutability: StateMutability | None = None


class AbiConstructor(WireModel):
    type: Literal["constructor"]
    inputs: list[AbiParameter] = Field(default_factory=list)
    state_mutability: Literal["nonpayable", "payable"] | None = None


class AbiReceive(WireModel):
    type: Literal["receive"]
    state_mutability: Literal["payable"] = "payable"


class AbiFallback(WireModel):
    type: Literal["fallback"]
    state_mutability: Literal["nonpayable", "payable"] | None = None


class AbiEvent(WireModel):
    type: Literal["event"]
    name: str
    inputs: list[AbiParameter]
    anonymous: bool = False


class AbiError(WireModel):
    type: Literal["error"]
    name: str
    inputs: list[AbiParameter] = Field(default_factory=list)


def _abi_tag(value: Any) -> str | None:
    # A missing "type" defaults to "function" in the Solidity ABI JSON format
    if isinstance(value, dict):
        return value.get("type", "function")
    return getattr(value, "type", None)


AbiItem = Annotated[
    Union[
        Annotated[AbiFunction, Tag("function")],
        Annotated[AbiConstructor, Tag("constructor")],
        Annotated[AbiReceive, Tag("receive")],
        Annotated[AbiFallback, Tag("fallback")],
        Annotated[AbiEvent, Tag("event")],
        Annotated[AbiError, Tag("error")],
    ],
    Discriminator(_abi_tag),
]


def parse_json_text(value: Any) -> Any:
    """The API ships ABIs as a JSON document encoded inside a string."""
    if not isinstance(value, str):
        return value
    try:
        return json.loads(value)
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON: {exc.msg}") from exc


AbiJson = Annotated[list[AbiItem], BeforeValidator(parse_json_text)]

AbiResult = TypeAdapter(AbiJson)

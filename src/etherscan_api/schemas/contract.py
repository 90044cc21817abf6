"""`contract.getsourcecode` and `contract.getcontractcreation` results."""

import json
import logging
from typing import Annotated, Any, Union

from pydantic import BeforeValidator, Discriminator, Field, Tag, TypeAdapter, field_validator

from etherscan_api.domain.types import Address, Bool01, HexString, Integer, OptionalAddress, OptionalString
from etherscan_api.schemas.abi import AbiItem, AbiJson
from etherscan_api.schemas.base import WireModel

logger = logging.getLogger(__name__)

UNVERIFIED_ABI = "Contract source code not verified"


class SourceFile(WireModel):
    name: str
    content: str


class StandardJsonInput(WireModel):
    """Solidity compiler standard-JSON input (multi-file source bundle)."""

    language: str
    sources: list[SourceFile]
    settings: dict[str, Any] | None = None

    @field_validator("sources", mode="before")
    @classmethod
    def _sources_as_list(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return [
                {"name": name, "content": entry.get("content") if isinstance(entry, dict) else entry}
                for name, entry in value.items()
            ]
        return value


def unwrap_standard_json(text: str) -> StandardJsonInput | str:
    """Decode the double-brace wrapped standard-JSON form of `SourceCode`.

    Exactly one brace is stripped from each end before parsing. Text that is not
    brace-wrapped, or does not decode to a standard-JSON document, is kept verbatim.
    """
    if not (text.startswith("{") and text.endswith("}")):
        return text
    try:
        return StandardJsonInput.model_validate(json.loads(text[1:-1]))
    except ValueError:
        logger.debug("SourceCode is brace-wrapped but not standard JSON; keeping it verbatim")
        return text


def _source_code(value: Any) -> Any:
    return unwrap_standard_json(value) if isinstance(value, str) else value


class UnverifiedContract(WireModel):
    """Source-code record of a contract without verified source. It carries no data."""

    @property
    def verified(self) -> bool:
        return False


class VerifiedContract(WireModel):
    source_code: Annotated[Union[StandardJsonInput, str], BeforeValidator(_source_code)] = Field(alias="SourceCode")
    abi: AbiJson = Field(alias="ABI")
    name: str = Field(alias="ContractName")
    compiler_version: str = Field(alias="CompilerVersion")
    is_optimized: Bool01 = Field(alias="OptimizationUsed")
    optimization_runs: Integer = Field(alias="Runs")
    constructor_arguments: str = Field(alias="ConstructorArguments")
    evm_version: str = Field(alias="EVMVersion")
    library: str = Field(alias="Library")
    license: str = Field(alias="LicenseType")
    proxy: Bool01 = Field(alias="Proxy")
    implementation: OptionalAddress = Field(alias="Implementation")
    swarm_source: OptionalString = Field(alias="SwarmSource")

    @property
    def verified(self) -> bool:
        return True

    def functions(self) -> list[AbiItem]:
        return [item for item in self.abi if item.type == "function"]


def _source_tag(value: Any) -> str | None:
    if isinstance(value, dict):
        return "unverified" if value.get("ABI") == UNVERIFIED_ABI else "verified"
    if isinstance(value, (UnverifiedContract, VerifiedContract)):
        return "verified" if value.verified else "unverified"
    return None


ContractSource = Annotated[
    Union[
        Annotated[UnverifiedContract, Tag("unverified")],
        Annotated[VerifiedContract, Tag("verified")],
    ],
    Discriminator(_source_tag),
]


class ContractCreation(WireModel):
    contract_address: Address
    contract_creator: Address
    tx_hash: HexString


ContractSourceList = TypeAdapter(list[ContractSource])
ContractCreationList = TypeAdapter(list[ContractCreation])

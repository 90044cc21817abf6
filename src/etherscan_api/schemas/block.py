from decimal import Decimal
from typing import Annotated, Any

from pydantic import AliasChoices, BeforeValidator, Field, TypeAdapter

from etherscan_api.domain import codecs
from etherscan_api.domain.types import Address, Integer, Timestamp, Wei
from etherscan_api.schemas.base import WireModel


def _seconds_to_ms(value: Any) -> int:
    return int(codecs.parse_seconds(value) * Decimal(1000))


class UncleReward(WireModel):
    miner: Address
    uncle_position: Integer
    block_reward: Wei = Field(alias="blockreward")


class BlockReward(WireModel):
    block_number: Integer
    timestamp: Timestamp = Field(alias="timeStamp")
    block_miner: Address
    block_reward: Wei
    uncles: list[UncleReward]
    uncle_inclusion_reward: Wei


class BlockCountdown(WireModel):
    """Estimated wait until a future block. The API has shipped both spellings of the last two keys."""

    current_block: Integer = Field(alias="CurrentBlock")
    countdown_block: Integer = Field(alias="CountdownBlock")
    remaining_block: Integer = Field(validation_alias=AliasChoices("RemainingBlock", "ReamingBlock"))
    estimated_time_ms: Annotated[int, BeforeValidator(_seconds_to_ms)] = Field(
        validation_alias=AliasChoices("EstimateTimeInSec", "EstimatedTimeInSec")
    )


BlockRewardResult = TypeAdapter(BlockReward)
BlockCountdownResult = TypeAdapter(BlockCountdown)
BlockNumberResult = TypeAdapter(Integer)

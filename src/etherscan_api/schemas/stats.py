from typing import Literal

from pydantic import Field, TypeAdapter

from etherscan_api.domain.types import DateTimestamp, DecimalString, Integer, Timestamp, Wei
from etherscan_api.schemas.base import WireModel


class Ether2Supply(WireModel):
    ether_supply: Wei = Field(alias="EthSupply")
    staking_rewards: Wei = Field(alias="Eth2Staking")
    burnt_fees: Wei = Field(alias="BurntFees")
    withdrawn_total: Wei = Field(alias="WithdrawnTotal")


class EtherPrice(WireModel):
    eth_btc: DecimalString = Field(alias="ethbtc")
    eth_btc_timestamp: Timestamp = Field(alias="ethbtc_timestamp")
    eth_usd: DecimalString = Field(alias="ethusd")
    eth_usd_timestamp: Timestamp = Field(alias="ethusd_timestamp")


class NodeSize(WireModel):
    block_number: Integer
    chain_timestamp: DateTimestamp = Field(alias="chainTimeStamp")
    chain_size: Integer
    client_type: Literal["Geth", "Parity"]
    sync_mode: Literal["Default", "Archive"]


class NodeCount(WireModel):
    timestamp: DateTimestamp = Field(alias="UTCDate")
    count: Integer = Field(alias="TotalNodeCount")


WeiResult = TypeAdapter(Wei)
Ether2SupplyResult = TypeAdapter(Ether2Supply)
EtherPriceResult = TypeAdapter(EtherPrice)
NodeSizeList = TypeAdapter(list[NodeSize])
NodeCountResult = TypeAdapter(NodeCount)

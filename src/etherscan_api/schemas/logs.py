from pydantic import Field, TypeAdapter

from etherscan_api.domain.types import Address, HexString, HexValue, LenientQuantity
from etherscan_api.schemas.base import WireModel


class EventLog(WireModel):
    """Event log from `logs.getLogs`. Numbers arrive hex encoded and zero may be sent as `"0x"`."""

    address: Address
    topics: list[HexString]
    data: HexValue
    block_number: LenientQuantity
    timestamp: LenientQuantity = Field(alias="timeStamp")
    gas_price: LenientQuantity
    gas_used: LenientQuantity
    log_index: LenientQuantity
    transaction_hash: HexString
    transaction_index: LenientQuantity


EventLogList = TypeAdapter(list[EventLog])

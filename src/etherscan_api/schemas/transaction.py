from pydantic import Field, TypeAdapter

from etherscan_api.domain.types import Bool01, OptionalBool01, OptionalString
from etherscan_api.schemas.base import WireModel


class ExecutionStatus(WireModel):
    """Contract execution outcome. `description` is only set for failed executions."""

    is_error: Bool01
    description: OptionalString = Field(None, alias="errDescription")


class ReceiptStatus(WireModel):
    # Empty for transactions mined before Byzantium
    status: OptionalBool01


ExecutionStatusResult = TypeAdapter(ExecutionStatus)
ReceiptStatusResult = TypeAdapter(ReceiptStatus)

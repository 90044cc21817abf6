from pydantic import Field, TypeAdapter

from etherscan_api.domain.types import DecimalList, Gwei, Integer
from etherscan_api.schemas.base import WireModel


class GasOracle(WireModel):
    """Gas price suggestions in gwei. Prices may be fractional on low-fee chains."""

    last_block: Integer = Field(alias="LastBlock")
    safe_gas_price: Gwei = Field(alias="SafeGasPrice")
    propose_gas_price: Gwei = Field(alias="ProposeGasPrice")
    fast_gas_price: Gwei = Field(alias="FastGasPrice")
    suggested_base_fee: Gwei = Field(alias="suggestBaseFee")
    gas_used_ratio: DecimalList


GasOracleResult = TypeAdapter(GasOracle)
ConfirmationTimeResult = TypeAdapter(Integer)

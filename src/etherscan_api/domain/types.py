"""Pydantic field types built from the primitive codecs."""

from datetime import date
from decimal import Decimal
from typing import Annotated

from pydantic import BeforeValidator

from etherscan_api.domain import codecs

Address = Annotated[str, BeforeValidator(codecs.parse_address)]
OptionalAddress = Annotated[str | None, BeforeValidator(codecs.parse_optional_address)]

# REST side: numbers are base-10 strings
Integer = Annotated[int, BeforeValidator(codecs.parse_integer)]
Wei = Annotated[int, BeforeValidator(codecs.parse_wei)]
Timestamp = Annotated[int, BeforeValidator(codecs.parse_timestamp)]
Gwei = Annotated[Decimal, BeforeValidator(codecs.parse_decimal)]
DecimalString = Annotated[Decimal, BeforeValidator(codecs.parse_decimal)]
DecimalList = Annotated[list[Decimal], BeforeValidator(codecs.parse_decimal_list)]
DateTimestamp = Annotated[int, BeforeValidator(codecs.date_to_timestamp)]

# JSON-RPC side: numbers are 0x-prefixed hex
Quantity = Annotated[int, BeforeValidator(codecs.parse_quantity)]
LenientQuantity = Annotated[int, BeforeValidator(codecs.parse_lenient_quantity)]

HexString = Annotated[str, BeforeValidator(codecs.parse_hex_string)]
HexValue = Annotated[str | None, BeforeValidator(codecs.parse_hex_value)]
HexOrText = Annotated[str | None, BeforeValidator(codecs.parse_hex_or_text)]

Bool01 = Annotated[bool, BeforeValidator(codecs.parse_bool01)]
OptionalBool01 = Annotated[bool | None, BeforeValidator(codecs.parse_optional_bool01)]
OptionalString = Annotated[str | None, BeforeValidator(codecs.parse_optional_string)]

DateInput = Annotated[date, BeforeValidator(codecs.parse_date)]

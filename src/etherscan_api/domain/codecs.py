"""Primitive codecs: parse and format the atomic values found on the Etherscan wire.

Every parser raises `ValidationError` on malformed input. Since `ValidationError`
is also a `ValueError`, the same functions can be used directly as pydantic
before-validators and the failure is reported against the field being parsed.
"""

import re
from datetime import UTC, date, datetime
from decimal import Decimal
from typing import Any

from eth_utils import to_checksum_address

from etherscan_api.domain.enums import BlockTag
from etherscan_api.exceptions import ValidationError

_ADDRESS_RE = re.compile(r"^0x[0-9a-fA-F]{40}$")
_HASH_RE = re.compile(r"^0x[0-9a-fA-F]{64}$")
_HEX_RE = re.compile(r"^0x[0-9a-fA-F]*$")
_DIGITS_RE = re.compile(r"^[0-9]+$")
_ETHER_RE = re.compile(r"^([0-9]+)(?:\.([0-9]+))?$")
_DECIMAL_RE = re.compile(r"^[0-9]+(?:\.[0-9]+)?$")
_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

ETHER_DECIMALS = 18
WEI_PER_ETHER = 10**ETHER_DECIMALS


def _require_str(value: Any, kind: str) -> str:
    if not isinstance(value, str):
        raise ValidationError(f"expected {kind} string, got {type(value).__name__}")
    return value


def _is_plain_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


# --- addresses ---------------------------------------------------------------


def parse_address(value: Any) -> str:
    """Validate a 20-byte hex address in any letter case and return its EIP-55 checksum form."""
    text = _require_str(value, "address")
    if not _ADDRESS_RE.match(text):
        raise ValidationError(f"invalid address: {text!r}")
    return to_checksum_address(text)


def format_address(address: str) -> str:
    return parse_address(address)


def parse_optional_address(value: Any) -> str | None:
    """Empty string or null means "no address" (e.g. `to` of a contract creation)."""
    if value is None or value == "":
        return None
    return parse_address(value)


# --- integers ----------------------------------------------------------------


def parse_integer(value: Any) -> int:
    """Base-10 digit string (or an already decoded non-negative int) → int."""
    if _is_plain_int(value):
        if value < 0:
            raise ValidationError(f"expected non-negative integer, got {value}")
        return value
    text = _require_str(value, "decimal")
    if not _DIGITS_RE.match(text):
        raise ValidationError(f"invalid decimal integer: {text!r}")
    return int(text)


def parse_wei(value: Any) -> int:
    return parse_integer(value)


def parse_timestamp(value: Any) -> int:
    """Unix seconds; the canonical in-memory form is the integer itself."""
    return parse_integer(value)


def parse_quantity(value: Any) -> int:
    """JSON-RPC quantity: `0x` followed by at least one hex digit."""
    text = _require_str(value, "hex quantity")
    if not _HEX_RE.match(text) or len(text) == 2:
        raise ValidationError(f"invalid hex quantity: {text!r}")
    return int(text, 16)


def parse_lenient_quantity(value: Any) -> int:
    """Hex number as emitted by the REST log endpoint, where zero is sometimes encoded as `"0x"`."""
    text = _require_str(value, "hex quantity")
    if not _HEX_RE.match(text):
        raise ValidationError(f"invalid hex quantity: {text!r}")
    return int(text, 16) if len(text) > 2 else 0


def to_quantity(value: int) -> str:
    if not _is_plain_int(value) or value < 0:
        raise ValidationError(f"expected non-negative integer, got {value!r}")
    return hex(value)


# --- ether -------------------------------------------------------------------


def parse_ether_as_wei(value: Any) -> int:
    """Decimal ether string → wei. More than 18 fractional digits is rejected, never rounded."""
    text = _require_str(value, "ether")
    match = _ETHER_RE.match(text)
    if match is None:
        raise ValidationError(f"invalid ether amount: {text!r}")
    whole, fraction = match.group(1), match.group(2) or ""
    if len(fraction) > ETHER_DECIMALS:
        raise ValidationError(f"ether amount has more than {ETHER_DECIMALS} decimals: {text!r}")
    return int(whole) * WEI_PER_ETHER + int(fraction.ljust(ETHER_DECIMALS, "0"))


def format_ether_from_wei(wei: int) -> str:
    """Wei → shortest exact decimal ether string (`1`, `1.5`, `0.000000000000000001`)."""
    if not _is_plain_int(wei) or wei < 0:
        raise ValidationError(f"expected non-negative wei amount, got {wei!r}")
    whole, fraction = divmod(wei, WEI_PER_ETHER)
    if fraction == 0:
        return str(whole)
    return f"{whole}.{str(fraction).rjust(ETHER_DECIMALS, '0').rstrip('0')}"


# --- hex strings -------------------------------------------------------------


def parse_hex_string(value: Any) -> str:
    """`0x` followed by an even number of hex digits; `"0x"` is kept as the empty payload."""
    text = _require_str(value, "hex")
    if not _HEX_RE.match(text) or len(text) % 2:
        raise ValidationError(f"invalid hex string: {text!r}")
    return text


def parse_hash(value: Any) -> str:
    """32-byte transaction or block hash."""
    text = _require_str(value, "hash")
    if not _HASH_RE.match(text):
        raise ValidationError(f"invalid hash: {text!r}")
    return text


def parse_hex_value(value: Any) -> str | None:
    """Like `parse_hex_string` but the zero-length payload `"0x"` means absent."""
    text = parse_hex_string(value)
    return None if text == "0x" else text


def parse_hex_or_text(value: Any) -> str | None:
    """Internal-transaction `input`: hex data when it looks like hex, otherwise optional free text."""
    text = _require_str(value, "input")
    if _HEX_RE.match(text):
        return parse_hex_value(text)
    return parse_optional_string(text)


# --- flags and strings -------------------------------------------------------


def parse_bool01(value: Any) -> bool:
    if isinstance(value, str) and value in ("0", "1"):
        return value == "1"
    raise ValidationError(f'expected "0" or "1", got {value!r}')


def parse_optional_bool01(value: Any) -> bool | None:
    """Receipt status before Byzantium is reported as an empty string."""
    if value == "":
        return None
    return parse_bool01(value)


def parse_optional_string(value: Any) -> str | None:
    text = _require_str(value, "text")
    return text or None


# --- decimals and dates ------------------------------------------------------


def parse_decimal(value: Any) -> Decimal:
    """Non-negative decimal figure (gwei gas prices, fiat quotes); never goes through float."""
    text = _require_str(value, "decimal")
    if not _DECIMAL_RE.match(text):
        raise ValidationError(f"invalid decimal: {text!r}")
    return Decimal(text)


def parse_seconds(value: Any) -> Decimal:
    """Duration in seconds, sent either as a decimal string or as a JSON number."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        seconds = Decimal(str(value))
        if not seconds.is_finite() or seconds < 0:
            raise ValidationError(f"invalid duration: {value!r}")
        return seconds
    return parse_decimal(value)


def parse_decimal_list(value: Any) -> list[Decimal]:
    text = _require_str(value, "decimal list")
    if not text:
        return []
    return [parse_decimal(item.strip()) for item in text.split(",")]


def parse_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = _require_str(value, "date")
    if not _DATE_RE.match(text):
        raise ValidationError(f"expected YYYY-MM-DD date, got {text!r}")
    try:
        return date.fromisoformat(text)
    except ValueError as exc:
        raise ValidationError(f"invalid date: {text!r}") from exc


def format_date(value: date) -> str:
    return value.isoformat()


def date_to_timestamp(value: Any) -> int:
    """UTC midnight of a `YYYY-MM-DD` date as unix seconds."""
    day = parse_date(value)
    return int(datetime(day.year, day.month, day.day, tzinfo=UTC).timestamp())


# --- block identifiers -------------------------------------------------------


def encode_block(block: BlockTag | str | int) -> str:
    """Block number (int, digit string or hex quantity) → `0x…` quantity; block tag → its name."""
    if _is_plain_int(block):
        return to_quantity(block)
    if isinstance(block, str) and _DIGITS_RE.match(block):
        return to_quantity(int(block))
    if isinstance(block, str) and block.startswith("0x"):
        return to_quantity(parse_quantity(block))
    try:
        return BlockTag(block).value
    except ValueError as exc:
        raise ValidationError(f"invalid block identifier: {block!r}") from exc

"""Shared base for endpoint schemas and the pydantic → ValidationError bridge."""

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from etherscan_api.exceptions import ValidationError

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


class WireModel(BaseModel):
    """Immutable result record. Field names are domain names; camelCase wire names are aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


def format_loc(loc: tuple[int | str, ...]) -> str:
    """`("result", 0, "timeStamp")` → `result[0].timeStamp`."""
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)
    return path


def _first_error(exc: PydanticValidationError, root: str, endpoint: str | None) -> ValidationError:
    error = exc.errors(include_url=False)[0]
    loc = (root, *error["loc"]) if root else tuple(error["loc"])
    return ValidationError(error["msg"], path=format_loc(loc), endpoint=endpoint)


def validate(schema: TypeAdapter[T], payload: Any, endpoint: str | None = None, root: str = "result") -> T:
    """Validate `payload` and report the first failing field as a `ValidationError`."""
    try:
        return schema.validate_python(payload)
    except PydanticValidationError as exc:
        raise _first_error(exc, root, endpoint) from exc


def build_params(model: type[M], endpoint: str | None = None, **values: Any) -> M:
    """Instantiate a caller-side parameter model, reporting bad input as a `ValidationError`."""
    try:
        return model(**values)
    except PydanticValidationError as exc:
        raise _first_error(exc, "", endpoint) from exc

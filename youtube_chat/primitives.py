import re
from typing import Annotated, Any, Sequence, Tuple, TypeVar

from pydantic import AfterValidator, BeforeValidator, Field, ValidationInfo
from pydantic_core import PydanticCustomError

from .errors import NON_EMPTY, NUMERIC_COERCION

T = TypeVar("T")

U16_MAX = 0xFFFF
I16_MIN = -0x8000
I16_MAX = 0x7FFF
U32_MAX = 0xFFFFFFFF
U64_MAX = 0xFFFFFFFFFFFFFFFF

_UNSIGNED = re.compile(r"\+?[0-9]+")


def parse_numeric_string(raw: Any, target: str = "u64", maximum: int = U64_MAX) -> int:
    """Parses an unsigned integer the wire sends as a JSON string."""
    if isinstance(raw, int) and not isinstance(raw, bool):
        value = raw
    elif isinstance(raw, str) and _UNSIGNED.fullmatch(raw):
        # int() refuses very long digit strings, and nothing that long fits anyway
        if len(raw.lstrip("+").lstrip("0")) > len(str(maximum)):
            raise _out_of_range(raw, target)
        value = int(raw)
    else:
        raise _malformed(raw, target)
    if not 0 <= value <= maximum:
        raise _out_of_range(raw, target)
    return value


def _malformed(raw: Any, target: str) -> PydanticCustomError:
    return PydanticCustomError(
        NUMERIC_COERCION,
        "couldn't parse `{raw}` as {target}",
        {"raw": str(raw), "target": target},
    )


def _out_of_range(raw: Any, target: str) -> PydanticCustomError:
    return PydanticCustomError(
        NUMERIC_COERCION,
        "`{raw}` is out of range for {target}",
        {"raw": str(raw), "target": target},
    )


def _timestamp_usec(raw: Any, info: ValidationInfo) -> int:
    # on the wire the timestamp is always a JSON string
    if info.mode == "json" and not isinstance(raw, str):
        raise _malformed(raw, "u64")
    return parse_numeric_string(raw, "u64")


def _require_non_empty(value: tuple, info: ValidationInfo) -> tuple:
    if not value:
        raise PydanticCustomError(
            NON_EMPTY,
            "expected a non-empty sequence for `{field}`",
            {"field": info.field_name or "<item>"},
        )
    return value


def first_of(sequence: Sequence[T], field: str) -> T:
    if not sequence:
        raise PydanticCustomError(
            NON_EMPTY,
            "expected a non-empty sequence for `{field}`",
            {"field": field},
        )
    return sequence[0]


# A tuple that holds at least one element; an empty source array fails decoding.
NonEmpty = Annotated[Tuple[T, ...], AfterValidator(_require_non_empty)]

TimestampUsec = Annotated[int, BeforeValidator(_timestamp_usec)]

U16 = Annotated[int, Field(strict=True, ge=0, le=U16_MAX)]
I16 = Annotated[int, Field(strict=True, ge=I16_MIN, le=I16_MAX)]
U32 = Annotated[int, Field(strict=True, ge=0, le=U32_MAX)]

"""Discrimination of implicit tagged unions.

The chat backend rarely sends a tag field. A variant is instead chosen by
which one of several optional sibling keys is present:

    {"addChatItemAction": {...}}
    {"markChatItemAsDeletedAction": {...}}

`select_variant` runs on the raw mapping before any model is built. It
rejects more than one present key and leaves the "none present" case to a
per-call-site policy: pass `absent` to make it an error, or leave it out
to get None back and decide locally. `tag_variant` then hands the chosen
payload to a pydantic discriminated union keyed on `kind`.
"""
from collections.abc import Mapping
from typing import Any, Iterable, Optional

from pydantic_core import PydanticCustomError

from .errors import AMBIGUOUS_VARIANT, UNSUPPORTED_VARIANT

DISCRIMINATOR = "kind"


def present_keys(data: Mapping, keys: Iterable[str]) -> list[str]:
    """Keys of `keys` present in `data` with a non-null value, in `keys` order."""
    return [key for key in keys if data.get(key) is not None]


def select_variant(
    data: Mapping,
    keys: Iterable[str],
    *,
    what: str,
    absent: Optional[PydanticCustomError] = None,
) -> Optional[str]:
    present = present_keys(data, keys)
    if len(present) > 1:
        raise PydanticCustomError(
            AMBIGUOUS_VARIANT,
            "ambiguous {what}: both `{first}` and `{second}` are present",
            {"what": what, "first": present[0], "second": present[1]},
        )
    if present:
        return present[0]
    if absent is not None:
        raise absent
    return None


def unsupported(what: str, keys: Iterable[str]) -> PydanticCustomError:
    return PydanticCustomError(
        UNSUPPORTED_VARIANT,
        "unsupported {what}, expected one of: {expected}",
        {"what": what, "expected": ", ".join(keys)},
    )


def tag_variant(payload: Any, kind: str) -> Any:
    if isinstance(payload, Mapping):
        return {**payload, DISCRIMINATOR: kind}
    return payload


def dispatch(value: Any, variants: Mapping[str, str], *, what: str) -> Any:
    """Before-validator body for unions where exactly one wire key must be present.

    `variants` maps each wire key to the `kind` of the model it decodes to.
    """
    if not isinstance(value, Mapping):
        return value
    key = select_variant(value, variants, what=what, absent=unsupported(what, variants))
    return tag_variant(value[key], variants[key])

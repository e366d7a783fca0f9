from collections.abc import Mapping
from typing import Any, Sequence

from pydantic import BeforeValidator
from pydantic_core import PydanticCustomError

from .errors import MISSING


def require(data: Mapping, key: str) -> Any:
    """Returns data[key], failing like a missing field when it's absent or null."""
    value = data.get(key)
    if value is None:
        raise PydanticCustomError(MISSING, "Field required: `{key}`", {"key": key})
    return value


def unwrap(value: Any, path: Sequence[str]) -> Any:
    """Peels the fixed wrapper keys in `path`, e.g. ("liveChatBannerRenderer", "contents")."""
    for key in path:
        if not isinstance(value, Mapping):
            # built models and wrong types go to the target type as-is
            return value
        value = require(value, key)
    return value


def unwrapped(*path: str) -> BeforeValidator:
    """Annotated metadata that unwraps the renderer keys before validating the entity.

        badge: Annotated[AuthorBadge, unwrapped("liveChatAuthorBadgeRenderer")]
    """
    return BeforeValidator(lambda value: unwrap(value, path))

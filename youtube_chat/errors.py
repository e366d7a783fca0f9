from enum import Enum
from typing import Union

from pydantic import ValidationError

# pydantic error types raised by the validators in this package
MISSING = "missing"
AMBIGUOUS_VARIANT = "ambiguous_variant"
UNSUPPORTED_ACTION = "unsupported_action"
UNSUPPORTED_VARIANT = "unsupported_variant"
MESSAGE_CONTENT = "message_content"
NUMERIC_COERCION = "numeric_coercion"
NON_EMPTY = "non_empty"


class DecodeErrorKind(str, Enum):
    MISSING_FIELD = MISSING
    AMBIGUOUS_VARIANT = AMBIGUOUS_VARIANT
    UNSUPPORTED_ACTION = UNSUPPORTED_ACTION
    UNSUPPORTED_VARIANT = UNSUPPORTED_VARIANT
    MESSAGE_CONTENT = MESSAGE_CONTENT
    NUMERIC_COERCION = NUMERIC_COERCION
    EMPTY_SEQUENCE = NON_EMPTY
    INVALID_JSON = "json_invalid"
    OTHER = "other"

    @classmethod
    def from_error_type(cls, error_type: str) -> "DecodeErrorKind":
        try:
            return cls(error_type)
        except ValueError:
            return cls.OTHER


class DecodeError(ValueError):
    """Raised when a chat document can't be decoded.

    Carries the exact input that failed (str or bytes, as given) so callers
    can log or replay it, and the pydantic ValidationError describing where
    and why.
    """

    def __init__(self, json: Union[str, bytes], cause: ValidationError):
        self.json = json
        self.cause = cause
        text = json.decode("utf-8", errors="replace") if isinstance(json, bytes) else json
        super().__init__(f"Couldn't extract data from json. Reason: {cause},\njson: {text}")

    @property
    def kinds(self) -> tuple[DecodeErrorKind, ...]:
        kinds = []
        for error in self.cause.errors():
            kind = DecodeErrorKind.from_error_type(error["type"])
            if kind not in kinds:
                kinds.append(kind)
        return tuple(kinds)

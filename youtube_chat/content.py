from collections.abc import Mapping
from typing import Annotated, Any, Literal, Union

from pydantic import BeforeValidator, Discriminator, Field
from pydantic_core import PydanticCustomError, PydanticKnownError

from .errors import MESSAGE_CONTENT
from .models import ChatModel, Image
from .primitives import NonEmpty, first_of
from .renderers import require
from .variants import select_variant

YOUTUBE_ORIGIN = "https://www.youtube.com"

ENDPOINTS = ("urlEndpoint", "watchEndpoint")


class Text(ChatModel):
    kind: Literal["text"] = "text"
    text: str


class Link(ChatModel):
    kind: Literal["link"] = "link"
    text: str
    url: str


class Emoji(ChatModel):
    kind: Literal["emoji"] = "emoji"
    image: Image
    is_custom: bool = Field(alias="isCustomEmoji")
    label: str


def _content_error(message: str) -> PydanticCustomError:
    return PydanticCustomError(MESSAGE_CONTENT, message)


def _string(data: Mapping, key: str) -> str:
    value = require(data, key)
    if not isinstance(value, str):
        raise PydanticKnownError("string_type")
    return value


def resolve_url(navigation_endpoint: Any) -> str:
    """Turns a navigationEndpoint into an absolute youtube.com URL."""
    if not isinstance(navigation_endpoint, Mapping):
        raise PydanticKnownError("dict_type")
    endpoint = select_variant(
        navigation_endpoint,
        ENDPOINTS,
        what="navigationEndpoint",
        absent=_content_error("no `urlEndpoint` nor `watchEndpoint`"),
    )
    payload = navigation_endpoint[endpoint]
    if not isinstance(payload, Mapping):
        raise PydanticKnownError("dict_type")
    if endpoint == "urlEndpoint":
        # relative path, e.g. /redirect?event=live_chat&q=...
        return YOUTUBE_ORIGIN + _string(payload, "url")
    return f"{YOUTUBE_ORIGIN}/watch?v={_string(payload, 'videoId')}"


def normalize_run(data: Any) -> Any:
    """Classifies one wire run as text, link or emoji.

    A run carries optional `text`, `navigationEndpoint` and `emoji` keys and
    only some combinations are legal: text alone, text with an endpoint, or
    emoji alone. Anything else fails the decode.
    """
    if not isinstance(data, Mapping):
        return data

    select_variant(data, ("text", "emoji"), what="message run")

    text = data.get("text")
    emoji = data.get("emoji")
    navigation_endpoint = data.get("navigationEndpoint")

    if emoji is not None and navigation_endpoint is not None:
        raise _content_error("both `emoji` and `navigationEndpoint` are present")
    if text is None and navigation_endpoint is not None:
        raise _content_error("have `navigationEndpoint`, but no `text`")

    if text is not None:
        if navigation_endpoint is None:
            return {"kind": "text", "text": text}
        return {"kind": "link", "text": text, "url": resolve_url(navigation_endpoint)}

    if emoji is not None:
        if not isinstance(emoji, Mapping):
            raise PydanticKnownError("dict_type")
        shortcuts = require(emoji, "shortcuts")
        if not isinstance(shortcuts, list):
            raise PydanticKnownError("list_type")
        payload = {key: emoji[key] for key in ("image", "isCustomEmoji") if key in emoji}
        # the rest of the shortcuts are dropped
        return {**payload, "kind": "emoji", "label": first_of(shortcuts, "shortcuts")}

    raise _content_error("couldn't deserialize")


MessageContent = Annotated[
    Union[Text, Link, Emoji],
    Discriminator("kind"),
    BeforeValidator(normalize_run),
]


class Message(ChatModel):
    runs: NonEmpty[MessageContent]

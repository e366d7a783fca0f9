import logging
from typing import TypeVar, Union

from pydantic import ValidationError

from .chat import ChatUpdate, InitialChat
from .errors import DecodeError

logger = logging.getLogger(__name__)

Document = TypeVar("Document", InitialChat, ChatUpdate)


def _decode(model: type[Document], json: Union[str, bytes]) -> Document:
    try:
        document = model.model_validate_json(json, by_alias=True, by_name=False)
    except ValidationError as e:
        error = DecodeError(json, e)
        logger.debug("Failed to decode %s: %s", model.__name__, ", ".join(kind.value for kind in error.kinds))
        raise error from e

    live_chat = document.live_chat
    if live_chat is None:
        logger.debug("Decoded %s without chat contents", model.__name__)
    else:
        logger.debug(
            "Decoded %s: %d continuations, %d actions",
            model.__name__,
            len(live_chat.continuations),
            len(live_chat.actions or ()),
        )
    return document


def decode_initial(json: Union[str, bytes]) -> InitialChat:
    """Decodes the chat JSON embedded in the first page load (contents.liveChatRenderer)."""
    return _decode(InitialChat, json)


def decode_update(json: Union[str, bytes]) -> ChatUpdate:
    """Decodes a continuation poll response (continuationContents.liveChatContinuation)."""
    return _decode(ChatUpdate, json)

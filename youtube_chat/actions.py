from collections.abc import Mapping
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import AfterValidator, BeforeValidator, Discriminator, Field
from pydantic_core import PydanticCustomError

from .content import Message
from .errors import UNSUPPORTED_ACTION
from .items import BannerItem, MessageItem
from .models import ChatModel
from .primitives import NonEmpty
from .renderers import unwrapped
from .variants import select_variant, tag_variant


class AddBanner(ChatModel):
    kind: Literal["add_banner"] = "add_banner"
    banner: Annotated[
        BannerItem,
        unwrapped("liveChatBannerRenderer", "contents", "liveChatTextMessageRenderer"),
    ] = Field(alias="bannerRenderer")


class AddChatItem(ChatModel):
    kind: Literal["add_chat_item"] = "add_chat_item"
    item: MessageItem


class MarkItemDeleted(ChatModel):
    kind: Literal["mark_item_deleted"] = "mark_item_deleted"
    deleted_state_message: Message
    target_item_id: str


class MarkAuthorItemsDeleted(ChatModel):
    kind: Literal["mark_author_items_deleted"] = "mark_author_items_deleted"
    deleted_state_message: Message
    external_channel_id: str


class ReplaceChatItem(ChatModel):
    kind: Literal["replace_chat_item"] = "replace_chat_item"
    target_item_id: str
    replacement_item: MessageItem


class NoAction(ChatModel):
    """Sentinel for action kinds that are recognized but carry nothing to apply."""

    kind: Literal["no_action"] = "no_action"


NO_ACTION = NoAction()

ACTION_KINDS: dict[str, Optional[str]] = {
    "addBannerToLiveChatCommand": "add_banner",
    "addLiveChatTickerItemAction": None,
    "addChatItemAction": "add_chat_item",
    "markChatItemAsDeletedAction": "mark_item_deleted",
    "markChatItemsByAuthorAsDeletedAction": "mark_author_items_deleted",
    "replaceChatItemAction": "replace_chat_item",
    "showLiveChatTooltipCommand": None,
}


def dispatch_action(value: Any) -> Any:
    """Picks the action out of an envelope like {"addChatItemAction": {...}, "clickTrackingParams": "..."}."""
    if not isinstance(value, Mapping):
        return value
    key = select_variant(
        value,
        ACTION_KINDS,
        what="action",
        absent=PydanticCustomError(
            UNSUPPORTED_ACTION,
            "unsupported action: none of the known keys present, expected one of: {expected}",
            {"expected": ", ".join(ACTION_KINDS)},
        ),
    )
    kind = ACTION_KINDS[key]
    if kind is None:
        return NO_ACTION
    return tag_variant(value[key], kind)


Action = Annotated[
    Union[AddBanner, AddChatItem, MarkItemDeleted, MarkAuthorItemsDeleted, ReplaceChatItem],
    Discriminator("kind"),
]

ActionOrNoAction = Annotated[
    Union[AddBanner, AddChatItem, MarkItemDeleted, MarkAuthorItemsDeleted, ReplaceChatItem, NoAction],
    Discriminator("kind"),
    BeforeValidator(dispatch_action),
]


def drop_no_actions(actions: tuple) -> Optional[tuple]:
    kept = tuple(action for action in actions if not isinstance(action, NoAction))
    # an all-inert list becomes "no actions" rather than an empty tuple
    return kept or None


ActionList = Annotated[NonEmpty[ActionOrNoAction], AfterValidator(drop_no_actions)]

from typing import Annotated, Literal, Optional, Union

from pydantic import BeforeValidator, Discriminator

from .content import Message
from .models import Authored, ChatModel, Image, SimpleText
from .primitives import U16, U32, TimestampUsec
from .variants import dispatch


class ChatItem(ChatModel):
    id: str
    timestamp_usec: TimestampUsec


class TextMessage(ChatItem, Authored):
    kind: Literal["text_message"] = "text_message"
    message: Message


class MembershipItem(ChatItem, Authored):
    kind: Literal["membership_item"] = "membership_item"
    header_subtext: Message


class PaidMessage(ChatItem, Authored):
    """A superchat. `message` is absent when the viewer paid without writing anything."""

    kind: Literal["paid_message"] = "paid_message"
    message: Optional[Message] = None
    purchase_amount_text: SimpleText
    header_background_color: U32
    header_text_color: U32
    body_background_color: U32
    body_text_color: U32
    author_name_text_color: U32
    timestamp_color: U32


class PaidSticker(ChatItem, Authored):
    kind: Literal["paid_sticker"] = "paid_sticker"
    sticker: Image
    money_chip_background_color: U32
    money_chip_text_color: U32
    purchase_amount_text: SimpleText
    sticker_display_width: U16
    sticker_display_height: U16
    background_color: U32
    author_name_text_color: U32


class ViewerEngagementMessage(ChatItem):
    kind: Literal["viewer_engagement_message"] = "viewer_engagement_message"
    message: Message


class PlaceholderItem(ChatItem):
    kind: Literal["placeholder_item"] = "placeholder_item"


class ModeChangeMessage(ChatItem):
    kind: Literal["mode_change_message"] = "mode_change_message"
    text: Message
    subtext: Message


MESSAGE_ITEM_RENDERERS = {
    "liveChatTextMessageRenderer": "text_message",
    "liveChatMembershipItemRenderer": "membership_item",
    "liveChatPaidMessageRenderer": "paid_message",
    "liveChatPaidStickerRenderer": "paid_sticker",
    "liveChatViewerEngagementMessageRenderer": "viewer_engagement_message",
    "liveChatPlaceholderItemRenderer": "placeholder_item",
    "liveChatModeChangeMessageRenderer": "mode_change_message",
}

MessageItem = Annotated[
    Union[
        TextMessage,
        MembershipItem,
        PaidMessage,
        PaidSticker,
        ViewerEngagementMessage,
        PlaceholderItem,
        ModeChangeMessage,
    ],
    Discriminator("kind"),
    BeforeValidator(lambda value: dispatch(value, MESSAGE_ITEM_RENDERERS, what="chat item")),
]


class BannerItem(ChatItem, Authored):
    """A pinned message, found under liveChatBannerRenderer.contents.liveChatTextMessageRenderer."""

    message: Message

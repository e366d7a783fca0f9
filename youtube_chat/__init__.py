from .actions import (
    NO_ACTION,
    Action,
    AddBanner,
    AddChatItem,
    MarkAuthorItemsDeleted,
    MarkItemDeleted,
    NoAction,
    ReplaceChatItem,
)
from .chat import (
    ChatUpdate,
    Continuation,
    Header,
    InitialChat,
    InvalidationContinuation,
    LiveChat,
    MenuItem,
    Participant,
    ParticipantsList,
    ReloadContinuation,
    TimedContinuation,
)
from .content import Emoji, Link, Message, MessageContent, Text
from .decoder import decode_initial, decode_update
from .errors import DecodeError, DecodeErrorKind
from .items import (
    BannerItem,
    MembershipItem,
    MessageItem,
    ModeChangeMessage,
    PaidMessage,
    PaidSticker,
    PlaceholderItem,
    TextMessage,
    ViewerEngagementMessage,
)
from .models import (
    AuthorBadge,
    AuthorInfo,
    CustomImage,
    CustomThumbnailBadge,
    IconBadge,
    IconType,
    Image,
    SimpleText,
    SimpleThumbnail,
    Thumbnail,
)
from .params import ParamsContext, YoutubeParams, new_params

__all__ = [
    "decode_initial",
    "decode_update",
    "DecodeError",
    "DecodeErrorKind",
    "InitialChat",
    "ChatUpdate",
    "LiveChat",
    "Continuation",
    "TimedContinuation",
    "InvalidationContinuation",
    "ReloadContinuation",
    "Header",
    "MenuItem",
    "ParticipantsList",
    "Participant",
    "Action",
    "AddBanner",
    "AddChatItem",
    "MarkItemDeleted",
    "MarkAuthorItemsDeleted",
    "ReplaceChatItem",
    "NoAction",
    "NO_ACTION",
    "MessageItem",
    "TextMessage",
    "MembershipItem",
    "PaidMessage",
    "PaidSticker",
    "ViewerEngagementMessage",
    "PlaceholderItem",
    "ModeChangeMessage",
    "BannerItem",
    "Message",
    "MessageContent",
    "Text",
    "Link",
    "Emoji",
    "AuthorInfo",
    "AuthorBadge",
    "IconBadge",
    "CustomThumbnailBadge",
    "IconType",
    "Image",
    "CustomImage",
    "Thumbnail",
    "SimpleThumbnail",
    "SimpleText",
    "YoutubeParams",
    "ParamsContext",
    "new_params",
]

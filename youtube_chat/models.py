from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, model_validator
from pydantic.alias_generators import to_camel

from .primitives import U16, NonEmpty
from .renderers import unwrapped
from .variants import select_variant, tag_variant, unsupported


class ChatModel(BaseModel):
    """Base for every decoded entity: camelCase on the wire, immutable once built."""

    model_config = ConfigDict(alias_generator=to_camel, validate_by_name=True, frozen=True)


class SimpleText(ChatModel):
    simple_text: str


class Thumbnail(ChatModel):
    url: str
    width: U16
    height: U16


class SimpleThumbnail(ChatModel):
    url: str


class Image(ChatModel):
    thumbnails: NonEmpty[Thumbnail]

    @property
    def first(self) -> Thumbnail:
        """The canonical thumbnail: first in source order, whatever its size."""
        return self.thumbnails[0]


class CustomImage(ChatModel):
    thumbnails: NonEmpty[SimpleThumbnail]

    @property
    def first(self) -> SimpleThumbnail:
        return self.thumbnails[0]


class IconType(str, Enum):
    VERIFIED = "VERIFIED"
    OWNER = "OWNER"
    MODERATOR = "MODERATOR"


class IconBadge(ChatModel):
    kind: Literal["icon"] = "icon"
    icon_type: IconType


class CustomThumbnailBadge(ChatModel):
    kind: Literal["custom_thumbnail"] = "custom_thumbnail"
    image: CustomImage


BadgeType = Annotated[Union[IconBadge, CustomThumbnailBadge], Discriminator("kind")]

BADGE_TYPES = ("icon", "customThumbnail")


class AuthorBadge(ChatModel):
    badge_type: BadgeType
    tooltip: str

    @model_validator(mode="before")
    @classmethod
    def _peek_badge_type(cls, data: Any) -> Any:
        # The badge type sits flattened beside `tooltip`: {"icon": {...}, "tooltip": "Owner"}
        if not isinstance(data, dict) or isinstance(data.get("badge_type"), (IconBadge, CustomThumbnailBadge)):
            return data
        key = select_variant(data, BADGE_TYPES, what="badge type", absent=unsupported("badge type", BADGE_TYPES))
        if key == "icon":
            badge_type = tag_variant(data[key], "icon")
        else:
            badge_type = {"kind": "custom_thumbnail", "image": data[key]}
        return {**data, "badgeType": badge_type}


Badge = Annotated[AuthorBadge, unwrapped("liveChatAuthorBadgeRenderer")]


class AuthorInfo(ChatModel):
    photo: Image = Field(alias="authorPhoto")
    name: Optional[SimpleText] = Field(None, alias="authorName")
    external_channel_id: str = Field(alias="authorExternalChannelId")
    badges: Optional[NonEmpty[Badge]] = Field(None, alias="authorBadges")


class Authored(ChatModel):
    """Mixin for items whose author fields are flattened into the item itself."""

    author_info: AuthorInfo

    @model_validator(mode="before")
    @classmethod
    def _gather_author_info(cls, data: Any) -> Any:
        if not isinstance(data, dict) or isinstance(data.get("author_info"), AuthorInfo):
            return data
        # AuthorInfo picks its author* keys out of the item and ignores the rest
        return {**data, "authorInfo": data}

from typing import Annotated, Literal, Optional, Union

from pydantic import BeforeValidator, Discriminator, Field

from .actions import ActionList
from .models import Badge, ChatModel, Image, SimpleText
from .primitives import U16, NonEmpty
from .renderers import unwrapped
from .variants import dispatch


class TimedContinuation(ChatModel):
    kind: Literal["timed"] = "timed"
    timeout_ms: U16
    token: str = Field(alias="continuation")

    def timeout_and_token(self) -> tuple[int, str]:
        return self.timeout_ms, self.token


class InvalidationContinuation(ChatModel):
    kind: Literal["invalidation"] = "invalidation"
    timeout_ms: U16
    token: str = Field(alias="continuation")

    def timeout_and_token(self) -> tuple[int, str]:
        return self.timeout_ms, self.token


class ReloadContinuation(ChatModel):
    kind: Literal["reload"] = "reload"
    token: str = Field(alias="continuation")

    def timeout_and_token(self) -> tuple[int, str]:
        # reload the chat right away
        return 0, self.token


CONTINUATION_KINDS = {
    "timedContinuationData": "timed",
    "invalidationContinuationData": "invalidation",
    "reloadContinuationData": "reload",
}

Continuation = Annotated[
    Union[TimedContinuation, InvalidationContinuation, ReloadContinuation],
    Discriminator("kind"),
    BeforeValidator(lambda value: dispatch(value, CONTINUATION_KINDS, what="continuation")),
]


class Participant(ChatModel):
    author_name: SimpleText
    author_photo: Image
    author_badges: NonEmpty[Badge]


class ParticipantsList(ChatModel):
    participants: NonEmpty[Annotated[Participant, unwrapped("liveChatParticipantRenderer")]]


class MenuItem(ChatModel):
    title: str
    subtitle: str
    selected: bool
    continuation: Continuation


class Header(ChatModel):
    """The "Top chat" / "Live chat" selector shown above the chat."""

    view_selector: Annotated[
        NonEmpty[MenuItem],
        unwrapped("sortFilterSubMenuRenderer", "subMenuItems"),
    ]


class LiveChat(ChatModel):
    continuations: NonEmpty[Continuation]
    actions: Optional[ActionList] = None
    participants_list: Optional[
        Annotated[ParticipantsList, unwrapped("liveChatParticipantsListRenderer")]
    ] = None
    header: Optional[Annotated[Header, unwrapped("liveChatHeaderRenderer")]] = None

    def timeout_and_token(self) -> tuple[int, str]:
        """Where the next poll resumes: the first continuation, collapsed."""
        return self.continuations[0].timeout_and_token()


class InitialChat(ChatModel):
    """The chat as embedded in the first page load."""

    live_chat: Optional[Annotated[LiveChat, unwrapped("liveChatRenderer")]] = Field(None, alias="contents")


class ChatUpdate(ChatModel):
    """A continuation poll response."""

    live_chat: Optional[Annotated[LiveChat, unwrapped("liveChatContinuation")]] = Field(
        None, alias="continuationContents"
    )

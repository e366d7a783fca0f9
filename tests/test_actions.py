from itertools import combinations

import pytest
from pydantic import TypeAdapter, ValidationError

from youtube_chat.actions import (
    ACTION_KINDS,
    NO_ACTION,
    ActionList,
    ActionOrNoAction,
    AddBanner,
    AddChatItem,
    MarkAuthorItemsDeleted,
    MarkItemDeleted,
    NoAction,
    ReplaceChatItem,
)
from youtube_chat.content import Text
from youtube_chat.items import TextMessage

action = TypeAdapter(ActionOrNoAction)

EXPECTED = {
    "addBannerToLiveChatCommand": AddBanner,
    "addLiveChatTickerItemAction": NoAction,
    "addChatItemAction": AddChatItem,
    "markChatItemAsDeletedAction": MarkItemDeleted,
    "markChatItemsByAuthorAsDeletedAction": MarkAuthorItemsDeleted,
    "replaceChatItemAction": ReplaceChatItem,
    "showLiveChatTooltipCommand": NoAction,
}


def error_types(exc_info):
    return {error["type"] for error in exc_info.value.errors()}


@pytest.fixture
def payloads(text_message_json):
    deleted = {"runs": [{"text": "[message deleted]"}]}
    return {
        "addBannerToLiveChatCommand": {"bannerRenderer": {"liveChatBannerRenderer": {"contents": text_message_json}}},
        "addLiveChatTickerItemAction": {"item": {}, "durationSec": "15"},
        "addChatItemAction": {"item": text_message_json, "clientId": "client"},
        "markChatItemAsDeletedAction": {"deletedStateMessage": deleted, "targetItemId": "msg-1"},
        "markChatItemsByAuthorAsDeletedAction": {"deletedStateMessage": deleted, "externalChannelId": "UCspam"},
        "replaceChatItemAction": {"targetItemId": "msg-1", "replacementItem": text_message_json},
        "showLiveChatTooltipCommand": {"tooltip": {}},
    }


def test_every_known_key_is_covered():
    assert set(EXPECTED) == set(ACTION_KINDS)


@pytest.mark.parametrize("key", list(EXPECTED))
def test_single_key_resolves(key, payloads):
    decoded = action.validate_python({key: payloads[key], "clickTrackingParams": "CAEQ"})
    assert isinstance(decoded, EXPECTED[key])


@pytest.mark.parametrize("key", ["addLiveChatTickerItemAction", "showLiveChatTooltipCommand"])
def test_inert_keys_are_no_action(key, payloads):
    assert action.validate_python({key: payloads[key]}) == NO_ACTION


@pytest.mark.parametrize("envelope", [{}, {"clickTrackingParams": "CAEQ"}, {"addChatItemAction": None}])
def test_no_known_key_is_unsupported(envelope):
    with pytest.raises(ValidationError) as exc_info:
        action.validate_python(envelope)
    assert error_types(exc_info) == {"unsupported_action"}
    assert "unsupported action" in str(exc_info.value)


@pytest.mark.parametrize("first,second", list(combinations(EXPECTED, 2)))
def test_two_keys_are_ambiguous(first, second, payloads):
    with pytest.raises(ValidationError) as exc_info:
        action.validate_python({first: payloads[first], second: payloads[second]})
    assert error_types(exc_info) == {"ambiguous_variant"}
    assert "ambiguous action" in str(exc_info.value)


def test_add_chat_item(payloads):
    decoded = action.validate_python({"addChatItemAction": payloads["addChatItemAction"]})
    assert isinstance(decoded.item, TextMessage)
    assert decoded.item.message.runs == (Text(text="hi"),)


def test_add_banner_unwraps_renderers(payloads):
    decoded = action.validate_python({"addBannerToLiveChatCommand": payloads["addBannerToLiveChatCommand"]})
    assert decoded.banner.id == "msg-1"
    assert decoded.banner.timestamp_usec == 1627321519452618
    assert decoded.banner.author_info.external_channel_id == "UCviewer"


def test_add_banner_missing_wrapper():
    with pytest.raises(ValidationError) as exc_info:
        action.validate_python({"addBannerToLiveChatCommand": {"bannerRenderer": {"liveChatBannerRenderer": {}}}})
    assert error_types(exc_info) == {"missing"}


def test_mark_deleted(payloads):
    decoded = action.validate_python({"markChatItemAsDeletedAction": payloads["markChatItemAsDeletedAction"]})
    assert decoded.target_item_id == "msg-1"
    assert decoded.deleted_state_message.runs == (Text(text="[message deleted]"),)


def test_replace_chat_item(payloads):
    decoded = action.validate_python({"replaceChatItemAction": payloads["replaceChatItemAction"]})
    assert decoded.target_item_id == "msg-1"
    assert isinstance(decoded.replacement_item, TextMessage)


def test_action_list_drops_inert_actions(payloads):
    decoded = TypeAdapter(ActionList).validate_python([
        {"showLiveChatTooltipCommand": payloads["showLiveChatTooltipCommand"]},
        {"markChatItemAsDeletedAction": payloads["markChatItemAsDeletedAction"]},
        {"addLiveChatTickerItemAction": payloads["addLiveChatTickerItemAction"]},
    ])
    assert len(decoded) == 1
    assert isinstance(decoded[0], MarkItemDeleted)


def test_action_list_of_only_inert_actions_is_none(payloads):
    decoded = TypeAdapter(ActionList).validate_python([
        {"showLiveChatTooltipCommand": payloads["showLiveChatTooltipCommand"]},
        {"addLiveChatTickerItemAction": payloads["addLiveChatTickerItemAction"]},
    ])
    assert decoded is None


def test_action_list_must_not_be_empty():
    with pytest.raises(ValidationError) as exc_info:
        TypeAdapter(ActionList).validate_python([])
    assert error_types(exc_info) == {"non_empty"}

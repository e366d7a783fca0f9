import json
import os

import pytest

FIXTURES = os.path.join(os.path.dirname(__file__), "fixtures")


@pytest.fixture
def load_fixture():
    def _load(name):
        with open(os.path.join(FIXTURES, name), "r", encoding="utf-8") as f:
            return f.read()
    return _load


@pytest.fixture
def image_json():
    return {"thumbnails": [
        {"url": "https://yt4.ggpht.com/a=s32", "width": 32, "height": 32},
        {"url": "https://yt4.ggpht.com/a=s64", "width": 64, "height": 64},
    ]}


@pytest.fixture
def author_fields(image_json):
    return {
        "authorName": {"simpleText": "Viewer"},
        "authorPhoto": image_json,
        "authorExternalChannelId": "UCviewer",
    }


@pytest.fixture
def text_message_json(author_fields):
    return {
        "liveChatTextMessageRenderer": {
            "id": "msg-1",
            "timestampUsec": "1627321519452618",
            "message": {"runs": [{"text": "hi"}]},
            **author_fields,
        }
    }


@pytest.fixture
def live_chat_json():
    """Wraps a LiveChat body into an update document and returns its JSON text."""
    def _wrap(**live_chat):
        live_chat.setdefault("continuations", [{"reloadContinuationData": {"continuation": "token"}}])
        return json.dumps({"continuationContents": {"liveChatContinuation": live_chat}})
    return _wrap

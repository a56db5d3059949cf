from typing import Any, Dict, List

import pytest

from emojicatalog.apiwrappers.emojibase import EmojibaseAPI
from emojicatalog.apiwrappers.unicode import UnicodeEmojiAPI

from requests import HTTPError


class FakeResponse:
    def __init__(self, content: bytes, status_code: int = 200) -> None:
        self.content = content
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise HTTPError(f"{self.status_code} Error")


class FakeSession:
    def __init__(self, response: FakeResponse) -> None:
        self.headers: Dict[str, str] = {}
        self.response = response
        self.requests: List[Dict[str, Any]] = []

    def request(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.requests.append({"method": method, "url": url, **kwargs})
        return self.response


def test_get_emoji_test() -> None:
    session = FakeSession(FakeResponse("# group: Smileys & Emotion\n".encode("utf-8")))
    api = UnicodeEmojiAPI(session=session)

    assert api.get_emoji_test("15.1") == "# group: Smileys & Emotion\n"
    assert session.requests[0]["method"] == "GET"
    assert session.requests[0]["url"] == "https://unicode.org/Public/emoji/15.1/emoji-test.txt"
    assert session.requests[0]["timeout"] == 20
    assert session.headers["User-Agent"].startswith("emojicatalog/")


def test_get_emojibase_data_decodes_utf8() -> None:
    session = FakeSession(FakeResponse('[{"emoji": "\U0001F600"}]'.encode("utf-8")))
    api = EmojibaseAPI(session=session)

    assert api.get_data("en") == '[{"emoji": "\U0001F600"}]'
    assert session.requests[0]["url"] == "https://cdn.jsdelivr.net/npm/emojibase-data@latest/en/data.json"


def test_http_errors_propagate() -> None:
    api = UnicodeEmojiAPI(session=FakeSession(FakeResponse(b"Not Found", status_code=404)))

    with pytest.raises(HTTPError):
        api.get_emoji_test("99.0")

from typing import Optional

from emojicatalog import constants
from emojicatalog.apiwrappers.base import BaseAPI

from requests import Session


class UnicodeEmojiAPI(BaseAPI):
    def __init__(self, session: Optional[Session] = None) -> None:
        super().__init__(base_url=constants.UNICODE_EMOJI_BASE_URL, session=session)

    def get_emoji_test(self, version: str) -> str:
        """Downloads emoji-test.txt for the given emoji version, e.g. "15.1" """
        return self.get_text([version, "emoji-test.txt"])

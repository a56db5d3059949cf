from typing import Optional

from emojicatalog import constants
from emojicatalog.apiwrappers.base import BaseAPI

from requests import Session


class EmojibaseAPI(BaseAPI):
    def __init__(self, session: Optional[Session] = None) -> None:
        super().__init__(base_url=constants.EMOJIBASE_BASE_URL, session=session)

    def get_data(self, locale: str) -> str:
        """Downloads the raw data.json for the given locale, e.g. "en".
        The text is returned undecoded so it goes through the same parsing as a file on disk."""
        return self.get_text([locale, "data.json"])

from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

import logging

from emojicatalog.apiwrappers.emojibase import EmojibaseAPI
from emojicatalog.apiwrappers.unicode import UnicodeEmojiAPI
from emojicatalog.config import get_bool
from emojicatalog.emitters import write_text

if TYPE_CHECKING:
    import emojicatalog.config as cfg

log = logging.getLogger(__name__)


def read_source(path: str) -> str:
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def download_sources(config: cfg.Config) -> Tuple[str, str]:
    version = config["download"]["unicode_version"]
    locale = config["download"]["emojibase_locale"]

    log.info("Downloading emoji-test.txt for emoji version %s", version)
    emoji_test_text = UnicodeEmojiAPI().get_emoji_test(version)

    log.info("Downloading emojibase data.json for locale %s", locale)
    tag_data_text = EmojibaseAPI().get_data(locale)

    if get_bool(config["download"], "save"):
        write_text(config["main"]["emoji_test"], emoji_test_text)
        write_text(config["main"]["tag_data"], tag_data_text)
        log.info("Saved downloaded data to %s and %s", config["main"]["emoji_test"], config["main"]["tag_data"])

    return emoji_test_text, tag_data_text


def load_sources(config: cfg.Config, download: bool = False) -> Tuple[str, str]:
    """Returns the contents of emoji-test.txt and data.json, in that order"""
    if download:
        return download_sources(config)

    return read_source(config["main"]["emoji_test"]), read_source(config["main"]["tag_data"])

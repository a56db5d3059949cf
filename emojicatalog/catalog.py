from typing import Dict, List, NamedTuple

import logging

from emojicatalog.emojitest import parse_emoji_test
from emojicatalog.models.emoji import Emoji
from emojicatalog.tag_data import TagIndex, parse_tag_data
from emojicatalog.utils import tokenize

log = logging.getLogger(__name__)

TokenIndex = Dict[str, List[str]]


class Catalog(NamedTuple):
    emojis: List[Emoji]
    tokens: TokenIndex


def attach_tags(emojis: List[Emoji], tag_index: TagIndex) -> List[Emoji]:
    """Sets the tags of every emoji from the tag index. Emojis without tags get an empty list."""
    missing = 0
    for emoji in emojis:
        tags = tag_index.get(emoji.grapheme)
        if tags is None:
            missing += 1
            tags = []
        emoji.tags = list(tags)

    log.debug("%d of %d emojis have no tags", missing, len(emojis))

    return emojis


def emoji_tokens(emoji: Emoji) -> List[str]:
    return tokenize(emoji.tags + [emoji.name, emoji.group, emoji.subgroup])


def build_token_index(emojis: List[Emoji]) -> TokenIndex:
    return {emoji.grapheme: emoji_tokens(emoji) for emoji in emojis}


def build_catalog(emoji_test_text: str, tag_data_text: str) -> Catalog:
    emojis = parse_emoji_test(emoji_test_text)
    tag_index = parse_tag_data(tag_data_text)
    attach_tags(emojis, tag_index)
    return Catalog(emojis=emojis, tokens=build_token_index(emojis))

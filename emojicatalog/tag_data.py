from typing import Dict, List

import json
import logging

import marshmallow

from emojicatalog.exc import TagDataDecodeError
from emojicatalog.models.tag_data import TagEntrySchema

log = logging.getLogger(__name__)

TagIndex = Dict[str, List[str]]


def parse_tag_data(text: str) -> TagIndex:
    """Parses an emojibase data.json document into a mapping from emoji to its tags.
    Skin tone variations get the tags of their base emoji followed by their own tags."""
    try:
        entries = TagEntrySchema().loads(text, many=True)
    except json.JSONDecodeError as e:
        raise TagDataDecodeError(f"Tag data is not valid JSON: {e}") from e
    except marshmallow.ValidationError as e:
        raise TagDataDecodeError(f"Tag data has an unexpected structure: {e.messages}") from e

    tags: TagIndex = {}
    for entry in entries:
        # null is treated like a missing list
        base_tags = entry.tags or []
        tags[entry.emoji] = base_tags
        for skin in entry.skins or []:
            # Duplicates are fine here, they disappear when tokenizing
            tags[skin.emoji] = base_tags + (skin.tags or [])

    log.info("Parsed tags for %d emojis", len(tags))

    return tags

from __future__ import annotations

from typing import List, Optional

from dataclasses import dataclass, field

import marshmallow
import marshmallow_dataclass


class BaseSchema(marshmallow.Schema):
    class Meta:
        # emojibase entries carry many more fields (label, hexcode, order, ...)
        unknown = marshmallow.EXCLUDE


@dataclass
class SkinEntry:
    emoji: str
    tags: Optional[List[str]] = field(default_factory=list)


@dataclass
class TagEntry:
    emoji: str
    tags: Optional[List[str]] = field(default_factory=list)
    skins: Optional[List[SkinEntry]] = field(default_factory=list)


# From the emojibase-data <locale>/data.json file
TagEntrySchema = marshmallow_dataclass.class_schema(TagEntry, base_schema=BaseSchema)

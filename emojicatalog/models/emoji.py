from __future__ import annotations

from typing import Any, Dict, List, Optional


class Emoji:
    """Emoji encapsulates a single fully-qualified emoji or emoji sequence from emoji-test.txt.
    Not every emoji is a single code point, e.g. the black cat emoji is the cat code point,
    a zero width joiner and the black large square code point.
    :ivar grapheme: The emoji or emoji sequence itself, e.g. "😀"
    :type grapheme: str
    :ivar codes: The code points that make up the grapheme, e.g. [0x1F600]
    :type codes: list[int]
    :ivar name: Name of the emoji, e.g. "grinning face"
    :type name: str
    :ivar group: The emoji's group, e.g. "Smileys & Emotion"
    :type group: str
    :ivar subgroup: The emoji's subgroup, e.g. "face-smiling"
    :type subgroup: str
    :ivar tags: Tags describing the emoji, e.g. ["happy", "smile"]
    :type tags: list[str]"""

    def __init__(
        self,
        grapheme: str,
        codes: List[int],
        name: str,
        group: str,
        subgroup: str,
        tags: Optional[List[str]] = None,
    ) -> None:
        self.grapheme = grapheme
        self.codes = codes
        self.name = name
        self.group = group
        self.subgroup = subgroup
        self.tags: List[str] = tags if tags is not None else []

    def __eq__(self, other) -> bool:
        if not isinstance(other, Emoji):
            return False

        return (
            self.grapheme == other.grapheme
            and self.codes == other.codes
            and self.name == other.name
            and self.group == other.group
            and self.subgroup == other.subgroup
            and self.tags == other.tags
        )

    def __hash__(self) -> int:
        return hash(self.grapheme)

    def __repr__(self) -> str:
        return f"[{self.group}/{self.subgroup}] {self.grapheme} {self.name}"

    def jsonify(self) -> Dict[str, Any]:
        return {
            "Grapheme": self.grapheme,
            "Codes": self.codes,
            "Name": self.name,
            "Group": self.group,
            "Subgroup": self.subgroup,
            "Tags": self.tags,
        }

    @staticmethod
    def from_json(json_data: Dict[str, Any]) -> Emoji:
        return Emoji(
            grapheme=json_data["Grapheme"],
            codes=json_data["Codes"],
            name=json_data["Name"],
            group=json_data["Group"],
            subgroup=json_data["Subgroup"],
            tags=json_data.get("Tags") or [],
        )

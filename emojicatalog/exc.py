from typing import List


class EmojiCatalogError(Exception):
    pass


class TagDataDecodeError(EmojiCatalogError):
    pass


class CodePointParseError(EmojiCatalogError):
    def __init__(self, field: str) -> None:
        super().__init__(f"Invalid code point {field!r}")
        self.field = field


class GraphemeMismatchError(EmojiCatalogError):
    def __init__(self, line_number: int, got: List[int], want: List[int]) -> None:
        super().__init__(
            "Mismatched code points on line {}: got {}, want {}".format(
                line_number, " ".join(f"{c:X}" for c in got), " ".join(f"{c:X}" for c in want)
            )
        )
        self.line_number = line_number
        self.got = got
        self.want = want

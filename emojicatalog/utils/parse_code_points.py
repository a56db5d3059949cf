from typing import List

import re

from emojicatalog.exc import CodePointParseError

# int(x, 16) alone would also accept signs, underscores and non-ASCII digits
hex_regex = re.compile(r"[0-9A-Fa-f]{1,6}")


def parse_code_points(codes: List[str]) -> List[int]:
    """Parses a list of hexadecimal unicode code points (e.g. ["2639", "FE0F"])
    into the corresponding integer values (e.g. [0x2639, 0xFE0F])"""
    code_points = []
    for code in codes:
        if hex_regex.fullmatch(code) is None:
            raise CodePointParseError(code)

        code_point = int(code, 16)
        if code_point > 0x10FFFF:
            raise CodePointParseError(code)

        code_points.append(code_point)
    return code_points

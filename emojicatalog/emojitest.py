from typing import List

import logging
import re

from emojicatalog.exc import GraphemeMismatchError
from emojicatalog.models.emoji import Emoji
from emojicatalog.utils import parse_code_points

log = logging.getLogger(__name__)

GROUP_PREFIX = "# group: "
SUBGROUP_PREFIX = "# subgroup: "

# Matches a data line such as
# 1F600    ; fully-qualified     # 😀 E1.0 grinning face
data_line_regex = re.compile(
    r"^([0-9A-F ]*?);\s*(component|fully-qualified|minimally-qualified|unqualified)\s*# (.+?) E[0-9]+\.[0-9]+ (.*)$"
)


def parse_emoji_test(text: str) -> List[Emoji]:
    """Parses the fully-qualified emojis out of the contents of an emoji-test.txt file.

    Group and subgroup are taken from the closest preceding "# group:" and "# subgroup:" lines.
    Component, minimally-qualified and unqualified emojis are skipped, see https://unicode.org/reports/tr51/
    Raises GraphemeMismatchError if the listed code points don't spell out the listed emoji,
    and CodePointParseError if a code point isn't valid hex."""
    group = ""
    subgroup = ""
    skipped = 0

    emojis = []
    # Only "\n" ends a line, names may contain other control characters
    for line_number, line in enumerate(text.split("\n"), start=1):
        if line.endswith("\r"):
            line = line[:-1]

        # skip blank lines
        if len(line.strip()) == 0:
            continue

        if line.startswith(GROUP_PREFIX):
            group = line[len(GROUP_PREFIX) :]
            continue

        if line.startswith(SUBGROUP_PREFIX):
            subgroup = line[len(SUBGROUP_PREFIX) :]
            continue

        # skip all other comments
        if line.startswith("#"):
            continue

        match = data_line_regex.search(line)
        if match is None:
            continue

        codes = match.group(1).split()
        qualification = match.group(2).strip()
        grapheme = match.group(3).strip()
        name = match.group(4).strip()

        if qualification != "fully-qualified":
            skipped += 1
            continue

        # Some emoji data sources list the wrong emoji next to the code points
        code_points = parse_code_points(codes)
        grapheme_code_points = [ord(c) for c in grapheme]
        if code_points != grapheme_code_points:
            raise GraphemeMismatchError(line_number, code_points, grapheme_code_points)

        emojis.append(Emoji(grapheme=grapheme, codes=code_points, name=name, group=group, subgroup=subgroup))

    log.debug("Skipped %d emojis that were not fully-qualified", skipped)
    log.info("Parsed %d fully-qualified emojis", len(emojis))

    return emojis

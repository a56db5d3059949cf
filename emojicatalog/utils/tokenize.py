from typing import Iterable, List

import re

# Used to split words like "animal-mammal" into "animal" and "mammal"
non_letter_regex = re.compile(r"[^a-zA-Z]")


def tokenize(strings: Iterable[str]) -> List[str]:
    """Tokenizes a collection of strings into a sorted list of unique lowercase words,
    e.g. ["Foo bar", "moo-cow"] -> ["bar", "cow", "foo", "moo"]

    Periods are removed before splitting so "e.g." becomes "eg" rather than "e" and "g"."""
    tokens = set()
    for s in strings:
        s = s.lower().replace(".", "")
        s = non_letter_regex.sub(" ", s)
        tokens.update(s.split())
    return sorted(tokens)

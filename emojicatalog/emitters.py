from typing import Dict, List

import contextlib
import json
import logging
import os

from emojicatalog.models.emoji import Emoji

log = logging.getLogger(__name__)

TOKEN_FORMATS = ["go", "python"]

GO_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}


def write_texts(files: Dict[str, str]) -> None:
    """Writes each text to its path as UTF-8.
    All files go to temporary siblings first and are only moved into place once every one of them was written,
    so a failed write leaves no new outputs and no temporary files behind."""
    tmp_paths: Dict[str, str] = {}
    try:
        for path, text in files.items():
            tmp_path = path + ".tmp"
            with open(tmp_path, "w", encoding="utf-8", newline="\n") as f:
                tmp_paths[path] = tmp_path
                f.write(text)
    except Exception:
        for tmp_path in tmp_paths.values():
            with contextlib.suppress(OSError):
                os.remove(tmp_path)
        raise

    for path, tmp_path in tmp_paths.items():
        os.replace(tmp_path, path)


def write_text(path: str, text: str) -> None:
    write_texts({path: text})


def go_quote(s: str) -> str:
    """Quotes a string as a Go string literal. Like Go's %q, invisible characters such as
    the zero width joiner and tag characters are escaped."""
    parts = []
    for c in s:
        if c in GO_ESCAPES:
            parts.append(GO_ESCAPES[c])
        elif c.isprintable():
            parts.append(c)
        elif ord(c) <= 0xFFFF:
            parts.append(f"\\u{ord(c):04x}")
        else:
            parts.append(f"\\U{ord(c):08x}")
    return '"' + "".join(parts) + '"'


def format_catalog(emojis: List[Emoji]) -> str:
    return json.dumps([emoji.jsonify() for emoji in emojis], ensure_ascii=False, indent=4) + "\n"


def format_go_token_table(tokens: Dict[str, List[str]], package: str = "main") -> str:
    lines = [
        f"package {package}",
        "",
        "// Code generated by emojicatalog. DO NOT EDIT.",
        "var emojis = map[string][]string{",
    ]
    for grapheme, emoji_tokens in tokens.items():
        formatted = ", ".join(go_quote(token) for token in emoji_tokens)
        lines.append(f"\t{go_quote(grapheme)}: {{{formatted}}},")
    lines.append("}")
    return "\n".join(lines) + "\n"


def format_python_token_table(tokens: Dict[str, List[str]]) -> str:
    header = "# Generated by emojicatalog, do not edit.\n"
    return header + "EMOJI_TOKENS = " + json.dumps(tokens, ensure_ascii=False, indent=4) + "\n"


def format_token_table(tokens: Dict[str, List[str]], fmt: str = "go", package: str = "main") -> str:
    if fmt == "go":
        return format_go_token_table(tokens, package)
    if fmt == "python":
        return format_python_token_table(tokens)

    raise ValueError(f"Unknown token table format {fmt!r}, expected one of {', '.join(TOKEN_FORMATS)}")


def write_catalog(path: str, emojis: List[Emoji]) -> None:
    write_text(path, format_catalog(emojis))
    log.info("Wrote %d emojis to %s", len(emojis), path)


def write_token_table(path: str, tokens: Dict[str, List[str]], fmt: str = "go", package: str = "main") -> None:
    write_text(path, format_token_table(tokens, fmt, package))
    log.info("Wrote tokens for %d emojis to %s", len(tokens), path)

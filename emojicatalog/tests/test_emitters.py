import json

import pytest

from emojicatalog.emitters import format_token_table, go_quote, write_catalog, write_text, write_texts, write_token_table
from emojicatalog.models.emoji import Emoji

GRINNING = "\U0001F600"
FAMILY = "\U0001F468\u200d\U0001F469\u200d\U0001F467"


def get_emojis():
    return [
        Emoji(GRINNING, [0x1F600], "grinning face", "Smileys & Emotion", "face-smiling", ["happy", "smile"]),
        Emoji(FAMILY, [0x1F468, 0x200D, 0x1F469, 0x200D, 0x1F467], "family: man, woman, girl", "People & Body", "family"),
    ]


def test_go_quote():
    assert go_quote("face") == '"face"'
    assert go_quote(GRINNING) == f'"{GRINNING}"'
    assert go_quote('a"b\\c') == '"a\\"b\\\\c"'
    assert go_quote("a\nb") == '"a\\nb"'


def test_go_quote_escapes_invisible_characters():
    assert go_quote(FAMILY) == '"\U0001F468\\u200d\U0001F469\\u200d\U0001F467"'
    assert go_quote("\U000E0001") == '"\\U000e0001"'


def test_go_token_table():
    tokens = {GRINNING: ["face", "grinning"], "\U0001F44B": []}

    assert format_token_table(tokens, "go") == (
        "package main\n"
        "\n"
        "// Code generated by emojicatalog. DO NOT EDIT.\n"
        "var emojis = map[string][]string{\n"
        f'\t"{GRINNING}": {{"face", "grinning"}},\n'
        '\t"\U0001F44B": {},\n'
        "}\n"
    )


def test_go_token_table_package():
    assert format_token_table({}, "go", package="emoji").startswith("package emoji\n")


def test_python_token_table():
    tokens = {GRINNING: ["face", "grinning"], FAMILY: ["family"]}

    text = format_token_table(tokens, "python")
    namespace = {}
    exec(text, namespace)

    assert namespace["EMOJI_TOKENS"] == tokens
    assert list(namespace["EMOJI_TOKENS"]) == [GRINNING, FAMILY]


def test_unknown_token_format():
    with pytest.raises(ValueError):
        format_token_table({}, "rust")


def test_write_catalog(tmp_path):
    path = tmp_path / "emojis.json"
    emojis = get_emojis()

    write_catalog(str(path), emojis)

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data[0] == {
        "Grapheme": GRINNING,
        "Codes": [0x1F600],
        "Name": "grinning face",
        "Group": "Smileys & Emotion",
        "Subgroup": "face-smiling",
        "Tags": ["happy", "smile"],
    }
    assert [Emoji.from_json(d) for d in data] == emojis
    # non-ASCII is written verbatim rather than as \u escapes
    assert GRINNING in path.read_text(encoding="utf-8")
    assert list(tmp_path.iterdir()) == [path]


def test_write_token_table_replaces_existing_file(tmp_path):
    path = tmp_path / "emojis.go"
    path.write_text("stale", encoding="utf-8")

    write_token_table(str(path), {GRINNING: ["face"]})

    assert path.read_text(encoding="utf-8").startswith("package main\n")
    assert list(tmp_path.iterdir()) == [path]


def test_write_texts(tmp_path):
    first = tmp_path / "emojis.json"
    second = tmp_path / "emojis.go"

    write_texts({str(first): "[]", str(second): "package main\n"})

    assert first.read_text(encoding="utf-8") == "[]"
    assert second.read_text(encoding="utf-8") == "package main\n"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["emojis.go", "emojis.json"]


def test_write_texts_is_all_or_nothing(tmp_path):
    first = tmp_path / "emojis.json"

    with pytest.raises(OSError):
        write_texts({str(first): "[]", str(tmp_path / "missing" / "emojis.go"): "package main\n"})

    assert list(tmp_path.iterdir()) == []


def test_write_text_removes_temporary_file_on_failure(tmp_path):
    path = tmp_path / "emojis.go"

    # a lone surrogate can't be encoded as UTF-8, so the write itself fails
    with pytest.raises(UnicodeEncodeError):
        write_text(str(path), "package main\n\ud800")

    assert list(tmp_path.iterdir()) == []

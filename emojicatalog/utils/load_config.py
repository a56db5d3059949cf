from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

import configparser
import logging
import os

from emojicatalog.exc import EmojiCatalogError

if TYPE_CHECKING:
    import emojicatalog.config as cfg

log = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "main": {
        "emoji_test": "emoji-test.txt",
        "tag_data": "data.json",
        "catalog_output": "emojis.json",
        "tokens_output": "emojis.go",
        "tokens_format": "go",
        "go_package": "main",
    },
    "download": {
        "unicode_version": "15.1",
        "emojibase_locale": "en",
        "save": "1",
    },
}


def config_to_dict(config: configparser.ConfigParser) -> cfg.Config:
    r: Dict[str, Any] = {}

    for section in config.sections():
        r[section] = {}
        for key, val in config.items(section):
            r[section][key] = val

    return r


def load_config(path: Optional[str], required: bool = False) -> cfg.Config:
    """Loads the INI file at `path` on top of the built-in defaults.
    A missing file is only an error if `required` is set, e.g. when the path was given on the command line."""
    config = configparser.ConfigParser()
    config.read_dict(DEFAULT_CONFIG)

    if path is not None:
        res = config.read(os.path.realpath(path), encoding="utf-8")
        if not res:
            if required:
                raise EmojiCatalogError(f"{path} missing. Check out the example config file.")
            log.debug("%s missing, using default configuration", path)

    return config_to_dict(config)

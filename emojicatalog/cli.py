from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import argparse
import logging
import sys

from emojicatalog.catalog import build_catalog
from emojicatalog.emitters import TOKEN_FORMATS, format_catalog, format_token_table, write_texts
from emojicatalog.exc import EmojiCatalogError
from emojicatalog.sources import load_sources
from emojicatalog.utils import init_logging, load_config, parse_args

from requests import RequestException

if TYPE_CHECKING:
    import emojicatalog.config as cfg

log = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config.ini"

# Command line arguments that override the key of the same name in [main]
MAIN_OVERRIDES = ["emoji_test", "tag_data", "catalog_output", "tokens_output", "tokens_format"]


def handle_exceptions(exctype, value, tb):
    log.error("Logging an uncaught exception", exc_info=(exctype, value, tb))


def apply_overrides(config: cfg.Config, args: argparse.Namespace) -> cfg.Config:
    for key in MAIN_OVERRIDES:
        value = getattr(args, key, None)
        if value is not None:
            config["main"][key] = value
    return config


def run(config: cfg.Config, download: bool = False) -> None:
    tokens_format = config["main"]["tokens_format"]
    if tokens_format not in TOKEN_FORMATS:
        raise EmojiCatalogError(f"Invalid tokens_format {tokens_format!r} in [main]")

    emoji_test_text, tag_data_text = load_sources(config, download)
    catalog = build_catalog(emoji_test_text, tag_data_text)

    catalog_output = config["main"]["catalog_output"]
    tokens_output = config["main"]["tokens_output"]

    # Both outputs are rendered and written together, a failed run must not leave one of them behind
    write_texts(
        {
            catalog_output: format_catalog(catalog.emojis),
            tokens_output: format_token_table(catalog.tokens, tokens_format, config["main"]["go_package"]),
        }
    )
    log.info("Wrote %d emojis to %s", len(catalog.emojis), catalog_output)
    log.info("Wrote tokens for %d emojis to %s", len(catalog.tokens), tokens_output)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    init_logging("emojicatalog", logging.DEBUG if args.verbose else logging.INFO)
    sys.excepthook = handle_exceptions

    try:
        config = load_config(args.config or DEFAULT_CONFIG_PATH, required=args.config is not None)
        apply_overrides(config, args)
        run(config, download=args.download)
    except EmojiCatalogError as e:
        log.error("%s", e)
        return 1
    except RequestException:
        log.exception("Failed to download emoji data")
        return 1
    except OSError:
        log.exception("Failed to read or write emoji data")
        return 1

    return 0

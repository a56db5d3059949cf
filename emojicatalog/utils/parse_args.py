import argparse

from emojicatalog.emitters import TOKEN_FORMATS


def parse_args(argv=None):
    """
    Parse command-line arguments for the generator.
    Path and format arguments override the values read from the config file.
    """
    parser = argparse.ArgumentParser(
        description="Build an emoji catalog and search token table from emoji-test.txt and emojibase data.json"
    )
    parser.add_argument(
        "--config", "-c", default=None, help="Specify which config file to use (default: config.ini if it exists)"
    )
    parser.add_argument(
        "--download",
        "-d",
        action="store_true",
        help="Download emoji-test.txt and data.json instead of reading them from disk",
    )
    parser.add_argument("--emoji-test", dest="emoji_test", help="Path to emoji-test.txt")
    parser.add_argument("--tag-data", dest="tag_data", help="Path to the emojibase data.json")
    parser.add_argument("--catalog-output", dest="catalog_output", help="Where to write the emoji catalog JSON")
    parser.add_argument("--tokens-output", dest="tokens_output", help="Where to write the token table")
    parser.add_argument(
        "--tokens-format", dest="tokens_format", choices=TOKEN_FORMATS, help="Language of the token table"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    return parser.parse_args(argv)

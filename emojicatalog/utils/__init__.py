from emojicatalog.utils.init_logging import init_logging
from emojicatalog.utils.load_config import load_config
from emojicatalog.utils.parse_args import parse_args
from emojicatalog.utils.parse_code_points import parse_code_points
from emojicatalog.utils.tokenize import tokenize

__all__ = ["init_logging", "load_config", "parse_args", "parse_code_points", "tokenize"]

import logging
import sys

from colorama import Fore, Style

LEVEL_COLORS = {
    "DEBUG": Fore.BLUE,
    "INFO": Fore.WHITE,
    "WARNING": Fore.YELLOW,
    "ERROR": Fore.RED,
    "CRITICAL": Fore.RED,
}


class BelowLevelFilter(logging.Filter):
    def __init__(self, level: int) -> None:
        super().__init__()
        self.level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self.level


class ColoredFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        # Work on a copy so other handlers still see the plain level name
        record = logging.makeLogRecord(record.__dict__)
        color = LEVEL_COLORS.get(record.levelname)
        if color is not None:
            record.levelname = Style.BRIGHT + color + record.levelname + Style.RESET_ALL
        return super().format(record)


def init_logging(app: str = "emojicatalog", level: int = logging.INFO) -> logging.Logger:
    """Sends records below WARNING to stdout and everything else to stderr, both with colored level names.
    Handlers are installed on the root logger so the modules' __name__ loggers and urllib3 share them."""
    logger = logging.getLogger(app)
    logger.setLevel(level)

    formatter = ColoredFormatter("[%(asctime)s] [%(levelname)-18s] %(name)s: %(message)s")

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(formatter)
    stdout_handler.addFilter(BelowLevelFilter(logging.WARNING))
    stdout_handler.setLevel(logging.DEBUG)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(formatter)
    stderr_handler.setLevel(logging.WARNING)

    root = logging.getLogger()
    root.addHandler(stdout_handler)
    root.addHandler(stderr_handler)

    # Connection pool chatter is only interesting when something is wrong
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    return logger

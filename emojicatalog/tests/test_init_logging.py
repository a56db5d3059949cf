import logging

import pytest

from emojicatalog.utils import init_logging


@pytest.fixture
def root_handlers():
    root = logging.getLogger()
    before = list(root.handlers)
    yield root
    for handler in list(root.handlers):
        if handler not in before:
            root.removeHandler(handler)
    logging.getLogger("emojicatalog").setLevel(logging.NOTSET)


def test_splits_stdout_and_stderr(root_handlers):
    before = set(root_handlers.handlers)

    logger = init_logging("emojicatalog", logging.DEBUG)

    assert logger.level == logging.DEBUG
    stdout_handler, stderr_handler = [h for h in root_handlers.handlers if h not in before]

    warning = logging.makeLogRecord({"levelno": logging.WARNING, "levelname": "WARNING", "msg": "x"})
    info = logging.makeLogRecord({"levelno": logging.INFO, "levelname": "INFO", "msg": "x"})
    assert stdout_handler.filter(info)
    assert not stdout_handler.filter(warning)
    assert stderr_handler.level == logging.WARNING


def test_colored_level_name_does_not_leak(root_handlers):
    init_logging("emojicatalog")
    record = logging.makeLogRecord({"levelno": logging.ERROR, "levelname": "ERROR", "msg": "broken"})

    formatted = root_handlers.handlers[-1].format(record)

    assert "ERROR" in formatted
    assert "broken" in formatted
    assert record.levelname == "ERROR"

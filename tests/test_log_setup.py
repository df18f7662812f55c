import logging

import pytest

from pbn.utils.log_setup import configure_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_without_file_logging_is_silent(restore_root_logger):
    configure_logging(None)
    root = restore_root_logger
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], logging.NullHandler)
    assert root.level == logging.INFO


def test_file_handler_writes_records(restore_root_logger, tmp_path):
    log_file = tmp_path / "logs" / "pbn.log"
    configure_logging(log_file, "debug")
    logging.getLogger("pbn.sample").debug("hello %s", "there")
    for handler in restore_root_logger.handlers:
        handler.flush()
    assert "DEBUG pbn.sample: hello there" in log_file.read_text(encoding="utf-8")


def test_numeric_level_is_accepted(restore_root_logger):
    configure_logging(None, logging.WARNING)
    assert restore_root_logger.level == logging.WARNING


def test_unknown_level_raises(restore_root_logger):
    with pytest.raises(ValueError, match="Unknown log level: NOPE"):
        configure_logging(None, "nope")

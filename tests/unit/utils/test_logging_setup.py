"""Test logging setup."""

import logging

import pytest
from src.utils.logging import setup_logging


def test_level_by_name(tmp_path):
    log_file = tmp_path / "run.log"
    setup_logging("DEBUG", str(log_file))
    logging.getLogger("src.test").debug("hello")
    assert logging.getLogger().level == logging.DEBUG
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert "hello" in log_file.read_text()
    setup_logging(logging.WARNING)


def test_unknown_level():
    with pytest.raises(ValueError):
        setup_logging("LOUD")

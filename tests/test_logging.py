"""Tests for CLI logging setup."""

import logging

import pytest

from monthcal.config import CalendarConfig
from monthcal_cli import console_level, setup_logging


@pytest.fixture
def root_handlers():
    """Restore the root logger's handlers after the test."""
    root = logging.getLogger()
    saved, level = list(root.handlers), root.level
    yield root
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.handlers.extend(saved)
    root.setLevel(level)


@pytest.mark.parametrize(
    "verbose, quiet, expected",
    [
        (False, False, logging.WARNING),
        (True, False, logging.INFO),
        (False, True, logging.ERROR),
        (True, True, logging.ERROR),
    ],
)
def test_console_level(verbose, quiet, expected):
    assert console_level(verbose, quiet) == expected


def test_setup_logging_writes_file(tmp_path, root_handlers):
    """Test the file handler records DEBUG lines under the configured log dir."""
    config = CalendarConfig(log_dir=tmp_path / "nested" / "logs", log_filename="cal.log")
    setup_logging(verbose=True, config=config)

    file_handlers = [h for h in root_handlers.handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1
    console = [h for h in root_handlers.handlers if type(h) is logging.StreamHandler]
    assert console[0].level == logging.INFO

    logging.getLogger("monthcal.test").debug("grid rendered")
    file_handlers[0].flush()
    text = (tmp_path / "nested" / "logs" / "cal.log").read_text()
    assert "DEBUG - grid rendered" in text


def test_setup_logging_replaces_handlers(tmp_path, root_handlers):
    """Test repeated setup leaves exactly one file and one console handler."""
    config = CalendarConfig(log_dir=tmp_path)
    setup_logging(config=config)
    first = list(root_handlers.handlers)
    setup_logging(quiet=True, config=config)

    assert len(root_handlers.handlers) == 2
    assert not set(first) & set(root_handlers.handlers)
    assert all(h.stream is None for h in first if isinstance(h, logging.FileHandler))

"""CLI package for monthcal."""

import logging
import sys

from monthcal.config import CalendarConfig

FILE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"


def console_level(verbose: bool = False, quiet: bool = False) -> int:
    """Stderr threshold for the flags; --quiet wins over --verbose."""
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.INFO
    return logging.WARNING


def _configured(handler: logging.Handler, fmt: str, level: int) -> logging.Handler:
    handler.setFormatter(logging.Formatter(fmt))
    handler.setLevel(level)
    return handler


def setup_logging(
    verbose: bool = False, quiet: bool = False, config: CalendarConfig | None = None
) -> None:
    """Send everything to the log file and warnings (by default) to stderr.

    Handlers from an earlier call are closed and replaced, so the CLI can be
    invoked repeatedly in one process.

    Args:
        verbose: If True, set console to INFO level
        quiet: If True, set console to ERROR level only
        config: Optional CalendarConfig for log directory/filename settings
    """
    config = config or CalendarConfig.from_env()
    config.log_dir.mkdir(parents=True, exist_ok=True)

    handlers = [
        _configured(
            logging.FileHandler(config.log_dir / config.log_filename),
            FILE_FORMAT,
            logging.DEBUG,
        ),
        _configured(
            logging.StreamHandler(sys.stderr),
            CONSOLE_FORMAT,
            console_level(verbose, quiet),
        ),
    ]

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for old in list(root_logger.handlers):
        root_logger.removeHandler(old)
        old.close()
    for handler in handlers:
        root_logger.addHandler(handler)


def main() -> None:
    """Main entry point for the CLI."""
    from monthcal_cli.app import app

    app()


__all__ = ["console_level", "main", "setup_logging"]

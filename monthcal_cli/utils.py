"""CLI helpers for argument parsing and user feedback."""

import logging
from datetime import datetime

import typer

from monthcal.calendar_grid import format_date
from monthcal.notification import Notifier
from monthcal_cli.display import console

logger = logging.getLogger(__name__)


def parse_date(date_str: str) -> str:
    """Parse a YYYY-MM-DD argument and return it zero-padded.

    Raises:
        typer.BadParameter: If the date format is invalid.
    """
    try:
        return format_date(datetime.strptime(date_str, "%Y-%m-%d").date())
    except ValueError:
        raise typer.BadParameter(f"Invalid date format: {date_str}. Use YYYY-MM-DD.")


def report_form_errors(errors: dict[str, str]) -> None:
    """Log field-level validation errors."""
    for field, message in errors.items():
        logger.error(f"{field}: {message}")


def report_notification(notifier: Notifier) -> None:
    """Print the current notification, if any."""
    message = notifier.message
    if message:
        console.print(f"[bold green]✓[/bold green] {message}")

"""Add an event."""

import logging

import typer
from typing_extensions import Annotated

from monthcal.constants import DEFAULT_CATEGORY, DEFAULT_COLOR
from monthcal.forms import EventForm
from monthcal.exceptions import ValidationError
from monthcal.models.event import EventCategory
from monthcal_cli.context import get_context
from monthcal_cli.utils import parse_date, report_notification

logger = logging.getLogger(__name__)


def add(
    date: Annotated[
        str,
        typer.Argument(help="Event date (YYYY-MM-DD)"),
    ],
    title: Annotated[
        str,
        typer.Argument(help="Event title"),
    ],
    time: Annotated[
        str,
        typer.Option("--time", "-t", help="Start time (HH:MM)"),
    ] = "",
    description: Annotated[
        str,
        typer.Option("--description", "-d", help="Free-text description"),
    ] = "",
    category: Annotated[
        EventCategory,
        typer.Option("--category", "-c", help="Event category"),
    ] = EventCategory(DEFAULT_CATEGORY),
    color: Annotated[
        str,
        typer.Option("--color", help="Hex color, e.g. #3b82f6"),
    ] = DEFAULT_COLOR,
) -> None:
    """Add an event on a date.

    Example:
        monthcal add 2024-02-05 "Dentist" --time 09:30 --category personal
    """
    controller = get_context().controller
    form = EventForm.for_new_event(parse_date(date))
    form.title = title
    form.time = time
    form.description = description
    form.category = category.value
    form.color = color

    result = controller.submit(form)
    if not result.ok:
        raise ValidationError("Invalid event", result.errors)

    report_notification(controller.notifier)
    typer.echo(f"  ID: {result.event.id}")

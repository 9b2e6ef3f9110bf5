"""Edit an existing event."""

import logging

import typer
from typing_extensions import Annotated

from monthcal.exceptions import EventNotFoundError, ValidationError
from monthcal.models.event import EventCategory
from monthcal_cli.context import get_context
from monthcal_cli.utils import parse_date, report_notification

logger = logging.getLogger(__name__)


def edit(
    event_id: Annotated[
        str,
        typer.Argument(help="Event ID"),
    ],
    title: Annotated[
        str | None,
        typer.Option("--title", help="New title"),
    ] = None,
    date: Annotated[
        str | None,
        typer.Option("--date", help="New date (YYYY-MM-DD)"),
    ] = None,
    time: Annotated[
        str | None,
        typer.Option("--time", "-t", help="New time (HH:MM, empty string to clear)"),
    ] = None,
    description: Annotated[
        str | None,
        typer.Option("--description", "-d", help="New description"),
    ] = None,
    category: Annotated[
        EventCategory | None,
        typer.Option("--category", "-c", help="New category"),
    ] = None,
    color: Annotated[
        str | None,
        typer.Option("--color", help="New hex color"),
    ] = None,
) -> None:
    """Edit an event. Only the options given are changed."""
    controller = get_context().controller
    form = controller.edit_event_form(event_id)
    if form is None:
        raise EventNotFoundError(f"Event '{event_id}' not found")

    if title is not None:
        form.title = title
    if date is not None:
        form.date = parse_date(date)
    if time is not None:
        form.time = time
    if description is not None:
        form.description = description
    if category is not None:
        form.category = category.value
    if color is not None:
        form.color = color

    result = controller.submit(form)
    if not result.ok:
        raise ValidationError("Invalid event", result.errors)

    report_notification(controller.notifier)

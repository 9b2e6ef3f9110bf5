"""Delete an event."""

import logging

import typer
from typing_extensions import Annotated

from monthcal_cli.context import get_context
from monthcal_cli.utils import report_notification

logger = logging.getLogger(__name__)


def delete(
    event_id: Annotated[
        str,
        typer.Argument(help="Event ID to delete"),
    ],
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Skip confirmation prompt"),
    ] = False,
) -> None:
    """Delete an event."""
    controller = get_context().controller
    event = controller.store.get(event_id)

    if event is None:
        # Unknown ids are a no-op, not an error
        typer.echo(f"No event with ID '{event_id}'")
        return

    if not force:
        print(f"\nDelete event '{event.title}' on {event.date}")
        if not typer.confirm("Are you sure you want to delete this event?"):
            typer.echo("Delete cancelled.")
            return

    controller.delete(event_id)
    report_notification(controller.notifier)

"""List the events on one date."""

import typer
from typing_extensions import Annotated

from monthcal.calendar_grid import sort_events
from monthcal_cli.context import get_context
from monthcal_cli.display import EventRenderer
from monthcal_cli.utils import parse_date


def events(
    date: Annotated[
        str,
        typer.Argument(help="Date (YYYY-MM-DD)"),
    ],
) -> None:
    """List events on a date, ordered by time (untimed events last)."""
    date_str = parse_date(date)
    store = get_context().store
    EventRenderer().render_day(date_str, sort_events(store.find_by_date(date_str)))

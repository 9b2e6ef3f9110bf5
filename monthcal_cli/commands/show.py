"""Display a month grid."""

import logging

import typer
from typing_extensions import Annotated

from monthcal.navigation import MonthCursor
from monthcal_cli.context import get_context
from monthcal_cli.display import GridRenderer

logger = logging.getLogger(__name__)


def show(
    year: Annotated[
        int | None,
        typer.Option("--year", "-y", help="Year to display (defaults to current)"),
    ] = None,
    month: Annotated[
        int | None,
        typer.Option(
            "--month", "-m", min=1, max=12, help="Month 1-12 (defaults to current)"
        ),
    ] = None,
    offset: Annotated[
        int,
        typer.Option(
            "--offset", "-o", help="Months to step from the selected month (e.g. -1, 2)"
        ),
    ] = 0,
) -> None:
    """Display a month as a Monday-first grid with its events.

    Examples:
        monthcal show                      # Current month
        monthcal show -y 2024 -m 2         # February 2024
        monthcal show --offset 1           # Next month
    """
    ctx = get_context()
    controller = ctx.controller

    cursor = controller.cursor
    try:
        controller.cursor = MonthCursor(
            year if year is not None else cursor.year,
            month if month is not None else cursor.month,
        )
        if offset:
            controller.cursor.navigate(offset)
    except ValueError as e:
        raise typer.BadParameter(str(e))

    view = controller.view()
    logger.info(f"Rendering {view.label} ({len(view.cells)} cells)")
    GridRenderer().render(view)

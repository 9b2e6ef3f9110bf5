"""Month grid generation and event-to-day association."""

import calendar
import math
from datetime import date, timedelta
from typing import Iterable

from monthcal.event_store import EventStore
from monthcal.models.day_cell import DayCell, MonthView
from monthcal.models.event import Event

MONTH_NAMES = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]

WEEKDAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def format_date(value: date) -> str:
    """Format a date as zero-padded YYYY-MM-DD.

    Both cell dates and "today" go through this function so the today
    comparison is a plain string match.
    """
    return value.isoformat()


def _check_month(year: int, month: int) -> None:
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be in 1..12, got {month}")
    if not date.min.year <= year <= date.max.year:
        raise ValueError(
            f"Year must be in {date.min.year}..{date.max.year}, got {year}"
        )


def days_in_month(year: int, month: int) -> int:
    """Number of days in month (1-12) of year."""
    _check_month(year, month)
    return calendar.monthrange(year, month)[1]


def leading_days(year: int, month: int) -> int:
    """Cells before the 1st in a Monday-first week (Monday 0 .. Sunday 6)."""
    _check_month(year, month)
    return date(year, month, 1).weekday()


def cell_count(year: int, month: int) -> int:
    """Smallest multiple of 7 covering the leading cells and the month."""
    return math.ceil((leading_days(year, month) + days_in_month(year, month)) / 7) * 7


def grid_bounds(year: int, month: int) -> tuple[date, date]:
    """First and last date shown in the month grid.

    Raises:
        ValueError: If the grid would run past the supported date range
            (December 9999 needs days of the year 10000).
    """
    try:
        start = date(year, month, 1) - timedelta(days=leading_days(year, month))
        end = start + timedelta(days=cell_count(year, month) - 1)
    except OverflowError:
        raise ValueError(
            f"Grid for {year}-{month:02d} runs past {date.max.isoformat()}"
        )
    return start, end


def month_label(year: int, month: int) -> str:
    """Header label such as 'February 2024'."""
    _check_month(year, month)
    return f"{MONTH_NAMES[month - 1]} {year}"


def sort_events(events: Iterable[Event]) -> list[Event]:
    """Sort by time ascending; untimed events last; ties keep input order."""
    return sorted(events, key=lambda e: (not e.time, e.time))


def render_month(
    year: int,
    month: int,
    store: EventStore,
    today: date | None = None,
) -> list[DayCell]:
    """Build the flat, Monday-first day cell sequence for a month.

    Leading cells hold the last days of the previous month and trailing
    cells the first days of the next one. The store is only read.

    Args:
        year: Displayed year
        month: Displayed month (1-12)
        store: Source of events for each cell
        today: Date to flag as today (defaults to the local current date)

    Returns:
        35 or 42 cells (28 when a 28-day February starts on a Monday)

    Raises:
        ValueError: For a month outside 1..12 or a grid outside the
            supported date range
    """
    leading = leading_days(year, month)
    month_days = days_in_month(year, month)
    total = cell_count(year, month)
    today_str = format_date(today or date.today())

    start, _ = grid_bounds(year, month)

    cells = []
    for i in range(total):
        cell_date = start + timedelta(days=i)
        cell_str = format_date(cell_date)
        cells.append(
            DayCell(
                date=cell_str,
                day=cell_date.day,
                in_current_month=leading <= i < leading + month_days,
                is_today=cell_str == today_str,
                events=sort_events(store.find_by_date(cell_str)),
            )
        )
    return cells


def render_month_view(
    year: int,
    month: int,
    store: EventStore,
    today: date | None = None,
) -> MonthView:
    """render_month plus the header label."""
    return MonthView(
        year=year,
        month=month,
        label=month_label(year, month),
        cells=render_month(year, month, store, today=today),
    )

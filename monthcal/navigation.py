"""Displayed month state and month-by-month navigation."""

from datetime import date

from monthcal.calendar_grid import grid_bounds, month_label


class MonthCursor:
    """The year/month currently on screen.

    Only months whose whole grid fits between date.min and date.max are
    accepted, so every position of the cursor can be rendered.
    """

    def __init__(self, year: int | None = None, month: int | None = None):
        today = date.today()
        self.year = year if year is not None else today.year
        self.month = month if month is not None else today.month
        grid_bounds(self.year, self.month)

    def navigate(self, delta: int) -> tuple[int, int]:
        """Step delta months forward (or back when negative), rolling the year.

        Raises:
            ValueError: If the target month cannot be rendered; the cursor
                stays where it was.
        """
        index = self.year * 12 + (self.month - 1) + delta
        year, month_index = divmod(index, 12)
        grid_bounds(year, month_index + 1)
        self.year, self.month = year, month_index + 1
        return self.year, self.month

    def next(self) -> tuple[int, int]:
        return self.navigate(1)

    def previous(self) -> tuple[int, int]:
        return self.navigate(-1)

    def go_to_today(self, today: date | None = None) -> tuple[int, int]:
        """Reset to the month containing today."""
        today = today or date.today()
        self.year, self.month = today.year, today.month
        return self.year, self.month

    @property
    def label(self) -> str:
        return month_label(self.year, self.month)

    def __repr__(self) -> str:
        return f"MonthCursor(year={self.year}, month={self.month})"

"""Render-time models for the month grid."""

from pydantic import BaseModel

from monthcal.models.event import Event


class DayCell(BaseModel):
    """One square of the month grid. Never persisted."""

    date: str
    day: int
    in_current_month: bool
    is_today: bool = False
    events: list[Event] = []


class MonthView(BaseModel):
    """A rendered month: header label plus the flat cell sequence."""

    year: int
    month: int
    label: str
    cells: list[DayCell]

    @property
    def weeks(self) -> list[list[DayCell]]:
        """Cells chunked into Monday-first weeks."""
        return [self.cells[i : i + 7] for i in range(0, len(self.cells), 7)]

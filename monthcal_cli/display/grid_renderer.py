"""Rich month grid renderer."""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from monthcal.calendar_grid import WEEKDAY_NAMES
from monthcal.models.day_cell import DayCell, MonthView
from monthcal_cli.display.console import console as shared_console


class GridRenderer:
    """Render a MonthView as a 7-column table.

    - Today: bold reverse day number
    - Days outside the month: dim
    - Events: optional time (dim) then the title in the event color
    """

    def __init__(self, console: Console | None = None, max_events: int = 3):
        """Initialize the renderer.

        Args:
            console: Rich Console instance (uses shared console if not provided).
            max_events: Events listed per cell before collapsing to "+N more".
        """
        self.console = console or shared_console
        self.max_events = max_events

    def render(self, view: MonthView) -> None:
        table = Table(
            title=view.label,
            show_header=True,
            header_style="bold",
            show_lines=True,
            expand=True,
        )
        for name in WEEKDAY_NAMES:
            table.add_column(name, ratio=1, overflow="fold")

        for week in view.weeks:
            table.add_row(*(self._render_cell(cell) for cell in week))

        self.console.print(table)

    def _render_cell(self, cell: DayCell) -> Text:
        text = Text()
        if cell.is_today:
            day_style = "bold reverse"
        elif not cell.in_current_month:
            day_style = "dim"
        else:
            day_style = "bold"
        text.append(str(cell.day), style=day_style)

        for event in cell.events[: self.max_events]:
            text.append("\n")
            if event.time:
                text.append(f"{event.time} ", style="dim")
            text.append(event.title, style=event.color)

        hidden = len(cell.events) - self.max_events
        if hidden > 0:
            text.append(f"\n+{hidden} more", style="dim italic")
        return text

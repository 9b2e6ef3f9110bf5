"""Rich event list renderer."""

from rich.console import Console
from rich.text import Text

from monthcal.models.event import Event
from monthcal_cli.display.console import console as shared_console


class EventRenderer:
    """Render events for a single day as a flat list."""

    def __init__(self, console: Console | None = None):
        self.console = console or shared_console

    def render_day(self, date_str: str, events: list[Event]) -> None:
        """Render events (already sorted) under a date header."""
        self.console.print(f"\n[cyan]{date_str}[/cyan]")
        if not events:
            self.console.print("[dim]  No events[/dim]\n")
            return

        for event in events:
            self.render_event_line(event)

        count = len(events)
        event_word = "event" if count == 1 else "events"
        self.console.print(f"\n[dim]{count} {event_word}[/dim]\n")

    def render_event_line(self, event: Event) -> None:
        line = Text()
        line.append("  ")
        line.append(f"{event.time or 'All day':<9}", style="dim")
        line.append("● ", style=event.color)
        line.append(event.title)
        line.append(f" [{event.category.value}]", style="dim")
        line.append(f"  #{event.id}", style="dim")
        self.console.print(line)
        if event.description:
            self.console.print(Text(f"             {event.description}", style="italic dim"))

"""Display module for rendering calendar output.

- GridRenderer: month grid table
- EventRenderer: per-day event lists
- console: shared Rich console instance
"""

from monthcal_cli.display.console import console
from monthcal_cli.display.event_renderer import EventRenderer
from monthcal_cli.display.grid_renderer import GridRenderer

__all__ = ["console", "EventRenderer", "GridRenderer"]

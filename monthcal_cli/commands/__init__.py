"""CLI commands package."""

from monthcal_cli.commands.add import add
from monthcal_cli.commands.delete import delete
from monthcal_cli.commands.edit import edit
from monthcal_cli.commands.events import events
from monthcal_cli.commands.show import show

__all__ = ["add", "delete", "edit", "events", "show"]

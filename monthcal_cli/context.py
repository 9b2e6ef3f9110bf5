"""Shared CLI context with lazy-initialized dependencies."""

from monthcal import create_controller
from monthcal.config import CalendarConfig
from monthcal.controller import CalendarController
from monthcal.event_store import EventStore


class CLIContext:
    """Shared context with lazy-initialized dependencies for CLI commands.

    Usage:
        ctx = CLIContext()
        events = ctx.store.find_by_date("2024-02-05")
    """

    def __init__(
        self,
        verbose: bool = False,
        quiet: bool = False,
        config: CalendarConfig | None = None,
    ):
        self.verbose = verbose
        self.quiet = quiet

        # Lazy-loaded dependencies
        self._config = config
        self._controller: CalendarController | None = None

    @property
    def config(self) -> CalendarConfig:
        """Get configuration (lazy-loaded)."""
        if self._config is None:
            self._config = CalendarConfig.from_env()
        return self._config

    @property
    def controller(self) -> CalendarController:
        """Get controller with a hydrated store (lazy-loaded)."""
        if self._controller is None:
            self._controller = create_controller(self.config)
        return self._controller

    @property
    def store(self) -> EventStore:
        return self.controller.store

    def close(self) -> None:
        if self._controller is not None:
            self._controller.close()
            self._controller = None


# Global context instance (set by Typer callback)
_ctx: CLIContext | None = None


def get_context() -> CLIContext:
    """Get the current CLI context.

    Raises:
        RuntimeError: If context not initialized
    """
    if _ctx is None:
        raise RuntimeError("CLI context not initialized. This should not happen.")
    return _ctx


def set_context(ctx: CLIContext | None) -> None:
    """Set the global CLI context."""
    global _ctx
    _ctx = ctx

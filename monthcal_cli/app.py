"""Typer application and command routing."""

import functools
import logging

import typer
from typing_extensions import Annotated

from monthcal.exceptions import CalendarError, ValidationError
from monthcal_cli import setup_logging
from monthcal_cli.commands import add, delete, edit, events, show
from monthcal_cli.context import CLIContext, get_context, set_context
from monthcal_cli.utils import report_form_errors

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="monthcal",
    help="Month calendar with locally stored events.",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show informational log output"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only show errors"),
    ] = False,
) -> None:
    """Set up logging and the shared CLI context."""
    cli_ctx = CLIContext(verbose=verbose, quiet=quiet)
    setup_logging(verbose=verbose, quiet=quiet, config=cli_ctx.config)
    set_context(cli_ctx)
    ctx.call_on_close(_close_context)


def _close_context() -> None:
    try:
        get_context().close()
    except RuntimeError:
        return
    set_context(None)


def _guarded(command):
    """Report CalendarError (field errors for ValidationError) and exit 1."""

    @functools.wraps(command)
    def wrapper(*args, **kwargs):
        try:
            return command(*args, **kwargs)
        except ValidationError as e:
            report_form_errors(e.errors)
            raise typer.Exit(1)
        except CalendarError as e:
            logger.error(f"Calendar error: {e}")
            raise typer.Exit(1)

    return wrapper


app.command("show")(_guarded(show))
app.command("events")(_guarded(events))
app.command("add")(_guarded(add))
app.command("edit")(_guarded(edit))
app.command("delete")(_guarded(delete))

"""The dclock command: print the local decimal time."""

from __future__ import annotations

import click

from dclock import __version__
from dclock.commands._base import DclockCommand
from dclock.commands._context import AppContext
from dclock.config.settings import DclockSettings
from dclock.domain.types import MAX_OFFSET_HOURS, MIN_OFFSET_HOURS

BANNER = (
    "%(prog)s %(version)s (Decimal clock that maps each day to 1000 decimal minutes)\n"
    "\n"
    "Written by Travis Montoya."
)

_EXAMPLES = """\
  dclock                  Decimal time: 742
  dclock -d               Date: 3/1/2024 then Decimal time: 742
  dclock --offset 1       Decimal time for UTC+1
  dclock -q               742 (bare value for status bars)
  dclock --json           Full reading as JSON"""


@click.command("dclock", cls=DclockCommand, examples=_EXAMPLES)
@click.version_option(__version__, "-v", "--version", prog_name="dclock", message=BANNER)
@click.option("-d", "--date", "show_date", is_flag=True, help="Also print the local date.")
@click.option(
    "--offset",
    type=click.IntRange(MIN_OFFSET_HOURS, MAX_OFFSET_HOURS),
    default=None,
    help="UTC offset in hours for this run.",
)
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the value.")
@click.option("--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    show_date: bool,
    offset: int | None,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """dclock — each day is 1000 decimal minutes, counting down to NEW."""
    from dclock.services.reading import ClockService

    ctx.ensure_object(dict)
    settings = DclockSettings.from_cli(
        config_path=config_path,
        offset=offset,
        # Unset flags stay None so env vars and TOML can still supply them.
        show_date=show_date or None,
        json_output=json_output or None,
        quiet=quiet or None,
        verbose=verbose or None,
        log_json=log_json or None,
    )
    app = AppContext(settings, clock=ctx.obj.get("clock"))
    ctx.obj = app
    app.emit(ClockService(app.clock, app.offset).read())

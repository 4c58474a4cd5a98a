"""Custom Click command class for dclock.

DclockCommand adds two behaviours on top of ``click.Command``:

* ``--examples`` prints usage examples and exits, keeping ``--help`` short.
* Usage errors (unknown options, extra arguments) are reported on
  stdout and exit with ``[cli] usage_error_exit_code``, which defaults
  to 0.  Click's own behaviour (stderr, exit 2) is not used.
"""

from __future__ import annotations

import logging
import os
import tomllib
from typing import Any

import click
from pydantic import ValidationError

from dclock.config.discovery import load_config
from dclock.config.models import CliConfig

logger = logging.getLogger(__name__)

USAGE_ERROR_ENV_VAR = "DCLOCK_CLI__USAGE_ERROR_EXIT_CODE"


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


def usage_error_exit_code() -> int:
    """Exit code for usage errors, from dclock.toml or the environment.

    Option parsing already failed, so ``--config`` is unavailable here.
    Only the ``[cli]`` section of the discovered file and
    ``DCLOCK_CLI__USAGE_ERROR_EXIT_CODE`` are consulted, so a bad value
    elsewhere in the configuration does not change the exit code.  An
    unreadable or invalid ``[cli]`` setting falls back to 0.
    """
    try:
        cli_config = load_config().cli
        env_value = os.environ.get(USAGE_ERROR_ENV_VAR)
        if env_value is not None:
            cli_config = CliConfig(usage_error_exit_code=env_value)
    except (OSError, tomllib.TOMLDecodeError, ValidationError) as exc:
        logger.debug("Config unusable while reporting usage error: %s", exc)
        return 0
    return cli_config.usage_error_exit_code


class DclockCommand(click.Command):
    """Click Command with ``--examples`` and the dclock usage-error policy."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            self._reject_extra_args(ctx, args)
            return super().parse_args(ctx, args)
        except click.UsageError as exc:
            self.report_usage_error(ctx, exc)
            raise  # report_usage_error always exits

    def _reject_extra_args(self, ctx: click.Context, args: list[str]) -> None:
        """Fail on leftover arguments before any eager option runs.

        Click only checks for extra arguments after ``--version`` and
        ``--examples`` have already printed and exited.
        """
        if ctx.resilient_parsing or self.allow_extra_args:
            return
        _, rest, _ = self.make_parser(ctx).parse_args(args=list(args))
        if rest:
            plural = "s" if len(rest) > 1 else ""
            ctx.fail(f"Got unexpected extra argument{plural} ({' '.join(rest)})")

    def report_usage_error(self, ctx: click.Context, exc: click.UsageError) -> None:
        """Print usage and the error to stdout, then exit."""
        click.echo(ctx.get_usage())
        click.echo(f"{ctx.info_name}: {exc.format_message()}")
        click.echo(f"Try '{ctx.command_path} --help' for the valid options.")
        ctx.exit(usage_error_exit_code())

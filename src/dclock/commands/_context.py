"""AppContext — state shared by the dclock command for one invocation.

Created by the root command after settings are built.  Owns logging
setup, the clock source, the resolved UTC offset, and result emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from functools import cached_property
from typing import TYPE_CHECKING

import click

from dclock.config.logging import configure_logging
from dclock.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from dclock.config.settings import DclockSettings
    from dclock.domain.types import UtcOffset
    from dclock.infrastructure.clock import Clock
    from dclock.services.result import ServiceResult


class AppContext:
    """Per-invocation context.

    The clock defaults to :class:`~dclock.infrastructure.clock.SystemClock`;
    tests pass a frozen clock through ``obj={"clock": ...}``.
    """

    def __init__(self, settings: DclockSettings, *, clock: Clock | None = None) -> None:
        self.settings = settings
        if clock is None:
            from dclock.infrastructure.clock import SystemClock

            clock = SystemClock()
        self.clock = clock
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @cached_property
    def offset(self) -> UtcOffset:
        """UTC offset, resolved once on first use."""
        from dclock.config.offset import resolve_offset

        return resolve_offset(self.settings)

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            expanded=self.settings.expanded,
        )

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        output = format_result(result, settings=self.output_settings)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

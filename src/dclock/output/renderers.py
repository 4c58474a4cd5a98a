"""Rich renderers for clock readings and service errors.

Each renderer writes to a Console from :func:`create_console`; callers
get plain text back via :func:`render_result`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text

from dclock.domain.types import ClockReading, DecimalTime, Marker
from dclock.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from dclock.domain.types import CalendarDate
    from dclock.services.result import ServiceResult


def format_date(date: CalendarDate) -> str:
    """``M/D/YYYY`` without zero padding."""
    return f"{date.month}/{date.day}/{date.year}"


def format_decimal(decimal: DecimalTime) -> str:
    """The bare display value: ``NEW`` at midnight, otherwise the unpadded number."""
    if decimal.marker is Marker.NEW:
        return Marker.NEW.value
    return str(decimal.value)


def _render_reading(console: Console, reading: ClockReading, *, expanded: bool) -> None:
    if expanded:
        console.print(
            Text("Date: ", style="dclock.label"),
            Text(format_date(reading.date), style="dclock.date"),
            sep="",
        )

    marker = reading.decimal.marker
    line = Text("Decimal time: ", style="dclock.label")
    value_style = "dclock.new" if marker is Marker.NEW else "dclock.value"
    line.append(format_decimal(reading.decimal), style=value_style)
    if marker in (Marker.NOON, Marker.TEATIME):
        line.append(f" ({marker.value})", style="dclock.marker")
    console.print(line)


def _render_error(console: Console, result: ServiceResult) -> None:
    message = result.error.message if result.error else "Unknown error"
    line = Text("ERROR", style="dclock.error")
    line.append(f": {result.op} — {message}")
    console.print(line)


def render_result(result: ServiceResult, *, expanded: bool = False) -> str:
    """Render a clock ServiceResult to text."""
    console = create_console()
    if result.ok:
        _render_reading(console, ClockReading.model_validate(result.data), expanded=expanded)
    else:
        _render_error(console, result)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Bare value for scripts and status bars; errors keep their message."""
    if not result.ok:
        message = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {message}"
    return format_decimal(ClockReading.model_validate(result.data).decimal)

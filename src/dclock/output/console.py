"""Rich Console factory and theme for dclock output.

Consoles render into a StringIO buffer so formatters keep a plain
``-> str`` contract.  Outside a terminal (pipes, CliRunner) Rich emits
no escape codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DCLOCK_THEME = Theme(
    {
        "dclock.label": "dim",
        "dclock.value": "bold cyan",
        "dclock.new": "bold green",
        "dclock.marker": "bold yellow",
        "dclock.date": "bold",
        "dclock.error": "bold red",
    }
)


def create_console(*, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=DCLOCK_THEME,
        highlight=False,
        width=width or 80,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()

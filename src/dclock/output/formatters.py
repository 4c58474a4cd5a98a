"""Output mode dispatch.

A reading is rendered for humans (Rich), for scripts (``--quiet``), or
for machines (``--json``).  The mode travels in :class:`OutputSettings`
so nothing here depends on global state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from dclock.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from dclock.services.result import ServiceResult


class OutputSettings(BaseModel):
    """How a ServiceResult should be presented."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    expanded: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON wins over quiet; quiet wins over the expanded date line.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, expanded=settings.expanded)

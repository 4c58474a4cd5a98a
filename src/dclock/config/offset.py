"""UTC offset resolution.

The offset is a single signed whole-hour integer.  It comes from, in order:
the ``--offset`` flag (or ``DCLOCK_OFFSET``), ``[clock] utc_offset``, the
one-line offset file, and finally ``[clock] default_offset``.

INVARIANT: Reading the offset never fails.  A missing file, unreadable
file, malformed text, or an out-of-range value falls back quietly.
The fallback is only visible in debug logging (``--verbose``).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from dclock.domain.types import MAX_OFFSET_HOURS, MIN_OFFSET_HOURS, UtcOffset

if TYPE_CHECKING:
    from dclock.config.settings import DclockSettings

logger = logging.getLogger(__name__)

DEFAULT_OFFSET = -6


def parse_offset(text: str) -> int:
    """Parse a signed decimal integer the way the offset file expects.

    Leading spaces and newlines are skipped, a single ``-`` is the sign,
    and digits accumulate until the first non-digit.  Anything
    unparseable reads as 0.
    """
    body = text.lstrip(" \n")
    negative = body.startswith("-")
    if negative:
        body = body[1:]

    magnitude = 0
    for char in body:
        if char not in "0123456789":
            break
        magnitude = magnitude * 10 + (ord(char) - ord("0"))
    return -magnitude if negative else magnitude


def read_offset_file(path: Path, default: int = DEFAULT_OFFSET) -> int:
    """Return the offset stored in *path*, or *default* if it cannot be read."""
    try:
        text = path.expanduser().read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        logger.debug("Offset file %s not readable (%s); using %d", path, exc, default)
        return default

    hours = parse_offset(text)
    if not MIN_OFFSET_HOURS <= hours <= MAX_OFFSET_HOURS:
        logger.debug(
            "Offset %d in %s is outside %d..%d; using %d",
            hours,
            path,
            MIN_OFFSET_HOURS,
            MAX_OFFSET_HOURS,
            default,
        )
        return default
    return hours


def resolve_offset(settings: DclockSettings) -> UtcOffset:
    """Pick the UTC offset for this invocation."""
    if settings.offset is not None:
        hours = settings.offset
        source = "override"
    elif settings.clock.utc_offset is not None:
        hours = settings.clock.utc_offset
        source = "config"
    else:
        hours = read_offset_file(Path(settings.clock.offset_file), settings.clock.default_offset)
        source = settings.clock.offset_file
    logger.debug("UTC offset %+d from %s", hours, source)
    return UtcOffset(hours=hours)

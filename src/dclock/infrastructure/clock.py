"""Clock sources.

The domain never reads the time itself; :class:`ClockService` asks a
:class:`Clock` for the current UTC instant and does the rest.
"""

from __future__ import annotations

import time
from typing import Protocol

from dclock.domain.types import NANOS_PER_SECOND, Instant


class Clock(Protocol):
    """Port: source of the current UTC instant."""

    def now(self) -> Instant: ...


class SystemClock:
    """Production clock backed by ``time.time_ns()`` (CLOCK_REALTIME)."""

    def now(self) -> Instant:
        return Instant.from_nanoseconds(time.time_ns())


class FrozenClock:
    """Clock pinned to a fixed instant, for tests and reproducible runs."""

    def __init__(self, fixed: Instant) -> None:
        self._fixed = fixed

    def now(self) -> Instant:
        return self._fixed

    def advance(self, *, seconds: int = 0, nanoseconds: int = 0) -> None:
        """Move the frozen instant forward (or backward, with negative values)."""
        total = (self._fixed.seconds + seconds) * NANOS_PER_SECOND
        total += self._fixed.nanoseconds + nanoseconds
        self._fixed = Instant.from_nanoseconds(total)

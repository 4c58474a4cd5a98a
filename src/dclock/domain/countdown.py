"""Decimal time: the remaining fraction of a day on a 1000-step scale.

The value counts down.  It is 1000 only at the exact midnight instant,
999 one nanosecond later, 500 at noon, and 0 during the final
86.4 seconds of the day.  Arithmetic is integer-only at nanosecond
resolution; Python ints are unbounded so ``remaining * 1000`` cannot wrap.
"""

from __future__ import annotations

from dclock.domain import timeofday
from dclock.domain.types import NANOS_PER_SECOND, SECONDS_PER_DAY, DecimalTime, Instant

NANOS_PER_DAY = SECONDS_PER_DAY * NANOS_PER_SECOND
DECIMAL_SCALE = 1000


def nanos_today(seconds_of_day: int, nanosecond_remainder: int) -> int:
    """Nanoseconds elapsed since midnight, rebuilt from hour/minute/second."""
    hour, minute, second = timeofday.from_seconds_of_day(seconds_of_day)
    elapsed = timeofday.seconds_of_day(hour, minute, second)
    return elapsed * NANOS_PER_SECOND + nanosecond_remainder


def decimal_time(seconds_of_day: int, nanosecond_remainder: int) -> int:
    """Return the decimal time (0..1000) for a position within the day."""
    remaining = NANOS_PER_DAY - nanos_today(seconds_of_day, nanosecond_remainder)
    return remaining * DECIMAL_SCALE // NANOS_PER_DAY


def decimal_time_of(instant: Instant) -> DecimalTime:
    """Decimal time for an already offset-adjusted instant."""
    return DecimalTime(value=decimal_time(instant.seconds_of_day, instant.nanoseconds))

"""Hour/minute/second split of the seconds elapsed in a day."""

from __future__ import annotations

from dclock.domain.types import TimeOfDay


def from_seconds_of_day(seconds_of_day: int) -> tuple[int, int, int]:
    """Return ``(hour, minute, second)`` for 0 <= *seconds_of_day* < 86400."""
    hour, rest = divmod(seconds_of_day, 3600)
    minute, second = divmod(rest, 60)
    return hour, minute, second


def seconds_of_day(hour: int, minute: int, second: int) -> int:
    return hour * 3600 + minute * 60 + second


def time_of_day(seconds: int) -> TimeOfDay:
    hour, minute, second = from_seconds_of_day(seconds)
    return TimeOfDay(hour=hour, minute=minute, second=second)

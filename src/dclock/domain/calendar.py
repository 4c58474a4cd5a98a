"""Proleptic Gregorian calendar arithmetic over epoch seconds.

Dates are derived from whole days since 1970-01-01 without consulting a
platform calendar library:

- ``year_and_day_of_year``: walks forward one year at a time from 1970,
  subtracting each year's length until the remainder fits.
- ``month_and_day``: locates the month in a cumulative days-per-month table.

INVARIANT: Only instants at or after the epoch are supported.  Negative
adjusted seconds raise :class:`PreEpochError`.
"""

from __future__ import annotations

from dclock.domain.types import SECONDS_PER_DAY, CalendarDate

EPOCH_YEAR = 1970

#: Days elapsed by the end of each month (index 0 = January).
CUMULATIVE_DAYS: tuple[int, ...] = (31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334, 365)
CUMULATIVE_DAYS_LEAP: tuple[int, ...] = (31, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335, 366)


class PreEpochError(ValueError):
    """Raised when an offset-adjusted instant falls before 1970-01-01T00:00."""

    def __init__(self, seconds: int) -> None:
        self.seconds = seconds
        super().__init__(f"Adjusted epoch seconds {seconds} precede 1970-01-01")


def is_leap(year: int) -> bool:
    """Gregorian leap rule: every 4th year, except centuries not divisible by 400."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_year(year: int) -> int:
    return 366 if is_leap(year) else 365


def cumulative_days(year: int) -> tuple[int, ...]:
    """Return the cumulative month-end table for *year*."""
    return CUMULATIVE_DAYS_LEAP if is_leap(year) else CUMULATIVE_DAYS


def year_and_day_of_year(adjusted_epoch_seconds: int) -> tuple[int, int]:
    """Return ``(year, zero-based day of year)`` for offset-adjusted epoch seconds.

    Raises:
        PreEpochError: If *adjusted_epoch_seconds* is negative.
    """
    if adjusted_epoch_seconds < 0:
        raise PreEpochError(adjusted_epoch_seconds)

    remaining = adjusted_epoch_seconds // SECONDS_PER_DAY
    year = EPOCH_YEAR
    while True:
        length = days_in_year(year)
        if remaining < length:
            return year, remaining
        remaining -= length
        year += 1


def month_and_day(day_of_year_zero_based: int, year: int) -> tuple[int, int]:
    """Return ``(month, day of month)``, both one-based.

    A one-based day equal to a cumulative boundary is the last day of that
    month (day 31 is January 31st, day 32 is February 1st).
    """
    table = cumulative_days(year)
    ordinal = day_of_year_zero_based + 1
    if not 1 <= ordinal <= table[-1]:
        msg = f"Day of year {day_of_year_zero_based} out of range for {year}"
        raise ValueError(msg)

    for index, month_end in enumerate(table):
        if month_end >= ordinal:
            break
    if index == 0:
        return 1, ordinal
    return index + 1, ordinal - table[index - 1]


def day_of_year(month: int, day: int, year: int) -> int:
    """Inverse of :func:`month_and_day`: zero-based day of year for a date."""
    if month == 1:
        return day - 1
    return cumulative_days(year)[month - 2] + day - 1


def calendar_date(adjusted_epoch_seconds: int) -> CalendarDate:
    """Resolve offset-adjusted epoch seconds to a :class:`CalendarDate`."""
    year, yday = year_and_day_of_year(adjusted_epoch_seconds)
    month, day = month_and_day(yday, year)
    return CalendarDate(year=year, month=month, day=day)

"""Value types for instants, offsets, and derived clock readings.

Every model is frozen: a reading is computed once per query and never
mutated afterwards.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field, computed_field

SECONDS_PER_DAY = 86_400
NANOS_PER_SECOND = 1_000_000_000

MIN_OFFSET_HOURS = -12
MAX_OFFSET_HOURS = 14


class Marker(StrEnum):
    """The three decimal values that get a name instead of (or beside) a number."""

    NEW = "NEW"
    NOON = "NOON"
    TEATIME = "TEATIME"


class UtcOffset(BaseModel):
    """Whole-hour offset from UTC."""

    model_config = {"frozen": True}

    hours: int = Field(ge=MIN_OFFSET_HOURS, le=MAX_OFFSET_HOURS)

    @property
    def seconds(self) -> int:
        return self.hours * 3600


class Instant(BaseModel):
    """Seconds since the Unix epoch plus a sub-second nanosecond remainder."""

    model_config = {"frozen": True}

    seconds: int
    nanoseconds: int = Field(default=0, ge=0, lt=NANOS_PER_SECOND)

    @classmethod
    def from_nanoseconds(cls, total: int) -> Instant:
        """Split a nanosecond epoch count (e.g. ``time.time_ns()``)."""
        seconds, nanoseconds = divmod(total, NANOS_PER_SECOND)
        return cls(seconds=seconds, nanoseconds=nanoseconds)

    @property
    def days(self) -> int:
        """Whole days elapsed since the epoch."""
        return self.seconds // SECONDS_PER_DAY

    @property
    def seconds_of_day(self) -> int:
        """Seconds elapsed since the most recent midnight."""
        return self.seconds % SECONDS_PER_DAY

    def shifted(self, offset: UtcOffset) -> Instant:
        """Return this instant moved into the local day described by *offset*."""
        return self.model_copy(update={"seconds": self.seconds + offset.seconds})


class CalendarDate(BaseModel):
    """Proleptic Gregorian date."""

    model_config = {"frozen": True}

    year: int
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)


class TimeOfDay(BaseModel):
    """Wall-clock hour, minute, and second within a day."""

    model_config = {"frozen": True}

    hour: int = Field(ge=0, le=23)
    minute: int = Field(ge=0, le=59)
    second: int = Field(ge=0, le=59)


class DecimalTime(BaseModel):
    """Remaining fraction of the local day, scaled to 0..1000."""

    model_config = {"frozen": True}

    value: int = Field(ge=0, le=1000)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def marker(self) -> Marker | None:
        """NEW at midnight, NOON at 500, TEATIME at 333; otherwise None."""
        return _MARKERS.get(self.value)


_MARKERS: dict[int, Marker] = {
    1000: Marker.NEW,
    500: Marker.NOON,
    333: Marker.TEATIME,
}


class ClockReading(BaseModel):
    """Everything derived from one offset-adjusted instant."""

    model_config = {"frozen": True}

    instant: Instant
    offset: UtcOffset
    date: CalendarDate
    time_of_day: TimeOfDay
    decimal: DecimalTime

"""ClockService — turn the current instant into a decimal clock reading."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dclock.domain.calendar import PreEpochError, calendar_date
from dclock.domain.countdown import decimal_time_of
from dclock.domain.timeofday import time_of_day
from dclock.domain.types import ClockReading, Instant, UtcOffset
from dclock.services.result import ServiceResult

if TYPE_CHECKING:
    from dclock.infrastructure.clock import Clock

logger = logging.getLogger(__name__)

READ_OP = "read_clock"


def derive_reading(instant: Instant, offset: UtcOffset) -> ClockReading:
    """Apply *offset* to a UTC *instant* and derive date and decimal time.

    Raises:
        PreEpochError: If the local instant falls before 1970-01-01.
    """
    local = instant.shifted(offset)
    return ClockReading(
        instant=local,
        offset=offset,
        date=calendar_date(local.seconds),
        time_of_day=time_of_day(local.seconds_of_day),
        decimal=decimal_time_of(local),
    )


class ClockService:
    """Reads a clock and reports the local decimal time.

    Usage::

        result = ClockService(SystemClock(), UtcOffset(hours=-6)).read()
        result.data["decimal"]["value"]
    """

    def __init__(self, clock: Clock, offset: UtcOffset) -> None:
        self._clock = clock
        self._offset = offset

    def read(self) -> ServiceResult:
        """Return the current reading, or a ``PRE_EPOCH`` failure."""
        instant = self._clock.now()
        try:
            reading = derive_reading(instant, self._offset)
        except PreEpochError as exc:
            logger.debug("Rejected pre-epoch instant %d", exc.seconds)
            return ServiceResult.failure(
                READ_OP,
                "PRE_EPOCH",
                "Local time is before 1970-01-01; dates before the epoch are not supported",
                seconds=exc.seconds,
                offset=self._offset.hours,
            )

        logger.debug(
            "Read %d.%09d at UTC%+d -> %d",
            instant.seconds,
            instant.nanoseconds,
            self._offset.hours,
            reading.decimal.value,
        )
        return ServiceResult(ok=True, op=READ_OP, data=reading.model_dump(mode="json"))

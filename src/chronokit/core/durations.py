#!/usr/bin/env python
"""Elapsed time between two values of the same kind.

Instants, epoch values and zoned date-times measure physical elapsed time:
zoned values are reduced to instants first, so a DST transition between the
two values is counted. Naive local date-times are subtracted field by field
with no zone involved, so the same wall-clock pair can give a different result
than its zoned counterpart across a DST boundary.

All functions return a pendulum.Duration (a datetime.timedelta subclass),
negative when end precedes start.
"""

import calendar
from datetime import datetime

import pendulum

from chronokit.utils.config import MICROS_PER_SECOND
from chronokit.utils.for_core.time_exceptions import InvalidArgumentError
from chronokit.utils.time.values import EpochDate, Instant, require_epoch_date, require_instant, require_local

__all__ = [
    "duration_between_epoch_dates",
    "duration_between_epoch_millis",
    "duration_between_instants",
    "duration_between_local",
    "duration_between_zoned",
]


def _wall_clock_micros(local: datetime) -> int:
    return calendar.timegm(local.timetuple()) * MICROS_PER_SECOND + local.microsecond


def duration_between_instants(start: Instant, end: Instant) -> pendulum.Duration:
    """Exact elapsed time from start (inclusive) to end (exclusive)."""
    start = require_instant(start, "start")
    end = require_instant(end, "end")
    return pendulum.duration(microseconds=end.epoch_micros - start.epoch_micros)


def duration_between_epoch_millis(start_milli: int, end_milli: int) -> pendulum.Duration:
    """Exact elapsed time between two epoch-millisecond values."""
    for name, value in (("start_milli", start_milli), ("end_milli", end_milli)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgumentError(
                f"{name} must be an int, got {type(value).__name__}",
                details={"argument": name, "type": type(value).__name__},
            )
    return pendulum.duration(milliseconds=end_milli - start_milli)


def duration_between_epoch_dates(start: EpochDate, end: EpochDate) -> pendulum.Duration:
    start = require_epoch_date(start, "start")
    end = require_epoch_date(end, "end")
    return duration_between_epoch_millis(start.epoch_milli, end.epoch_milli)


def duration_between_zoned(start: datetime, end: datetime) -> pendulum.Duration:
    """Physical elapsed time between two zoned date-times.

    Both values are resolved to instants before subtracting, so the result
    does not depend on whether they share a zone.

    Args:
        start: Zone-aware beginning of the interval (inclusive)
        end: Zone-aware end of the interval (exclusive)

    Returns:
        Elapsed time, including any DST transition in between
    """
    return duration_between_instants(Instant.of_datetime(start), Instant.of_datetime(end))


def duration_between_local(start: datetime, end: datetime) -> pendulum.Duration:
    """Field-wise difference between two naive local date-times.

    No zone is applied: 2021-03-14T00:00 to 2021-03-14T04:00 is four hours
    even though only three elapse on a New York wall clock that night.
    """
    start = require_local(start, "start")
    end = require_local(end, "end")
    return pendulum.duration(microseconds=_wall_clock_micros(end) - _wall_clock_micros(start))

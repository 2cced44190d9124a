#!/usr/bin/env python
"""Immutable temporal value types and argument coercion helpers.

Instant is the pivot of every conversion: an absolute point on the timeline
stored as integer microseconds since 1970-01-01T00:00:00Z. EpochDate is the
legacy millisecond-only value with no zone attribute.

Naive local date-times, zoned date-times and calendar dates are plain
datetime/date objects (pendulum instances on output), checked here on input.
"""

from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta, timezone
from typing import Any

import attrs
import pendulum

from chronokit.utils.config import MICROS_PER_MILLI, MICROS_PER_SECOND
from chronokit.utils.for_core.time_exceptions import InvalidArgumentError

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

__all__ = [
    "EpochDate",
    "Instant",
    "coerce_weekday",
    "require_date",
    "require_instant",
    "require_epoch_date",
    "require_local",
    "require_zoned",
]


def _epoch_micros_of(dt: datetime) -> int:
    """Exact microseconds since the epoch for an aware datetime."""
    return calendar.timegm(dt.utctimetuple()) * MICROS_PER_SECOND + dt.microsecond


def _require_int(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"{name} must be an int, got {type(value).__name__}",
            details={"argument": name, "type": type(value).__name__},
        )
    return value


def _check_int(_instance: Any, attribute: attrs.Attribute, value: Any) -> None:
    _require_int(value, attribute.name)


@attrs.frozen(order=True)
class Instant:
    """An absolute point on the timeline, independent of any zone.

    Attributes:
        epoch_micros: Microseconds since 1970-01-01T00:00:00Z (may be negative)
    """

    epoch_micros: int = attrs.field(validator=_check_int)

    @classmethod
    def of_epoch_milli(cls, epoch_milli: int) -> Instant:
        """Create an Instant from milliseconds since the epoch."""
        return cls(_require_int(epoch_milli, "epoch_milli") * MICROS_PER_MILLI)

    @classmethod
    def of_datetime(cls, dt: datetime) -> Instant:
        """Create an Instant from a zone-aware datetime."""
        return cls(_epoch_micros_of(require_zoned(dt)))

    def to_epoch_milli(self) -> int:
        """Milliseconds since the epoch, floored toward negative infinity."""
        return self.epoch_micros // MICROS_PER_MILLI

    def to_datetime(self) -> pendulum.DateTime:
        """The instant as a UTC pendulum DateTime."""
        try:
            return pendulum.instance(_UNIX_EPOCH + timedelta(microseconds=self.epoch_micros))
        except OverflowError as e:
            raise InvalidArgumentError(
                f"Instant out of representable range: {self.epoch_micros} microseconds",
                details={"epoch_micros": self.epoch_micros},
            ) from e

    def __str__(self) -> str:
        return self.to_datetime().isoformat()


@attrs.frozen(order=True)
class EpochDate:
    """Legacy epoch value: milliseconds since the epoch, no zone, no finer precision.

    Attributes:
        epoch_milli: Milliseconds since 1970-01-01T00:00:00Z (may be negative)
    """

    epoch_milli: int = attrs.field(validator=_check_int)

    def to_instant(self) -> Instant:
        return Instant.of_epoch_milli(self.epoch_milli)


def require_instant(value: Any, name: str = "instant") -> Instant:
    """Check that value is an Instant."""
    if not isinstance(value, Instant):
        raise InvalidArgumentError(
            f"{name} must be an Instant, got {type(value).__name__}",
            details={"argument": name, "type": type(value).__name__},
        )
    return value


def require_epoch_date(value: Any, name: str = "date") -> EpochDate:
    """Check that value is an EpochDate."""
    if not isinstance(value, EpochDate):
        raise InvalidArgumentError(
            f"{name} must be an EpochDate, got {type(value).__name__}",
            details={"argument": name, "type": type(value).__name__},
        )
    return value


def require_local(value: Any, name: str = "local") -> datetime:
    """Check that value is a naive datetime (no tzinfo)."""
    if not isinstance(value, datetime):
        raise InvalidArgumentError(
            f"{name} must be a naive datetime, got {type(value).__name__}",
            details={"argument": name, "type": type(value).__name__},
        )
    if value.tzinfo is not None:
        raise InvalidArgumentError(
            f"{name} must be a naive datetime, got one bound to {value.tzinfo}",
            details={"argument": name, "tzinfo": str(value.tzinfo)},
        )
    return value


def require_zoned(value: Any, name: str = "zoned") -> datetime:
    """Check that value is a zone-aware datetime."""
    if not isinstance(value, datetime):
        raise InvalidArgumentError(
            f"{name} must be a zone-aware datetime, got {type(value).__name__}",
            details={"argument": name, "type": type(value).__name__},
        )
    if value.tzinfo is None or value.utcoffset() is None:
        raise InvalidArgumentError(
            f"{name} must be a zone-aware datetime, got a naive one ({value.isoformat()})",
            details={"argument": name, "value": value.isoformat()},
        )
    return value


def require_date(value: Any, name: str = "reference_date") -> date:
    """Check that value is a calendar date (a datetime is reduced to its date)."""
    if isinstance(value, datetime):
        return value.date()
    if not isinstance(value, date):
        raise InvalidArgumentError(
            f"{name} must be a date, got {type(value).__name__}",
            details={"argument": name, "type": type(value).__name__},
        )
    return value


def coerce_weekday(value: Any, name: str = "weekday") -> pendulum.WeekDay:
    """Coerce a weekday argument to pendulum.WeekDay.

    Args:
        value: pendulum.WeekDay, int 0-6 (Monday=0) or a weekday name
        name: Argument name used in error messages

    Returns:
        The matching pendulum.WeekDay

    Raises:
        InvalidArgumentError: If value is None or not a weekday
    """
    if value is None:
        raise InvalidArgumentError(f"{name} argument cannot be None", details={"argument": name})

    if isinstance(value, pendulum.WeekDay):
        return value

    if isinstance(value, str):
        try:
            return pendulum.WeekDay[value.strip().upper()]
        except KeyError as e:
            raise InvalidArgumentError(
                f"Unknown weekday name: {value!r}",
                details={"argument": name, "value": value},
            ) from e

    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return pendulum.WeekDay(value)
        except ValueError as e:
            raise InvalidArgumentError(
                f"Weekday number must be 0 (Monday) to 6 (Sunday), got {value}",
                details={"argument": name, "value": value},
            ) from e

    raise InvalidArgumentError(
        f"{name} must be a pendulum.WeekDay, got {type(value).__name__}",
        details={"argument": name, "type": type(value).__name__},
    )

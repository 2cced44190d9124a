#!/usr/bin/env python
"""Conversions between instants, epoch values, naive and zoned date-times.

Every conversion pivots on Instant: a zoned value is reduced to its instant
and projected onto another zone's wall clock, a naive value is bound to a zone
to obtain its instant, and epoch milliseconds map directly to instants.

Naive local date-times bound to a zone follow pendulum's default resolution
for wall-clock times that do not exist or occur twice:
- in a DST gap the time is shifted forward by the length of the gap
  (02:30 on a spring-forward night in New York becomes 03:30 EDT)
- in a DST overlap the later occurrence (post-transition offset) is used
No error is raised in either case; the resolution is logged at DEBUG level.

Example:
    >>> from chronokit.core.conversion import epoch_milli_to_zoned, zoned_to_local
    >>> zoned = epoch_milli_to_zoned(1_600_000_000_000, "Asia/Tokyo")
    >>> zoned.isoformat()
    '2020-09-13T21:26:40+09:00'
    >>> zoned_to_local(zoned).isoformat()
    '2020-09-13T21:26:40'
"""

from datetime import datetime

import pendulum

from chronokit.utils.for_core.time_exceptions import InvalidArgumentError
from chronokit.utils.loguru_setup import logger
from chronokit.utils.time.values import (
    EpochDate,
    Instant,
    require_epoch_date,
    require_instant,
    require_local,
    require_zoned,
)
from chronokit.utils.time.zones import PendulumZone, ZoneLike, resolve_zone

__all__ = [
    "as_pendulum",
    "epoch_date_to_instant",
    "epoch_date_to_local",
    "epoch_date_to_zoned",
    "epoch_milli_to_epoch_date",
    "epoch_milli_to_instant",
    "epoch_milli_to_local",
    "epoch_milli_to_zoned",
    "instant_to_epoch_date",
    "instant_to_epoch_milli",
    "instant_to_local",
    "instant_to_zoned",
    "local_to_epoch_date",
    "local_to_instant",
    "local_to_zoned",
    "zoned_to_epoch_date",
    "zoned_to_instant",
    "zoned_to_local",
]


def as_pendulum(zoned: datetime) -> pendulum.DateTime:
    """Return a zone-aware datetime as a pendulum DateTime in the same zone."""
    zoned = require_zoned(zoned)
    if isinstance(zoned, pendulum.DateTime):
        return zoned
    return pendulum.instance(zoned)


def _log_wall_clock_resolution(local: datetime, tz: PendulumZone) -> None:
    """Log when a wall-clock time falls into a DST gap or overlap of tz."""
    offset_before = tz.utcoffset(local.replace(fold=0))
    offset_after = tz.utcoffset(local.replace(fold=1))
    if offset_before == offset_after:
        return

    if offset_after > offset_before:
        logger.debug(f"{local.isoformat()} does not exist in {tz.name}; shifted forward by {offset_after - offset_before}")
    else:
        logger.debug(f"{local.isoformat()} occurs twice in {tz.name}; using the later occurrence")


# To zoned date-time


def instant_to_zoned(instant: Instant, zone: ZoneLike) -> pendulum.DateTime:
    """Project an instant onto the wall clock of a zone.

    Args:
        instant: The instant on the timeline
        zone: Zone in which the instant is observed

    Returns:
        Zone-aware pendulum DateTime representing the same instant
    """
    tz = resolve_zone(zone)
    return require_instant(instant).to_datetime().in_timezone(tz)


def epoch_milli_to_zoned(epoch_milli: int, zone: ZoneLike) -> pendulum.DateTime:
    """Zoned date-time for a number of milliseconds since the epoch."""
    return instant_to_zoned(Instant.of_epoch_milli(epoch_milli), zone)


def epoch_date_to_zoned(date: EpochDate, zone: ZoneLike) -> pendulum.DateTime:
    """Zoned date-time for a legacy epoch value."""
    return instant_to_zoned(require_epoch_date(date).to_instant(), zone)


def local_to_zoned(local: datetime, zone: ZoneLike) -> pendulum.DateTime:
    """Bind a naive local date-time to a zone.

    Args:
        local: Naive date-time read off the zone's wall clock
        zone: Zone the wall-clock time belongs to

    Returns:
        Zone-aware pendulum DateTime. Times in a DST gap or overlap are
        resolved as described in the module docstring.

    Raises:
        InvalidArgumentError: If local is not naive or the zone is invalid
    """
    local = require_local(local)
    tz = resolve_zone(zone)
    _log_wall_clock_resolution(local, tz)
    try:
        return pendulum.datetime(
            local.year,
            local.month,
            local.day,
            local.hour,
            local.minute,
            local.second,
            local.microsecond,
            tz=tz,
        )
    except OverflowError as e:
        raise InvalidArgumentError(
            f"{local.isoformat()} cannot be represented in {tz.name}",
            details={"local": local.isoformat(), "zone": tz.name},
        ) from e


# To instant


def epoch_milli_to_instant(epoch_milli: int) -> Instant:
    """Instant for a number of milliseconds since the epoch."""
    return Instant.of_epoch_milli(epoch_milli)


def epoch_date_to_instant(date: EpochDate) -> Instant:
    """Instant represented by a legacy epoch value."""
    return require_epoch_date(date).to_instant()


def zoned_to_instant(zoned: datetime) -> Instant:
    """Instant represented by a zone-aware date-time."""
    return Instant.of_datetime(zoned)


def local_to_instant(local: datetime, zone: ZoneLike) -> Instant:
    """Instant at which the zone's wall clock shows the given local date-time.

    The zone's offset rules at that local moment decide the instant; see the
    module docstring for DST gap and overlap handling.
    """
    instant = Instant.of_datetime(local_to_zoned(local, zone))
    logger.debug(f"Resolved {local.isoformat()} in {zone} to {instant}")
    return instant


# To naive local date-time


def instant_to_local(instant: Instant, zone: ZoneLike) -> pendulum.DateTime:
    """Wall-clock date-time of the zone at the given instant, without the zone."""
    return instant_to_zoned(instant, zone).naive()


def epoch_milli_to_local(epoch_milli: int, zone: ZoneLike) -> pendulum.DateTime:
    """Wall-clock date-time of the zone at epoch_milli, without the zone."""
    return instant_to_local(Instant.of_epoch_milli(epoch_milli), zone)


def epoch_date_to_local(date: EpochDate, zone: ZoneLike) -> pendulum.DateTime:
    """Wall-clock date-time of the zone for a legacy epoch value, without the zone."""
    return instant_to_local(require_epoch_date(date).to_instant(), zone)


def zoned_to_local(zoned: datetime) -> pendulum.DateTime:
    """Drop the zone of a zoned date-time, keeping its wall-clock fields."""
    return as_pendulum(zoned).naive()


# To legacy epoch value and epoch milliseconds


def instant_to_epoch_milli(instant: Instant) -> int:
    """Milliseconds since the epoch, truncated toward negative infinity."""
    return require_instant(instant).to_epoch_milli()


def instant_to_epoch_date(instant: Instant) -> EpochDate:
    """Legacy epoch value for an instant, truncated to millisecond resolution."""
    return EpochDate(instant_to_epoch_milli(instant))


def epoch_milli_to_epoch_date(epoch_milli: int) -> EpochDate:
    return instant_to_epoch_date(Instant.of_epoch_milli(epoch_milli))


def zoned_to_epoch_date(zoned: datetime) -> EpochDate:
    return instant_to_epoch_date(zoned_to_instant(zoned))


def local_to_epoch_date(local: datetime, zone: ZoneLike) -> EpochDate:
    """Legacy epoch value for a local date-time in a zone (see local_to_instant)."""
    return instant_to_epoch_date(local_to_instant(local, zone))

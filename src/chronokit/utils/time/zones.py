#!/usr/bin/env python
"""Zone identifier resolution.

Every function that takes a zone accepts any of:
- an IANA zone name ("America/New_York", "UTC")
- a fixed offset string ("Z", "+05:30", "-0800", "UTC+02:00", "GMT-3")
- an int offset in seconds east of UTC
- a pendulum Timezone/FixedTimezone, a zoneinfo.ZoneInfo or a datetime.timezone

and normalizes it to a pendulum timezone.
"""

import re
import zoneinfo
from datetime import timezone
from typing import Union

import pendulum

from chronokit.utils.for_core.time_exceptions import InvalidArgumentError
from chronokit.utils.loguru_setup import logger

ZoneLike = Union[str, int, pendulum.Timezone, pendulum.FixedTimezone, zoneinfo.ZoneInfo, timezone]
PendulumZone = Union[pendulum.Timezone, pendulum.FixedTimezone]

# +05, +0530, +05:30, optionally prefixed with UTC or GMT
_OFFSET_PATTERN = re.compile(r"^(?:UTC|GMT)?(?P<sign>[+-])(?P<hours>\d{1,2})(?::?(?P<minutes>\d{2}))?$")

MAX_OFFSET_HOURS = 18

__all__ = [
    "PendulumZone",
    "ZoneLike",
    "parse_offset",
    "resolve_zone",
]


def parse_offset(text: str) -> int | None:
    """Parse a fixed UTC offset string into seconds east of UTC.

    Args:
        text: Offset such as "+05:30", "-0800", "UTC+2" or "Z"

    Returns:
        Offset in seconds, or None if the text is not an offset

    Raises:
        InvalidArgumentError: If the text is an offset outside +/-18:00
    """
    if text == "Z":
        return 0

    match = _OFFSET_PATTERN.match(text)
    if match is None:
        return None

    hours = int(match.group("hours"))
    minutes = int(match.group("minutes") or 0)
    if hours > MAX_OFFSET_HOURS or minutes >= 60 or (hours == MAX_OFFSET_HOURS and minutes):
        raise InvalidArgumentError(
            f"Zone offset out of range: {text!r}",
            details={"argument": "zone", "value": text},
        )

    seconds = hours * 3600 + minutes * 60
    return -seconds if match.group("sign") == "-" else seconds


def resolve_zone(zone: ZoneLike) -> PendulumZone:
    """Normalize a zone identifier to a pendulum timezone.

    Args:
        zone: Zone name, offset string, offset seconds or tzinfo instance

    Returns:
        pendulum Timezone (named zones) or FixedTimezone (fixed offsets)

    Raises:
        InvalidArgumentError: If the zone is missing, unknown or out of range
    """
    if zone is None:
        raise InvalidArgumentError("Zone argument cannot be None", details={"argument": "zone"})

    if isinstance(zone, (pendulum.Timezone, pendulum.FixedTimezone)):
        return zone

    if isinstance(zone, zoneinfo.ZoneInfo):
        zone = zone.key
    elif isinstance(zone, timezone):
        zone = int(zone.utcoffset(None).total_seconds())

    if isinstance(zone, bool) or not isinstance(zone, (str, int)):
        raise InvalidArgumentError(
            f"Unsupported zone type: {type(zone).__name__}",
            details={"argument": "zone", "type": type(zone).__name__},
        )

    if isinstance(zone, int):
        if abs(zone) > MAX_OFFSET_HOURS * 3600:
            raise InvalidArgumentError(
                f"Zone offset out of range: {zone} seconds",
                details={"argument": "zone", "value": zone},
            )
        return pendulum.fixed_timezone(zone)

    name = zone.strip()
    offset = parse_offset(name)
    if offset is not None:
        logger.debug(f"Resolved fixed offset zone {name!r} to {offset} seconds")
        return pendulum.fixed_timezone(offset)

    try:
        return pendulum.timezone(name)
    except (ValueError, KeyError) as e:
        raise InvalidArgumentError(
            f"Unknown time zone: {name!r}",
            details={"argument": "zone", "value": name},
        ) from e

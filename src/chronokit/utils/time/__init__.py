#!/usr/bin/env python
"""Temporal building blocks shared by the conversion and calendar modules.

- zones: zone identifier resolution
- values: Instant / EpochDate value types and argument checks
- patterns: format-pattern validation and translation to pendulum tokens
"""

from chronokit.utils.time.zones import (
    PendulumZone,
    ZoneLike,
    parse_offset,
    resolve_zone,
)
from chronokit.utils.time.values import (
    EpochDate,
    Instant,
    coerce_weekday,
    require_date,
    require_epoch_date,
    require_instant,
    require_local,
    require_zoned,
)
from chronokit.utils.time.patterns import (
    CompiledPattern,
    Segment,
    compile_pattern,
)

__all__ = [
    "CompiledPattern",
    "EpochDate",
    "Instant",
    "PendulumZone",
    "Segment",
    "ZoneLike",
    "coerce_weekday",
    "compile_pattern",
    "parse_offset",
    "require_date",
    "require_epoch_date",
    "require_instant",
    "require_local",
    "require_zoned",
    "resolve_zone",
]

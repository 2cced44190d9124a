"""chronokit - Date/time conversion and calendar arithmetic on top of pendulum.

This package converts between the common representations of a moment in time
and answers calendar questions about months and weekdays.

Representations:
- **Instant**: absolute point on the timeline (microseconds since the epoch)
- **Epoch milliseconds / EpochDate**: legacy millisecond values with no zone
- **Local date-time**: naive wall-clock datetime, meaningful only with a zone
- **Zoned date-time**: zone-aware pendulum DateTime
- **Duration**: pendulum Duration between two values of the same kind

Quick Start:
    >>> import pendulum
    >>> from chronokit import epoch_milli_to_zoned, format_zoned, presidential_election_day_usa
    >>>
    >>> zoned = epoch_milli_to_zoned(1_600_000_000_000, "Asia/Tokyo")
    >>> format_zoned(zoned, "yyyy-MM-dd HH:mm:ss VV")
    '2020-09-13 21:26:40 Asia/Tokyo'
    >>> presidential_election_day_usa(2024)
    Date(2024, 11, 5)

Errors are raised as ChronokitError subclasses (InvalidArgumentError,
ParseError, FormatError), all of which are also ValueError.
"""

__version__ = "0.1.0"

import importlib
from typing import Any

_EXPORTS = {
    # Value types, zones and patterns
    "EpochDate": ".utils.time.values",
    "Instant": ".utils.time.values",
    "compile_pattern": ".utils.time.patterns",
    "resolve_zone": ".utils.time.zones",
    # Logging
    "logger": ".utils.loguru_setup",
    # Errors
    "ChronokitError": ".utils.for_core.time_exceptions",
    "FormatError": ".utils.for_core.time_exceptions",
    "InvalidArgumentError": ".utils.for_core.time_exceptions",
    "ParseError": ".utils.for_core.time_exceptions",
    # Settings
    "ChronokitSettings": ".utils.config",
    "configure": ".utils.config",
    "get_settings": ".utils.config",
    "reset_settings": ".utils.config",
    # Conversions
    "epoch_date_to_instant": ".core.conversion",
    "epoch_date_to_local": ".core.conversion",
    "epoch_date_to_zoned": ".core.conversion",
    "epoch_milli_to_epoch_date": ".core.conversion",
    "epoch_milli_to_instant": ".core.conversion",
    "epoch_milli_to_local": ".core.conversion",
    "epoch_milli_to_zoned": ".core.conversion",
    "instant_to_epoch_date": ".core.conversion",
    "instant_to_epoch_milli": ".core.conversion",
    "instant_to_local": ".core.conversion",
    "instant_to_zoned": ".core.conversion",
    "local_to_epoch_date": ".core.conversion",
    "local_to_instant": ".core.conversion",
    "local_to_zoned": ".core.conversion",
    "zoned_to_epoch_date": ".core.conversion",
    "zoned_to_instant": ".core.conversion",
    "zoned_to_local": ".core.conversion",
    # Durations
    "duration_between_epoch_dates": ".core.durations",
    "duration_between_epoch_millis": ".core.durations",
    "duration_between_instants": ".core.durations",
    "duration_between_local": ".core.durations",
    "duration_between_zoned": ".core.durations",
    # Formatting and parsing
    "format_epoch_date": ".core.formatting",
    "format_instant": ".core.formatting",
    "format_local": ".core.formatting",
    "format_zoned": ".core.formatting",
    "parse_date": ".core.formatting",
    "parse_epoch_date": ".core.formatting",
    "parse_instant": ".core.formatting",
    "parse_local": ".core.formatting",
    "parse_zoned": ".core.formatting",
    # Calendar
    "first_day": ".core.calendar_rules",
    "last_day": ".core.calendar_rules",
    "n_days_after": ".core.calendar_rules",
    "nth_day_of_week_in": ".core.calendar_rules",
    "presidential_election_day_usa": ".core.calendar_rules",
}


# Lazy imports so `import chronokit` stays cheap
def __getattr__(name: str) -> Any:
    """Lazy import for main package exports."""
    module_name = _EXPORTS.get(name)
    if module_name is None:
        raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
    return getattr(importlib.import_module(module_name, __name__), name)


__all__ = sorted(_EXPORTS)

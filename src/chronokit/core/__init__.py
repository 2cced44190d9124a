"""Core conversion, duration, formatting and calendar functionality."""

from .calendar_rules import first_day, last_day, n_days_after, nth_day_of_week_in, presidential_election_day_usa
from .conversion import (
    as_pendulum,
    epoch_date_to_instant,
    epoch_date_to_local,
    epoch_date_to_zoned,
    epoch_milli_to_epoch_date,
    epoch_milli_to_instant,
    epoch_milli_to_local,
    epoch_milli_to_zoned,
    instant_to_epoch_date,
    instant_to_epoch_milli,
    instant_to_local,
    instant_to_zoned,
    local_to_epoch_date,
    local_to_instant,
    local_to_zoned,
    zoned_to_epoch_date,
    zoned_to_instant,
    zoned_to_local,
)
from .durations import (
    duration_between_epoch_dates,
    duration_between_epoch_millis,
    duration_between_instants,
    duration_between_local,
    duration_between_zoned,
)
from .formatting import (
    format_epoch_date,
    format_instant,
    format_local,
    format_zoned,
    parse_date,
    parse_epoch_date,
    parse_instant,
    parse_local,
    parse_zoned,
)

__all__ = [
    "as_pendulum",
    "duration_between_epoch_dates",
    "duration_between_epoch_millis",
    "duration_between_instants",
    "duration_between_local",
    "duration_between_zoned",
    "epoch_date_to_instant",
    "epoch_date_to_local",
    "epoch_date_to_zoned",
    "epoch_milli_to_epoch_date",
    "epoch_milli_to_instant",
    "epoch_milli_to_local",
    "epoch_milli_to_zoned",
    "first_day",
    "format_epoch_date",
    "format_instant",
    "format_local",
    "format_zoned",
    "instant_to_epoch_date",
    "instant_to_epoch_milli",
    "instant_to_local",
    "instant_to_zoned",
    "last_day",
    "local_to_epoch_date",
    "local_to_instant",
    "local_to_zoned",
    "n_days_after",
    "nth_day_of_week_in",
    "parse_date",
    "parse_epoch_date",
    "parse_instant",
    "parse_local",
    "parse_zoned",
    "presidential_election_day_usa",
    "zoned_to_epoch_date",
    "zoned_to_instant",
    "zoned_to_local",
]

#!/usr/bin/env python
"""Calendar arithmetic on plain dates (no time-of-day, no zone).

Weekday arguments accept pendulum.WeekDay, an int 0 (Monday) to 6 (Sunday)
or a weekday name. All results are pendulum.Date instances.

Example:
    >>> import pendulum
    >>> from chronokit.core.calendar_rules import first_day, presidential_election_day_usa
    >>> first_day(2021, 9, pendulum.MONDAY)
    Date(2021, 9, 6)
    >>> presidential_election_day_usa(2024)
    Date(2024, 11, 5)
"""

import calendar
from datetime import date
from typing import Any

import pendulum

from chronokit.utils.config import DAYS_PER_WEEK, ELECTION_CYCLE_YEARS, ELECTION_MONTH
from chronokit.utils.for_core.time_exceptions import InvalidArgumentError
from chronokit.utils.loguru_setup import logger
from chronokit.utils.time.values import coerce_weekday, require_date

__all__ = [
    "first_day",
    "last_day",
    "n_days_after",
    "nth_day_of_week_in",
    "presidential_election_day_usa",
]


def _first_of_month(year: int, month: int) -> pendulum.Date:
    """Day 1 of year/month, rejecting values the calendar cannot represent."""
    for name, value in (("year", year), ("month", month)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgumentError(
                f"{name} must be an int, got {type(value).__name__}",
                details={"argument": name, "type": type(value).__name__},
            )
    try:
        return pendulum.date(year, month, 1)
    except ValueError as e:
        raise InvalidArgumentError(
            f"Invalid year/month: {year}-{month}",
            details={"year": year, "month": month},
        ) from e


def _shift(start: date, days: int) -> pendulum.Date:
    try:
        return pendulum.Date.fromordinal(start.toordinal() + days)
    except (ValueError, OverflowError) as e:
        raise InvalidArgumentError(
            f"{start.isoformat()} shifted by {days} days is outside the supported calendar range",
            details={"reference_date": start.isoformat(), "days": days},
        ) from e


def first_day(year: int, month: int, weekday: Any = None) -> pendulum.Date:
    """First day of a month, optionally the first one falling on a weekday.

    Args:
        year: The year
        month: The month of the year (1 = January, ..., 12 = December)
        weekday: Weekday to find; None returns the 1st of the month

    Returns:
        The matching date (always within days 1-7 when a weekday is given)
    """
    first = _first_of_month(year, month)
    if weekday is None:
        return first
    return first.first_of("month", coerce_weekday(weekday))


def last_day(year: int, month: int, weekday: Any = None) -> pendulum.Date:
    """Last day of a month, optionally the last one falling on a weekday.

    Args:
        year: The year
        month: The month of the year (1 = January, ..., 12 = December)
        weekday: Weekday to find; None returns the last calendar day

    Returns:
        The matching date
    """
    first = _first_of_month(year, month)
    if weekday is None:
        return first.last_of("month")
    return first.last_of("month", coerce_weekday(weekday))


def nth_day_of_week_in(year: int, month: int, week_ordinal: int, weekday: Any) -> pendulum.Date:
    """The week_ordinal-th occurrence of a weekday in a month.

    Positive ordinals count forward from the 1st of the month (1 = first
    occurrence), negative ordinals count backward from the last day of the
    month (-1 = last occurrence), and 0 gives the last occurrence in the
    previous month.

    The ordinal is not bounded: an ordinal past the end of the month
    continues into the following months (the 6th Monday of a month is a
    Monday of the next month), and likewise backward.

    Args:
        year: The year
        month: The month of the year (1 = January, ..., 12 = December)
        week_ordinal: Which occurrence; unbounded
        weekday: The weekday to find. Required.

    Returns:
        The matching date, possibly outside year/month

    Raises:
        InvalidArgumentError: If weekday is None or year/month are invalid
    """
    first = _first_of_month(year, month)
    target = coerce_weekday(weekday)
    if isinstance(week_ordinal, bool) or not isinstance(week_ordinal, int):
        raise InvalidArgumentError(
            f"week_ordinal must be an int, got {type(week_ordinal).__name__}",
            details={"argument": "week_ordinal", "type": type(week_ordinal).__name__},
        )

    if week_ordinal >= 0:
        offset = (target - first.weekday()) % DAYS_PER_WEEK
        offset += (week_ordinal - 1) * DAYS_PER_WEEK
        result = _shift(first, offset)
    else:
        last = pendulum.date(year, month, calendar.monthrange(year, month)[1])
        offset = (target - last.weekday()) % DAYS_PER_WEEK
        offset = offset - DAYS_PER_WEEK if offset else 0
        offset -= (-week_ordinal - 1) * DAYS_PER_WEEK
        result = _shift(last, offset)

    if (result.year, result.month) != (year, month):
        logger.debug(f"Occurrence {week_ordinal} of {target.name} in {year}-{month:02d} falls outside the month: {result}")
    return result


def presidential_election_day_usa(year: int) -> pendulum.Date:
    """U.S. presidential election day: the Tuesday after the first Monday of November.

    Any year divisible by 4 is accepted as an election year.

    Raises:
        InvalidArgumentError: If year is not divisible by 4
    """
    if isinstance(year, bool) or not isinstance(year, int) or year % ELECTION_CYCLE_YEARS != 0:
        raise InvalidArgumentError(
            f"The specified year: {year} is not a U.S. Presidential election year",
            details={"year": year},
        )

    first_monday = first_day(year, ELECTION_MONTH, pendulum.MONDAY)
    return first_monday.next(pendulum.TUESDAY)


def n_days_after(number_of_days: int, reference_date: date) -> pendulum.Date:
    """The date number_of_days after reference_date (negative shifts backward).

    Raises:
        InvalidArgumentError: If the result falls outside years 1-9999
    """
    start = require_date(reference_date)
    if isinstance(number_of_days, bool) or not isinstance(number_of_days, int):
        raise InvalidArgumentError(
            f"number_of_days must be an int, got {type(number_of_days).__name__}",
            details={"argument": "number_of_days", "type": type(number_of_days).__name__},
        )
    return _shift(start, number_of_days)

#!/usr/bin/env python3
"""Unit tests for month, weekday and day-offset calendar arithmetic.

Reference dates are well-known U.S. holidays:
- Labor Day 2021: first Monday of September (2021-09-06)
- Memorial Day 2021: last Monday of May (2021-05-31)
- Thanksgiving 2021: fourth Thursday of November (2021-11-25)
"""

from datetime import date, datetime

import pendulum
import pytest

from chronokit.core.calendar_rules import (
    first_day,
    last_day,
    n_days_after,
    nth_day_of_week_in,
    presidential_election_day_usa,
)
from chronokit.utils.for_core.time_exceptions import InvalidArgumentError


class TestFirstAndLastDay:
    """first_day and last_day with and without a weekday."""

    def test_first_day_of_month(self):
        assert first_day(2021, 9) == date(2021, 9, 1)

    def test_first_weekday_of_month(self):
        assert first_day(2021, 9, pendulum.MONDAY) == date(2021, 9, 6)

    def test_first_weekday_is_the_first_of_month(self):
        # 2021-09-01 is a Wednesday
        assert first_day(2021, 9, pendulum.WEDNESDAY) == date(2021, 9, 1)

    def test_last_day_of_month(self):
        assert last_day(2021, 2) == date(2021, 2, 28)
        assert last_day(2024, 2) == date(2024, 2, 29)
        assert last_day(2021, 12) == date(2021, 12, 31)

    def test_last_weekday_of_month(self):
        assert last_day(2021, 5, pendulum.MONDAY) == date(2021, 5, 31)
        # 2021-09-30 is a Thursday
        assert last_day(2021, 9, pendulum.FRIDAY) == date(2021, 9, 24)

    @pytest.mark.parametrize("weekday", [pendulum.MONDAY, 0, "monday", "MONDAY"])
    def test_weekday_forms(self, weekday):
        assert first_day(2021, 9, weekday) == date(2021, 9, 6)

    def test_results_are_pendulum_dates(self):
        assert isinstance(first_day(2021, 9), pendulum.Date)
        assert isinstance(last_day(2021, 9, pendulum.SUNDAY), pendulum.Date)

    @pytest.mark.parametrize("year, month", [(2021, 0), (2021, 13), (0, 1), (10_000, 1)])
    def test_invalid_year_or_month(self, year, month):
        with pytest.raises(InvalidArgumentError) as exc_info:
            first_day(year, month)
        assert exc_info.value.details == {"year": year, "month": month}

    @pytest.mark.parametrize("weekday", [7, -1, "someday", 1.0, True])
    def test_invalid_weekday(self, weekday):
        with pytest.raises(InvalidArgumentError):
            last_day(2021, 9, weekday)


class TestNthDayOfWeekIn:
    """nth_day_of_week_in for positive, negative and zero ordinals."""

    def test_fourth_thursday(self):
        assert nth_day_of_week_in(2021, 11, 4, pendulum.THURSDAY) == date(2021, 11, 25)

    def test_first_monday(self):
        assert nth_day_of_week_in(2021, 9, 1, pendulum.MONDAY) == date(2021, 9, 6)

    def test_last_monday(self):
        assert nth_day_of_week_in(2021, 5, -1, pendulum.MONDAY) == date(2021, 5, 31)

    def test_last_day_matching_weekday(self):
        # 2021-09-30 is a Thursday
        assert nth_day_of_week_in(2021, 9, -1, pendulum.THURSDAY) == date(2021, 9, 30)

    def test_second_to_last(self):
        assert nth_day_of_week_in(2021, 9, -2, pendulum.THURSDAY) == date(2021, 9, 23)

    def test_zero_ordinal_is_last_occurrence_of_previous_month(self):
        assert nth_day_of_week_in(2021, 9, 0, pendulum.MONDAY) == date(2021, 8, 30)

    def test_ordinal_past_end_of_month_spills_forward(self):
        assert nth_day_of_week_in(2021, 9, 5, pendulum.MONDAY) == date(2021, 10, 4)

    def test_negative_ordinal_past_start_of_month_spills_backward(self):
        assert nth_day_of_week_in(2021, 9, -5, pendulum.MONDAY) == date(2021, 8, 30)

    def test_spill_is_logged(self, log_records):
        nth_day_of_week_in(2021, 9, 5, pendulum.MONDAY)
        assert any("falls outside the month" in message for message in log_records)

    def test_weekday_is_required(self):
        with pytest.raises(InvalidArgumentError, match="weekday argument cannot be None"):
            nth_day_of_week_in(2021, 9, 1, None)

    def test_ordinal_must_be_int(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            nth_day_of_week_in(2021, 9, "1", pendulum.MONDAY)
        assert exc_info.value.details["argument"] == "week_ordinal"


class TestPresidentialElectionDay:
    """Tuesday after the first Monday of November in years divisible by four."""

    @pytest.mark.parametrize(
        "year, expected",
        [
            (2016, date(2016, 11, 8)),  # November 1st is a Tuesday
            (2020, date(2020, 11, 3)),
            (2024, date(2024, 11, 5)),
        ],
    )
    def test_election_day(self, year, expected):
        assert presidential_election_day_usa(year) == expected

    def test_result_is_a_november_tuesday(self):
        result = presidential_election_day_usa(2100)
        assert result.month == 11
        assert result.day_of_week == pendulum.TUESDAY
        assert 2 <= result.day <= 8

    @pytest.mark.parametrize("year", [2021, 2022, 2023, 2025])
    def test_non_election_year(self, year):
        with pytest.raises(InvalidArgumentError) as exc_info:
            presidential_election_day_usa(year)
        assert str(exc_info.value) == f"The specified year: {year} is not a U.S. Presidential election year"
        assert exc_info.value.details == {"year": year}


class TestNDaysAfter:
    """n_days_after shifts a calendar date forward or backward."""

    def test_forward(self):
        assert n_days_after(30, date(2021, 9, 6)) == date(2021, 10, 6)

    def test_backward(self):
        assert n_days_after(-7, date(2021, 9, 6)) == date(2021, 8, 30)

    def test_zero(self):
        assert n_days_after(0, date(2021, 9, 6)) == date(2021, 9, 6)

    def test_across_leap_day(self):
        assert n_days_after(1, date(2024, 2, 28)) == date(2024, 2, 29)

    def test_datetime_reference_is_reduced_to_date(self):
        result = n_days_after(1, datetime(2021, 12, 31, 23, 59))
        assert result == date(2022, 1, 1)
        assert not isinstance(result, datetime)

    def test_out_of_range(self):
        with pytest.raises(InvalidArgumentError):
            n_days_after(1, date(9999, 12, 31))
        with pytest.raises(InvalidArgumentError):
            n_days_after(-1, date(1, 1, 1))

    def test_reference_date_required(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            n_days_after(1, None)
        assert exc_info.value.details["argument"] == "reference_date"

    def test_days_must_be_int(self):
        with pytest.raises(InvalidArgumentError):
            n_days_after(1.5, date(2021, 9, 6))


class TestReferenceScenarios:
    """Reference answers for the calendar operations."""

    def test_first_monday_of_september_2021(self):
        assert first_day(2021, 9, pendulum.MONDAY) == date(2021, 9, 6)

    def test_last_monday_of_september_2021(self):
        assert last_day(2021, 9, pendulum.MONDAY) == date(2021, 9, 27)

    def test_third_wednesday_of_july_2018(self):
        assert nth_day_of_week_in(2018, 7, 3, pendulum.WEDNESDAY) == date(2018, 7, 18)

    def test_election_days(self):
        assert presidential_election_day_usa(2020) == date(2020, 11, 3)
        assert presidential_election_day_usa(2024) == date(2024, 11, 5)

    def test_ninety_days_after_new_year_2018(self):
        assert n_days_after(90, date(2018, 1, 1)) == date(2018, 4, 1)

    def test_2021_is_not_an_election_year(self):
        with pytest.raises(InvalidArgumentError):
            presidential_election_day_usa(2021)

    def test_missing_weekday(self):
        with pytest.raises(InvalidArgumentError):
            nth_day_of_week_in(2018, 7, 3, None)

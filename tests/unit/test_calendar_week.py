# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for calendar_week."""

from datetime import date

import pytest

from shiftplan.calendar_week import (
    MAX_YEAR,
    MIN_YEAR,
    CalendarWeek,
    DayOfWeek,
    calendar_week_to_date,
    date_to_calendar_week,
    first_day_in_year,
    group_by_calendar_week,
    group_by_month,
    iter_dates,
    iter_months,
    last_day_in_year,
    month_bounds,
    weeks_in_year,
)
from shiftplan.errors import InvalidDateError, InvalidDayOfWeekError


class TestWeeksInYear:
    """Tests for weeks_in_year."""

    @pytest.mark.parametrize(
        "year,weeks",
        [(2015, 53), (2020, 53), (2021, 52), (2023, 52), (2024, 52), (2026, 53)],
    )
    def test_counts_iso_weeks(self, year, weeks):
        assert weeks_in_year(year) == weeks

    def test_supported_range_bounds(self):
        assert weeks_in_year(MIN_YEAR) == 52
        assert weeks_in_year(MAX_YEAR) == 53

    @pytest.mark.parametrize("year", [-1, 0, MAX_YEAR + 1, 10000])
    def test_years_out_of_range_are_invalid(self, year):
        with pytest.raises(InvalidDateError):
            weeks_in_year(year)
        with pytest.raises(InvalidDateError):
            first_day_in_year(year)
        with pytest.raises(InvalidDateError):
            last_day_in_year(year)


class TestCalendarWeekToDate:
    """Tests for calendar_week_to_date."""

    def test_converts_week_and_weekday(self):
        assert calendar_week_to_date(2024, 3, DayOfWeek.MONDAY) == date(2024, 1, 15)
        assert calendar_week_to_date(2024, 3, DayOfWeek.SUNDAY) == date(2024, 1, 21)

    def test_week_one_may_start_in_previous_year(self):
        assert calendar_week_to_date(2020, 1, DayOfWeek.MONDAY) == date(2019, 12, 30)

    def test_week_53_of_long_year(self):
        assert calendar_week_to_date(2020, 53, DayOfWeek.FRIDAY) == date(2021, 1, 1)

    def test_week_53_of_short_year_is_invalid(self):
        with pytest.raises(InvalidDateError):
            calendar_week_to_date(2023, 53, DayOfWeek.MONDAY)

    def test_week_zero_is_invalid(self):
        with pytest.raises(InvalidDateError):
            calendar_week_to_date(2024, 0, DayOfWeek.MONDAY)

    def test_invalid_weekday(self):
        with pytest.raises(InvalidDayOfWeekError):
            calendar_week_to_date(2024, 3, 8)


class TestDateToCalendarWeek:
    """Tests for date_to_calendar_week."""

    def test_new_year_belongs_to_previous_iso_year(self):
        iso = date_to_calendar_week(date(2021, 1, 1))
        assert (iso.year, iso.week, iso.day_of_week) == (2020, 53, DayOfWeek.FRIDAY)

    def test_end_of_december_belongs_to_next_iso_year(self):
        iso = date_to_calendar_week(date(2019, 12, 30))
        assert (iso.year, iso.week, iso.day_of_week) == (2020, 1, DayOfWeek.MONDAY)

    @pytest.mark.parametrize("year", [2019, 2020, 2021, 2026, 2027])
    def test_inverse_of_calendar_week_to_date(self, year):
        # Include the days of the neighbouring years sharing an ISO week
        for d in iter_dates(date(year - 1, 12, 25), date(year + 1, 1, 7)):
            iso = date_to_calendar_week(d)
            assert calendar_week_to_date(iso.year, iso.week, iso.day_of_week) == d


class TestCalendarWeek:
    """Tests for the CalendarWeek value type."""

    def test_rejects_missing_week(self):
        with pytest.raises(InvalidDateError):
            CalendarWeek(2024, 53)

    @pytest.mark.parametrize("year", [0, 10000])
    def test_rejects_year_out_of_range(self, year):
        with pytest.raises(InvalidDateError):
            CalendarWeek(year, 1)

    def test_last_week_of_last_supported_year(self):
        week = CalendarWeek(MAX_YEAR, 53)
        assert week.monday == date(MAX_YEAR, 12, 28)
        assert week.sunday == date(MAX_YEAR + 1, 1, 3)

    def test_monday_and_sunday(self):
        week = CalendarWeek(2024, 1)
        assert week.monday == date(2024, 1, 1)
        assert week.sunday == date(2024, 1, 7)

    def test_next_rolls_over_year(self):
        assert CalendarWeek(2020, 53).next() == CalendarWeek(2021, 1)
        assert CalendarWeek(2024, 52).next() == CalendarWeek(2025, 1)

    def test_iter_until_is_inclusive(self):
        weeks = list(CalendarWeek(2020, 52).iter_until(CalendarWeek(2021, 2)))
        assert [str(w) for w in weeks] == [
            "2020-W52",
            "2020-W53",
            "2021-W01",
            "2021-W02",
        ]

    def test_ordering(self):
        assert CalendarWeek(2020, 53) < CalendarWeek(2021, 1)


class TestRanges:
    """Tests for date and month iteration."""

    def test_iter_dates_empty_when_inverted(self):
        assert list(iter_dates(date(2024, 1, 2), date(2024, 1, 1))) == []

    def test_iter_months_spans_years(self):
        assert list(iter_months(date(2023, 11, 15), date(2024, 2, 1))) == [
            (2023, 11),
            (2023, 12),
            (2024, 1),
            (2024, 2),
        ]

    def test_month_bounds_leap_year(self):
        assert month_bounds(2024, 2) == (date(2024, 2, 1), date(2024, 2, 29))


class TestGrouping:
    """Tests for grouping helpers."""

    def test_group_by_calendar_week_uses_iso_year(self):
        days = [date(2021, 1, 4), date(2020, 12, 31), date(2021, 1, 1)]
        groups = group_by_calendar_week(days, key=lambda d: d)
        assert list(groups) == [CalendarWeek(2020, 53), CalendarWeek(2021, 1)]
        assert groups[CalendarWeek(2020, 53)] == [date(2020, 12, 31), date(2021, 1, 1)]

    def test_group_by_month_uses_calendar_year(self):
        days = [date(2021, 1, 1), date(2020, 12, 31)]
        groups = group_by_month(days, key=lambda d: d)
        assert list(groups) == [(2020, 12), (2021, 1)]

# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for hours_aggregator."""

import uuid
from datetime import date, datetime, time

import pytest

from shiftplan.calendar_week import DayOfWeek
from shiftplan.dao.entities import (
    CustomExtraHoursEntity,
    ExtraHoursEntity,
    ShiftplanReportDay,
    SpecialDayEntity,
    WorkingHoursEntity,
)
from shiftplan.models.enums import ExtraHoursCategory, ReportType, SpecialDayType
from shiftplan.services.hours_aggregator import (
    CustomExtraHoursTotal,
    ReportCategory,
    build_expected_days,
    build_timeline,
    hours_by_month,
    hours_by_week,
    summarize,
)
from shiftplan.services.working_hours_service import ShortDayPolicy

SALES_PERSON_ID = uuid.uuid4()
POLICY = ShortDayPolicy(time(8, 0), time(16, 0))


def contract(**kwargs) -> WorkingHoursEntity:
    values = {
        "sales_person_id": SALES_PERSON_ID,
        "expected_hours": 40.0,
        "from_year": 2024,
        "from_calendar_week": 1,
        "to_year": 2024,
        "to_calendar_week": 52,
        "workdays_per_week": 5,
    }
    values.update(kwargs)
    return WorkingHoursEntity(**values)


def booked(year: int, week: int, day: DayOfWeek, hours: float) -> ShiftplanReportDay:
    return ShiftplanReportDay(
        sales_person_id=SALES_PERSON_ID,
        hours=hours,
        year=year,
        calendar_week=week,
        day_of_week=day,
    )


def extra(
    when: date,
    amount: float,
    category: ExtraHoursCategory,
    custom: CustomExtraHoursEntity | None = None,
) -> ExtraHoursEntity:
    return ExtraHoursEntity(
        sales_person_id=SALES_PERSON_ID,
        amount=amount,
        category=category,
        date_time=datetime.combine(when, time(9, 0)),
        custom_extra_hours_id=custom.id if custom else None,
    )


def custom(name: str, modifies_balance: bool = False) -> CustomExtraHoursEntity:
    return CustomExtraHoursEntity(
        name=name, modifies_balance=modifies_balance, id=uuid.uuid4()
    )


def custom_entry(
    when: date, amount: float, definition: CustomExtraHoursEntity
) -> ExtraHoursEntity:
    return extra(when, amount, ExtraHoursCategory.CUSTOM_EXTRA_HOURS, definition)


class TestBuildTimeline:
    """Tests for build_timeline."""

    def test_orders_by_date_then_category(self):
        timeline = build_timeline(
            [booked(2024, 3, DayOfWeek.TUESDAY, 4.0)],
            [
                extra(date(2024, 1, 16), 2.0, ExtraHoursCategory.SICK_LEAVE),
                extra(date(2024, 1, 15), 8.0, ExtraHoursCategory.VACATION),
                extra(date(2024, 1, 16), 1.0, ExtraHoursCategory.EXTRA_WORK),
            ],
            date(2024, 1, 1),
            date(2024, 1, 31),
        )
        assert [(d.date, d.category) for d in timeline] == [
            (date(2024, 1, 15), ReportCategory.VACATION),
            (date(2024, 1, 16), ReportCategory.SHIFTPLAN),
            (date(2024, 1, 16), ReportCategory.EXTRA_WORK),
            (date(2024, 1, 16), ReportCategory.SICK_LEAVE),
        ]

    def test_drops_entries_outside_window(self):
        timeline = build_timeline(
            [booked(2024, 5, DayOfWeek.MONDAY, 8.0)],
            [extra(date(2023, 12, 31), 3.0, ExtraHoursCategory.EXTRA_WORK)],
            date(2024, 1, 1),
            date(2024, 1, 28),
        )
        assert timeline == []


class TestBuildExpectedDays:
    """Tests for build_expected_days."""

    def test_no_contract_expects_nothing(self):
        days = build_expected_days([], [], date(2024, 1, 1), date(2024, 1, 7), POLICY)
        assert sum(d.expected_hours for d in days) == 0.0
        assert len(days) == 7

    def test_weekend_is_not_expected(self):
        days = build_expected_days(
            [contract()], [], date(2024, 1, 1), date(2024, 1, 7), POLICY
        )
        assert [d.expected_hours for d in days] == [8.0] * 5 + [0.0, 0.0]

    def test_holiday_removes_day(self):
        holiday = SpecialDayEntity(
            year=2024,
            calendar_week=1,
            day_of_week=DayOfWeek.WEDNESDAY,
            day_type=SpecialDayType.HOLIDAY,
        )
        days = build_expected_days(
            [contract()], [holiday], date(2024, 1, 1), date(2024, 1, 7), POLICY
        )
        assert sum(d.expected_hours for d in days) == 32.0

    def test_short_day_is_pro_rata(self):
        short_day = SpecialDayEntity(
            year=2024,
            calendar_week=1,
            day_of_week=DayOfWeek.MONDAY,
            day_type=SpecialDayType.SHORT_DAY,
            time_of_day=time(12, 0),
        )
        days = build_expected_days(
            [contract()], [short_day], date(2024, 1, 1), date(2024, 1, 1), POLICY
        )
        assert days[0].expected_hours == 4.0

    def test_holiday_outranks_short_day(self):
        special_days = [
            SpecialDayEntity(
                year=2024,
                calendar_week=1,
                day_of_week=DayOfWeek.MONDAY,
                day_type=SpecialDayType.HOLIDAY,
            ),
            SpecialDayEntity(
                year=2024,
                calendar_week=1,
                day_of_week=DayOfWeek.MONDAY,
                day_type=SpecialDayType.SHORT_DAY,
                time_of_day=time(12, 0),
            ),
        ]
        days = build_expected_days(
            [contract()], special_days, date(2024, 1, 1), date(2024, 1, 1), POLICY
        )
        assert days[0].expected_hours == 0.0

    def test_latest_contract_wins_on_overlap(self):
        older = contract(expected_hours=40.0)
        newer = contract(expected_hours=20.0, from_calendar_week=2)
        days = build_expected_days(
            [older, newer], [], date(2024, 1, 1), date(2024, 1, 14), POLICY
        )
        assert sum(d.expected_hours for d in days) == 40.0 + 20.0


class TestSummarize:
    """Tests for summarize."""

    def test_balance_is_overall_minus_expected(self):
        expected = build_expected_days(
            [contract()], [], date(2024, 1, 15), date(2024, 1, 21), POLICY
        )
        timeline = build_timeline(
            [booked(2024, 3, DayOfWeek.MONDAY, 8.0)],
            [extra(date(2024, 1, 16), 8.0, ExtraHoursCategory.VACATION)],
            date(2024, 1, 15),
            date(2024, 1, 21),
        )
        totals = summarize(timeline, expected)

        assert totals.expected_hours == 40.0
        assert totals.overall_hours == 16.0
        assert totals.balance == -24.0
        assert totals.vacation_hours == 8.0
        assert totals.vacation_days == 1.0
        assert totals.absence_days == 1.0

    def test_overall_is_sum_of_categories(self):
        timeline = build_timeline(
            [booked(2024, 3, DayOfWeek.MONDAY, 6.5)],
            [
                extra(date(2024, 1, 16), 1.25, ExtraHoursCategory.EXTRA_WORK),
                extra(date(2024, 1, 17), 8.0, ExtraHoursCategory.SICK_LEAVE),
                extra(date(2024, 1, 18), 8.0, ExtraHoursCategory.HOLIDAY),
            ],
            date(2024, 1, 15),
            date(2024, 1, 21),
        )
        totals = summarize(timeline, [])
        assert totals.overall_hours == (
            totals.shiftplan_hours
            + totals.extra_work_hours
            + totals.vacation_hours
            + totals.sick_leave_hours
            + totals.holiday_hours
        )

    def test_is_deterministic(self):
        timeline = build_timeline(
            [booked(2024, 3, DayOfWeek.MONDAY, 0.1)],
            [extra(date(2024, 1, 16), 0.2, ExtraHoursCategory.EXTRA_WORK)],
            date(2024, 1, 15),
            date(2024, 1, 21),
        )
        assert summarize(timeline, []) == summarize(list(timeline), [])


class TestGrouping:
    """Tests for hours_by_week and hours_by_month."""

    @pytest.fixture
    def window(self):
        from_date, to_date = date(2024, 1, 1), date(2024, 2, 11)
        expected = build_expected_days([contract()], [], from_date, to_date, POLICY)
        timeline = build_timeline(
            [
                booked(2024, 1, DayOfWeek.MONDAY, 8.0),
                booked(2024, 5, DayOfWeek.THURSDAY, 6.0),
            ],
            [extra(date(2024, 2, 1), 2.0, ExtraHoursCategory.EXTRA_WORK)],
            from_date,
            to_date,
        )
        return timeline, expected, from_date, to_date

    def test_weeks_include_empty_weeks(self, window):
        weeks = hours_by_week(*window)
        assert [w.week for w in weeks] == [1, 2, 3, 4, 5, 6]
        assert weeks[1].overall_hours == 0.0
        assert weeks[1].expected_hours == 40.0

    def test_week_sums_match_total(self, window):
        timeline, expected, _, _ = window
        totals = summarize(timeline, expected)
        weeks = hours_by_week(*window)
        assert sum(w.overall_hours for w in weeks) == pytest.approx(
            totals.overall_hours
        )
        assert sum(w.expected_hours for w in weeks) == pytest.approx(
            totals.expected_hours
        )

    def test_month_buckets_are_clipped(self, window):
        months = hours_by_month(*window)
        assert [(m.year, m.month) for m in months] == [(2024, 1), (2024, 2)]
        assert months[1].from_date == date(2024, 2, 1)
        assert months[1].to_date == date(2024, 2, 11)
        # Thursday booking of week 5 and the extra work both fall on Feb 1st
        assert months[1].overall_hours == 8.0

    def test_weeks_clipped_at_year_boundary(self):
        from_date, to_date = date(2020, 12, 28), date(2020, 12, 31)
        weeks = hours_by_week([], [], from_date, to_date)
        assert len(weeks) == 1
        assert (weeks[0].year, weeks[0].week) == (2020, 53)
        assert weeks[0].to_date == date(2020, 12, 31)

    def test_empty_window(self):
        assert hours_by_week([], [], date(2024, 1, 2), date(2024, 1, 1)) == []
        assert hours_by_month([], [], date(2024, 1, 2), date(2024, 1, 1)) == []


class TestReportType:
    """Tests for ExtraHoursCategory.report_type."""

    @pytest.mark.parametrize(
        ("category", "modifies_balance", "expected"),
        [
            (ExtraHoursCategory.EXTRA_WORK, False, ReportType.WORKING_HOURS),
            (ExtraHoursCategory.VACATION, False, ReportType.ABSENCE_HOURS),
            (ExtraHoursCategory.HOLIDAY, False, ReportType.ABSENCE_HOURS),
            (ExtraHoursCategory.UNAVAILABLE, False, ReportType.NONE),
            (ExtraHoursCategory.UNAVAILABLE, True, ReportType.NONE),
            (ExtraHoursCategory.CUSTOM_EXTRA_HOURS, False, ReportType.NONE),
            (ExtraHoursCategory.CUSTOM_EXTRA_HOURS, True, ReportType.WORKING_HOURS),
        ],
    )
    def test_report_type(self, category, modifies_balance, expected):
        assert category.report_type(modifies_balance) is expected


class TestUnavailableAndCustomHours:
    """Tests for categories that may be left out of the balance."""

    def test_unavailable_is_reported_but_not_counted(self):
        timeline = build_timeline(
            [booked(2024, 3, DayOfWeek.MONDAY, 8.0)],
            [extra(date(2024, 1, 16), 8.0, ExtraHoursCategory.UNAVAILABLE)],
            date(2024, 1, 15),
            date(2024, 1, 21),
        )
        totals = summarize(timeline, [])

        assert totals.unavailable_hours == 8.0
        assert totals.overall_hours == 8.0
        assert timeline[1].report_type is ReportType.NONE

    def test_custom_hours_count_only_when_modifying_balance(self):
        training = custom("Training", modifies_balance=True)
        oncall = custom("Oncall")
        definitions = {training.id: training, oncall.id: oncall}
        timeline = build_timeline(
            [],
            [
                custom_entry(date(2024, 1, 15), 3.0, training),
                custom_entry(date(2024, 1, 16), 5.0, oncall),
            ],
            date(2024, 1, 15),
            date(2024, 1, 21),
            definitions,
        )
        totals = summarize(timeline, [])

        assert totals.overall_hours == 3.0
        assert totals.custom_extra_hours == (
            CustomExtraHoursTotal(oncall.id, "Oncall", 5.0),
            CustomExtraHoursTotal(training.id, "Training", 3.0),
        )

    def test_custom_hours_aggregated_per_definition(self):
        first = custom("Training")
        second = custom("Training")
        definitions = {first.id: first, second.id: second}
        timeline = build_timeline(
            [],
            [
                custom_entry(date(2024, 1, 15), 1.0, first),
                custom_entry(date(2024, 1, 16), 2.0, first),
                custom_entry(date(2024, 1, 16), 4.0, second),
            ],
            date(2024, 1, 15),
            date(2024, 1, 21),
            definitions,
        )
        totals = summarize(timeline, [])

        assert {(t.id, t.hours) for t in totals.custom_extra_hours} == {
            (first.id, 3.0),
            (second.id, 4.0),
        }

    def test_unknown_definition_is_skipped(self):
        timeline = build_timeline(
            [],
            [
                custom_entry(date(2024, 1, 15), 1.0, custom("Gone")),
            ],
            date(2024, 1, 15),
            date(2024, 1, 21),
            {},
        )
        assert timeline == []

    def test_weekly_buckets_carry_custom_totals(self):
        training = custom("Training")
        from_date, to_date = date(2024, 1, 8), date(2024, 1, 21)
        timeline = build_timeline(
            [],
            [
                custom_entry(date(2024, 1, 9), 2.0, training),
                extra(date(2024, 1, 17), 6.0, ExtraHoursCategory.UNAVAILABLE),
            ],
            from_date,
            to_date,
            {training.id: training},
        )
        weeks = hours_by_week(timeline, [], from_date, to_date)

        assert weeks[0].custom_extra_hours == (
            CustomExtraHoursTotal(training.id, "Training", 2.0),
        )
        assert weeks[0].unavailable_hours == 0.0
        assert weeks[1].custom_extra_hours == ()
        assert weeks[1].unavailable_hours == 6.0
        assert weeks[1].overall_hours == 0.0

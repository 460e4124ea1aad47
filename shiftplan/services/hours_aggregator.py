# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Hours aggregation for reports.

Turns booked shift hours, manual hours entries, contracts and special days
into a day level timeline and sums it into whole-window, weekly and monthly
buckets. Everything here is pure; the reporting service loads the inputs.

Sums always run over the timeline in (date, category) order so that the same
inputs give bit-identical totals.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from datetime import date
from enum import Enum

from shiftplan.calendar_week import (
    CalendarWeek,
    date_to_calendar_week,
    group_by_calendar_week,
    group_by_month,
    iter_dates,
    iter_months,
    month_bounds,
)
from shiftplan.dao.entities import (
    CustomExtraHoursEntity,
    ExtraHoursEntity,
    ShiftplanReportDay,
    SpecialDayEntity,
    WorkingHoursEntity,
)
from shiftplan.models.enums import ExtraHoursCategory, ReportType, SpecialDayType
from shiftplan.services.working_hours_service import (
    ShortDayPolicy,
    expected_hours_for_day,
    find_contract_for_week,
)


class ReportCategory(str, Enum):
    """Semantic category of a timeline entry, in summation order."""

    SHIFTPLAN = "shiftplan"
    EXTRA_WORK = "extra_work"
    VACATION = "vacation"
    SICK_LEAVE = "sick_leave"
    HOLIDAY = "holiday"
    UNAVAILABLE = "unavailable"
    CUSTOM_EXTRA_HOURS = "custom_extra_hours"

    @property
    def ordinal(self) -> int:
        return _CATEGORY_ORDER.index(self)

    @classmethod
    def from_extra_hours_category(cls, category: ExtraHoursCategory) -> ReportCategory:
        return _EXTRA_HOURS_CATEGORIES[category]


_CATEGORY_ORDER = list(ReportCategory)

_EXTRA_HOURS_CATEGORIES = {
    ExtraHoursCategory.EXTRA_WORK: ReportCategory.EXTRA_WORK,
    ExtraHoursCategory.VACATION: ReportCategory.VACATION,
    ExtraHoursCategory.SICK_LEAVE: ReportCategory.SICK_LEAVE,
    ExtraHoursCategory.HOLIDAY: ReportCategory.HOLIDAY,
    ExtraHoursCategory.UNAVAILABLE: ReportCategory.UNAVAILABLE,
    ExtraHoursCategory.CUSTOM_EXTRA_HOURS: ReportCategory.CUSTOM_EXTRA_HOURS,
}


@dataclass(frozen=True)
class WorkingHoursDay:
    """One timeline entry.

    ``custom_extra_hours`` holds the definition of custom entries. Entries
    with report type NONE are listed but left out of the overall hours.
    """

    date: date
    hours: float
    category: ReportCategory
    report_type: ReportType = ReportType.WORKING_HOURS
    custom_extra_hours: CustomExtraHoursEntity | None = None


@dataclass(frozen=True)
class CustomExtraHoursTotal:
    """Hours of one custom category."""

    id: uuid.UUID
    name: str
    hours: float


@dataclass(frozen=True)
class ExpectedDay:
    """Expected hours of one calendar day.

    ``hours_per_day`` is the per-day rate of the contract for that date and is
    used to turn absence hours into days.
    """

    date: date
    expected_hours: float
    hours_per_day: float


@dataclass(frozen=True)
class HoursTotals:
    """Sums over a set of timeline entries and expected days."""

    expected_hours: float
    overall_hours: float
    balance: float
    shiftplan_hours: float
    extra_work_hours: float
    vacation_hours: float
    sick_leave_hours: float
    holiday_hours: float
    unavailable_hours: float
    vacation_days: float
    sick_leave_days: float
    holiday_days: float
    custom_extra_hours: tuple[CustomExtraHoursTotal, ...] = ()

    @property
    def absence_days(self) -> float:
        return self.vacation_days + self.sick_leave_days + self.holiday_days


@dataclass(frozen=True)
class GroupedReportHours:
    """Totals of one week or month, clipped to the report window.

    ``week`` is set for weekly buckets and ``month`` for monthly ones; ``year``
    is the ISO year for weeks and the calendar year for months.
    """

    from_date: date
    to_date: date
    year: int
    week: int | None
    month: int | None
    expected_hours: float
    overall_hours: float
    balance: float
    shiftplan_hours: float
    extra_work_hours: float
    vacation_hours: float
    sick_leave_hours: float
    holiday_hours: float
    unavailable_hours: float
    vacation_days: float
    sick_leave_days: float
    holiday_days: float
    absence_days: float
    custom_extra_hours: tuple[CustomExtraHoursTotal, ...]
    days: tuple[WorkingHoursDay, ...]


def _extra_hours_day(
    entry: ExtraHoursEntity,
    custom_extra_hours: Mapping[uuid.UUID, CustomExtraHoursEntity],
) -> WorkingHoursDay | None:
    category = ReportCategory.from_extra_hours_category(entry.category)
    if category is not ReportCategory.CUSTOM_EXTRA_HOURS:
        return WorkingHoursDay(
            entry.date, entry.amount, category, entry.category.report_type()
        )
    definition = custom_extra_hours.get(entry.custom_extra_hours_id)
    if definition is None:
        return None
    return WorkingHoursDay(
        entry.date,
        entry.amount,
        category,
        entry.category.report_type(definition.modifies_balance),
        definition,
    )


def build_timeline(
    shiftplan_days: Iterable[ShiftplanReportDay],
    extra_hours: Iterable[ExtraHoursEntity],
    from_date: date,
    to_date: date,
    custom_extra_hours: Mapping[uuid.UUID, CustomExtraHoursEntity] | None = None,
) -> list[WorkingHoursDay]:
    """Merge booked and manual hours into one list ordered by (date, category).

    Entries outside [from_date, to_date] and deleted entries are dropped, as
    are custom entries whose definition is not in ``custom_extra_hours``.
    Calendar errors in stored data propagate.
    """
    custom_extra_hours = custom_extra_hours or {}
    timeline = []
    for day in shiftplan_days:
        day_date = day.to_date()
        if from_date <= day_date <= to_date:
            timeline.append(
                WorkingHoursDay(day_date, day.hours, ReportCategory.SHIFTPLAN)
            )
    for entry in extra_hours:
        if entry.deleted is not None or not from_date <= entry.date <= to_date:
            continue
        timeline_day = _extra_hours_day(entry, custom_extra_hours)
        if timeline_day is not None:
            timeline.append(timeline_day)
    timeline.sort(key=_timeline_key)
    return timeline


def _timeline_key(day: WorkingHoursDay) -> tuple:
    custom = day.custom_extra_hours
    return (
        day.date,
        day.category.ordinal,
        custom.name if custom else "",
        str(custom.id) if custom else "",
    )


def _special_days_by_date(
    special_days: Iterable[SpecialDayEntity],
) -> dict[date, SpecialDayEntity]:
    # A holiday outranks a short day on the same date
    by_date: dict[date, SpecialDayEntity] = {}
    for special_day in special_days:
        if special_day.deleted is not None:
            continue
        current = by_date.get(special_day.date)
        if current is None or special_day.day_type == SpecialDayType.HOLIDAY:
            by_date[special_day.date] = special_day
    return by_date


def build_expected_days(
    contracts: Sequence[WorkingHoursEntity],
    special_days: Iterable[SpecialDayEntity],
    from_date: date,
    to_date: date,
    policy: ShortDayPolicy,
) -> list[ExpectedDay]:
    """Expected hours for every calendar day in [from_date, to_date]."""
    special_by_date = _special_days_by_date(special_days)
    expected = []
    for day in iter_dates(from_date, to_date):
        iso = date_to_calendar_week(day)
        contract = find_contract_for_week(contracts, iso.year, iso.week)
        expected.append(
            ExpectedDay(
                date=day,
                expected_hours=expected_hours_for_day(
                    contract, day, special_by_date.get(day), policy
                ),
                hours_per_day=contract.hours_per_day if contract else 0.0,
            )
        )
    return expected


def _custom_totals(
    timeline: Sequence[WorkingHoursDay],
) -> tuple[CustomExtraHoursTotal, ...]:
    hours: dict[tuple[uuid.UUID, str], float] = {}
    for entry in timeline:
        definition = entry.custom_extra_hours
        if definition is None:
            continue
        key = (definition.id, definition.name)
        hours[key] = hours.get(key, 0.0) + entry.hours
    return tuple(
        CustomExtraHoursTotal(id=custom_id, name=name, hours=total)
        for (custom_id, name), total in sorted(
            hours.items(), key=lambda item: (item[0][1], str(item[0][0]))
        )
    )


def summarize(
    timeline: Sequence[WorkingHoursDay], expected_days: Sequence[ExpectedDay]
) -> HoursTotals:
    """Sum a timeline against the expected days covering the same dates."""
    hours = {category: 0.0 for category in ReportCategory}
    counted = {category: 0.0 for category in ReportCategory}
    days = {category: 0.0 for category in ReportCategory}
    hours_per_day = {day.date: day.hours_per_day for day in expected_days}

    for entry in timeline:
        hours[entry.category] += entry.hours
        if entry.report_type is not ReportType.NONE:
            counted[entry.category] += entry.hours
        rate = hours_per_day.get(entry.date, 0.0)
        if rate > 0:
            days[entry.category] += entry.hours / rate

    expected_hours = 0.0
    for day in expected_days:
        expected_hours += day.expected_hours

    overall_hours = 0.0
    for category in ReportCategory:
        overall_hours += counted[category]

    return HoursTotals(
        expected_hours=expected_hours,
        overall_hours=overall_hours,
        balance=overall_hours - expected_hours,
        shiftplan_hours=hours[ReportCategory.SHIFTPLAN],
        extra_work_hours=hours[ReportCategory.EXTRA_WORK],
        vacation_hours=hours[ReportCategory.VACATION],
        sick_leave_hours=hours[ReportCategory.SICK_LEAVE],
        holiday_hours=hours[ReportCategory.HOLIDAY],
        unavailable_hours=hours[ReportCategory.UNAVAILABLE],
        vacation_days=days[ReportCategory.VACATION],
        sick_leave_days=days[ReportCategory.SICK_LEAVE],
        holiday_days=days[ReportCategory.HOLIDAY],
        custom_extra_hours=_custom_totals(timeline),
    )


def _bucket(
    from_date: date,
    to_date: date,
    year: int,
    week: int | None,
    month: int | None,
    timeline: Sequence[WorkingHoursDay],
    expected_days: Sequence[ExpectedDay],
) -> GroupedReportHours:
    totals = summarize(timeline, expected_days)
    return GroupedReportHours(
        from_date=from_date,
        to_date=to_date,
        year=year,
        week=week,
        month=month,
        expected_hours=totals.expected_hours,
        overall_hours=totals.overall_hours,
        balance=totals.balance,
        shiftplan_hours=totals.shiftplan_hours,
        extra_work_hours=totals.extra_work_hours,
        vacation_hours=totals.vacation_hours,
        sick_leave_hours=totals.sick_leave_hours,
        holiday_hours=totals.holiday_hours,
        unavailable_hours=totals.unavailable_hours,
        vacation_days=totals.vacation_days,
        sick_leave_days=totals.sick_leave_days,
        holiday_days=totals.holiday_days,
        absence_days=totals.absence_days,
        custom_extra_hours=totals.custom_extra_hours,
        days=tuple(timeline),
    )


def hours_by_week(
    timeline: Sequence[WorkingHoursDay],
    expected_days: Sequence[ExpectedDay],
    from_date: date,
    to_date: date,
) -> list[GroupedReportHours]:
    """One bucket per ISO week touching the window, including empty weeks."""
    if to_date < from_date:
        return []
    entries = group_by_calendar_week(timeline, key=lambda day: day.date)
    expected = group_by_calendar_week(expected_days, key=lambda day: day.date)

    buckets = []
    first_week = CalendarWeek.from_date(from_date)
    for week in first_week.iter_until(CalendarWeek.from_date(to_date)):
        buckets.append(
            _bucket(
                max(week.monday, from_date),
                min(week.sunday, to_date),
                week.year,
                week.week,
                None,
                entries.get(week, []),
                expected.get(week, []),
            )
        )
    return buckets


def hours_by_month(
    timeline: Sequence[WorkingHoursDay],
    expected_days: Sequence[ExpectedDay],
    from_date: date,
    to_date: date,
) -> list[GroupedReportHours]:
    """One bucket per calendar month touching the window."""
    if to_date < from_date:
        return []
    entries = group_by_month(timeline, key=lambda day: day.date)
    expected = group_by_month(expected_days, key=lambda day: day.date)

    buckets = []
    for year, month in iter_months(from_date, to_date):
        first, last = month_bounds(year, month)
        buckets.append(
            _bucket(
                max(first, from_date),
                min(last, to_date),
                year,
                None,
                month,
                entries.get((year, month), []),
                expected.get((year, month), []),
            )
        )
    return buckets

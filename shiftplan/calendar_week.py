# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""ISO-8601 calendar week helpers.

Weeks run Monday to Sunday and week 1 is the week holding the first Thursday
of the year, so the ISO year of a date can differ from its calendar year
around New Year.
"""

from __future__ import annotations

from calendar import monthrange
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from datetime import date, timedelta
from enum import IntEnum
from typing import NamedTuple, TypeVar

from shiftplan.errors import InvalidDateError, InvalidDayOfWeekError

T = TypeVar("T")

MIN_YEAR = 1
# The last ISO week of 9999 ends in a year `date` cannot represent
MAX_YEAR = 9998


class DayOfWeek(IntEnum):
    """ISO weekday numbering."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @classmethod
    def from_number(cls, number: int) -> DayOfWeek:
        """Map 1..7 to a weekday, raising InvalidDayOfWeekError otherwise."""
        try:
            return cls(number)
        except ValueError as e:
            raise InvalidDayOfWeekError(number) from e

    @classmethod
    def from_date(cls, d: date) -> DayOfWeek:
        return cls(d.isoweekday())


class IsoWeekDate(NamedTuple):
    """A date addressed as (ISO year, ISO week, weekday)."""

    year: int
    week: int
    day_of_week: DayOfWeek


def check_year(year: int) -> int:
    """Return year, raising InvalidDateError outside MIN_YEAR..MAX_YEAR."""
    if year < MIN_YEAR or year > MAX_YEAR:
        raise InvalidDateError(
            f"Year {year} is outside the supported range {MIN_YEAR}..{MAX_YEAR}"
        )
    return year


def weeks_in_year(year: int) -> int:
    """Return 52 or 53. December 28th always falls in the last ISO week."""
    check_year(year)
    return date(year, 12, 28).isocalendar()[1]


def first_day_in_year(year: int) -> date:
    return date(check_year(year), 1, 1)


def last_day_in_year(year: int) -> date:
    return date(check_year(year), 12, 31)


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """Return the first and last day of a month."""
    return date(year, month, 1), date(year, month, monthrange(year, month)[1])


def calendar_week_to_date(year: int, week: int, day_of_week: int) -> date:
    """Convert an ISO (year, week, weekday) triple to a calendar date.

    Raises:
        InvalidDayOfWeekError: If the weekday is not in 1..7.
        InvalidDateError: If the week does not exist in that ISO year.
    """
    weekday = DayOfWeek.from_number(day_of_week)
    try:
        if week < 1 or week > weeks_in_year(year):
            raise InvalidDateError(f"Year {year} has no calendar week {week}")
        return date.fromisocalendar(year, week, int(weekday))
    except ValueError as e:
        raise InvalidDateError(
            f"Invalid calendar date {year}-W{week}-{int(weekday)}: {e}"
        ) from e


def date_to_calendar_week(d: date) -> IsoWeekDate:
    """Convert a calendar date to its ISO (year, week, weekday) triple."""
    iso = d.isocalendar()
    return IsoWeekDate(iso[0], iso[1], DayOfWeek(iso[2]))


@dataclass(frozen=True, order=True)
class CalendarWeek:
    """An ISO week, ordered by (year, week)."""

    year: int
    week: int

    def __post_init__(self) -> None:
        if self.week < 1 or self.week > weeks_in_year(self.year):
            raise InvalidDateError(
                f"Year {self.year} has no calendar week {self.week}"
            )

    @classmethod
    def from_date(cls, d: date) -> CalendarWeek:
        iso = d.isocalendar()
        return cls(iso[0], iso[1])

    def as_date(self, day_of_week: int) -> date:
        return calendar_week_to_date(self.year, self.week, day_of_week)

    @property
    def monday(self) -> date:
        return self.as_date(DayOfWeek.MONDAY)

    @property
    def sunday(self) -> date:
        return self.as_date(DayOfWeek.SUNDAY)

    def next(self) -> CalendarWeek:
        if self.week >= weeks_in_year(self.year):
            return CalendarWeek(self.year + 1, 1)
        return CalendarWeek(self.year, self.week + 1)

    def iter_until(self, end: CalendarWeek) -> Iterator[CalendarWeek]:
        """Yield every week from this one up to and including end."""
        current = self
        while current <= end:
            yield current
            current = current.next()

    def __str__(self) -> str:
        return f"{self.year}-W{self.week:02d}"


def iter_dates(from_date: date, to_date: date) -> Iterator[date]:
    """Yield every date in [from_date, to_date]. Empty when to < from."""
    current = from_date
    while current <= to_date:
        yield current
        current += timedelta(days=1)


def iter_months(from_date: date, to_date: date) -> Iterator[tuple[int, int]]:
    """Yield every (year, month) touched by [from_date, to_date]."""
    year, month = from_date.year, from_date.month
    while (year, month) <= (to_date.year, to_date.month):
        yield year, month
        if month == 12:
            year, month = year + 1, 1
        else:
            month += 1


def group_by_calendar_week(
    items: Iterable[T], key: Callable[[T], date]
) -> dict[CalendarWeek, list[T]]:
    """Bucket items by the ISO week of key(item), ordered by week."""
    groups: dict[CalendarWeek, list[T]] = {}
    for item in items:
        groups.setdefault(CalendarWeek.from_date(key(item)), []).append(item)
    return {week: groups[week] for week in sorted(groups)}


def group_by_month(
    items: Iterable[T], key: Callable[[T], date]
) -> dict[tuple[int, int], list[T]]:
    """Bucket items by the (year, month) of key(item), ordered by month."""
    groups: dict[tuple[int, int], list[T]] = {}
    for item in items:
        d = key(item)
        groups.setdefault((d.year, d.month), []).append(item)
    return {month: groups[month] for month in sorted(groups)}

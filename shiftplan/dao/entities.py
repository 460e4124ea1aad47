# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Immutable records passed between the DAO and service layers.

Entities are frozen dataclasses so the same record can be shared across
aggregation steps without copying. Identity and bookkeeping fields come last
and default to None; a create call must leave id and version unset.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import date, datetime, time

from shiftplan.calendar_week import DayOfWeek, calendar_week_to_date
from shiftplan.models.enums import (
    BillingPeriodValueType,
    ExtraHoursCategory,
    SpecialDayType,
)


@dataclass(frozen=True)
class SalesPersonEntity:
    """Sales person record."""

    name: str
    background_color: str = "#FFFFFF"
    is_paid: bool = True
    inactive: bool = False
    user_id: uuid.UUID | None = None
    id: uuid.UUID | None = None
    created: datetime | None = None
    deleted: datetime | None = None
    version: uuid.UUID | None = None


@dataclass(frozen=True)
class WorkingHoursEntity:
    """Working hours contract, valid for an inclusive range of ISO weeks."""

    sales_person_id: uuid.UUID
    expected_hours: float
    from_year: int
    from_calendar_week: int
    to_year: int
    to_calendar_week: int
    workdays_per_week: int
    monday: bool = True
    tuesday: bool = True
    wednesday: bool = True
    thursday: bool = True
    friday: bool = True
    saturday: bool = False
    sunday: bool = False
    vacation_days: int = 0
    id: uuid.UUID | None = None
    created: datetime | None = None
    deleted: datetime | None = None
    version: uuid.UUID | None = None

    @property
    def from_key(self) -> tuple[int, int]:
        return (self.from_year, self.from_calendar_week)

    @property
    def to_key(self) -> tuple[int, int]:
        return (self.to_year, self.to_calendar_week)

    @property
    def from_date(self) -> date:
        """Monday of the first contract week."""
        return calendar_week_to_date(
            self.from_year, self.from_calendar_week, DayOfWeek.MONDAY
        )

    @property
    def to_date(self) -> date:
        """Sunday of the last contract week."""
        return calendar_week_to_date(
            self.to_year, self.to_calendar_week, DayOfWeek.SUNDAY
        )

    def covers_week(self, year: int, week: int) -> bool:
        """Check whether (year, week) lies inside the contract bounds."""
        return self.from_key <= (year, week) <= self.to_key

    def has_day(self, day_of_week: DayOfWeek) -> bool:
        return bool(getattr(self, day_of_week.name.lower()))

    def potential_weekdays(self) -> list[DayOfWeek]:
        """Weekdays flagged as working days, Monday first."""
        return [day for day in DayOfWeek if self.has_day(day)]

    @property
    def hours_per_day(self) -> float:
        if self.workdays_per_week <= 0:
            return 0.0
        return self.expected_hours / self.workdays_per_week

    def vacation_days_for_year(self, year: int) -> float:
        """Vacation entitlement for one calendar year.

        The full entitlement is reduced pro rata when the contract starts or
        ends inside the year, and is zero when the contract does not touch it.
        """
        start = self.from_date
        end = self.to_date
        if end.year < year or start.year > year:
            return 0.0

        days_in_year = (date(year, 12, 31) - date(year, 1, 1)).days + 1
        days = float(self.vacation_days)
        if start.year == year:
            elapsed = (start.timetuple().tm_yday - 1) / days_in_year
            days -= self.vacation_days * elapsed
        if end.year == year:
            remaining = 1.0 - end.timetuple().tm_yday / days_in_year
            days -= self.vacation_days * remaining
        return max(days, 0.0)


@dataclass(frozen=True)
class CustomExtraHoursEntity:
    """User defined hours category.

    Entries of the category count toward the balance only when
    modifies_balance is set; otherwise they are reported but not summed in.
    """

    name: str
    description: str | None = None
    modifies_balance: bool = False
    id: uuid.UUID | None = None
    created: datetime | None = None
    deleted: datetime | None = None
    version: uuid.UUID | None = None


@dataclass(frozen=True)
class ExtraHoursEntity:
    """Manual hours entry."""

    sales_person_id: uuid.UUID
    amount: float
    category: ExtraHoursCategory
    date_time: datetime
    description: str | None = None
    # Set exactly when category is CUSTOM_EXTRA_HOURS
    custom_extra_hours_id: uuid.UUID | None = None
    id: uuid.UUID | None = None
    created: datetime | None = None
    deleted: datetime | None = None
    version: uuid.UUID | None = None

    @property
    def date(self) -> date:
        return self.date_time.date()


@dataclass(frozen=True)
class SpecialDayEntity:
    """Holiday or short day marker."""

    year: int
    calendar_week: int
    day_of_week: DayOfWeek
    day_type: SpecialDayType
    time_of_day: time | None = None
    name: str | None = None
    id: uuid.UUID | None = None
    created: datetime | None = None
    deleted: datetime | None = None
    version: uuid.UUID | None = None

    @property
    def date(self) -> date:
        return calendar_week_to_date(self.year, self.calendar_week, self.day_of_week)


@dataclass(frozen=True)
class CarryoverEntity:
    """Balance carried into year."""

    sales_person_id: uuid.UUID
    year: int
    carryover_hours: float
    vacation: int
    created: datetime | None = None
    deleted: datetime | None = None
    version: uuid.UUID | None = None


@dataclass(frozen=True)
class ShiftplanReportDay:
    """Booked hours of one sales person on one day."""

    sales_person_id: uuid.UUID
    hours: float
    year: int
    calendar_week: int
    day_of_week: DayOfWeek

    def to_date(self) -> date:
        return calendar_week_to_date(self.year, self.calendar_week, self.day_of_week)


@dataclass(frozen=True)
class BillingPeriodValue:
    """One figure over the four report windows of a billing period."""

    value_delta: float
    value_ytd_from: float
    value_ytd_to: float
    value_full_year: float


@dataclass(frozen=True)
class BillingPeriodSalesPersonEntity:
    """Per sales person figures of a billing period."""

    sales_person_id: uuid.UUID
    values: dict[BillingPeriodValueType, BillingPeriodValue] = field(
        default_factory=dict
    )


@dataclass(frozen=True)
class BillingPeriodEntity:
    """Closed billing period with its computed figures."""

    start_date: date
    end_date: date
    sales_persons: list[BillingPeriodSalesPersonEntity] = field(default_factory=list)
    id: uuid.UUID | None = None
    created: datetime | None = None
    created_by: str | None = None
    deleted: datetime | None = None
    deleted_by: str | None = None
    version: uuid.UUID | None = None

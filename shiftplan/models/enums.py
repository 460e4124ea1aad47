# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Enumeration types for database models."""

from enum import Enum


class ExtraHoursCategory(str, Enum):
    """Category of a manual hours entry."""

    EXTRA_WORK = "extra_work"
    VACATION = "vacation"
    SICK_LEAVE = "sick_leave"
    HOLIDAY = "holiday"
    # Documents unavailability only, never changes the balance
    UNAVAILABLE = "unavailable"
    # User defined category, see CustomExtraHours
    CUSTOM_EXTRA_HOURS = "custom_extra_hours"

    def report_type(self, modifies_balance: bool = False) -> "ReportType":
        """How entries of this category count in reports.

        Custom entries count as worked hours only when their definition has
        modifies_balance set.
        """
        if self is ExtraHoursCategory.EXTRA_WORK:
            return ReportType.WORKING_HOURS
        if self in _ABSENCE_CATEGORIES:
            return ReportType.ABSENCE_HOURS
        if self is ExtraHoursCategory.CUSTOM_EXTRA_HOURS and modifies_balance:
            return ReportType.WORKING_HOURS
        return ReportType.NONE


_ABSENCE_CATEGORIES = frozenset(
    {
        ExtraHoursCategory.VACATION,
        ExtraHoursCategory.SICK_LEAVE,
        ExtraHoursCategory.HOLIDAY,
    }
)


class ReportType(str, Enum):
    """How an hours entry counts in reports."""

    WORKING_HOURS = "working_hours"
    ABSENCE_HOURS = "absence_hours"
    NONE = "none"


class SpecialDayType(str, Enum):
    """Special day marker type."""

    HOLIDAY = "holiday"
    SHORT_DAY = "short_day"


class BillingPeriodValueType(str, Enum):
    """Figures stored per sales person in a billing period."""

    BALANCE = "balance"
    OVERALL = "overall"
    EXPECTED_HOURS = "expected_hours"
    EXTRA_WORK = "extra_work"
    VACATION_HOURS = "vacation_hours"
    SICK_LEAVE = "sick_leave"
    HOLIDAY = "holiday"
    VACATION_DAYS = "vacation_days"
    VACATION_ENTITLEMENT = "vacation_entitlement"

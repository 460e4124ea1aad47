# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Report schemas."""

import datetime
import uuid

from pydantic import BaseModel

from shiftplan.models.enums import ReportType
from shiftplan.services.hours_aggregator import ReportCategory


class SalesPersonSummary(BaseModel):
    """Sales person as shown in reports."""

    id: uuid.UUID
    name: str
    is_paid: bool

    model_config = {"from_attributes": True}


class CustomExtraHoursSummary(BaseModel):
    """Custom category definition as shown in reports."""

    id: uuid.UUID
    name: str
    modifies_balance: bool

    model_config = {"from_attributes": True}


class CustomExtraHoursTotalResponse(BaseModel):
    """Hours of one custom category."""

    id: uuid.UUID
    name: str
    hours: float

    model_config = {"from_attributes": True}


class WorkingHoursDayResponse(BaseModel):
    """One timeline entry."""

    date: datetime.date
    hours: float
    category: ReportCategory
    report_type: ReportType
    custom_extra_hours: CustomExtraHoursSummary | None = None

    model_config = {"from_attributes": True}


class GroupedReportHoursResponse(BaseModel):
    """Weekly or monthly bucket."""

    from_date: datetime.date
    to_date: datetime.date
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
    custom_extra_hours: list[CustomExtraHoursTotalResponse]
    days: list[WorkingHoursDayResponse]

    model_config = {"from_attributes": True}


class ShortEmployeeReportResponse(BaseModel):
    """Balance of one sales person."""

    sales_person: SalesPersonSummary
    balance_hours: float
    expected_hours: float
    overall_hours: float

    model_config = {"from_attributes": True}


class EmployeeReportResponse(BaseModel):
    """Full report of one sales person."""

    sales_person: SalesPersonSummary
    from_date: datetime.date
    to_date: datetime.date
    balance_hours: float
    overall_hours: float
    expected_hours: float
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
    vacation_entitlement: float
    vacation_carryover: int
    carryover_hours: float
    custom_extra_hours: list[CustomExtraHoursTotalResponse]
    by_week: list[GroupedReportHoursResponse]
    by_month: list[GroupedReportHoursResponse]

    model_config = {"from_attributes": True}


class CarryoverUpdateResponse(BaseModel):
    """Outcome of a carryover run."""

    year: int
    updated: list[uuid.UUID]
    failed: dict[uuid.UUID, str]

    model_config = {"from_attributes": True}

# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Wiring of DAOs and services."""

from dataclasses import dataclass

from shiftplan.config import settings
from shiftplan.dao.sql import (
    SqlBillingPeriodDao,
    SqlCarryoverDao,
    SqlCustomExtraHoursDao,
    SqlExtraHoursDao,
    SqlSalesPersonDao,
    SqlShiftplanReportDao,
    SqlSpecialDayDao,
    SqlWorkingHoursDao,
)
from shiftplan.database import SessionFactory
from shiftplan.services.billing_period_report_service import (
    BillingPeriodReportService,
)
from shiftplan.services.billing_period_service import BillingPeriodService
from shiftplan.services.carryover_service import CarryoverService
from shiftplan.services.carryover_update_service import CarryoverUpdateService
from shiftplan.services.clock import ClockService
from shiftplan.services.custom_extra_hours_service import CustomExtraHoursService
from shiftplan.services.extra_hours_service import ExtraHoursService
from shiftplan.services.permission_service import PermissionService
from shiftplan.services.reporting_service import ReportingService
from shiftplan.services.sales_person_service import SalesPersonService
from shiftplan.services.shiftplan_report_service import ShiftplanReportService
from shiftplan.services.special_day_service import SpecialDayService
from shiftplan.services.uuid_service import UuidService
from shiftplan.services.working_hours_service import (
    ShortDayPolicy,
    WorkingHoursService,
)


@dataclass
class Services:
    """All services sharing one set of DAOs."""

    clock: ClockService
    uuid_service: UuidService
    permission_service: PermissionService
    sales_person_service: SalesPersonService
    working_hours_service: WorkingHoursService
    custom_extra_hours_service: CustomExtraHoursService
    extra_hours_service: ExtraHoursService
    special_day_service: SpecialDayService
    shiftplan_report_service: ShiftplanReportService
    carryover_service: CarryoverService
    reporting_service: ReportingService
    carryover_update_service: CarryoverUpdateService
    billing_period_service: BillingPeriodService
    billing_period_report_service: BillingPeriodReportService


def build_services(
    session_factory: SessionFactory,
    clock: ClockService | None = None,
    uuid_service: UuidService | None = None,
    short_day_policy: ShortDayPolicy | None = None,
) -> Services:
    """Create every service on top of SQL DAOs using session_factory."""
    clock = clock or ClockService()
    uuid_service = uuid_service or UuidService()
    short_day_policy = short_day_policy or ShortDayPolicy.from_settings()

    permission_service = PermissionService(session_factory)
    sales_person_service = SalesPersonService(
        SqlSalesPersonDao(session_factory), permission_service, clock, uuid_service
    )
    working_hours_service = WorkingHoursService(
        SqlWorkingHoursDao(session_factory),
        sales_person_service,
        permission_service,
        clock,
        uuid_service,
    )
    custom_extra_hours_service = CustomExtraHoursService(
        SqlCustomExtraHoursDao(session_factory),
        permission_service,
        clock,
        uuid_service,
    )
    extra_hours_service = ExtraHoursService(
        SqlExtraHoursDao(session_factory),
        sales_person_service,
        custom_extra_hours_service,
        permission_service,
        clock,
        uuid_service,
    )
    special_day_service = SpecialDayService(
        SqlSpecialDayDao(session_factory),
        permission_service,
        clock,
        uuid_service,
        country=settings.public_holiday_country,
        subdivision=settings.public_holiday_subdivision,
    )
    shiftplan_report_service = ShiftplanReportService(
        SqlShiftplanReportDao(session_factory)
    )
    carryover_service = CarryoverService(
        SqlCarryoverDao(session_factory), permission_service, clock, uuid_service
    )
    reporting_service = ReportingService(
        sales_person_service,
        working_hours_service,
        extra_hours_service,
        custom_extra_hours_service,
        special_day_service,
        shiftplan_report_service,
        carryover_service,
        permission_service,
        short_day_policy,
    )
    carryover_update_service = CarryoverUpdateService(
        reporting_service, sales_person_service, carryover_service, permission_service
    )
    billing_period_service = BillingPeriodService(
        SqlBillingPeriodDao(session_factory), permission_service, clock, uuid_service
    )
    billing_period_report_service = BillingPeriodReportService(
        billing_period_service,
        reporting_service,
        sales_person_service,
        permission_service,
    )

    return Services(
        clock=clock,
        uuid_service=uuid_service,
        permission_service=permission_service,
        sales_person_service=sales_person_service,
        working_hours_service=working_hours_service,
        custom_extra_hours_service=custom_extra_hours_service,
        extra_hours_service=extra_hours_service,
        special_day_service=special_day_service,
        shiftplan_report_service=shiftplan_report_service,
        carryover_service=carryover_service,
        reporting_service=reporting_service,
        carryover_update_service=carryover_update_service,
        billing_period_service=billing_period_service,
        billing_period_report_service=billing_period_report_service,
    )

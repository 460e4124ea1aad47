# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Computes the figures of a new billing period."""

import logging
import uuid
from collections.abc import Callable
from datetime import date, timedelta

from sqlalchemy.orm import Session

from shiftplan.calendar_week import first_day_in_year, last_day_in_year
from shiftplan.dao.entities import (
    BillingPeriodEntity,
    BillingPeriodSalesPersonEntity,
    BillingPeriodValue,
)
from shiftplan.errors import DateOrderWrongError
from shiftplan.models.enums import BillingPeriodValueType
from shiftplan.services.billing_period_service import BillingPeriodService
from shiftplan.services.permission_service import (
    FULL_AUTHENTICATION,
    HR_PRIVILEGE,
    Authentication,
    PermissionService,
)
from shiftplan.services.reporting_service import EmployeeReport, ReportingService
from shiftplan.services.sales_person_service import SalesPersonService

logger = logging.getLogger(__name__)

VALUE_EXTRACTORS: dict[BillingPeriodValueType, Callable[[EmployeeReport], float]] = {
    BillingPeriodValueType.BALANCE: lambda r: r.balance_hours,
    BillingPeriodValueType.OVERALL: lambda r: r.overall_hours,
    BillingPeriodValueType.EXPECTED_HOURS: lambda r: r.expected_hours,
    BillingPeriodValueType.EXTRA_WORK: lambda r: r.extra_work_hours,
    BillingPeriodValueType.VACATION_HOURS: lambda r: r.vacation_hours,
    BillingPeriodValueType.SICK_LEAVE: lambda r: r.sick_leave_hours,
    BillingPeriodValueType.HOLIDAY: lambda r: r.holiday_hours,
    BillingPeriodValueType.VACATION_DAYS: lambda r: r.vacation_days,
    BillingPeriodValueType.VACATION_ENTITLEMENT: lambda r: r.vacation_entitlement,
}


class BillingPeriodReportService:
    """Builds billing periods from employee reports.

    Every figure is stored over four windows:

    - delta: the period itself, without carryover
    - ytd_from: January 1st of the start year up to the day before the period
    - ytd_to: January 1st of the end year up to the period end
    - full_year: the whole end year

    The year-to-date and full year windows include the carryover.
    """

    def __init__(
        self,
        billing_period_service: BillingPeriodService,
        reporting_service: ReportingService,
        sales_person_service: SalesPersonService,
        permission_service: PermissionService,
    ) -> None:
        self.billing_period_service = billing_period_service
        self.reporting_service = reporting_service
        self.sales_person_service = sales_person_service
        self.permission_service = permission_service

    async def _sales_person_values(
        self,
        sales_person_id: uuid.UUID,
        start_date: date,
        end_date: date,
        tx: Session | None,
    ) -> BillingPeriodSalesPersonEntity:
        report = self.reporting_service.get_report_for_employee_range
        delta = await report(
            sales_person_id, start_date, end_date, False, FULL_AUTHENTICATION, tx
        )
        ytd_from = await report(
            sales_person_id,
            first_day_in_year(start_date.year),
            start_date - timedelta(days=1),
            True,
            FULL_AUTHENTICATION,
            tx,
        )
        ytd_to = await report(
            sales_person_id,
            first_day_in_year(end_date.year),
            end_date,
            True,
            FULL_AUTHENTICATION,
            tx,
        )
        full_year = await report(
            sales_person_id,
            first_day_in_year(end_date.year),
            last_day_in_year(end_date.year),
            True,
            FULL_AUTHENTICATION,
            tx,
        )
        return BillingPeriodSalesPersonEntity(
            sales_person_id=sales_person_id,
            values={
                value_type: BillingPeriodValue(
                    value_delta=extract(delta),
                    value_ytd_from=extract(ytd_from),
                    value_ytd_to=extract(ytd_to),
                    value_full_year=extract(full_year),
                )
                for value_type, extract in VALUE_EXTRACTORS.items()
            },
        )

    async def build_new_billing_period(
        self, end_date: date, auth: Authentication, tx: Session | None = None
    ) -> BillingPeriodEntity:
        """Compute (but do not store) the period following the latest one."""
        await self.permission_service.check_permission(HR_PRIVILEGE, auth, tx)
        service = self.billing_period_service
        latest_end = await service.get_latest_billing_period_end_date(
            FULL_AUTHENTICATION, tx
        )
        if latest_end is not None and end_date <= latest_end:
            raise DateOrderWrongError(latest_end, end_date)
        start_date = await service.next_start_date(tx)
        if end_date < start_date:
            raise DateOrderWrongError(start_date, end_date)

        logger.info(f"Building billing period {start_date} to {end_date}")
        sales_persons = await self.sales_person_service.get_all(
            FULL_AUTHENTICATION, tx
        )
        return BillingPeriodEntity(
            start_date=start_date,
            end_date=end_date,
            sales_persons=[
                await self._sales_person_values(
                    sales_person.id, start_date, end_date, tx
                )
                for sales_person in sales_persons
            ],
        )

    async def build_and_persist_billing_period_report(
        self, end_date: date, auth: Authentication, tx: Session | None = None
    ) -> uuid.UUID:
        """Build the next billing period, store it and return its id."""
        billing_period = await self.build_new_billing_period(end_date, auth, tx)
        created = await self.billing_period_service.create_billing_period(
            billing_period, auth, tx
        )
        return created.id

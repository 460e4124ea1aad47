# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Employee hour reports."""

import asyncio
import logging
import uuid
from dataclasses import dataclass
from datetime import date, timedelta

from sqlalchemy.orm import Session

from shiftplan.calendar_week import (
    CalendarWeek,
    first_day_in_year,
    last_day_in_year,
    weeks_in_year,
)
from shiftplan.dao.entities import (
    SalesPersonEntity,
    ShiftplanReportDay,
    WorkingHoursEntity,
)
from shiftplan.errors import DateOrderWrongError, ForbiddenError, InvalidDateError
from shiftplan.services.carryover_service import CarryoverService
from shiftplan.services.custom_extra_hours_service import CustomExtraHoursService
from shiftplan.services.extra_hours_service import ExtraHoursService
from shiftplan.services.hours_aggregator import (
    CustomExtraHoursTotal,
    GroupedReportHours,
    build_expected_days,
    build_timeline,
    hours_by_month,
    hours_by_week,
    summarize,
)
from shiftplan.services.permission_service import (
    FULL_AUTHENTICATION,
    HR_PRIVILEGE,
    Authentication,
    PermissionService,
)
from shiftplan.services.sales_person_service import SalesPersonService
from shiftplan.services.shiftplan_report_service import ShiftplanReportService
from shiftplan.services.special_day_service import SpecialDayService
from shiftplan.services.working_hours_service import (
    ShortDayPolicy,
    WorkingHoursService,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShortEmployeeReport:
    """Balance of one sales person."""

    sales_person: SalesPersonEntity
    balance_hours: float
    expected_hours: float
    overall_hours: float


@dataclass(frozen=True)
class EmployeeReport:
    """Full report of one sales person over a date window.

    ``balance_hours`` includes ``carryover_hours`` when the window was built
    with carryover; ``overall_hours - expected_hours`` never does.
    """

    sales_person: SalesPersonEntity
    from_date: date
    to_date: date

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

    custom_extra_hours: tuple[CustomExtraHoursTotal, ...]
    by_week: list[GroupedReportHours]
    by_month: list[GroupedReportHours]

    def to_short_report(self) -> ShortEmployeeReport:
        return ShortEmployeeReport(
            sales_person=self.sales_person,
            balance_hours=self.balance_hours,
            expected_hours=self.expected_hours,
            overall_hours=self.overall_hours,
        )


async def _resolved(value):
    return value


def _vacation_entitlement(
    contracts: list[WorkingHoursEntity], from_date: date, to_date: date
) -> float:
    entitlement = 0.0
    if to_date < from_date:
        return entitlement
    for year in range(from_date.year, to_date.year + 1):
        for contract in contracts:
            entitlement += contract.vacation_days_for_year(year)
    return entitlement


class ReportingService:
    """Builds employee reports from contracts, bookings and hours entries.

    All source data for one report is loaded and joined before any
    aggregation starts; a failure in any source aborts the whole report.
    """

    def __init__(
        self,
        sales_person_service: SalesPersonService,
        working_hours_service: WorkingHoursService,
        extra_hours_service: ExtraHoursService,
        custom_extra_hours_service: CustomExtraHoursService,
        special_day_service: SpecialDayService,
        shiftplan_report_service: ShiftplanReportService,
        carryover_service: CarryoverService,
        permission_service: PermissionService,
        short_day_policy: ShortDayPolicy,
    ) -> None:
        self.sales_person_service = sales_person_service
        self.working_hours_service = working_hours_service
        self.extra_hours_service = extra_hours_service
        self.custom_extra_hours_service = custom_extra_hours_service
        self.special_day_service = special_day_service
        self.shiftplan_report_service = shiftplan_report_service
        self.carryover_service = carryover_service
        self.permission_service = permission_service
        self.short_day_policy = short_day_policy

    async def _check_hr_or_self(
        self,
        sales_person_id: uuid.UUID,
        auth: Authentication,
        tx: Session | None,
    ) -> None:
        try:
            await self.permission_service.check_permission(HR_PRIVILEGE, auth, tx)
        except ForbiddenError:
            await self.sales_person_service.verify_user_is_sales_person(
                sales_person_id, auth, tx
            )

    async def _build_report(
        self,
        sales_person: SalesPersonEntity,
        from_date: date,
        to_date: date,
        include_carryover: bool,
        tx: Session | None,
        shiftplan_days: list[ShiftplanReportDay] | None = None,
    ) -> EmployeeReport:
        if to_date < from_date - timedelta(days=1):
            raise DateOrderWrongError(from_date, to_date)
        logger.debug(
            f"Building report for {sales_person.id} from {from_date} to {to_date}"
            f" (carryover: {include_carryover})"
        )

        (
            contracts,
            shiftplan_days,
            extra_hours,
            custom_extra_hours,
            special_days,
            carryover,
        ) = await asyncio.gather(
            self.working_hours_service.find_by_sales_person_id(
                sales_person.id, FULL_AUTHENTICATION, tx
            ),
            self._shiftplan_days(sales_person.id, from_date, to_date, tx)
            if shiftplan_days is None
            else _resolved(shiftplan_days),
            self.extra_hours_service.find_by_sales_person_id_and_range(
                sales_person.id, from_date, to_date, FULL_AUTHENTICATION, tx
            ),
            self.custom_extra_hours_service.get_all(
                FULL_AUTHENTICATION, tx, include_deleted=True
            ),
            self.special_day_service.find_by_range(from_date, to_date, tx),
            self.carryover_service.get_carryover(
                sales_person.id, from_date.year, FULL_AUTHENTICATION, tx
            )
            if include_carryover
            else _resolved(None),
        )

        timeline = build_timeline(
            shiftplan_days,
            extra_hours,
            from_date,
            to_date,
            {definition.id: definition for definition in custom_extra_hours},
        )
        expected_days = build_expected_days(
            contracts, special_days, from_date, to_date, self.short_day_policy
        )
        totals = summarize(timeline, expected_days)

        carryover_hours = carryover.carryover_hours if carryover else 0.0
        vacation_carryover = carryover.vacation if carryover else 0
        vacation_entitlement = (
            _vacation_entitlement(contracts, from_date, to_date) + vacation_carryover
        )

        return EmployeeReport(
            sales_person=sales_person,
            from_date=from_date,
            to_date=to_date,
            balance_hours=totals.balance + carryover_hours,
            overall_hours=totals.overall_hours,
            expected_hours=totals.expected_hours,
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
            vacation_entitlement=vacation_entitlement,
            vacation_carryover=vacation_carryover,
            carryover_hours=carryover_hours,
            custom_extra_hours=totals.custom_extra_hours,
            by_week=hours_by_week(timeline, expected_days, from_date, to_date),
            by_month=hours_by_month(timeline, expected_days, from_date, to_date),
        )

    async def _shiftplan_days(
        self,
        sales_person_id: uuid.UUID,
        from_date: date,
        to_date: date,
        tx: Session | None,
    ):
        if to_date < from_date:
            return []
        return await self.shiftplan_report_service.extract_shiftplan_report(
            sales_person_id,
            CalendarWeek.from_date(from_date),
            CalendarWeek.from_date(to_date),
            tx,
        )

    @staticmethod
    def _until_week_window(year: int, until_week: int) -> tuple[date, date]:
        """Window from January 1st to the Sunday of ``until_week``.

        The last ISO week of the year (and anything above it) ends the window
        on December 31st instead, so the days of that week belonging to the
        next year are left out.
        """
        if until_week < 1:
            raise InvalidDateError(f"Calendar week must be positive: {until_week}")
        if until_week >= weeks_in_year(year):
            return first_day_in_year(year), last_day_in_year(year)
        return first_day_in_year(year), CalendarWeek(year, until_week).sunday

    async def get_reports_for_all_employees(
        self,
        year: int,
        until_week: int,
        auth: Authentication,
        tx: Session | None = None,
    ) -> list[ShortEmployeeReport]:
        """Year-to-date balances of all paid sales persons."""
        await self.permission_service.check_permission(HR_PRIVILEGE, auth, tx)
        from_date, to_date = self._until_week_window(year, until_week)
        sales_persons = await self.sales_person_service.get_all_paid(
            FULL_AUTHENTICATION, tx
        )
        reports = await asyncio.gather(
            *(
                self._build_report(sales_person, from_date, to_date, True, tx)
                for sales_person in sales_persons
            )
        )
        return [report.to_short_report() for report in reports]

    async def get_report_for_employee(
        self,
        sales_person_id: uuid.UUID,
        year: int,
        until_week: int,
        auth: Authentication,
        tx: Session | None = None,
    ) -> EmployeeReport:
        """Year-to-date report up to and including ``until_week``."""
        await self._check_hr_or_self(sales_person_id, auth, tx)
        from_date, to_date = self._until_week_window(year, until_week)
        sales_person = await self.sales_person_service.get(
            sales_person_id, FULL_AUTHENTICATION, tx
        )
        return await self._build_report(sales_person, from_date, to_date, True, tx)

    async def get_report_for_employee_range(
        self,
        sales_person_id: uuid.UUID,
        from_date: date,
        to_date: date,
        include_carryover: bool,
        auth: Authentication,
        tx: Session | None = None,
    ) -> EmployeeReport:
        """Report over [from_date, to_date].

        ``to_date`` may be the day before ``from_date`` for an empty window, in
        which case only the carryover contributes.
        """
        await self._check_hr_or_self(sales_person_id, auth, tx)
        sales_person = await self.sales_person_service.get(
            sales_person_id, FULL_AUTHENTICATION, tx
        )
        return await self._build_report(
            sales_person, from_date, to_date, include_carryover, tx
        )

    async def get_week(
        self,
        year: int,
        week: int,
        auth: Authentication,
        tx: Session | None = None,
    ) -> list[ShortEmployeeReport]:
        """Balances for one week of every sales person with a contract in it."""
        await self.permission_service.check_permission(HR_PRIVILEGE, auth, tx)
        calendar_week = CalendarWeek(year, week)
        contracts = await self.working_hours_service.find_for_week(
            year, week, FULL_AUTHENTICATION, tx
        )
        extract_week = self.shiftplan_report_service.extract_shiftplan_report_for_week
        booked: dict[uuid.UUID, list[ShiftplanReportDay]] = {}
        for day in await extract_week(year, week, tx):
            booked.setdefault(day.sales_person_id, []).append(day)
        sales_persons = {
            sales_person.id: sales_person
            for sales_person in await self.sales_person_service.get_all(
                FULL_AUTHENTICATION, tx
            )
        }

        reports = []
        for sales_person_id in dict.fromkeys(c.sales_person_id for c in contracts):
            sales_person = sales_persons.get(sales_person_id)
            if sales_person is None:
                continue
            report = await self._build_report(
                sales_person,
                calendar_week.monday,
                calendar_week.sunday,
                False,
                tx,
                booked.get(sales_person_id, []),
            )
            reports.append(report.to_short_report())
        return reports

# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Year-end carryover computation."""

import logging
import uuid
from dataclasses import dataclass, field

from sqlalchemy.orm import Session

from shiftplan.calendar_week import first_day_in_year, last_day_in_year
from shiftplan.dao.entities import CarryoverEntity
from shiftplan.errors import ServiceError
from shiftplan.services.carryover_service import CarryoverService
from shiftplan.services.permission_service import (
    FULL_AUTHENTICATION,
    HR_PRIVILEGE,
    Authentication,
    PermissionService,
)
from shiftplan.services.reporting_service import ReportingService
from shiftplan.services.sales_person_service import SalesPersonService

logger = logging.getLogger(__name__)


@dataclass
class CarryoverUpdateResult:
    """Outcome of a run over all sales persons."""

    year: int
    updated: list[uuid.UUID] = field(default_factory=list)
    failed: dict[uuid.UUID, str] = field(default_factory=dict)


class CarryoverUpdateService:
    """Seeds a year's carryover from the full report of the previous year."""

    def __init__(
        self,
        reporting_service: ReportingService,
        sales_person_service: SalesPersonService,
        carryover_service: CarryoverService,
        permission_service: PermissionService,
    ) -> None:
        self.reporting_service = reporting_service
        self.sales_person_service = sales_person_service
        self.carryover_service = carryover_service
        self.permission_service = permission_service

    async def update_carryover(
        self,
        sales_person_id: uuid.UUID,
        year: int,
        auth: Authentication,
        tx: Session | None = None,
    ) -> CarryoverEntity:
        """Store the balance of year - 1 as the carryover into year.

        Hours carry the full balance including the carryover into the previous
        year. Vacation carries the unused entitlement rounded to whole days.
        """
        await self.permission_service.check_permission(HR_PRIVILEGE, auth, tx)
        previous_year = year - 1
        report = await self.reporting_service.get_report_for_employee_range(
            sales_person_id,
            first_day_in_year(previous_year),
            last_day_in_year(previous_year),
            True,
            FULL_AUTHENTICATION,
            tx,
        )
        return await self.carryover_service.set_carryover(
            CarryoverEntity(
                sales_person_id=sales_person_id,
                year=year,
                carryover_hours=report.balance_hours,
                vacation=round(report.vacation_entitlement - report.vacation_days),
            ),
            FULL_AUTHENTICATION,
            tx,
        )

    async def update_carryover_all_employees(
        self, year: int, auth: Authentication, tx: Session | None = None
    ) -> CarryoverUpdateResult:
        """Update every active sales person.

        A failing sales person is logged and skipped; the others are still
        updated. Inside a caller transaction each sales person is written in
        its own savepoint, so a failure discards only that person's writes.
        """
        await self.permission_service.check_permission(HR_PRIVILEGE, auth, tx)
        result = CarryoverUpdateResult(year=year)
        for sales_person in await self.sales_person_service.get_all(
            FULL_AUTHENTICATION, tx
        ):
            if sales_person.inactive:
                continue
            try:
                if tx is None:
                    await self.update_carryover(
                        sales_person.id, year, FULL_AUTHENTICATION
                    )
                else:
                    with tx.begin_nested():
                        await self.update_carryover(
                            sales_person.id, year, FULL_AUTHENTICATION, tx
                        )
                result.updated.append(sales_person.id)
            except ServiceError as e:
                logger.error(
                    f"Carryover update for {sales_person.name} "
                    f"({sales_person.id}) into {year} failed: {e}"
                )
                result.failed[sales_person.id] = str(e)

        logger.info(
            f"Carryover into {year}: {len(result.updated)} updated, "
            f"{len(result.failed)} failed"
        )
        return result

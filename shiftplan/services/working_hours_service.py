# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Working hours contracts and the expected hours they imply.

The module level functions are pure and resolve which contract applies to a
week and how many hours a single day is expected to contribute.
"""

import logging
import uuid
from collections.abc import Iterable
from dataclasses import dataclass, replace
from datetime import date, time

from sqlalchemy.orm import Session

from shiftplan.calendar_week import CalendarWeek, DayOfWeek
from shiftplan.config import settings
from shiftplan.dao.entities import SpecialDayEntity, WorkingHoursEntity
from shiftplan.dao.interfaces import WorkingHoursDao
from shiftplan.errors import (
    DateOrderWrongError,
    EntityConflictsError,
    EntityNotFoundError,
    ForbiddenError,
    IdSetOnCreateError,
    InvalidWorkdaysError,
    VersionSetOnCreateError,
)
from shiftplan.models.enums import SpecialDayType
from shiftplan.services.clock import ClockService
from shiftplan.services.permission_service import (
    FULL_AUTHENTICATION,
    HR_PRIVILEGE,
    SHIFTPLANNER_PRIVILEGE,
    Authentication,
    PermissionService,
)
from shiftplan.services.sales_person_service import SalesPersonService
from shiftplan.services.uuid_service import UuidService

logger = logging.getLogger(__name__)


def _minutes(t: time) -> float:
    return t.hour * 60 + t.minute + t.second / 60.0


@dataclass(frozen=True)
class ShortDayPolicy:
    """Scales expected hours on short days.

    A short day ending at cutoff keeps the share of the regular working
    day [day_start, day_end] that lies before the cutoff.
    """

    day_start: time
    day_end: time

    @classmethod
    def from_settings(cls) -> "ShortDayPolicy":
        return cls(settings.short_day_start, settings.short_day_end)

    def factor(self, cutoff: time | None) -> float:
        """Fraction of the regular day still expected, within [0, 1]."""
        if cutoff is None:
            return 1.0
        span = _minutes(self.day_end) - _minutes(self.day_start)
        if span <= 0:
            return 1.0
        worked = _minutes(cutoff) - _minutes(self.day_start)
        return min(max(worked / span, 0.0), 1.0)


def find_contracts_for_week(
    contracts: Iterable[WorkingHoursEntity], year: int, week: int
) -> list[WorkingHoursEntity]:
    """All non-deleted contracts whose bounds contain (year, week)."""
    return [
        contract
        for contract in contracts
        if contract.deleted is None and contract.covers_week(year, week)
    ]


def find_contract_for_week(
    contracts: Iterable[WorkingHoursEntity], year: int, week: int
) -> WorkingHoursEntity | None:
    """The contract applying to (year, week).

    Overlapping contracts resolve to the one with the latest start week.
    Equal starts fall back to the later end week, then the contract id.
    """
    matching = find_contracts_for_week(contracts, year, week)
    if not matching:
        return None
    return max(
        matching,
        key=lambda c: (c.from_key, c.to_key, str(c.id) if c.id else ""),
    )


def expected_hours_for_day(
    contract: WorkingHoursEntity | None,
    day: date,
    special_day: SpecialDayEntity | None,
    policy: ShortDayPolicy,
) -> float:
    """Hours the contract expects on day.

    Zero without a contract, on a weekday the contract does not work, and on
    holidays. Short days are scaled by policy.
    """
    if contract is None:
        return 0.0
    if not contract.has_day(DayOfWeek.from_date(day)):
        return 0.0

    hours = contract.hours_per_day
    if special_day is None:
        return hours
    if special_day.day_type == SpecialDayType.HOLIDAY:
        return 0.0
    if special_day.day_type == SpecialDayType.SHORT_DAY:
        return hours * policy.factor(special_day.time_of_day)
    return hours


class WorkingHoursService:
    """Contract management."""

    def __init__(
        self,
        dao: WorkingHoursDao,
        sales_person_service: SalesPersonService,
        permission_service: PermissionService,
        clock: ClockService,
        uuid_service: UuidService,
    ) -> None:
        self.dao = dao
        self.sales_person_service = sales_person_service
        self.permission_service = permission_service
        self.clock = clock
        self.uuid_service = uuid_service

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

    @staticmethod
    def _validate_bounds(contract: WorkingHoursEntity) -> None:
        # Constructing the weeks rejects week numbers the year does not have
        from_week = CalendarWeek(contract.from_year, contract.from_calendar_week)
        to_week = CalendarWeek(contract.to_year, contract.to_calendar_week)
        if from_week > to_week:
            raise DateOrderWrongError(from_week.monday, to_week.sunday)
        weekdays = len(contract.potential_weekdays())
        if contract.workdays_per_week != weekdays:
            raise InvalidWorkdaysError(contract.workdays_per_week, weekdays)

    async def all(
        self, auth: Authentication, tx: Session | None = None
    ) -> list[WorkingHoursEntity]:
        await self.permission_service.check_permission(HR_PRIVILEGE, auth, tx)
        return await self.dao.all(tx)

    async def find_by_sales_person_id(
        self,
        sales_person_id: uuid.UUID,
        auth: Authentication,
        tx: Session | None = None,
    ) -> list[WorkingHoursEntity]:
        await self._check_hr_or_self(sales_person_id, auth, tx)
        return await self.dao.find_by_sales_person_id(sales_person_id, tx)

    async def find_for_week(
        self,
        year: int,
        week: int,
        auth: Authentication,
        tx: Session | None = None,
    ) -> list[WorkingHoursEntity]:
        """Contracts of all sales persons valid in the given week."""
        await self.permission_service.check_any_permission(
            [HR_PRIVILEGE, SHIFTPLANNER_PRIVILEGE], auth, tx
        )
        # Raises InvalidDateError for weeks the year does not have
        CalendarWeek(year, week)
        return await self.dao.find_for_week(year, week, tx)

    async def find_contract(
        self,
        sales_person_id: uuid.UUID,
        year: int,
        week: int,
        auth: Authentication,
        tx: Session | None = None,
    ) -> WorkingHoursEntity | None:
        contracts = await self.find_by_sales_person_id(sales_person_id, auth, tx)
        return find_contract_for_week(contracts, year, week)

    async def create(
        self,
        contract: WorkingHoursEntity,
        auth: Authentication,
        tx: Session | None = None,
    ) -> WorkingHoursEntity:
        await self.permission_service.check_permission(HR_PRIVILEGE, auth, tx)
        if contract.id is not None:
            raise IdSetOnCreateError()
        if contract.version is not None:
            raise VersionSetOnCreateError()
        self._validate_bounds(contract)
        await self.sales_person_service.get(
            contract.sales_person_id, FULL_AUTHENTICATION, tx
        )

        created = replace(
            contract,
            id=self.uuid_service.new_uuid("working-hours-id"),
            version=self.uuid_service.new_uuid("working-hours-version"),
            created=self.clock.now(),
        )
        process = await self.permission_service.current_user_name(auth, tx)
        await self.dao.create(created, process, tx)
        logger.info(
            f"Created contract {created.id} for sales person "
            f"{created.sales_person_id}: {created.expected_hours}h/week"
        )
        return created

    async def update(
        self,
        contract: WorkingHoursEntity,
        auth: Authentication,
        tx: Session | None = None,
    ) -> WorkingHoursEntity:
        await self.permission_service.check_permission(HR_PRIVILEGE, auth, tx)
        current = await self.dao.find_by_id(contract.id, tx)
        if current is None:
            raise EntityNotFoundError(contract.id)
        if current.version != contract.version:
            raise EntityConflictsError(contract.id, contract.version, current.version)
        self._validate_bounds(contract)

        updated = replace(
            contract,
            created=current.created,
            deleted=current.deleted,
            version=self.uuid_service.new_uuid("working-hours-version"),
        )
        process = await self.permission_service.current_user_name(auth, tx)
        await self.dao.update(updated, process, tx)
        return updated

    async def delete(
        self,
        working_hours_id: uuid.UUID,
        auth: Authentication,
        tx: Session | None = None,
    ) -> None:
        await self.permission_service.check_permission(HR_PRIVILEGE, auth, tx)
        current = await self.dao.find_by_id(working_hours_id, tx)
        if current is None:
            raise EntityNotFoundError(working_hours_id)
        deleted = replace(
            current,
            deleted=self.clock.now(),
            version=self.uuid_service.new_uuid("working-hours-version"),
        )
        process = await self.permission_service.current_user_name(auth, tx)
        await self.dao.update(deleted, process, tx)

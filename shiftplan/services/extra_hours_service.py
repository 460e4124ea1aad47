# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Manual hours entries: extra work, absences and custom categories."""

import logging
import uuid
from dataclasses import replace
from datetime import date

from sqlalchemy.orm import Session

from shiftplan.calendar_week import CalendarWeek, first_day_in_year, last_day_in_year
from shiftplan.dao.entities import ExtraHoursEntity
from shiftplan.dao.interfaces import ExtraHoursDao
from shiftplan.errors import (
    EntityConflictsError,
    EntityNotFoundError,
    ForbiddenError,
    IdSetOnCreateError,
    InvalidExtraHoursCategoryError,
    VersionSetOnCreateError,
)
from shiftplan.models.enums import ExtraHoursCategory
from shiftplan.services.clock import ClockService
from shiftplan.services.custom_extra_hours_service import CustomExtraHoursService
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


class ExtraHoursService:
    """CRUD for manual hours entries.

    HR may manage entries of everyone; sales persons may manage their own.
    """

    def __init__(
        self,
        dao: ExtraHoursDao,
        sales_person_service: SalesPersonService,
        custom_extra_hours_service: CustomExtraHoursService,
        permission_service: PermissionService,
        clock: ClockService,
        uuid_service: UuidService,
    ) -> None:
        self.dao = dao
        self.sales_person_service = sales_person_service
        self.custom_extra_hours_service = custom_extra_hours_service
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

    async def _check_category(
        self,
        entry: ExtraHoursEntity,
        current: ExtraHoursEntity | None,
        tx: Session | None,
    ) -> None:
        is_custom = entry.category is ExtraHoursCategory.CUSTOM_EXTRA_HOURS
        if is_custom != (entry.custom_extra_hours_id is not None):
            raise InvalidExtraHoursCategoryError(
                entry.category.value, entry.custom_extra_hours_id
            )
        # Entries keep a definition that was deleted after they were created
        if is_custom and (
            current is None
            or current.custom_extra_hours_id != entry.custom_extra_hours_id
        ):
            await self.custom_extra_hours_service.get(
                entry.custom_extra_hours_id, FULL_AUTHENTICATION, tx
            )

    async def find_by_sales_person_id_and_range(
        self,
        sales_person_id: uuid.UUID,
        from_date: date,
        to_date: date,
        auth: Authentication,
        tx: Session | None = None,
    ) -> list[ExtraHoursEntity]:
        await self._check_hr_or_self(sales_person_id, auth, tx)
        return await self.dao.find_by_sales_person_id_and_range(
            sales_person_id, from_date, to_date, tx
        )

    async def find_by_sales_person_id_and_year(
        self,
        sales_person_id: uuid.UUID,
        year: int,
        auth: Authentication,
        tx: Session | None = None,
    ) -> list[ExtraHoursEntity]:
        return await self.find_by_sales_person_id_and_range(
            sales_person_id,
            first_day_in_year(year),
            last_day_in_year(year),
            auth,
            tx,
        )

    async def find_by_week(
        self,
        year: int,
        week: int,
        auth: Authentication,
        tx: Session | None = None,
    ) -> list[ExtraHoursEntity]:
        await self.permission_service.check_any_permission(
            [HR_PRIVILEGE, SHIFTPLANNER_PRIVILEGE], auth, tx
        )
        calendar_week = CalendarWeek(year, week)
        return await self.dao.find_by_range(
            calendar_week.monday, calendar_week.sunday, tx
        )

    async def create(
        self,
        entry: ExtraHoursEntity,
        auth: Authentication,
        tx: Session | None = None,
    ) -> ExtraHoursEntity:
        await self._check_hr_or_self(entry.sales_person_id, auth, tx)
        if entry.id is not None:
            raise IdSetOnCreateError()
        if entry.version is not None:
            raise VersionSetOnCreateError()
        await self.sales_person_service.get(
            entry.sales_person_id, FULL_AUTHENTICATION, tx
        )
        await self._check_category(entry, None, tx)

        created = replace(
            entry,
            id=self.uuid_service.new_uuid("extra-hours-id"),
            version=self.uuid_service.new_uuid("extra-hours-version"),
            created=self.clock.now(),
        )
        process = await self.permission_service.current_user_name(auth, tx)
        await self.dao.create(created, process, tx)
        logger.info(
            f"Created {created.category.value} entry of {created.amount}h "
            f"for sales person {created.sales_person_id} on {created.date}"
        )
        return created

    async def update(
        self,
        entry: ExtraHoursEntity,
        auth: Authentication,
        tx: Session | None = None,
    ) -> ExtraHoursEntity:
        current = await self.dao.find_by_id(entry.id, tx)
        if current is None:
            raise EntityNotFoundError(entry.id)
        await self._check_hr_or_self(current.sales_person_id, auth, tx)
        if current.version != entry.version:
            raise EntityConflictsError(entry.id, entry.version, current.version)
        if current.sales_person_id != entry.sales_person_id:
            raise ForbiddenError()
        await self._check_category(entry, current, tx)

        updated = replace(
            entry,
            created=current.created,
            deleted=current.deleted,
            version=self.uuid_service.new_uuid("extra-hours-version"),
        )
        process = await self.permission_service.current_user_name(auth, tx)
        await self.dao.update(updated, process, tx)
        return updated

    async def delete(
        self,
        extra_hours_id: uuid.UUID,
        auth: Authentication,
        tx: Session | None = None,
    ) -> None:
        current = await self.dao.find_by_id(extra_hours_id, tx)
        if current is None:
            raise EntityNotFoundError(extra_hours_id)
        await self._check_hr_or_self(current.sales_person_id, auth, tx)
        deleted = replace(
            current,
            deleted=self.clock.now(),
            version=self.uuid_service.new_uuid("extra-hours-version"),
        )
        process = await self.permission_service.current_user_name(auth, tx)
        await self.dao.update(deleted, process, tx)

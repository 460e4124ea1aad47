# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Holidays and short days."""

import logging
import uuid
from dataclasses import replace
from datetime import date

import holidays
from sqlalchemy.orm import Session

from shiftplan.calendar_week import calendar_week_to_date, date_to_calendar_week
from shiftplan.dao.entities import SpecialDayEntity
from shiftplan.dao.interfaces import SpecialDayDao
from shiftplan.errors import (
    EntityNotFoundError,
    IdSetOnCreateError,
    VersionSetOnCreateError,
)
from shiftplan.models.enums import SpecialDayType
from shiftplan.services.clock import ClockService
from shiftplan.services.permission_service import (
    SHIFTPLANNER_PRIVILEGE,
    Authentication,
    PermissionService,
)
from shiftplan.services.uuid_service import UuidService

logger = logging.getLogger(__name__)


class SpecialDayService:
    """Special day management.

    Reads are open to every caller; writes need the shiftplanner privilege.
    """

    def __init__(
        self,
        dao: SpecialDayDao,
        permission_service: PermissionService,
        clock: ClockService,
        uuid_service: UuidService,
        country: str = "DE",
        subdivision: str | None = None,
    ) -> None:
        self.dao = dao
        self.permission_service = permission_service
        self.clock = clock
        self.uuid_service = uuid_service
        self.country = country
        self.subdivision = subdivision

    async def find_by_week(
        self, year: int, week: int, tx: Session | None = None
    ) -> list[SpecialDayEntity]:
        return await self.dao.find_by_week(year, week, tx)

    async def find_by_range(
        self, from_date: date, to_date: date, tx: Session | None = None
    ) -> list[SpecialDayEntity]:
        """Special days dated within [from_date, to_date], ordered by date."""
        if to_date < from_date:
            return []
        from_year = date_to_calendar_week(from_date).year
        to_year = date_to_calendar_week(to_date).year
        candidates = await self.dao.find_by_years(from_year, to_year, tx)
        return sorted(
            (day for day in candidates if from_date <= day.date <= to_date),
            key=lambda day: day.date,
        )

    async def create(
        self,
        special_day: SpecialDayEntity,
        auth: Authentication,
        tx: Session | None = None,
    ) -> SpecialDayEntity:
        await self.permission_service.check_permission(
            SHIFTPLANNER_PRIVILEGE, auth, tx
        )
        if special_day.id is not None:
            raise IdSetOnCreateError()
        if special_day.version is not None:
            raise VersionSetOnCreateError()
        # Raises InvalidDateError for weeks the year does not have
        calendar_week_to_date(
            special_day.year, special_day.calendar_week, special_day.day_of_week
        )

        created = replace(
            special_day,
            id=self.uuid_service.new_uuid("special-day-id"),
            version=self.uuid_service.new_uuid("special-day-version"),
            created=self.clock.now(),
        )
        process = await self.permission_service.current_user_name(auth, tx)
        await self.dao.create(created, process, tx)
        return created

    async def delete(
        self,
        special_day_id: uuid.UUID,
        auth: Authentication,
        tx: Session | None = None,
    ) -> None:
        await self.permission_service.check_permission(
            SHIFTPLANNER_PRIVILEGE, auth, tx
        )
        current = await self.dao.find_by_id(special_day_id, tx)
        if current is None:
            raise EntityNotFoundError(special_day_id)
        deleted = replace(
            current,
            deleted=self.clock.now(),
            version=self.uuid_service.new_uuid("special-day-version"),
        )
        process = await self.permission_service.current_user_name(auth, tx)
        await self.dao.update(deleted, process, tx)

    def get_public_holidays(self, year: int) -> dict[date, str]:
        """Public holidays of the configured country and subdivision."""
        country_holidays = holidays.country_holidays(
            self.country, subdiv=self.subdivision, years=year
        )
        return dict(sorted(country_holidays.items()))

    async def import_public_holidays(
        self, year: int, auth: Authentication, tx: Session | None = None
    ) -> list[SpecialDayEntity]:
        """Create holiday markers for the public holidays of year.

        Dates that already carry a special day are skipped.
        """
        await self.permission_service.check_permission(
            SHIFTPLANNER_PRIVILEGE, auth, tx
        )
        existing = {
            day.date for day in await self.dao.find_by_years(year - 1, year + 1, tx)
        }

        created = []
        for holiday_date, name in self.get_public_holidays(year).items():
            if holiday_date in existing:
                continue
            iso = date_to_calendar_week(holiday_date)
            created.append(
                await self.create(
                    SpecialDayEntity(
                        year=iso.year,
                        calendar_week=iso.week,
                        day_of_week=iso.day_of_week,
                        day_type=SpecialDayType.HOLIDAY,
                        name=name,
                    ),
                    auth,
                    tx,
                )
            )
        logger.info(
            f"Imported {len(created)} public holidays for {self.country} {year}"
        )
        return created

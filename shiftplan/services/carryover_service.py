# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Yearly carryover ledger."""

import uuid
from dataclasses import replace

from sqlalchemy.orm import Session

from shiftplan.dao.entities import CarryoverEntity
from shiftplan.dao.interfaces import CarryoverDao
from shiftplan.services.clock import ClockService
from shiftplan.services.permission_service import (
    HR_PRIVILEGE,
    Authentication,
    PermissionService,
)
from shiftplan.services.uuid_service import UuidService


class CarryoverService:
    """Reads and writes the balance carried into a year.

    Writes replace any previous value for the same (sales person, year); there
    is no version check.
    """

    def __init__(
        self,
        dao: CarryoverDao,
        permission_service: PermissionService,
        clock: ClockService,
        uuid_service: UuidService,
    ) -> None:
        self.dao = dao
        self.permission_service = permission_service
        self.clock = clock
        self.uuid_service = uuid_service

    async def get_carryover(
        self,
        sales_person_id: uuid.UUID,
        year: int,
        auth: Authentication,
        tx: Session | None = None,
    ) -> CarryoverEntity | None:
        await self.permission_service.check_permission(HR_PRIVILEGE, auth, tx)
        return await self.dao.find_by_sales_person_id_and_year(
            sales_person_id, year, tx
        )

    async def set_carryover(
        self,
        carryover: CarryoverEntity,
        auth: Authentication,
        tx: Session | None = None,
    ) -> CarryoverEntity:
        await self.permission_service.check_permission(HR_PRIVILEGE, auth, tx)
        stored = replace(
            carryover,
            created=self.clock.now(),
            deleted=None,
            version=self.uuid_service.new_uuid("carryover-version"),
        )
        process = await self.permission_service.current_user_name(auth, tx)
        await self.dao.upsert(stored, process, tx)
        return stored

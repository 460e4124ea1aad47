# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Sales person management."""

import logging
import uuid
from dataclasses import replace

from sqlalchemy.orm import Session

from shiftplan.dao.entities import SalesPersonEntity
from shiftplan.dao.interfaces import SalesPersonDao
from shiftplan.errors import (
    EntityConflictsError,
    EntityNotFoundError,
    ForbiddenError,
    IdSetOnCreateError,
    VersionSetOnCreateError,
)
from shiftplan.services.clock import ClockService
from shiftplan.services.permission_service import (
    HR_PRIVILEGE,
    SALES_PRIVILEGE,
    SHIFTPLANNER_PRIVILEGE,
    Authentication,
    PermissionService,
)
from shiftplan.services.uuid_service import UuidService

logger = logging.getLogger(__name__)


class SalesPersonService:
    """CRUD for sales persons plus the "is this me" check."""

    def __init__(
        self,
        dao: SalesPersonDao,
        permission_service: PermissionService,
        clock: ClockService,
        uuid_service: UuidService,
    ) -> None:
        self.dao = dao
        self.permission_service = permission_service
        self.clock = clock
        self.uuid_service = uuid_service

    async def get_all(
        self, auth: Authentication, tx: Session | None = None
    ) -> list[SalesPersonEntity]:
        await self.permission_service.check_any_permission(
            [HR_PRIVILEGE, SHIFTPLANNER_PRIVILEGE, SALES_PRIVILEGE], auth, tx
        )
        return await self.dao.all(tx)

    async def get_all_paid(
        self, auth: Authentication, tx: Session | None = None
    ) -> list[SalesPersonEntity]:
        return [sp for sp in await self.get_all(auth, tx) if sp.is_paid]

    async def get(
        self,
        sales_person_id: uuid.UUID,
        auth: Authentication,
        tx: Session | None = None,
    ) -> SalesPersonEntity:
        await self.permission_service.check_any_permission(
            [HR_PRIVILEGE, SHIFTPLANNER_PRIVILEGE, SALES_PRIVILEGE], auth, tx
        )
        sales_person = await self.dao.find_by_id(sales_person_id, tx)
        if sales_person is None:
            raise EntityNotFoundError(sales_person_id)
        return sales_person

    async def get_for_user(
        self, user_id: uuid.UUID, tx: Session | None = None
    ) -> SalesPersonEntity | None:
        return await self.dao.find_by_user_id(user_id, tx)

    async def verify_user_is_sales_person(
        self,
        sales_person_id: uuid.UUID,
        auth: Authentication,
        tx: Session | None = None,
    ) -> None:
        """Raise ForbiddenError unless the caller is linked to this sales person."""
        if auth.full:
            return
        if auth.user_id is not None:
            sales_person = await self.dao.find_by_user_id(auth.user_id, tx)
            if sales_person is not None and sales_person.id == sales_person_id:
                return
        raise ForbiddenError()

    async def create(
        self,
        sales_person: SalesPersonEntity,
        auth: Authentication,
        tx: Session | None = None,
    ) -> SalesPersonEntity:
        await self.permission_service.check_permission(HR_PRIVILEGE, auth, tx)
        if sales_person.id is not None:
            raise IdSetOnCreateError()
        if sales_person.version is not None:
            raise VersionSetOnCreateError()

        created = replace(
            sales_person,
            id=self.uuid_service.new_uuid("sales-person-id"),
            version=self.uuid_service.new_uuid("sales-person-version"),
            created=self.clock.now(),
        )
        process = await self.permission_service.current_user_name(auth, tx)
        await self.dao.create(created, process, tx)
        logger.info(f"Created sales person {created.id} ({created.name})")
        return created

    async def update(
        self,
        sales_person: SalesPersonEntity,
        auth: Authentication,
        tx: Session | None = None,
    ) -> SalesPersonEntity:
        await self.permission_service.check_permission(HR_PRIVILEGE, auth, tx)
        current = await self.dao.find_by_id(sales_person.id, tx)
        if current is None:
            raise EntityNotFoundError(sales_person.id)
        if current.version != sales_person.version:
            raise EntityConflictsError(
                sales_person.id, sales_person.version, current.version
            )

        updated = replace(
            sales_person,
            created=current.created,
            deleted=current.deleted,
            version=self.uuid_service.new_uuid("sales-person-version"),
        )
        process = await self.permission_service.current_user_name(auth, tx)
        await self.dao.update(updated, process, tx)
        return updated

    async def delete(
        self,
        sales_person_id: uuid.UUID,
        auth: Authentication,
        tx: Session | None = None,
    ) -> None:
        await self.permission_service.check_permission(HR_PRIVILEGE, auth, tx)
        current = await self.dao.find_by_id(sales_person_id, tx)
        if current is None:
            raise EntityNotFoundError(sales_person_id)
        deleted = replace(
            current,
            deleted=self.clock.now(),
            version=self.uuid_service.new_uuid("sales-person-version"),
        )
        process = await self.permission_service.current_user_name(auth, tx)
        await self.dao.update(deleted, process, tx)
        logger.info(f"Deleted sales person {sales_person_id}")

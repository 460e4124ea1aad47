# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User defined categories for manual hours entries."""

import logging
import uuid
from dataclasses import replace

from sqlalchemy.orm import Session

from shiftplan.dao.entities import CustomExtraHoursEntity
from shiftplan.dao.interfaces import CustomExtraHoursDao
from shiftplan.errors import (
    EntityConflictsError,
    EntityNotFoundError,
    IdSetOnCreateError,
    VersionSetOnCreateError,
)
from shiftplan.services.clock import ClockService
from shiftplan.services.permission_service import (
    HR_PRIVILEGE,
    Authentication,
    PermissionService,
)
from shiftplan.services.uuid_service import UuidService

logger = logging.getLogger(__name__)


class CustomExtraHoursService:
    """HR managed custom categories."""

    def __init__(
        self,
        dao: CustomExtraHoursDao,
        permission_service: PermissionService,
        clock: ClockService,
        uuid_service: UuidService,
    ) -> None:
        self.dao = dao
        self.permission_service = permission_service
        self.clock = clock
        self.uuid_service = uuid_service

    async def get_all(
        self,
        auth: Authentication,
        tx: Session | None = None,
        include_deleted: bool = False,
    ) -> list[CustomExtraHoursEntity]:
        """Definitions ordered by name.

        Reports pass include_deleted so entries keep their category after the
        definition was removed.
        """
        await self.permission_service.check_permission(HR_PRIVILEGE, auth, tx)
        return await self.dao.all(include_deleted, tx)

    async def get(
        self,
        custom_extra_hours_id: uuid.UUID,
        auth: Authentication,
        tx: Session | None = None,
    ) -> CustomExtraHoursEntity:
        await self.permission_service.check_permission(HR_PRIVILEGE, auth, tx)
        definition = await self.dao.find_by_id(custom_extra_hours_id, tx)
        if definition is None:
            raise EntityNotFoundError(custom_extra_hours_id)
        return definition

    async def create(
        self,
        definition: CustomExtraHoursEntity,
        auth: Authentication,
        tx: Session | None = None,
    ) -> CustomExtraHoursEntity:
        await self.permission_service.check_permission(HR_PRIVILEGE, auth, tx)
        if definition.id is not None:
            raise IdSetOnCreateError()
        if definition.version is not None:
            raise VersionSetOnCreateError()

        created = replace(
            definition,
            id=self.uuid_service.new_uuid("custom-extra-hours-id"),
            version=self.uuid_service.new_uuid("custom-extra-hours-version"),
            created=self.clock.now(),
        )
        process = await self.permission_service.current_user_name(auth, tx)
        await self.dao.create(created, process, tx)
        logger.info(
            f"Created custom hours category {created.name!r} ({created.id}), "
            f"modifies balance: {created.modifies_balance}"
        )
        return created

    async def update(
        self,
        definition: CustomExtraHoursEntity,
        auth: Authentication,
        tx: Session | None = None,
    ) -> CustomExtraHoursEntity:
        await self.permission_service.check_permission(HR_PRIVILEGE, auth, tx)
        current = await self.dao.find_by_id(definition.id, tx)
        if current is None:
            raise EntityNotFoundError(definition.id)
        if current.version != definition.version:
            raise EntityConflictsError(
                definition.id, definition.version, current.version
            )

        updated = replace(
            definition,
            created=current.created,
            deleted=current.deleted,
            version=self.uuid_service.new_uuid("custom-extra-hours-version"),
        )
        process = await self.permission_service.current_user_name(auth, tx)
        await self.dao.update(updated, process, tx)
        return updated

    async def delete(
        self,
        custom_extra_hours_id: uuid.UUID,
        auth: Authentication,
        tx: Session | None = None,
    ) -> None:
        await self.permission_service.check_permission(HR_PRIVILEGE, auth, tx)
        current = await self.dao.find_by_id(custom_extra_hours_id, tx)
        if current is None:
            raise EntityNotFoundError(custom_extra_hours_id)
        deleted = replace(
            current,
            deleted=self.clock.now(),
            version=self.uuid_service.new_uuid("custom-extra-hours-version"),
        )
        process = await self.permission_service.current_user_name(auth, tx)
        await self.dao.update(deleted, process, tx)

# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for custom_extra_hours_service."""

import uuid
from dataclasses import replace

import pytest

from shiftplan.dao.entities import CustomExtraHoursEntity
from shiftplan.errors import (
    EntityConflictsError,
    EntityNotFoundError,
    ForbiddenError,
    IdSetOnCreateError,
)


class TestCustomExtraHoursService:
    """Tests for HR managed custom categories."""

    @pytest.mark.asyncio
    async def test_create_and_list_by_name(self, services, hr_auth):
        service = services.custom_extra_hours_service
        training = await service.create(
            CustomExtraHoursEntity(name="Training", modifies_balance=True), hr_auth
        )
        await service.create(CustomExtraHoursEntity(name="Oncall"), hr_auth)

        assert training.id is not None
        assert training.version is not None
        assert training.created is not None
        listed = await service.get_all(hr_auth)
        assert [d.name for d in listed] == ["Oncall", "Training"]
        assert (await service.get(training.id, hr_auth)).modifies_balance

    @pytest.mark.asyncio
    async def test_requires_hr(self, services, sales_auth):
        service = services.custom_extra_hours_service
        with pytest.raises(ForbiddenError):
            await service.create(CustomExtraHoursEntity(name="Oncall"), sales_auth)
        with pytest.raises(ForbiddenError):
            await service.get_all(sales_auth)

    @pytest.mark.asyncio
    async def test_create_rejects_id(self, services, hr_auth):
        with pytest.raises(IdSetOnCreateError):
            await services.custom_extra_hours_service.create(
                CustomExtraHoursEntity(name="Oncall", id=uuid.uuid4()), hr_auth
            )

    @pytest.mark.asyncio
    async def test_update_with_stale_version(self, services, hr_auth):
        service = services.custom_extra_hours_service
        created = await service.create(CustomExtraHoursEntity(name="Oncall"), hr_auth)
        updated = await service.update(replace(created, name="On call"), hr_auth)

        assert updated.version != created.version
        assert (await service.get(created.id, hr_auth)).name == "On call"
        with pytest.raises(EntityConflictsError):
            await service.update(replace(created, name="Standby"), hr_auth)

    @pytest.mark.asyncio
    async def test_deleted_definitions_only_listed_on_request(
        self, services, hr_auth
    ):
        service = services.custom_extra_hours_service
        created = await service.create(CustomExtraHoursEntity(name="Oncall"), hr_auth)

        await service.delete(created.id, hr_auth)

        assert await service.get_all(hr_auth) == []
        kept = await service.get_all(hr_auth, include_deleted=True)
        assert [d.id for d in kept] == [created.id]
        assert kept[0].deleted is not None

    @pytest.mark.asyncio
    async def test_get_unknown(self, services, hr_auth):
        with pytest.raises(EntityNotFoundError):
            await services.custom_extra_hours_service.get(uuid.uuid4(), hr_auth)

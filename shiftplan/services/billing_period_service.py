# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Billing period storage and sequencing rules."""

import logging
import uuid
from dataclasses import replace
from datetime import date, timedelta

from sqlalchemy.orm import Session

from shiftplan.dao.entities import BillingPeriodEntity
from shiftplan.dao.interfaces import BillingPeriodDao
from shiftplan.errors import (
    DateOrderWrongError,
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

# Start of the very first billing period
FIRST_BILLING_PERIOD_START = date(2020, 1, 1)


class BillingPeriodService:
    """Billing periods are sequential and immutable once created.

    Each period starts the day after the previous one ended. The only way
    back is clearing all periods.
    """

    def __init__(
        self,
        dao: BillingPeriodDao,
        permission_service: PermissionService,
        clock: ClockService,
        uuid_service: UuidService,
    ) -> None:
        self.dao = dao
        self.permission_service = permission_service
        self.clock = clock
        self.uuid_service = uuid_service

    async def get_billing_period_overview(
        self, auth: Authentication, tx: Session | None = None
    ) -> list[BillingPeriodEntity]:
        """All periods without their per sales person figures."""
        await self.permission_service.check_permission(HR_PRIVILEGE, auth, tx)
        return await self.dao.all(tx)

    async def get_billing_period_by_id(
        self,
        billing_period_id: uuid.UUID,
        auth: Authentication,
        tx: Session | None = None,
    ) -> BillingPeriodEntity:
        await self.permission_service.check_permission(HR_PRIVILEGE, auth, tx)
        billing_period = await self.dao.find_by_id(billing_period_id, tx)
        if billing_period is None:
            raise EntityNotFoundError(billing_period_id)
        return billing_period

    async def get_latest_billing_period_end_date(
        self, auth: Authentication, tx: Session | None = None
    ) -> date | None:
        await self.permission_service.check_permission(HR_PRIVILEGE, auth, tx)
        return await self.dao.find_latest_end_date(tx)

    async def next_start_date(self, tx: Session | None = None) -> date:
        latest_end = await self.dao.find_latest_end_date(tx)
        if latest_end is None:
            return FIRST_BILLING_PERIOD_START
        return latest_end + timedelta(days=1)

    async def create_billing_period(
        self,
        billing_period: BillingPeriodEntity,
        auth: Authentication,
        tx: Session | None = None,
    ) -> BillingPeriodEntity:
        await self.permission_service.check_permission(HR_PRIVILEGE, auth, tx)
        if billing_period.id is not None:
            raise IdSetOnCreateError()
        if billing_period.version is not None:
            raise VersionSetOnCreateError()

        expected_start = await self.next_start_date(tx)
        if billing_period.start_date != expected_start:
            raise DateOrderWrongError(expected_start, billing_period.start_date)
        if billing_period.end_date < billing_period.start_date:
            raise DateOrderWrongError(
                billing_period.start_date, billing_period.end_date
            )

        process = await self.permission_service.current_user_name(auth, tx)
        created = replace(
            billing_period,
            id=self.uuid_service.new_uuid("billing-period-id"),
            version=self.uuid_service.new_uuid("billing-period-version"),
            created=self.clock.now(),
            created_by=process,
        )
        await self.dao.create(created, process, tx)
        logger.info(
            f"Created billing period {created.id}: "
            f"{created.start_date} to {created.end_date}"
        )
        return created

    async def clear_all_billing_periods(
        self, auth: Authentication, tx: Session | None = None
    ) -> None:
        """Soft delete every billing period."""
        await self.permission_service.check_permission(HR_PRIVILEGE, auth, tx)
        process = await self.permission_service.current_user_name(auth, tx)
        await self.dao.delete_all(self.clock.now(), process, tx)
        logger.warning(f"All billing periods cleared by {process}")

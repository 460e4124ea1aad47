# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Periodic background jobs."""

import asyncio
import logging
from contextlib import suppress

from shiftplan.services.carryover_update_service import (
    CarryoverUpdateResult,
    CarryoverUpdateService,
)
from shiftplan.services.clock import ClockService
from shiftplan.services.permission_service import FULL_AUTHENTICATION

logger = logging.getLogger(__name__)


class CarryoverScheduler:
    """Re-runs the carryover update for the current year at a fixed interval."""

    def __init__(
        self,
        carryover_update_service: CarryoverUpdateService,
        clock: ClockService,
        interval_seconds: float,
    ) -> None:
        self.carryover_update_service = carryover_update_service
        self.clock = clock
        self.interval_seconds = interval_seconds
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def run_once(self) -> CarryoverUpdateResult:
        year = self.clock.today().year
        logger.info(f"Running carryover update into {year}")
        return await self.carryover_update_service.update_carryover_all_employees(
            year, FULL_AUTHENTICATION
        )

    async def _loop(self) -> None:
        while True:
            try:
                await self.run_once()
            except Exception as e:
                logger.error(f"Carryover update run failed: {e}")
            await asyncio.sleep(self.interval_seconds)

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.create_task(self._loop())
        logger.info(
            f"Carryover scheduler started (every {self.interval_seconds} seconds)"
        )

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        with suppress(asyncio.CancelledError):
            await self._task
        self._task = None
        logger.info("Carryover scheduler stopped")

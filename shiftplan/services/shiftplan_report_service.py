# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Booked shift hours per sales person and day."""

import uuid

from sqlalchemy.orm import Session

from shiftplan.calendar_week import CalendarWeek
from shiftplan.dao.entities import ShiftplanReportDay
from shiftplan.dao.interfaces import ShiftplanReportDao


class ShiftplanReportService:
    """Read side of the shift plan used by the reports."""

    def __init__(self, dao: ShiftplanReportDao) -> None:
        self.dao = dao

    async def extract_shiftplan_report(
        self,
        sales_person_id: uuid.UUID,
        from_week: CalendarWeek,
        to_week: CalendarWeek,
        tx: Session | None = None,
    ) -> list[ShiftplanReportDay]:
        """Booked hours of one sales person for weeks [from_week, to_week]."""
        if to_week < from_week:
            return []
        return await self.dao.extract_shiftplan_report(
            sales_person_id, from_week, to_week, tx
        )

    async def extract_shiftplan_report_for_week(
        self, year: int, week: int, tx: Session | None = None
    ) -> list[ShiftplanReportDay]:
        """Booked hours of every sales person in one week."""
        CalendarWeek(year, week)
        return await self.dao.extract_shiftplan_report_for_week(year, week, tx)

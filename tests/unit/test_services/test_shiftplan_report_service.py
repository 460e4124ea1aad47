# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for shiftplan_report_service."""

from datetime import date, time

import pytest

from shiftplan.calendar_week import CalendarWeek, DayOfWeek
from shiftplan.errors import InvalidDateError


class TestExtractShiftplanReport:
    """Tests for booked hours of one sales person."""

    @pytest.mark.asyncio
    async def test_sums_bookings_per_day(
        self, services, create_sales_person, create_booking
    ):
        alice = create_sales_person("Alice")
        create_booking(alice.id, 2024, 3, DayOfWeek.MONDAY)
        create_booking(
            alice.id, 2024, 3, DayOfWeek.MONDAY, time(16, 0), time(18, 30)
        )
        create_booking(alice.id, 2024, 5, DayOfWeek.FRIDAY)

        days = await services.shiftplan_report_service.extract_shiftplan_report(
            alice.id, CalendarWeek(2024, 3), CalendarWeek(2024, 4)
        )

        assert len(days) == 1
        assert days[0].hours == 10.5
        assert days[0].to_date() == date(2024, 1, 15)

    @pytest.mark.asyncio
    async def test_inverted_weeks_are_empty(
        self, services, create_sales_person, create_booking
    ):
        alice = create_sales_person("Alice")
        create_booking(alice.id, 2024, 3, DayOfWeek.MONDAY)

        assert (
            await services.shiftplan_report_service.extract_shiftplan_report(
                alice.id, CalendarWeek(2024, 4), CalendarWeek(2024, 3)
            )
            == []
        )


class TestExtractShiftplanReportForWeek:
    """Tests for booked hours of every sales person in one week."""

    @pytest.mark.asyncio
    async def test_covers_all_sales_persons(
        self, services, create_sales_person, create_booking
    ):
        alice = create_sales_person("Alice")
        bob = create_sales_person("Bob")
        create_booking(alice.id, 2024, 3, DayOfWeek.MONDAY)
        create_booking(bob.id, 2024, 3, DayOfWeek.TUESDAY)
        create_booking(bob.id, 2024, 4, DayOfWeek.TUESDAY)

        service = services.shiftplan_report_service
        days = await service.extract_shiftplan_report_for_week(2024, 3)

        assert {(d.sales_person_id, d.day_of_week, d.hours) for d in days} == {
            (alice.id, DayOfWeek.MONDAY, 8.0),
            (bob.id, DayOfWeek.TUESDAY, 8.0),
        }

    @pytest.mark.asyncio
    async def test_rejects_missing_week(self, services):
        with pytest.raises(InvalidDateError):
            await services.shiftplan_report_service.extract_shiftplan_report_for_week(
                2023, 53
            )

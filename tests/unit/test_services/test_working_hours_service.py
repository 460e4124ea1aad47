# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for working_hours_service."""

import uuid
from dataclasses import replace
from datetime import date, time

import pytest

from shiftplan.calendar_week import DayOfWeek
from shiftplan.dao.entities import SpecialDayEntity, WorkingHoursEntity
from shiftplan.errors import (
    DateOrderWrongError,
    EntityConflictsError,
    EntityNotFoundError,
    ForbiddenError,
    IdSetOnCreateError,
    InvalidDateError,
    InvalidWorkdaysError,
)
from shiftplan.models.enums import SpecialDayType
from shiftplan.services.working_hours_service import (
    ShortDayPolicy,
    expected_hours_for_day,
    find_contract_for_week,
)

SALES_PERSON_ID = uuid.uuid4()


def contract(**kwargs) -> WorkingHoursEntity:
    values = {
        "sales_person_id": SALES_PERSON_ID,
        "expected_hours": 40.0,
        "from_year": 2024,
        "from_calendar_week": 1,
        "to_year": 2024,
        "to_calendar_week": 52,
        "workdays_per_week": 5,
    }
    values.update(kwargs)
    return WorkingHoursEntity(**values)


class TestShortDayPolicy:
    """Tests for ShortDayPolicy."""

    def test_factor_is_share_of_regular_day(self):
        policy = ShortDayPolicy(time(8, 0), time(16, 0))
        assert policy.factor(time(12, 0)) == 0.5
        assert policy.factor(time(10, 0)) == 0.25

    def test_factor_is_clamped(self):
        policy = ShortDayPolicy(time(8, 0), time(16, 0))
        assert policy.factor(time(6, 0)) == 0.0
        assert policy.factor(time(18, 0)) == 1.0

    def test_no_cutoff_is_full_day(self):
        assert ShortDayPolicy(time(8, 0), time(16, 0)).factor(None) == 1.0


class TestFindContractForWeek:
    """Tests for find_contract_for_week."""

    def test_none_outside_bounds(self):
        assert find_contract_for_week([contract()], 2025, 1) is None

    def test_latest_start_wins(self):
        older = contract(id=uuid.uuid4())
        newer = contract(id=uuid.uuid4(), from_calendar_week=10, expected_hours=20.0)
        assert find_contract_for_week([newer, older], 2024, 5) is older
        assert find_contract_for_week([older, newer], 2024, 12) is newer

    def test_ignores_deleted(self):
        deleted = contract(from_calendar_week=10, deleted=date(2024, 1, 1))
        active = contract()
        assert find_contract_for_week([deleted, active], 2024, 12) is active

    def test_bounds_across_years(self):
        spanning = contract(from_year=2020, from_calendar_week=53, to_year=2021)
        assert find_contract_for_week([spanning], 2020, 53) is spanning
        assert find_contract_for_week([spanning], 2020, 52) is None


class TestExpectedHoursForDay:
    """Tests for expected_hours_for_day."""

    policy = ShortDayPolicy(time(8, 0), time(16, 0))

    def test_workday(self):
        hours = expected_hours_for_day(contract(), date(2024, 1, 2), None, self.policy)
        assert hours == 8.0

    def test_day_off(self):
        part_time = contract(friday=False, workdays_per_week=4, expected_hours=32.0)
        hours = expected_hours_for_day(part_time, date(2024, 1, 5), None, self.policy)
        assert hours == 0.0

    def test_holiday(self):
        holiday = SpecialDayEntity(
            year=2024,
            calendar_week=1,
            day_of_week=DayOfWeek.TUESDAY,
            day_type=SpecialDayType.HOLIDAY,
        )
        assert (
            expected_hours_for_day(contract(), date(2024, 1, 2), holiday, self.policy)
            == 0.0
        )

    def test_without_contract(self):
        hours = expected_hours_for_day(None, date(2024, 1, 2), None, self.policy)
        assert hours == 0.0


class TestVacationDaysForYear:
    """Tests for the pro rata vacation entitlement."""

    def test_full_year(self):
        ongoing = contract(vacation_days=25, to_year=2025, to_calendar_week=10)
        assert ongoing.vacation_days_for_year(2024) == 25.0

    def test_ending_before_new_year(self):
        # Week 52 of 2024 ends on December 29th, day 364 of 366
        ending = contract(vacation_days=25)
        assert ending.vacation_days_for_year(2024) == pytest.approx(25 - 25 * 2 / 366)

    def test_outside_contract(self):
        assert contract(vacation_days=25).vacation_days_for_year(2023) == 0.0

    def test_starting_mid_year(self):
        # Week 27 of 2024 starts on July 1st, day 183 of 366
        mid_year = contract(
            vacation_days=30, from_calendar_week=27, to_year=2025, to_calendar_week=10
        )
        assert mid_year.vacation_days_for_year(2024) == pytest.approx(
            30 - 30 * 182 / 366
        )


class TestWorkingHoursService:
    """Tests for contract management."""

    @pytest.mark.asyncio
    async def test_create_and_find(self, services, hr_auth, create_sales_person):
        sales_person = create_sales_person()

        created = await services.working_hours_service.create(
            contract(sales_person_id=sales_person.id), hr_auth
        )

        assert created.id is not None
        assert created.version is not None
        found = await services.working_hours_service.find_contract(
            sales_person.id, 2024, 10, hr_auth
        )
        assert found.id == created.id

    @pytest.mark.asyncio
    async def test_create_rejects_id(self, services, hr_auth, create_sales_person):
        sales_person = create_sales_person()
        with pytest.raises(IdSetOnCreateError):
            await services.working_hours_service.create(
                contract(sales_person_id=sales_person.id, id=uuid.uuid4()), hr_auth
            )

    @pytest.mark.asyncio
    async def test_create_rejects_inverted_bounds(
        self, services, hr_auth, create_sales_person
    ):
        sales_person = create_sales_person()
        with pytest.raises(DateOrderWrongError):
            await services.working_hours_service.create(
                contract(
                    sales_person_id=sales_person.id,
                    from_calendar_week=20,
                    to_calendar_week=10,
                ),
                hr_auth,
            )

    @pytest.mark.asyncio
    async def test_create_rejects_missing_week(
        self, services, hr_auth, create_sales_person
    ):
        sales_person = create_sales_person()
        with pytest.raises(InvalidDateError):
            await services.working_hours_service.create(
                contract(
                    sales_person_id=sales_person.id,
                    to_year=2023,
                    to_calendar_week=53,
                    from_year=2023,
                ),
                hr_auth,
            )

    @pytest.mark.asyncio
    async def test_create_rejects_workdays_not_matching_weekdays(
        self, services, hr_auth, create_sales_person
    ):
        sales_person = create_sales_person()
        with pytest.raises(InvalidWorkdaysError):
            await services.working_hours_service.create(
                contract(sales_person_id=sales_person.id, workdays_per_week=3),
                hr_auth,
            )

    @pytest.mark.asyncio
    async def test_create_part_time_pattern(
        self, services, hr_auth, create_sales_person
    ):
        sales_person = create_sales_person()
        created = await services.working_hours_service.create(
            contract(
                sales_person_id=sales_person.id,
                expected_hours=24.0,
                workdays_per_week=3,
                tuesday=False,
                thursday=False,
            ),
            hr_auth,
        )
        assert created.potential_weekdays() == [
            DayOfWeek.MONDAY,
            DayOfWeek.WEDNESDAY,
            DayOfWeek.FRIDAY,
        ]
        assert created.hours_per_day == 8.0

    @pytest.mark.asyncio
    async def test_update_rejects_workdays_not_matching_weekdays(
        self, services, hr_auth, create_sales_person
    ):
        sales_person = create_sales_person()
        created = await services.working_hours_service.create(
            contract(sales_person_id=sales_person.id), hr_auth
        )
        with pytest.raises(InvalidWorkdaysError):
            await services.working_hours_service.update(
                replace(created, saturday=True), hr_auth
            )

    @pytest.mark.asyncio
    async def test_create_unknown_sales_person(self, services, hr_auth):
        with pytest.raises(EntityNotFoundError):
            await services.working_hours_service.create(contract(), hr_auth)

    @pytest.mark.asyncio
    async def test_create_requires_hr(
        self, services, sales_auth, create_sales_person
    ):
        sales_person = create_sales_person()
        with pytest.raises(ForbiddenError):
            await services.working_hours_service.create(
                contract(sales_person_id=sales_person.id), sales_auth
            )

    @pytest.mark.asyncio
    async def test_update_with_stale_version(
        self, services, hr_auth, create_sales_person
    ):
        sales_person = create_sales_person()
        created = await services.working_hours_service.create(
            contract(sales_person_id=sales_person.id), hr_auth
        )
        updated = await services.working_hours_service.update(
            replace(created, expected_hours=30.0), hr_auth
        )
        assert updated.version != created.version

        with pytest.raises(EntityConflictsError):
            await services.working_hours_service.update(
                replace(created, expected_hours=20.0), hr_auth
            )

    @pytest.mark.asyncio
    async def test_delete_hides_contract(self, services, hr_auth, create_sales_person):
        sales_person = create_sales_person()
        created = await services.working_hours_service.create(
            contract(sales_person_id=sales_person.id), hr_auth
        )

        await services.working_hours_service.delete(created.id, hr_auth)

        assert (
            await services.working_hours_service.find_by_sales_person_id(
                sales_person.id, hr_auth
            )
            == []
        )

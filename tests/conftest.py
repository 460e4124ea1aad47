# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
import os
import uuid
from datetime import date, datetime, time

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Set test environment before importing app
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ["CARRYOVER_JOB_ENABLED"] = "false"

from shiftplan.api.deps import get_services
from shiftplan.calendar_week import DayOfWeek
from shiftplan.config import settings
from shiftplan.database import get_db
from shiftplan.main import app
from shiftplan.models import (
    Booking,
    CustomExtraHours,
    ExtraHours,
    SalesPerson,
    Slot,
    SpecialDay,
    User,
    WorkingHours,
)
from shiftplan.models.base import Base
from shiftplan.models.enums import ExtraHoursCategory, SpecialDayType
from shiftplan.services import auth_service, rbac_service
from shiftplan.services.clock import ClockService
from shiftplan.services.container import build_services
from shiftplan.services.permission_service import Authentication
from shiftplan.services.rbac_seed_service import seed_rbac_data
from shiftplan.services.working_hours_service import ShortDayPolicy

# Test database setup
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

FIXED_NOW = datetime(2025, 1, 15, 12, 0, 0)


class FixedClock(ClockService):
    """Clock pinned to FIXED_NOW."""

    def __init__(self, now: datetime = FIXED_NOW) -> None:
        self._now = now

    def now(self) -> datetime:
        return self._now


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def session_factory(db_session):
    return TestingSessionLocal


@pytest.fixture
def services(session_factory):
    """Service container on the test database with a pinned clock."""
    return build_services(
        session_factory,
        clock=FixedClock(),
        short_day_policy=ShortDayPolicy(time(8, 0), time(16, 0)),
    )


@pytest.fixture(scope="function")
def client(db_session, services):
    """Create a test client with database and service overrides."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_services] = lambda: services
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _create_user(db_session, username: str, role_name: str) -> User:
    seed_rbac_data(db_session)
    user = User(username=username, full_name=username.title(), is_active=True)
    db_session.add(user)
    db_session.flush()

    role = rbac_service.get_role_by_name(db_session, role_name)
    if role:
        rbac_service.assign_role_to_user(db_session, user_id=user.id, role_id=role.id)

    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def hr_user(db_session) -> User:
    """Create a user with the HR role."""
    return _create_user(db_session, "hr", "HR")


@pytest.fixture
def sales_user(db_session) -> User:
    """Create a user with the Sales role."""
    return _create_user(db_session, "sales", "Sales")


@pytest.fixture
def planner_user(db_session) -> User:
    """Create a user with the Shiftplanner role."""
    return _create_user(db_session, "planner", "Shiftplanner")


@pytest.fixture
def hr_auth(hr_user) -> Authentication:
    return Authentication.for_user(hr_user.id)


@pytest.fixture
def sales_auth(sales_user) -> Authentication:
    return Authentication.for_user(sales_user.id)


@pytest.fixture
def planner_auth(planner_user) -> Authentication:
    return Authentication.for_user(planner_user.id)


@pytest.fixture
def hr_client(client, db_session, hr_user):
    """Create a test client logged in as the HR user."""
    token = auth_service.create_session(db_session, hr_user.id)
    client.cookies.set(settings.session_cookie_name, token)
    return client


@pytest.fixture
def sales_client(client, db_session, sales_user):
    """Create a test client logged in as the sales user."""
    token = auth_service.create_session(db_session, sales_user.id)
    client.cookies.set(settings.session_cookie_name, token)
    return client


def _versioned() -> dict:
    return {"created": FIXED_NOW, "version": uuid.uuid4()}


@pytest.fixture
def create_sales_person(db_session):
    """Factory inserting a sales person row."""

    def factory(
        name: str = "Alice",
        is_paid: bool = True,
        inactive: bool = False,
        user_id: uuid.UUID | None = None,
    ) -> SalesPerson:
        sales_person = SalesPerson(
            id=uuid.uuid4(),
            name=name,
            is_paid=is_paid,
            inactive=inactive,
            user_id=user_id,
            **_versioned(),
        )
        db_session.add(sales_person)
        db_session.commit()
        return sales_person

    return factory


@pytest.fixture
def create_contract(db_session):
    """Factory inserting a Monday to Friday working hours contract."""

    def factory(
        sales_person_id: uuid.UUID,
        expected_hours: float = 40.0,
        from_year: int = 2024,
        from_week: int = 1,
        to_year: int = 2024,
        to_week: int = 52,
        workdays_per_week: int = 5,
        vacation_days: int = 0,
        **weekdays: bool,
    ) -> WorkingHours:
        contract = WorkingHours(
            id=uuid.uuid4(),
            sales_person_id=sales_person_id,
            expected_hours=expected_hours,
            from_year=from_year,
            from_calendar_week=from_week,
            to_year=to_year,
            to_calendar_week=to_week,
            workdays_per_week=workdays_per_week,
            vacation_days=vacation_days,
            **{
                "monday": True,
                "tuesday": True,
                "wednesday": True,
                "thursday": True,
                "friday": True,
                "saturday": False,
                "sunday": False,
                **weekdays,
            },
            **_versioned(),
        )
        db_session.add(contract)
        db_session.commit()
        return contract

    return factory


@pytest.fixture
def create_booking(db_session):
    """Factory inserting a slot and one booking of it."""

    def factory(
        sales_person_id: uuid.UUID,
        year: int,
        week: int,
        day_of_week: DayOfWeek = DayOfWeek.MONDAY,
        time_from: time = time(8, 0),
        time_to: time = time(16, 0),
    ) -> Booking:
        slot = Slot(
            id=uuid.uuid4(),
            day_of_week=int(day_of_week),
            time_from=time_from,
            time_to=time_to,
            min_resources=1,
            valid_from=date(2020, 1, 1),
            **_versioned(),
        )
        booking = Booking(
            id=uuid.uuid4(),
            sales_person_id=sales_person_id,
            slot_id=slot.id,
            year=year,
            calendar_week=week,
            **_versioned(),
        )
        db_session.add_all([slot, booking])
        db_session.commit()
        return booking

    return factory


@pytest.fixture
def create_extra_hours(db_session):
    """Factory inserting a manual hours entry."""

    def factory(
        sales_person_id: uuid.UUID,
        when: datetime,
        amount: float,
        category: ExtraHoursCategory = ExtraHoursCategory.EXTRA_WORK,
        custom_extra_hours_id: uuid.UUID | None = None,
    ) -> ExtraHours:
        entry = ExtraHours(
            id=uuid.uuid4(),
            sales_person_id=sales_person_id,
            amount=amount,
            category=category,
            custom_extra_hours_id=custom_extra_hours_id,
            date_time=when,
            **_versioned(),
        )
        db_session.add(entry)
        db_session.commit()
        return entry

    return factory


@pytest.fixture
def create_custom_extra_hours(db_session):
    """Factory inserting a custom hours category."""

    def factory(name: str, modifies_balance: bool = False) -> CustomExtraHours:
        definition = CustomExtraHours(
            id=uuid.uuid4(),
            name=name,
            modifies_balance=modifies_balance,
            **_versioned(),
        )
        db_session.add(definition)
        db_session.commit()
        return definition

    return factory


@pytest.fixture
def create_special_day(db_session):
    """Factory inserting a holiday or short day."""

    def factory(
        year: int,
        week: int,
        day_of_week: DayOfWeek,
        day_type: SpecialDayType = SpecialDayType.HOLIDAY,
        time_of_day: time | None = None,
    ) -> SpecialDay:
        special_day = SpecialDay(
            id=uuid.uuid4(),
            year=year,
            calendar_week=week,
            day_of_week=int(day_of_week),
            day_type=day_type,
            time_of_day=time_of_day,
            **_versioned(),
        )
        db_session.add(special_day)
        db_session.commit()
        return special_day

    return factory

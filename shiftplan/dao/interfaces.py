# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Abstract data access interfaces.

Every method takes an optional tx. When given, the call runs inside the
caller's transaction and nothing is committed; otherwise the implementation
uses its own short transaction.
"""

import uuid
from abc import ABC, abstractmethod
from datetime import date, datetime

from sqlalchemy.orm import Session

from shiftplan.calendar_week import CalendarWeek
from shiftplan.dao.entities import (
    BillingPeriodEntity,
    CarryoverEntity,
    CustomExtraHoursEntity,
    ExtraHoursEntity,
    SalesPersonEntity,
    ShiftplanReportDay,
    SpecialDayEntity,
    WorkingHoursEntity,
)


class SalesPersonDao(ABC):
    """Sales person storage."""

    @abstractmethod
    async def all(self, tx: Session | None = None) -> list[SalesPersonEntity]:
        ...

    @abstractmethod
    async def find_by_id(
        self, sales_person_id: uuid.UUID, tx: Session | None = None
    ) -> SalesPersonEntity | None:
        ...

    @abstractmethod
    async def find_by_user_id(
        self, user_id: uuid.UUID, tx: Session | None = None
    ) -> SalesPersonEntity | None:
        ...

    @abstractmethod
    async def create(
        self, entity: SalesPersonEntity, process: str, tx: Session | None = None
    ) -> None:
        ...

    @abstractmethod
    async def update(
        self, entity: SalesPersonEntity, process: str, tx: Session | None = None
    ) -> None:
        ...


class WorkingHoursDao(ABC):
    """Working hours contract storage."""

    @abstractmethod
    async def all(self, tx: Session | None = None) -> list[WorkingHoursEntity]:
        ...

    @abstractmethod
    async def find_by_id(
        self, working_hours_id: uuid.UUID, tx: Session | None = None
    ) -> WorkingHoursEntity | None:
        ...

    @abstractmethod
    async def find_by_sales_person_id(
        self, sales_person_id: uuid.UUID, tx: Session | None = None
    ) -> list[WorkingHoursEntity]:
        ...

    @abstractmethod
    async def find_for_week(
        self, year: int, week: int, tx: Session | None = None
    ) -> list[WorkingHoursEntity]:
        """Contracts of all sales persons covering the given week."""
        ...

    @abstractmethod
    async def create(
        self, entity: WorkingHoursEntity, process: str, tx: Session | None = None
    ) -> None:
        ...

    @abstractmethod
    async def update(
        self, entity: WorkingHoursEntity, process: str, tx: Session | None = None
    ) -> None:
        ...


class CustomExtraHoursDao(ABC):
    """Custom extra hours category storage."""

    @abstractmethod
    async def all(
        self, include_deleted: bool = False, tx: Session | None = None
    ) -> list[CustomExtraHoursEntity]:
        ...

    @abstractmethod
    async def find_by_id(
        self, custom_extra_hours_id: uuid.UUID, tx: Session | None = None
    ) -> CustomExtraHoursEntity | None:
        ...

    @abstractmethod
    async def create(
        self, entity: CustomExtraHoursEntity, process: str, tx: Session | None = None
    ) -> None:
        ...

    @abstractmethod
    async def update(
        self, entity: CustomExtraHoursEntity, process: str, tx: Session | None = None
    ) -> None:
        ...


class ExtraHoursDao(ABC):
    """Extra hours storage."""

    @abstractmethod
    async def find_by_id(
        self, extra_hours_id: uuid.UUID, tx: Session | None = None
    ) -> ExtraHoursEntity | None:
        ...

    @abstractmethod
    async def find_by_sales_person_id_and_range(
        self,
        sales_person_id: uuid.UUID,
        from_date: date,
        to_date: date,
        tx: Session | None = None,
    ) -> list[ExtraHoursEntity]:
        """Entries dated within [from_date, to_date]."""
        ...

    @abstractmethod
    async def find_by_range(
        self, from_date: date, to_date: date, tx: Session | None = None
    ) -> list[ExtraHoursEntity]:
        ...

    @abstractmethod
    async def create(
        self, entity: ExtraHoursEntity, process: str, tx: Session | None = None
    ) -> None:
        ...

    @abstractmethod
    async def update(
        self, entity: ExtraHoursEntity, process: str, tx: Session | None = None
    ) -> None:
        ...


class SpecialDayDao(ABC):
    """Special day storage."""

    @abstractmethod
    async def find_by_id(
        self, special_day_id: uuid.UUID, tx: Session | None = None
    ) -> SpecialDayEntity | None:
        ...

    @abstractmethod
    async def find_by_week(
        self, year: int, week: int, tx: Session | None = None
    ) -> list[SpecialDayEntity]:
        ...

    @abstractmethod
    async def find_by_years(
        self, from_year: int, to_year: int, tx: Session | None = None
    ) -> list[SpecialDayEntity]:
        """Special days whose ISO year lies in [from_year, to_year]."""
        ...

    @abstractmethod
    async def create(
        self, entity: SpecialDayEntity, process: str, tx: Session | None = None
    ) -> None:
        ...

    @abstractmethod
    async def update(
        self, entity: SpecialDayEntity, process: str, tx: Session | None = None
    ) -> None:
        ...


class ShiftplanReportDao(ABC):
    """Booked hours derived from bookings and their slots."""

    @abstractmethod
    async def extract_shiftplan_report(
        self,
        sales_person_id: uuid.UUID,
        from_week: CalendarWeek,
        to_week: CalendarWeek,
        tx: Session | None = None,
    ) -> list[ShiftplanReportDay]:
        ...

    @abstractmethod
    async def extract_shiftplan_report_for_week(
        self, year: int, week: int, tx: Session | None = None
    ) -> list[ShiftplanReportDay]:
        ...


class CarryoverDao(ABC):
    """Yearly carryover storage."""

    @abstractmethod
    async def find_by_sales_person_id_and_year(
        self, sales_person_id: uuid.UUID, year: int, tx: Session | None = None
    ) -> CarryoverEntity | None:
        ...

    @abstractmethod
    async def upsert(
        self, entity: CarryoverEntity, process: str, tx: Session | None = None
    ) -> None:
        """Insert or replace the row for (sales_person_id, year)."""
        ...


class BillingPeriodDao(ABC):
    """Billing period storage, including per sales person figures."""

    @abstractmethod
    async def all(self, tx: Session | None = None) -> list[BillingPeriodEntity]:
        """All periods without their figures, ordered by start date."""
        ...

    @abstractmethod
    async def find_by_id(
        self, billing_period_id: uuid.UUID, tx: Session | None = None
    ) -> BillingPeriodEntity | None:
        ...

    @abstractmethod
    async def find_latest_end_date(self, tx: Session | None = None) -> date | None:
        ...

    @abstractmethod
    async def create(
        self, entity: BillingPeriodEntity, process: str, tx: Session | None = None
    ) -> None:
        ...

    @abstractmethod
    async def delete_all(
        self, deleted_at: datetime, process: str, tx: Session | None = None
    ) -> None:
        """Soft delete every period and its figures."""
        ...

# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""SQLAlchemy implementations of the data access interfaces."""

import logging
import uuid
from datetime import date, datetime, time, timedelta

from sqlalchemy import func, select, update
from sqlalchemy.orm import Session

from shiftplan.calendar_week import CalendarWeek, DayOfWeek
from shiftplan.dao.entities import (
    BillingPeriodEntity,
    BillingPeriodSalesPersonEntity,
    BillingPeriodValue,
    CarryoverEntity,
    CustomExtraHoursEntity,
    ExtraHoursEntity,
    SalesPersonEntity,
    ShiftplanReportDay,
    SpecialDayEntity,
    WorkingHoursEntity,
)
from shiftplan.dao.interfaces import (
    BillingPeriodDao,
    CarryoverDao,
    CustomExtraHoursDao,
    ExtraHoursDao,
    SalesPersonDao,
    ShiftplanReportDao,
    SpecialDayDao,
    WorkingHoursDao,
)
from shiftplan.database import SessionFactory, session_scope
from shiftplan.errors import EntityNotFoundError, TimeOrderWrongError
from shiftplan.models import (
    BillingPeriod,
    BillingPeriodSalesPerson,
    Booking,
    Carryover,
    CustomExtraHours,
    ExtraHours,
    SalesPerson,
    Slot,
    SpecialDay,
    WorkingHours,
)

logger = logging.getLogger(__name__)


def _week_key(year, week):
    """Sortable integer for (year, week) comparisons in SQL."""
    return year * 100 + week


def _hours_of_day(t: time) -> float:
    return t.hour + t.minute / 60.0 + t.second / 3600.0


def _apply_deletion(row, deleted: datetime | None, process: str) -> None:
    if deleted is not None and row.deleted is None:
        row.deleted_by = process
    row.deleted = deleted


class SqlSalesPersonDao(SalesPersonDao):
    """Sales person storage backed by the sales_persons table."""

    def __init__(self, session_factory: SessionFactory) -> None:
        self.session_factory = session_factory

    @staticmethod
    def _to_entity(row: SalesPerson) -> SalesPersonEntity:
        return SalesPersonEntity(
            id=row.id,
            name=row.name,
            background_color=row.background_color,
            is_paid=row.is_paid,
            inactive=row.inactive,
            user_id=row.user_id,
            created=row.created,
            deleted=row.deleted,
            version=row.version,
        )

    async def all(self, tx: Session | None = None) -> list[SalesPersonEntity]:
        with session_scope(self.session_factory, tx) as db:
            rows = db.scalars(
                select(SalesPerson)
                .where(SalesPerson.deleted.is_(None))
                .order_by(SalesPerson.name)
            ).all()
            return [self._to_entity(row) for row in rows]

    async def find_by_id(
        self, sales_person_id: uuid.UUID, tx: Session | None = None
    ) -> SalesPersonEntity | None:
        with session_scope(self.session_factory, tx) as db:
            row = db.scalars(
                select(SalesPerson).where(
                    SalesPerson.id == sales_person_id, SalesPerson.deleted.is_(None)
                )
            ).first()
            return self._to_entity(row) if row else None

    async def find_by_user_id(
        self, user_id: uuid.UUID, tx: Session | None = None
    ) -> SalesPersonEntity | None:
        with session_scope(self.session_factory, tx) as db:
            row = db.scalars(
                select(SalesPerson).where(
                    SalesPerson.user_id == user_id, SalesPerson.deleted.is_(None)
                )
            ).first()
            return self._to_entity(row) if row else None

    async def create(
        self, entity: SalesPersonEntity, process: str, tx: Session | None = None
    ) -> None:
        with session_scope(self.session_factory, tx) as db:
            db.add(
                SalesPerson(
                    id=entity.id,
                    name=entity.name,
                    background_color=entity.background_color,
                    is_paid=entity.is_paid,
                    inactive=entity.inactive,
                    user_id=entity.user_id,
                    created=entity.created,
                    created_by=process,
                    deleted=entity.deleted,
                    version=entity.version,
                )
            )

    async def update(
        self, entity: SalesPersonEntity, process: str, tx: Session | None = None
    ) -> None:
        with session_scope(self.session_factory, tx) as db:
            row = db.get(SalesPerson, entity.id)
            if row is None:
                raise EntityNotFoundError(entity.id)
            row.name = entity.name
            row.background_color = entity.background_color
            row.is_paid = entity.is_paid
            row.inactive = entity.inactive
            row.user_id = entity.user_id
            row.version = entity.version
            _apply_deletion(row, entity.deleted, process)


class SqlWorkingHoursDao(WorkingHoursDao):
    """Contract storage backed by the working_hours table."""

    def __init__(self, session_factory: SessionFactory) -> None:
        self.session_factory = session_factory

    @staticmethod
    def _to_entity(row: WorkingHours) -> WorkingHoursEntity:
        return WorkingHoursEntity(
            id=row.id,
            sales_person_id=row.sales_person_id,
            expected_hours=row.expected_hours,
            from_year=row.from_year,
            from_calendar_week=row.from_calendar_week,
            to_year=row.to_year,
            to_calendar_week=row.to_calendar_week,
            workdays_per_week=row.workdays_per_week,
            monday=row.monday,
            tuesday=row.tuesday,
            wednesday=row.wednesday,
            thursday=row.thursday,
            friday=row.friday,
            saturday=row.saturday,
            sunday=row.sunday,
            vacation_days=row.vacation_days,
            created=row.created,
            deleted=row.deleted,
            version=row.version,
        )

    @staticmethod
    def _copy_fields(row: WorkingHours, entity: WorkingHoursEntity) -> None:
        row.sales_person_id = entity.sales_person_id
        row.expected_hours = entity.expected_hours
        row.from_year = entity.from_year
        row.from_calendar_week = entity.from_calendar_week
        row.to_year = entity.to_year
        row.to_calendar_week = entity.to_calendar_week
        row.workdays_per_week = entity.workdays_per_week
        row.monday = entity.monday
        row.tuesday = entity.tuesday
        row.wednesday = entity.wednesday
        row.thursday = entity.thursday
        row.friday = entity.friday
        row.saturday = entity.saturday
        row.sunday = entity.sunday
        row.vacation_days = entity.vacation_days
        row.version = entity.version

    async def all(self, tx: Session | None = None) -> list[WorkingHoursEntity]:
        with session_scope(self.session_factory, tx) as db:
            rows = db.scalars(
                select(WorkingHours).where(WorkingHours.deleted.is_(None))
            ).all()
            return [self._to_entity(row) for row in rows]

    async def find_by_id(
        self, working_hours_id: uuid.UUID, tx: Session | None = None
    ) -> WorkingHoursEntity | None:
        with session_scope(self.session_factory, tx) as db:
            row = db.scalars(
                select(WorkingHours).where(
                    WorkingHours.id == working_hours_id,
                    WorkingHours.deleted.is_(None),
                )
            ).first()
            return self._to_entity(row) if row else None

    async def find_by_sales_person_id(
        self, sales_person_id: uuid.UUID, tx: Session | None = None
    ) -> list[WorkingHoursEntity]:
        with session_scope(self.session_factory, tx) as db:
            rows = db.scalars(
                select(WorkingHours)
                .where(
                    WorkingHours.sales_person_id == sales_person_id,
                    WorkingHours.deleted.is_(None),
                )
                .order_by(WorkingHours.from_year, WorkingHours.from_calendar_week)
            ).all()
            return [self._to_entity(row) for row in rows]

    async def find_for_week(
        self, year: int, week: int, tx: Session | None = None
    ) -> list[WorkingHoursEntity]:
        key = _week_key(year, week)
        with session_scope(self.session_factory, tx) as db:
            rows = db.scalars(
                select(WorkingHours).where(
                    WorkingHours.deleted.is_(None),
                    _week_key(WorkingHours.from_year, WorkingHours.from_calendar_week)
                    <= key,
                    _week_key(WorkingHours.to_year, WorkingHours.to_calendar_week)
                    >= key,
                )
            ).all()
            return [self._to_entity(row) for row in rows]

    async def create(
        self, entity: WorkingHoursEntity, process: str, tx: Session | None = None
    ) -> None:
        with session_scope(self.session_factory, tx) as db:
            row = WorkingHours(
                id=entity.id,
                created=entity.created,
                created_by=process,
                deleted=entity.deleted,
            )
            self._copy_fields(row, entity)
            db.add(row)

    async def update(
        self, entity: WorkingHoursEntity, process: str, tx: Session | None = None
    ) -> None:
        with session_scope(self.session_factory, tx) as db:
            row = db.get(WorkingHours, entity.id)
            if row is None:
                raise EntityNotFoundError(entity.id)
            self._copy_fields(row, entity)
            _apply_deletion(row, entity.deleted, process)


class SqlCustomExtraHoursDao(CustomExtraHoursDao):
    """Custom category storage backed by the custom_extra_hours table."""

    def __init__(self, session_factory: SessionFactory) -> None:
        self.session_factory = session_factory

    @staticmethod
    def _to_entity(row: CustomExtraHours) -> CustomExtraHoursEntity:
        return CustomExtraHoursEntity(
            id=row.id,
            name=row.name,
            description=row.description,
            modifies_balance=row.modifies_balance,
            created=row.created,
            deleted=row.deleted,
            version=row.version,
        )

    async def all(
        self, include_deleted: bool = False, tx: Session | None = None
    ) -> list[CustomExtraHoursEntity]:
        query = select(CustomExtraHours).order_by(
            CustomExtraHours.name, CustomExtraHours.id
        )
        if not include_deleted:
            query = query.where(CustomExtraHours.deleted.is_(None))
        with session_scope(self.session_factory, tx) as db:
            return [self._to_entity(row) for row in db.scalars(query).all()]

    async def find_by_id(
        self, custom_extra_hours_id: uuid.UUID, tx: Session | None = None
    ) -> CustomExtraHoursEntity | None:
        with session_scope(self.session_factory, tx) as db:
            row = db.scalars(
                select(CustomExtraHours).where(
                    CustomExtraHours.id == custom_extra_hours_id,
                    CustomExtraHours.deleted.is_(None),
                )
            ).first()
            return self._to_entity(row) if row else None

    async def create(
        self, entity: CustomExtraHoursEntity, process: str, tx: Session | None = None
    ) -> None:
        with session_scope(self.session_factory, tx) as db:
            db.add(
                CustomExtraHours(
                    id=entity.id,
                    name=entity.name,
                    description=entity.description,
                    modifies_balance=entity.modifies_balance,
                    created=entity.created,
                    created_by=process,
                    deleted=entity.deleted,
                    version=entity.version,
                )
            )

    async def update(
        self, entity: CustomExtraHoursEntity, process: str, tx: Session | None = None
    ) -> None:
        with session_scope(self.session_factory, tx) as db:
            row = db.get(CustomExtraHours, entity.id)
            if row is None:
                raise EntityNotFoundError(entity.id)
            row.name = entity.name
            row.description = entity.description
            row.modifies_balance = entity.modifies_balance
            row.version = entity.version
            _apply_deletion(row, entity.deleted, process)


class SqlExtraHoursDao(ExtraHoursDao):
    """Extra hours storage backed by the extra_hours table."""

    def __init__(self, session_factory: SessionFactory) -> None:
        self.session_factory = session_factory

    @staticmethod
    def _to_entity(row: ExtraHours) -> ExtraHoursEntity:
        return ExtraHoursEntity(
            id=row.id,
            sales_person_id=row.sales_person_id,
            amount=row.amount,
            category=row.category,
            description=row.description,
            custom_extra_hours_id=row.custom_extra_hours_id,
            date_time=row.date_time,
            created=row.created,
            deleted=row.deleted,
            version=row.version,
        )

    @staticmethod
    def _date_bounds(from_date: date, to_date: date) -> tuple[datetime, datetime]:
        return (
            datetime.combine(from_date, time.min),
            datetime.combine(to_date + timedelta(days=1), time.min),
        )

    async def find_by_id(
        self, extra_hours_id: uuid.UUID, tx: Session | None = None
    ) -> ExtraHoursEntity | None:
        with session_scope(self.session_factory, tx) as db:
            row = db.scalars(
                select(ExtraHours).where(
                    ExtraHours.id == extra_hours_id, ExtraHours.deleted.is_(None)
                )
            ).first()
            return self._to_entity(row) if row else None

    async def find_by_sales_person_id_and_range(
        self,
        sales_person_id: uuid.UUID,
        from_date: date,
        to_date: date,
        tx: Session | None = None,
    ) -> list[ExtraHoursEntity]:
        start, end = self._date_bounds(from_date, to_date)
        with session_scope(self.session_factory, tx) as db:
            rows = db.scalars(
                select(ExtraHours)
                .where(
                    ExtraHours.sales_person_id == sales_person_id,
                    ExtraHours.deleted.is_(None),
                    ExtraHours.date_time >= start,
                    ExtraHours.date_time < end,
                )
                .order_by(ExtraHours.date_time)
            ).all()
            return [self._to_entity(row) for row in rows]

    async def find_by_range(
        self, from_date: date, to_date: date, tx: Session | None = None
    ) -> list[ExtraHoursEntity]:
        start, end = self._date_bounds(from_date, to_date)
        with session_scope(self.session_factory, tx) as db:
            rows = db.scalars(
                select(ExtraHours)
                .where(
                    ExtraHours.deleted.is_(None),
                    ExtraHours.date_time >= start,
                    ExtraHours.date_time < end,
                )
                .order_by(ExtraHours.date_time)
            ).all()
            return [self._to_entity(row) for row in rows]

    async def create(
        self, entity: ExtraHoursEntity, process: str, tx: Session | None = None
    ) -> None:
        with session_scope(self.session_factory, tx) as db:
            db.add(
                ExtraHours(
                    id=entity.id,
                    sales_person_id=entity.sales_person_id,
                    amount=entity.amount,
                    category=entity.category,
                    description=entity.description,
                    custom_extra_hours_id=entity.custom_extra_hours_id,
                    date_time=entity.date_time,
                    created=entity.created,
                    created_by=process,
                    deleted=entity.deleted,
                    version=entity.version,
                )
            )

    async def update(
        self, entity: ExtraHoursEntity, process: str, tx: Session | None = None
    ) -> None:
        with session_scope(self.session_factory, tx) as db:
            row = db.get(ExtraHours, entity.id)
            if row is None:
                raise EntityNotFoundError(entity.id)
            row.amount = entity.amount
            row.category = entity.category
            row.description = entity.description
            row.custom_extra_hours_id = entity.custom_extra_hours_id
            row.date_time = entity.date_time
            row.version = entity.version
            _apply_deletion(row, entity.deleted, process)


class SqlSpecialDayDao(SpecialDayDao):
    """Special day storage backed by the special_days table."""

    def __init__(self, session_factory: SessionFactory) -> None:
        self.session_factory = session_factory

    @staticmethod
    def _to_entity(row: SpecialDay) -> SpecialDayEntity:
        return SpecialDayEntity(
            id=row.id,
            year=row.year,
            calendar_week=row.calendar_week,
            day_of_week=DayOfWeek.from_number(row.day_of_week),
            day_type=row.day_type,
            time_of_day=row.time_of_day,
            name=row.name,
            created=row.created,
            deleted=row.deleted,
            version=row.version,
        )

    async def find_by_id(
        self, special_day_id: uuid.UUID, tx: Session | None = None
    ) -> SpecialDayEntity | None:
        with session_scope(self.session_factory, tx) as db:
            row = db.scalars(
                select(SpecialDay).where(
                    SpecialDay.id == special_day_id, SpecialDay.deleted.is_(None)
                )
            ).first()
            return self._to_entity(row) if row else None

    async def find_by_week(
        self, year: int, week: int, tx: Session | None = None
    ) -> list[SpecialDayEntity]:
        with session_scope(self.session_factory, tx) as db:
            rows = db.scalars(
                select(SpecialDay)
                .where(
                    SpecialDay.year == year,
                    SpecialDay.calendar_week == week,
                    SpecialDay.deleted.is_(None),
                )
                .order_by(SpecialDay.day_of_week)
            ).all()
            return [self._to_entity(row) for row in rows]

    async def find_by_years(
        self, from_year: int, to_year: int, tx: Session | None = None
    ) -> list[SpecialDayEntity]:
        with session_scope(self.session_factory, tx) as db:
            rows = db.scalars(
                select(SpecialDay)
                .where(
                    SpecialDay.year >= from_year,
                    SpecialDay.year <= to_year,
                    SpecialDay.deleted.is_(None),
                )
                .order_by(
                    SpecialDay.year, SpecialDay.calendar_week, SpecialDay.day_of_week
                )
            ).all()
            return [self._to_entity(row) for row in rows]

    async def create(
        self, entity: SpecialDayEntity, process: str, tx: Session | None = None
    ) -> None:
        with session_scope(self.session_factory, tx) as db:
            db.add(
                SpecialDay(
                    id=entity.id,
                    year=entity.year,
                    calendar_week=entity.calendar_week,
                    day_of_week=int(entity.day_of_week),
                    day_type=entity.day_type,
                    time_of_day=entity.time_of_day,
                    name=entity.name,
                    created=entity.created,
                    created_by=process,
                    deleted=entity.deleted,
                    version=entity.version,
                )
            )

    async def update(
        self, entity: SpecialDayEntity, process: str, tx: Session | None = None
    ) -> None:
        with session_scope(self.session_factory, tx) as db:
            row = db.get(SpecialDay, entity.id)
            if row is None:
                raise EntityNotFoundError(entity.id)
            row.day_type = entity.day_type
            row.time_of_day = entity.time_of_day
            row.name = entity.name
            row.version = entity.version
            _apply_deletion(row, entity.deleted, process)


class SqlShiftplanReportDao(ShiftplanReportDao):
    """Sums booked slot durations per sales person and day.

    Bookings are counted while the booking itself is not deleted, even if the
    slot has since been replaced by a newer version.
    """

    def __init__(self, session_factory: SessionFactory) -> None:
        self.session_factory = session_factory

    @staticmethod
    def _sum_by_day(rows) -> list[ShiftplanReportDay]:
        totals: dict[tuple[uuid.UUID, int, int, int], float] = {}
        for row in rows:
            if row.time_to < row.time_from:
                raise TimeOrderWrongError(row.time_from, row.time_to)
            key = (row.sales_person_id, row.year, row.calendar_week, row.day_of_week)
            hours = _hours_of_day(row.time_to) - _hours_of_day(row.time_from)
            totals[key] = totals.get(key, 0.0) + hours

        return [
            ShiftplanReportDay(
                sales_person_id=sales_person_id,
                hours=hours,
                year=year,
                calendar_week=week,
                day_of_week=DayOfWeek.from_number(day_of_week),
            )
            for (sales_person_id, year, week, day_of_week), hours in sorted(
                totals.items(), key=lambda item: (str(item[0][0]), *item[0][1:])
            )
        ]

    @staticmethod
    def _base_query():
        return (
            select(
                Booking.sales_person_id,
                Booking.year,
                Booking.calendar_week,
                Slot.day_of_week,
                Slot.time_from,
                Slot.time_to,
            )
            .join(Slot, Booking.slot_id == Slot.id)
            .where(Booking.deleted.is_(None))
            .order_by(Booking.year, Booking.calendar_week, Slot.day_of_week)
        )

    async def extract_shiftplan_report(
        self,
        sales_person_id: uuid.UUID,
        from_week: CalendarWeek,
        to_week: CalendarWeek,
        tx: Session | None = None,
    ) -> list[ShiftplanReportDay]:
        booking_key = _week_key(Booking.year, Booking.calendar_week)
        with session_scope(self.session_factory, tx) as db:
            rows = db.execute(
                self._base_query().where(
                    Booking.sales_person_id == sales_person_id,
                    booking_key >= _week_key(from_week.year, from_week.week),
                    booking_key <= _week_key(to_week.year, to_week.week),
                )
            ).all()
            return self._sum_by_day(rows)

    async def extract_shiftplan_report_for_week(
        self, year: int, week: int, tx: Session | None = None
    ) -> list[ShiftplanReportDay]:
        with session_scope(self.session_factory, tx) as db:
            rows = db.execute(
                self._base_query().where(
                    Booking.year == year, Booking.calendar_week == week
                )
            ).all()
            return self._sum_by_day(rows)


class SqlCarryoverDao(CarryoverDao):
    """Carryover storage backed by employee_yearly_carryover."""

    def __init__(self, session_factory: SessionFactory) -> None:
        self.session_factory = session_factory

    async def find_by_sales_person_id_and_year(
        self, sales_person_id: uuid.UUID, year: int, tx: Session | None = None
    ) -> CarryoverEntity | None:
        with session_scope(self.session_factory, tx) as db:
            row = db.get(Carryover, (sales_person_id, year))
            if row is None or row.deleted is not None:
                return None
            return CarryoverEntity(
                sales_person_id=row.sales_person_id,
                year=row.year,
                carryover_hours=row.carryover_hours,
                vacation=row.vacation,
                created=row.created,
                deleted=row.deleted,
                version=row.version,
            )

    async def upsert(
        self, entity: CarryoverEntity, process: str, tx: Session | None = None
    ) -> None:
        with session_scope(self.session_factory, tx) as db:
            row = db.get(Carryover, (entity.sales_person_id, entity.year))
            if row is None:
                row = Carryover(
                    sales_person_id=entity.sales_person_id, year=entity.year
                )
                db.add(row)
            row.carryover_hours = entity.carryover_hours
            row.vacation = entity.vacation
            row.created = entity.created
            row.deleted = entity.deleted
            row.version = entity.version
            logger.debug(
                f"Carryover {entity.sales_person_id}/{entity.year} written by {process}"
            )


class SqlBillingPeriodDao(BillingPeriodDao):
    """Billing periods and their per sales person figures."""

    def __init__(self, session_factory: SessionFactory) -> None:
        self.session_factory = session_factory

    @staticmethod
    def _to_entity(
        row: BillingPeriod, values: list[BillingPeriodSalesPerson] | None = None
    ) -> BillingPeriodEntity:
        by_sales_person: dict[uuid.UUID, BillingPeriodSalesPersonEntity] = {}
        for value in values or []:
            entry = by_sales_person.setdefault(
                value.sales_person_id,
                BillingPeriodSalesPersonEntity(sales_person_id=value.sales_person_id),
            )
            entry.values[value.value_type] = BillingPeriodValue(
                value_delta=value.value_delta,
                value_ytd_from=value.value_ytd_from,
                value_ytd_to=value.value_ytd_to,
                value_full_year=value.value_full_year,
            )
        return BillingPeriodEntity(
            id=row.id,
            start_date=row.start_date,
            end_date=row.end_date,
            sales_persons=list(by_sales_person.values()),
            created=row.created,
            created_by=row.created_by,
            deleted=row.deleted,
            deleted_by=row.deleted_by,
            version=row.version,
        )

    async def all(self, tx: Session | None = None) -> list[BillingPeriodEntity]:
        with session_scope(self.session_factory, tx) as db:
            rows = db.scalars(
                select(BillingPeriod)
                .where(BillingPeriod.deleted.is_(None))
                .order_by(BillingPeriod.start_date)
            ).all()
            return [self._to_entity(row) for row in rows]

    async def find_by_id(
        self, billing_period_id: uuid.UUID, tx: Session | None = None
    ) -> BillingPeriodEntity | None:
        with session_scope(self.session_factory, tx) as db:
            row = db.scalars(
                select(BillingPeriod).where(
                    BillingPeriod.id == billing_period_id,
                    BillingPeriod.deleted.is_(None),
                )
            ).first()
            if row is None:
                return None
            values = db.scalars(
                select(BillingPeriodSalesPerson)
                .where(
                    BillingPeriodSalesPerson.billing_period_id == row.id,
                    BillingPeriodSalesPerson.deleted.is_(None),
                )
                .order_by(BillingPeriodSalesPerson.sales_person_id)
            ).all()
            return self._to_entity(row, list(values))

    async def find_latest_end_date(self, tx: Session | None = None) -> date | None:
        with session_scope(self.session_factory, tx) as db:
            return db.scalar(
                select(func.max(BillingPeriod.end_date)).where(
                    BillingPeriod.deleted.is_(None)
                )
            )

    async def create(
        self, entity: BillingPeriodEntity, process: str, tx: Session | None = None
    ) -> None:
        with session_scope(self.session_factory, tx) as db:
            db.add(
                BillingPeriod(
                    id=entity.id,
                    start_date=entity.start_date,
                    end_date=entity.end_date,
                    created=entity.created,
                    created_by=process,
                    version=entity.version,
                )
            )
            for sales_person in entity.sales_persons:
                for value_type, value in sales_person.values.items():
                    db.add(
                        BillingPeriodSalesPerson(
                            id=uuid.uuid4(),
                            billing_period_id=entity.id,
                            sales_person_id=sales_person.sales_person_id,
                            value_type=value_type,
                            value_delta=value.value_delta,
                            value_ytd_from=value.value_ytd_from,
                            value_ytd_to=value.value_ytd_to,
                            value_full_year=value.value_full_year,
                            created=entity.created,
                            created_by=process,
                            version=entity.version,
                        )
                    )

    async def delete_all(
        self, deleted_at: datetime, process: str, tx: Session | None = None
    ) -> None:
        with session_scope(self.session_factory, tx) as db:
            for model in (BillingPeriodSalesPerson, BillingPeriod):
                db.execute(
                    update(model)
                    .where(model.deleted.is_(None))
                    .values(deleted=deleted_at, deleted_by=process)
                )

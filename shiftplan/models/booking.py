# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Booking model."""

import uuid as uuid_lib

from sqlalchemy import ForeignKey, Index, Integer, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from shiftplan.models.base import Base, VersionedMixin


class Booking(Base, VersionedMixin):
    """A sales person booked into a slot for one calendar week."""

    __tablename__ = "bookings"

    id: Mapped[uuid_lib.UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    sales_person_id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("sales_persons.id"), nullable=False
    )
    slot_id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("slots.id"), nullable=False
    )
    calendar_week: Mapped[int] = mapped_column(Integer, nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)

    __table_args__ = (
        Index(
            "ix_bookings_sales_person_year_week",
            "sales_person_id",
            "year",
            "calendar_week",
        ),
    )

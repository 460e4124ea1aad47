# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Working hours contract model."""

import uuid as uuid_lib

from sqlalchemy import Boolean, Float, ForeignKey, Integer, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from shiftplan.models.base import Base, VersionedMixin


class WorkingHours(Base, VersionedMixin):
    """Expected weekly hours for a sales person over a range of calendar weeks.

    Both week bounds are inclusive.
    """

    __tablename__ = "working_hours"

    id: Mapped[uuid_lib.UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    sales_person_id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("sales_persons.id"), nullable=False, index=True
    )
    expected_hours: Mapped[float] = mapped_column(Float, nullable=False)
    from_year: Mapped[int] = mapped_column(Integer, nullable=False)
    from_calendar_week: Mapped[int] = mapped_column(Integer, nullable=False)
    to_year: Mapped[int] = mapped_column(Integer, nullable=False)
    to_calendar_week: Mapped[int] = mapped_column(Integer, nullable=False)
    workdays_per_week: Mapped[int] = mapped_column(Integer, nullable=False)

    monday: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    tuesday: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    wednesday: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    thursday: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    friday: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    saturday: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    sunday: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    vacation_days: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

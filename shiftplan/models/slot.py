# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Weekly shift slot model."""

import uuid as uuid_lib
from datetime import date, time

from sqlalchemy import Date, Integer, Time, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from shiftplan.models.base import Base, VersionedMixin


class Slot(Base, VersionedMixin):
    """A recurring weekly time window."""

    __tablename__ = "slots"

    id: Mapped[uuid_lib.UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    day_of_week: Mapped[int] = mapped_column(Integer, nullable=False)
    time_from: Mapped[time] = mapped_column(Time, nullable=False)
    time_to: Mapped[time] = mapped_column(Time, nullable=False)
    min_resources: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
    valid_from: Mapped[date] = mapped_column(Date, nullable=False)
    valid_to: Mapped[date | None] = mapped_column(Date, nullable=True)

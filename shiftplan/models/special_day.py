# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Special day model."""

import uuid as uuid_lib
from datetime import time

from sqlalchemy import Enum, Integer, String, Time, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from shiftplan.models.base import Base, VersionedMixin
from shiftplan.models.enums import SpecialDayType


class SpecialDay(Base, VersionedMixin):
    """A holiday or short day addressed by ISO week and weekday."""

    __tablename__ = "special_days"

    id: Mapped[uuid_lib.UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    calendar_week: Mapped[int] = mapped_column(Integer, nullable=False)
    day_of_week: Mapped[int] = mapped_column(Integer, nullable=False)
    day_type: Mapped[SpecialDayType] = mapped_column(
        Enum(SpecialDayType), nullable=False
    )
    # Cutoff for short days; hours after it are not expected
    time_of_day: Mapped[time | None] = mapped_column(Time, nullable=True)
    name: Mapped[str | None] = mapped_column(String(200), nullable=True)

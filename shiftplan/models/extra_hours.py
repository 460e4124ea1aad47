# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Extra hours model."""

import uuid as uuid_lib
from datetime import datetime

from sqlalchemy import DateTime, Enum, Float, ForeignKey, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from shiftplan.models.base import Base, VersionedMixin
from shiftplan.models.enums import ExtraHoursCategory


class ExtraHours(Base, VersionedMixin):
    """A dated manual hours entry (extra work, absences or a custom category)."""

    __tablename__ = "extra_hours"

    id: Mapped[uuid_lib.UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    sales_person_id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("sales_persons.id"), nullable=False, index=True
    )
    amount: Mapped[float] = mapped_column(Float, nullable=False)
    category: Mapped[ExtraHoursCategory] = mapped_column(
        Enum(ExtraHoursCategory), nullable=False
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    custom_extra_hours_id: Mapped[uuid_lib.UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("custom_extra_hours.id"), nullable=True
    )
    date_time: Mapped[datetime] = mapped_column(DateTime, nullable=False)

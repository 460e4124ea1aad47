# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Yearly carryover model."""

import uuid as uuid_lib
from datetime import datetime

from sqlalchemy import DateTime, Float, ForeignKey, Integer, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from shiftplan.models.base import Base


class Carryover(Base):
    """Hours and vacation balance carried into year.

    Keyed by (sales_person_id, year); writes replace the previous row.
    """

    __tablename__ = "employee_yearly_carryover"

    sales_person_id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("sales_persons.id"), primary_key=True
    )
    year: Mapped[int] = mapped_column(Integer, primary_key=True)
    carryover_hours: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    vacation: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    created: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    deleted: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    version: Mapped[uuid_lib.UUID] = mapped_column(Uuid(as_uuid=True), nullable=False)

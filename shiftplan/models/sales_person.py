# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Sales person model."""

import uuid as uuid_lib

from sqlalchemy import Boolean, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from shiftplan.models.base import Base, VersionedMixin


class SalesPerson(Base, VersionedMixin):
    """An employee who can be booked into slots."""

    __tablename__ = "sales_persons"

    id: Mapped[uuid_lib.UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    background_color: Mapped[str] = mapped_column(
        String(7), default="#FFFFFF", nullable=False
    )
    is_paid: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    inactive: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    user_id: Mapped[uuid_lib.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="SET NULL"),
        unique=True,
        nullable=True,
    )

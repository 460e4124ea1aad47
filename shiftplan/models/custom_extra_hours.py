# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Custom extra hours category model."""

import uuid as uuid_lib

from sqlalchemy import Boolean, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from shiftplan.models.base import Base, VersionedMixin


class CustomExtraHours(Base, VersionedMixin):
    """A user defined category for manual hours entries."""

    __tablename__ = "custom_extra_hours"

    id: Mapped[uuid_lib.UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    # Entries count as worked hours only when set
    modifies_balance: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False
    )

# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Privilege model."""

from sqlalchemy import Column, String, Text

from shiftplan.models.base import Base, TimestampMixin


class Permission(Base, TimestampMixin):
    """A privilege code such as hr or shiftplanner."""

    __tablename__ = "permissions"

    code = Column(String(100), primary_key=True)
    module = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)

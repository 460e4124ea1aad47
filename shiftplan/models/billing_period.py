# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Billing period models."""

from __future__ import annotations

import uuid as uuid_lib
from datetime import date

from sqlalchemy import Date, Enum, Float, ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from shiftplan.models.base import Base, VersionedMixin
from shiftplan.models.enums import BillingPeriodValueType


class BillingPeriod(Base, VersionedMixin):
    """A closed, sequential reporting window."""

    __tablename__ = "billing_periods"

    id: Mapped[uuid_lib.UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)

    values: Mapped[list[BillingPeriodSalesPerson]] = relationship(
        "BillingPeriodSalesPerson",
        back_populates="billing_period",
        cascade="all, delete-orphan",
    )


class BillingPeriodSalesPerson(Base, VersionedMixin):
    """One computed figure for one sales person in a billing period."""

    __tablename__ = "billing_period_sales_persons"

    id: Mapped[uuid_lib.UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    billing_period_id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("billing_periods.id", ondelete="CASCADE"),
        nullable=False,
    )
    sales_person_id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("sales_persons.id"), nullable=False
    )
    value_type: Mapped[BillingPeriodValueType] = mapped_column(
        Enum(BillingPeriodValueType), nullable=False
    )
    value_delta: Mapped[float] = mapped_column(Float, nullable=False)
    value_ytd_from: Mapped[float] = mapped_column(Float, nullable=False)
    value_ytd_to: Mapped[float] = mapped_column(Float, nullable=False)
    value_full_year: Mapped[float] = mapped_column(Float, nullable=False)

    __table_args__ = (
        UniqueConstraint(
            "billing_period_id",
            "sales_person_id",
            "value_type",
            name="_billing_period_sales_person_value_uc",
        ),
    )

    billing_period: Mapped[BillingPeriod] = relationship(
        "BillingPeriod", back_populates="values"
    )

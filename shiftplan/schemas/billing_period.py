# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Billing period schemas."""

import datetime
import uuid

from pydantic import BaseModel, Field

from shiftplan.dao.entities import BillingPeriodEntity
from shiftplan.models.enums import BillingPeriodValueType


class BillingPeriodCreate(BaseModel):
    """Request to close the next billing period."""

    end_date: datetime.date = Field(..., description="Last day of the new period")


class BillingPeriodCreated(BaseModel):
    """Id of a newly stored billing period."""

    id: uuid.UUID


class BillingPeriodValueResponse(BaseModel):
    """One figure over the four report windows."""

    value_delta: float
    value_ytd_from: float
    value_ytd_to: float
    value_full_year: float

    model_config = {"from_attributes": True}


class BillingPeriodSalesPersonResponse(BaseModel):
    """Figures of one sales person."""

    sales_person_id: uuid.UUID
    values: dict[BillingPeriodValueType, BillingPeriodValueResponse]

    model_config = {"from_attributes": True}


class BillingPeriodOverviewResponse(BaseModel):
    """Billing period without figures."""

    id: uuid.UUID
    start_date: datetime.date
    end_date: datetime.date
    created: datetime.datetime | None
    created_by: str | None

    model_config = {"from_attributes": True}


class BillingPeriodResponse(BillingPeriodOverviewResponse):
    """Billing period with per sales person figures."""

    sales_persons: list[BillingPeriodSalesPersonResponse]

    @classmethod
    def from_entity(cls, entity: BillingPeriodEntity) -> "BillingPeriodResponse":
        return cls.model_validate(entity)

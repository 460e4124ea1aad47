# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Billing period API endpoints."""

import uuid

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from shiftplan.api.deps import get_authentication, get_db, get_services
from shiftplan.schemas.billing_period import (
    BillingPeriodCreate,
    BillingPeriodCreated,
    BillingPeriodOverviewResponse,
    BillingPeriodResponse,
)
from shiftplan.schemas.common import MessageResponse
from shiftplan.services.container import Services
from shiftplan.services.permission_service import Authentication

router = APIRouter()


@router.get("", response_model=list[BillingPeriodOverviewResponse])
async def list_billing_periods(
    db: Session = Depends(get_db),
    auth: Authentication = Depends(get_authentication),
    services: Services = Depends(get_services),
) -> list[BillingPeriodOverviewResponse]:
    """List all billing periods, oldest first."""
    periods = await services.billing_period_service.get_billing_period_overview(
        auth, db
    )
    return [BillingPeriodOverviewResponse.model_validate(p) for p in periods]


@router.get("/{billing_period_id}", response_model=BillingPeriodResponse)
async def get_billing_period(
    billing_period_id: uuid.UUID,
    db: Session = Depends(get_db),
    auth: Authentication = Depends(get_authentication),
    services: Services = Depends(get_services),
) -> BillingPeriodResponse:
    """Get one billing period with its figures."""
    period = await services.billing_period_service.get_billing_period_by_id(
        billing_period_id, auth, db
    )
    return BillingPeriodResponse.from_entity(period)


@router.post(
    "",
    response_model=BillingPeriodCreated,
    status_code=status.HTTP_201_CREATED,
)
async def create_billing_period(
    data: BillingPeriodCreate,
    db: Session = Depends(get_db),
    auth: Authentication = Depends(get_authentication),
    services: Services = Depends(get_services),
) -> BillingPeriodCreated:
    """Close the next billing period up to end_date."""
    service = services.billing_period_report_service
    billing_period_id = await service.build_and_persist_billing_period_report(
        data.end_date, auth, db
    )
    db.commit()
    return BillingPeriodCreated(id=billing_period_id)


@router.delete("", response_model=MessageResponse)
async def clear_billing_periods(
    db: Session = Depends(get_db),
    auth: Authentication = Depends(get_authentication),
    services: Services = Depends(get_services),
) -> MessageResponse:
    """Remove all billing periods."""
    await services.billing_period_service.clear_all_billing_periods(auth, db)
    db.commit()
    return MessageResponse(message="All billing periods cleared")

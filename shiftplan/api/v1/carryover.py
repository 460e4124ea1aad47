# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Carryover API endpoints."""

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from shiftplan.api.deps import get_authentication, get_db, get_services
from shiftplan.calendar_week import MAX_YEAR, MIN_YEAR
from shiftplan.schemas.report import CarryoverUpdateResponse
from shiftplan.services.container import Services
from shiftplan.services.permission_service import Authentication

router = APIRouter()


@router.post("/{year}", response_model=CarryoverUpdateResponse)
async def update_carryover(
    year: int = Path(..., gt=MIN_YEAR, le=MAX_YEAR),
    db: Session = Depends(get_db),
    auth: Authentication = Depends(get_authentication),
    services: Services = Depends(get_services),
) -> CarryoverUpdateResponse:
    """Carry the balances of year - 1 into year for all active sales persons."""
    result = await services.carryover_update_service.update_carryover_all_employees(
        year, auth, db
    )
    db.commit()
    return CarryoverUpdateResponse.model_validate(result)

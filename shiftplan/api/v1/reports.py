# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Report API endpoints."""

import uuid

from fastapi import APIRouter, Depends, Path, Query
from fastapi.responses import Response
from sqlalchemy.orm import Session

from shiftplan.api.deps import get_authentication, get_db, get_services
from shiftplan.calendar_week import MAX_YEAR, MIN_YEAR
from shiftplan.schemas.report import (
    EmployeeReportResponse,
    ShortEmployeeReportResponse,
)
from shiftplan.services.container import Services
from shiftplan.services.permission_service import Authentication
from shiftplan.services.report_pdf import EmployeeReportPdfGenerator

router = APIRouter()


@router.get("", response_model=list[ShortEmployeeReportResponse])
async def list_short_reports(
    year: int = Query(..., ge=MIN_YEAR, le=MAX_YEAR, description="Report year"),
    until_week: int = Query(..., ge=1, description="Last calendar week included"),
    db: Session = Depends(get_db),
    auth: Authentication = Depends(get_authentication),
    services: Services = Depends(get_services),
) -> list[ShortEmployeeReportResponse]:
    """Year-to-date balances of all paid sales persons."""
    reports = await services.reporting_service.get_reports_for_all_employees(
        year, until_week, auth, db
    )
    return [ShortEmployeeReportResponse.model_validate(r) for r in reports]


@router.get("/week/{year}/{week}", response_model=list[ShortEmployeeReportResponse])
async def get_week_reports(
    year: int = Path(..., ge=MIN_YEAR, le=MAX_YEAR),
    week: int = Path(..., ge=1),
    db: Session = Depends(get_db),
    auth: Authentication = Depends(get_authentication),
    services: Services = Depends(get_services),
) -> list[ShortEmployeeReportResponse]:
    """Balances of one calendar week, without carryover."""
    reports = await services.reporting_service.get_week(year, week, auth, db)
    return [ShortEmployeeReportResponse.model_validate(r) for r in reports]


@router.get("/{sales_person_id}", response_model=EmployeeReportResponse)
async def get_employee_report(
    sales_person_id: uuid.UUID,
    year: int = Query(..., ge=MIN_YEAR, le=MAX_YEAR, description="Report year"),
    until_week: int = Query(..., ge=1, description="Last calendar week included"),
    db: Session = Depends(get_db),
    auth: Authentication = Depends(get_authentication),
    services: Services = Depends(get_services),
) -> EmployeeReportResponse:
    """Year-to-date report of one sales person."""
    report = await services.reporting_service.get_report_for_employee(
        sales_person_id, year, until_week, auth, db
    )
    return EmployeeReportResponse.model_validate(report)


@router.get("/{sales_person_id}/pdf")
async def get_employee_report_pdf(
    sales_person_id: uuid.UUID,
    year: int = Query(..., ge=MIN_YEAR, le=MAX_YEAR, description="Report year"),
    until_week: int = Query(..., ge=1, description="Last calendar week included"),
    db: Session = Depends(get_db),
    auth: Authentication = Depends(get_authentication),
    services: Services = Depends(get_services),
) -> Response:
    """Download the year-to-date report of one sales person as PDF."""
    report = await services.reporting_service.get_report_for_employee(
        sales_person_id, year, until_week, auth, db
    )
    generator = EmployeeReportPdfGenerator(report)
    return Response(
        content=generator.generate(),
        media_type="application/pdf",
        headers={
            "Content-Disposition": f'attachment; filename="{generator.get_filename()}"',
        },
    )

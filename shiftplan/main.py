# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from shiftplan import __version__
from shiftplan.api.deps import get_services
from shiftplan.api.v1.router import api_router
from shiftplan.config import settings
from shiftplan.database import SessionLocal
from shiftplan.errors import (
    DatabaseQueryError,
    DateOrderWrongError,
    EntityConflictsError,
    EntityNotFoundError,
    ForbiddenError,
    IdSetOnCreateError,
    InvalidDateError,
    InvalidDayOfWeekError,
    InvalidExtraHoursCategoryError,
    InvalidWorkdaysError,
    ServiceError,
    TimeOrderWrongError,
    VersionSetOnCreateError,
)
from shiftplan.schemas.common import HealthResponse
from shiftplan.services.rbac_seed_service import seed_rbac_data
from shiftplan.services.scheduler import CarryoverScheduler

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

ERROR_STATUS_CODES: dict[type[ServiceError], int] = {
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    EntityNotFoundError: status.HTTP_404_NOT_FOUND,
    EntityConflictsError: status.HTTP_409_CONFLICT,
    DateOrderWrongError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    TimeOrderWrongError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    InvalidDateError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    InvalidDayOfWeekError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    InvalidExtraHoursCategoryError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    InvalidWorkdaysError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    IdSetOnCreateError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    VersionSetOnCreateError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    DatabaseQueryError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events."""
    db = SessionLocal()
    try:
        seed_rbac_data(db)
    except SQLAlchemyError as e:
        logger.error(f"Error seeding roles and privileges: {e}")
    finally:
        db.close()

    scheduler = None
    if settings.carryover_job_enabled:
        services = get_services()
        scheduler = CarryoverScheduler(
            services.carryover_update_service,
            services.clock,
            settings.carryover_job_interval_seconds,
        )
        scheduler.start()

    yield

    if scheduler is not None:
        await scheduler.stop()


app = FastAPI(
    title="Shiftplan",
    description="Working hour reports, carryover and billing periods",
    version=__version__,
    lifespan=lifespan,
)


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    """Translate service errors into HTTP responses."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    for error_type in type(exc).__mro__:
        if error_type in ERROR_STATUS_CODES:
            status_code = ERROR_STATUS_CODES[error_type]
            break
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(
        status_code=status_code,
        content={"detail": str(exc), "error": type(exc).__name__},
    )


@app.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="healthy")


app.include_router(api_router, prefix="/api/v1")

# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Main API router for v1 endpoints."""

from fastapi import APIRouter

from shiftplan.api.v1 import billing_periods, carryover, reports

api_router = APIRouter()

# Report routes
api_router.include_router(reports.router, prefix="/reports", tags=["reports"])

# Billing period routes
api_router.include_router(
    billing_periods.router, prefix="/billing-periods", tags=["billing-periods"]
)

# Carryover routes
api_router.include_router(carryover.router, prefix="/carryover", tags=["carryover"])

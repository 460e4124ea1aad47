# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Database models package."""

from shiftplan.models.base import Base, TimestampMixin, VersionedMixin
from shiftplan.models.billing_period import BillingPeriod, BillingPeriodSalesPerson
from shiftplan.models.booking import Booking
from shiftplan.models.carryover import Carryover
from shiftplan.models.custom_extra_hours import CustomExtraHours
from shiftplan.models.enums import (
    BillingPeriodValueType,
    ExtraHoursCategory,
    ReportType,
    SpecialDayType,
)
from shiftplan.models.extra_hours import ExtraHours
from shiftplan.models.permission import Permission
from shiftplan.models.role import Role
from shiftplan.models.role_permission import RolePermission
from shiftplan.models.sales_person import SalesPerson
from shiftplan.models.session import Session
from shiftplan.models.slot import Slot
from shiftplan.models.special_day import SpecialDay
from shiftplan.models.user import User
from shiftplan.models.user_role import UserRole
from shiftplan.models.working_hours import WorkingHours

__all__ = [
    "Base",
    "BillingPeriod",
    "BillingPeriodSalesPerson",
    "BillingPeriodValueType",
    "Booking",
    "Carryover",
    "CustomExtraHours",
    "ExtraHours",
    "ExtraHoursCategory",
    "Permission",
    "ReportType",
    "Role",
    "RolePermission",
    "SalesPerson",
    "Session",
    "Slot",
    "SpecialDay",
    "SpecialDayType",
    "TimestampMixin",
    "User",
    "UserRole",
    "VersionedMixin",
    "WorkingHours",
]

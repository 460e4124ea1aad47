# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Privileges known to the application."""

HR_PRIVILEGE = "hr"
SALES_PRIVILEGE = "sales"
SHIFTPLANNER_PRIVILEGE = "shiftplanner"

CORE_PERMISSIONS = [
    {
        "code": HR_PRIVILEGE,
        "module": "core",
        "description": "Manage contracts, hours, reports and billing periods",
    },
    {
        "code": SALES_PRIVILEGE,
        "module": "core",
        "description": "Work shifts and view own hours",
    },
    {
        "code": SHIFTPLANNER_PRIVILEGE,
        "module": "core",
        "description": "Plan shifts and maintain special days",
    },
]

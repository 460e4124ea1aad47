# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Default roles seeded on first run."""

from .permissions import (
    CORE_PERMISSIONS,
    HR_PRIVILEGE,
    SALES_PRIVILEGE,
    SHIFTPLANNER_PRIVILEGE,
)

# Global Admin always gets all core permissions
GLOBAL_ADMIN_ROLE = "Global Admin"
GLOBAL_ADMIN_PERMISSIONS = [p["code"] for p in CORE_PERMISSIONS]

# Only Global Admin is a system role; the others can be changed freely
DEFAULT_ROLES = [
    {
        "name": GLOBAL_ADMIN_ROLE,
        "is_system": True,
        "description": "Grants all privileges.",
        "permissions": GLOBAL_ADMIN_PERMISSIONS,
    },
    {
        "name": "HR",
        "is_system": False,
        "description": "Human resources.",
        "permissions": [HR_PRIVILEGE],
    },
    {
        "name": "Sales",
        "is_system": False,
        "description": "Sales staff working shifts.",
        "permissions": [SALES_PRIVILEGE],
    },
    {
        "name": "Shiftplanner",
        "is_system": False,
        "description": "Creates and maintains the shift plan.",
        "permissions": [SHIFTPLANNER_PRIVILEGE],
    },
]

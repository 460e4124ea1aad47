# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Seeding of privileges and default roles."""

from sqlalchemy.orm import Session

from shiftplan.models import Permission, Role, RolePermission
from shiftplan.rbac.permissions import CORE_PERMISSIONS
from shiftplan.rbac.roles import DEFAULT_ROLES

from . import rbac_service


def seed_rbac_data(db: Session) -> None:
    """Seeds the database with core privileges and default roles.

    This function is idempotent.
    """
    for perm_data in CORE_PERMISSIONS:
        rbac_service.register_permission(db, **perm_data)

    for role_data in DEFAULT_ROLES:
        role = rbac_service.get_role_by_name(db, role_data["name"])
        if role:
            continue
        role = Role(
            name=role_data["name"],
            is_system=role_data["is_system"],
            description=role_data["description"],
        )
        db.add(role)
        db.flush()  # Flush to get the role ID

        for perm_code in role_data["permissions"]:
            permission = (
                db.query(Permission).filter(Permission.code == perm_code).first()
            )
            if permission:
                db.add(RolePermission(role_id=role.id, permission_code=permission.code))
    db.commit()

# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Role to privilege association."""

from sqlalchemy import Column, ForeignKey, PrimaryKeyConstraint, Uuid
from sqlalchemy.orm import relationship

from shiftplan.models.base import Base


class RolePermission(Base):
    """Association table mapping roles to their granted privileges."""

    __tablename__ = "role_permissions"

    role_id = Column(
        Uuid(as_uuid=True), ForeignKey("roles.id", ondelete="CASCADE"), primary_key=True
    )
    permission_code = Column(
        ForeignKey("permissions.code", ondelete="CASCADE"), primary_key=True
    )

    __table_args__ = (PrimaryKeyConstraint("role_id", "permission_code"),)

    role = relationship("Role", back_populates="permissions")
    permission = relationship("Permission")

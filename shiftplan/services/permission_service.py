# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Privilege checks for service calls."""

import logging
import uuid
from dataclasses import dataclass

from sqlalchemy.orm import Session

from shiftplan.database import SessionFactory, session_scope
from shiftplan.errors import ForbiddenError
from shiftplan.models import User
from shiftplan.rbac.permissions import (
    HR_PRIVILEGE,
    SALES_PRIVILEGE,
    SHIFTPLANNER_PRIVILEGE,
)
from shiftplan.services import rbac_service

logger = logging.getLogger(__name__)

__all__ = [
    "FULL_AUTHENTICATION",
    "HR_PRIVILEGE",
    "SALES_PRIVILEGE",
    "SHIFTPLANNER_PRIVILEGE",
    "Authentication",
    "PermissionService",
]


@dataclass(frozen=True)
class Authentication:
    """Who is calling.

    full marks internal calls (background jobs, service to service) that
    bypass privilege checks. Otherwise user_id identifies the logged in user.
    """

    user_id: uuid.UUID | None = None
    full: bool = False

    @classmethod
    def for_user(cls, user_id: uuid.UUID) -> "Authentication":
        return cls(user_id=user_id)


FULL_AUTHENTICATION = Authentication(full=True)


class PermissionService:
    """Checks privileges of the calling user."""

    def __init__(self, session_factory: SessionFactory) -> None:
        self.session_factory = session_factory

    def _load_user(self, db: Session, auth: Authentication) -> User | None:
        if auth.user_id is None:
            return None
        user = db.get(User, auth.user_id)
        if user is None or not user.is_active:
            return None
        return user

    async def check_permission(
        self, privilege: str, auth: Authentication, tx: Session | None = None
    ) -> None:
        """Raise ForbiddenError unless the caller holds privilege."""
        if auth.full:
            return
        with session_scope(self.session_factory, tx) as db:
            user = self._load_user(db, auth)
            if user is None or not rbac_service.user_has_permission(
                db, user, privilege
            ):
                logger.info(f"User {auth.user_id} lacks privilege {privilege}")
                raise ForbiddenError(privilege)

    async def check_any_permission(
        self,
        privileges: list[str],
        auth: Authentication,
        tx: Session | None = None,
    ) -> None:
        """Raise ForbiddenError unless the caller holds one of privileges."""
        for privilege in privileges:
            try:
                await self.check_permission(privilege, auth, tx)
                return
            except ForbiddenError:
                continue
        raise ForbiddenError(" or ".join(privileges))

    async def current_user_name(
        self, auth: Authentication, tx: Session | None = None
    ) -> str:
        """Name stamped into created_by / deleted_by."""
        if auth.full:
            return "system"
        with session_scope(self.session_factory, tx) as db:
            user = self._load_user(db, auth)
            if user is None:
                raise ForbiddenError()
            return user.username

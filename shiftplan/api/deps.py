# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""API dependencies for dependency injection."""

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from shiftplan.config import settings
from shiftplan.database import SessionLocal, get_db
from shiftplan.models import User
from shiftplan.services import auth_service
from shiftplan.services.container import Services, build_services
from shiftplan.services.permission_service import Authentication

__all__ = [
    "get_authentication",
    "get_current_user",
    "get_db",
    "get_services",
]

_services: Services | None = None


def get_services() -> Services:
    """Get the application wide service container."""
    global _services
    if _services is None:
        _services = build_services(SessionLocal)
    return _services


def get_current_user(
    request: Request,
    db: Session = Depends(get_db),
) -> User:
    """Get current authenticated user from session cookie."""
    token = request.cookies.get(settings.session_cookie_name)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    session_obj = auth_service.get_session(db, token)
    if not session_obj:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired session",
        )

    user = auth_service.get_user_by_id(db, session_obj.user_id)
    if not user or not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found or inactive",
        )

    return user


def get_authentication(
    current_user: User = Depends(get_current_user),
) -> Authentication:
    """Authentication handed to the service layer."""
    return Authentication.for_user(current_user.id)

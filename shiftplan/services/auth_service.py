# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Session lookup for cookie authentication.

Users log in through the external identity provider, which creates the
session rows read here.
"""

import uuid
from datetime import datetime, timedelta

from sqlalchemy.orm import Session

from shiftplan.models import Session as SessionModel
from shiftplan.models import User

SESSION_EXPIRY_DAYS = 7


def create_session(db: Session, user_id: uuid.UUID) -> str:
    """Create a new session for a user."""
    token = str(uuid.uuid4())
    expires_at = datetime.utcnow() + timedelta(days=SESSION_EXPIRY_DAYS)

    db.add(SessionModel(user_id=user_id, token=token, expires_at=expires_at))
    db.commit()
    return token


def get_session(db: Session, token: str) -> SessionModel | None:
    """Get a valid session by token."""
    session = db.query(SessionModel).filter(SessionModel.token == token).first()
    if not session:
        return None
    if session.is_expired(datetime.utcnow()):
        db.delete(session)
        db.commit()
        return None
    return session


def get_user_by_id(db: Session, user_id: uuid.UUID) -> User | None:
    """Get user by ID."""
    return db.query(User).filter(User.id == user_id).first()

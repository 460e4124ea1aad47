# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Database engine and session handling."""

import logging
from collections.abc import Callable, Generator, Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from shiftplan.config import settings
from shiftplan.errors import DatabaseQueryError

logger = logging.getLogger(__name__)

connect_args = (
    {"check_same_thread": False} if settings.database_url.startswith("sqlite") else {}
)
engine = create_engine(settings.database_url, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

SessionFactory = Callable[[], Session]


def get_db() -> Generator[Session]:
    """Get database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def session_scope(
    session_factory: SessionFactory, tx: Session | None = None
) -> Iterator[Session]:
    """Provide a session for one unit of work.

    When tx is given the work joins the caller's transaction and is only
    flushed; the caller decides when to commit. Otherwise a private session is
    opened, committed on success and rolled back on failure.

    Storage failures are re-raised as DatabaseQueryError.
    """
    if tx is not None:
        try:
            yield tx
            tx.flush()
        except SQLAlchemyError as e:
            logger.error(f"Database error in caller transaction: {e}")
            raise DatabaseQueryError(str(e)) from e
        return

    session = session_factory()
    try:
        yield session
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(f"Database error: {e}")
        raise DatabaseQueryError(str(e)) from e
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()

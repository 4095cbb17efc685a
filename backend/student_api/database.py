"""Database engine and helpers.

This module configures the SQLModel/SQLAlchemy engine from the
`DATABASE_URL` setting and provides the bootstrap and session helpers
used by the application and tests. The engine's pool is the single
shared store connection; nothing here pools or serializes on top of it.
"""

import logging
from typing import Optional

from sqlalchemy.engine import Engine
from sqlalchemy.exc import DisconnectionError, OperationalError
from sqlmodel import Session, SQLModel, create_engine

from . import models  # noqa: F401  registers the students table on SQLModel.metadata
from .config import settings
from .exceptions import StoreUnavailableError

logger = logging.getLogger("student_api.database")

STORE_ERRORS = (OperationalError, DisconnectionError)


def build_engine(url: str, echo: bool = False) -> Engine:
    """Create an engine for `url`.

    SQLite connections are shared across the server's worker threads, so
    the same-thread check is disabled for them as the SQLite driver
    requires.
    """
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, echo=echo, connect_args=connect_args)


engine = build_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)


def init_store(bind: Optional[Engine] = None) -> None:
    """Open the store once and make sure the `students` table exists.

    Raises `StoreUnavailableError` when the connection cannot be
    established; callers at bootstrap treat this as fatal.
    """
    bind = bind or engine
    try:
        with bind.connect() as conn:
            conn.exec_driver_sql("SELECT 1")
        SQLModel.metadata.create_all(bind)
    except STORE_ERRORS as exc:
        logger.error("store_connect_failed url=%s error=%s", bind.url.render_as_string(hide_password=True), exc)
        raise StoreUnavailableError("could not connect to the student store") from exc
    logger.info("store_connected url=%s", bind.url.render_as_string(hide_password=True))


def get_session():
    """Yield a database `Session` for FastAPI dependency injection.

    The generator yields a session and ensures it is closed when the
    request scope finishes.
    """
    with Session(engine) as session:
        yield session

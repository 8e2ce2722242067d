"""
Engine, session factory and the transaction scope used by every repository call.
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from projects.core.config import settings
from projects.core.exceptions import DbException
from projects.core.logging import logger
from projects.db.base import Base


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    try:
        cursor.execute("PRAGMA foreign_keys=ON")
    finally:
        cursor.close()


def build_engine(url: str, **kwargs) -> Engine:
    """Create an engine; sqlite engines get FK enforcement on every connection."""
    is_sqlite = url.startswith("sqlite")
    if is_sqlite:
        connect_args = kwargs.pop("connect_args", {})
        connect_args.setdefault("check_same_thread", False)
        kwargs["connect_args"] = connect_args
    eng = create_engine(url, **kwargs)
    if is_sqlite:
        event.listen(eng, "connect", _enable_sqlite_foreign_keys)
    return eng


engine = build_engine(
    settings.DATABASE_URL,
    echo=settings.DB_ECHO,
    pool_pre_ping=settings.DB_POOL_PRE_PING,
)

SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)


def init_db(bind: Engine | None = None) -> None:
    # dev/test bootstrap only; production schema is managed outside this package
    from projects.db import models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


def _rollback_quietly(db: Session) -> None:
    try:
        db.rollback()
    except Exception as e:
        logger.warning("transaction_rollback_failed", error=str(e))


@contextmanager
def transaction(session_factory: sessionmaker | None = None) -> Iterator[Session]:
    """One session, one transaction.

    Commits when the block exits normally. Any exception rolls back and is
    re-raised as ``DbException`` with the original as its cause. A failing
    rollback never replaces the original error. The session is always closed.
    """
    db: Session = (session_factory or SessionLocal)()
    try:
        try:
            db.begin()
            yield db
            db.commit()
        except DbException:
            _rollback_quietly(db)
            raise
        except Exception as e:
            logger.error("transaction_failed", error=str(e), error_type=type(e).__name__)
            _rollback_quietly(db)
            raise DbException(e) from e
    finally:
        db.close()

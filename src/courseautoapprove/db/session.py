# src/courseautoapprove/db/session.py
from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from courseautoapprove.core.config import settings

# ---------------------------------------------------------------------------
# Engine configuration
#   Built lazily so importing the package never touches the database.
# ---------------------------------------------------------------------------

_engine: Optional[Engine] = None
_sessionmaker: Optional[sessionmaker[Session]] = None


def make_engine(url: str | None = None, echo: bool | None = None) -> Engine:
    return create_engine(
        url or settings.DATABASE_URL,
        echo=settings.DB_ECHO if echo is None else echo,
        pool_pre_ping=True,  # protects against stale connections
        future=True,
    )


def configure(url: str | None = None, echo: bool | None = None) -> sessionmaker[Session]:
    """(Re)build the app-wide engine and sessionmaker."""
    global _engine, _sessionmaker
    if _engine is not None:
        _engine.dispose()
    _engine = make_engine(url, echo)
    _sessionmaker = sessionmaker(bind=_engine, expire_on_commit=False, class_=Session)
    return _sessionmaker


def get_engine() -> Engine:
    if _engine is None:
        configure()
    return _engine  # type: ignore[return-value]


def get_sessionmaker() -> sessionmaker[Session]:
    """Return the app-wide sessionmaker."""
    if _sessionmaker is None:
        configure()
    return _sessionmaker  # type: ignore[return-value]


@contextmanager
def session_scope(factory: sessionmaker[Session] | None = None) -> Iterator[Session]:
    """Transactional scope: commit on success, roll back and re-raise on error."""
    session = (factory or get_sessionmaker())()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def create_all(engine: Engine | None = None) -> None:
    from courseautoapprove.db import models  # noqa: F401  (register tables)
    from courseautoapprove.db.base import Base

    Base.metadata.create_all(engine or get_engine())

"""SQLite connection handling for the content store.

The database file is opened the first time a path is used. After that
every request for the same path shares one engine and one connection.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from fashion_dashboard.core.config import Settings
from fashion_dashboard.db.schema import Base

# Resolved db path -> (engine, session factory)
_stores: dict[str, tuple[Engine, sessionmaker]] = {}


def _open_store(db_path: Path | None) -> tuple[Engine, sessionmaker]:
    db_path = Path(db_path) if db_path is not None else Settings.from_env().db_path
    key = str(db_path.resolve())

    store = _stores.get(key)
    if store is None:
        db_path.parent.mkdir(parents=True, exist_ok=True)
        engine = create_engine(
            f"sqlite:///{db_path}",
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        store = (engine, sessionmaker(bind=engine))
        _stores[key] = store
    return store


def get_engine(db_path: Path | None = None) -> Engine:
    """Return the shared engine for a content database.

    StaticPool keeps exactly one SQLite connection per file, and
    check_same_thread=False lets FastAPI's threadpool use it.

    Args:
        db_path: SQLite file. Defaults to FASHION_DASHBOARD_DB_PATH.
    """
    return _open_store(db_path)[0]


def get_session(db_path: Path | None = None) -> Session:
    """Open a session on the shared connection. The caller closes it."""
    return _open_store(db_path)[1]()


@contextmanager
def get_db_session(db_path: Path | None = None) -> Generator[Session, None, None]:
    """Session scope for writes such as the CSV import.

    The block's changes are committed together, or rolled back if it
    raises, so a failed import leaves the previous content in place.
    """
    session = get_session(db_path)
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db(db_path: Path | None = None) -> None:
    """Create the content table and its lookup indexes if they are missing."""
    Base.metadata.create_all(get_engine(db_path))


def dispose_engines() -> None:
    """Close every open content database."""
    for engine, _ in _stores.values():
        engine.dispose()
    _stores.clear()

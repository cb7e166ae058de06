"""
leadscore/db/session.py — SQLAlchemy engine and session factory.

Usage:
    from leadscore.db.session import get_db

    # As a FastAPI dependency:
    def my_route(db: Session = Depends(get_db)):
        ...

    # In scripts:
    with get_session() as db:
        ...
"""

from contextlib import contextmanager
from typing import Any, Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from leadscore.config import settings


def _is_sqlite_memory(database_url: str) -> bool:
    return database_url in ("sqlite://", "sqlite:///:memory:")


def build_engine(database_url: str) -> Engine:
    """Create an engine with pool settings appropriate for the backend."""
    kwargs: dict[str, Any] = {"echo": False}  # set True to log all SQL
    is_sqlite = database_url.startswith("sqlite")

    if is_sqlite:
        # SQLite connections are handed across FastAPI's threadpool workers
        kwargs["connect_args"] = {"check_same_thread": False}
        if _is_sqlite_memory(database_url):
            # one shared connection, otherwise every thread sees its own empty DB
            kwargs["poolclass"] = StaticPool
    else:
        kwargs.update(
            pool_pre_ping=True,      # reconnect on stale connections
            pool_size=5,
            max_overflow=10,
        )

    engine = create_engine(database_url, **kwargs)

    if is_sqlite:
        # Let SQLAlchemy own BEGIN so SAVEPOINTs (create_score_if_absent) work
        @event.listens_for(engine, "connect")
        def _disable_pysqlite_transactions(dbapi_connection, connection_record):
            dbapi_connection.isolation_level = None

        @event.listens_for(engine, "begin")
        def _emit_begin(conn):
            conn.exec_driver_sql("BEGIN")

    return engine


engine = build_engine(settings.database_url)

SessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
    expire_on_commit=False,
)


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency that yields a DB session and ensures it's closed."""
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


@contextmanager
def get_session() -> Generator[Session, None, None]:
    """Context manager for use in scripts and services (non-FastAPI code)."""
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()

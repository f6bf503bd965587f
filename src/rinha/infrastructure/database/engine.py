"""Database engine setup.

SQLAlchemy Core (not ORM) is used: the repository issues one statement per
call against a caller-owned connection, so there is no benefit from session
management or identity maps. Any SQLAlchemy URL works; SQLite URLs get WAL
mode for concurrent readers and case-sensitive LIKE, matching PostgreSQL.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine

from rinha.infrastructure.database.schema import metadata


def create_db_engine(url: str) -> Engine:
    """Create an engine for *url*. The caller owns its connection pool."""
    engine = create_engine(url, echo=False)

    if engine.dialect.name == "sqlite":

        @event.listens_for(engine, "connect")
        def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA journal_mode=WAL")
            cursor.execute("PRAGMA case_sensitive_like=ON")
            cursor.close()

    return engine


def init_database(url: str) -> Engine:
    """Create the ``users`` table if it does not exist and return the engine.

    Idempotent, safe to call on an existing database. This is not a
    migration system: existing tables are left as they are.
    """
    engine = create_db_engine(url)
    metadata.create_all(engine)
    return engine

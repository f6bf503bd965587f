"""Database engine and schema via SQLAlchemy Core."""

from rinha.infrastructure.database.engine import create_db_engine, init_database
from rinha.infrastructure.database.schema import metadata, new_person_id, users

__all__ = [
    "create_db_engine",
    "init_database",
    "metadata",
    "new_person_id",
    "users",
]

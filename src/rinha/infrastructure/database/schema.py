"""SQLAlchemy Core table definitions for the rinha database.

A single ``users`` table holds one row per Person. ``stack`` is the JSON
encoded tag list and ``search`` the derived text used for substring search.
"""

from __future__ import annotations

import uuid

from sqlalchemy import Column, Index, MetaData, String, Table, Text

metadata = MetaData()


def new_person_id() -> str:
    """Identifier assigned to each inserted row (UUID4, canonical text)."""
    return str(uuid.uuid4())


users = Table(
    "users",
    metadata,
    Column("id", Text, primary_key=True, default=new_person_id),
    Column("username", String(32), nullable=False, unique=True),
    Column("name", String(100), nullable=False),
    Column("birth_date", Text, nullable=False),
    Column("stack", Text),  # JSON array
    Column("search", Text, nullable=False),
)

Index("ix_users_search", users.c.search)

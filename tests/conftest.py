"""Shared pytest fixtures and test helpers for rinha tests."""

from __future__ import annotations

from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from click.testing import CliRunner
from sqlalchemy import Connection
from sqlalchemy.engine import Engine

from rinha.domain.person import Person
from rinha.domain.values import Name, Stack, Username
from rinha.infrastructure.database.engine import init_database
from rinha.infrastructure.repositories.people import PeopleRepository


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def db_url(tmp_path: Path) -> str:
    return f"sqlite:///{tmp_path / 'test.db'}"


@pytest.fixture
def db_engine(db_url: str) -> Generator[Engine]:
    """Initialized SQLite engine with the users table created."""
    engine = init_database(db_url)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def conn(db_engine: Engine) -> Generator[Connection]:
    """One open connection, owned by the test."""
    with db_engine.connect() as connection:
        yield connection


@pytest.fixture
def repo(conn: Connection) -> PeopleRepository:
    return PeopleRepository(conn)


@pytest.fixture
def make_person() -> Callable[..., Person]:
    """Factory for valid, not-yet-persisted people."""

    def _make(
        username: str = "zeh",
        name: str = "Jose",
        birthdate: str = "2000-01-01",
        stack: list[str] | None = None,
    ) -> Person:
        return Person(
            username=Username(data=username),
            name=Name(data=name),
            birthdate=birthdate,
            stack=[Stack(data=tag) for tag in stack] if stack is not None else None,
        )

    return _make


@pytest.fixture
def _isolated_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run the CLI from a temp directory with no inherited rinha config.

    Use via ``@pytest.mark.usefixtures("_isolated_root")``; the default
    SQLite database then lands in ``tmp_path``.
    """
    monkeypatch.chdir(tmp_path)
    for var in ("RINHA_CONFIG", "RINHA_DATABASE__URL", "RINHA_CODEC__STRICT_STACK"):
        monkeypatch.delenv(var, raising=False)

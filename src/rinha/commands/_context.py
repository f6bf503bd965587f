"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides lazy engine initialization, a per-command
repository, and centralized result emission (stdout/stderr routing + exit
codes).
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, NoReturn

import click

from rinha.infrastructure.repositories.result import ResultStatus
from rinha.output.formatters import format_result

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

    from rinha.config.settings import RinhaSettings
    from rinha.infrastructure.repositories.people import PeopleRepository
    from rinha.infrastructure.repositories.result import RepoResult

# Exit codes: a missing or invalid record is the caller's problem (1),
# a store failure is the environment's (2).
EXIT_FAILURE = 1
EXIT_STORE_ERROR = 2


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``. The engine is created
    lazily on first use so ``--help`` and ``--version`` never touch the
    database.
    """

    def __init__(self, settings: RinhaSettings) -> None:
        self.settings = settings
        self._engine: Engine | None = None

        from rinha.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def engine(self) -> Engine:
        """The database engine (created lazily on first access)."""
        if self._engine is None:
            from rinha.infrastructure.database.engine import create_db_engine

            self._engine = create_db_engine(self.settings.database_url)
        return self._engine

    @contextmanager
    def repository(self) -> Iterator[PeopleRepository]:
        """Yield a repository bound to a fresh connection, closed on exit."""
        from rinha.infrastructure.repositories.people import PeopleRepository

        with self.engine.connect() as conn:
            yield PeopleRepository(
                conn,
                options=self.settings.codec,
                search_limit=self.settings.database.search_limit,
            )

    def close(self) -> None:
        """Dispose of the engine's connection pool, if one was created."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None

    def emit(self, result: RepoResult) -> None:
        """Format and output a RepoResult with correct exit semantics.

        * Success: writes to stdout, returns normally.
        * ``store_error``: writes to stderr, exits with code 2.
        * Anything else: writes to stderr, exits with code 1.
        """
        output = format_result(result, json_output=self.settings.json_output)
        if result.ok:
            click.echo(output)
            return
        click.echo(output, err=True)
        if result.status is ResultStatus.STORE_ERROR:
            raise SystemExit(EXIT_STORE_ERROR)
        raise SystemExit(EXIT_FAILURE)

    def fail(self, op: str, message: str) -> NoReturn:
        """Report an input error for *op* and exit with code 1."""
        click.echo(f"ERROR: {op} - {message}", err=True)
        raise SystemExit(EXIT_FAILURE)

"""Command: database initialization (named init_cmd to avoid shadowing builtins)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
from sqlalchemy.exc import SQLAlchemyError

from rinha.commands._base import RinhaCommand
from rinha.infrastructure.database.engine import init_database

if TYPE_CHECKING:
    from rinha.commands._context import AppContext

_INIT_EXAMPLES = """\
  rinha init
  RINHA_DATABASE__URL=postgresql+psycopg://app@localhost/rinha rinha init"""


@click.command("init", cls=RinhaCommand, examples=_INIT_EXAMPLES)
@click.pass_obj
def init_cmd(app: AppContext) -> None:
    """Create the users table if it does not exist."""
    try:
        engine = init_database(app.settings.database_url)
    except SQLAlchemyError as exc:
        raise click.ClickException(f"Could not initialize database: {exc}") from exc
    try:
        click.echo(f"Initialized {engine.url.render_as_string(hide_password=True)}")
    finally:
        engine.dispose()

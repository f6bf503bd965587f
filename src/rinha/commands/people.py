"""Commands: create, get, search, and count people."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click

from rinha.commands._base import RinhaCommand
from rinha.domain.codec import person_from_json_text

if TYPE_CHECKING:
    from rinha.commands._context import AppContext


@click.command(
    cls=RinhaCommand,
    examples="""\
  rinha create '{"apelido": "zeh", "nome": "Jose", "nascimento": "2000-01-01"}'
  echo '{"apelido": "ana", "nome": "Ana", "nascimento": "1990-05-10", "stack": ["Go"]}' \\
    | rinha create -""",
)
@click.argument("payload", default="-")
@click.pass_obj
def create(app: AppContext, payload: str) -> None:
    """Create a person from a JSON document (argument or stdin)."""
    raw = sys.stdin.read() if payload == "-" else payload
    person = person_from_json_text(raw, app.settings.codec)
    if person is None:
        app.fail("create", "invalid person document")
    with app.repository() as repo:
        result = repo.insert(person)
    app.emit(result)


@click.command(
    cls=RinhaCommand,
    examples="""\
  rinha get 3f1c9a4e-6f0e-4d3e-9a53-2b1f0c8e7d21
  rinha --json get 3f1c9a4e-6f0e-4d3e-9a53-2b1f0c8e7d21""",
)
@click.argument("person_id")
@click.pass_obj
def get(app: AppContext, person_id: str) -> None:
    """Show the person with PERSON_ID."""
    with app.repository() as repo:
        result = repo.get(person_id)
    app.emit(result)


@click.command(
    cls=RinhaCommand,
    examples="""\
  rinha search Node
  rinha --json search zeh""",
)
@click.argument("term")
@click.pass_obj
def search(app: AppContext, term: str) -> None:
    """List people whose username, name, or stack contains TERM."""
    with app.repository() as repo:
        result = repo.search(term)
    app.emit(result)


@click.command(cls=RinhaCommand)
@click.pass_obj
def count(app: AppContext) -> None:
    """Print the number of stored people."""
    with app.repository() as repo:
        result = repo.count()
    app.emit(result)

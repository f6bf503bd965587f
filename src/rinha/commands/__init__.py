"""Subcommand modules for rinha.

Provides register_commands() which uses deferred imports to keep
``rinha --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from rinha.commands.init_cmd import init_cmd
    from rinha.commands.people import count, create, get, search

    cli.add_command(init_cmd)
    cli.add_command(create)
    cli.add_command(get)
    cli.add_command(search)
    cli.add_command(count)

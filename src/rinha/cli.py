"""Root CLI group for rinha with global flags and command registration."""

from __future__ import annotations

import click

from rinha import __version__
from rinha.commands import register_commands
from rinha.commands._context import AppContext
from rinha.config.settings import RinhaSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="rinha")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """rinha — Person record validation and storage."""
    ctx.ensure_object(dict)
    settings = RinhaSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
    )
    app = AppContext(settings)
    ctx.obj = app
    ctx.call_on_close(app.close)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)

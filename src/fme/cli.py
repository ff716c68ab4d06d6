"""Root CLI group for fme with global flags and command registration."""

from __future__ import annotations

import click

from fme import __version__
from fme.commands import register_commands
from fme.commands._context import AppContext
from fme.config.settings import FmeSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="fme")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Only print changed paths and errors.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and a summary.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-n", "--dry-run", is_flag=True, help="Report changes without writing files.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    dry_run: bool,
    config_path: str | None,
) -> None:
    """fme — CLI tool for managing markdown YAML frontmatter."""
    settings = FmeSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        dry_run=dry_run,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)

"""Subcommand modules for fme.

Provides register_commands() which uses deferred imports to keep
``fme --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the tag and field commands on the root CLI group."""
    from fme.commands.fields import remove_aliases, remove_id
    from fme.commands.tags import add, clear, remove, replace

    cli.add_command(add)
    cli.add_command(remove)
    cli.add_command(replace)
    cli.add_command(clear)
    cli.add_command(remove_aliases)
    cli.add_command(remove_id)

"""Commands: drop blank aliases and id fields."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from fme.commands._base import FmeCommand, target_options

if TYPE_CHECKING:
    from fme.commands._context import AppContext


@click.command(
    "remove-aliases",
    cls=FmeCommand,
    examples="""\
  fme remove-aliases --dir notes
  fme remove-aliases -d notes -r""",
)
@target_options
@click.pass_obj
def remove_aliases(app: AppContext, directory: Path, recursive: bool) -> None:
    """Remove unused (empty) alias fields."""
    from fme.services.edit import EditService

    app.emit(EditService(app.settings).apply("remove_aliases", directory, recursive=recursive))


@click.command(
    "remove-id",
    cls=FmeCommand,
    examples="""\
  fme remove-id --dir notes
  fme remove-id -d notes -r""",
)
@target_options
@click.pass_obj
def remove_id(app: AppContext, directory: Path, recursive: bool) -> None:
    """Remove the id field."""
    from fme.services.edit import EditService

    app.emit(EditService(app.settings).apply("remove_id", directory, recursive=recursive))

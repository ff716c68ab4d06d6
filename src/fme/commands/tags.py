"""Commands: add, remove, replace, and clear tags."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from fme.commands._base import FmeCommand, target_options

if TYPE_CHECKING:
    from fme.commands._context import AppContext


@click.command(
    cls=FmeCommand,
    examples="""\
  fme add project/alpha --dir notes
  fme add draft review -d notes -r
  fme --dry-run add inbox -d notes""",
)
@click.argument("tags", nargs=-1, required=True)
@target_options
@click.pass_obj
def add(app: AppContext, tags: tuple[str, ...], directory: Path, recursive: bool) -> None:
    """Add tag(s) to notes."""
    from fme.services.edit import EditService

    app.emit(
        EditService(app.settings).apply("add", directory, recursive=recursive, tags=list(tags))
    )


@click.command(
    cls=FmeCommand,
    examples="""\
  fme remove draft --dir notes
  fme remove draft review -d notes -r""",
)
@click.argument("tags", nargs=-1, required=True)
@target_options
@click.pass_obj
def remove(app: AppContext, tags: tuple[str, ...], directory: Path, recursive: bool) -> None:
    """Remove tag(s) from notes."""
    from fme.services.edit import EditService

    app.emit(
        EditService(app.settings).apply("remove", directory, recursive=recursive, tags=list(tags))
    )


@click.command(
    cls=FmeCommand,
    examples="""\
  fme replace todo done --dir notes
  fme replace project/old project/new -d notes -r""",
)
@click.argument("initial_tag")
@click.argument("new_tag")
@target_options
@click.pass_obj
def replace(
    app: AppContext,
    initial_tag: str,
    new_tag: str,
    directory: Path,
    recursive: bool,
) -> None:
    """Replace a tag with another.

    Every existing tag contained in INITIAL_TAG is removed, then NEW_TAG
    is added once.
    """
    from fme.services.edit import EditService

    app.emit(
        EditService(app.settings).apply(
            "replace",
            directory,
            recursive=recursive,
            from_tag=initial_tag,
            to_tag=new_tag,
        )
    )


@click.command(
    cls=FmeCommand,
    examples="""\
  fme clear --dir notes
  fme clear -d notes -r""",
)
@target_options
@click.pass_obj
def clear(app: AppContext, directory: Path, recursive: bool) -> None:
    """Remove all tags from notes."""
    from fme.services.edit import EditService

    app.emit(EditService(app.settings).apply("clear", directory, recursive=recursive))

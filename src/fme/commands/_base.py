"""Shared Click pieces for the edit commands.

``FmeCommand`` accepts an ``examples`` string and exposes it through an
eager ``--examples`` flag, keeping ``--help`` short. ``target_options``
adds the ``--dir``/``--recursive`` pair every edit command takes.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

import click

F = TypeVar("F", bound=Callable[..., Any])


def _show_examples(examples: str) -> Callable[[click.Context, click.Parameter, bool], None]:
    def callback(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    return callback


class FmeCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=_show_examples(examples),
                    help="Show usage examples.",
                )
            )


def target_options(func: F) -> F:
    """Add ``-d/--dir`` (required) and ``-r/--recursive`` to a command."""
    func = click.option(
        "-r",
        "--recursive",
        is_flag=True,
        help="Descend into subdirectories.",
    )(func)
    func = click.option(
        "-d",
        "--dir",
        "directory",
        required=True,
        type=click.Path(file_okay=False, path_type=Path),
        help="Directory containing the notes.",
    )(func)
    return func

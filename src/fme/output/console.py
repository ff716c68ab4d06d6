"""Rich Console factory and theme for fme output.

Consoles render into a StringIO buffer so renderers keep a plain
``-> str`` contract. Outside a terminal (pipes, CliRunner) Rich emits no
color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

FME_THEME = Theme(
    {
        "fme.ok": "bold green",
        "fme.error": "bold red",
        "fme.op": "bold cyan",
        "fme.key": "dim",
        "fme.path": "bold",
        "fme.updated": "green",
    }
)


def create_console(*, no_color: bool = False) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
    """
    return Console(
        file=StringIO(),
        theme=FME_THEME,
        no_color=no_color,
        highlight=False,
        soft_wrap=True,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()

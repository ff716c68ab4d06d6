"""Rich renderers for ServiceResult.

Each renderer writes to a StringIO-backed Rich Console; the caller gets
plain text back. Paths are printed as :class:`rich.text.Text` so brackets
in file names are never read as markup.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text

from fme.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from fme.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult as the human-readable report."""
    console = create_console()
    if result.ok:
        _render_edit(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet``: changed paths and failures."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    lines = list(result.data.get("updated", []))
    lines.extend(_error_line(err) for err in result.data.get("errors", []))
    return "\n".join(lines)


# ── Helpers ───────────────────────────────────────────────────────────


def _error_line(err: dict[str, Any]) -> str:
    return f"Error processing {err['path']}: {err['error']}"


def _field(console: Console, key: str, value: Any) -> None:
    console.print(Text(f"  {key}: ", style="fme.key"), Text(str(value)), sep="")


# ── Renderers ─────────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="fme.error"),
        Text(f"  {result.op}", style="fme.op"),
        Text(f" — {msg}"),
        sep="",
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


def _render_edit(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """``Updated: <path>`` per changed file, then one line per failed file."""
    data = result.data
    label = "Would update: " if data.get("dry_run") else "Updated: "
    for path in data.get("updated", []):
        console.print(Text(label, style="fme.updated"), Text(path, style="fme.path"), sep="")
    for err in data.get("errors", []):
        console.print(Text(_error_line(err), style="fme.error"))

    if verbose:
        console.print(Text("OK", style="fme.ok"), Text(f"  {result.op}", style="fme.op"), sep="")
        _field(console, "dir", data.get("dir", ""))
        _field(console, "scanned", data.get("scanned", 0))
        _field(console, "updated", len(data.get("updated", [])))
        _field(console, "unchanged", data.get("unchanged", 0))
        _field(console, "errors", len(data.get("errors", [])))

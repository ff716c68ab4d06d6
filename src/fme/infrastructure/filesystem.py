"""Filesystem operations for note discovery and text I/O.

Documents are read and written with newline translation disabled so a
note's body keeps its original line endings byte-for-byte.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

DEFAULT_EXTENSIONS: tuple[str, ...] = (".md",)


# ---------------------------------------------------------------------------
# File I/O
# ---------------------------------------------------------------------------


def read_document(path: Path) -> str:
    """Read a note as UTF-8 text, keeping ``\\r\\n`` intact."""
    with path.open(encoding="utf-8", newline="") as fh:
        return fh.read()


def write_document(path: Path, content: str) -> None:
    """Overwrite a note with *content* as UTF-8 text."""
    path.write_text(content, encoding="utf-8", newline="")


# ---------------------------------------------------------------------------
# Discovery
# ---------------------------------------------------------------------------


def find_markdown_files(
    root: Path,
    *,
    recursive: bool = False,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    skip_dirs: Iterable[str] = (),
) -> list[Path]:
    """Discover note files under *root*.

    Flat mode lists direct children only; recursive mode walks the whole
    subtree, skipping any directory named in *skip_dirs*. Suffix matching
    is case-sensitive.
    """
    suffixes = frozenset(extensions)
    skipped = frozenset(skip_dirs)
    candidates = root.rglob("*") if recursive else root.iterdir()

    results: list[Path] = []
    for path in candidates:
        if not path.is_file():
            continue
        if path.suffix not in suffixes:
            continue
        if skipped and any(part in skipped for part in path.relative_to(root).parts[:-1]):
            continue
        results.append(path)

    return sorted(results)

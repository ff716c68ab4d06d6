"""Shared pytest fixtures and test helpers for fme tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from fme.config.settings import FmeSettings


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep FME_* variables and any real fme.toml out of every test."""
    for key in ("FME_CONFIG", "FME_DRY_RUN", "FME_VERBOSE", "FME_QUIET", "FME_JSON_OUTPUT"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo the handler each CLI invocation installs on the root logger.

    CliRunner closes its stderr capture after the run; a handler left
    pointing at it would break logging in later tests.
    """
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    fme_level = logging.getLogger("fme").level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    logging.getLogger("fme").setLevel(fme_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def notes_dir(tmp_path: Path) -> Path:
    """Empty directory to hold test notes."""
    path = tmp_path / "notes"
    path.mkdir()
    return path


@pytest.fixture
def settings(tmp_path: Path) -> FmeSettings:
    """Default settings (no config file, writes enabled)."""
    return FmeSettings.from_cli(search_from=tmp_path)


def write_note(directory: Path, name: str, content: str) -> Path:
    """Write *content* to ``directory/name`` byte-for-byte and return the path."""
    path = directory / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content.encode("utf-8"))
    return path


def read_note(path: Path) -> str:
    """Read a note back without newline translation."""
    return path.read_bytes().decode("utf-8")

"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, fme.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class FilesConfig(BaseModel):
    """[files] section — which files the edit commands touch."""

    model_config = {"frozen": True}

    extensions: list[str] = Field(default_factory=lambda: [".md"])
    skip_dirs: list[str] = Field(default_factory=list)

"""Config file discovery.

fme.toml is looked up from the working directory towards the filesystem
root, the way git finds .git/. FME_CONFIG, when set, wins outright.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "fme.toml"
CONFIG_ENV_VAR = "FME_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest fme.toml at or above *start*, or None.

    A set but dangling FME_CONFIG disables the walk-up.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    start_dir = (start or Path.cwd()).resolve()
    for directory in (start_dir, *start_dir.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None

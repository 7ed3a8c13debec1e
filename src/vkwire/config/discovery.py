"""Locating ``vkwire.toml``.

Lookup order: ``VKWIRE_CONFIG`` when set (even if it names a missing
file, so a test or CI job can opt out of any config), then the nearest
``vkwire.toml`` from the start directory up to the filesystem root.
The ``--config`` flag bypasses discovery entirely.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "vkwire.toml"
CONFIG_ENV_VAR = "VKWIRE_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), or None."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        explicit = Path(env_path)
        return explicit if explicit.is_file() else None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None

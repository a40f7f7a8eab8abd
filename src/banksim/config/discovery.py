"""Locate ``banksim.toml``.

An explicit ``BANKSIM_CONFIG`` path wins. Otherwise the search walks from
the starting directory up to the filesystem root and stops at the first
``banksim.toml``.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "banksim.toml"
CONFIG_ENV_VAR = "BANKSIM_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file for *start* (default: cwd), or None.

    A ``BANKSIM_CONFIG`` pointing at a missing file disables discovery.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None

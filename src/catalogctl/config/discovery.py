"""Config file discovery.

Walk-up finder locates catalogctl.toml, similar to how git finds .git/.
Supports the CATALOGCTL_CONFIG env var; an explicit --config path bypasses
discovery entirely (see :meth:`CatalogSettings.from_cli`).
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "catalogctl.toml"
CONFIG_ENV_VAR = "CATALOGCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for catalogctl.toml.

    Returns the path to the config file, or None if not found.
    A set CATALOGCTL_CONFIG wins over the walk-up, even when it names a
    missing file.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None

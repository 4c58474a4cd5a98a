"""Config file discovery and loading.

Lookup order for dclock.toml:

1. ``DCLOCK_CONFIG`` env var (an explicit file; missing means no config).
2. Walk up from the working directory, similar to how git finds .git/.
3. The per-user file under ``$XDG_CONFIG_HOME/dclock/`` (default
   ``~/.config/dclock/``), since a clock is usually run from anywhere.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from dclock.config.models import DclockConfig

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "dclock.toml"
CONFIG_ENV_VAR = "DCLOCK_CONFIG"


def user_config_path() -> Path:
    """Return the per-user config location (which may not exist)."""
    base = os.environ.get("XDG_CONFIG_HOME")
    root = Path(base) if base else Path.home() / ".config"
    return root / "dclock" / CONFIG_FILENAME


def find_config(start: Path | None = None) -> Path | None:
    """Locate dclock.toml, or return None if there is none."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            logger.debug("Found config at %s", candidate)
            return candidate

    fallback = user_config_path()
    if fallback.is_file():
        logger.debug("Using user config at %s", fallback)
        return fallback
    return None


def load_config(path: Path | None = None, cwd: Path | None = None) -> DclockConfig:
    """Load and validate the TOML sections without env or CLI merging.

    If *path* is None, uses find_config(*cwd*) to discover the file.
    Returns default DclockConfig if no file is found.
    """
    if path is None:
        path = find_config(cwd)
    if path is None:
        return DclockConfig()

    data: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    return DclockConfig.model_validate(data)

#!/usr/bin/env python3
"""
paths.py
-------------------
Path constants and configuration for the paste renamer.

All user state lives under a single home directory so that the watcher,
the one-shot CLI and editor integrations agree on where settings and the
focus session are kept:

    HOME/
    ├── settings.yaml   # Persisted rename template
    ├── session.yaml    # Active note + cursor (written by editor integrations)
    └── logs/           # Application logs

The home directory defaults to ``~/.paste-renamer`` and can be moved with
the ``PASTE_RENAMER_HOME`` environment variable.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
from pathlib import Path

HOME_ENV_VAR = "PASTE_RENAMER_HOME"


def _get_home_dir() -> Path:
    """
    Determine the paste renamer home directory.

    Returns:
        Path from ``PASTE_RENAMER_HOME`` if set, else ``~/.paste-renamer``
    """
    override = os.environ.get(HOME_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".paste-renamer"


# ----- Home directory -----
HOME_DIR: Path = _get_home_dir()

# ---- Settings & Session ----
SETTINGS_PATH = HOME_DIR / "settings.yaml"
SESSION_PATH = HOME_DIR / "session.yaml"

# ---- Logs ----
LOG_DIR = HOME_DIR / "logs"

# ---- Host (vault) layout ----
HOST_CONFIG_DIR = ".obsidian"
HOST_APP_CONFIG = "app.json"

#!/usr/bin/env python3
"""
settings.py
-------------------
Persisted plugin-wide settings.

The only setting is the rename template (``pattern``). It is loaded once
at startup, falling back to the built-in default when no settings file
exists, and written back on every change.

Usage:
    from paste_renamer.core.settings import Settings

    settings = Settings.load(SETTINGS_PATH)
    settings.pattern = "{{fileName}}-{{DATE:YYYYMMDD}}"
    settings.save(SETTINGS_PATH)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict

# --- Third party imports ---
import yaml

# --- Local imports ---
from paste_renamer.core.exceptions import SettingsError

DEFAULT_PATTERN = "{{DATE:YYYY.MM.DD-hhmmss}}"


@dataclass
class Settings:
    """
    Plugin-wide settings.

    Attributes:
        pattern: Rename template applied to every pasted image
    """

    pattern: str = DEFAULT_PATTERN

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Settings:
        """
        Build settings from a mapping, overriding defaults key by key.

        Unknown keys are ignored so older or newer settings files still load.

        Raises:
            SettingsError: If the pattern is not a string
        """
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in data.items() if k in known}
        pattern = values.get("pattern", DEFAULT_PATTERN)
        if not isinstance(pattern, str):
            raise SettingsError(
                f"Invalid pattern in settings: expected a string, got {type(pattern).__name__}"
            )
        return cls(**values)

    @classmethod
    def load(cls, path: Path) -> Settings:
        """
        Load settings from a YAML file.

        Args:
            path: Settings file path

        Returns:
            Settings with file values over the defaults, or the defaults
            if the file does not exist

        Raises:
            SettingsError: If the file is not valid YAML or not a mapping
        """
        path = Path(path)
        if not path.exists():
            return cls()

        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise SettingsError(f"Cannot parse settings file {path}: {e}") from e

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise SettingsError(f"Settings file {path} must contain a mapping")
        return cls.from_dict(data)

    def save(self, path: Path) -> None:
        """Write settings to ``path`` as YAML, creating parent directories."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            yaml.safe_dump(asdict(self), sort_keys=False, allow_unicode=True),
            encoding="utf-8",
        )

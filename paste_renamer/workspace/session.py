#!/usr/bin/env python3
"""
session.py
----------
Focus session: which note is being edited and where its cursor is.

The renamer never guesses the active note. Editor integrations (or the
``paste-renamer focus`` command) write the focused note and cursor to a
small YAML file; the watcher re-reads it for every event so focus
changes are picked up without a restart.

File format:
    note: /path/to/vault/Daily/2024-01-15.md
    line: 12
    ch: 0
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# --- Third party imports ---
import yaml

# --- Local imports ---
from paste_renamer.core.exceptions import SessionError


@dataclass(frozen=True)
class Focus:
    """
    Focused note and cursor.

    Attributes:
        note: Path of the focused note
        line: 0-based cursor line, None when no cursor is known
        ch: 0-based cursor column
    """

    note: Path
    line: Optional[int] = None
    ch: int = 0

    def __post_init__(self) -> None:
        if self.line is not None and self.line < 0:
            raise SessionError(f"Cursor line must be non-negative, got {self.line}")
        if self.ch < 0:
            raise SessionError(f"Cursor column must be non-negative, got {self.ch}")


class FocusSession:
    """Read and write the focus session file."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load(self) -> Optional[Focus]:
        """
        Load the current focus.

        Returns:
            Focus, or None if no session file exists

        Raises:
            SessionError: If the file is malformed
        """
        if not self.path.exists():
            return None

        try:
            data = yaml.safe_load(self.path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise SessionError(f"Cannot parse session file {self.path}: {e}") from e

        if not data:
            return None
        if not isinstance(data, dict) or not data.get("note"):
            raise SessionError(f"Session file {self.path} must name a note")

        try:
            line = data.get("line")
            return Focus(
                note=Path(data["note"]),
                line=None if line is None else int(line),
                ch=int(data.get("ch") or 0),
            )
        except (TypeError, ValueError) as e:
            raise SessionError(f"Invalid cursor in session file {self.path}: {e}") from e

    def save(self, focus: Focus) -> None:
        """Persist ``focus``, replacing any previous session."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        data = {"note": str(focus.note), "line": focus.line, "ch": focus.ch}
        self.path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")

    def clear(self) -> None:
        """Forget the focused note."""
        if self.path.exists():
            self.path.unlink()

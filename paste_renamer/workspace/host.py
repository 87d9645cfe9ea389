#!/usr/bin/env python3
"""
host.py
-------
Host adapters: the narrow seams between the rename pipeline and the
application that owns the vault.

The pipeline only depends on the protocols below. ``VaultHost`` is the
file-backed implementation used by the CLI: the vault is a directory on
disk, the active note and cursor come from a focus source (see
``session.py``) and editor changes are written straight to the note file.

Protocols:
    DocumentProvider: Active note lookup
    EditorProvider: Cursor and line access for the active note
    FileRenamer: Rename of a vault file
    LinkStyleProvider: The vault's configured link style
    Host: All of the above
    Notifier: User-visible status messages
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Protocol

# --- Local imports ---
from paste_renamer.core.exceptions import NoActiveDocumentError
from paste_renamer.core.paths import HOST_APP_CONFIG, HOST_CONFIG_DIR
from paste_renamer.paste.classifier import ObservedFile
from paste_renamer.paste.links import LinkStyle
from paste_renamer.utils.md import parse_frontmatter
from paste_renamer.workspace.session import Focus

Notifier = Callable[[str], None]

# Editor line breaks: \n, \r\n and a lone \r. Form feeds and other
# Unicode separators stay inside their line.
LINE_BREAK = re.compile(r"(?<=\n)|(?<=\r)(?!\n)")


@dataclass(frozen=True)
class Cursor:
    """0-based cursor position."""

    line: int
    ch: int = 0


@dataclass(frozen=True)
class ActiveDocument:
    """
    The note being edited.

    Attributes:
        path: Location of the note
        basename: Note name without extension
        frontmatter: Parsed front-matter mapping (empty if none)
    """

    path: Path
    basename: str
    frontmatter: Dict[str, Any] = field(default_factory=dict)


class Editor(Protocol):
    """Cursor and line access for the active note."""

    def get_cursor(self) -> Cursor:
        ...

    def get_line(self, line: int) -> str:
        ...

    def replace_range(self, line: int, from_ch: int, to_ch: int, text: str) -> None:
        """Replace characters ``from_ch:to_ch`` of ``line`` with ``text`` in one edit."""
        ...


class DocumentProvider(Protocol):
    def get_active_document(self) -> Optional[ActiveDocument]:
        ...


class EditorProvider(Protocol):
    def get_editor(self) -> Optional[Editor]:
        ...


class FileRenamer(Protocol):
    def rename_file(self, file: ObservedFile, new_path: str) -> None:
        """Move ``file`` to the vault path ``new_path``; raise on failure."""
        ...


class LinkStyleProvider(Protocol):
    def link_style(self) -> LinkStyle:
        ...


class Host(DocumentProvider, EditorProvider, FileRenamer, LinkStyleProvider, Protocol):
    """Everything the rename pipeline needs from the host application."""


class NoteEditor:
    """
    Editor over a note file on disk.

    Line endings are preserved: only the text of the edited line changes.
    """

    def __init__(self, path: Path, cursor: Cursor) -> None:
        self.path = Path(path)
        self.cursor = cursor

    def _read_lines(self) -> List[str]:
        with open(self.path, encoding="utf-8", newline="") as f:
            content = f.read()
        lines = LINE_BREAK.split(content)
        if lines and lines[-1] == "":
            lines.pop()
        return lines

    @staticmethod
    def _split_ending(raw: str) -> tuple[str, str]:
        text = raw.rstrip("\r\n")
        return text, raw[len(text):]

    def line_count(self) -> int:
        return len(self._read_lines())

    def get_cursor(self) -> Cursor:
        return self.cursor

    def get_line(self, line: int) -> str:
        lines = self._read_lines()
        if line == len(lines):
            return ""
        if not 0 <= line < len(lines):
            raise IndexError(f"Line {line} out of range for {self.path}")
        return self._split_ending(lines[line])[0]

    def replace_range(self, line: int, from_ch: int, to_ch: int, text: str) -> None:
        lines = self._read_lines()
        if line == len(lines):
            lines.append("")
        if not 0 <= line < len(lines):
            raise IndexError(f"Line {line} out of range for {self.path}")

        current, ending = self._split_ending(lines[line])
        lines[line] = current[:from_ch] + text + current[to_ch:] + ending

        with open(self.path, "w", encoding="utf-8", newline="") as f:
            f.write("".join(lines))


def read_use_markdown_links(root: Path) -> Optional[bool]:
    """
    Read the host's ``useMarkdownLinks`` preference for a vault.

    Returns:
        The configured value, or None if the vault has no app config
    """
    config_path = Path(root) / HOST_CONFIG_DIR / HOST_APP_CONFIG
    if not config_path.is_file():
        return None
    try:
        config = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError:
        return None
    if not isinstance(config, dict):
        return None
    value = config.get("useMarkdownLinks")
    return bool(value) if value is not None else None


class VaultHost:
    """
    File-backed host for a vault directory.

    Args:
        root: Vault root directory
        focus: Callable returning the current Focus (or None); called on
            every lookup so a changing session file is honoured
        link_style: Explicit link style; read from the vault config if None
    """

    def __init__(
        self,
        root: Path,
        focus: Callable[[], Optional[Focus]],
        link_style: Optional[LinkStyle] = None,
    ) -> None:
        self.root = Path(root)
        self._focus = focus
        self._link_style = link_style

    def _note_path(self, focus: Focus) -> Path:
        note = Path(focus.note).expanduser()
        return note if note.is_absolute() else self.root / note

    # ----- DocumentProvider -----
    def get_active_document(self) -> Optional[ActiveDocument]:
        focus = self._focus()
        if focus is None:
            return None
        note = self._note_path(focus)
        if not note.is_file():
            return None
        try:
            text = note.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise NoActiveDocumentError(f"Cannot read active note {note}: {e}") from e
        return ActiveDocument(path=note, basename=note.stem, frontmatter=parse_frontmatter(text))

    # ----- EditorProvider -----
    def get_editor(self) -> Optional[NoteEditor]:
        focus = self._focus()
        if focus is None or focus.line is None:
            return None
        note = self._note_path(focus)
        if not note.is_file():
            return None
        editor = NoteEditor(note, Cursor(focus.line, focus.ch))
        try:
            line_count = editor.line_count()
        except (OSError, UnicodeDecodeError) as e:
            raise NoActiveDocumentError(f"Cannot read active note {note}: {e}") from e
        if focus.line > line_count:
            return None
        return editor

    # ----- FileRenamer -----
    def rename_file(self, file: ObservedFile, new_path: str) -> None:
        source = self.root / file.path
        destination = self.root / new_path
        if not source.exists():
            raise FileNotFoundError(f"File no longer exists: {file.path}")
        if destination.exists():
            raise FileExistsError(f"Destination file already exists: {new_path}")
        destination.parent.mkdir(parents=True, exist_ok=True)
        source.rename(destination)

    # ----- Link style -----
    def link_style(self) -> LinkStyle:
        if self._link_style is not None:
            return self._link_style
        return LinkStyle.from_config(read_use_markdown_links(self.root))

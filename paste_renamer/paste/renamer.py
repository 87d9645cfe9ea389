#!/usr/bin/env python3
"""
renamer.py
----------
Rename pipeline for a single pasted image.

Sequence for an accepted file:
    1. Look up the active note and its editor; abort if either is missing
    2. Generate the new name from the rename template
    3. Rename the file through the host; abort on failure, text untouched
    4. Rewrite the embed link on the cursor line, as one edit over that line
    5. Report "Renamed <old> to <new>"

The text edit only happens after the rename has returned. There is no
rollback: if the edit fails the file stays renamed and the failure is
reported.

Usage:
    from paste_renamer.paste.renamer import PasteRenamer

    renamer = PasteRenamer(host, settings, notify=click.echo, logger=logger)
    renamer.handle_created(ObservedFile.from_path(vault, path))
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

# --- Local imports ---
from paste_renamer.core.exceptions import (
    NoActiveDocumentError,
    NoActiveEditorError,
    PasteRenamerError,
    RenameError,
)
from paste_renamer.core.logging_manager import RenamerLogger, safe_logger
from paste_renamer.core.settings import Settings
from paste_renamer.paste.classifier import ObservedFile, is_candidate
from paste_renamer.paste.links import rewrite_line
from paste_renamer.paste.naming import NameContext, generate_name, image_name_key_from
from paste_renamer.utils.fs import join, split_name
from paste_renamer.workspace.host import Host, Notifier


@dataclass(frozen=True)
class RenameOutcome:
    """
    Result of one rename operation.

    Attributes:
        old_name: File name before the rename
        new_name: File name after the rename
        new_path: Vault path after the rename
        line_updated: Whether the cursor line link was rewritten
    """

    old_name: str
    new_name: str
    new_path: str
    line_updated: bool


def _no_notice(message: str) -> None:
    pass


class PasteRenamer:
    """
    Renames pasted images and fixes the link that embeds them.

    Args:
        host: Host adapter (active note, editor, rename, link style)
        settings: Plugin settings holding the rename template
        notify: Callback for user-visible status messages
        clock: Returns the time used for DATE placeholders
        logger: Optional logger
    """

    def __init__(
        self,
        host: Host,
        settings: Settings,
        notify: Optional[Notifier] = None,
        clock: Callable[[], datetime] = datetime.now,
        logger: Optional[RenamerLogger] = None,
    ) -> None:
        self.host = host
        self.settings = settings
        self.notify = notify or _no_notice
        self.clock = clock
        self.logger = safe_logger(logger)

    def handle_created(
        self, file: ObservedFile, now: Optional[float] = None
    ) -> Optional[RenameOutcome]:
        """
        React to a file-creation event.

        Failures are reported to the user and logged, never raised, so one
        bad event cannot stop the watcher.

        Returns:
            RenameOutcome if the file was renamed, else None
        """
        if not is_candidate(file, now=now, logger=self.logger):
            return None
        try:
            return self.start_rename(file)
        except PasteRenamerError:
            return None

    def generate_new_name(self, file: ObservedFile, frontmatter: dict, basename: str) -> str:
        """Return the new file name (with extension) for ``file``."""
        context = NameContext(
            file_name=basename,
            image_name_key=image_name_key_from(frontmatter),
            now=self.clock(),
        )
        new_name = generate_name(self.settings.pattern, context, file.extension)
        self.logger.log_debug("Generated name", {"file": file.name, "new_name": new_name})
        return new_name

    def start_rename(self, file: ObservedFile) -> RenameOutcome:
        """
        Rename ``file`` and rewrite its link on the cursor line.

        Raises:
            NoActiveDocumentError: No note is focused, or it cannot be read
            NoActiveEditorError: The focused note has no editor or cursor
            RenameError: The host rename failed
            SessionError: The focus session could not be read
        """
        try:
            document = self.host.get_active_document()
            editor = self.host.get_editor()
        except PasteRenamerError as e:
            self._report(e, file)
            raise

        if document is None:
            error = NoActiveDocumentError("No active file found.")
            self._report(error, file)
            raise error
        if editor is None:
            error = NoActiveEditorError("No active editor found.")
            self._report(error, file)
            raise error

        new_name = self.generate_new_name(file, document.frontmatter, document.basename)
        new_stem, _ = split_name(new_name)
        new_path = join(file.parent, new_name)

        try:
            self.host.rename_file(file, new_path)
        except OSError as e:
            error = RenameError(f"Failed to rename {new_name}: {e}")
            self._report(error, file)
            raise error from e

        line_updated = False
        cursor = editor.get_cursor()
        try:
            line = editor.get_line(cursor.line)
            result = rewrite_line(
                line, file.stem, file.extension, new_stem, self.host.link_style()
            )
            if result.matched:
                editor.replace_range(cursor.line, 0, len(line), result.line)
                line_updated = True
        except (OSError, UnicodeDecodeError, IndexError) as e:
            self.logger.log_error(e, {"operation": "rewrite_line", "note": document.path})
            self.logger.log_rename(file.path, new_path, document.path, line_updated=False)
            self.notify(f"Renamed {file.name} to {new_name}, but the link was not updated: {e}")
            return RenameOutcome(file.name, new_name, new_path, line_updated=False)

        self.logger.log_rename(file.path, new_path, document.path, line_updated)
        self.notify(f"Renamed {file.name} to {new_name}")
        return RenameOutcome(file.name, new_name, new_path, line_updated)

    def _report(self, error: PasteRenamerError, file: ObservedFile) -> None:
        self.logger.log_error(error, {"file": file.path})
        if isinstance(error, RenameError):
            self.notify(str(error))
        else:
            self.notify(f"Error: {error}")

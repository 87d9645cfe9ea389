#!/usr/bin/env python3
"""
classifier.py
-------------
Decide whether a newly created vault file is a pasted image.

A file is a candidate when it was created less than a second ago, is not
a markdown note, and either carries the host's default paste name prefix
or has a raster image extension. Older files come from syncs, bulk
imports or re-indexing and are never touched.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# --- Local imports ---
from paste_renamer.core.logging_manager import RenamerLogger, safe_logger
from paste_renamer.utils.fs import join, split_name, to_vault_path

MARKDOWN_EXTENSION = "md"
MAX_AGE_MS = 1000
PASTED_IMAGE_PREFIX = "Pasted image "
IMAGE_EXTENSIONS = ("png", "jpg", "jpeg", "gif")


@dataclass(frozen=True)
class ObservedFile:
    """
    A file reported by a creation event.

    Attributes:
        name: File name with extension
        parent: Vault-relative parent folder ("" for the vault root)
        created_at: Creation time in epoch seconds
    """

    name: str
    parent: str
    created_at: float

    @property
    def path(self) -> str:
        return join(self.parent, self.name)

    @property
    def stem(self) -> str:
        return split_name(self.name)[0]

    @property
    def extension(self) -> str:
        return split_name(self.name)[1]

    @classmethod
    def from_path(cls, root: Path, path: Path) -> ObservedFile:
        """
        Build an ObservedFile from a file on disk.

        Uses the birth time where the platform records one, else the
        modification time, which equals creation time for a fresh paste.
        """
        path = Path(path)
        stat = path.stat()
        created_at = getattr(stat, "st_birthtime", None) or stat.st_mtime
        return cls(
            name=path.name,
            parent=to_vault_path(root, path.parent),
            created_at=created_at,
        )


def is_markdown_file(file: ObservedFile) -> bool:
    return file.extension == MARKDOWN_EXTENSION


def is_pasted_image(file: ObservedFile) -> bool:
    return file.name.startswith(PASTED_IMAGE_PREFIX) or file.extension in IMAGE_EXTENSIONS


def is_recent(file: ObservedFile, now: Optional[float] = None) -> bool:
    """True if ``file`` was created no more than MAX_AGE_MS before ``now``."""
    now = time.time() if now is None else now
    return (now - file.created_at) * 1000 <= MAX_AGE_MS


def is_candidate(
    file: ObservedFile,
    now: Optional[float] = None,
    logger: Optional[RenamerLogger] = None,
) -> bool:
    """
    Decide whether ``file`` should be renamed.

    Args:
        file: The newly created file
        now: Current time in epoch seconds (defaults to time.time())
        logger: Optional logger for the decision trail

    Returns:
        True for a fresh, non-markdown file that looks like a pasted image
    """
    log = safe_logger(logger)

    if not is_recent(file, now):
        log.log_skip(file.path, "created too long ago")
        return False
    if is_markdown_file(file):
        log.log_skip(file.path, "markdown note")
        return False
    if is_pasted_image(file):
        return True

    log.log_skip(file.path, "not a pasted image")
    return False

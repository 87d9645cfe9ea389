#!/usr/bin/env python3
"""
monitor.py
----------
Vault file-creation monitoring using watchdog.

A watchdog ``Observer`` watches the vault recursively and forwards every
newly created file as an ``ObservedFile`` to a callback. Directories and
anything under a dot-directory (``.obsidian``, ``.trash``, ``.git``) are
ignored, as the host does not report them as vault files either.

Events are delivered one at a time on the observer thread; the callback
runs to completion before the next event is handled.

Usage:
    monitor = VaultMonitor(vault, renamer.handle_created)
    monitor.start()
    monitor.wait()
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import logging
import threading
from pathlib import Path
from typing import Callable, Optional

# --- Third-party imports ---
from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

# --- Local imports ---
from paste_renamer.paste.classifier import ObservedFile

logger = logging.getLogger(__name__)


def is_hidden(root: Path, path: Path) -> bool:
    """True if ``path`` lies in a dot-directory or is a dot-file under ``root``."""
    try:
        relative = Path(path).relative_to(root)
    except ValueError:
        return True
    return any(part.startswith(".") for part in relative.parts)


class _CreatedHandler(FileSystemEventHandler):
    """Watchdog handler that feeds file creations into the monitor."""

    def __init__(self, monitor: VaultMonitor):
        super().__init__()
        self._monitor = monitor

    def on_created(self, event):
        if not event.is_directory:
            self._monitor._on_created(Path(event.src_path))


class VaultMonitor:
    """
    Watches a vault and reports created files.

    Args:
        root: Vault root directory
        on_created: Called with an ObservedFile for every new file
    """

    def __init__(self, root: Path, on_created: Callable[[ObservedFile], None]):
        self.root = Path(root).resolve()
        self._on_created_cb = on_created
        self._observer: Optional[Observer] = None
        self._stopped = threading.Event()

    @property
    def running(self) -> bool:
        return self._observer is not None

    def start(self) -> None:
        """Start watching. Safe to call when already running."""
        if self._observer is not None:
            return
        if not self.root.is_dir():
            raise FileNotFoundError(f"Vault directory does not exist: {self.root}")

        self._stopped.clear()
        self._observer = Observer()
        self._observer.schedule(_CreatedHandler(self), str(self.root), recursive=True)
        self._observer.daemon = True
        self._observer.start()
        logger.info("Watching vault: %s", self.root)

    def stop(self) -> None:
        """Stop watching and wait for the observer thread to exit."""
        if self._observer is None:
            return
        self._observer.stop()
        self._observer.join(timeout=5)
        self._observer = None
        self._stopped.set()
        logger.info("Stopped watching vault: %s", self.root)

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until ``stop()`` is called or ``timeout`` elapses."""
        return self._stopped.wait(timeout)

    def _on_created(self, path: Path) -> None:
        if is_hidden(self.root, path):
            return
        try:
            observed = ObservedFile.from_path(self.root, path)
        except (FileNotFoundError, ValueError):
            # Gone again (temporary file) or outside the vault
            return

        try:
            self._on_created_cb(observed)
        except Exception:
            logger.exception("Error handling created file %s", path)

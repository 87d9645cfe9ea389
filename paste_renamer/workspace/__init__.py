"""
Workspace integration: the host adapters, the focus session and the
vault watcher.

Components:
    - VaultHost: File-backed host for a vault directory
    - FocusSession: Active note and cursor shared with editor integrations
    - VaultMonitor: watchdog-based file-creation events (workspace.monitor)
"""
from .host import ActiveDocument, Cursor, NoteEditor, VaultHost
from .session import Focus, FocusSession

__all__ = [
    "ActiveDocument",
    "Cursor",
    "NoteEditor",
    "VaultHost",
    "Focus",
    "FocusSession",
]

#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the paste renamer.

Exception Hierarchy:
    Exception (built-in)
    └── PasteRenamerError - Base for all paste renamer errors
        ├── NoActiveDocumentError - No focused note to rename against
        ├── NoActiveEditorError - No editor or cursor for the focused note
        ├── RenameError - Host rename of the pasted file failed
        ├── SettingsError - Settings file unreadable or invalid
        └── SessionError - Focus session file unreadable or invalid

Usage:
    from paste_renamer.core.exceptions import RenameError

    try:
        renamer.start_rename(observed)
    except RenameError as e:
        logger.log_error(e, {"file": observed.path})
"""


class PasteRenamerError(Exception):
    """
    Base exception for paste renamer errors.

    Catch this to handle any failure of a rename operation, or catch
    specific subclasses for more granular handling. None of these are
    fatal to the watcher: each is reported for the event that caused it.
    """

    pass


class NoActiveDocumentError(PasteRenamerError):
    """
    Exception raised when no note is focused.

    Raised before any mutation: the pasted file is left untouched.

    Examples:
        >>> raise NoActiveDocumentError("No active file found.")
    """

    pass


class NoActiveEditorError(PasteRenamerError):
    """
    Exception raised when the focused note has no editor or cursor.

    Raised before any mutation, like NoActiveDocumentError.
    """

    pass


class RenameError(PasteRenamerError):
    """
    Exception for a failed host rename of the pasted file.

    Raised when the destination already exists, the source disappeared,
    or the filesystem refuses the move. Wraps the underlying cause; no
    text edit is attempted after it.

    Examples:
        >>> raise RenameError("Failed to rename 2024.01.15-093000.png: destination exists")
    """

    pass


class SettingsError(PasteRenamerError):
    """
    Exception for settings persistence failures.

    Raised when the settings file is not valid YAML, is not a mapping,
    or holds a pattern that is not a string.
    """

    pass


class SessionError(PasteRenamerError):
    """
    Exception for focus session failures.

    Raised when the session file is malformed or names an invalid cursor.
    """

    pass

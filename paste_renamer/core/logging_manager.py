#!/usr/bin/env python3
"""
logging_manager.py
------------------
Rotating log files for the renamer.

Two files live in the log directory:
    <component>.log  renames, skipped files and CLI operations (DEBUG and up)
    errors.log       failures with their context and traceback

Every rename is written as one RENAME line holding the old and new vault
paths, the note that was edited and whether its link was updated, so the
log can be used to trace a file back to its pasted name.

Usage:
    from paste_renamer.core.logging_manager import RenamerLogger, safe_logger

    logger = RenamerLogger(LOG_DIR)
    logger.log_rename("assets/Pasted image 1.png", "assets/cover.png", note, True)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
import logging
import sys
import traceback
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

# --- Third party imports ---
import click

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _format_details(details: Optional[Dict[str, Any]]) -> str:
    return f" {json.dumps(details, default=str)}" if details else ""


def format_cli_error(error: Exception) -> str:
    """One-line terminal rendering of an error: ``❌ <Type>: <message>``."""
    return f"❌ {type(error).__name__}: {error}"


class RenamerLogger:
    """
    File logger for rename events and CLI operations.

    Args:
        log_dir: Directory for the log files (created if missing)
        component_name: Base name of the main log file
        max_bytes: Size at which a log file is rotated
        backup_count: Rotated files kept per log
    """

    def __init__(
        self,
        log_dir: Path,
        component_name: str = "paste_renamer",
        max_bytes: int = 1024 * 1024,
        backup_count: int = 3,
    ) -> None:
        self.log_dir = Path(log_dir)
        self.component_name = component_name
        self.log_dir.mkdir(parents=True, exist_ok=True)

        self.main_logger = self._file_logger(
            f"{component_name}.renames", f"{component_name}.log", logging.DEBUG,
            max_bytes, backup_count,
        )
        self.error_logger = self._file_logger(
            f"{component_name}.errors", "errors.log", logging.ERROR,
            max_bytes, backup_count,
        )

    def _file_logger(
        self, name: str, filename: str, level: int, max_bytes: int, backup_count: int
    ) -> logging.Logger:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.propagate = False
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

        handler = RotatingFileHandler(
            self.log_dir / filename,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
        return logger

    def close(self) -> None:
        """Close the log files."""
        for logger in (self.main_logger, self.error_logger):
            for handler in list(logger.handlers):
                handler.close()
                logger.removeHandler(handler)

    # ----- Rename pipeline -----
    def log_rename(
        self, old_path: str, new_path: str, note: Any, line_updated: bool
    ) -> None:
        """
        Record a completed rename.

        Args:
            old_path: Vault path before the rename
            new_path: Vault path after the rename
            note: Note whose cursor line was checked for the link
            line_updated: Whether the link on that line was rewritten
        """
        link = "updated" if line_updated else "unchanged"
        self.main_logger.info(f"RENAME {old_path} -> {new_path} (note={note}, link={link})")

    def log_skip(self, path: str, reason: str) -> None:
        """Record a created file that was not renamed, and why."""
        self.main_logger.debug(f"SKIP {path}: {reason}")

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.main_logger.debug(f"DEBUG - {message}{_format_details(details)}")

    # ----- CLI -----
    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        """Record a CLI operation (settings change, focus change, watch start/stop)."""
        self.main_logger.info(f"OPERATION - {operation}{_format_details(details)}")

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        """
        Write ``error`` to errors.log with its context.

        The traceback is taken from the exception itself, so errors that
        were created but never raised are logged without one.
        """
        lines = [f"ERROR - {type(error).__name__}: {error}"]
        if context:
            lines.append("Context: " + ", ".join(f"{k}={v}" for k, v in context.items()))
        if error.__traceback__ is not None:
            lines.append(
                "Traceback:\n"
                + "".join(traceback.format_exception(type(error), error, error.__traceback__))
            )
        self.error_logger.error("\n".join(lines))

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        """
        Log ``error`` and return the message to show in the terminal.

        Examples:
            >>> logger.log_cli_error(RenameError("destination exists"))
            '❌ RenameError: destination exists'
        """
        self.log_error(error, context or {"source": "cli"})
        message = format_cli_error(error)
        if show_traceback and error.__traceback__ is not None:
            tb = "".join(traceback.format_exception(type(error), error, error.__traceback__))
            return f"{message}\n\n{tb}"
        return message


def handle_cli_error(
    ctx: "click.Context",
    error: Exception,
    operation: str,
    additional_context: Optional[Dict[str, Any]] = None,
    exit_code: int = 1,
) -> None:
    """
    Log a failed CLI command, print it to stderr and exit.

    The logger and verbose flag are read from ``ctx.obj``; with verbose set
    the traceback is printed too.

    Note:
        This function never returns - it always calls sys.exit()
    """
    obj = ctx.obj or {}
    context = {"operation": operation, **(additional_context or {})}
    message = safe_logger(obj.get("logger")).log_cli_error(
        error, context, show_traceback=obj.get("verbose", False)
    )
    click.echo(message, err=True)
    sys.exit(exit_code)


class NullLogger:
    """Stand-in for RenamerLogger when none is configured; logs nothing."""

    def log_rename(self, old_path: str, new_path: str, note: Any, line_updated: bool) -> None:
        pass

    def log_skip(self, path: str, reason: str) -> None:
        pass

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        return format_cli_error(error)


_null_logger = NullLogger()


def safe_logger(logger: Optional[RenamerLogger]) -> RenamerLogger:
    """Return ``logger``, or the shared NullLogger if it is None."""
    return logger if logger is not None else _null_logger  # type: ignore[return-value]

#!/usr/bin/env python3
"""
Paste Renamer CLI
-----------------

Command-line interface for renaming pasted images in a vault.

Commands:
    - watch: Watch a vault and rename pasted images as they appear
    - rename: Rename one existing image and fix its link
    - focus: Record the active note and cursor for the watcher
    - config: Show or change the rename template

Usage:
    # Keep pasted images named by date, linked from the focused note
    paste-renamer focus ~/vault/Daily/2024-01-15.md --line 12
    paste-renamer watch ~/vault

    # One-shot rename
    paste-renamer rename ~/vault ~/vault/assets/"Pasted image 1.png" \\
        --note ~/vault/Trip.md --line 3

    # Template
    paste-renamer config set-pattern "{{fileName}}-{{DATE:YYYYMMDDHHmmss}}"
"""
from __future__ import annotations

import click
from pathlib import Path

from paste_renamer.core.logging_manager import RenamerLogger
from paste_renamer.core.paths import LOG_DIR, SESSION_PATH, SETTINGS_PATH


@click.group()
@click.option(
    "--log-dir",
    type=click.Path(),
    default=str(LOG_DIR),
    help="Directory for log files",
)
@click.option(
    "--settings",
    "settings_path",
    type=click.Path(dir_okay=False),
    default=str(SETTINGS_PATH),
    help="Settings file holding the rename template",
)
@click.option(
    "--session",
    "session_path",
    type=click.Path(dir_okay=False),
    default=str(SESSION_PATH),
    help="Focus session file (active note and cursor)",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(
    ctx: click.Context,
    log_dir: str,
    settings_path: str,
    session_path: str,
    verbose: bool,
) -> None:
    """Paste Renamer - rename pasted images and fix their links"""
    ctx.ensure_object(dict)
    ctx.obj["log_dir"] = Path(log_dir)
    ctx.obj["verbose"] = verbose
    ctx.obj["settings_path"] = Path(settings_path)
    ctx.obj["session_path"] = Path(session_path)
    ctx.obj["logger"] = RenamerLogger(Path(log_dir))


# Import and register commands from submodules
from .watch import watch
from .rename import rename
from .focus import focus
from .config import config

cli.add_command(watch)
cli.add_command(rename)
cli.add_command(focus)
cli.add_command(config)


__all__ = ["cli"]

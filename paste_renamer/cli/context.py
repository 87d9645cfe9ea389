"""
CLI Context Helpers
-------------------

Builds the objects commands share from the Click context: settings,
the focus source and the vault host.
"""
from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

import click

from paste_renamer.core.settings import Settings
from paste_renamer.paste.links import LinkStyle
from paste_renamer.workspace.host import VaultHost
from paste_renamer.workspace.session import Focus, FocusSession


def get_settings(ctx: click.Context) -> Settings:
    """Load settings once per invocation and cache them on the context."""
    if "settings" not in ctx.obj:
        ctx.obj["settings"] = Settings.load(ctx.obj["settings_path"])
    return ctx.obj["settings"]


def save_settings(ctx: click.Context, settings: Settings) -> None:
    settings.save(ctx.obj["settings_path"])
    ctx.obj["settings"] = settings


def focus_source(
    ctx: click.Context,
    note: Optional[str],
    line: Optional[int],
    ch: int,
) -> Callable[[], Optional[Focus]]:
    """
    Return the callable the host uses to find the active note.

    An explicit --note pins the focus for the whole command; otherwise the
    focus session file is re-read on every call.

    Args:
        note: --note value
        line: 1-based --line value
        ch: --ch value
    """
    if note is not None:
        focus = Focus(
            note=Path(note).resolve(),
            line=None if line is None else line - 1,
            ch=ch,
        )
        return lambda: focus
    return FocusSession(ctx.obj["session_path"]).load


def build_host(
    ctx: click.Context,
    vault: str,
    note: Optional[str],
    line: Optional[int],
    ch: int,
    link_style: Optional[LinkStyle],
) -> VaultHost:
    return VaultHost(
        root=Path(vault).resolve(),
        focus=focus_source(ctx, note, line, ch),
        link_style=link_style,
    )

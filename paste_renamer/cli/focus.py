"""
Focus Command
-------------

Records the active note and cursor in the focus session file so a
running watcher knows which line to rewrite. Meant to be called from an
editor hook whenever the cursor moves to a new note or line.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from paste_renamer.core.logging_manager import RenamerLogger, handle_cli_error
from paste_renamer.workspace.session import Focus, FocusSession


@click.command()
@click.argument("note", type=click.Path(exists=True, dir_okay=False), required=False)
@click.option("--line", type=click.IntRange(min=1), default=None, help="1-based cursor line")
@click.option("--ch", type=click.IntRange(min=0), default=0, help="0-based cursor column")
@click.option("--clear", is_flag=True, help="Forget the focused note")
@click.pass_context
def focus(
    ctx: click.Context,
    note: Optional[str],
    line: Optional[int],
    ch: int,
    clear: bool,
) -> None:
    """Set (or --clear) the note and cursor the watcher edits."""
    logger: RenamerLogger = ctx.obj["logger"]
    session = FocusSession(ctx.obj["session_path"])

    if clear:
        session.clear()
        logger.log_operation("focus_cleared")
        click.echo("Focus cleared")
        return

    if note is None:
        try:
            current = session.load()
        except Exception as e:
            handle_cli_error(ctx, e, "focus")
            return
        if current is None:
            click.echo("No focused note")
        else:
            where = "no cursor" if current.line is None else f"line {current.line + 1}, ch {current.ch}"
            click.echo(f"{current.note} ({where})")
        return

    try:
        new_focus = Focus(
            note=Path(note).resolve(),
            line=None if line is None else line - 1,
            ch=ch,
        )
        session.save(new_focus)
    except Exception as e:
        handle_cli_error(ctx, e, "focus", additional_context={"note": note})
        return

    logger.log_operation("focus_set", {"note": new_focus.note, "line": new_focus.line})
    click.echo(f"Focused {new_focus.note}")


__all__ = ["focus"]

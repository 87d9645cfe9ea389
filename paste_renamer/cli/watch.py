"""
Watch Command
-------------

Watches a vault and renames pasted images as they are created.

The active note comes from --note/--line when given, otherwise from the
focus session file, re-read for every pasted image.
"""
from __future__ import annotations

import click

from paste_renamer.core.cli_options import cursor_options, link_style_option, parse_link_style
from paste_renamer.core.logging_manager import RenamerLogger, handle_cli_error
from paste_renamer.paste.renamer import PasteRenamer
from paste_renamer.workspace.monitor import VaultMonitor
from .context import build_host, get_settings


@click.command()
@click.argument("vault", type=click.Path(exists=True, file_okay=False))
@cursor_options
@link_style_option
@click.pass_context
def watch(ctx: click.Context, vault: str, note, line, ch, link_style) -> None:
    """
    Watch VAULT and rename pasted images.

    Runs until interrupted with Ctrl-C.
    """
    logger: RenamerLogger = ctx.obj["logger"]

    try:
        settings = get_settings(ctx)
        host = build_host(ctx, vault, note, line, ch, parse_link_style(link_style))
        renamer = PasteRenamer(
            host,
            settings,
            notify=lambda message: click.echo(f"📎 {message}"),
            logger=logger,
        )
        monitor = VaultMonitor(host.root, renamer.handle_created)
        monitor.start()
    except Exception as e:
        handle_cli_error(ctx, e, "watch", additional_context={"vault": vault})
        return

    logger.log_operation("watch_started", {"vault": host.root, "pattern": settings.pattern})
    click.echo(f"👀 Watching {host.root} (pattern: {settings.pattern})")
    click.echo("Press Ctrl-C to stop.")

    try:
        while not monitor.wait(timeout=1.0):
            pass
    except KeyboardInterrupt:
        click.echo("\nStopping...")
    finally:
        monitor.stop()
        logger.log_operation("watch_stopped", {"vault": host.root})


__all__ = ["watch"]

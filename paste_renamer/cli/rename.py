"""
Rename Command
--------------

One-shot rename of an existing image, with the same naming and link
rewriting as the watcher. The recency check is skipped since the file is
named explicitly; markdown notes are still refused.
"""
from __future__ import annotations

from pathlib import Path

import click

from paste_renamer.core.cli_options import cursor_options, link_style_option, parse_link_style
from paste_renamer.core.logging_manager import RenamerLogger, handle_cli_error
from paste_renamer.paste.classifier import ObservedFile, is_markdown_file
from paste_renamer.paste.renamer import PasteRenamer
from .context import build_host, get_settings


@click.command()
@click.argument("vault", type=click.Path(exists=True, file_okay=False))
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@cursor_options
@link_style_option
@click.option("--dry-run", is_flag=True, help="Show the new name without renaming")
@click.pass_context
def rename(
    ctx: click.Context,
    vault: str,
    file: str,
    note,
    line,
    ch,
    link_style,
    dry_run: bool,
) -> None:
    """Rename FILE inside VAULT and fix its link on the cursor line."""
    logger: RenamerLogger = ctx.obj["logger"]

    try:
        settings = get_settings(ctx)
        host = build_host(ctx, vault, note, line, ch, parse_link_style(link_style))
        observed = ObservedFile.from_path(host.root, Path(file))
        if is_markdown_file(observed):
            raise click.UsageError(f"Refusing to rename a markdown note: {observed.path}")

        renamer = PasteRenamer(host, settings, logger=logger)

        if dry_run:
            document = host.get_active_document()
            if document is None:
                raise click.UsageError("No active note: pass --note or run 'focus' first")
            new_name = renamer.generate_new_name(
                observed, document.frontmatter, document.basename
            )
            click.echo(f"Would rename {observed.name} to {new_name}")
            return

        outcome = renamer.start_rename(observed)
    except click.UsageError:
        raise
    except Exception as e:
        handle_cli_error(ctx, e, "rename", additional_context={"vault": vault, "file": file})
        return

    click.echo(f"✅ Renamed {outcome.old_name} to {outcome.new_name}")
    if outcome.line_updated:
        click.echo("   Link updated on the cursor line")
    else:
        click.echo("   No link to update on the cursor line")


__all__ = ["rename"]

"""
Config Commands
---------------

Shows and edits the persisted rename template. Every change is saved
immediately.

Commands:
    - config show: Print the settings file path and current pattern
    - config set-pattern: Replace the rename template
    - config reset: Restore the default template
    - config preview: Render the current template for sample values
"""
from __future__ import annotations

from datetime import datetime

import click

from paste_renamer.core.logging_manager import RenamerLogger, handle_cli_error
from paste_renamer.core.settings import DEFAULT_PATTERN, Settings
from paste_renamer.paste.naming import NameContext, generate_name
from .context import get_settings, save_settings


@click.group()
def config() -> None:
    """Show or change the rename template."""
    pass


@config.command()
@click.pass_context
def show(ctx: click.Context) -> None:
    """Show the current settings."""
    try:
        settings = get_settings(ctx)
    except Exception as e:
        handle_cli_error(ctx, e, "config_show")
        return

    click.echo(f"Settings file: {ctx.obj['settings_path']}")
    click.echo(f"Pattern: {settings.pattern}")


@config.command("set-pattern")
@click.argument("pattern")
@click.pass_context
def set_pattern(ctx: click.Context, pattern: str) -> None:
    """Set the rename template to PATTERN."""
    logger: RenamerLogger = ctx.obj["logger"]

    try:
        settings = get_settings(ctx)
        old_pattern = settings.pattern
        settings.pattern = pattern
        save_settings(ctx, settings)
    except Exception as e:
        handle_cli_error(ctx, e, "set_pattern", additional_context={"pattern": pattern})
        return

    logger.log_operation("set_pattern", {"old": old_pattern, "new": pattern})
    click.echo(f"Pattern set to: {pattern}")


@config.command()
@click.pass_context
def reset(ctx: click.Context) -> None:
    """Restore the default rename template."""
    logger: RenamerLogger = ctx.obj["logger"]

    try:
        # A broken settings file must not block a reset
        save_settings(ctx, Settings())
    except Exception as e:
        handle_cli_error(ctx, e, "reset")
        return

    logger.log_operation("reset_pattern", {"pattern": DEFAULT_PATTERN})
    click.echo(f"Pattern reset to: {DEFAULT_PATTERN}")


@config.command()
@click.option("--file-name", default="Untitled", show_default=True, help="Active note name")
@click.option("--image-name-key", default="", help="imageNameKey front-matter value")
@click.option("--ext", default="png", show_default=True, help="Image extension")
@click.pass_context
def preview(ctx: click.Context, file_name: str, image_name_key: str, ext: str) -> None:
    """Render the current template for sample values."""
    try:
        settings = get_settings(ctx)
    except Exception as e:
        handle_cli_error(ctx, e, "preview")
        return

    context = NameContext(file_name=file_name, image_name_key=image_name_key, now=datetime.now())
    click.echo(generate_name(settings.pattern, context, ext))


__all__ = ["config"]

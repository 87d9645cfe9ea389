#!/usr/bin/env python3
"""
cli_options.py
-------------------
Reusable Click options for paste renamer commands.

Usage:
    from paste_renamer.core.cli_options import link_style_option, cursor_options

    @cli.command()
    @link_style_option
    @cursor_options
    def my_command(link_style, note, line, ch):
        pass
"""
from typing import Optional

import click

from paste_renamer.paste.links import LinkStyle


# ═══════════════════════════════════════════════════════════════════════════
# LINK OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

link_style_option = click.option(
    "--link-style",
    type=click.Choice([style.value for style in LinkStyle]),
    default=None,
    help="Link syntax to rewrite (default: read from the vault's app.json)",
)


def parse_link_style(value: Optional[str]) -> Optional[LinkStyle]:
    """Convert a --link-style value to a LinkStyle (None keeps the vault default)."""
    return LinkStyle(value) if value else None


# ═══════════════════════════════════════════════════════════════════════════
# CURSOR OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

note_option = click.option(
    "--note",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Active note (overrides the focus session)",
)

line_option = click.option(
    "--line",
    type=click.IntRange(min=1),
    default=None,
    help="1-based cursor line in the active note",
)

ch_option = click.option(
    "--ch",
    type=click.IntRange(min=0),
    default=0,
    show_default=True,
    help="0-based cursor column",
)


def cursor_options(f):
    """Apply --note, --line and --ch in one decorator."""
    return note_option(line_option(ch_option(f)))

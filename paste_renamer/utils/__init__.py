"""
Utilities package for the paste renamer.

- fs: Vault path helpers
- md: Front-matter extraction
- templates: Rename template expansion

Import commonly-used utilities directly from this package:
    from paste_renamer.utils import join, split_name, render_template
"""

from .fs import join, basename, extension, split_name, to_vault_path
from .md import frontmatter_block, parse_frontmatter
from .templates import format_date, render_template, substitute_variables

__all__ = [
    # Filesystem
    "join",
    "basename",
    "extension",
    "split_name",
    "to_vault_path",
    # Markdown
    "frontmatter_block",
    "parse_frontmatter",
    # Templates
    "format_date",
    "render_template",
    "substitute_variables",
]

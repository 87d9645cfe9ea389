#!/usr/bin/env python3
"""
md.py
-----
Front-matter reading for notes.

Only the leading ``---`` block is looked at; the note body is never parsed.
"""
from __future__ import annotations

# --- Standard library imports ---
from typing import Any, Dict

# --- Third party imports ---
import yaml

FRONTMATTER_FENCE = "---"


def frontmatter_block(content: str) -> str:
    """
    Return the YAML text between the opening and closing ``---`` fences.

    A note that does not start with a fence, or never closes it, has no
    front matter and gives "".

    Examples:
        >>> frontmatter_block("---\\nimageNameKey: trip\\n---\\nBody")
        'imageNameKey: trip'
    """
    lines = iter(content.splitlines())
    if next(lines, "").strip() != FRONTMATTER_FENCE:
        return ""

    block = []
    for line in lines:
        if line.strip() == FRONTMATTER_FENCE:
            return "\n".join(block)
        block.append(line)
    return ""


def parse_frontmatter(content: str) -> Dict[str, Any]:
    """
    Parse the YAML front matter of a note into a mapping.

    Missing, empty, malformed or non-mapping front matter all yield an
    empty dict: a note's metadata only ever feeds optional template values.
    """
    block = frontmatter_block(content)
    if not block.strip():
        return {}

    try:
        data = yaml.safe_load(block)
    except yaml.YAMLError:
        return {}

    return data if isinstance(data, dict) else {}

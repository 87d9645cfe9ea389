#!/usr/bin/env python3
"""
fs.py
-------------------
Vault path helpers.

Vault paths are always relative and use ``/`` separators regardless of
the platform, so they are handled as strings rather than OS paths.

Functions:
    join: Join vault path segments, dropping empty and ``.`` segments
    basename: Last segment of a vault path
    extension: Extension of a file name, without the dot
    split_name: Split a file name into (stem, extension)
    to_vault_path: Convert an OS path under the vault root to a vault path

Usage:
    from paste_renamer.utils.fs import join, split_name

    new_path = join("assets/img", "2024.01.15-093000.png")
    stem, ext = split_name("2024.01.15-093000.png")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import List, Tuple


def join(*segments: str) -> str:
    """
    Join vault path segments.

    Leading and trailing slashes and ``.`` segments are removed; a leading
    slash on the first segment is preserved.

    Examples:
        >>> join("assets/", "./img", "a.png")
        'assets/img/a.png'
        >>> join("", "a.png")
        'a.png'
        >>> join("/root", "a.png")
        '/root/a.png'
    """
    parts: List[str] = []
    for segment in segments:
        parts.extend(segment.split("/"))

    kept = [part for part in parts if part and part != "."]
    if segments and segments[0].startswith("/"):
        kept.insert(0, "")
    return "/".join(kept)


def basename(path: str) -> str:
    """Return the last segment of a vault path, e.g. ``'foo.jpg'``."""
    return path.split("/")[-1]


def extension(name: str) -> str:
    """
    Return the extension of a file name without the dot.

    A name with no dot has no extension.

    Examples:
        >>> extension("2024.01.15-093000.png")
        'png'
        >>> extension("README")
        ''
    """
    base = basename(name)
    if "." not in base:
        return ""
    return base.rsplit(".", 1)[1]


def split_name(name: str) -> Tuple[str, str]:
    """
    Split a file name into stem and extension.

    Examples:
        >>> split_name("Pasted image 20221026172752.png")
        ('Pasted image 20221026172752', 'png')
        >>> split_name("a.b.png")
        ('a.b', 'png')
    """
    base = basename(name)
    ext = extension(base)
    if not ext:
        return base, ""
    return base[: -(len(ext) + 1)], ext


def to_vault_path(root: Path, path: Path) -> str:
    """
    Convert an OS path under ``root`` to a ``/``-separated vault path.

    Raises:
        ValueError: If ``path`` is not inside ``root``
    """
    relative = Path(path).resolve().relative_to(Path(root).resolve())
    return relative.as_posix() if relative.parts else ""

#!/usr/bin/env python3
"""
links.py
--------
Rewrite the embed link of a renamed image on a single line of text.

Two link styles are supported, chosen by the host's own configuration:

    LinkStyle.MARKDOWN   ![](assets/Pasted%20image%201.png)
    LinkStyle.WIKILINK   ![[assets/Pasted image 1.png]]

Any folder prefix in front of the file name is kept as written. Only the
first matching link on the line is rewritten; a line without one comes
back unchanged with ``matched=False``.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional
from urllib.parse import quote

# Characters JavaScript's encodeURI leaves alone (beyond alphanumerics and -_.~)
URI_SAFE_CHARS = ";,/?:@&=+$!*'()#"

# Optional folder prefix: anything but brackets, ending with a slash
_PREFIX = r"(?P<prefix>[^\[\]]*/)?"


class LinkStyle(Enum):
    """Embed link syntax used by the vault."""

    MARKDOWN = "markdown"
    WIKILINK = "wikilink"

    @classmethod
    def from_config(cls, use_markdown_links: Optional[bool]) -> LinkStyle:
        """Map the host's ``useMarkdownLinks`` flag to a link style."""
        return cls.MARKDOWN if use_markdown_links else cls.WIKILINK


@dataclass(frozen=True)
class RewriteResult:
    """
    Outcome of a line rewrite.

    Attributes:
        line: Rewritten line, or the input line when nothing matched
        matched: Whether a link to the original file was found
    """

    line: str
    matched: bool


def encode_uri(text: str) -> str:
    """
    Percent-encode ``text`` the way the host encodes markdown link targets.

    Examples:
        >>> encode_uri("Pasted image 20221026172752")
        'Pasted%20image%2020221026172752'
        >>> encode_uri("a(1)")
        'a(1)'
    """
    return quote(text, safe=URI_SAFE_CHARS)


def _stem_alternatives(stem: str, style: LinkStyle) -> List[str]:
    """Spellings of ``stem`` that may appear in a link of ``style``."""
    if style is LinkStyle.WIKILINK:
        return [stem]
    encoded = encode_uri(stem)
    # Links typed by hand are often left unencoded
    return [encoded] if encoded == stem else [encoded, stem]


def build_link_pattern(
    original_stem: str, extension: str, style: LinkStyle
) -> re.Pattern:
    """
    Build the regex matching an embed of ``original_stem.extension``.

    The stem and extension are escaped, so characters such as ``(`` or
    ``+`` in a file name are matched literally.
    """
    stems = "|".join(re.escape(s) for s in _stem_alternatives(original_stem, style))
    target = rf"{_PREFIX}(?:{stems})\.{re.escape(extension)}"

    if style is LinkStyle.MARKDOWN:
        return re.compile(rf"!\[\]\({target}\)")
    return re.compile(rf"!\[\[{target}\]\]")


def format_link(prefix: str, new_stem: str, extension: str, style: LinkStyle) -> str:
    """
    Format an embed link to ``prefix + new_stem.extension``.

    Markdown targets are URI-encoded like the links the host inserts;
    wikilinks keep the file name as it is on disk.
    """
    if style is LinkStyle.MARKDOWN:
        return f"![]({prefix}{encode_uri(new_stem)}.{extension})"
    return f"![[{prefix}{new_stem}.{extension}]]"


def rewrite_line(
    line: str,
    original_stem: str,
    extension: str,
    new_stem: str,
    link_style: LinkStyle,
) -> RewriteResult:
    """
    Point the embed link on ``line`` at the renamed file.

    Args:
        line: Text of the line under the cursor
        original_stem: File name before the rename, without extension
        extension: File extension, without the dot
        new_stem: File name after the rename, without extension
        link_style: Link syntax used by the vault

    Returns:
        RewriteResult with the new line and whether a link was found

    Examples:
        >>> rewrite_line(
        ...     "![[attachments/Pasted image 2.png]]",
        ...     "Pasted image 2", "png", "x", LinkStyle.WIKILINK,
        ... ).line
        '![[attachments/x.png]]'
    """
    pattern = build_link_pattern(original_stem, extension, link_style)

    def _replace(match: re.Match) -> str:
        return format_link(match.group("prefix") or "", new_stem, extension, link_style)

    new_line, count = pattern.subn(_replace, line, count=1)
    return RewriteResult(line=new_line, matched=count > 0)

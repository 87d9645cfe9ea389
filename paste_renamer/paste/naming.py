#!/usr/bin/env python3
"""
naming.py
---------
Generate the new name of a pasted image from the rename template.

The template is expanded with the current time, the active note's base
name (``{{fileName}}``) and the note's ``imageNameKey`` front-matter value
(``{{imageNameKey}}``); the original extension is then appended unchanged.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping

# --- Local imports ---
from paste_renamer.utils.templates import render_template

IMAGE_NAME_KEY = "imageNameKey"


@dataclass(frozen=True)
class NameContext:
    """
    Values available to the rename template.

    Attributes:
        file_name: Base name of the active note
        image_name_key: Value of the note's imageNameKey ("" when absent)
        now: Time used for DATE placeholders
    """

    file_name: str
    image_name_key: str = ""
    now: datetime = field(default_factory=datetime.now)

    def variables(self) -> dict:
        return {"fileName": self.file_name, IMAGE_NAME_KEY: self.image_name_key}


def image_name_key_from(frontmatter: Mapping[str, Any]) -> str:
    """
    Read the imageNameKey value from a note's frontmatter.

    Examples:
        >>> image_name_key_from({"imageNameKey": "trip"})
        'trip'
        >>> image_name_key_from({"imageNameKey": None})
        ''
        >>> image_name_key_from({})
        ''
    """
    value = frontmatter.get(IMAGE_NAME_KEY)
    if value is None:
        return ""
    return str(value)


def generate_name(template: str, context: NameContext, extension: str) -> str:
    """
    Generate the new file name for a pasted image.

    Args:
        template: Rename template (see utils.templates)
        context: Template values
        extension: Original extension, without the dot

    Returns:
        Expanded template + "." + extension

    Examples:
        >>> ctx = NameContext("Trip", now=datetime(2022, 10, 26, 17, 27, 52))
        >>> generate_name("{{DATE:YYYY.MM.DD-HHmmss}}", ctx, "png")
        '2022.10.26-172752.png'
        >>> generate_name("cover", ctx, "jpg")
        'cover.jpg'
    """
    stem = render_template(template, context.variables(), context.now)
    return f"{stem}.{extension}"

#!/usr/bin/env python3
"""
templates.py
------------
Rename template expansion.

Templates are plain strings with ``{{placeholder}}`` tokens:

    {{DATE:<format>}}   current time, formatted (see DATE_TOKENS)
    {{DATE}}            current time as YYYY-MM-DD
    {{<variable>}}      a value from the variables mapping

Unknown placeholders are left in the output untouched, so a typo in a
template produces a visibly odd file name instead of an error.

Date formats use the moment.js vocabulary the host application exposes
to its users. Text inside square brackets is copied literally, so
``[img-]YYYYMMDD`` renders as ``img-20240115``.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
from datetime import datetime
from typing import Any, Callable, Dict, Mapping

DEFAULT_DATE_FORMAT = "YYYY-MM-DD"

PLACEHOLDER_PATTERN = re.compile(r"\{\{([^{}]*)\}\}")


def _hour12(dt: datetime) -> int:
    return dt.hour % 12 or 12


DATE_TOKENS: Dict[str, Callable[[datetime], str]] = {
    "YYYY": lambda dt: f"{dt.year:04d}",
    "YY": lambda dt: f"{dt.year % 100:02d}",
    "MMMM": lambda dt: dt.strftime("%B"),
    "MMM": lambda dt: dt.strftime("%b"),
    "MM": lambda dt: f"{dt.month:02d}",
    "M": lambda dt: str(dt.month),
    "DD": lambda dt: f"{dt.day:02d}",
    "D": lambda dt: str(dt.day),
    "dddd": lambda dt: dt.strftime("%A"),
    "ddd": lambda dt: dt.strftime("%a"),
    "HH": lambda dt: f"{dt.hour:02d}",
    "H": lambda dt: str(dt.hour),
    "hh": lambda dt: f"{_hour12(dt):02d}",
    "h": lambda dt: str(_hour12(dt)),
    "mm": lambda dt: f"{dt.minute:02d}",
    "m": lambda dt: str(dt.minute),
    "ss": lambda dt: f"{dt.second:02d}",
    "s": lambda dt: str(dt.second),
    "SSS": lambda dt: f"{dt.microsecond // 1000:03d}",
    "A": lambda dt: "AM" if dt.hour < 12 else "PM",
    "a": lambda dt: "am" if dt.hour < 12 else "pm",
    "X": lambda dt: str(int(dt.timestamp())),
    "x": lambda dt: str(int(dt.timestamp() * 1000)),
}

# Longest tokens first so "YYYY" wins over "YY" and "MMMM" over "MM"
_DATE_TOKEN_PATTERN = re.compile(
    r"\[([^\]]*)\]|"
    + "|".join(re.escape(t) for t in sorted(DATE_TOKENS, key=len, reverse=True))
)


def format_date(dt: datetime, fmt: str) -> str:
    """
    Format a datetime with a moment-style format string.

    Args:
        dt: Time to format
        fmt: Format string, e.g. ``YYYY.MM.DD-hhmmss``

    Returns:
        Formatted string; characters that are not tokens pass through

    Examples:
        >>> format_date(datetime(2022, 10, 26, 17, 27, 52), "YYYY.MM.DD-HHmmss")
        '2022.10.26-172752'
        >>> format_date(datetime(2022, 10, 26, 17, 27, 52), "[at] h A")
        'at 5 PM'
    """

    def _replace(match: re.Match) -> str:
        literal = match.group(1)
        if literal is not None:
            return literal
        return DATE_TOKENS[match.group(0)](dt)

    return _DATE_TOKEN_PATTERN.sub(_replace, fmt)


def substitute_variables(
    template: str, variables: Mapping[str, Any], now: datetime
) -> str:
    """
    Expand all placeholders in ``template``.

    Args:
        template: Template string with {{placeholder}} tokens
        variables: Mapping of variable names to values. None is
            substituted as the empty string, anything else with str().
        now: Time used for DATE placeholders

    Returns:
        Expanded string; unknown placeholders are kept verbatim

    Example:
        >>> substitute_variables(
        ...     "{{fileName}}-{{DATE:YYYYMMDD}}",
        ...     {"fileName": "Trip"},
        ...     datetime(2024, 1, 15),
        ... )
        'Trip-20240115'
    """

    def _replace(match: re.Match) -> str:
        token = match.group(1)
        name, sep, fmt = token.partition(":")

        if name == "DATE":
            return format_date(now, fmt if sep else DEFAULT_DATE_FORMAT)

        if not sep and token in variables:
            value = variables[token]
            return "" if value is None else str(value)

        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(_replace, template)


def render_template(
    template: str, variables: Mapping[str, Any], now: datetime | None = None
) -> str:
    """
    Render a rename template against the current time.

    Main entry point for name generation; ``now`` is injectable so a
    fixed time always yields the same output.
    """
    return substitute_variables(template, variables, now or datetime.now())

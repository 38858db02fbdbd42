"""Shared utilities for Jira CLI - text formatting and input parsing."""

from typing import Optional

__all__ = [
    "get_column_string",
    "parse_id",
]


def get_column_string(text: str, width: int) -> str:
    """Fit text into a fixed-width table column.

    Pads short text with spaces and truncates long text with "...".

    Args:
        text: Cell content
        width: Column width in characters

    Returns:
        String of exactly ``width`` characters

    Examples:
        >>> get_column_string("abc", 5)
        'abc  '
        >>> get_column_string("abcdefgh", 5)
        'ab...'
        >>> get_column_string("abcdefgh", 2)
        '..'
    """
    if width <= 0:
        return ""

    if len(text) <= width:
        return text.ljust(width)

    if width <= 3:
        return "." * width

    return text[: width - 3] + "..."


def parse_id(text: str) -> Optional[int]:
    """Parse a decimal item ID typed by the user.

    Examples:
        >>> parse_id("12")
        12
        >>> parse_id("x") is None
        True
    """
    if not text.isdecimal():
        return None
    return int(text)

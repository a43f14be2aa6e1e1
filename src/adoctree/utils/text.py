#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adoctree/utils/text.py
"""Text helpers shared by the parser and the renderers."""

from __future__ import annotations

import re

_NON_ALNUM_RUN = re.compile(r"[\W_]+")


def generate_section_id(text: str) -> str:
    """Build a section id from plain header text.

    The text is lower-cased, every run of non-alphanumeric characters becomes
    a single hyphen and leading/trailing hyphens are trimmed. Ids that would
    start with a digit are prefixed with ``_``; empty results become ``_``.

    Parameters
    ----------
    text : str
        Header text with inline markup already removed

    Returns
    -------
    str
        Section id

    Examples
    --------
    >>> generate_section_id("Hello, World!")
    'hello-world'
    >>> generate_section_id("3rd Party Libraries")
    '_3rd-party-libraries'
    >>> generate_section_id("!!!")
    '_'

    """
    slug = _NON_ALNUM_RUN.sub("-", text.lower()).strip("-")
    if not slug:
        return "_"
    if slug[0].isdigit():
        return f"_{slug}"
    return slug


def _opens_quote(preceding: str) -> bool:
    preceding = preceding.strip()
    return not preceding or preceding.endswith("=")


def split_respecting_quotes(text: str, separator: str = ",") -> list[str]:
    """Split ``text`` on ``separator`` except inside quoted values.

    A quote only opens a quoted value at the start of a part or right after
    ``=``, so apostrophes inside words are literal. Quotes are kept in the
    returned parts; surrounding whitespace is not stripped.

    >>> split_respecting_quotes('a, "b, c", d')
    ['a', ' "b, c"', ' d']

    """
    parts: list[str] = []
    current: list[str] = []
    quote: str | None = None
    for char in text:
        if quote:
            if char == quote:
                quote = None
            current.append(char)
        elif char in "\"'" and _opens_quote("".join(current)):
            quote = char
            current.append(char)
        elif char == separator:
            parts.append("".join(current))
            current = []
        else:
            current.append(char)
    parts.append("".join(current))
    return parts


def strip_quotes(value: str) -> str:
    """Remove one pair of matching surrounding quotes and outer whitespace."""
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


def split_lines(text: str) -> list[str]:
    r"""Split document text into lines without terminators.

    ``\r\n`` and lone ``\r`` are treated as line breaks and a leading byte
    order mark is dropped. A trailing newline does not produce an extra line.

    >>> split_lines("a\r\nb\rc\n")
    ['a', 'b', 'c']

    """
    text = text.lstrip("\ufeff").replace("\r\n", "\n").replace("\r", "\n")
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adoctree/parsers/_includes.py
"""Expansion of ``include::path[]`` directives.

Included files are parsed as complete block sequences and their blocks are
spliced into the including document. Every failure (missing file, unreadable
file, circular include, nesting limit) is logged and yields no blocks.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Callable, Optional

from adoctree.ast.nodes import Document, Node
from adoctree.options.asciidoc import AsciiDocOptions
from adoctree.parsers._attributes import parse_macro_attributes
from adoctree.parsers._state import MAX_NESTING_DEPTH, ParserState
from adoctree.utils.encoding import read_text_with_encoding_detection
from adoctree.utils.text import split_lines

logger = logging.getLogger(__name__)

_LINE_RANGE_PATTERN = re.compile(r"^(?P<start>\d{1,9})(?P<range>\.\.(?P<end>-1|\d{1,9})?)?$")

LineRange = tuple[int, Optional[int]]


def parse_line_ranges(spec: str) -> Optional[list[LineRange]]:
    """Parse a ``lines=`` value into 1-based inclusive ranges.

    Parameters
    ----------
    spec : str
        Ranges separated by ``;`` (or ``,``): ``5``, ``1..10``, ``5..-1``, ``5..``

    Returns
    -------
    list of (int, int or None) or None
        Ranges in the order given; an end of None means "to the last line".
        None when no part of ``spec`` is a valid range.

    Examples
    --------
    >>> parse_line_ranges("1..3;7;10..-1")
    [(1, 3), (7, 7), (10, None)]

    """
    ranges: list[LineRange] = []
    for part in re.split(r"[;,]", spec):
        part = part.strip()
        if not part:
            continue
        match = _LINE_RANGE_PATTERN.match(part)
        if match is None:
            logger.debug("Ignoring invalid include line range: %r", part)
            continue
        start = int(match.group("start"))
        if not match.group("range"):
            ranges.append((start, start))
            continue
        end = match.group("end")
        ranges.append((start, None if end in (None, "-1") else int(end)))
    return ranges or None


def select_lines(lines: list[str], ranges: list[LineRange]) -> list[str]:
    """Pick lines by 1-based ranges, in range order, skipping out-of-range numbers.

    Overlapping ranges select the same line more than once.
    """
    selected: list[str] = []
    for start, end in ranges:
        last = len(lines) if end is None else min(end, len(lines))
        for number in range(max(start, 1), last + 1):
            selected.append(lines[number - 1])
    return selected


class IncludeResolver:
    """Resolve include directives against the filesystem.

    Parameters
    ----------
    assemble : callable
        Builds a Document from a ParserState; used to parse the included text
    options : AsciiDocOptions
        Parser options (``max_include_depth``)

    """

    def __init__(self, assemble: Callable[[ParserState], Document], options: AsciiDocOptions):
        """Initialize the resolver."""
        self.assemble = assemble
        self.options = options

    def resolve(self, target: str, attributes_text: str, state: ParserState) -> list[Node]:
        """Parse the file named by ``target`` and return its blocks.

        Parameters
        ----------
        target : str
            Path from the directive, relative to ``state.base_path`` unless absolute
        attributes_text : str
            Raw text between the directive's brackets (``lines=...``)
        state : ParserState
            State of the including document

        Returns
        -------
        list of Node
            Blocks of the included file, or an empty list if it cannot be included

        """
        if len(state.include_stack) >= self.options.max_include_depth or state.depth >= MAX_NESTING_DEPTH:
            logger.warning("Maximum include depth exceeded, skipping include: %s", target)
            return []

        try:
            path = Path(target)
            if not path.is_absolute():
                path = state.base_path / path
            path = path.resolve()
            if path in state.include_stack:
                logger.warning("Circular include detected, skipping: %s", path)
                return []
            if not path.is_file():
                logger.warning("Include file not found: %s", path)
                return []
            data = path.read_bytes()
        except (OSError, ValueError, RuntimeError) as e:
            logger.warning("Unable to read include file %s: %s", target, e)
            return []

        lines = split_lines(read_text_with_encoding_detection(data))
        _alt, include_attributes = parse_macro_attributes(attributes_text)
        if "lines" in include_attributes:
            ranges = parse_line_ranges(include_attributes["lines"])
            if ranges is not None:
                lines = select_lines(lines, ranges)

        logger.debug("Including %s (%d lines)", path, len(lines))
        return list(self.assemble(state.for_include(lines, path)).children)

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adoctree/parsers/_state.py
"""Mutable cursor state threaded through one parse."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

# delimited blocks and includes nested deeper than this are not parsed further
MAX_NESTING_DEPTH = 64


@dataclass
class ParserState:
    """Line buffer, cursor and context for one (possibly nested) parse.

    A state is owned by a single call stack. Delimited blocks parse their
    body with a derived state that shares the attribute table; included
    files get a state with a copy of it.

    Parameters
    ----------
    lines : list of str
        Source lines without line terminators
    attributes : dict of str to str
        Live attribute table, updated by attribute entries
    base_path : Path
        Directory against which relative include paths are resolved
    include_stack : list of Path
        Canonical paths of the files currently being expanded
    pos : int
        Index of the next unconsumed line
    depth : int
        Number of enclosing delimited blocks and includes

    """

    lines: list[str]
    attributes: dict[str, str]
    base_path: Path
    include_stack: list[Path] = field(default_factory=list)
    pos: int = 0
    depth: int = 0

    @property
    def at_end(self) -> bool:
        """True when every line has been consumed."""
        return self.pos >= len(self.lines)

    def peek(self, offset: int = 0) -> Optional[str]:
        """Return the line ``offset`` lines ahead of the cursor without consuming it."""
        index = self.pos + offset
        if 0 <= index < len(self.lines):
            return self.lines[index]
        return None

    def advance(self, count: int = 1) -> None:
        """Consume ``count`` lines."""
        self.pos = min(self.pos + count, len(self.lines))

    def next_line(self) -> Optional[str]:
        """Consume and return the current line."""
        line = self.peek()
        if line is not None:
            self.pos += 1
        return line

    def skip_blank_lines(self) -> None:
        """Advance past blank (whitespace-only) lines."""
        while not self.at_end and not self.lines[self.pos].strip():
            self.pos += 1

    def next_non_blank_offset(self) -> Optional[int]:
        """Offset from the cursor of the next non-blank line, or None at end."""
        offset = 0
        while (line := self.peek(offset)) is not None:
            if line.strip():
                return offset
            offset += 1
        return None

    def derive(self, lines: list[str]) -> ParserState:
        """State for the body of a delimited block within the same document."""
        return ParserState(
            lines=lines,
            attributes=self.attributes,
            base_path=self.base_path,
            include_stack=self.include_stack,
            depth=self.depth + 1,
        )

    def for_include(self, lines: list[str], path: Path) -> ParserState:
        """State for an included file.

        The child gets a snapshot of the current attribute table, so entries
        inside the include do not leak back into this document.
        """
        return ParserState(
            lines=lines,
            attributes=dict(self.attributes),
            base_path=path.parent,
            include_stack=[*self.include_stack, path],
            depth=self.depth + 1,
        )

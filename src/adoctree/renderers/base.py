#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adoctree/renderers/base.py
"""Base classes for AST renderers.

This module defines the abstract base class that all renderers inherit from,
the inline-capture mixin shared by the text renderers and the table column
specification parser they use for ``cols`` alignment.

"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Optional, Union

from adoctree.ast.nodes import Document, Node, TableRow
from adoctree.constants import Alignment
from adoctree.exceptions import InvalidOptionsError, OutputWriteError, RenderingError
from adoctree.options.base import BaseRendererOptions
from adoctree.utils.io_utils import write_content

logger = logging.getLogger(__name__)

_ALIGNMENTS: dict[str, Alignment] = {"<": "left", "^": "center", ">": "right"}
_COLUMN_REPEAT = re.compile(r"^(?P<count>\d{1,9})\*(?P<spec>.*)$")
_HORIZONTAL_ALIGN = re.compile(r"(?<!\.)(?P<align>[<^>])")

# upper bound on columns expanded from a cols specification
MAX_TABLE_COLUMNS = 64


def parse_column_alignments(cols: str) -> list[Optional[Alignment]]:
    """Parse a ``cols`` attribute into per-column horizontal alignments.

    Parameters
    ----------
    cols : str
        Column specification such as ``"<,^,>"``, ``"1,2a,^3"``, ``"3*"``
        or ``"2*>"``; a single bare number is a column count

    Returns
    -------
    list of {"left", "center", "right"} or None
        One entry per column; None when the column sets no alignment

    Examples
    --------
    >>> parse_column_alignments("<,^,>")
    ['left', 'center', 'right']
    >>> parse_column_alignments("2*^,1")
    ['center', 'center', None]

    """
    tokens = [token.strip() for token in re.split(r"[,;]", cols)]
    if len(tokens) == 1 and tokens[0].isdigit():
        return [None] * min(int(tokens[0]), MAX_TABLE_COLUMNS)

    alignments: list[Optional[Alignment]] = []
    for token in tokens:
        count = 1
        repeat = _COLUMN_REPEAT.match(token)
        if repeat:
            count = int(repeat.group("count"))
            token = repeat.group("spec")
        match = _HORIZONTAL_ALIGN.search(token)
        alignment = _ALIGNMENTS[match.group("align")] if match else None
        alignments.extend([alignment] * min(count, MAX_TABLE_COLUMNS - len(alignments)))
        if len(alignments) >= MAX_TABLE_COLUMNS:
            break
    return alignments


class BaseRenderer(ABC):
    """Abstract base class for all AST renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> from adoctree.renderers.base import BaseRenderer
        >>>
        >>> class PlainRenderer(BaseRenderer):
        ...     def render_to_string(self, doc):
        ...         return "rendered output"

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, doc: Document) -> str:
        """Render the AST to a string.

        Parameters
        ----------
        doc : Document
            AST Document node to render

        Returns
        -------
        str
            Rendered document

        """

    def render(self, doc: Document, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the AST and write it to ``output``.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        output : str, Path, IO[bytes] or IO[str]
            File path or writable stream

        Raises
        ------
        OutputWriteError
            If the output cannot be written

        """
        text = self.render_to_string(doc)
        try:
            write_content(text, output)
        except (OSError, TypeError) as e:
            target = str(output) if isinstance(output, (str, Path)) else "<stream>"
            raise OutputWriteError(target, original_error=e) from e

    def generic_visit(self, node: Node) -> None:
        """Skip a node type this renderer does not know, with a warning."""
        logger.warning("%s cannot render node type %s; skipping", self.__class__.__name__, type(node).__name__)

    @staticmethod
    def _compute_table_columns(rows: list[TableRow]) -> int:
        """Maximum column count of a table, accounting for colspan."""
        max_cols = 0
        for row in rows:
            max_cols = max(max_cols, sum(cell.colspan for cell in row.cells))
        return max_cols

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                component_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )


class InlineContentMixin:
    """Mixin providing the inline content capture used by text renderers.

    The implementing class must have an ``_output`` list that its visitor
    methods append to.
    """

    _output: list[str]

    def _render_inline_content(self, content: list[Node]) -> str:
        """Render a list of nodes to a string without touching the main output."""
        saved_output = self._output
        self._output = []
        try:
            for node in content:
                node.accept(self)
            return "".join(self._output)
        finally:
            self._output = saved_output

    def _render_blocks(self, children: list[Node]) -> str:
        """Render block children to a string (same capture as inline content)."""
        return self._render_inline_content(children)


def render_document(renderer: BaseRenderer, doc: Document) -> str:
    """Render ``doc`` with ``renderer``, wrapping unexpected failures.

    Raises
    ------
    RenderingError
        If the renderer fails on the tree

    """
    try:
        return renderer.render_to_string(doc)
    except RenderingError:
        raise
    except (AttributeError, TypeError, ValueError, KeyError) as e:
        raise RenderingError(
            f"{renderer.__class__.__name__} failed: {e}", rendering_stage="render", original_error=e
        ) from e

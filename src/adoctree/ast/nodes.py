#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adoctree/ast/nodes.py
"""AST node classes for AsciiDoc documents.

Each node represents a structural or inline element of a parsed document.
Nodes are plain dataclasses that support the visitor pattern through
``accept``; a parsed tree is treated as read-only by every consumer.

Node Hierarchy
--------------
Block-level nodes:
    - Document
    - Header, Paragraph, CodeBlock, BlockQuote, Admonition
    - UnorderedList, OrderedList, DefinitionList, Table
    - HorizontalRule, PassthroughBlock

Block helper nodes:
    - ListItem, DefinitionTerm, DefinitionDescription, TableRow, TableCell

Inline nodes:
    - Text, Bold, Italic, Monospace, Subscript, Superscript
    - Link, Image, CrossRef, Math, LineBreak

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Union


def _span_value(attributes: dict[str, str], key: str) -> int:
    try:
        return max(1, int(attributes.get(key, "1")))
    except ValueError:
        return 1


class Node:
    """Base class for all AST nodes.

    Concrete node classes override ``accept`` to call their specific
    ``visit_*`` method. Node types a visitor does not know about fall back to
    ``generic_visit``.
    """

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's generic_visit method

        """
        return visitor.generic_visit(self)


# =============================================================================
# Inline nodes
# =============================================================================


@dataclass
class Text(Node):
    """Plain text run.

    Parameters
    ----------
    content : str
        Literal text, with attribute references already substituted

    """

    content: str

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this text node."""
        return visitor.visit_text(self)


@dataclass
class Bold(Node):
    """Strong emphasis (``*text*`` or ``**text**``)."""

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this bold node."""
        return visitor.visit_bold(self)


@dataclass
class Italic(Node):
    """Emphasis (``_text_`` or ``__text__``)."""

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this italic node."""
        return visitor.visit_italic(self)


@dataclass
class Monospace(Node):
    """Monospace span. Its content is always a single literal Text node."""

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this monospace node."""
        return visitor.visit_monospace(self)


@dataclass
class Subscript(Node):
    """Subscript span (``~text~``)."""

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this subscript node."""
        return visitor.visit_subscript(self)


@dataclass
class Superscript(Node):
    """Superscript span (``^text^``)."""

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this superscript node."""
        return visitor.visit_superscript(self)


@dataclass
class Link(Node):
    """Hyperlink from a bare URL or a ``link:`` macro.

    Parameters
    ----------
    url : str
        Link target
    content : list of Node
        Display text; the URL itself as Text when no text was written

    """

    url: str
    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this link."""
        return visitor.visit_link(self)


@dataclass
class Image(Node):
    """Image reference from ``image:`` (inline) or ``image::`` (block) macros.

    Parameters
    ----------
    url : str
        Image location as written
    alt_text : str
        First positional macro attribute, or empty
    attributes : dict of str to str
        Remaining ``key=value`` macro attributes (``width``, ``height``, ...)

    """

    url: str
    alt_text: str = ""
    attributes: dict[str, str] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this image."""
        return visitor.visit_image(self)


@dataclass
class CrossRef(Node):
    """Internal cross-reference ``<<target,text>>``.

    Parameters
    ----------
    target : str
        Id of the referenced element
    content : list of Node
        Display text; the target as Text when no text was written

    """

    target: str
    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this cross-reference."""
        return visitor.visit_cross_ref(self)


@dataclass
class Math(Node):
    """Inline math from ``stem:[...]`` or ``latexmath:[...]``, kept verbatim."""

    content: str

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this math node."""
        return visitor.visit_math(self)


@dataclass
class LineBreak(Node):
    """Hard line break inside a paragraph."""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this line break."""
        return visitor.visit_line_break(self)


InlineNode = Union[Text, Bold, Italic, Monospace, Subscript, Superscript, Link, Image, CrossRef, Math, LineBreak]


# =============================================================================
# Block helper nodes
# =============================================================================


@dataclass
class ListItem(Node):
    """Single list item.

    Parameters
    ----------
    content : list of Node
        Inline content of the item text
    nested : UnorderedList, OrderedList or None
        List nested under this item, owned exclusively by it

    """

    content: list[Node] = field(default_factory=list)
    nested: Optional[Union[UnorderedList, OrderedList]] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list item."""
        return visitor.visit_list_item(self)


@dataclass
class DefinitionTerm(Node):
    """Term half of a definition list entry."""

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this definition term."""
        return visitor.visit_definition_term(self)


@dataclass
class DefinitionDescription(Node):
    """Description half of a definition list entry; may be empty."""

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this definition description."""
        return visitor.visit_definition_description(self)


@dataclass
class TableCell(Node):
    """Table cell with inline content.

    Parameters
    ----------
    content : list of Node
        Inline content of the cell
    attributes : dict of str to str
        Cell attributes; spans are stored as ``colspan``/``rowspan`` strings

    """

    content: list[Node] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)

    @property
    def colspan(self) -> int:
        """Number of columns the cell spans (at least 1)."""
        return _span_value(self.attributes, "colspan")

    @property
    def rowspan(self) -> int:
        """Number of rows the cell spans (at least 1)."""
        return _span_value(self.attributes, "rowspan")

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table cell."""
        return visitor.visit_table_cell(self)


@dataclass
class TableRow(Node):
    """Table row. Rows in one table may have different cell counts."""

    cells: list[TableCell] = field(default_factory=list)
    is_header: bool = False

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table row."""
        return visitor.visit_table_row(self)


# =============================================================================
# Block nodes
# =============================================================================


@dataclass
class Header(Node):
    """Section header.

    Parameters
    ----------
    level : int
        Header level, 1 to 6 (number of ``=`` characters)
    content : list of Node
        Inline content of the header text
    id : str
        Explicit ``[#id]`` or an id generated from the header text

    """

    level: int
    content: list[Node] = field(default_factory=list)
    id: str = ""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this header."""
        return visitor.visit_header(self)


@dataclass
class Paragraph(Node):
    """Paragraph of inline content; block attribute lines land in ``attributes``."""

    content: list[Node] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this paragraph."""
        return visitor.visit_paragraph(self)


@dataclass
class CodeBlock(Node):
    """Delimited listing block.

    Parameters
    ----------
    content : str
        Raw lines between the fences, joined with newlines
    language : str
        Source language from ``[source,lang]``; empty when not given
    attributes : dict of str to str
        Flags such as ``linenums`` (stored as ``"true"``) and named attributes
    callouts : dict of int to str
        Explanations from ``<N> text`` lines following the closing fence

    """

    content: str
    language: str = ""
    attributes: dict[str, str] = field(default_factory=dict)
    callouts: dict[int, str] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this code block."""
        return visitor.visit_code_block(self)


@dataclass
class BlockQuote(Node):
    """Quote block with nested blocks and an optional attribution."""

    children: list[Node] = field(default_factory=list)
    attribution: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this block quote."""
        return visitor.visit_block_quote(self)


@dataclass
class Admonition(Node):
    """Callout box such as NOTE or WARNING.

    Parameters
    ----------
    kind : str
        Lower-case type: note, tip, important, warning or caution
    children : list of Node
        Nested blocks
    title : str or None
        Custom title from a ``.Title`` line
    attributes : dict of str to str
        Block attributes such as ``id`` and ``role``

    """

    kind: str
    children: list[Node] = field(default_factory=list)
    title: Optional[str] = None
    attributes: dict[str, str] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this admonition."""
        return visitor.visit_admonition(self)


@dataclass
class UnorderedList(Node):
    """Bulleted list."""

    items: list[ListItem] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this unordered list."""
        return visitor.visit_unordered_list(self)


@dataclass
class OrderedList(Node):
    """Numbered list.

    Parameters
    ----------
    items : list of ListItem
        List items
    style : str
        Numbering style: arabic, loweralpha, upperalpha, lowerroman or upperroman
    attributes : dict of str to str
        Named attributes; ``start`` holds the first number when given

    """

    items: list[ListItem] = field(default_factory=list)
    style: str = "arabic"
    attributes: dict[str, str] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this ordered list."""
        return visitor.visit_ordered_list(self)


@dataclass
class DefinitionList(Node):
    """List of (term, description) pairs."""

    items: list[tuple[DefinitionTerm, DefinitionDescription]] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this definition list."""
        return visitor.visit_definition_list(self)


@dataclass
class Table(Node):
    """Table with rows and the attributes of its ``[cols=...,options=...]`` line."""

    rows: list[TableRow] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table."""
        return visitor.visit_table(self)


@dataclass
class HorizontalRule(Node):
    """Thematic break (``'''`` or ``---``)."""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this horizontal rule."""
        return visitor.visit_horizontal_rule(self)


@dataclass
class PassthroughBlock(Node):
    """Raw ``++++`` block content; ``attributes["style"]`` holds e.g. ``stem``."""

    content: str
    attributes: dict[str, str] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this passthrough block."""
        return visitor.visit_passthrough_block(self)


Block = Union[
    Header,
    Paragraph,
    CodeBlock,
    BlockQuote,
    Admonition,
    UnorderedList,
    OrderedList,
    DefinitionList,
    Table,
    HorizontalRule,
    PassthroughBlock,
]


@dataclass
class Document(Node):
    """Root node of a parsed document.

    Parameters
    ----------
    children : list of Node
        Top-level blocks in document order
    attributes : dict of str to str
        Snapshot of the attribute table at the end of parsing, built-ins included

    """

    children: list[Node] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this document."""
        return visitor.visit_document(self)

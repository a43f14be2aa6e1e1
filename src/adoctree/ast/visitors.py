#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adoctree/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

Renderers and other tree consumers subclass ``NodeVisitor`` and implement a
``visit_*`` method for every node class. Node classes that a visitor was not
written for (for example user-defined ``Node`` subclasses) are routed to
``generic_visit``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from adoctree.ast.nodes import (
    Admonition,
    BlockQuote,
    Bold,
    CodeBlock,
    CrossRef,
    DefinitionDescription,
    DefinitionList,
    DefinitionTerm,
    Document,
    Header,
    HorizontalRule,
    Image,
    Italic,
    LineBreak,
    Link,
    ListItem,
    Math,
    Monospace,
    Node,
    OrderedList,
    Paragraph,
    PassthroughBlock,
    Subscript,
    Superscript,
    Table,
    TableCell,
    TableRow,
    Text,
    UnorderedList,
)


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    All visit methods accept a node and return Any (typically None for
    side-effect visitors such as renderers that accumulate output).

    Examples
    --------
    Counting headers:

        >>> class HeaderCounter(NodeVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...     def visit_header(self, node):
        ...         self.count += 1
        ...     # remaining visit_* methods omitted

    """

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node.

        Parameters
        ----------
        node : Document
            The document node to visit

        Returns
        -------
        Any
            Result of processing this node

        """

    # Block nodes

    @abstractmethod
    def visit_header(self, node: Header) -> Any:
        """Visit a Header node."""

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a CodeBlock node."""

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote) -> Any:
        """Visit a BlockQuote node."""

    @abstractmethod
    def visit_admonition(self, node: Admonition) -> Any:
        """Visit an Admonition node."""

    @abstractmethod
    def visit_unordered_list(self, node: UnorderedList) -> Any:
        """Visit an UnorderedList node."""

    @abstractmethod
    def visit_ordered_list(self, node: OrderedList) -> Any:
        """Visit an OrderedList node."""

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""

    @abstractmethod
    def visit_definition_list(self, node: DefinitionList) -> Any:
        """Visit a DefinitionList node."""

    @abstractmethod
    def visit_definition_term(self, node: DefinitionTerm) -> Any:
        """Visit a DefinitionTerm node."""

    @abstractmethod
    def visit_definition_description(self, node: DefinitionDescription) -> Any:
        """Visit a DefinitionDescription node."""

    @abstractmethod
    def visit_table(self, node: Table) -> Any:
        """Visit a Table node."""

    @abstractmethod
    def visit_table_row(self, node: TableRow) -> Any:
        """Visit a TableRow node."""

    @abstractmethod
    def visit_table_cell(self, node: TableCell) -> Any:
        """Visit a TableCell node."""

    @abstractmethod
    def visit_horizontal_rule(self, node: HorizontalRule) -> Any:
        """Visit a HorizontalRule node."""

    @abstractmethod
    def visit_passthrough_block(self, node: PassthroughBlock) -> Any:
        """Visit a PassthroughBlock node."""

    # Inline nodes

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""

    @abstractmethod
    def visit_bold(self, node: Bold) -> Any:
        """Visit a Bold node."""

    @abstractmethod
    def visit_italic(self, node: Italic) -> Any:
        """Visit an Italic node."""

    @abstractmethod
    def visit_monospace(self, node: Monospace) -> Any:
        """Visit a Monospace node."""

    @abstractmethod
    def visit_subscript(self, node: Subscript) -> Any:
        """Visit a Subscript node."""

    @abstractmethod
    def visit_superscript(self, node: Superscript) -> Any:
        """Visit a Superscript node."""

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node."""

    @abstractmethod
    def visit_image(self, node: Image) -> Any:
        """Visit an Image node."""

    @abstractmethod
    def visit_cross_ref(self, node: CrossRef) -> Any:
        """Visit a CrossRef node."""

    @abstractmethod
    def visit_math(self, node: Math) -> Any:
        """Visit a Math node."""

    @abstractmethod
    def visit_line_break(self, node: LineBreak) -> Any:
        """Visit a LineBreak node."""

    def generic_visit(self, node: Node) -> Any:
        """Fallback visitor for unhandled node types.

        Parameters
        ----------
        node : Node
            The node to visit

        Returns
        -------
        Any
            Result of processing (default: None)

        """
        return None

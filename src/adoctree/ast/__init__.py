#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adoctree/ast/__init__.py
"""Abstract Syntax Tree (AST) module for parsed AsciiDoc documents.

The module consists of several components:

- nodes: dataclass node types for blocks and inline spans
- visitors: visitor base class used by the renderers
- utils: child traversal and plain-text extraction
- serialization: JSON serialization and deserialization of AST structures

Examples
--------
    >>> from adoctree.ast import Document, Header, Paragraph, Text
    >>> doc = Document(children=[
    ...     Header(level=1, content=[Text(content="Title")], id="title"),
    ...     Paragraph(content=[Text(content="Hello world")]),
    ... ])

"""

from __future__ import annotations

from adoctree.ast.nodes import (
    Admonition,
    Block,
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
    InlineNode,
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
from adoctree.ast.serialization import ast_to_dict, ast_to_json, dict_to_ast, json_to_ast
from adoctree.ast.utils import extract_text, get_node_children, walk
from adoctree.ast.visitors import NodeVisitor

__all__ = [
    # Nodes
    "Admonition",
    "Block",
    "BlockQuote",
    "Bold",
    "CodeBlock",
    "CrossRef",
    "DefinitionDescription",
    "DefinitionList",
    "DefinitionTerm",
    "Document",
    "Header",
    "HorizontalRule",
    "Image",
    "InlineNode",
    "Italic",
    "LineBreak",
    "Link",
    "ListItem",
    "Math",
    "Monospace",
    "Node",
    "OrderedList",
    "Paragraph",
    "PassthroughBlock",
    "Subscript",
    "Superscript",
    "Table",
    "TableCell",
    "TableRow",
    "Text",
    "UnorderedList",
    # Visitors
    "NodeVisitor",
    # Utilities
    "extract_text",
    "get_node_children",
    "walk",
    # Serialization
    "ast_to_dict",
    "ast_to_json",
    "dict_to_ast",
    "json_to_ast",
]

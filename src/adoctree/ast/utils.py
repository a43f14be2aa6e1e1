#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adoctree/ast/utils.py
"""Utility functions for working with AST nodes."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Union

from adoctree.ast.nodes import (
    Admonition,
    BlockQuote,
    CodeBlock,
    CrossRef,
    DefinitionDescription,
    DefinitionList,
    DefinitionTerm,
    Document,
    Header,
    Image,
    Link,
    ListItem,
    Math,
    Node,
    OrderedList,
    Paragraph,
    Table,
    TableCell,
    TableRow,
    Text,
    UnorderedList,
)


def get_node_children(node: Node) -> list[Node]:
    """Return the direct child nodes of ``node`` in document order.

    Parameters
    ----------
    node : Node
        Node to inspect

    Returns
    -------
    list of Node
        Child nodes; empty for leaf nodes such as Text or HorizontalRule

    """
    if isinstance(node, (Document, BlockQuote, Admonition)):
        return list(node.children)
    if isinstance(node, (UnorderedList, OrderedList)):
        return list(node.items)
    if isinstance(node, ListItem):
        children: list[Node] = list(node.content)
        if node.nested is not None:
            children.append(node.nested)
        return children
    if isinstance(node, DefinitionList):
        pairs: list[Node] = []
        for term, description in node.items:
            pairs.append(term)
            pairs.append(description)
        return pairs
    if isinstance(node, Table):
        return list(node.rows)
    if isinstance(node, TableRow):
        return list(node.cells)
    content = getattr(node, "content", None)
    if isinstance(content, list):
        return list(content)
    return []


def walk(node: Node) -> Iterator[Node]:
    """Yield ``node`` and all of its descendants, depth first."""
    yield node
    for child in get_node_children(node):
        yield from walk(child)


def extract_text(node_or_nodes: Union[Node, list[Node]], joiner: str = " ") -> str:
    """Extract plain text from a node or list of nodes.

    Text content, link and cross-reference text, math source, image alt text
    and raw code are collected; markup is dropped.

    Parameters
    ----------
    node_or_nodes : Node or list of Node
        A single node or list of nodes to extract text from
    joiner : str, default = " "
        String used between sibling parts. Use "" to reproduce inline text
        exactly (Text nodes already carry their own spacing).

    Returns
    -------
    str
        Concatenated text content

    Examples
    --------
        >>> from adoctree.ast import Bold, Text
        >>> extract_text([Bold(content=[Text("Bold")]), Text(" words")], joiner="")
        'Bold words'

    """
    if isinstance(node_or_nodes, list):
        return joiner.join(part for part in (extract_text(n, joiner) for n in node_or_nodes) if part)

    node = node_or_nodes
    if isinstance(node, Text):
        return node.content
    if isinstance(node, (CodeBlock, Math)):
        return node.content
    if isinstance(node, Image):
        return node.alt_text
    if isinstance(node, (Link, CrossRef, Header, Paragraph, DefinitionTerm, DefinitionDescription, TableCell)):
        return extract_text(node.content, joiner)
    return extract_text(get_node_children(node), joiner)

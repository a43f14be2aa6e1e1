#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for AST nodes, traversal helpers and JSON serialization."""

import json

import pytest

from adoctree.ast import (
    Bold,
    CodeBlock,
    DefinitionDescription,
    DefinitionList,
    DefinitionTerm,
    Document,
    Header,
    Link,
    ListItem,
    Node,
    Paragraph,
    Table,
    TableCell,
    TableRow,
    Text,
    UnorderedList,
    ast_to_dict,
    ast_to_json,
)
from adoctree.ast.serialization import dict_to_ast, json_to_ast
from adoctree.ast.utils import extract_text, get_node_children, walk
from adoctree.parsers import parse


class _Recorder:
    """Minimal visitor that records which method handled a node."""

    def visit_text(self, node: Text) -> str:
        return f"text:{node.content}"

    def visit_header(self, node: Header) -> str:
        return f"header:{node.level}"

    def generic_visit(self, node: Node) -> str:
        return f"generic:{type(node).__name__}"


class _CustomNode(Node):
    """User-defined node type unknown to visitors."""


@pytest.mark.unit
class TestNodeDispatch:
    """Tests for visitor dispatch through ``accept``."""

    def test_accept_dispatches_to_visit_method(self) -> None:
        """Test that nodes call their matching visit method."""
        visitor = _Recorder()
        assert Text(content="hi").accept(visitor) == "text:hi"
        assert Header(level=2).accept(visitor) == "header:2"

    def test_unknown_node_uses_generic_visit(self) -> None:
        """Test that node types without a visit method fall back."""
        assert _CustomNode().accept(_Recorder()) == "generic:_CustomNode"

    def test_nodes_compare_by_value(self) -> None:
        """Test dataclass equality of nodes."""
        assert Paragraph(content=[Text(content="a")]) == Paragraph(content=[Text(content="a")])
        assert Paragraph(content=[Text(content="a")]) != Paragraph(content=[Text(content="b")])


@pytest.mark.unit
class TestTraversal:
    """Tests for child access, walking and text extraction."""

    def test_list_item_children_include_nested(self) -> None:
        """Test that a nested list is a child of its item."""
        nested = UnorderedList(items=[ListItem(content=[Text(content="b")])])
        item = ListItem(content=[Text(content="a")], nested=nested)
        assert get_node_children(item) == [Text(content="a"), nested]

    def test_definition_list_children(self) -> None:
        """Test that definition pairs are flattened in order."""
        term = DefinitionTerm(content=[Text(content="t")])
        description = DefinitionDescription(content=[Text(content="d")])
        assert get_node_children(DefinitionList(items=[(term, description)])) == [term, description]

    def test_walk_visits_every_node(self) -> None:
        """Test depth-first traversal of a parsed document."""
        doc = parse("= T\n\n* a\n** b\n\n|===\n|x|y\n|===")
        types = [type(node).__name__ for node in walk(doc)]
        assert types[0] == "Document"
        assert types.count("ListItem") == 2
        assert types.count("TableCell") == 2

    def test_extract_text_joiners(self) -> None:
        """Test extraction with the default and empty joiners."""
        nodes = [Bold(content=[Text(content="Bold")]), Text(content=" words")]
        assert extract_text(nodes, joiner="") == "Bold words"
        assert extract_text(Link(url="u", content=[Text(content="site")])) == "site"

    def test_extract_text_from_code(self) -> None:
        """Test that code blocks contribute their raw text."""
        assert extract_text(CodeBlock(content="x = 1")) == "x = 1"


@pytest.mark.unit
class TestSerialization:
    """Tests for dictionary and JSON forms of the tree."""

    def test_ast_to_dict(self) -> None:
        """Test the dictionary form of a leaf node."""
        assert ast_to_dict(Text(content="Hello")) == {"node_type": "Text", "content": "Hello"}

    def test_json_has_schema_version(self) -> None:
        """Test that JSON output is versioned."""
        data = json.loads(ast_to_json(Document()))
        assert data["schema_version"] == 1
        assert data["node_type"] == "Document"

    def test_round_trip_parsed_document(self, sample_document: str) -> None:
        """Test that a parsed document survives a JSON round trip."""
        doc = parse(sample_document)
        assert json_to_ast(ast_to_json(doc, indent=2)) == doc

    def test_round_trip_keeps_typed_fields(self) -> None:
        """Test that callout keys and definition pairs regain their types."""
        doc = parse("----\nx <1>\n----\n<1> one\n\nTerm:: def")
        restored = json_to_ast(ast_to_json(doc))
        assert restored.children[0].callouts == {1: "one"}
        assert isinstance(restored.children[1].items[0], tuple)

    def test_table_round_trip(self) -> None:
        """Test a table with span attributes."""
        table = Table(rows=[TableRow(cells=[TableCell(attributes={"colspan": "2"})], is_header=True)])
        assert dict_to_ast(ast_to_dict(table)) == table

    def test_unsupported_schema_version(self) -> None:
        """Test that a future schema version is rejected."""
        with pytest.raises(ValueError, match="schema version"):
            json_to_ast('{"schema_version": 2, "node_type": "Document"}')

    def test_unknown_node_type(self) -> None:
        """Test that an unknown node type is rejected."""
        with pytest.raises(ValueError, match="Unknown node type"):
            dict_to_ast({"node_type": "Sidebar"})

    def test_custom_node_not_serializable(self) -> None:
        """Test that non-dataclass nodes cannot be serialized."""
        with pytest.raises(ValueError):
            ast_to_dict(_CustomNode())

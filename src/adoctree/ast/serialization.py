#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adoctree/ast/serialization.py
"""JSON serialization and deserialization for AST nodes.

Every node becomes a JSON object with a ``node_type`` key naming its class
and one key per dataclass field. Definition list entries are serialized as
two-element arrays and code block callout numbers as string keys.

Examples
--------
    >>> from adoctree.ast import Document, Header, Text
    >>> from adoctree.ast.serialization import ast_to_json, json_to_ast
    >>> doc = Document(children=[Header(level=1, content=[Text("Title")], id="title")])
    >>> json_to_ast(ast_to_json(doc)) == doc
    True

"""

from __future__ import annotations

import json
from dataclasses import fields, is_dataclass
from typing import Any

from adoctree.ast import nodes as ast_nodes
from adoctree.ast.nodes import CodeBlock, DefinitionList, Node

SCHEMA_VERSION = 1

_NODE_CLASSES: dict[str, type[Node]] = {
    name: obj
    for name, obj in vars(ast_nodes).items()
    if isinstance(obj, type) and issubclass(obj, Node) and obj is not Node and is_dataclass(obj)
}


def _serialize_value(value: Any) -> Any:
    if isinstance(value, Node):
        return ast_to_dict(value)
    if isinstance(value, (list, tuple)):
        return [_serialize_value(item) for item in value]
    if isinstance(value, dict):
        return {str(key): _serialize_value(item) for key, item in value.items()}
    return value


def ast_to_dict(node: Node) -> dict[str, Any]:
    """Convert an AST node to a dictionary representation.

    Parameters
    ----------
    node : Node
        The AST node to convert

    Returns
    -------
    dict
        Dictionary representation of the node

    Raises
    ------
    ValueError
        If the node is not one of the dataclass node types

    Examples
    --------
    >>> from adoctree.ast import Text
    >>> ast_to_dict(Text(content="Hello"))
    {'node_type': 'Text', 'content': 'Hello'}

    """
    node_class = type(node)
    if _NODE_CLASSES.get(node_class.__name__) is not node_class:
        raise ValueError(f"Unknown node type for serialization: {node_class.__name__}")

    result: dict[str, Any] = {"node_type": node_class.__name__}
    for node_field in fields(node):  # type: ignore[arg-type]
        result[node_field.name] = _serialize_value(getattr(node, node_field.name))
    return result


def ast_to_json(node: Node, indent: int | None = None) -> str:
    """Serialize an AST node to a JSON string with a schema version.

    Parameters
    ----------
    node : Node
        The AST node to serialize
    indent : int or None, default = None
        Number of spaces for indentation (None for compact format)

    Returns
    -------
    str
        JSON text of the form ``{"schema_version": 1, "node_type": ..., ...}``

    """
    versioned = {"schema_version": SCHEMA_VERSION, **ast_to_dict(node)}
    return json.dumps(versioned, indent=indent, ensure_ascii=False)


def _deserialize_value(value: Any) -> Any:
    if isinstance(value, dict) and "node_type" in value:
        return dict_to_ast(value)
    if isinstance(value, list):
        return [_deserialize_value(item) for item in value]
    return value


def dict_to_ast(data: dict[str, Any]) -> Node:
    """Rebuild an AST node from the output of :func:`ast_to_dict`.

    Raises
    ------
    ValueError
        If ``node_type`` is missing or names an unknown class

    """
    node_type = data.get("node_type")
    node_class = _NODE_CLASSES.get(str(node_type))
    if node_class is None:
        raise ValueError(f"Unknown node type: {node_type!r}")

    kwargs: dict[str, Any] = {}
    for node_field in fields(node_class):  # type: ignore[arg-type]
        if node_field.name in data:
            kwargs[node_field.name] = _deserialize_value(data[node_field.name])

    if node_class is CodeBlock and "callouts" in kwargs:
        kwargs["callouts"] = {int(key): text for key, text in kwargs["callouts"].items()}
    if node_class is DefinitionList and "items" in kwargs:
        kwargs["items"] = [(term, description) for term, description in kwargs["items"]]
    return node_class(**kwargs)


def json_to_ast(json_str: str) -> Node:
    """Deserialize a JSON string produced by :func:`ast_to_json`.

    Raises
    ------
    ValueError
        If the schema version is unsupported or a node type is unknown
    json.JSONDecodeError
        If the JSON text is malformed

    """
    data = json.loads(json_str)
    version = data.pop("schema_version", SCHEMA_VERSION)
    if version != SCHEMA_VERSION:
        raise ValueError(f"Unsupported schema version: {version}")
    return dict_to_ast(data)

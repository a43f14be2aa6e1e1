"""adoctree - An AsciiDoc parsing engine that produces a typed syntax tree.

adoctree turns AsciiDoc-like markup into a tree of dataclass nodes (headers,
paragraphs, listings with callouts, quotes, admonitions, nested lists,
definition lists, tables with spans, passthrough blocks and inline
formatting). Attribute entries and references are resolved and include
directives are expanded while parsing. Parsing never raises for text input:
malformed syntax degrades to plain paragraphs and include problems are
logged and skipped.

The tree can be rendered to HTML, LaTeX or Markdown, or dumped as JSON.

Examples
--------
Parse and render:

    >>> from adoctree import parse, to_html
    >>> doc = parse("= Title\\n\\nThis is *bold*.")
    >>> html = to_html(doc)

Parse a file with includes resolved relative to it:

    >>> from adoctree import parse_file
    >>> doc = parse_file("manual.adoc", attributes={"version": "2.1"})

See Also
--------
adoctree.ast : AST node definitions and utilities
adoctree.renderers : Output backends

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "adoctree requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "0.1.0"

from adoctree.api import render, to_html, to_latex, to_markdown
from adoctree.ast import (
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
    NodeVisitor,
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
    ast_to_dict,
    ast_to_json,
)
from adoctree.exceptions import AdocTreeError, FormatError, RenderingError, ValidationError
from adoctree.options import (
    AsciiDocOptions,
    HtmlRendererOptions,
    LatexRendererOptions,
    MarkdownRendererOptions,
)
from adoctree.parsers import AsciiDocParser, parse, parse_file, parse_inline

__all__ = [
    "__version__",
    # Parsing
    "AsciiDocParser",
    "parse",
    "parse_file",
    "parse_inline",
    # Rendering
    "render",
    "to_html",
    "to_latex",
    "to_markdown",
    # Serialization
    "ast_to_dict",
    "ast_to_json",
    # Options
    "AsciiDocOptions",
    "HtmlRendererOptions",
    "LatexRendererOptions",
    "MarkdownRendererOptions",
    # Exceptions
    "AdocTreeError",
    "FormatError",
    "RenderingError",
    "ValidationError",
    # Nodes
    "Admonition",
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
    "Italic",
    "LineBreak",
    "Link",
    "ListItem",
    "Math",
    "Monospace",
    "Node",
    "NodeVisitor",
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
]

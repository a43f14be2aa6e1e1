#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adoctree/api.py
"""Rendering entry points for parsed documents.

These functions pair a format name with its renderer and options class so
callers do not have to construct renderers themselves. Parsing entry points
live in :mod:`adoctree.parsers.asciidoc` and are re-exported from the
package root.
"""

from __future__ import annotations

import logging
from typing import Optional

from adoctree.ast.nodes import Document
from adoctree.ast.serialization import ast_to_json
from adoctree.options.base import BaseRendererOptions
from adoctree.options.html import HtmlRendererOptions
from adoctree.options.latex import LatexRendererOptions
from adoctree.options.markdown import MarkdownRendererOptions
from adoctree.renderers import get_renderer, render_document

logger = logging.getLogger(__name__)


def render(document: Document, fmt: str = "html", options: Optional[BaseRendererOptions] = None) -> str:
    """Render a parsed document to the named output format.

    Parameters
    ----------
    document : Document
        Parsed document
    fmt : {"html", "latex", "markdown", "json"}, default "html"
        Output format; ``json`` is the serialized AST
    options : BaseRendererOptions, optional
        Options matching the format's renderer

    Returns
    -------
    str
        Rendered text

    Raises
    ------
    FormatError
        If ``fmt`` names no known format
    InvalidOptionsError
        If ``options`` do not belong to the format's renderer
    RenderingError
        If the renderer fails on the tree

    Examples
    --------
    >>> from adoctree import parse
    >>> render(parse("Hello *world*"), "markdown")
    'Hello **world**\\n'

    """
    if fmt.lower() == "json":
        return ast_to_json(document, indent=2) + "\n"
    renderer_class = get_renderer(fmt)
    logger.debug("Rendering document with %s", renderer_class.__name__)
    return render_document(renderer_class(options), document)


def to_html(document: Document, options: Optional[HtmlRendererOptions] = None) -> str:
    """Render a document to HTML."""
    return render(document, "html", options)


def to_latex(document: Document, options: Optional[LatexRendererOptions] = None) -> str:
    """Render a document to LaTeX."""
    return render(document, "latex", options)


def to_markdown(document: Document, options: Optional[MarkdownRendererOptions] = None) -> str:
    """Render a document to Markdown."""
    return render(document, "markdown", options)

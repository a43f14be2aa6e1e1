#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/adoctree/renderers/__init__.py
"""AST renderers for converting parsed documents to output formats.

Available renderers:
- HtmlRenderer: Render to an HTML fragment or standalone page
- LatexRenderer: Render to LaTeX, optionally with a preamble
- MarkdownRenderer: Render to GitHub-flavored Markdown

Use ``get_renderer`` to look up a renderer class by format name.

Examples
--------
    >>> from adoctree import parse
    >>> from adoctree.renderers import get_renderer
    >>> renderer_class = get_renderer("latex")
    >>> latex = renderer_class().render_to_string(parse("= Title"))

"""

from __future__ import annotations

from adoctree.exceptions import FormatError
from adoctree.renderers.base import BaseRenderer, InlineContentMixin, render_document
from adoctree.renderers.html import HtmlRenderer
from adoctree.renderers.latex import LatexRenderer
from adoctree.renderers.markdown import MarkdownRenderer

RENDERERS: dict[str, type[BaseRenderer]] = {
    "html": HtmlRenderer,
    "latex": LatexRenderer,
    "markdown": MarkdownRenderer,
}


def get_renderer(format_name: str) -> type[BaseRenderer]:
    """Return the renderer class registered for ``format_name``.

    Raises
    ------
    FormatError
        If no renderer handles the format

    """
    try:
        return RENDERERS[format_name.lower()]
    except KeyError:
        raise FormatError(format_name, supported_formats=sorted(RENDERERS)) from None


__all__ = [
    "BaseRenderer",
    "HtmlRenderer",
    "InlineContentMixin",
    "LatexRenderer",
    "MarkdownRenderer",
    "RENDERERS",
    "get_renderer",
    "render_document",
]

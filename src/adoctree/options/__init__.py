#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the adoctree parser and renderers.

Each component has its own frozen Options dataclass. Use
``create_updated`` to derive modified copies.
"""

from __future__ import annotations

from adoctree.options.asciidoc import AsciiDocOptions
from adoctree.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from adoctree.options.html import HtmlRendererOptions
from adoctree.options.latex import LatexRendererOptions
from adoctree.options.markdown import MarkdownRendererOptions

__all__ = [
    "AsciiDocOptions",
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "HtmlRendererOptions",
    "LatexRendererOptions",
    "MarkdownRendererOptions",
]

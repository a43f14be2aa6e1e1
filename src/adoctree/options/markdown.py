#  Copyright (c) 2025 Tom Villani, Ph.D.

# adoctree/options/markdown.py
"""Configuration options for Markdown rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from adoctree.constants import (
    DEFAULT_MARKDOWN_BULLET,
    DEFAULT_MARKDOWN_LIST_INDENT,
    DEFAULT_MARKDOWN_USE_HTML_FOR_SUBSUP,
)
from adoctree.options.base import BaseRendererOptions


@dataclass(frozen=True)
class MarkdownRendererOptions(BaseRendererOptions):
    """Configuration options for rendering AST to Markdown.

    Parameters
    ----------
    bullet : str, default "*"
        Marker used for unordered list items.
    list_indent : int, default 2
        Spaces of indentation per nested list level.
    use_html_for_subsup : bool, default True
        Render subscript and superscript as ``<sub>``/``<sup>``; otherwise
        use the ``~text~`` / ``^text^`` extension syntax.

    """

    bullet: str = field(
        default=DEFAULT_MARKDOWN_BULLET,
        metadata={"help": "Bullet marker for unordered lists", "choices": ["*", "-", "+"], "importance": "core"},
    )
    list_indent: int = field(
        default=DEFAULT_MARKDOWN_LIST_INDENT,
        metadata={"help": "Spaces per nested list level", "type": int, "importance": "advanced"},
    )
    use_html_for_subsup: bool = field(
        default=DEFAULT_MARKDOWN_USE_HTML_FOR_SUBSUP,
        metadata={"help": "Use <sub>/<sup> tags for subscript and superscript", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if self.bullet not in ("*", "-", "+"):
            raise ValueError(f"Invalid bullet: {self.bullet!r}. Must be one of: *, -, +")
        if self.list_indent < 1:
            raise ValueError(f"list_indent must be positive, got {self.list_indent}")

#  Copyright (c) 2025 Tom Villani, Ph.D.

# adoctree/options/html.py
"""Configuration options for HTML rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from adoctree.constants import (
    DEFAULT_HTML_CSS_STYLE,
    DEFAULT_HTML_LANGUAGE,
    DEFAULT_HTML_PASSTHROUGH_MODE,
    DEFAULT_HTML_SANITIZE_URLS,
    DEFAULT_HTML_STANDALONE,
    DEFAULT_HTML_TITLE,
    HTML_PASSTHROUGH_MODES,
    HtmlCssStyle,
    HtmlPassthroughMode,
)
from adoctree.options.base import BaseRendererOptions


@dataclass(frozen=True)
class HtmlRendererOptions(BaseRendererOptions):
    """Configuration options for rendering AST to HTML.

    Parameters
    ----------
    standalone : bool, default False
        Wrap the body in a complete ``<!DOCTYPE html>`` document.
    title : str or None, default None
        Title for standalone documents. When None, the ``doctitle`` or
        ``title`` document attribute is used, then the first level-1 header,
        then "Document".
    language : str, default "en"
        Value of the ``lang`` attribute on the ``<html>`` element.
    css_style : {"embedded", "none"}, default "embedded"
        Whether standalone documents carry a small embedded stylesheet.
    passthrough_mode : {"pass-through", "escape", "drop"}, default "pass-through"
        How passthrough blocks are emitted:
        - "pass-through": raw content, unchanged
        - "escape": content HTML-escaped inside ``<pre>``
        - "drop": omitted
    sanitize_urls : bool, default True
        Replace link and image URLs that use dangerous schemes
        (``javascript:``, ``vbscript:``, ``data:text/html``) with ``#``.

    """

    standalone: bool = field(
        default=DEFAULT_HTML_STANDALONE,
        metadata={"help": "Generate a complete HTML document", "importance": "core"},
    )
    title: str | None = field(
        default=None,
        metadata={"help": "Document title for standalone output", "importance": "core"},
    )
    language: str = field(
        default=DEFAULT_HTML_LANGUAGE,
        metadata={"help": "Document language for the lang attribute", "importance": "advanced"},
    )
    css_style: HtmlCssStyle = field(
        default=DEFAULT_HTML_CSS_STYLE,
        metadata={"help": "Stylesheet handling for standalone output", "choices": ["embedded", "none"]},
    )
    passthrough_mode: HtmlPassthroughMode = field(
        default=DEFAULT_HTML_PASSTHROUGH_MODE,
        metadata={
            "help": "How to emit passthrough blocks: pass-through, escape, or drop",
            "choices": HTML_PASSTHROUGH_MODES,
            "importance": "security",
        },
    )
    sanitize_urls: bool = field(
        default=DEFAULT_HTML_SANITIZE_URLS,
        metadata={"help": "Neutralise links that use dangerous URL schemes", "importance": "security"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If any field value is not one of its allowed choices.

        """
        if self.passthrough_mode not in HTML_PASSTHROUGH_MODES:
            raise ValueError(
                f"Invalid passthrough_mode: {self.passthrough_mode!r}. "
                f"Must be one of: {', '.join(HTML_PASSTHROUGH_MODES)}"
            )
        if self.css_style not in ("embedded", "none"):
            raise ValueError(f"Invalid css_style: {self.css_style!r}. Must be 'embedded' or 'none'")

#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the adoctree library.

This module centralizes the hardcoded values and default configuration used
across the parser, the renderers and the command line.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Parser Constants - AsciiDoc parsing defaults and syntax tables
3. Renderer Constants - HTML, LaTeX and Markdown output defaults
4. Security Constants - URL sanitization
5. CLI Constants - exit codes and environment variables
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

AttributeMissingPolicy = Literal["keep", "blank", "warn"]
AdmonitionKind = Literal["note", "tip", "important", "warning", "caution"]
OrderedListStyle = Literal["arabic", "loweralpha", "upperalpha", "lowerroman", "upperroman"]
HtmlPassthroughMode = Literal["pass-through", "escape", "drop"]
HtmlCssStyle = Literal["embedded", "none"]
OutputFormat = Literal["html", "latex", "markdown", "json"]
Alignment = Literal["left", "center", "right"]

# =============================================================================
# Parser Constants - AsciiDoc
# =============================================================================

DEFAULT_ASCIIDOC_PARSE_INCLUDES = True
DEFAULT_ASCIIDOC_MAX_INCLUDE_DEPTH = 64
DEFAULT_ASCIIDOC_ATTRIBUTE_MISSING_POLICY: AttributeMissingPolicy = "keep"
DEFAULT_ASCIIDOC_SUPPORT_UNCONSTRAINED_FORMATTING = True
DEFAULT_ASCIIDOC_HONOR_HARD_BREAKS = True

ADMONITION_TYPES: tuple[str, ...] = ("NOTE", "TIP", "IMPORTANT", "WARNING", "CAUTION")

ORDERED_LIST_STYLES: tuple[str, ...] = ("arabic", "loweralpha", "upperalpha", "lowerroman", "upperroman")
DEFAULT_ORDERED_LIST_STYLE: OrderedListStyle = "arabic"

# Values substituted for {name} references before any document attribute is set
BUILTIN_ATTRIBUTES: dict[str, str] = {
    "blank": "",
    "empty": "",
    "sp": " ",
    "nbsp": " ",
    "zwsp": "​",
    "wj": "⁠",
    "apos": "'",
    "quot": '"',
    "lsquo": "‘",
    "rsquo": "’",
    "ldquo": "“",
    "rdquo": "”",
    "deg": "°",
    "mdash": "—",
    "ndash": "–",
    "plus": "+",
    "brvbar": "¦",
    "vbar": "|",
    "amp": "&",
    "lt": "<",
    "gt": ">",
    "startsb": "[",
    "endsb": "]",
    "caret": "^",
    "asterisk": "*",
    "tilde": "~",
    "backslash": "\\",
    "backtick": "`",
    "two-colons": "::",
    "two-semicolons": ";;",
    "cpp": "C++",
    "pp": "++",
}

# =============================================================================
# Renderer Constants
# =============================================================================

DEFAULT_HTML_STANDALONE = False
DEFAULT_HTML_TITLE = "Document"
DEFAULT_HTML_LANGUAGE = "en"
DEFAULT_HTML_CSS_STYLE: HtmlCssStyle = "embedded"
DEFAULT_HTML_PASSTHROUGH_MODE: HtmlPassthroughMode = "pass-through"
HTML_PASSTHROUGH_MODES = ["pass-through", "escape", "drop"]
DEFAULT_HTML_SANITIZE_URLS = True

HTML_ORDERED_LIST_TYPES: dict[str, str] = {
    "loweralpha": "a",
    "upperalpha": "A",
    "lowerroman": "i",
    "upperroman": "I",
}

DEFAULT_LATEX_INCLUDE_PREAMBLE = False
DEFAULT_LATEX_DOCUMENT_CLASS = "article"
DEFAULT_LATEX_PACKAGES = ["amsmath", "graphicx", "hyperref", "listings", "enumitem", "multirow"]
DEFAULT_LATEX_ESCAPE_SPECIAL = True

LATEX_SECTION_COMMANDS: dict[int, str] = {
    1: "section",
    2: "subsection",
    3: "subsubsection",
    4: "paragraph",
    5: "subparagraph",
    6: "subparagraph",
}

LATEX_ENUMERATE_LABELS: dict[str, str] = {
    "loweralpha": r"\alph*",
    "upperalpha": r"\Alph*",
    "lowerroman": r"\roman*",
    "upperroman": r"\Roman*",
}

DEFAULT_MARKDOWN_BULLET = "*"
DEFAULT_MARKDOWN_LIST_INDENT = 2
DEFAULT_MARKDOWN_USE_HTML_FOR_SUBSUP = True

# =============================================================================
# Security Constants
# =============================================================================

DANGEROUS_SCHEMES = {
    "javascript:",
    "vbscript:",
    "data:text/html",
    "data:text/javascript",
    "data:application/javascript",
    "data:application/x-javascript",
}

# =============================================================================
# CLI Constants
# =============================================================================

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_RENDERING_ERROR = 7

ENV_LOG_LEVEL = "ADOCTREE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

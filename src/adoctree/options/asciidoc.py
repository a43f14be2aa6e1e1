#  Copyright (c) 2025 Tom Villani, Ph.D.

# adoctree/options/asciidoc.py
"""Configuration options for AsciiDoc parsing."""

from __future__ import annotations

from dataclasses import dataclass, field

from adoctree.constants import (
    DEFAULT_ASCIIDOC_ATTRIBUTE_MISSING_POLICY,
    DEFAULT_ASCIIDOC_HONOR_HARD_BREAKS,
    DEFAULT_ASCIIDOC_MAX_INCLUDE_DEPTH,
    DEFAULT_ASCIIDOC_PARSE_INCLUDES,
    DEFAULT_ASCIIDOC_SUPPORT_UNCONSTRAINED_FORMATTING,
    AttributeMissingPolicy,
)
from adoctree.options.base import BaseParserOptions


@dataclass(frozen=True)
class AsciiDocOptions(BaseParserOptions):
    """Configuration options for AsciiDoc-to-AST parsing.

    Parameters
    ----------
    parse_includes : bool, default True
        Whether to expand ``include::path[]`` directives. When False the
        directive line is consumed and produces no blocks.
    max_include_depth : int, default 64
        Maximum nesting of include directives. Deeper includes are skipped
        with a warning; circular includes are detected independently.
    attribute_missing_policy : {"keep", "blank", "warn"}, default "keep"
        How to treat ``{name}`` references to undefined attributes:
        - "keep": leave the reference as literal text
        - "blank": replace it with an empty string
        - "warn": leave it literal and log a warning
    support_unconstrained_formatting : bool, default True
        Whether to recognise the doubled ``**strong**`` and ``__emphasis__``
        forms that may appear inside words.
    honor_hard_breaks : bool, default True
        Whether a paragraph line ending in `` +`` produces a line break.

    """

    parse_includes: bool = field(
        default=DEFAULT_ASCIIDOC_PARSE_INCLUDES,
        metadata={"help": "Expand include::path[] directives", "importance": "core"},
    )
    max_include_depth: int = field(
        default=DEFAULT_ASCIIDOC_MAX_INCLUDE_DEPTH,
        metadata={"help": "Maximum nesting depth of include directives", "type": int, "importance": "security"},
    )
    attribute_missing_policy: AttributeMissingPolicy = field(
        default=DEFAULT_ASCIIDOC_ATTRIBUTE_MISSING_POLICY,
        metadata={
            "help": "Policy for undefined attribute references: keep literal, blank, or warn",
            "choices": ["keep", "blank", "warn"],
            "importance": "advanced",
        },
    )
    support_unconstrained_formatting: bool = field(
        default=DEFAULT_ASCIIDOC_SUPPORT_UNCONSTRAINED_FORMATTING,
        metadata={"help": "Recognise **strong** and __emphasis__ inside words", "importance": "advanced"},
    )
    honor_hard_breaks: bool = field(
        default=DEFAULT_ASCIIDOC_HONOR_HARD_BREAKS,
        metadata={"help": "Treat a trailing ' +' as a hard line break", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if self.max_include_depth < 1:
            raise ValueError(f"max_include_depth must be at least 1, got {self.max_include_depth}")
        if self.attribute_missing_policy not in ("keep", "blank", "warn"):
            raise ValueError(
                f"Invalid attribute_missing_policy: {self.attribute_missing_policy!r}. "
                "Must be one of: keep, blank, warn"
            )

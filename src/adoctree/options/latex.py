#  Copyright (c) 2025 Tom Villani, Ph.D.

# adoctree/options/latex.py
"""Configuration options for LaTeX rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from adoctree.constants import (
    DEFAULT_LATEX_DOCUMENT_CLASS,
    DEFAULT_LATEX_ESCAPE_SPECIAL,
    DEFAULT_LATEX_INCLUDE_PREAMBLE,
    DEFAULT_LATEX_PACKAGES,
)
from adoctree.options.base import BaseRendererOptions


@dataclass(frozen=True)
class LatexRendererOptions(BaseRendererOptions):
    """Configuration options for rendering AST to LaTeX.

    Parameters
    ----------
    include_preamble : bool, default False
        Emit ``\\documentclass``, ``\\usepackage`` lines and the
        ``document`` environment around the body.
    document_class : str, default "article"
        LaTeX document class used in the preamble.
    packages : list[str], default ["amsmath", "graphicx", "hyperref", "listings", "enumitem", "multirow"]
        Packages loaded in the preamble.
    escape_special : bool, default True
        Escape LaTeX special characters in text content.

    """

    include_preamble: bool = field(
        default=DEFAULT_LATEX_INCLUDE_PREAMBLE,
        metadata={"help": "Generate complete document with preamble", "importance": "core"},
    )
    document_class: str = field(
        default=DEFAULT_LATEX_DOCUMENT_CLASS,
        metadata={"help": "LaTeX document class (article, report, book, etc.)", "type": str, "importance": "core"},
    )
    packages: list[str] = field(
        default_factory=lambda: DEFAULT_LATEX_PACKAGES.copy(),
        metadata={"help": "LaTeX packages to include in preamble", "importance": "advanced"},
    )
    escape_special: bool = field(
        default=DEFAULT_LATEX_ESCAPE_SPECIAL,
        metadata={"help": "Escape special LaTeX characters", "importance": "security"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If the document class is empty.

        """
        if not self.document_class.strip():
            raise ValueError("document_class must not be empty")

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adoctree/options/base.py
"""Base classes for parser and renderer options.

All option objects are frozen dataclasses. Use ``create_updated`` to derive a
modified copy instead of mutating an instance.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for parser options.

    Notes
    -----
    Subclasses define format-specific parsing options as frozen dataclass fields
    and validate them in ``__post_init__``.

    """


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for renderer options.

    Renderers convert AST documents into output text (HTML, LaTeX, Markdown).
    """

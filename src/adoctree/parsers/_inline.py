#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adoctree/parsers/_inline.py
"""Inline tokenizer for AsciiDoc text.

Text is scanned once, left to right, with a single combined pattern whose
alternatives are ordered by priority: at any position the first alternative
that matches wins, and text between matches becomes Text nodes. Bold, italic,
subscript, superscript and link/cross-reference display text are tokenized
recursively; monospace and math content is literal.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Optional

from adoctree.ast.nodes import (
    Bold,
    CrossRef,
    Image,
    Italic,
    LineBreak,
    Link,
    Math,
    Monospace,
    Node,
    Subscript,
    Superscript,
    Text,
)
from adoctree.constants import AttributeMissingPolicy
from adoctree.parsers._attributes import parse_macro_attributes, substitute_attributes

logger = logging.getLogger(__name__)

# (kind, pattern) in priority order
_ESCAPE = ("escape", r"\\(?P<escaped>[*_`~^])")
_XREF = ("xref", r"<<(?P<xref_target>[^,<>\s][^,<>]*?)\s*(?:,\s*(?P<xref_text>[^<>]*?))?>>")
_IMAGE = ("image", r"(?<![\w:])image:(?!:)(?P<image_url>[^\s\[\]]+)(?:\[(?P<image_attrs>[^\]]*)\])?")
_LINK = ("link", r"(?<![\w])link:(?P<link_target>[^\s\[\]]+)\[(?P<link_text>[^\]]*)\]")
_MATH = ("math", r"(?<![\w])(?:stem|latexmath):\[(?P<math>[^\]]*)\]")
_URL = ("url", r"(?P<url>https?://[^\s\[\]<>\"]+)(?:\[(?P<url_text>[^\]]*)\])?")
_MONOSPACE = ("monospace", r"`(?P<monospace>[^`]+)`")
_STRONG_UNCONSTRAINED = ("strong", r"\*\*(?P<strong>[^*\s](?:[^*]*?[^*\s])?)\*\*")
_BOLD = ("bold", r"(?<![\w*])\*(?P<bold>[^*\s](?:[^*]*?[^*\s])?)\*(?![\w*])")
_EMPHASIS_UNCONSTRAINED = ("emphasis", r"__(?P<emphasis>[^_\s](?:[^_]*?[^_\s])?)__")
_ITALIC = ("italic", r"(?<![\w_])_(?P<italic>[^_\s](?:[^_]*?[^_\s])?)_(?![\w_])")
_SUBSCRIPT = ("subscript", r"~(?P<subscript>[^~\s](?:[^~]*?[^~\s])?)~")
_SUPERSCRIPT = ("superscript", r"\^(?P<superscript>[^\^\s](?:[^\^]*?[^\^\s])?)\^")

_URL_TRAILING_PUNCTUATION = ".,;:!?)"
_HARD_BREAK_SUFFIX = re.compile(r"(?:^|\s)\+$")

# deeper inline nesting is kept as literal text
MAX_INLINE_DEPTH = 32

_CONTAINERS: dict[str, type] = {
    "strong": Bold,
    "bold": Bold,
    "emphasis": Italic,
    "italic": Italic,
    "subscript": Subscript,
    "superscript": Superscript,
}


def _build_pattern(unconstrained: bool) -> tuple[re.Pattern[str], list[str]]:
    alternatives = [_ESCAPE, _XREF, _IMAGE, _LINK, _MATH, _URL, _MONOSPACE]
    if unconstrained:
        alternatives.append(_STRONG_UNCONSTRAINED)
    alternatives.append(_BOLD)
    if unconstrained:
        alternatives.append(_EMPHASIS_UNCONSTRAINED)
    alternatives.extend([_ITALIC, _SUBSCRIPT, _SUPERSCRIPT])

    combined = "|".join(f"(?P<k_{kind}>{pattern})" for kind, pattern in alternatives)
    return re.compile(combined), [kind for kind, _ in alternatives]


def merge_adjacent_text(nodes: list[Node]) -> list[Node]:
    """Collapse consecutive Text nodes into one."""
    merged: list[Node] = []
    for node in nodes:
        if isinstance(node, Text) and merged and isinstance(merged[-1], Text):
            merged[-1] = Text(content=merged[-1].content + node.content)
        elif isinstance(node, Text) and not node.content:
            continue
        else:
            merged.append(node)
    return merged


class InlineTokenizer:
    """Convert a run of text into inline AST nodes.

    Parameters
    ----------
    support_unconstrained_formatting : bool, default True
        Recognise ``**strong**`` and ``__emphasis__`` in addition to the
        constrained single-delimiter forms
    attribute_missing_policy : {"keep", "blank", "warn"}, default "keep"
        Passed to attribute substitution
    honor_hard_breaks : bool, default True
        Turn a trailing `` +`` on a paragraph line into a LineBreak

    """

    def __init__(
        self,
        support_unconstrained_formatting: bool = True,
        attribute_missing_policy: AttributeMissingPolicy = "keep",
        honor_hard_breaks: bool = True,
    ):
        """Compile the combined inline pattern."""
        self.attribute_missing_policy = attribute_missing_policy
        self.honor_hard_breaks = honor_hard_breaks
        self._pattern, self._kinds = _build_pattern(support_unconstrained_formatting)

    def tokenize(self, text: str, attributes: Optional[Mapping[str, str]] = None) -> list[Node]:
        """Substitute attribute references, then tokenize ``text``.

        Parameters
        ----------
        text : str
            Raw inline text
        attributes : Mapping of str to str, optional
            Attribute table used for ``{name}`` substitution

        Returns
        -------
        list of Node
            Inline nodes; empty for empty text

        """
        if attributes is not None:
            text = substitute_attributes(text, attributes, self.attribute_missing_policy)
        return self._tokenize(text, 0)

    def tokenize_lines(self, lines: list[str], attributes: Optional[Mapping[str, str]] = None) -> list[Node]:
        """Tokenize paragraph lines, joined with single spaces.

        With hard breaks enabled, a line ending in `` +`` closes a segment and
        a LineBreak is emitted between segments.
        """
        stripped = [line.strip() for line in lines]
        if not self.honor_hard_breaks:
            return self.tokenize(" ".join(stripped), attributes)

        nodes: list[Node] = []
        segment: list[str] = []
        for line in stripped:
            if _HARD_BREAK_SUFFIX.search(line):
                segment.append(line[:-1].rstrip())
                nodes.extend(self.tokenize(" ".join(part for part in segment if part), attributes))
                nodes.append(LineBreak())
                segment = []
            else:
                segment.append(line)
        if segment:
            nodes.extend(self.tokenize(" ".join(segment), attributes))
        elif nodes and isinstance(nodes[-1], LineBreak):
            nodes.pop()
        return merge_adjacent_text(nodes)

    def _tokenize(self, text: str, depth: int) -> list[Node]:
        if depth > MAX_INLINE_DEPTH:
            logger.debug("Inline nesting deeper than %d levels kept as text", MAX_INLINE_DEPTH)
            return [Text(content=text)] if text else []

        nodes: list[Node] = []
        last_end = 0
        for match in self._pattern.finditer(text):
            if match.start() > last_end:
                nodes.append(Text(content=text[last_end : match.start()]))
            kind = next(kind for kind in self._kinds if match.group(f"k_{kind}") is not None)
            nodes.extend(self._convert(kind, match, depth + 1))
            last_end = match.end()
        if last_end < len(text):
            nodes.append(Text(content=text[last_end:]))
        return merge_adjacent_text(nodes)

    def _convert(self, kind: str, match: re.Match[str], depth: int) -> list[Node]:
        if kind == "escape":
            return [Text(content=match.group("escaped"))]
        if kind == "xref":
            target = match.group("xref_target").strip()
            return [CrossRef(target=target, content=self._display_text(match.group("xref_text"), target, depth))]
        if kind == "image":
            alt_text, attributes = parse_macro_attributes(match.group("image_attrs") or "")
            return [Image(url=match.group("image_url"), alt_text=alt_text, attributes=attributes)]
        if kind == "link":
            url = match.group("link_target")
            return [Link(url=url, content=self._display_text(match.group("link_text"), url, depth))]
        if kind == "math":
            return [Math(content=match.group("math"))]
        if kind == "url":
            return self._convert_url(match, depth)
        if kind == "monospace":
            return [Monospace(content=[Text(content=match.group("monospace"))])]

        container = _CONTAINERS[kind]
        return [container(content=self._tokenize(match.group(kind), depth))]

    def _display_text(self, text: Optional[str], default: str, depth: int) -> list[Node]:
        if text is None or not text.strip():
            return [Text(content=default)]
        return self._tokenize(text.strip(), depth)

    def _convert_url(self, match: re.Match[str], depth: int) -> list[Node]:
        url = match.group("url")
        text = match.group("url_text")
        trailing = ""
        if text is None:
            stripped = url.rstrip(_URL_TRAILING_PUNCTUATION)
            # keep a closing paren that balances one inside the URL
            while url[len(stripped) :].startswith(")") and stripped.count("(") > stripped.count(")"):
                stripped += ")"
            if not stripped.endswith("://"):
                trailing = url[len(stripped) :]
                url = stripped
        nodes: list[Node] = [Link(url=url, content=self._display_text(text, url, depth))]
        if trailing:
            nodes.append(Text(content=trailing))
        return nodes

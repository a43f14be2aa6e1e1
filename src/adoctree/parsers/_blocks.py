#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adoctree/parsers/_blocks.py
"""Line-oriented block parser for AsciiDoc.

The parser works on a ParserState cursor. Each strategy peeks at the lines
ahead and only consumes them once it has recognised its block, returning a
list of nodes (possibly empty, for comments and attribute entries) or None
when the lines belong to some other block kind. Strategies are tried in a
fixed priority order; the paragraph strategy at the end always matches.

A block may be preceded by a preamble of at most two lines: a bracketed
attribute line (``[source,python]``) and a ``.Title`` line, in either order.
"""

from __future__ import annotations

import logging
import re
from dataclasses import replace
from typing import TYPE_CHECKING, Callable, Optional, Union

from adoctree.ast.nodes import (
    Admonition,
    BlockQuote,
    CodeBlock,
    DefinitionDescription,
    DefinitionList,
    DefinitionTerm,
    Header,
    HorizontalRule,
    Image,
    ListItem,
    Node,
    OrderedList,
    Paragraph,
    PassthroughBlock,
    Table,
    TableCell,
    TableRow,
    Text,
    UnorderedList,
)
from adoctree.ast.utils import extract_text
from adoctree.constants import ADMONITION_TYPES, DEFAULT_ORDERED_LIST_STYLE, ORDERED_LIST_STYLES
from adoctree.options.asciidoc import AsciiDocOptions
from adoctree.parsers._attributes import (
    BlockAttributes,
    apply_attribute_entry,
    is_block_attribute_line,
    match_attribute_entry,
    parse_block_attribute_line,
    parse_macro_attributes,
    substitute_attributes,
)
from adoctree.parsers._inline import InlineTokenizer, merge_adjacent_text
from adoctree.parsers._state import MAX_NESTING_DEPTH, ParserState
from adoctree.utils.text import generate_section_id

if TYPE_CHECKING:
    from adoctree.parsers._includes import IncludeResolver

logger = logging.getLogger(__name__)

HEADER_PATTERN = re.compile(r"^(?P<marks>={1,6})\s+(?P<text>.+?)(?:\s*\[#(?P<id>[^\]]+)\])?\s*$")
UNORDERED_ITEM_PATTERN = re.compile(r"^\s*(?P<marker>\*+|-)\s+(?P<text>\S.*)$")
ORDERED_ITEM_PATTERN = re.compile(r"^\s*(?P<marker>\.+|\d{1,9}\.)\s+(?P<text>\S.*)$")
DEFINITION_TERM_PATTERN = re.compile(r"^(?P<term>\S.*?)(?<!:)::(?:\s+(?P<desc>.*))?$")
CALLOUT_PATTERN = re.compile(r"^<(?P<num>\d{1,9})>(?:\s+(?P<text>.*))?$")
ADMONITION_PARAGRAPH_PATTERN = re.compile(rf"^(?P<kind>{'|'.join(ADMONITION_TYPES)}):\s+(?P<text>.*)$")
BLOCK_TITLE_PATTERN = re.compile(r"^\.(?P<title>[^.\s].*)$")
INCLUDE_PATTERN = re.compile(r"^include::(?P<target>[^\[\s][^\[]*)\[(?P<attrs>[^\]]*)\]$")
BLOCK_IMAGE_PATTERN = re.compile(r"^image::(?P<url>[^\[\]\s]+)\[(?P<attrs>[^\]]*)\]$")
TABLE_ROW_PATTERN = re.compile(r"^(?:\d{0,9}(?:\.\d{1,9})?\+)?\|")

_LISTING_FENCE = re.compile(r"^-{4,}$")
_PASSTHROUGH_FENCE = re.compile(r"^\+{4,}$")
_QUOTE_FENCE = re.compile(r"^_{4,}$")
_EXAMPLE_FENCE = re.compile(r"^={4,}$")
_TABLE_FENCE = re.compile(r"^\|={3,}$")
_COMMENT_FENCE = re.compile(r"^/{4,}$")
_FENCES = (_LISTING_FENCE, _PASSTHROUGH_FENCE, _QUOTE_FENCE, _EXAMPLE_FENCE, _TABLE_FENCE, _COMMENT_FENCE)

_SPAN_SPEC = re.compile(r"(?P<col>\d{1,9})?(?:\.(?P<row>\d{1,9}))?\+")
_ESCAPED_PIPE = "\x00"

_HORIZONTAL_RULES = ("'''", "---")
_CODE_STYLES = ("", "source", "listing")

# list nesting below this many levels is dropped
MAX_LIST_NESTING = 32

ListNode = Union[UnorderedList, OrderedList]
Strategy = Callable[[ParserState], Optional[list[Node]]]


def is_fence(line: str) -> bool:
    """Return True if ``line`` opens or closes a delimited block."""
    stripped = line.strip()
    return any(pattern.match(stripped) for pattern in _FENCES)


def _list_marker(line: str) -> Optional[tuple[str, int, str]]:
    """Return ``(kind, depth, text)`` for a list item line.

    ``*``/``.`` markers nest by repetition; ``-`` and ``N.`` are always depth 1.
    """
    match = UNORDERED_ITEM_PATTERN.match(line)
    if match:
        marker = match.group("marker")
        return "unordered", 1 if marker == "-" else len(marker), match.group("text")
    match = ORDERED_ITEM_PATTERN.match(line)
    if match:
        marker = match.group("marker")
        return "ordered", len(marker) if marker.startswith(".") else 1, match.group("text")
    return None


def _span_attributes(match: re.Match[str]) -> dict[str, str]:
    attributes: dict[str, str] = {}
    if match.group("col"):
        attributes["colspan"] = str(int(match.group("col")))
    if match.group("row"):
        attributes["rowspan"] = str(int(match.group("row")))
    return attributes


def _parse_span(text: str) -> Optional[dict[str, str]]:
    """Span attributes if ``text`` is exactly a span marker such as ``2+`` or ``.3+``."""
    match = _SPAN_SPEC.fullmatch(text)
    if match and (match.group("col") or match.group("row")):
        return _span_attributes(match)
    return None


def split_table_row(line: str) -> list[tuple[dict[str, str], str]]:
    r"""Split a table row line into ``(span attributes, cell text)`` pairs.

    A span marker may stand alone before a ``|`` (``2+|text``, or ``|2+|text``
    as its own cell) or prefix the cell text followed by whitespace
    (``|2+ text``). ``\|`` is a literal pipe, and the empty cell produced by a
    trailing ``|`` is dropped.

    >>> split_table_row("|2+|Spans two|End")
    [({'colspan': '2'}, 'Spans two'), ({}, 'End')]

    """
    parts = line.strip().replace("\\|", _ESCAPED_PIPE).split("|")
    pending = _parse_span(parts[0].strip()) or {}
    parts = parts[1:]
    if len(parts) > 1 and not parts[-1].strip():
        parts.pop()

    cells: list[tuple[dict[str, str], str]] = []
    for index, part in enumerate(parts):
        text = part.replace(_ESCAPED_PIPE, "|").strip()
        span = _parse_span(text)
        if span is not None and index < len(parts) - 1:
            pending = span
            continue
        prefix = _SPAN_SPEC.match(text)
        if prefix and (prefix.group("col") or prefix.group("row")) and text[prefix.end() : prefix.end() + 1].isspace():
            pending = {**pending, **_span_attributes(prefix)}
            text = text[prefix.end() :].strip()
        cells.append((pending, text))
        pending = {}
    return cells


class BlockParser:
    """Recursive block parser.

    Parameters
    ----------
    inline : InlineTokenizer
        Tokenizer used for every run of inline text
    includes : IncludeResolver
        Resolver that expands ``include::`` directives
    options : AsciiDocOptions
        Parser options

    """

    def __init__(self, inline: InlineTokenizer, includes: IncludeResolver, options: AsciiDocOptions):
        """Initialize with the collaborators and the strategy order."""
        self.inline = inline
        self.includes = includes
        self.options = options
        self._strategies: list[Strategy] = [
            self._parse_comment,
            self._parse_attribute_entry,
            self._parse_header,
            self._parse_code_block,
            self._parse_passthrough,
            self._parse_quote,
            self._parse_admonition,
            self._parse_example,
            self._parse_include,
            self._parse_horizontal_rule,
            self._parse_list,
            self._parse_table,
            self._parse_block_image,
            self._parse_attributed_paragraph,
            self._parse_paragraph,
        ]

    def parse_sequence(self, state: ParserState) -> list[Node]:
        """Parse blocks until the state's lines are exhausted.

        Parameters
        ----------
        state : ParserState
            Cursor over the lines to parse; advanced to the end

        Returns
        -------
        list of Node
            Block nodes in document order

        """
        blocks: list[Node] = []
        while True:
            state.skip_blank_lines()
            if state.at_end:
                break
            start = state.pos
            result = self.parse_block(state)
            if result:
                blocks.extend(result)
            if state.pos == start:
                logger.debug("Skipping unparseable line %d: %r", start + 1, state.peek())
                state.advance()
        return blocks

    def parse_block(self, state: ParserState) -> Optional[list[Node]]:
        """Parse the block at the cursor with the first matching strategy."""
        for strategy in self._strategies:
            result = strategy(state)
            if result is not None:
                return result
        return None

    def is_block_start(self, line: str) -> bool:
        """Return True if ``line`` would start a block other than a paragraph."""
        stripped = line.strip()
        if not stripped:
            return False
        return bool(
            HEADER_PATTERN.match(line)
            or is_fence(stripped)
            or line.startswith("//")
            or stripped in _HORIZONTAL_RULES
            or _list_marker(line)
            or DEFINITION_TERM_PATTERN.match(line)
            or is_block_attribute_line(line)
            or ADMONITION_PARAGRAPH_PATTERN.match(line)
            or INCLUDE_PATTERN.match(stripped)
            or BLOCK_IMAGE_PATTERN.match(stripped)
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _inline(self, text: str, state: ParserState) -> list[Node]:
        return self.inline.tokenize(text, state.attributes)

    def _inline_lines(self, lines: list[str], state: ParserState) -> list[Node]:
        return self.inline.tokenize_lines(lines, state.attributes)

    def _preamble(self, state: ParserState) -> tuple[Optional[BlockAttributes], Optional[str], int]:
        """Peek at an optional attribute line and block title.

        Returns
        -------
        tuple
            ``(attributes, title, offset)`` where ``offset`` is the index,
            relative to the cursor, of the first line after the preamble

        """
        attributes: Optional[BlockAttributes] = None
        title: Optional[str] = None
        offset = 0
        while offset < 2:
            line = state.peek(offset)
            if line is None:
                break
            if attributes is None:
                parsed = parse_block_attribute_line(line)
                if parsed is not None:
                    attributes = parsed
                    offset += 1
                    continue
            if title is None:
                match = BLOCK_TITLE_PATTERN.match(line.rstrip())
                if match:
                    title = substitute_attributes(
                        match.group("title"), state.attributes, self.options.attribute_missing_policy
                    )
                    offset += 1
                    continue
            break
        return attributes, title, offset

    def _collect_fenced(self, state: ParserState, fence: str) -> list[str]:
        """Consume lines up to and including the closing ``fence``.

        An unterminated block runs to the end of the input.
        """
        lines: list[str] = []
        while (line := state.next_line()) is not None:
            if line.strip() == fence:
                return lines
            lines.append(line)
        logger.debug("Unterminated %r block runs to end of input", fence)
        return lines

    def _collect_paragraph_lines(self, state: ParserState, first: Optional[str] = None) -> list[str]:
        """Consume non-blank lines until a blank line or a block start."""
        lines = [] if first is None else [first]
        while (line := state.peek()) is not None:
            if not line.strip() or self.is_block_start(line):
                break
            lines.append(line)
            state.advance()
        return lines

    def _parse_nested(self, state: ParserState, lines: list[str]) -> list[Node]:
        """Parse the body of a delimited block as a block sequence."""
        if state.depth >= MAX_NESTING_DEPTH:
            logger.warning("Blocks nested deeper than %d levels are kept as text", MAX_NESTING_DEPTH)
            text = "\n".join(lines).strip()
            return [Paragraph(content=[Text(content=text)])] if text else []
        return self.parse_sequence(state.derive(lines))

    @staticmethod
    def _with_title(attributes: dict[str, str], title: Optional[str]) -> dict[str, str]:
        if title:
            attributes["title"] = title
        return attributes

    # ------------------------------------------------------------------
    # Strategies
    # ------------------------------------------------------------------

    def _parse_comment(self, state: ParserState) -> Optional[list[Node]]:
        line = state.peek()
        if line is None or not line.startswith("//"):
            return None
        stripped = line.strip()
        state.advance()
        if _COMMENT_FENCE.match(stripped):
            self._collect_fenced(state, stripped)
        return []

    def _parse_attribute_entry(self, state: ParserState) -> Optional[list[Node]]:
        line = state.peek()
        entry = match_attribute_entry(line) if line is not None else None
        if entry is None:
            return None
        name, value = entry
        apply_attribute_entry(state.attributes, name, value, self.options.attribute_missing_policy)
        state.advance()
        return []

    def _parse_header(self, state: ParserState) -> Optional[list[Node]]:
        attributes, _title, offset = self._preamble(state)
        line = state.peek(offset)
        match = HEADER_PATTERN.match(line) if line is not None else None
        if match is None:
            return None
        state.advance(offset + 1)

        content = self._inline(match.group("text"), state)
        header_id = match.group("id") or (attributes.id if attributes else None)
        if header_id:
            header_id = header_id.strip()
        else:
            header_id = generate_section_id(extract_text(content, joiner=""))
        return [Header(level=len(match.group("marks")), content=content, id=header_id)]

    def _parse_code_block(self, state: ParserState) -> Optional[list[Node]]:
        attributes, title, offset = self._preamble(state)
        line = state.peek(offset)
        if line is None or not _LISTING_FENCE.match(line.strip()):
            return None
        if attributes is not None and attributes.style not in _CODE_STYLES:
            return None
        state.advance(offset + 1)
        body = self._collect_fenced(state, line.strip())

        language = ""
        code_attributes: dict[str, str] = {}
        if attributes is not None:
            if len(attributes.positional) > 1:
                language = attributes.positional[1].strip()
            code_attributes.update(attributes.named)
            for flag in [*attributes.positional[2:], *attributes.options]:
                if flag.strip():
                    code_attributes[flag.strip()] = "true"
            if attributes.id:
                code_attributes["id"] = attributes.id
            if attributes.roles:
                code_attributes["role"] = " ".join(attributes.roles)
        language = language or code_attributes.pop("language", "")

        callouts: dict[int, str] = {}
        while (next_line := state.peek()) is not None:
            match = CALLOUT_PATTERN.match(next_line.strip())
            if match is None:
                break
            callouts[int(match.group("num"))] = (match.group("text") or "").strip()
            state.advance()

        return [
            CodeBlock(
                content="\n".join(body),
                language=language,
                attributes=self._with_title(code_attributes, title),
                callouts=callouts,
            )
        ]

    def _parse_passthrough(self, state: ParserState) -> Optional[list[Node]]:
        attributes, title, offset = self._preamble(state)
        line = state.peek(offset)
        if line is None or not _PASSTHROUGH_FENCE.match(line.strip()):
            return None
        state.advance(offset + 1)
        body = self._collect_fenced(state, line.strip())

        block_attributes: dict[str, str] = {}
        if attributes is not None:
            block_attributes = attributes.to_attribute_map()
            if attributes.style:
                block_attributes["style"] = attributes.style
        return [PassthroughBlock(content="\n".join(body), attributes=self._with_title(block_attributes, title))]

    def _parse_quote(self, state: ParserState) -> Optional[list[Node]]:
        attributes, _title, offset = self._preamble(state)
        line = state.peek(offset)
        if line is None or not _QUOTE_FENCE.match(line.strip()):
            return None
        if attributes is not None and attributes.style.upper() in ADMONITION_TYPES:
            return None
        state.advance(offset + 1)
        body = self._collect_fenced(state, line.strip())

        attribution: Optional[str] = None
        if attributes is not None and attributes.style in ("quote", "verse"):
            parts = [part.strip() for part in attributes.positional[1:3] if part.strip()]
            parts = parts or [
                attributes.named[key] for key in ("attribution", "citetitle") if attributes.named.get(key)
            ]
            if parts:
                attribution = substitute_attributes(
                    ", ".join(parts), state.attributes, self.options.attribute_missing_policy
                )
        return [BlockQuote(children=self._parse_nested(state, body), attribution=attribution)]

    def _parse_admonition(self, state: ParserState) -> Optional[list[Node]]:
        attributes, title, offset = self._preamble(state)
        style = attributes.style.upper() if attributes is not None else ""
        block_attributes = attributes.to_attribute_map() if attributes is not None else {}
        if style in ADMONITION_TYPES:
            kind = style.lower()
            state.advance(offset)
            line = state.peek()
            if line is not None and _EXAMPLE_FENCE.match(line.strip()):
                state.advance()
                children = self._parse_nested(state, self._collect_fenced(state, line.strip()))
            else:
                lines = self._collect_paragraph_lines(state)
                children = [Paragraph(content=self._inline_lines(lines, state))] if lines else []
            return [Admonition(kind=kind, children=children, title=title, attributes=block_attributes)]

        # any other style belongs to another block type
        if style:
            return None
        line = state.peek(offset)
        match = ADMONITION_PARAGRAPH_PATTERN.match(line) if line is not None else None
        if match is None:
            return None
        state.advance(offset + 1)
        lines = self._collect_paragraph_lines(state, match.group("text"))
        content = self._inline_lines(lines, state)
        children: list[Node] = [Paragraph(content=content)] if content else []
        return [
            Admonition(kind=match.group("kind").lower(), children=children, title=title, attributes=block_attributes)
        ]

    def _parse_example(self, state: ParserState) -> Optional[list[Node]]:
        # an example block without an admonition style is unwrapped into its content
        attributes, _title, offset = self._preamble(state)
        line = state.peek(offset)
        if line is None or not _EXAMPLE_FENCE.match(line.strip()):
            return None
        state.advance(offset + 1)
        return self._parse_nested(state, self._collect_fenced(state, line.strip()))

    def _parse_include(self, state: ParserState) -> Optional[list[Node]]:
        line = state.peek()
        match = INCLUDE_PATTERN.match(line.strip()) if line is not None else None
        if match is None:
            return None
        state.advance()
        if not self.options.parse_includes:
            logger.debug("Include processing disabled, skipping %s", match.group("target"))
            return []
        target = substitute_attributes(
            match.group("target").strip(), state.attributes, self.options.attribute_missing_policy
        )
        return self.includes.resolve(target, match.group("attrs"), state)

    def _parse_horizontal_rule(self, state: ParserState) -> Optional[list[Node]]:
        line = state.peek()
        if line is None or line.strip() not in _HORIZONTAL_RULES:
            return None
        state.advance()
        return [HorizontalRule()]

    def _parse_list(self, state: ParserState) -> Optional[list[Node]]:
        attributes, title, offset = self._preamble(state)
        line = state.peek(offset)
        if line is None:
            return None

        marker = _list_marker(line)
        if marker is not None:
            kind, depth, _text = marker
            state.advance(offset)
            list_node = self._parse_list_level(state, kind, depth, 0)
            list_attributes = attributes.to_attribute_map() if attributes is not None else {}
            self._with_title(list_attributes, title)
            if isinstance(list_node, OrderedList):
                style = attributes.style if attributes is not None else ""
                list_node = replace(
                    list_node,
                    style=style if style in ORDERED_LIST_STYLES else DEFAULT_ORDERED_LIST_STYLE,
                    attributes=list_attributes,
                )
            else:
                list_node = replace(list_node, attributes=list_attributes)
            return [list_node]

        if DEFINITION_TERM_PATTERN.match(line):
            state.advance(offset)
            list_attributes = attributes.to_attribute_map() if attributes is not None else {}
            items = self._parse_definition_items(state)
            return [DefinitionList(items=items, attributes=self._with_title(list_attributes, title))]
        return None

    def _parse_list_level(self, state: ParserState, kind: str, depth: int, nesting: int) -> ListNode:
        """Parse sibling items at marker ``depth``, recursing into deeper markers."""
        items: list[ListItem] = []
        while True:
            offset = state.next_non_blank_offset()
            if offset is None:
                break
            line = state.peek(offset)
            marker = _list_marker(line) if line is not None else None
            if marker is None:
                break
            item_kind, item_depth, text = marker
            if item_depth < depth or (item_depth == depth and item_kind != kind):
                break

            if item_depth == depth:
                state.advance(offset + 1)
                lines = self._collect_paragraph_lines(state, text)
                items.append(ListItem(content=self._inline_lines(lines, state)))
                continue

            if not items or nesting >= MAX_LIST_NESTING:
                logger.debug("Dropping list item without a parent item: %r", line)
                state.advance(offset + 1)
                continue

            state.advance(offset)
            nested = self._parse_list_level(state, item_kind, depth + 1, nesting + 1)
            if not nested.items:
                continue
            attached = items[-1].nested
            if attached is not None and type(attached) is not type(nested):
                # one nested list per item; a run of the other kind cannot join it
                logger.debug(
                    "Dropping %d nested %s item(s) after a %s list",
                    len(nested.items),
                    type(nested).__name__,
                    type(attached).__name__,
                )
                continue
            items[-1] = self._attach_nested(items[-1], nested)

        if kind == "ordered":
            return OrderedList(items=items)
        return UnorderedList(items=items)

    @staticmethod
    def _attach_nested(item: ListItem, nested: ListNode) -> ListItem:
        if item.nested is None:
            return replace(item, nested=nested)
        # a second run of deeper items joins the list already attached
        return replace(item, nested=replace(item.nested, items=[*item.nested.items, *nested.items]))

    def _parse_definition_items(self, state: ParserState) -> list[tuple[DefinitionTerm, DefinitionDescription]]:
        items: list[tuple[DefinitionTerm, DefinitionDescription]] = []
        while True:
            offset = state.next_non_blank_offset()
            if offset is None:
                break
            line = state.peek(offset)
            match = DEFINITION_TERM_PATTERN.match(line) if line is not None else None
            if match is None or line is None or _list_marker(line) or HEADER_PATTERN.match(line):
                break
            state.advance(offset + 1)

            description = (match.group("desc") or "").strip()
            lines = self._collect_paragraph_lines(state, description or None)
            term = DefinitionTerm(content=self._inline(match.group("term").strip(), state))
            items.append((term, DefinitionDescription(content=self._inline_lines(lines, state))))
        return items

    def _parse_table(self, state: ParserState) -> Optional[list[Node]]:
        attributes, title, offset = self._preamble(state)
        line = state.peek(offset)
        if line is None or not _TABLE_FENCE.match(line.strip()):
            return None
        state.advance(offset + 1)
        body = self._collect_fenced(state, line.strip())

        table_attributes = attributes.to_attribute_map() if attributes is not None else {}
        options = [option.strip() for option in table_attributes.get("options", "").split(",")]
        has_header = "noheader" not in options

        rows: list[TableRow] = []
        for body_line in body:
            stripped = body_line.strip()
            if not stripped:
                continue
            if TABLE_ROW_PATTERN.match(stripped):
                cells = [
                    TableCell(content=self._inline(text, state), attributes=span)
                    for span, text in split_table_row(stripped)
                ]
                rows.append(TableRow(cells=cells, is_header=has_header and not rows))
            elif rows and rows[-1].cells:
                last = rows[-1].cells[-1]
                continuation = self._inline(stripped, state)
                content = [*last.content, Text(content=" "), *continuation] if last.content else continuation
                rows[-1].cells[-1] = replace(last, content=merge_adjacent_text(content))
            else:
                logger.debug("Dropping table line outside any row: %r", body_line)

        return [Table(rows=rows, attributes=self._with_title(table_attributes, title))]

    def _parse_block_image(self, state: ParserState) -> Optional[list[Node]]:
        attributes, title, offset = self._preamble(state)
        line = state.peek(offset)
        match = BLOCK_IMAGE_PATTERN.match(line.strip()) if line is not None else None
        if match is None:
            return None
        state.advance(offset + 1)

        policy = self.options.attribute_missing_policy
        url = substitute_attributes(match.group("url"), state.attributes, policy)
        alt_text, image_attributes = parse_macro_attributes(
            substitute_attributes(match.group("attrs"), state.attributes, policy)
        )
        paragraph_attributes = attributes.to_attribute_map() if attributes is not None else {}
        image = Image(url=url, alt_text=alt_text, attributes=image_attributes)
        return [Paragraph(content=[image], attributes=self._with_title(paragraph_attributes, title))]

    def _parse_attributed_paragraph(self, state: ParserState) -> Optional[list[Node]]:
        attributes, title, offset = self._preamble(state)
        if offset == 0:
            return None
        line = state.peek(offset)
        if line is None or not line.strip() or self.is_block_start(line):
            if attributes is None:
                # a lone title line is ordinary paragraph text
                return None
            logger.debug("Dropping block attribute line not followed by a block: %r", state.peek())
            state.advance(offset)
            return []

        state.advance(offset + 1)
        lines = self._collect_paragraph_lines(state, line)
        paragraph_attributes: dict[str, str] = {}
        if attributes is not None:
            paragraph_attributes = attributes.to_attribute_map()
            if attributes.style:
                paragraph_attributes["style"] = attributes.style
        return [
            Paragraph(
                content=self._inline_lines(lines, state),
                attributes=self._with_title(paragraph_attributes, title),
            )
        ]

    def _parse_paragraph(self, state: ParserState) -> Optional[list[Node]]:
        line = state.next_line()
        if line is None:
            return None
        lines = self._collect_paragraph_lines(state, line)
        content = self._inline_lines(lines, state)
        return [Paragraph(content=content)] if content else []

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adoctree/renderers/markdown.py
"""Markdown rendering from AST.

This module provides the MarkdownRenderer class which converts AST nodes to
GitHub-flavored Markdown. Constructs Markdown has no syntax for are
approximated: admonitions become block quotes with a bold label, definition
lists use the ``term`` / ``: description`` extension syntax, and subscript
and superscript use HTML tags unless ``use_html_for_subsup`` is off.

"""

from __future__ import annotations

import logging
import re

from adoctree.ast.nodes import (
    Admonition,
    BlockQuote,
    Bold,
    CodeBlock,
    CrossRef,
    DefinitionDescription,
    DefinitionList,
    DefinitionTerm,
    Document,
    Header,
    HorizontalRule,
    Image,
    Italic,
    LineBreak,
    Link,
    ListItem,
    Math,
    Monospace,
    Node,
    OrderedList,
    Paragraph,
    PassthroughBlock,
    Subscript,
    Superscript,
    Table,
    TableCell,
    TableRow,
    Text,
    UnorderedList,
)
from adoctree.ast.utils import extract_text
from adoctree.ast.visitors import NodeVisitor
from adoctree.options.markdown import MarkdownRendererOptions
from adoctree.renderers.base import BaseRenderer, InlineContentMixin, parse_column_alignments

logger = logging.getLogger(__name__)

_ALIGNMENT_ROWS = {None: "---", "left": ":---", "center": ":---:", "right": "---:"}


def _longest_run(text: str, char: str) -> int:
    runs = re.findall(f"{re.escape(char)}+", text)
    return max((len(run) for run in runs), default=0)


class MarkdownRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
    """Render AST nodes to Markdown text.

    Parameters
    ----------
    options : MarkdownRendererOptions or None, default = None
        Markdown formatting options

    Examples
    --------
        >>> from adoctree.ast import Document, Paragraph, Bold, Text
        >>> doc = Document(children=[Paragraph(content=[Bold(content=[Text(content="hi")])])])
        >>> MarkdownRenderer().render_to_string(doc)
        '**hi**\\n'

    """

    def __init__(self, options: MarkdownRendererOptions | None = None):
        """Initialize the Markdown renderer with options."""
        BaseRenderer._validate_options_type(options, MarkdownRendererOptions, "markdown")
        options = options or MarkdownRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: MarkdownRendererOptions = options
        self._output: list[str] = []
        self._indent: str = ""
        self._marker_stack: list[str] = []

    def render_to_string(self, doc: Document) -> str:
        """Render a document AST to a Markdown string.

        Parameters
        ----------
        doc : Document
            The document node to render

        Returns
        -------
        str
            Markdown text, empty for a document without blocks

        """
        self._output = []
        self._indent = ""
        self._marker_stack = []

        doc.accept(self)
        result = "".join(self._output)
        self._output.clear()
        return self._cleanup_output(result)

    @staticmethod
    def _cleanup_output(text: str) -> str:
        text = re.sub(r"\n{3,}", "\n\n", text).rstrip()
        return f"{text}\n" if text else ""

    @staticmethod
    def _escape_markdown(text: str) -> str:
        """Escape Markdown special characters with context awareness.

        Backslash, backticks, asterisks and brackets are always escaped.
        ``#`` is escaped only at the start of the text and ``_`` only at word
        boundaries, so ``snake_case`` stays readable.
        """
        always_escape = "\\`*[]"
        escaped_chars = []
        for i, char in enumerate(text):
            if char in always_escape:
                escaped_chars.append("\\" + char)
            elif char == "#" and i == 0:
                escaped_chars.append("\\#")
            elif char == "_":
                prev_alnum = i > 0 and text[i - 1].isalnum()
                next_alnum = i < len(text) - 1 and text[i + 1].isalnum()
                escaped_chars.append(char if prev_alnum and next_alnum else "\\_")
            else:
                escaped_chars.append(char)
        return "".join(escaped_chars)

    def _render_children(self, children: list[Node]) -> str:
        """Render blocks separated by blank lines."""
        parts = [self._render_blocks([child]) for child in children]
        return "\n\n".join(part for part in parts if part)

    @staticmethod
    def _quote(text: str) -> str:
        return "\n".join(f"> {line}" if line else ">" for line in text.split("\n"))

    def _title_line(self, attributes: dict[str, str]) -> None:
        if attributes.get("title"):
            self._output.append(f"**{self._escape_markdown(attributes['title'])}**\n\n")

    def generic_visit(self, node: Node) -> None:
        """Skip node types this renderer does not know."""
        BaseRenderer.generic_visit(self, node)

    # ------------------------------------------------------------------
    # Block nodes
    # ------------------------------------------------------------------

    def visit_document(self, node: Document) -> None:
        """Render a Document node."""
        self._output.append(self._render_children(node.children))

    def visit_header(self, node: Header) -> None:
        """Render a Header node as an ATX heading."""
        level = min(6, max(1, node.level))
        self._output.append(f"{'#' * level} {self._render_inline_content(node.content)}")

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node."""
        self._title_line(node.attributes)
        self._output.append(self._render_inline_content(node.content))

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a CodeBlock node as a fenced block.

        The fence is made longer than any backtick run inside the code.
        Callouts follow as a bulleted list of ``(N) text`` entries.

        Parameters
        ----------
        node : CodeBlock
            Code block to render

        """
        fence = "`" * max(3, _longest_run(node.content, "`") + 1)
        self._title_line(node.attributes)
        self._output.append(f"{fence}{node.language}\n")
        if node.content:
            self._output.append(node.content + "\n")
        self._output.append(fence)

        if node.callouts:
            self._output.append("\n\n")
            lines = [
                f"{self.options.bullet} ({number}) {self._escape_markdown(node.callouts[number])}"
                for number in sorted(node.callouts)
            ]
            self._output.append("\n".join(lines))

    def visit_block_quote(self, node: BlockQuote) -> None:
        """Render a BlockQuote node with ``>`` prefixes."""
        body = self._render_children(node.children)
        if node.attribution:
            attribution = f"-- {self._escape_markdown(node.attribution)}"
            body = f"{body}\n\n{attribution}" if body else attribution
        self._output.append(self._quote(body))

    def visit_admonition(self, node: Admonition) -> None:
        """Render an Admonition node as a block quote with a bold label."""
        label = self._escape_markdown(node.title) if node.title else node.kind.capitalize()
        body = self._render_children(node.children)
        self._output.append(self._quote(f"**{label}:** {body}".rstrip()))

    def _render_items(self, items: list[ListItem], markers: list[str]) -> None:
        for i, (item, marker) in enumerate(zip(items, markers)):
            if i > 0:
                self._output.append("\n")
            self._marker_stack.append(marker)
            item.accept(self)
            self._marker_stack.pop()

    def visit_unordered_list(self, node: UnorderedList) -> None:
        """Render an UnorderedList node."""
        self._title_line(node.attributes)
        self._render_items(node.items, [f"{self.options.bullet} "] * len(node.items))

    def visit_ordered_list(self, node: OrderedList) -> None:
        """Render an OrderedList node.

        Markdown only numbers with digits, so every numbering style renders
        as arabic numerals; a ``start`` attribute sets the first number.
        """
        start = node.attributes.get("start", "").strip()
        first = int(start) if start.isdigit() else 1
        self._title_line(node.attributes)
        self._render_items(node.items, [f"{first + i}. " for i in range(len(node.items))])

    def visit_list_item(self, node: ListItem) -> None:
        """Render a ListItem node.

        Parameters
        ----------
        node : ListItem
            List item to render; a nested list is indented past the marker

        """
        marker = self._marker_stack[-1] if self._marker_stack else f"{self.options.bullet} "
        self._output.append(f"{self._indent}{marker}{self._render_inline_content(node.content)}")
        if node.nested is not None:
            saved_indent = self._indent
            self._indent += " " * max(self.options.list_indent, len(marker))
            self._output.append("\n")
            node.nested.accept(self)
            self._indent = saved_indent

    def visit_definition_list(self, node: DefinitionList) -> None:
        """Render a DefinitionList node."""
        self._title_line(node.attributes)
        for i, (term, description) in enumerate(node.items):
            if i > 0:
                self._output.append("\n\n")
            term.accept(self)
            description.accept(self)

    def visit_definition_term(self, node: DefinitionTerm) -> None:
        """Render a DefinitionTerm node."""
        self._output.append(self._render_inline_content(node.content))

    def visit_definition_description(self, node: DefinitionDescription) -> None:
        """Render a DefinitionDescription node."""
        content = self._render_inline_content(node.content)
        self._output.append(f"\n: {content}" if content else "\n:")

    def _cell_text(self, cell: TableCell) -> str:
        return self._render_inline_content(cell.content).replace("|", "\\|").replace("\n", " ")

    def visit_table(self, node: Table) -> None:
        """Render a Table node as a pipe table.

        Pipe tables need exactly one header row, so a table without one gets
        an empty header. Spanned cells are padded with empty cells.

        Parameters
        ----------
        node : Table
            Table to render

        """
        if not node.rows:
            return

        alignments = parse_column_alignments(node.attributes.get("cols", ""))
        num_cols = max(self._compute_table_columns(node.rows), len(alignments), 1)

        rendered: list[list[str]] = []
        for row in node.rows:
            cells: list[str] = []
            for cell in row.cells:
                cells.append(self._cell_text(cell))
                cells.extend([""] * (cell.colspan - 1))
            rendered.append((cells + [""] * num_cols)[:num_cols])

        if node.rows[0].is_header:
            header, body = rendered[0], rendered[1:]
        else:
            header, body = [""] * num_cols, rendered

        alignment_row = [_ALIGNMENT_ROWS[alignments[i] if i < len(alignments) else None] for i in range(num_cols)]

        self._title_line(node.attributes)
        lines = [f"| {' | '.join(header)} |", f"| {' | '.join(alignment_row)} |"]
        lines.extend(f"| {' | '.join(cells)} |" for cells in body)
        self._output.append("\n".join(lines))

    def visit_table_row(self, node: TableRow) -> None:
        """Render a TableRow node outside a table."""
        self._output.append(f"| {' | '.join(self._cell_text(cell) for cell in node.cells)} |")

    def visit_table_cell(self, node: TableCell) -> None:
        """Render a TableCell node outside a table."""
        self._output.append(self._cell_text(node))

    def visit_horizontal_rule(self, node: HorizontalRule) -> None:
        """Render a HorizontalRule node."""
        self._output.append("---")

    def visit_passthrough_block(self, node: PassthroughBlock) -> None:
        """Render a PassthroughBlock node.

        ``stem`` and ``latexmath`` blocks become ``$$`` display math; other
        content is emitted raw, since Markdown accepts inline HTML.
        """
        if node.attributes.get("style") in ("stem", "latexmath"):
            self._output.append(f"$$\n{node.content}\n$$")
        else:
            self._output.append(node.content)

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    def visit_text(self, node: Text) -> None:
        """Render a Text node."""
        self._output.append(self._escape_markdown(node.content))

    def visit_bold(self, node: Bold) -> None:
        """Render a Bold node."""
        self._output.append(f"**{self._render_inline_content(node.content)}**")

    def visit_italic(self, node: Italic) -> None:
        """Render an Italic node."""
        self._output.append(f"*{self._render_inline_content(node.content)}*")

    def visit_monospace(self, node: Monospace) -> None:
        """Render a Monospace node as a code span."""
        code = extract_text(node.content, joiner="")
        ticks = "`" * (_longest_run(code, "`") + 1)
        if code.startswith("`") or code.endswith("`"):
            code = f" {code} "
        self._output.append(f"{ticks}{code}{ticks}")

    def visit_subscript(self, node: Subscript) -> None:
        """Render a Subscript node."""
        content = self._render_inline_content(node.content)
        self._output.append(f"<sub>{content}</sub>" if self.options.use_html_for_subsup else f"~{content}~")

    def visit_superscript(self, node: Superscript) -> None:
        """Render a Superscript node."""
        content = self._render_inline_content(node.content)
        self._output.append(f"<sup>{content}</sup>" if self.options.use_html_for_subsup else f"^{content}^")

    def visit_link(self, node: Link) -> None:
        """Render a Link node.

        A link whose text is its own URL becomes an autolink ``<url>``.
        """
        if extract_text(node.content, joiner="") in ("", node.url):
            self._output.append(f"<{node.url}>")
            return
        self._output.append(f"[{self._render_inline_content(node.content)}]({node.url})")

    def visit_image(self, node: Image) -> None:
        """Render an Image node."""
        alt = node.alt_text.replace("[", "\\[").replace("]", "\\]")
        self._output.append(f"![{alt}]({node.url})")

    def visit_cross_ref(self, node: CrossRef) -> None:
        """Render a CrossRef node as an in-page link."""
        content = self._render_inline_content(node.content) or self._escape_markdown(node.target)
        self._output.append(f"[{content}](#{node.target})")

    def visit_math(self, node: Math) -> None:
        """Render a Math node as ``$...$``."""
        self._output.append(f"${node.content}$")

    def visit_line_break(self, node: LineBreak) -> None:
        """Render a LineBreak node as a backslash hard break."""
        self._output.append("\\\n")

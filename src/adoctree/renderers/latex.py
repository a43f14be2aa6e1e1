#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adoctree/renderers/latex.py
"""LaTeX rendering from AST.

This module provides the LatexRenderer class which converts AST nodes to
LaTeX. The renderer produces a body fragment by default, or a complete
document with ``\\documentclass`` and ``\\usepackage`` lines when
``include_preamble`` is set.

Code blocks use the ``listings`` package, numbered list styles and start
values use ``enumitem``, and row-spanning table cells use ``multirow``.

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
from adoctree.ast.visitors import NodeVisitor
from adoctree.constants import LATEX_ENUMERATE_LABELS, LATEX_SECTION_COMMANDS
from adoctree.options.latex import LatexRendererOptions
from adoctree.renderers.base import BaseRenderer, InlineContentMixin, parse_column_alignments

logger = logging.getLogger(__name__)

_ALIGNMENT_CHARS = {"left": "l", "center": "c", "right": "r"}
_URL_SPECIAL = re.compile(r"[%#\\{}]")


class LatexRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
    r"""Render AST nodes to LaTeX text.

    Parameters
    ----------
    options : LatexRendererOptions or None, default = None
        LaTeX rendering options

    Examples
    --------
    Basic usage:

        >>> from adoctree.ast import Document, Header, Text
        >>> from adoctree.renderers.latex import LatexRenderer
        >>> doc = Document(children=[Header(level=1, content=[Text(content="Title")], id="title")])
        >>> LatexRenderer().render_to_string(doc)
        '\\section{Title}\\label{title}\n'

    """

    # LaTeX special characters that need escaping
    SPECIAL_CHARS = {
        "\\": r"\textbackslash{}",
        "{": r"\{",
        "}": r"\}",
        "$": r"\$",
        "%": r"\%",
        "&": r"\&",
        "#": r"\#",
        "_": r"\_",
        "~": r"\textasciitilde{}",
        "^": r"\textasciicircum{}",
    }

    _SPECIAL_PATTERN = re.compile("|".join(re.escape(char) for char in SPECIAL_CHARS))

    def __init__(self, options: LatexRendererOptions | None = None):
        """Initialize the LaTeX renderer with options."""
        BaseRenderer._validate_options_type(options, LatexRendererOptions, "latex")
        options = options or LatexRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: LatexRendererOptions = options
        self._output: list[str] = []

    def render_to_string(self, doc: Document) -> str:
        """Render a document AST to a LaTeX string.

        Parameters
        ----------
        doc : Document
            The document node to render

        Returns
        -------
        str
            LaTeX text ending with a newline

        """
        self._output = []

        if self.options.include_preamble:
            self._render_preamble(doc)
            self._output.append("\\begin{document}\n\n")

        doc.accept(self)

        if self.options.include_preamble:
            self._output.append("\n\\end{document}\n")

        return "".join(self._output)

    def _render_preamble(self, doc: Document) -> None:
        self._output.append(f"\\documentclass{{{self.options.document_class}}}\n\n")
        for package in self.options.packages:
            self._output.append(f"\\usepackage{{{package}}}\n")
        self._output.append("\n")

        title = doc.attributes.get("doctitle") or doc.attributes.get("title")
        if title:
            self._output.append(f"\\title{{{self._escape(title)}}}\n")
        if doc.attributes.get("author"):
            self._output.append(f"\\author{{{self._escape(doc.attributes['author'])}}}\n")
        self._output.append("\n")

    def _escape(self, text: str) -> str:
        """Escape special LaTeX characters in a single pass.

        Parameters
        ----------
        text : str
            Text to escape

        Returns
        -------
        str
            Escaped text, or ``text`` unchanged when ``escape_special`` is off

        """
        if not self.options.escape_special:
            return text
        return self._SPECIAL_PATTERN.sub(lambda m: self.SPECIAL_CHARS[m.group(0)], text)

    @staticmethod
    def _escape_url(url: str) -> str:
        return _URL_SPECIAL.sub(lambda m: "\\" + m.group(0), url)

    def _render_children(self, children: list[Node]) -> str:
        """Render blocks separated by blank lines."""
        parts = [self._render_blocks([child]) for child in children]
        return "\n\n".join(part for part in parts if part)

    def generic_visit(self, node: Node) -> None:
        """Skip node types this renderer does not know."""
        BaseRenderer.generic_visit(self, node)

    # ------------------------------------------------------------------
    # Block nodes
    # ------------------------------------------------------------------

    def visit_document(self, node: Document) -> None:
        """Render a Document node."""
        body = self._render_children(node.children)
        if body:
            self._output.append(body + "\n")

    def visit_header(self, node: Header) -> None:
        """Render a Header node with a ``\\label`` for cross-references.

        Parameters
        ----------
        node : Header
            Header to render

        """
        command = LATEX_SECTION_COMMANDS.get(node.level, "section")
        content = self._render_inline_content(node.content)
        label = f"\\label{{{node.id}}}" if node.id else ""
        self._output.append(f"\\{command}{{{content}}}{label}")

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node."""
        self._output.append(self._render_inline_content(node.content))

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a CodeBlock node as a ``lstlisting`` environment.

        Parameters
        ----------
        node : CodeBlock
            Code block to render; callouts follow as a ``description`` list

        """
        listing_options = []
        if node.language:
            listing_options.append(f"language={node.language}")
        if node.attributes.get("linenums") == "true":
            listing_options.append("numbers=left")
        if node.attributes.get("title"):
            listing_options.append(f"caption={{{self._escape(node.attributes['title'])}}}")
        option_text = f"[{', '.join(listing_options)}]" if listing_options else ""

        self._output.append(f"\\begin{{lstlisting}}{option_text}\n")
        if node.content:
            self._output.append(node.content + "\n")
        self._output.append("\\end{lstlisting}")

        if node.callouts:
            self._output.append("\n\\begin{description}\n")
            for number in sorted(node.callouts):
                self._output.append(f"\\item[({number})] {self._escape(node.callouts[number])}\n")
            self._output.append("\\end{description}")

    def visit_block_quote(self, node: BlockQuote) -> None:
        """Render a BlockQuote node as a ``quotation`` environment."""
        self._output.append("\\begin{quotation}\n")
        body = self._render_children(node.children)
        if body:
            self._output.append(body + "\n")
        if node.attribution:
            self._output.append(f"\\par\\hfill--- {self._escape(node.attribution)}\n")
        self._output.append("\\end{quotation}")

    def visit_admonition(self, node: Admonition) -> None:
        """Render an Admonition node as a labelled ``quote`` environment."""
        label = self._escape(node.title) if node.title else node.kind.capitalize()
        self._output.append(f"\\begin{{quote}}\n\\textbf{{{label}:}} ")
        body = self._render_children(node.children)
        if body:
            self._output.append(body + "\n")
        self._output.append("\\end{quote}")

    def _render_items(self, items: list[ListItem]) -> None:
        for item in items:
            item.accept(self)
            self._output.append("\n")

    def visit_unordered_list(self, node: UnorderedList) -> None:
        """Render an UnorderedList node."""
        self._output.append("\\begin{itemize}\n")
        self._render_items(node.items)
        self._output.append("\\end{itemize}")

    def visit_ordered_list(self, node: OrderedList) -> None:
        """Render an OrderedList node.

        The numbering style becomes an enumitem ``label`` and a ``start``
        attribute becomes the enumitem ``start`` key.

        Parameters
        ----------
        node : OrderedList
            Ordered list to render

        """
        keys = []
        if node.style in LATEX_ENUMERATE_LABELS:
            keys.append(f"label={LATEX_ENUMERATE_LABELS[node.style]}.")
        start = node.attributes.get("start", "").strip()
        if start.lstrip("-").isdigit() and int(start) != 1:
            keys.append(f"start={int(start)}")
        key_text = f"[{', '.join(keys)}]" if keys else ""

        self._output.append(f"\\begin{{enumerate}}{key_text}\n")
        self._render_items(node.items)
        self._output.append("\\end{enumerate}")

    def visit_list_item(self, node: ListItem) -> None:
        """Render a ListItem node."""
        self._output.append(f"\\item {self._render_inline_content(node.content)}")
        if node.nested is not None:
            self._output.append("\n")
            node.nested.accept(self)

    def visit_definition_list(self, node: DefinitionList) -> None:
        """Render a DefinitionList node as a ``description`` environment."""
        self._output.append("\\begin{description}\n")
        for term, description in node.items:
            term.accept(self)
            description.accept(self)
            self._output.append("\n")
        self._output.append("\\end{description}")

    def visit_definition_term(self, node: DefinitionTerm) -> None:
        """Render a DefinitionTerm node."""
        self._output.append(f"\\item[{self._render_inline_content(node.content)}]")

    def visit_definition_description(self, node: DefinitionDescription) -> None:
        """Render a DefinitionDescription node."""
        content = self._render_inline_content(node.content)
        if content:
            self._output.append(f" {content}")

    def visit_table(self, node: Table) -> None:
        """Render a Table node as a ``tabular`` environment.

        Parameters
        ----------
        node : Table
            Table to render; ``cols`` alignments select ``l``/``c``/``r``
            columns and spans use ``\\multicolumn`` and ``\\multirow``

        """
        if not node.rows:
            return

        alignments = parse_column_alignments(node.attributes.get("cols", ""))
        num_rows = len(node.rows)
        num_cols = max(self._compute_table_columns(node.rows), len(alignments))
        column_chars = [
            _ALIGNMENT_CHARS.get(alignments[i], "l") if i < len(alignments) and alignments[i] else "l"
            for i in range(num_cols)
        ]

        self._output.append(f"\\begin{{tabular}}{{|{'|'.join(column_chars)}|}}\n\\hline\n")

        occupied = [[False] * num_cols for _ in range(num_rows)]
        for row_idx, row in enumerate(node.rows):
            col_idx = 0
            cells: list[str] = []
            for cell in row.cells:
                while col_idx < num_cols and occupied[row_idx][col_idx]:
                    col_idx += 1
                    cells.append("")
                if col_idx >= num_cols:
                    break

                content = self._render_inline_content(cell.content)
                if row.is_header:
                    content = f"\\textbf{{{content}}}"
                colspan = min(cell.colspan, num_cols - col_idx)
                rowspan = cell.rowspan

                for r in range(row_idx, min(row_idx + rowspan, num_rows)):
                    for c in range(col_idx, col_idx + colspan):
                        occupied[r][c] = True

                if rowspan > 1:
                    content = f"\\multirow{{{rowspan}}}{{*}}{{{content}}}"
                if colspan > 1:
                    content = f"\\multicolumn{{{colspan}}}{{|{column_chars[col_idx]}|}}{{{content}}}"
                cells.append(content)
                col_idx += colspan

            self._output.append(" & ".join(cells) + " \\\\\n")
            if row.is_header or row_idx == num_rows - 1:
                self._output.append("\\hline\n")

        self._output.append("\\end{tabular}")

    def visit_table_row(self, node: TableRow) -> None:
        """Render a TableRow node outside a table."""
        cells = [self._render_inline_content(cell.content) for cell in node.cells]
        self._output.append(" & ".join(cells) + " \\\\")

    def visit_table_cell(self, node: TableCell) -> None:
        """Render a TableCell node outside a table."""
        self._output.append(self._render_inline_content(node.content))

    def visit_horizontal_rule(self, node: HorizontalRule) -> None:
        """Render a HorizontalRule node."""
        self._output.append("\\hrulefill")

    def visit_passthrough_block(self, node: PassthroughBlock) -> None:
        """Render a PassthroughBlock node.

        ``stem`` and ``latexmath`` blocks become display math; any other raw
        content is targeted at HTML and is kept only as LaTeX comments.
        """
        if not node.content:
            return
        if node.attributes.get("style") in ("stem", "latexmath"):
            self._output.append(f"\\[\n{node.content}\n\\]")
            return
        self._output.append("\n".join(f"% {line}" for line in node.content.split("\n")))

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    def visit_text(self, node: Text) -> None:
        """Render a Text node."""
        self._output.append(self._escape(node.content))

    def visit_bold(self, node: Bold) -> None:
        """Render a Bold node."""
        self._output.append(f"\\textbf{{{self._render_inline_content(node.content)}}}")

    def visit_italic(self, node: Italic) -> None:
        """Render an Italic node."""
        self._output.append(f"\\emph{{{self._render_inline_content(node.content)}}}")

    def visit_monospace(self, node: Monospace) -> None:
        """Render a Monospace node."""
        self._output.append(f"\\texttt{{{self._render_inline_content(node.content)}}}")

    def visit_subscript(self, node: Subscript) -> None:
        """Render a Subscript node."""
        self._output.append(f"\\textsubscript{{{self._render_inline_content(node.content)}}}")

    def visit_superscript(self, node: Superscript) -> None:
        """Render a Superscript node."""
        self._output.append(f"\\textsuperscript{{{self._render_inline_content(node.content)}}}")

    def visit_link(self, node: Link) -> None:
        """Render a Link node with ``\\href`` (hyperref)."""
        content = self._render_inline_content(node.content) or self._escape(node.url)
        self._output.append(f"\\href{{{self._escape_url(node.url)}}}{{{content}}}")

    def visit_image(self, node: Image) -> None:
        """Render an Image node with ``\\includegraphics`` (graphicx).

        Plain numeric ``width`` and ``height`` values are taken as points.
        """
        sizes = []
        for key in ("width", "height"):
            value = node.attributes.get(key, "").strip()
            if value:
                sizes.append(f"{key}={value}pt" if value.isdigit() else f"{key}={value}")
        option_text = f"[{','.join(sizes)}]" if sizes else ""
        self._output.append(f"\\includegraphics{option_text}{{{node.url}}}")

    def visit_cross_ref(self, node: CrossRef) -> None:
        """Render a CrossRef node with ``\\hyperref``."""
        content = self._render_inline_content(node.content) or self._escape(node.target)
        self._output.append(f"\\hyperref[{node.target}]{{{content}}}")

    def visit_math(self, node: Math) -> None:
        """Render a Math node as inline math, unescaped."""
        self._output.append(f"${node.content}$")

    def visit_line_break(self, node: LineBreak) -> None:
        """Render a LineBreak node."""
        self._output.append("\\\\\n")

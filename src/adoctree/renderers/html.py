#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adoctree/renderers/html.py
"""HTML rendering from AST.

This module provides the HtmlRenderer class which converts AST nodes to
HTML. The renderer produces either a fragment for embedding or, with
``standalone=True``, a complete page built from a Jinja2 template.

The rendering process uses the visitor pattern to traverse the AST and
generate HTML output with appropriate semantic markup.

"""

from __future__ import annotations

import logging
from typing import Optional

from jinja2 import Environment, PackageLoader
from markupsafe import Markup

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
from adoctree.constants import DEFAULT_HTML_TITLE, HTML_ORDERED_LIST_TYPES
from adoctree.options.html import HtmlRendererOptions
from adoctree.renderers.base import BaseRenderer, InlineContentMixin, parse_column_alignments
from adoctree.utils.html_utils import escape_html, sanitize_url

logger = logging.getLogger(__name__)

DEFAULT_CSS = """
body {
    font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, "Helvetica Neue", Arial, sans-serif;
    line-height: 1.6;
    max-width: 800px;
    margin: 0 auto;
    padding: 2rem;
    color: #333;
}
code, pre { font-family: "Courier New", Courier, monospace; }
pre { background-color: #f5f5f5; padding: 1rem; border-radius: 5px; overflow-x: auto; }
.line-number { color: #999; margin-right: 1em; user-select: none; }
blockquote { border-left: 4px solid #ddd; padding-left: 1rem; margin-left: 0; color: #666; }
.admonition { border-left: 4px solid #0066cc; background-color: #f5f9ff; padding: 0.5rem 1rem; margin: 1rem 0; }
.admonition.warning, .admonition.caution { border-left-color: #cc3300; background-color: #fff5f0; }
.admonition-title { font-weight: 600; margin: 0; }
table { border-collapse: collapse; margin: 1rem 0; }
th, td { border: 1px solid #ddd; padding: 0.5rem; }
th { background-color: #f5f5f5; font-weight: 600; }
dl.callouts dt { float: left; margin-right: 0.5em; font-weight: 600; }
img { max-width: 100%; height: auto; }
""".strip()

_TEMPLATE_NAME = "document.html.j2"


class HtmlRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
    """Render AST nodes to HTML format.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        HTML rendering options

    Examples
    --------
    Basic usage:

        >>> from adoctree.ast import Document, Header, Text
        >>> from adoctree.renderers.html import HtmlRenderer
        >>> doc = Document(children=[Header(level=1, content=[Text(content="Title")], id="title")])
        >>> HtmlRenderer().render_to_string(doc)
        '<h1 id="title">Title</h1>\\n'

    """

    def __init__(self, options: HtmlRendererOptions | None = None):
        """Initialize the HTML renderer with options."""
        BaseRenderer._validate_options_type(options, HtmlRendererOptions, "html")
        options = options or HtmlRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: HtmlRendererOptions = options
        self._output: list[str] = []

    def render_to_string(self, doc: Document) -> str:
        """Render a document AST to an HTML string.

        Parameters
        ----------
        doc : Document
            The document node to render

        Returns
        -------
        str
            HTML fragment, or a complete page when ``standalone`` is set

        """
        self._output = []
        doc.accept(self)
        content = "".join(self._output)
        if self.options.standalone:
            return self._wrap_in_document(doc, content)
        return content

    def _document_title(self, doc: Document) -> str:
        if self.options.title:
            return self.options.title
        for key in ("doctitle", "title"):
            if doc.attributes.get(key):
                return doc.attributes[key]
        for child in doc.children:
            if isinstance(child, Header) and child.level == 1:
                return extract_text(child.content, joiner="")
        return DEFAULT_HTML_TITLE

    def _wrap_in_document(self, doc: Document, content: str) -> str:
        env = Environment(loader=PackageLoader("adoctree", "templates"), autoescape=True)
        template = env.get_template(_TEMPLATE_NAME)
        return template.render(
            language=self.options.language,
            title=self._document_title(doc),
            css=Markup(DEFAULT_CSS) if self.options.css_style == "embedded" else "",
            content=Markup(content.rstrip("\n")),
        )

    def _url(self, url: str) -> str:
        if self.options.sanitize_urls:
            url = sanitize_url(url)
        return escape_html(url)

    @staticmethod
    def _block_attrs(attributes: dict[str, str], *classes: str) -> str:
        """Build ``id``/``class`` attributes for a block element."""
        html = f' id="{escape_html(attributes["id"])}"' if attributes.get("id") else ""
        names = [name for name in (*classes, attributes.get("role", "")) if name]
        if names:
            html += f' class="{escape_html(" ".join(names))}"'
        return html

    @staticmethod
    def _title_html(attributes: dict[str, str]) -> str:
        if not attributes.get("title"):
            return ""
        return f'<div class="title">{escape_html(attributes["title"])}</div>\n'

    def generic_visit(self, node: Node) -> None:
        """Skip node types this renderer does not know."""
        BaseRenderer.generic_visit(self, node)

    # ------------------------------------------------------------------
    # Block nodes
    # ------------------------------------------------------------------

    def visit_document(self, node: Document) -> None:
        """Render a Document node."""
        for child in node.children:
            child.accept(self)

    def visit_header(self, node: Header) -> None:
        """Render a Header node.

        Parameters
        ----------
        node : Header
            Header to render

        """
        level = min(6, max(1, node.level))
        content = self._render_inline_content(node.content)
        id_attr = f' id="{escape_html(node.id)}"' if node.id else ""
        self._output.append(f"<h{level}{id_attr}>{content}</h{level}>\n")

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node."""
        content = self._render_inline_content(node.content)
        self._output.append(self._title_html(node.attributes))
        self._output.append(f"<p{self._block_attrs(node.attributes)}>{content}</p>\n")

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a CodeBlock node.

        Line numbers become ``<span class="line-number">`` prefixes and the
        callout map is emitted as a ``<dl class="callouts">`` after the block.

        Parameters
        ----------
        node : CodeBlock
            Code block to render

        """
        class_attr = f' class="language-{escape_html(node.language)}"' if node.language else ""
        lines = [escape_html(line) for line in node.content.split("\n")]
        if node.attributes.get("linenums") == "true":
            width = len(str(len(lines)))
            lines = [
                f'<span class="line-number">{number:>{width}}</span>{line}' for number, line in enumerate(lines, 1)
            ]

        self._output.append(self._title_html(node.attributes))
        self._output.append(f"<pre{self._block_attrs(node.attributes)}><code{class_attr}>")
        self._output.append("\n".join(lines))
        self._output.append("</code></pre>\n")

        if node.callouts:
            self._output.append('<dl class="callouts">\n')
            for number in sorted(node.callouts):
                self._output.append(f"<dt>{number}</dt><dd>{escape_html(node.callouts[number])}</dd>\n")
            self._output.append("</dl>\n")

    def visit_block_quote(self, node: BlockQuote) -> None:
        """Render a BlockQuote node."""
        self._output.append("<blockquote>\n")
        for child in node.children:
            child.accept(self)
        if node.attribution:
            self._output.append(f"<footer>&#8212; {escape_html(node.attribution)}</footer>\n")
        self._output.append("</blockquote>\n")

    def visit_admonition(self, node: Admonition) -> None:
        """Render an Admonition node.

        Parameters
        ----------
        node : Admonition
            Admonition to render

        """
        title = escape_html(node.title) if node.title else escape_html(node.kind.capitalize())
        div_attrs = self._block_attrs(node.attributes, "admonition", node.kind)
        self._output.append(f'<div{div_attrs}>\n<p class="admonition-title">{title}</p>\n')
        for child in node.children:
            child.accept(self)
        self._output.append("</div>\n")

    def visit_unordered_list(self, node: UnorderedList) -> None:
        """Render an UnorderedList node."""
        self._output.append(self._title_html(node.attributes))
        self._output.append(f"<ul{self._block_attrs(node.attributes)}>\n")
        for item in node.items:
            item.accept(self)
        self._output.append("</ul>\n")

    def visit_ordered_list(self, node: OrderedList) -> None:
        """Render an OrderedList node.

        Parameters
        ----------
        node : OrderedList
            Ordered list to render; ``start`` and the numbering style map to
            the ``start`` and ``type`` attributes

        """
        attrs = self._block_attrs(node.attributes)
        start = node.attributes.get("start", "").strip()
        if start.lstrip("-").isdigit() and int(start) != 1:
            attrs += f' start="{int(start)}"'
        if node.style in HTML_ORDERED_LIST_TYPES:
            attrs += f' type="{HTML_ORDERED_LIST_TYPES[node.style]}"'

        self._output.append(self._title_html(node.attributes))
        self._output.append(f"<ol{attrs}>\n")
        for item in node.items:
            item.accept(self)
        self._output.append("</ol>\n")

    def visit_list_item(self, node: ListItem) -> None:
        """Render a ListItem node."""
        self._output.append(f"<li>{self._render_inline_content(node.content)}")
        if node.nested is not None:
            self._output.append("\n")
            node.nested.accept(self)
        self._output.append("</li>\n")

    def visit_definition_list(self, node: DefinitionList) -> None:
        """Render a DefinitionList node."""
        self._output.append(self._title_html(node.attributes))
        self._output.append(f"<dl{self._block_attrs(node.attributes)}>\n")
        for term, description in node.items:
            term.accept(self)
            description.accept(self)
        self._output.append("</dl>\n")

    def visit_definition_term(self, node: DefinitionTerm) -> None:
        """Render a DefinitionTerm node."""
        self._output.append(f"<dt>{self._render_inline_content(node.content)}</dt>\n")

    def visit_definition_description(self, node: DefinitionDescription) -> None:
        """Render a DefinitionDescription node."""
        self._output.append(f"<dd>{self._render_inline_content(node.content)}</dd>\n")

    def visit_table(self, node: Table) -> None:
        """Render a Table node.

        Header rows go to ``<thead>``, the rest to ``<tbody>``. Column
        alignment from ``cols`` is applied by column position, with spanned
        columns skipped.

        Parameters
        ----------
        node : Table
            Table to render

        """
        alignments = parse_column_alignments(node.attributes.get("cols", ""))
        header_rows = [row for row in node.rows if row.is_header]
        body_rows = [row for row in node.rows if not row.is_header]

        self._output.append(f"<table{self._block_attrs(node.attributes)}>\n")
        if node.attributes.get("title"):
            self._output.append(f"<caption>{escape_html(node.attributes['title'])}</caption>\n")
        for section, rows in (("thead", header_rows), ("tbody", body_rows)):
            if not rows:
                continue
            self._output.append(f"<{section}>\n")
            for row in rows:
                self._render_row(row, alignments)
            self._output.append(f"</{section}>\n")
        self._output.append("</table>\n")

    def _render_row(self, row: TableRow, alignments: list[Optional[str]]) -> None:
        tag = "th" if row.is_header else "td"
        self._output.append("<tr>")
        column = 0
        for cell in row.cells:
            attrs = ""
            if column < len(alignments) and alignments[column]:
                attrs += f' style="text-align: {alignments[column]}"'
            if cell.colspan > 1:
                attrs += f' colspan="{cell.colspan}"'
            if cell.rowspan > 1:
                attrs += f' rowspan="{cell.rowspan}"'
            self._output.append(f"<{tag}{attrs}>{self._render_inline_content(cell.content)}</{tag}>")
            column += cell.colspan
        self._output.append("</tr>\n")

    def visit_table_row(self, node: TableRow) -> None:
        """Render a TableRow node outside a table."""
        self._render_row(node, [])

    def visit_table_cell(self, node: TableCell) -> None:
        """Render a TableCell node outside a table."""
        self._output.append(f"<td>{self._render_inline_content(node.content)}</td>")

    def visit_horizontal_rule(self, node: HorizontalRule) -> None:
        """Render a HorizontalRule node."""
        self._output.append("<hr>\n")

    def visit_passthrough_block(self, node: PassthroughBlock) -> None:
        """Render a PassthroughBlock node according to ``passthrough_mode``."""
        mode = self.options.passthrough_mode
        if mode == "drop" or not node.content:
            return
        if mode == "escape":
            self._output.append(f"<pre>{escape_html(node.content)}</pre>\n")
            return
        self._output.append(node.content)
        if not node.content.endswith("\n"):
            self._output.append("\n")

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    def visit_text(self, node: Text) -> None:
        """Render a Text node."""
        self._output.append(escape_html(node.content))

    def visit_bold(self, node: Bold) -> None:
        """Render a Bold node."""
        self._output.append(f"<strong>{self._render_inline_content(node.content)}</strong>")

    def visit_italic(self, node: Italic) -> None:
        """Render an Italic node."""
        self._output.append(f"<em>{self._render_inline_content(node.content)}</em>")

    def visit_monospace(self, node: Monospace) -> None:
        """Render a Monospace node."""
        self._output.append(f"<code>{self._render_inline_content(node.content)}</code>")

    def visit_subscript(self, node: Subscript) -> None:
        """Render a Subscript node."""
        self._output.append(f"<sub>{self._render_inline_content(node.content)}</sub>")

    def visit_superscript(self, node: Superscript) -> None:
        """Render a Superscript node."""
        self._output.append(f"<sup>{self._render_inline_content(node.content)}</sup>")

    def visit_link(self, node: Link) -> None:
        """Render a Link node."""
        content = self._render_inline_content(node.content) or escape_html(node.url)
        self._output.append(f'<a href="{self._url(node.url)}">{content}</a>')

    def visit_image(self, node: Image) -> None:
        """Render an Image node.

        Parameters
        ----------
        node : Image
            Image to render; ``width``, ``height`` and ``title`` attributes
            are carried over

        """
        attrs = f'src="{self._url(node.url)}" alt="{escape_html(node.alt_text)}"'
        for key in ("width", "height", "title"):
            if node.attributes.get(key):
                attrs += f' {key}="{escape_html(node.attributes[key])}"'
        self._output.append(f"<img {attrs}>")

    def visit_cross_ref(self, node: CrossRef) -> None:
        """Render a CrossRef node as an in-page link."""
        content = self._render_inline_content(node.content) or escape_html(node.target)
        self._output.append(f'<a href="#{escape_html(node.target)}">{content}</a>')

    def visit_math(self, node: Math) -> None:
        """Render a Math node as TeX delimited for MathJax/KaTeX."""
        self._output.append(f'<span class="math">\\({escape_html(node.content)}\\)</span>')

    def visit_line_break(self, node: LineBreak) -> None:
        """Render a LineBreak node."""
        self._output.append("<br>\n")

#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the Markdown renderer."""

import pytest

from adoctree import to_markdown
from adoctree.ast import CodeBlock, Document, Monospace, Paragraph, Text
from adoctree.options import MarkdownRendererOptions
from adoctree.parsers import parse
from adoctree.renderers import MarkdownRenderer


def _md(text: str, **options) -> str:
    return to_markdown(parse(text), MarkdownRendererOptions(**options) if options else None)


@pytest.mark.unit
class TestMarkdownBlocks:
    """Tests for block-level Markdown output."""

    def test_header(self) -> None:
        """Test an ATX heading."""
        assert _md("= Title") == "# Title\n"
        assert _md("=== Third") == "### Third\n"

    def test_paragraphs(self) -> None:
        """Test paragraphs separated by a blank line."""
        assert _md("Hello *world*\n\nSecond") == "Hello **world**\n\nSecond\n"

    def test_code_block(self) -> None:
        """Test a fenced code block with a language."""
        assert _md("[source,python]\n----\nx = 1\n----") == "```python\nx = 1\n```\n"

    def test_fence_longer_than_content_backticks(self) -> None:
        """Test that the fence outgrows backtick runs in the code."""
        doc = Document(children=[CodeBlock(content="```\nnested\n```")])
        assert MarkdownRenderer().render_to_string(doc) == "````\n```\nnested\n```\n````\n"

    def test_code_block_callouts(self) -> None:
        """Test callouts as a list after the block."""
        assert _md("----\nx <1>\n----\n<1> one") == "```\nx <1>\n```\n\n* (1) one\n"

    def test_block_quote_with_attribution(self) -> None:
        """Test quote prefixes and attribution."""
        assert _md("[quote, Someone]\n____\nWise words\n____") == "> Wise words\n>\n> -- Someone\n"

    def test_admonition(self) -> None:
        """Test an admonition as a labelled quote."""
        assert _md("NOTE: Careful") == "> **Note:** Careful\n"

    def test_nested_list(self) -> None:
        """Test nested list indentation."""
        assert _md("* A\n** B\n* C") == "* A\n  * B\n* C\n"

    def test_ordered_list_start(self) -> None:
        """Test numbering from a start attribute."""
        assert _md("[loweralpha,start=3]\n. a\n. b") == "3. a\n4. b\n"

    def test_nested_ordered_indent_follows_marker(self) -> None:
        """Test that nested items align past a wide marker."""
        assert _md("[start=10]\n. ten\n.. sub") == "10. ten\n    1. sub\n"

    def test_bullet_option(self) -> None:
        """Test a custom bullet character."""
        assert _md("* a\n* b", bullet="-") == "- a\n- b\n"

    def test_definition_list(self) -> None:
        """Test term and description lines."""
        assert _md("CPU:: Central unit") == "CPU\n: Central unit\n"

    def test_table(self) -> None:
        """Test a pipe table with a header row."""
        assert _md("|===\n|H1|H2\n|a|b\n|===") == "| H1 | H2 |\n| --- | --- |\n| a | b |\n"

    def test_table_without_header(self) -> None:
        """Test that an empty header row is added."""
        assert _md("[%noheader]\n|===\n|a|b\n|===") == "|  |  |\n| --- | --- |\n| a | b |\n"

    def test_table_alignment_and_span(self) -> None:
        """Test alignment markers and colspan padding."""
        assert _md('[cols="<,^,>"]\n|===\n|2+|Wide|Edge\n|a|b|c\n|===') == (
            "| Wide |  | Edge |\n| :--- | :---: | ---: |\n| a | b | c |\n"
        )

    def test_table_pipe_escaped(self) -> None:
        """Test that pipes in cell text are escaped."""
        assert "| a \\| b |" in _md("|===\n|a \\| b\n|===")

    def test_horizontal_rule(self) -> None:
        """Test a thematic break."""
        assert _md("a\n\n'''\n\nb") == "a\n\n---\n\nb\n"

    def test_passthrough(self) -> None:
        """Test raw and math passthrough blocks."""
        assert _md("++++\n<b>raw</b>\n++++") == "<b>raw</b>\n"
        assert _md("[stem]\n++++\nx^2\n++++") == "$$\nx^2\n$$\n"

    def test_empty_document(self) -> None:
        """Test that an empty document renders to an empty string."""
        assert _md("") == ""


@pytest.mark.unit
class TestMarkdownInline:
    """Tests for inline Markdown output."""

    def test_escaping(self) -> None:
        """Test escaping of Markdown special characters."""
        assert _md("a * b [x]") == "a \\* b \\[x\\]\n"

    def test_intraword_underscore_kept(self) -> None:
        """Test that underscores inside words are not escaped."""
        assert _md("snake_case and _private") == "snake_case and \\_private\n"

    def test_italic_and_monospace(self) -> None:
        """Test italic and code spans."""
        assert _md("_it_ and `x*y`") == "*it* and `x*y`\n"

    def test_code_span_with_backtick(self) -> None:
        """Test that a code span containing a backtick uses a longer delimiter."""
        doc = Document(children=[Paragraph(content=[Monospace(content=[Text(content="a`b")])])])
        assert MarkdownRenderer().render_to_string(doc) == "``a`b``\n"

    def test_subscript_superscript(self) -> None:
        """Test HTML and extension syntax for sub/superscript."""
        assert _md("H~2~O x^2^") == "H<sub>2</sub>O x<sup>2</sup>\n"
        assert _md("H~2~O", use_html_for_subsup=False) == "H~2~O\n"

    def test_autolink(self) -> None:
        """Test that a bare URL becomes an autolink."""
        assert _md("https://example.com") == "<https://example.com>\n"

    def test_link_with_text(self) -> None:
        """Test an inline link."""
        assert _md("https://example.com[Example]") == "[Example](https://example.com)\n"

    def test_image(self) -> None:
        """Test an image."""
        assert _md("image:logo.png[Logo]") == "![Logo](logo.png)\n"

    def test_cross_reference(self) -> None:
        """Test an in-page link."""
        assert _md("<<intro,Intro>>") == "[Intro](#intro)\n"

    def test_math_and_line_break(self) -> None:
        """Test inline math and a hard break."""
        assert _md("stem:[x^2] +\nnext") == "$x^2$\\\nnext\n"

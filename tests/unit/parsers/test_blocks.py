#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for block-level AsciiDoc parsing."""

import pytest

from adoctree.ast import (
    Admonition,
    BlockQuote,
    Bold,
    CodeBlock,
    Header,
    HorizontalRule,
    Image,
    Paragraph,
    PassthroughBlock,
    Table,
    Text,
    UnorderedList,
)
from adoctree.parsers import AsciiDocParser, parse
from adoctree.parsers._blocks import is_fence


@pytest.mark.unit
class TestHeaders:
    """Tests for section headers and their ids."""

    def test_document_title(self) -> None:
        """Test a level-1 header with a generated id."""
        doc = parse("= Title")
        assert doc.children == [Header(level=1, content=[Text(content="Title")], id="title")]

    @pytest.mark.parametrize("marks,level", [("==", 2), ("===", 3), ("======", 6)])
    def test_levels(self, marks: str, level: int) -> None:
        """Test that the number of = marks is the level."""
        header = parse(f"{marks} Section").children[0]
        assert isinstance(header, Header)
        assert header.level == level

    def test_seven_marks_is_paragraph(self) -> None:
        """Test that more than six marks is not a header."""
        doc = parse("======= Too deep")
        assert isinstance(doc.children[0], Paragraph)

    def test_inline_id(self) -> None:
        """Test a trailing [#id] on the header line."""
        header = parse("== Getting Started [#start]").children[0]
        assert header.id == "start"
        assert header.content == [Text(content="Getting Started")]

    def test_id_from_attribute_line(self) -> None:
        """Test an id given by a preceding [#id] line."""
        header = parse("[#custom]\n== Section").children[0]
        assert header.id == "custom"

    def test_generated_id_for_leading_digit(self) -> None:
        """Test that generated ids never start with a digit."""
        assert parse("== 3rd Party").children[0].id == "_3rd-party"

    def test_generated_id_ignores_markup(self) -> None:
        """Test that ids are generated from the header's plain text."""
        header = parse("= *Bold* Title").children[0]
        assert header.content[0] == Bold(content=[Text(content="Bold")])
        assert header.id == "bold-title"


@pytest.mark.unit
class TestParagraphs:
    """Tests for paragraphs, comments and attribute entries."""

    def test_lines_joined(self) -> None:
        """Test that consecutive lines form one paragraph."""
        doc = parse("line one\nline two")
        assert doc.children == [Paragraph(content=[Text(content="line one line two")])]

    def test_blank_line_separates(self) -> None:
        """Test that a blank line ends a paragraph."""
        doc = parse("first\n\nsecond")
        assert len(doc.children) == 2

    def test_header_interrupts_paragraph(self) -> None:
        """Test that a header line ends the paragraph before it."""
        doc = parse("text\n== Head")
        assert isinstance(doc.children[0], Paragraph)
        assert isinstance(doc.children[1], Header)

    def test_line_comment(self) -> None:
        """Test that // lines produce nothing."""
        doc = parse("// comment\nText")
        assert doc.children == [Paragraph(content=[Text(content="Text")])]

    def test_block_comment(self) -> None:
        """Test that a //// block is skipped entirely."""
        doc = parse("////\n= hidden\n* hidden\n////\nShown")
        assert doc.children == [Paragraph(content=[Text(content="Shown")])]

    def test_attribute_entry_and_reference(self) -> None:
        """Test that an entry defines an attribute used by later text."""
        doc = parse(":product: adoctree\n\n{product} works")
        assert doc.children == [Paragraph(content=[Text(content="adoctree works")])]
        assert doc.attributes["product"] == "adoctree"

    def test_substituted_value_is_formatted(self) -> None:
        """Test that markup inside an attribute value is tokenized."""
        doc = parse(":greeting: *hi*\n\n{greeting} there")
        assert doc.children[0].content == [Bold(content=[Text(content="hi")]), Text(content=" there")]

    def test_unset_attribute(self) -> None:
        """Test that an unset attribute is no longer substituted."""
        doc = parse(":a: 1\n:a!:\n\n{a}")
        assert doc.children[0].content == [Text(content="{a}")]
        assert "a" not in doc.attributes

    def test_entry_position_matters(self) -> None:
        """Test that references before an entry are not substituted."""
        doc = parse("{late}\n\n:late: now\n\n{late}")
        assert doc.children[0].content == [Text(content="{late}")]
        assert doc.children[1].content == [Text(content="now")]

    def test_caller_attributes(self) -> None:
        """Test attributes supplied by the caller."""
        doc = parse("Version {version}", attributes={"version": "2.1"})
        assert doc.children[0].content == [Text(content="Version 2.1")]

    def test_lone_title_line_is_text(self) -> None:
        """Test that a title line with no block after it is a paragraph."""
        doc = parse(".Not a title here")
        assert doc.children == [Paragraph(content=[Text(content=".Not a title here")])]

    def test_lone_attribute_line_dropped(self) -> None:
        """Test that an attribute line with nothing after it produces nothing."""
        assert parse("[.lead]").children == []

    def test_role_and_id_on_paragraph(self) -> None:
        """Test block attributes applied to a paragraph."""
        doc = parse("[#intro.lead]\nIntro text")
        assert doc.children == [
            Paragraph(content=[Text(content="Intro text")], attributes={"id": "intro", "role": "lead"})
        ]

    def test_titled_paragraph(self) -> None:
        """Test a block title on a paragraph."""
        paragraph = parse(".Summary\nShort text").children[0]
        assert paragraph.attributes == {"title": "Summary"}

    def test_empty_document(self) -> None:
        """Test that empty input yields an empty document."""
        assert parse("").children == []
        assert parse("\n\n   \n").children == []


@pytest.mark.unit
class TestCodeBlocks:
    """Tests for listing blocks and callouts."""

    def test_source_block(self) -> None:
        """Test a source block with a language."""
        doc = parse("[source,python]\n----\nprint('hi')\n----")
        assert doc.children == [CodeBlock(content="print('hi')", language="python")]

    def test_content_is_verbatim(self) -> None:
        """Test that markup and attribute references inside code are literal."""
        doc = parse(":x: 1\n\n----\n*not bold* {x}\n\n  indented\n----")
        assert doc.children[0].content == "*not bold* {x}\n\n  indented"

    def test_unstyled_listing(self) -> None:
        """Test a listing block without attributes."""
        block = parse("----\nraw\n----").children[0]
        assert isinstance(block, CodeBlock)
        assert block.language == ""

    @pytest.mark.parametrize("attrs", ["[source,python,linenums]", "[source,python%linenums]"])
    def test_linenums_flag(self, attrs: str) -> None:
        """Test that flags after the language become true-valued attributes."""
        block = parse(f"{attrs}\n----\nx = 1\n----").children[0]
        assert block.language == "python"
        assert block.attributes == {"linenums": "true"}

    def test_callouts(self) -> None:
        """Test callout lines following the block."""
        block = parse("----\ncode <1>\nmore <2>\n----\n<1> Explanation\n<2> Second").children[0]
        assert block.content == "code <1>\nmore <2>"
        assert block.callouts == {1: "Explanation", 2: "Second"}

    def test_unterminated_block(self) -> None:
        """Test that an unterminated block runs to the end of input."""
        block = parse("----\nabc\ndef").children[0]
        assert block.content == "abc\ndef"

    def test_longer_fence(self) -> None:
        """Test that a block closes only on its own fence."""
        block = parse("------\n----\n------").children[0]
        assert block.content == "----"

    def test_title(self) -> None:
        """Test a block title on a listing."""
        block = parse(".Example\n[source,ruby]\n----\nputs 1\n----").children[0]
        assert block.language == "ruby"
        assert block.attributes["title"] == "Example"

    def test_fence_detection(self) -> None:
        """Test the delimited block fence helper."""
        assert is_fence("----")
        assert is_fence("|===")
        assert is_fence("  ____  ")
        assert not is_fence("---")
        assert not is_fence("text")


@pytest.mark.unit
class TestDelimitedBlocks:
    """Tests for passthrough, quote, example and admonition blocks."""

    def test_passthrough_block(self) -> None:
        """Test a passthrough block keeps its style."""
        doc = parse("[stem]\n++++\nx^2\n++++")
        assert doc.children == [PassthroughBlock(content="x^2", attributes={"style": "stem"})]

    def test_raw_passthrough(self) -> None:
        """Test a passthrough block without attributes."""
        doc = parse("++++\n<b>raw</b>\n++++")
        assert doc.children == [PassthroughBlock(content="<b>raw</b>")]

    def test_quote_with_attribution(self) -> None:
        """Test a quote block with author and source."""
        doc = parse("[quote, Abraham Lincoln, Gettysburg Address]\n____\nFour score\n____")
        assert doc.children == [
            BlockQuote(
                children=[Paragraph(content=[Text(content="Four score")])],
                attribution="Abraham Lincoln, Gettysburg Address",
            )
        ]

    def test_quote_contains_blocks(self) -> None:
        """Test that quote bodies are parsed as blocks."""
        quote = parse("____\n* a\n* b\n____").children[0]
        assert quote.attribution is None
        assert isinstance(quote.children[0], UnorderedList)

    def test_nested_quotes(self) -> None:
        """Test a quote nested in another using a longer fence."""
        outer = parse("______\nouter\n\n____\ninner\n____\n______").children[0]
        assert isinstance(outer, BlockQuote)
        assert isinstance(outer.children[1], BlockQuote)

    def test_inline_admonition(self) -> None:
        """Test a NOTE: paragraph."""
        doc = parse("NOTE: Remember this.")
        assert doc.children == [
            Admonition(kind="note", children=[Paragraph(content=[Text(content="Remember this.")])])
        ]

    def test_admonition_block_with_title(self) -> None:
        """Test a styled example block with a title."""
        doc = parse("[WARNING]\n.Careful\n====\nDanger ahead.\n\nStay back.\n====")
        admonition = doc.children[0]
        assert isinstance(admonition, Admonition)
        assert admonition.kind == "warning"
        assert admonition.title == "Careful"
        assert len(admonition.children) == 2

    def test_admonition_style_on_paragraph(self) -> None:
        """Test an admonition style applied to a following paragraph."""
        doc = parse("[TIP]\nJust a tip.")
        assert doc.children == [Admonition(kind="tip", children=[Paragraph(content=[Text(content="Just a tip.")])])]

    def test_inline_admonition_keeps_id_and_role(self) -> None:
        """Test that an attribute line before NOTE: carries its id and role."""
        doc = parse("[#x.big]\nNOTE: hello")
        assert doc.children == [
            Admonition(
                kind="note",
                children=[Paragraph(content=[Text(content="hello")])],
                attributes={"id": "x", "role": "big"},
            )
        ]

    def test_admonition_style_is_case_insensitive(self) -> None:
        """Test that a lower-case admonition style is recognized."""
        doc = parse("[note]\nLower case style.")
        assert doc.children == [
            Admonition(kind="note", children=[Paragraph(content=[Text(content="Lower case style.")])])
        ]

    def test_admonition_style_case_before_quote_fence(self) -> None:
        """Test that lower and upper case styles treat a quote fence alike."""
        text = "{style}\n____\nquoted\n____"
        assert parse(text.format(style="[tip]")) == parse(text.format(style="[TIP]"))

    @pytest.mark.parametrize("kind", ["NOTE", "TIP", "IMPORTANT", "WARNING", "CAUTION"])
    def test_admonition_kinds(self, kind: str) -> None:
        """Test every admonition label."""
        admonition = parse(f"{kind}: text").children[0]
        assert admonition.kind == kind.lower()

    def test_example_block_unwrapped(self) -> None:
        """Test that an unstyled example block contributes its content."""
        doc = parse("====\nInside\n====")
        assert doc.children == [Paragraph(content=[Text(content="Inside")])]

    def test_attributes_shared_with_nested_blocks(self) -> None:
        """Test that entries inside delimited blocks stay in effect after them."""
        doc = parse("====\n:inner: set\n====\n\n{inner}")
        assert doc.children == [Paragraph(content=[Text(content="set")])]

    def test_deep_nesting_is_capped(self) -> None:
        """Test that pathological nesting degrades without error."""
        depth = 80
        text = "\n".join("_" * (4 + depth - i) for i in range(depth)) + "\ncore\n"
        text += "\n".join("_" * (4 + i + 1) for i in range(depth))
        doc = parse(text)
        assert doc.children


@pytest.mark.unit
class TestOtherBlocks:
    """Tests for rules, images and titles on tables."""

    @pytest.mark.parametrize("line", ["'''", "---"])
    def test_horizontal_rule(self, line: str) -> None:
        """Test horizontal rule markers."""
        assert parse(line).children == [HorizontalRule()]

    def test_block_image(self) -> None:
        """Test a block image becomes an image paragraph."""
        doc = parse("image::diagram.png[Diagram, width=300]")
        assert doc.children == [
            Paragraph(content=[Image(url="diagram.png", alt_text="Diagram", attributes={"width": "300"})])
        ]

    def test_block_image_attribute_in_url(self) -> None:
        """Test attribute references in a block image target."""
        doc = parse(":imagesdir: img\n\nimage::{imagesdir}/a.png[]")
        assert doc.children[0].content[0].url == "img/a.png"

    def test_titled_table(self) -> None:
        """Test a block title on a table."""
        table = parse(".Results\n|===\n|a|b\n|===").children[0]
        assert isinstance(table, Table)
        assert table.attributes["title"] == "Results"

    def test_parser_instance_reusable(self) -> None:
        """Test that one parser instance parses documents independently."""
        parser = AsciiDocParser()
        first = parser.parse(":x: 1\n\n{x}")
        second = parser.parse("{x}")
        assert first.children[0].content == [Text(content="1")]
        assert second.children[0].content == [Text(content="{x}")]

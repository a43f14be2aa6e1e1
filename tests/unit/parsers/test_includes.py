#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for include directive expansion."""

import logging
from pathlib import Path

import pytest

from adoctree.ast import Header, Paragraph, Text
from adoctree.ast.utils import extract_text
from adoctree.exceptions import FileNotFoundError as AdocFileNotFoundError
from adoctree.options import AsciiDocOptions
from adoctree.parsers import AsciiDocParser, parse, parse_file
from adoctree.parsers._includes import parse_line_ranges, select_lines


def _texts(doc) -> list[str]:
    return [extract_text(child) for child in doc.children]


@pytest.mark.unit
class TestLineRanges:
    """Tests for lines= range parsing and selection."""

    def test_parse_ranges(self) -> None:
        """Test single lines, closed ranges and open ranges."""
        assert parse_line_ranges("1..3;7;10..-1") == [(1, 3), (7, 7), (10, None)]

    def test_open_range_without_end(self) -> None:
        """Test a range with nothing after the dots."""
        assert parse_line_ranges("5..") == [(5, None)]

    def test_comma_separator(self) -> None:
        """Test commas as range separators."""
        assert parse_line_ranges("1,3") == [(1, 1), (3, 3)]

    def test_invalid_parts_ignored(self) -> None:
        """Test that invalid parts are skipped and all-invalid gives None."""
        assert parse_line_ranges("x;2") == [(2, 2)]
        assert parse_line_ranges("abc") is None
        assert parse_line_ranges("") is None

    def test_select_clamps(self) -> None:
        """Test that ranges past the end are clamped."""
        assert select_lines(["a", "b", "c"], [(2, 10)]) == ["b", "c"]
        assert select_lines(["a", "b", "c"], [(5, 6)]) == []

    def test_select_in_range_order(self) -> None:
        """Test that selection follows range order and repeats overlaps."""
        assert select_lines(["a", "b", "c"], [(3, 3), (1, 1), (1, 1)]) == ["c", "a", "a"]

    def test_select_open_range(self) -> None:
        """Test an open-ended range."""
        assert select_lines(["a", "b", "c"], [(2, None)]) == ["b", "c"]


@pytest.mark.unit
class TestIncludes:
    """Tests for resolving include:: directives."""

    def test_include_spliced(self, write_adoc) -> None:
        """Test that included blocks appear in place of the directive."""
        write_adoc("child.adoc", "Child paragraph")
        main = write_adoc("main.adoc", "= Main\n\ninclude::child.adoc[]\n\nAfter")

        doc = parse_file(main)
        assert doc.children == [
            Header(level=1, content=[Text(content="Main")], id="main"),
            Paragraph(content=[Text(content="Child paragraph")]),
            Paragraph(content=[Text(content="After")]),
        ]

    def test_include_with_base_path(self, tmp_path: Path, write_adoc) -> None:
        """Test includes resolved against an explicit base path."""
        write_adoc("parts/a.adoc", "Part A")
        doc = parse("include::parts/a.adoc[]", base_path=tmp_path)
        assert _texts(doc) == ["Part A"]

    def test_nested_include_relative_to_including_file(self, write_adoc) -> None:
        """Test that nested includes resolve against the including file's directory."""
        write_adoc("chapters/inner.adoc", "Inner")
        write_adoc("chapters/outer.adoc", "include::inner.adoc[]")
        main = write_adoc("main.adoc", "include::chapters/outer.adoc[]")
        assert _texts(parse_file(main)) == ["Inner"]

    def test_missing_file(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        """Test that a missing include is logged and skipped."""
        with caplog.at_level(logging.WARNING):
            doc = parse("Before\n\ninclude::nope.adoc[]\n\nAfter", base_path=tmp_path)

        assert _texts(doc) == ["Before", "After"]
        assert "Include file not found" in caplog.text

    def test_self_include(self, write_adoc, caplog: pytest.LogCaptureFixture) -> None:
        """Test that a file including itself is detected."""
        path = write_adoc("a.adoc", "A\n\ninclude::a.adoc[]")
        with caplog.at_level(logging.WARNING):
            doc = parse_file(path)

        assert _texts(doc) == ["A"]
        assert "Circular include detected" in caplog.text

    def test_mutual_include(self, write_adoc, caplog: pytest.LogCaptureFixture) -> None:
        """Test that a cycle through two files terminates."""
        write_adoc("b.adoc", "B\n\ninclude::a.adoc[]")
        path = write_adoc("a.adoc", "A\n\ninclude::b.adoc[]")
        with caplog.at_level(logging.WARNING):
            doc = parse_file(path)

        assert _texts(doc) == ["A", "B"]
        assert "Circular include detected" in caplog.text

    def test_cycle_from_text_input_terminates(self, tmp_path: Path, write_adoc) -> None:
        """Test that a cycle entered from in-memory text is still finite."""
        write_adoc("b.adoc", "B\n\ninclude::a.adoc[]")
        write_adoc("a.adoc", "A\n\ninclude::b.adoc[]")
        doc = parse("include::a.adoc[]", base_path=tmp_path)
        assert _texts(doc) == ["A", "B"]

    def test_line_selection(self, write_adoc) -> None:
        """Test lines= on an include."""
        write_adoc("child.adoc", "l1\n\nl2\n\nl3\n\nl4")
        main = write_adoc("main.adoc", "include::child.adoc[lines=3..5]")
        assert _texts(parse_file(main)) == ["l2", "l3"]

    def test_line_selection_with_semicolons(self, write_adoc) -> None:
        """Test several ranges separated by semicolons."""
        write_adoc("child.adoc", "one\n\ntwo\n\nthree")
        main = write_adoc("main.adoc", 'include::child.adoc[lines="1..2;5"]')
        assert _texts(parse_file(main)) == ["one", "three"]

    def test_child_sees_parent_attributes(self, write_adoc) -> None:
        """Test that an included file resolves the includer's attributes."""
        write_adoc("child.adoc", "{greeting} from child")
        main = write_adoc("main.adoc", ":greeting: Hello\n\ninclude::child.adoc[]")
        assert _texts(parse_file(main)) == ["Hello from child"]

    def test_child_attributes_do_not_leak(self, write_adoc) -> None:
        """Test that entries in an included file stay local to it."""
        write_adoc("child.adoc", ":x: child\n\n{x}")
        main = write_adoc("main.adoc", ":x: parent\n\ninclude::child.adoc[]\n\n{x}")
        doc = parse_file(main)
        assert _texts(doc) == ["child", "parent"]
        assert doc.attributes["x"] == "parent"

    def test_attribute_in_target(self, write_adoc) -> None:
        """Test attribute references in the include target."""
        write_adoc("sub/c.adoc", "C")
        main = write_adoc("main.adoc", ":dir: sub\n\ninclude::{dir}/c.adoc[]")
        assert _texts(parse_file(main)) == ["C"]

    def test_includes_disabled(self, write_adoc) -> None:
        """Test that disabled includes consume the directive."""
        write_adoc("child.adoc", "Child")
        main = write_adoc("main.adoc", "Before\n\ninclude::child.adoc[]")
        doc = parse_file(main, options=AsciiDocOptions(parse_includes=False))
        assert _texts(doc) == ["Before"]

    def test_max_include_depth(self, write_adoc, caplog: pytest.LogCaptureFixture) -> None:
        """Test that includes beyond the depth limit are skipped."""
        write_adoc("grandchild.adoc", "Grandchild")
        write_adoc("child.adoc", "Child\n\ninclude::grandchild.adoc[]")
        main = write_adoc("main.adoc", "Main\n\ninclude::child.adoc[]")

        with caplog.at_level(logging.WARNING):
            doc = parse_file(main, options=AsciiDocOptions(max_include_depth=2))

        assert _texts(doc) == ["Main", "Child"]
        assert "Maximum include depth exceeded" in caplog.text

    def test_include_with_latin1_encoding(self, tmp_path: Path) -> None:
        """Test that included bytes in a legacy encoding are decoded."""
        (tmp_path / "legacy.adoc").write_bytes("Caf\xe9 cr\xe8me br\xfbl\xe9e".encode("latin-1"))
        doc = parse("include::legacy.adoc[]", base_path=tmp_path)
        texts = _texts(doc)
        assert len(texts) == 1
        assert texts[0].startswith("Caf")

    def test_parse_file_missing(self, tmp_path: Path) -> None:
        """Test that parsing a missing top-level file raises."""
        with pytest.raises(AdocFileNotFoundError):
            AsciiDocParser().parse_file(tmp_path / "absent.adoc")

    def test_parse_path_input(self, write_adoc) -> None:
        """Test that a Path passed to parse() is read as a file."""
        path = write_adoc("doc.adoc", "From file")
        assert _texts(AsciiDocParser().parse(path)) == ["From file"]

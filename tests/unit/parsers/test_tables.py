#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for table parsing and cell spans."""

import pytest

from adoctree.ast import Table, TableCell, Text
from adoctree.ast.utils import extract_text
from adoctree.parsers import parse
from adoctree.parsers._blocks import split_table_row


def _parse_table(text: str) -> Table:
    table = parse(text).children[0]
    assert isinstance(table, Table)
    return table


@pytest.mark.unit
class TestSplitTableRow:
    """Tests for splitting a row line into cells."""

    def test_simple_cells(self) -> None:
        """Test plain cells with surrounding whitespace."""
        assert split_table_row("| a | b |c") == [({}, "a"), ({}, "b"), ({}, "c")]

    def test_span_as_own_cell(self) -> None:
        """Test a span marker written as a separate cell."""
        assert split_table_row("|2+|Spans two|End") == [({"colspan": "2"}, "Spans two"), ({}, "End")]

    def test_span_before_first_pipe(self) -> None:
        """Test a span marker leading the row."""
        assert split_table_row("2+|wide|x") == [({"colspan": "2"}, "wide"), ({}, "x")]

    def test_span_prefix_inside_cell(self) -> None:
        """Test a span marker prefixing the cell text."""
        assert split_table_row("|2+ wide|n") == [({"colspan": "2"}, "wide"), ({}, "n")]

    def test_rowspan_and_both(self) -> None:
        """Test row spans and combined spans."""
        assert split_table_row("|.2+|tall|2.3+|big") == [
            ({"rowspan": "2"}, "tall"),
            ({"colspan": "2", "rowspan": "3"}, "big"),
        ]

    def test_escaped_pipe(self) -> None:
        """Test that an escaped pipe stays in the cell."""
        assert split_table_row(r"|a \| b|c") == [({}, "a | b"), ({}, "c")]

    def test_trailing_pipe(self) -> None:
        """Test that a trailing pipe adds no empty cell."""
        assert split_table_row("|a|b|") == [({}, "a"), ({}, "b")]

    def test_span_like_last_cell_is_text(self) -> None:
        """Test that a span marker in the last cell is kept as text."""
        assert split_table_row("|a|2+") == [({}, "a"), ({}, "2+")]


@pytest.mark.unit
class TestTables:
    """Tests for delimited tables."""

    def test_header_row_and_span(self) -> None:
        """Test that the first row is a header and spans are recorded."""
        table = _parse_table("|===\n|2+|Spans two|End\n|A|B|C\n|===")
        assert len(table.rows) == 2
        assert table.rows[0].is_header
        assert not table.rows[1].is_header
        first = table.rows[0].cells[0]
        assert first == TableCell(content=[Text(content="Spans two")], attributes={"colspan": "2"})
        assert first.colspan == 2
        assert first.rowspan == 1
        assert [extract_text(cell.content) for cell in table.rows[1].cells] == ["A", "B", "C"]

    def test_noheader_option(self) -> None:
        """Test that %noheader disables the header row."""
        table = _parse_table("[%noheader]\n|===\n|a|b\n|===")
        assert not table.rows[0].is_header
        assert table.attributes == {"options": "noheader"}

    def test_cols_attribute(self) -> None:
        """Test that cols= is kept for renderers."""
        table = _parse_table('[cols="<,^,>",options="header"]\n|===\n|a|b|c\n|===')
        assert table.attributes == {"cols": "<,^,>", "options": "header"}
        assert table.rows[0].is_header

    def test_continuation_line(self) -> None:
        """Test that an unmarked line extends the last cell."""
        table = _parse_table("|===\n|a|b\nmore text\n|===")
        assert table.rows[0].cells[-1].content == [Text(content="b more text")]

    def test_blank_lines_skipped(self) -> None:
        """Test that blank lines inside the table are ignored."""
        table = _parse_table("|===\n|a\n\n|b\n|===")
        assert len(table.rows) == 2

    def test_ragged_rows_kept(self) -> None:
        """Test that rows may have different cell counts."""
        table = _parse_table("|===\n|a|b|c\n|d\n|===")
        assert [len(row.cells) for row in table.rows] == [3, 1]

    def test_inline_markup_in_cells(self) -> None:
        """Test that cell text is tokenized."""
        table = _parse_table("|===\n|*bold*|`code`\n|===")
        assert extract_text(table.rows[0].cells[0].content) == "bold"

    def test_empty_table(self) -> None:
        """Test a table with no rows."""
        assert _parse_table("|===\n|===").rows == []

    def test_invalid_span_value_defaults_to_one(self) -> None:
        """Test span properties with unusable attribute values."""
        cell = TableCell(attributes={"colspan": "x", "rowspan": "0"})
        assert cell.colspan == 1
        assert cell.rowspan == 1

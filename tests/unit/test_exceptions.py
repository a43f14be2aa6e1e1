#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the exception hierarchy and renderer lookup."""

from pathlib import Path

import pytest

from adoctree.ast import Paragraph
from adoctree.exceptions import (
    AdocTreeError,
    FileAccessError,
    FileError,
    FileNotFoundError,
    FormatError,
    InvalidOptionsError,
    OutputWriteError,
    RenderingError,
    ValidationError,
)
from adoctree.options import HtmlRendererOptions, MarkdownRendererOptions
from adoctree.parsers import parse
from adoctree.renderers import HtmlRenderer, MarkdownRenderer, get_renderer, render_document


class _BrokenRenderer(MarkdownRenderer):
    """Renderer that fails on every paragraph."""

    def visit_paragraph(self, node: Paragraph) -> None:
        raise ValueError("broken paragraph")


@pytest.mark.unit
class TestExceptions:
    """Tests for exception messages and hierarchy."""

    def test_base_error_keeps_original(self) -> None:
        """Test the message and chained error on the base class."""
        cause = KeyError("x")
        error = AdocTreeError("failed", original_error=cause)
        assert error.message == "failed"
        assert error.original_error is cause
        assert str(error) == "failed"

    def test_validation_error_fields(self) -> None:
        """Test parameter details on validation errors."""
        error = ValidationError("bad value", parameter_name="depth", parameter_value=-1)
        assert error.parameter_name == "depth"
        assert error.parameter_value == -1
        assert isinstance(error, AdocTreeError)

    def test_invalid_options_message(self) -> None:
        """Test the generated message for a wrong options class."""
        error = InvalidOptionsError("HtmlRenderer", HtmlRendererOptions, MarkdownRendererOptions)
        assert str(error) == (
            "HtmlRenderer expected options of type 'HtmlRendererOptions' but received 'MarkdownRendererOptions'."
        )
        assert isinstance(error, ValidationError)
        assert error.received_type is MarkdownRendererOptions

    def test_file_errors(self) -> None:
        """Test file error messages and paths."""
        missing = FileNotFoundError("a.adoc")
        assert str(missing) == "File not found: a.adoc"
        assert missing.file_path == "a.adoc"
        assert str(FileAccessError("b.adoc")) == "Cannot access file: b.adoc"
        assert isinstance(missing, FileError)

    def test_file_not_found_is_not_builtin(self) -> None:
        """Test that the package error is distinct from the builtin one."""
        assert not issubclass(FileNotFoundError, OSError)

    def test_format_error_lists_formats(self) -> None:
        """Test the supported formats in the message."""
        error = FormatError("rtf", ["html", "latex"])
        assert str(error) == "Unsupported output format: 'rtf'. Supported formats: html, latex"
        assert error.format_type == "rtf"

    def test_output_write_error(self) -> None:
        """Test the stage and message of output write errors."""
        error = OutputWriteError("out.html")
        assert isinstance(error, RenderingError)
        assert error.rendering_stage == "file_write"
        assert str(error) == "Failed to write output file: out.html"


@pytest.mark.unit
class TestRendererLookup:
    """Tests for renderer lookup and failure wrapping."""

    @pytest.mark.parametrize("name,expected", [("html", HtmlRenderer), ("MARKDOWN", MarkdownRenderer)])
    def test_get_renderer(self, name: str, expected: type) -> None:
        """Test lookup by format name."""
        assert get_renderer(name) is expected

    def test_unknown_format(self) -> None:
        """Test that an unknown format raises FormatError."""
        with pytest.raises(FormatError, match="rtf"):
            get_renderer("rtf")

    def test_render_document_wraps_failures(self) -> None:
        """Test that renderer failures surface as RenderingError."""
        with pytest.raises(RenderingError) as exc_info:
            render_document(_BrokenRenderer(), parse("text"))
        assert exc_info.value.rendering_stage == "render"
        assert isinstance(exc_info.value.original_error, ValueError)

    def test_render_to_unwritable_path(self, tmp_path: Path) -> None:
        """Test that write failures raise OutputWriteError."""
        target = tmp_path / "missing-dir" / "out.md"
        with pytest.raises(OutputWriteError):
            MarkdownRenderer().render(parse("text"), target)

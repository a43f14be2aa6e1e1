#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adoctree/parsers/asciidoc.py
"""AsciiDoc to AST parser.

This module is the document assembler: it prepares the parser state (line
buffer, attribute table seeded with the built-in attributes, base path and
include stack), drives the block parser over it and wraps the resulting
blocks in a Document.

Parsing text never raises. Malformed or unknown syntax degrades to plain
paragraphs, and include problems are logged and skipped.

"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Optional, Union

from adoctree.ast.nodes import Document, Node
from adoctree.options.asciidoc import AsciiDocOptions
from adoctree.parsers._attributes import new_attribute_table
from adoctree.parsers._blocks import BlockParser
from adoctree.parsers._includes import IncludeResolver
from adoctree.parsers._inline import InlineTokenizer
from adoctree.parsers._state import ParserState
from adoctree.parsers.base import BaseParser, ParserInput
from adoctree.utils.encoding import read_text_with_encoding_detection
from adoctree.utils.text import split_lines

logger = logging.getLogger(__name__)


class AsciiDocParser(BaseParser):
    r"""Convert AsciiDoc text to an AST Document.

    Parameters
    ----------
    options : AsciiDocOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Basic parsing:

        >>> parser = AsciiDocParser()
        >>> doc = parser.parse("= Title\n\nThis is *bold*.")

    With options:

        >>> options = AsciiDocOptions(parse_includes=False, attribute_missing_policy="blank")
        >>> parser = AsciiDocParser(options)
        >>> doc = parser.parse(asciidoc_text)

    """

    def __init__(self, options: AsciiDocOptions | None = None):
        """Initialize the AsciiDoc parser."""
        BaseParser._validate_options_type(options, AsciiDocOptions, "asciidoc")
        options = options or AsciiDocOptions()
        super().__init__(options)
        self.options: AsciiDocOptions = options

        self.inline = InlineTokenizer(
            support_unconstrained_formatting=options.support_unconstrained_formatting,
            attribute_missing_policy=options.attribute_missing_policy,
            honor_hard_breaks=options.honor_hard_breaks,
        )
        self.includes = IncludeResolver(self._assemble, options)
        self.blocks = BlockParser(self.inline, self.includes, options)

    def parse(
        self,
        input_data: ParserInput,
        base_path: Union[str, Path, None] = None,
        attributes: Optional[Mapping[str, str]] = None,
    ) -> Document:
        """Parse AsciiDoc input into an AST Document.

        Parameters
        ----------
        input_data : str, Path, bytes or file-like object
            AsciiDoc input. A ``str`` is always document text; a ``Path`` is
            parsed like ``parse_file``.
        base_path : str, Path or None, default None
            Directory for resolving relative includes; the current working
            directory when omitted
        attributes : Mapping of str to str, optional
            Attributes set after the built-ins and before document entries

        Returns
        -------
        Document
            AST document node

        Raises
        ------
        FileNotFoundError, FileAccessError
            Only when ``input_data`` is a Path that cannot be read

        """
        if isinstance(input_data, Path):
            return self.parse_file(input_data, attributes=attributes)

        content = self._load_text_content(input_data)
        state = ParserState(
            lines=split_lines(content),
            attributes=new_attribute_table(attributes),
            base_path=Path(base_path) if base_path is not None else Path("."),
        )
        return self._assemble(state)

    def parse_file(self, path: Union[str, Path], attributes: Optional[Mapping[str, str]] = None) -> Document:
        """Parse an AsciiDoc file.

        Relative includes resolve against the file's directory, and the file
        itself is on the include stack so a self-include is detected at once.

        Raises
        ------
        FileNotFoundError
            If the file does not exist
        FileAccessError
            If the file cannot be read

        """
        path = Path(path)
        content = read_text_with_encoding_detection(self._read_file_bytes(path))
        resolved = path.resolve()
        logger.debug("Parsing file %s", resolved)
        state = ParserState(
            lines=split_lines(content),
            attributes=new_attribute_table(attributes),
            base_path=resolved.parent,
            include_stack=[resolved],
        )
        return self._assemble(state)

    def parse_inline(self, text: str, attributes: Optional[Mapping[str, str]] = None) -> list[Node]:
        """Tokenize a single run of inline text against the built-in attribute table."""
        return self.inline.tokenize(text, new_attribute_table(attributes))

    def _assemble(self, state: ParserState) -> Document:
        children = self.blocks.parse_sequence(state)
        return Document(children=children, attributes=dict(state.attributes))


def parse(
    text: ParserInput,
    base_path: Union[str, Path, None] = None,
    *,
    attributes: Optional[Mapping[str, str]] = None,
    options: Optional[AsciiDocOptions] = None,
) -> Document:
    """Parse AsciiDoc text into a Document.

    Parameters
    ----------
    text : str, bytes or file-like object
        Document to parse
    base_path : str, Path or None, default None
        Directory for resolving relative includes
    attributes : Mapping of str to str, optional
        Attributes applied before the document's own attribute entries
    options : AsciiDocOptions, optional
        Parser options

    Returns
    -------
    Document
        Parsed document; never raises for text input

    Examples
    --------
    >>> doc = parse("= Title")
    >>> doc.children[0].id
    'title'

    """
    return AsciiDocParser(options).parse(text, base_path=base_path, attributes=attributes)


def parse_file(
    path: Union[str, Path],
    *,
    attributes: Optional[Mapping[str, str]] = None,
    options: Optional[AsciiDocOptions] = None,
) -> Document:
    """Parse the AsciiDoc file at ``path``."""
    return AsciiDocParser(options).parse_file(path, attributes=attributes)


def parse_inline(text: str, attributes: Optional[Mapping[str, str]] = None) -> list[Node]:
    """Substitute attribute references in ``text`` and tokenize it into inline nodes.

    >>> parse_inline("*bold _and italic_*")
    [Bold(content=[Text(content='bold '), Italic(content=[Text(content='and italic')])])]

    """
    return AsciiDocParser().parse_inline(text, attributes)

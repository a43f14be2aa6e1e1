#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adoctree/parsers/__init__.py
"""AsciiDoc parsing package.

The parser is split into the document assembler (``asciidoc``), the block
parser (``_blocks``), the inline tokenizer (``_inline``), the include
resolver (``_includes``) and attribute handling (``_attributes``).
"""

from adoctree.parsers.asciidoc import AsciiDocParser, parse, parse_file, parse_inline
from adoctree.parsers.base import BaseParser

__all__ = ["AsciiDocParser", "BaseParser", "parse", "parse_file", "parse_inline"]

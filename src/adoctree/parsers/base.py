#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adoctree/parsers/base.py
"""Base class for document parsers.

The BaseParser validates option objects and normalises the supported input
types into text before a concrete parser builds the AST.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from adoctree.ast import Document
from adoctree.exceptions import FileAccessError, FileNotFoundError, InvalidOptionsError
from adoctree.options.base import BaseParserOptions
from adoctree.utils.encoding import read_text_with_encoding_detection

logger = logging.getLogger(__name__)

ParserInput = Union[str, Path, IO[bytes], IO[str], bytes]


class BaseParser(ABC):
    """Abstract base class for document parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Notes
    -----
    Supported input types:
    - str: document text (never interpreted as a path)
    - Path: file to read
    - bytes: raw document bytes
    - IO[bytes] or IO[str]: readable file-like object

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                component_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: ParserInput) -> Document:
        """Parse the input document into an AST.

        Parameters
        ----------
        input_data : str, Path, bytes or file-like object
            Document to parse

        Returns
        -------
        Document
            Root node of the parsed tree

        """

    @staticmethod
    def _read_file_bytes(path: Path) -> bytes:
        """Read a file, translating OS errors into library file errors.

        Raises
        ------
        FileNotFoundError
            If the path does not exist
        FileAccessError
            If the path is not a regular file or cannot be read

        """
        if not path.exists():
            raise FileNotFoundError(str(path))
        if not path.is_file():
            raise FileAccessError(str(path), message=f"Not a regular file: {path}")
        try:
            return path.read_bytes()
        except OSError as e:
            raise FileAccessError(str(path), original_error=e) from e

    @classmethod
    def _load_text_content(cls, input_data: ParserInput) -> str:
        """Load content from the supported input types with encoding detection."""
        if isinstance(input_data, str):
            return input_data
        if isinstance(input_data, bytes):
            return read_text_with_encoding_detection(input_data)
        if isinstance(input_data, Path):
            return read_text_with_encoding_detection(cls._read_file_bytes(input_data))

        content = input_data.read()
        if isinstance(content, bytes):
            return read_text_with_encoding_detection(content)
        return content

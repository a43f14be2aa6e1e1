#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adoctree/cli.py
"""Command-line interface for adoctree.

Parses an AsciiDoc file (or standard input) and writes it as HTML, LaTeX,
Markdown or the JSON form of the syntax tree.

Examples
--------
Render to standalone HTML::

    $ adoctree manual.adoc -t html --standalone -o manual.html

Read from standard input and override an attribute::

    $ cat notes.adoc | adoctree - -t markdown -a version=2.1

Use rich formatting::

    $ adoctree notes.adoc -t latex --rich

"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.syntax import Syntax

from adoctree import __version__
from adoctree.api import render
from adoctree.ast.nodes import Document
from adoctree.constants import (
    DEFAULT_LOG_LEVEL,
    ENV_LOG_LEVEL,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_RENDERING_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
)
from adoctree.exceptions import (
    AdocTreeError,
    FileError,
    FormatError,
    OutputWriteError,
    RenderingError,
    ValidationError,
)
from adoctree.options.asciidoc import AsciiDocOptions
from adoctree.options.base import BaseRendererOptions
from adoctree.options.html import HtmlRendererOptions
from adoctree.options.latex import LatexRendererOptions
from adoctree.parsers.asciidoc import AsciiDocParser
from adoctree.utils.io_utils import write_content

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ["html", "latex", "markdown", "json"]

_RICH_LEXERS = {"html": "html", "latex": "latex", "markdown": "markdown", "json": "json"}

_LOG_FORMAT = "%(levelname)s: %(message)s"
_TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``adoctree`` command."""
    parser = argparse.ArgumentParser(
        prog="adoctree",
        description="Parse AsciiDoc into a syntax tree and render it as HTML, LaTeX, Markdown or JSON.",
    )
    parser.add_argument("input", help="AsciiDoc file to parse, or '-' for standard input")
    parser.add_argument(
        "-t",
        "--to",
        dest="format",
        choices=OUTPUT_FORMATS,
        default="html",
        help="Output format (default: html)",
    )
    parser.add_argument("-o", "--out", dest="output", help="Write output to this file instead of standard output")
    parser.add_argument(
        "--standalone",
        action="store_true",
        help="Emit a complete document (HTML page or LaTeX preamble)",
    )
    parser.add_argument(
        "-a",
        "--attribute",
        dest="attributes",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Set a document attribute before parsing; may be repeated",
    )
    parser.add_argument("--base-path", help="Directory for resolving includes when reading standard input")
    parser.add_argument("--no-includes", action="store_true", help="Do not expand include:: directives")
    parser.add_argument("--rich", action="store_true", help="Pretty-print output with syntax highlighting")
    parser.add_argument(
        "--log-level",
        default=os.environ.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL),
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help=f"Logging level (default: ${ENV_LOG_LEVEL} or {DEFAULT_LOG_LEVEL})",
    )
    parser.add_argument("--log-file", help="Also write log messages to this file")
    parser.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_attribute_args(values: list[str]) -> dict[str, str]:
    """Turn ``NAME=VALUE`` arguments into an attribute mapping.

    A bare ``NAME`` sets the attribute to an empty string.

    Raises
    ------
    ValidationError
        If an argument has an empty name

    """
    attributes: dict[str, str] = {}
    for value in values:
        name, _sep, attribute_value = value.partition("=")
        name = name.strip()
        if not name:
            raise ValidationError(
                f"Invalid attribute argument: {value!r}", parameter_name="attribute", parameter_value=value
            )
        attributes[name] = attribute_value
    return attributes


def _renderer_options(format_name: str, standalone: bool) -> Optional[BaseRendererOptions]:
    if format_name == "html":
        return HtmlRendererOptions(standalone=standalone)
    if format_name == "latex":
        return LatexRendererOptions(include_preamble=standalone)
    return None


def _parse_input(parsed_args: argparse.Namespace, attributes: dict[str, str]) -> Document:
    parser = AsciiDocParser(AsciiDocOptions(parse_includes=not parsed_args.no_includes))
    if parsed_args.input == "-":
        return parser.parse(sys.stdin.buffer.read(), base_path=parsed_args.base_path, attributes=attributes)
    return parser.parse_file(Path(parsed_args.input), attributes=attributes)


def _print_rich(text: str, format_name: str) -> None:
    console = Console()
    console.print(Syntax(text, _RICH_LEXERS[format_name], theme="monokai", word_wrap=True))


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code."""
    if isinstance(exception, (ValidationError, FormatError)):
        return EXIT_VALIDATION_ERROR
    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR
    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR
    return EXIT_ERROR


def configure_logging(
    log_level: str = DEFAULT_LOG_LEVEL,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Attach the command line's handlers to the ``adoctree`` logger.

    Handlers from an earlier call are closed and replaced, so repeated runs
    in one process do not duplicate output. The root logger is left alone.

    Parameters
    ----------
    log_level : str, default "WARNING"
        Level name; unknown names fall back to WARNING
    log_file : str, optional
        File that receives the same messages as standard error
    trace_mode : bool, default False
        Force DEBUG and add timestamps and logger names

    Returns
    -------
    logging.Logger
        The package logger

    """
    if trace_mode:
        level = logging.DEBUG
        formatter = logging.Formatter(_TRACE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    else:
        level = getattr(logging, log_level.upper(), None)
        if not isinstance(level, int):
            level = logging.WARNING
        formatter = logging.Formatter(_LOG_FORMAT)

    package_logger = logging.getLogger("adoctree")
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as e:
            logger.warning("Could not open log file %s: %s", log_file, e)
        else:
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)
    return package_logger


def main(args: list[str] | None = None) -> int:
    """Run the command line.

    Parameters
    ----------
    args : list of str, optional
        Arguments to parse; ``sys.argv[1:]`` when omitted

    Returns
    -------
    int
        Process exit code

    """
    parsed_args = create_parser().parse_args(args)
    configure_logging(parsed_args.log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    try:
        attributes = parse_attribute_args(parsed_args.attributes)
        document = _parse_input(parsed_args, attributes)
        output = render(document, parsed_args.format, _renderer_options(parsed_args.format, parsed_args.standalone))

        if parsed_args.output:
            try:
                write_content(output, Path(parsed_args.output))
            except OSError as e:
                raise OutputWriteError(parsed_args.output, original_error=e) from e
            logger.info("Wrote %s output to %s", parsed_args.format, parsed_args.output)
        elif parsed_args.rich:
            _print_rich(output, parsed_args.format)
        else:
            sys.stdout.write(output)
    except AdocTreeError as e:
        print(f"Error: {e}", file=sys.stderr)
        logger.debug("Command failed", exc_info=True)
        return get_exit_code_for_exception(e)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR

    return EXIT_SUCCESS

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adoctree/utils/io_utils.py
"""Output helpers for writing rendered text."""

from __future__ import annotations

import io
from pathlib import Path
from typing import IO, Union, cast


def write_content(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
    """Write rendered text to a path or a text/binary stream.

    Parameters
    ----------
    text : str
        Text to write
    output : str, Path, IO[bytes] or IO[str]
        Destination. Paths are written as UTF-8; binary streams receive
        UTF-8 encoded bytes.

    Raises
    ------
    TypeError
        If output is neither a path nor a writable object
    OSError
        If the destination cannot be written

    """
    if isinstance(output, (str, Path)):
        Path(output).write_text(text, encoding="utf-8")
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output).__name__}")

    if isinstance(output, io.TextIOBase):
        is_binary_mode = False
    elif isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        is_binary_mode = True
    else:
        mode = getattr(output, "mode", "")
        is_binary_mode = isinstance(mode, str) and "b" in mode

    if is_binary_mode:
        cast(IO[bytes], output).write(text.encode("utf-8"))
    else:
        cast(IO[str], output).write(text)

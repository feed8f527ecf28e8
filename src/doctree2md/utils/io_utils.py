#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doctree2md/utils/io_utils.py
"""I/O utilities for handling output destinations."""

from __future__ import annotations

import io
from io import BytesIO, StringIO
from typing import IO, Any


def is_binary_stream(output: IO[bytes] | IO[str] | Any) -> bool:
    """Decide whether a writable file-like object expects bytes.

    Detection strategies, most reliable first: concrete ``BytesIO`` /
    ``StringIO`` types, the ``io`` base classes, then the ``mode``
    attribute of file objects. Unknown objects are treated as text streams.

    Parameters
    ----------
    output : IO[bytes] or IO[str]
        Writable file-like object

    Returns
    -------
    bool
        True if the stream must receive bytes

    """
    if isinstance(output, BytesIO):
        return True
    if isinstance(output, StringIO):
        return False
    if isinstance(output, io.TextIOBase):
        return False
    if isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        return True
    mode = getattr(output, "mode", "")
    return isinstance(mode, str) and "b" in mode


__all__ = ["is_binary_stream"]

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doctree2md/renderers/sink.py
"""Append-only output sink for rendered Markdown."""

from __future__ import annotations

from typing import IO, Union, cast

from doctree2md.utils.io_utils import is_binary_stream


class OutputSink:
    """Append-only text destination.

    Output is written to the wrapped stream as soon as it is produced; there
    is no buffering or rollback, so a failure part-way through leaves a valid
    prefix. Binary streams receive UTF-8 encoded bytes.

    Parameters
    ----------
    stream : IO[str] or IO[bytes]
        Writable text or binary stream

    """

    def __init__(self, stream: Union[IO[str], IO[bytes]]):
        """Wrap a writable stream."""
        self._stream = stream
        self._binary = is_binary_stream(stream)
        self.chars_written = 0

    def write(self, text: str) -> None:
        """Append text verbatim."""
        if not text:
            return
        if self._binary:
            cast(IO[bytes], self._stream).write(text.encode("utf-8"))
        else:
            cast(IO[str], self._stream).write(text)
        self.chars_written += len(text)

    def writeline(self, text: str = "") -> None:
        """Append text followed by a line break."""
        self.write(text + "\n")

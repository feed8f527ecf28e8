#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doctree2md/parsers/base.py
"""Base class for document parsers.

This module defines the abstract base class that input parsers inherit
from. A parser turns a source document into the read-only node tree the
renderers consume.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from doctree2md.ast.nodes import Node
from doctree2md.exceptions import FileNotFoundError, InvalidOptionsError
from doctree2md.options.base import BaseParserOptions
from doctree2md.utils.encoding import (
    normalize_stream_to_bytes,
    normalize_stream_to_text,
    read_text_with_encoding_detection,
)

# Linux caps path components at 255 characters; longer strings are content
_MAX_PATH_LENGTH = 260

InputData = Union[str, Path, IO[bytes], IO[str], bytes]


class BaseParser(ABC):
    """Abstract base class for all document parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options = options

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
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: InputData) -> Node:
        """Parse the input document into a node tree.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str] or bytes
            Input to parse. Can be:
            - File path (str or Path)
            - File-like object in binary or text mode
            - Raw bytes
            - Document content as a string

        Returns
        -------
        Node
            Root node of the parsed tree (normally of kind ``document``)

        Raises
        ------
        ParsingError
            If parsing fails

        """

    @staticmethod
    def _as_existing_path(input_data: InputData) -> Path | None:
        """Return the input as a file path when it names one, else None.

        Raises
        ------
        FileNotFoundError
            If a ``Path`` object is given that does not exist

        """
        if isinstance(input_data, Path):
            if not input_data.is_file():
                raise FileNotFoundError(str(input_data))
            return input_data
        if isinstance(input_data, str) and len(input_data) <= _MAX_PATH_LENGTH and "\n" not in input_data:
            try:
                path = Path(input_data)
                if path.is_file():
                    return path
            except OSError:
                pass
        return None

    @classmethod
    def _load_text_content(cls, input_data: InputData) -> str:
        """Load content as text, detecting the encoding of byte input."""
        if isinstance(input_data, bytes):
            return read_text_with_encoding_detection(input_data)
        path = cls._as_existing_path(input_data)
        if path is not None:
            return read_text_with_encoding_detection(path.read_bytes())
        if isinstance(input_data, str):
            return input_data
        input_data.seek(0)
        return normalize_stream_to_text(input_data)

    @classmethod
    def _load_bytes_content(cls, input_data: InputData) -> bytes:
        """Load content as bytes; string content is encoded as UTF-8."""
        if isinstance(input_data, bytes):
            return input_data
        path = cls._as_existing_path(input_data)
        if path is not None:
            return path.read_bytes()
        if isinstance(input_data, str):
            return input_data.encode("utf-8")
        input_data.seek(0)
        return normalize_stream_to_bytes(input_data)

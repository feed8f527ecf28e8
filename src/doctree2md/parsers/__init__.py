#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doctree2md/parsers/__init__.py
"""Input parsers producing node trees, and format detection."""

from __future__ import annotations

import logging
from pathlib import Path

from doctree2md.ast.nodes import Node
from doctree2md.constants import RST_EXTENSIONS, SUPPORTED_SOURCE_FORMATS, XML_EXTENSIONS, SourceFormat
from doctree2md.exceptions import FileNotFoundError, FormatError
from doctree2md.options.base import BaseParserOptions
from doctree2md.parsers.base import BaseParser, InputData
from doctree2md.parsers.rst import RestructuredTextParser
from doctree2md.parsers.xml import DoctreeXmlParser

logger = logging.getLogger(__name__)

_XML_SIGNATURES = ("<?xml", "<!DOCTYPE", "<document")


def _sniff_format(head: str) -> str:
    return "xml" if head.lstrip().startswith(_XML_SIGNATURES) else "rst"


def detect_source_format(source: InputData) -> str:
    """Guess the format of a source document.

    File paths are classified by extension and fall back to sniffing the
    first bytes. Raw content counts as XML when it opens with an XML
    declaration, a doctype or a ``<document>`` element; anything else is
    read as reStructuredText.

    Raises
    ------
    FileNotFoundError
        If the source looks like a path with a known extension but does not exist

    """
    if isinstance(source, (str, Path)):
        candidate = Path(source) if isinstance(source, Path) or "\n" not in source else None
        if candidate is not None:
            suffix = candidate.suffix.lower()
            try:
                is_file = candidate.is_file()
            except OSError:
                is_file = False
            if is_file:
                if suffix in XML_EXTENSIONS:
                    return "xml"
                if suffix in RST_EXTENSIONS:
                    return "rst"
                with open(candidate, "rb") as f:
                    return _sniff_format(f.read(256).decode("utf-8", errors="ignore"))
            if isinstance(source, Path) or suffix in XML_EXTENSIONS | RST_EXTENSIONS:
                raise FileNotFoundError(str(source))
        return _sniff_format(str(source)[:256])

    if isinstance(source, bytes):
        return _sniff_format(source[:256].decode("utf-8", errors="ignore"))

    position = source.tell()
    head = source.read(256)
    source.seek(position)
    if isinstance(head, bytes):
        head = head.decode("utf-8", errors="ignore")
    return _sniff_format(head)


def get_parser(source_format: str, options: BaseParserOptions | None = None) -> BaseParser:
    """Return a parser instance for a format name.

    Raises
    ------
    FormatError
        If the format is not supported

    """
    if source_format == "xml":
        return DoctreeXmlParser(options)  # type: ignore[arg-type]
    if source_format == "rst":
        return RestructuredTextParser(options)  # type: ignore[arg-type]
    raise FormatError(format_type=source_format, supported_formats=SUPPORTED_SOURCE_FORMATS)


def parse_document(
    source: InputData, source_format: SourceFormat = "auto", options: BaseParserOptions | None = None
) -> Node:
    """Parse a source document into a node tree.

    Parameters
    ----------
    source : str, Path, IO[bytes], IO[str] or bytes
        Path to the document, its content, or a readable stream
    source_format : {"auto", "xml", "rst"}, default "auto"
        Input format; ``"auto"`` detects it from the extension or content
    options : BaseParserOptions or None, default None
        Options for the selected parser

    Returns
    -------
    Node
        Root node of the parsed document

    """
    if source_format == "auto":
        source_format = detect_source_format(source)
        logger.debug("Detected source format: %s", source_format)
    return get_parser(source_format, options).parse(source)


__all__ = [
    "BaseParser",
    "DoctreeXmlParser",
    "RestructuredTextParser",
    "detect_source_format",
    "get_parser",
    "parse_document",
]

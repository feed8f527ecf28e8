#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_source_detection.py
"""Unit tests for source format detection and parser selection."""

from io import BytesIO
from pathlib import Path

import pytest

from doctree2md.exceptions import FileNotFoundError, FormatError
from doctree2md.parsers import (
    DoctreeXmlParser,
    RestructuredTextParser,
    detect_source_format,
    get_parser,
    parse_document,
)


@pytest.mark.unit
class TestDetectSourceFormat:
    """Tests for detect_source_format()."""

    @pytest.mark.parametrize(
        "content,expected",
        [
            ('<?xml version="1.0"?>\n<document/>', "xml"),
            ("<!DOCTYPE document>\n<document/>", "xml"),
            ("  <document><title>x</title></document>", "xml"),
            ("Title\n=====\n", "rst"),
            ("plain words", "rst"),
        ],
    )
    def test_content_sniffing(self, content, expected):
        """Content is classified by its opening."""
        assert detect_source_format(content) == expected

    def test_bytes(self):
        """Bytes are sniffed too."""
        assert detect_source_format(b"<document/>") == "xml"

    def test_stream_position_restored(self):
        """Sniffing a stream does not consume it."""
        stream = BytesIO(b"<document/>")
        assert detect_source_format(stream) == "xml"
        assert stream.tell() == 0

    def test_extension(self, tmp_path: Path):
        """Existing files are classified by extension first."""
        rst_path = tmp_path / "doc.rst"
        rst_path.write_text("<document/>", encoding="utf-8")
        assert detect_source_format(rst_path) == "rst"

    def test_unknown_extension_sniffed(self, tmp_path: Path):
        """Files with other extensions are sniffed."""
        path = tmp_path / "doc.dat"
        path.write_text("<document/>", encoding="utf-8")
        assert detect_source_format(str(path)) == "xml"

    def test_missing_file(self, tmp_path: Path):
        """Missing files with a known extension are reported."""
        with pytest.raises(FileNotFoundError):
            detect_source_format(str(tmp_path / "nope.xml"))


@pytest.mark.unit
class TestGetParser:
    """Tests for parser selection."""

    def test_known_formats(self):
        """Each supported format maps to its parser."""
        assert isinstance(get_parser("xml"), DoctreeXmlParser)
        assert isinstance(get_parser("rst"), RestructuredTextParser)

    def test_unknown_format(self):
        """Unknown formats raise FormatError listing the supported ones."""
        with pytest.raises(FormatError) as exc_info:
            get_parser("pdf")
        assert "xml" in str(exc_info.value)

    def test_parse_document_auto(self):
        """Auto detection picks the right parser."""
        assert parse_document("<document><title>x</title></document>").elements()[0].kind == "title"
        assert parse_document("Just a paragraph.\n").elements()[0].kind == "paragraph"

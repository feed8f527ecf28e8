#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_xml_parser.py
"""Unit tests for the Docutils XML parser.

Tests cover:
- Building node trees from strings, bytes, files and streams
- Whitespace handling
- Error handling for malformed and unsafe XML

"""

from io import BytesIO, StringIO
from pathlib import Path

import pytest

from doctree2md.exceptions import FileNotFoundError, InvalidOptionsError, ParsingError
from doctree2md.options import RstParserOptions, XmlParserOptions
from doctree2md.parsers.xml import DoctreeXmlParser

PRETTY_XML = """<document source="x.rst">
    <title>Hello</title>
    <paragraph>See <literal>x</literal> now.</paragraph>
</document>
"""


@pytest.mark.unit
class TestBasicParsing:
    """Tests for building the node tree."""

    def test_root_and_children(self):
        """Elements keep their tag names as kinds, in document order."""
        doc = DoctreeXmlParser().parse(PRETTY_XML)
        assert doc.kind == "document"
        assert [child.kind for child in doc.elements()] == ["title", "paragraph"]

    def test_attributes(self):
        """Attributes are kept as strings."""
        doc = DoctreeXmlParser().parse(PRETTY_XML)
        assert doc.get("source") == "x.rst"

    def test_mixed_content_order(self):
        """Text and elements interleave in document order."""
        paragraph = DoctreeXmlParser().parse(PRETTY_XML).elements()[1]
        assert paragraph.text == "See "
        assert [child.kind for child in paragraph.children] == ["#text", "literal", "#text"]
        assert paragraph.text_content() == "See x now."

    def test_indentation_dropped(self):
        """Pretty-printing whitespace between elements does not become text."""
        doc = DoctreeXmlParser().parse(PRETTY_XML)
        assert all(not child.is_text for child in doc.children)

    def test_indentation_kept_on_request(self):
        """Indentation text can be kept."""
        doc = DoctreeXmlParser(XmlParserOptions(keep_whitespace_text=True)).parse(PRETTY_XML)
        assert any(child.is_text for child in doc.children)

    def test_inline_spaces_kept(self):
        """Single spaces between inline elements are content, not indentation."""
        doc = DoctreeXmlParser().parse("<document><paragraph><strong>a</strong> <emphasis>b</emphasis></paragraph></document>")
        assert doc.elements()[0].text_content() == "a b"

    def test_literal_block_whitespace_preserved(self):
        """Whitespace inside literal blocks is significant."""
        xml = '<document><literal_block xml:space="preserve">\n    \n</literal_block></document>'
        block = DoctreeXmlParser().parse(xml).elements()[0]
        assert block.text == "\n    \n"
        assert block.get("xml:space") == "preserve"

    def test_bytes_input(self):
        """Byte content is parsed directly."""
        doc = DoctreeXmlParser().parse('<?xml version="1.0" encoding="utf-8"?><document><title>Ünïcode</title></document>'.encode())
        assert doc.elements()[0].text == "Ünïcode"

    def test_file_input(self, tmp_path: Path):
        """Paths given as str or Path are read from disk."""
        path = tmp_path / "doc.xml"
        path.write_text(PRETTY_XML, encoding="utf-8")
        assert DoctreeXmlParser().parse(path).kind == "document"
        assert DoctreeXmlParser().parse(str(path)).kind == "document"

    @pytest.mark.parametrize("stream", [BytesIO(PRETTY_XML.encode("utf-8")), StringIO(PRETTY_XML)])
    def test_stream_input(self, stream):
        """Binary and text streams are accepted."""
        assert DoctreeXmlParser().parse(stream).kind == "document"


@pytest.mark.unit
class TestErrors:
    """Tests for parser failures."""

    def test_malformed_xml(self):
        """Malformed XML raises ParsingError."""
        with pytest.raises(ParsingError) as exc_info:
            DoctreeXmlParser().parse("<document><title>unclosed</document>")
        assert exc_info.value.parsing_stage == "xml"

    def test_entities_refused(self):
        """Entity declarations are refused."""
        xml = '<?xml version="1.0"?><!DOCTYPE d [<!ENTITY a "boom">]><document>&a;</document>'
        with pytest.raises(ParsingError):
            DoctreeXmlParser().parse(xml)

    def test_missing_path(self, tmp_path: Path):
        """A Path that does not exist raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            DoctreeXmlParser().parse(tmp_path / "missing.xml")

    def test_wrong_options_type(self):
        """Options for another parser are rejected."""
        with pytest.raises(InvalidOptionsError):
            DoctreeXmlParser(RstParserOptions())  # type: ignore[arg-type]

    def test_unexpected_root_warns(self, caplog):
        """A root other than ``document`` is parsed with a warning."""
        doc = DoctreeXmlParser().parse("<section><title>x</title></section>")
        assert doc.kind == "section"
        assert any("section" in record.getMessage() for record in caplog.records)

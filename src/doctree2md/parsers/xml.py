#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doctree2md/parsers/xml.py
"""Docutils XML to node tree parser.

Docutils can serialize any document it reads as XML (``rst2xml`` or
``docutils --writer=xml``). This parser reads that serialization with
defusedxml and rebuilds the tree as ``Node`` objects, keeping character
data as text nodes in document order.

"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Union

import defusedxml.ElementTree as ET
from defusedxml import DefusedXmlException

from doctree2md.ast.nodes import Node, text
from doctree2md.exceptions import ParsingError
from doctree2md.options.parsers import XmlParserOptions
from doctree2md.parsers.base import BaseParser, InputData
from doctree2md.utils.decorators import debug_timer

logger = logging.getLogger(__name__)

_XML_NAMESPACE = "{http://www.w3.org/XML/1998/namespace}"

# Elements whose character data is significant down to the last space
_PRESERVE_SPACE_KINDS = frozenset({"literal_block", "doctest_block", "line_block", "raw", "comment"})


class DoctreeXmlParser(BaseParser):
    """Convert Docutils XML into a node tree.

    Parameters
    ----------
    options : XmlParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
        >>> parser = DoctreeXmlParser()
        >>> doc = parser.parse("<document><title>Hello</title></document>")
        >>> doc.elements()[0].text
        'Hello'

    """

    def __init__(self, options: XmlParserOptions | None = None):
        """Initialize the XML parser with options."""
        BaseParser._validate_options_type(options, XmlParserOptions, "xml")
        options = options or XmlParserOptions()
        super().__init__(options)
        self.options: XmlParserOptions = options

    def parse(self, input_data: InputData) -> Node:
        """Parse Docutils XML into a node tree.

        Raises
        ------
        FileNotFoundError
            If a ``Path`` input does not exist
        ParsingError
            If the XML is malformed or uses forbidden constructs (entities)

        """
        source: Union[str, bytes]
        if isinstance(input_data, str) and self._as_existing_path(input_data) is None:
            source = input_data
        else:
            source = self._load_bytes_content(input_data)

        with debug_timer(logger, "Parsing (xml)"):
            try:
                root = ET.fromstring(source)
            except ET.ParseError as e:
                raise ParsingError(f"Malformed Docutils XML: {e}", parsing_stage="xml", original_error=e) from e
            except DefusedXmlException as e:
                raise ParsingError(f"Refusing unsafe XML: {e}", parsing_stage="xml", original_error=e) from e

        if root.tag != "document":
            logger.warning("XML root element is '%s', expected 'document'", root.tag)
        return self._convert(root, preserve_space=False)

    def _convert(self, elem: ET.Element, preserve_space: bool) -> Node:
        attributes = {self._attribute_name(name): value for name, value in elem.attrib.items()}
        preserve_space = (
            preserve_space or elem.tag in _PRESERVE_SPACE_KINDS or attributes.get("xml:space") == "preserve"
        )

        children: list[Node] = []
        self._append_text(children, elem.text, preserve_space)
        for child in elem:
            children.append(self._convert(child, preserve_space))
            self._append_text(children, child.tail, preserve_space)

        return Node(kind=elem.tag, children=tuple(children), attributes=MappingProxyType(attributes))

    def _append_text(self, children: list[Node], value: str | None, preserve_space: bool) -> None:
        if not value:
            return
        is_indentation = not value.strip() and "\n" in value
        if is_indentation and not preserve_space and not self.options.keep_whitespace_text:
            return
        children.append(text(value))

    @staticmethod
    def _attribute_name(name: str) -> str:
        if name.startswith(_XML_NAMESPACE):
            return "xml:" + name[len(_XML_NAMESPACE) :]
        return name

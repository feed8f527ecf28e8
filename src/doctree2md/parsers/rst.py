#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doctree2md/parsers/rst.py
"""reStructuredText to node tree parser.

This module parses reStructuredText with docutils and maps the resulting
doctree onto ``Node`` objects, serializing attributes the way the Docutils
XML writer does. Reading an ``.rst`` file therefore gives the same tree as
reading the XML that ``rst2xml`` would produce for it.

"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from doctree2md.ast.nodes import Node, text
from doctree2md.constants import DEPS_RST
from doctree2md.exceptions import ParsingError
from doctree2md.options.parsers import RstParserOptions
from doctree2md.parsers.base import BaseParser, InputData
from doctree2md.utils.decorators import debug_timer, requires_dependencies

if TYPE_CHECKING:
    from docutils import nodes as docutils_nodes

logger = logging.getLogger(__name__)


class RestructuredTextParser(BaseParser):
    r"""Convert reStructuredText to a node tree.

    Parameters
    ----------
    options : RstParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
        >>> parser = RestructuredTextParser()
        >>> doc = parser.parse("Title\n=====\n\nThis is **bold**.\n")
        >>> [child.kind for child in doc.elements()]
        ['title', 'paragraph']

    """

    def __init__(self, options: RstParserOptions | None = None):
        """Initialize the RST parser with options."""
        BaseParser._validate_options_type(options, RstParserOptions, "rst")
        options = options or RstParserOptions()
        super().__init__(options)
        self.options: RstParserOptions = options

    @requires_dependencies("rst", DEPS_RST)
    def parse(self, input_data: InputData) -> Node:
        """Parse reStructuredText into a node tree.

        Raises
        ------
        DependencyError
            If docutils is not installed
        FileNotFoundError
            If a ``Path`` input does not exist
        ParsingError
            If docutils fails, or halts on an error in strict mode

        """
        rst_content = self._load_text_content(input_data)

        from docutils.core import publish_doctree

        settings_overrides = {
            "_disable_config": True,
            "report_level": 2,
            "halt_level": 3 if self.options.strict_mode else 5,
            "warning_stream": False,
        }
        with debug_timer(logger, "Parsing (rst)"):
            try:
                doctree = publish_doctree(rst_content, settings_overrides=settings_overrides)
            except Exception as e:
                raise ParsingError(f"Failed to parse RST: {e}", parsing_stage="rst", original_error=e) from e

        return self._convert(doctree)

    def _convert(self, node: docutils_nodes.Node) -> Node:
        from docutils import nodes

        if isinstance(node, nodes.Text):
            return text(str(node))

        attributes = {}
        for name, value in node.attributes.items():
            serialized = self._serialize_attribute(value)
            if serialized is not None:
                attributes[name] = serialized

        children = tuple(self._convert(child) for child in node.children)
        return Node(kind=node.tagname, children=children, attributes=MappingProxyType(attributes))

    @staticmethod
    def _serialize_attribute(value: Any) -> str | None:
        """Serialize an attribute value like the Docutils XML writer.

        List values are joined with spaces after escaping embedded spaces and
        backslashes; empty lists and None are dropped.
        """
        from docutils.nodes import serial_escape

        if value is None:
            return None
        if isinstance(value, list):
            if not value:
                return None
            return " ".join(serial_escape(str(item)) for item in value)
        if isinstance(value, bool):
            return "1" if value else "0"
        return str(value)

#  Copyright (c) 2025 Tom Villani, Ph.D.
"""doctree2md - render Docutils document trees as Markdown.

doctree2md reads a structured document (Docutils XML, or reStructuredText
parsed with docutils) and writes linear Markdown text: titles, sections,
bullet lists, notes, footnotes, references, figures, code blocks and
inline markup.

Examples
--------
    >>> from doctree2md import to_markdown
    >>> markdown = to_markdown("guide.xml")
    >>> to_markdown("guide.rst", output="guide.md", profile="qiita")

"""

from importlib.metadata import PackageNotFoundError, version

from doctree2md.api import to_markdown
from doctree2md.ast import Node, element, text
from doctree2md.exceptions import Doctree2MdError
from doctree2md.options import MarkdownRendererOptions, RstParserOptions, XmlParserOptions
from doctree2md.parsers import parse_document
from doctree2md.renderers import MarkdownRenderer

try:
    __version__ = version("doctree2md")
except PackageNotFoundError:  # pragma: no cover - source checkout without install
    __version__ = "0.0.0"

__all__ = [
    "Doctree2MdError",
    "MarkdownRenderer",
    "MarkdownRendererOptions",
    "Node",
    "RstParserOptions",
    "XmlParserOptions",
    "__version__",
    "element",
    "parse_document",
    "text",
    "to_markdown",
]

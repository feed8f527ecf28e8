#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for doctree2md parsers and renderers.

Each options class is a frozen dataclass resolved once before traversal.
"""

from __future__ import annotations

from doctree2md.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from doctree2md.options.markdown import PROFILES, MarkdownRendererOptions, get_profile
from doctree2md.options.parsers import RstParserOptions, XmlParserOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "MarkdownRendererOptions",
    "PROFILES",
    "RstParserOptions",
    "XmlParserOptions",
    "get_profile",
]

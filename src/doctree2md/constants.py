#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the doctree2md library.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Rendering Defaults - Option defaults for the Markdown renderer
3. Markdown Syntax - Fixed markers emitted by the node handlers
4. Input Formats - Format names, extensions and dependencies
5. CLI - Exit codes and environment variable prefix
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

SourceFormat = Literal["auto", "xml", "rst"]
ProfileName = Literal["default", "qiita"]

# =============================================================================
# Rendering Defaults
# =============================================================================

DEFAULT_EMIT_ANCHORS = True
DEFAULT_RENDER_BODY_REFERENCES = True
DEFAULT_RENDER_CODE_BLOCKS = True
DEFAULT_RENDER_INLINE_MARKUP = True
DEFAULT_REPORT_SYSTEM_MESSAGES = True
DEFAULT_HEADER_PARAGRAPHS_AS_BODY = False
DEFAULT_PROFILE: ProfileName = "default"

DEFAULT_RST_STRICT_MODE = False

# =============================================================================
# Markdown Syntax
# =============================================================================

TITLE_UNDERLINE = "---"
HEADING_MARKER = "#"
LIST_ITEM_MARKER = "* "
LIST_INDENT = "  "
CODE_FENCE = "```"
FOOTNOTE_ANCHOR_PREFIX = "footnote_"

# Class attribute docutils puts on the line-number spans of a numbered code block
LINE_NUMBER_CLASS = "ln"

# Kind name carried by text nodes of the input tree
TEXT_NODE_KIND = "#text"

# =============================================================================
# Input Formats
# =============================================================================

SUPPORTED_SOURCE_FORMATS = ["xml", "rst"]
XML_EXTENSIONS = frozenset({".xml"})
RST_EXTENSIONS = frozenset({".rst", ".rest", ".txt"})

DEPS_RST = [("docutils", "docutils", ">=0.18")]

# =============================================================================
# CLI
# =============================================================================

ENV_VAR_PREFIX = "DOCTREE2MD_"

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_FORMAT_ERROR = 5
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7

#  Copyright (c) 2025 Tom Villani, Ph.D.

# doctree2md/options/parsers.py
"""Configuration options for the input parsers.

The parsers only build the node tree; they have few knobs of their own.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from doctree2md.constants import DEFAULT_RST_STRICT_MODE
from doctree2md.options.base import BaseParserOptions


@dataclass(frozen=True)
class XmlParserOptions(BaseParserOptions):
    """Configuration options for Docutils XML parsing.

    Parameters
    ----------
    keep_whitespace_text : bool, default False
        Whether indentation text between elements is kept as text nodes.
        Pretty-printed Docutils XML puts a newline and indentation between
        elements; such whitespace-only runs containing a newline carry no
        content and are dropped by default. Text inside ``literal_block``
        elements is always preserved.

    """

    keep_whitespace_text: bool = field(
        default=False,
        metadata={"help": "Keep whitespace-only text between XML elements"},
    )


@dataclass(frozen=True)
class RstParserOptions(BaseParserOptions):
    """Configuration options for reStructuredText parsing.

    Parameters
    ----------
    strict_mode : bool, default False
        Whether docutils should report problems with warnings on stderr and
        halt on errors. When False, problems are recorded as
        ``system_message`` nodes in the tree instead.

    """

    strict_mode: bool = field(
        default=DEFAULT_RST_STRICT_MODE,
        metadata={"help": "Halt on invalid reStructuredText instead of recovering"},
    )

#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown rendering.

This module defines the toggles consumed by the node handlers of the
Markdown renderer, together with the named output profiles the CLI
exposes.
"""
# src/doctree2md/options/markdown.py


from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from doctree2md.constants import (
    DEFAULT_EMIT_ANCHORS,
    DEFAULT_HEADER_PARAGRAPHS_AS_BODY,
    DEFAULT_RENDER_BODY_REFERENCES,
    DEFAULT_RENDER_CODE_BLOCKS,
    DEFAULT_RENDER_INLINE_MARKUP,
    DEFAULT_REPORT_SYSTEM_MESSAGES,
)
from doctree2md.exceptions import ValidationError
from doctree2md.options.base import BaseRendererOptions


@dataclass(frozen=True)
class MarkdownRendererOptions(BaseRendererOptions):
    """Configuration options for node-tree-to-Markdown rendering.

    Each flag switches one rendering feature on or off. Named combinations
    are available as profiles (see ``PROFILES``).

    Parameters
    ----------
    emit_anchors : bool, default True
        Whether section titles carry an ``<a name="...">`` anchor so that
        internal references can jump to them.
    render_body_references : bool, default True
        Whether references met directly in body mode produce a link.
    render_code_blocks : bool, default True
        Whether literal blocks are rendered as fenced code. When disabled
        the ``literal_block`` kind is treated as unknown.
    render_inline_markup : bool, default True
        Whether ``strong`` and ``emphasis`` are rendered. When disabled both
        kinds are treated as unknown.
    report_system_messages : bool, default True
        Whether the text of embedded system messages is logged as a
        diagnostic. When disabled they are dropped silently.
    header_paragraphs_as_body : bool, default False
        Whether a paragraph met right after the document title (no docinfo)
        is rendered as body text instead of being skipped.

    """

    emit_anchors: bool = field(
        default=DEFAULT_EMIT_ANCHORS,
        metadata={"help": "Emit HTML anchors after section titles", "cli_name": "no-anchors"},
    )
    render_body_references: bool = field(
        default=DEFAULT_RENDER_BODY_REFERENCES,
        metadata={"help": "Render references that appear directly in the body", "cli_name": "no-body-references"},
    )
    render_code_blocks: bool = field(
        default=DEFAULT_RENDER_CODE_BLOCKS,
        metadata={"help": "Render literal blocks as fenced code", "cli_name": "no-code-blocks"},
    )
    render_inline_markup: bool = field(
        default=DEFAULT_RENDER_INLINE_MARKUP,
        metadata={"help": "Render strong and emphasis markup", "cli_name": "no-inline-markup"},
    )
    report_system_messages: bool = field(
        default=DEFAULT_REPORT_SYSTEM_MESSAGES,
        metadata={"help": "Log embedded system messages as diagnostics", "cli_name": "no-system-messages"},
    )
    header_paragraphs_as_body: bool = field(
        default=DEFAULT_HEADER_PARAGRAPHS_AS_BODY,
        metadata={
            "help": "Render paragraphs that follow the document title when there is no docinfo",
            "cli_name": "header-paragraphs-as-body",
        },
    )


PROFILES: Mapping[str, MarkdownRendererOptions] = MappingProxyType(
    {
        "default": MarkdownRendererOptions(),
        # titles without HTML anchors
        "qiita": MarkdownRendererOptions(emit_anchors=False),
    }
)


def get_profile(name: str) -> MarkdownRendererOptions:
    """Return the renderer options registered under a profile name.

    Parameters
    ----------
    name : str
        Profile name (e.g. ``"default"`` or ``"qiita"``)

    Returns
    -------
    MarkdownRendererOptions
        The options for the profile

    Raises
    ------
    ValidationError
        If no profile with that name exists

    """
    try:
        return PROFILES[name]
    except KeyError:
        raise ValidationError(
            f"Unknown output profile '{name}'. Available profiles: {', '.join(PROFILES)}",
            parameter_name="profile",
            parameter_value=name,
        ) from None

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doctree2md/api.py
"""High-level conversion entry point."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Optional, Union

from doctree2md.ast.nodes import Node
from doctree2md.constants import SourceFormat
from doctree2md.exceptions import ValidationError
from doctree2md.options.base import BaseParserOptions
from doctree2md.options.markdown import MarkdownRendererOptions, get_profile
from doctree2md.parsers import InputData, parse_document
from doctree2md.renderers.markdown import MarkdownRenderer

logger = logging.getLogger(__name__)


def to_markdown(
    source: Union[InputData, Node],
    *,
    output: Union[str, Path, IO[bytes], IO[str], None] = None,
    options: Optional[MarkdownRendererOptions] = None,
    profile: Optional[str] = None,
    source_format: SourceFormat = "auto",
    parser_options: Optional[BaseParserOptions] = None,
) -> Optional[str]:
    """Convert a structured document to Markdown.

    Parameters
    ----------
    source : str, Path, IO, bytes or Node
        Path to a Docutils XML or reStructuredText document, its content, a
        readable stream, or an already parsed node tree
    output : str, Path, IO[bytes], IO[str] or None, default None
        Where to write the Markdown. When None the Markdown is returned.
    options : MarkdownRendererOptions, optional
        Rendering options; mutually exclusive with ``profile``
    profile : str, optional
        Name of an output profile (``"default"`` or ``"qiita"``)
    source_format : {"auto", "xml", "rst"}, default "auto"
        Input format when ``source`` is not a node tree
    parser_options : BaseParserOptions, optional
        Options for the selected parser

    Returns
    -------
    str or None
        The Markdown text when ``output`` is None, otherwise None

    Raises
    ------
    ValidationError
        If both ``options`` and ``profile`` are given, or the profile is unknown

    Examples
    --------
        >>> to_markdown("<document><title>Hello World</title></document>")
        'Hello World\\n---\\n'

    """
    if options is not None and profile is not None:
        raise ValidationError("Pass either options or profile, not both", parameter_name="profile")
    if profile is not None:
        options = get_profile(profile)

    document = source if isinstance(source, Node) else parse_document(source, source_format, parser_options)
    renderer = MarkdownRenderer(options)

    if output is None:
        return renderer.render_to_string(document)
    renderer.render(document, output)
    return None

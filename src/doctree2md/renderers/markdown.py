#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doctree2md/renderers/markdown.py
"""Markdown rendering from a parsed document tree.

This module provides the MarkdownRenderer class which turns a Docutils
style node tree into linear Markdown text. Rendering is a single top-down
pass: the dispatcher picks a handler per node kind and threads a small
render state (mode plus nesting depth) through the recursion. Output is
streamed to the destination as it is produced.

"""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import IO, Union

from doctree2md.ast.nodes import Node
from doctree2md.exceptions import OutputWriteError
from doctree2md.options.markdown import MarkdownRendererOptions
from doctree2md.renderers.base import BaseRenderer
from doctree2md.renderers.dispatch import Dispatcher
from doctree2md.renderers.sink import OutputSink
from doctree2md.renderers.state import INITIAL_STATE
from doctree2md.utils.decorators import debug_timer

logger = logging.getLogger(__name__)


class MarkdownRenderer(BaseRenderer):
    """Render a document tree to Markdown text.

    Parameters
    ----------
    options : MarkdownRendererOptions or None, default = None
        Markdown rendering options

    Attributes
    ----------
    last_unknown_kinds : list of str
        Node kinds skipped during the most recent render

    Examples
    --------
    Basic usage:

        >>> from doctree2md.ast import element
        >>> from doctree2md.renderers.markdown import MarkdownRenderer
        >>> doc = element("document", element("title", "Hello World"))
        >>> MarkdownRenderer().render_to_string(doc)
        'Hello World\\n---\\n'

    """

    def __init__(self, options: MarkdownRendererOptions | None = None):
        """Initialize the Markdown renderer with options."""
        BaseRenderer._validate_options_type(options, MarkdownRendererOptions, "markdown")
        options = options or MarkdownRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: MarkdownRendererOptions = options
        self.last_unknown_kinds: list[str] = []

    def render(self, doc: Node, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the tree to a file path or writable stream.

        Parameters
        ----------
        doc : Node
            Root node of the parsed document
        output : str, Path, IO[bytes] or IO[str]
            Output destination. Paths are written as UTF-8.

        Raises
        ------
        OutputWriteError
            If the output file cannot be opened or written

        """
        if isinstance(output, (str, Path)):
            try:
                with open(output, "w", encoding="utf-8", newline="") as stream:
                    self._render_to_stream(doc, stream)
            except OSError as e:
                raise OutputWriteError(str(output), original_error=e) from e
        else:
            self._render_to_stream(doc, output)

    def render_to_string(self, doc: Node) -> str:
        """Render the tree to a Markdown string."""
        buffer = StringIO()
        self._render_to_stream(doc, buffer)
        return buffer.getvalue()

    def _render_to_stream(self, doc: Node, stream: Union[IO[bytes], IO[str]]) -> None:
        dispatcher = Dispatcher(OutputSink(stream), self.options)
        with debug_timer(logger, "Rendering (markdown)"):
            dispatcher.dispatch(INITIAL_STATE, doc)

        self.last_unknown_kinds = list(dispatcher.unknown_kinds)
        if self.last_unknown_kinds:
            logger.info(
                "Skipped %d node(s) of unknown kind: %s",
                len(self.last_unknown_kinds),
                ", ".join(sorted(set(self.last_unknown_kinds))),
            )
        logger.debug("Wrote %d characters of Markdown", dispatcher.sink.chars_written)

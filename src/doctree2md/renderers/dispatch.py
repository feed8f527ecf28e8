#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doctree2md/renderers/dispatch.py
"""Recursive dispatcher driving the node handlers.

The dispatcher resolves each node's kind to a handler, invokes it, and
walks the children of a ``ContinueInto`` result. A kind without a handler
is the one recoverable problem of the renderer: it is logged once, the
node produces no output, and processing carries on with its siblings.

"""

from __future__ import annotations

import logging
from typing import Iterable

from doctree2md.ast.nodes import Node
from doctree2md.options.markdown import MarkdownRendererOptions
from doctree2md.renderers.handlers import resolve_handler
from doctree2md.renderers.results import ContinueInto
from doctree2md.renderers.sink import OutputSink
from doctree2md.renderers.state import RenderState

logger = logging.getLogger(__name__)


class Dispatcher:
    """Top-down traversal over a node tree.

    Parameters
    ----------
    sink : OutputSink
        Destination of all rendered text
    options : MarkdownRendererOptions
        Read-only rendering toggles

    Attributes
    ----------
    unknown_kinds : list of str
        Kind names that had no handler, in the order they were met

    """

    def __init__(self, sink: OutputSink, options: MarkdownRendererOptions):
        """Bind the dispatcher to a sink and an options set."""
        self.sink = sink
        self.options = options
        self.unknown_kinds: list[str] = []

    def dispatch(self, state: RenderState, node: Node) -> RenderState:
        """Render one node and return the state for its following siblings.

        Parameters
        ----------
        state : RenderState
            State the node is rendered in
        node : Node
            Node to render

        Returns
        -------
        RenderState
            State the caller continues with

        """
        handler = resolve_handler(node.kind, self.options)
        if handler is None:
            self.unknown_kinds.append(node.kind)
            logger.warning("Unknown node kind '%s'; skipping it and its children", node.kind)
            return state

        result = handler(self, state, node)
        if isinstance(result, ContinueInto):
            self.dispatch_sequence(result.state, result.children)
            return state
        return result.state

    def dispatch_sequence(self, state: RenderState, nodes: Iterable[Node]) -> RenderState:
        """Dispatch nodes in order, each starting from the state its predecessor left."""
        for node in nodes:
            state = self.dispatch(state, node)
        return state

    def dispatch_each(self, state: RenderState, nodes: Iterable[Node]) -> None:
        """Dispatch nodes in order, each starting from the same ``state``."""
        for node in nodes:
            self.dispatch(state, node)

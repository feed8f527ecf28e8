#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers turning parsed document trees into text formats."""

from doctree2md.renderers.dispatch import Dispatcher
from doctree2md.renderers.handlers import HANDLERS, resolve_handler
from doctree2md.renderers.markdown import MarkdownRenderer
from doctree2md.renderers.results import ContinueInto, Handled, HandlerResult
from doctree2md.renderers.sink import OutputSink
from doctree2md.renderers.state import INITIAL_STATE, Mode, RenderState

__all__ = [
    "ContinueInto",
    "Dispatcher",
    "HANDLERS",
    "Handled",
    "HandlerResult",
    "INITIAL_STATE",
    "MarkdownRenderer",
    "Mode",
    "OutputSink",
    "RenderState",
    "resolve_handler",
]

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doctree2md/renderers/results.py
"""Handler result types.

A handler either finishes the node itself (``Handled``) or asks the
dispatcher to walk a list of children for it (``ContinueInto``). Both
carry a ``RenderState``:

- ``ContinueInto.state`` is the state the children are dispatched with.
- ``Handled.state`` is the state the caller continues with for the
  node's following siblings. Most handlers hand back the state they
  received; the document header handlers advance it (TOP to HEADER to
  BODY).

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union

from doctree2md.ast.nodes import Node
from doctree2md.renderers.state import RenderState


@dataclass(frozen=True)
class ContinueInto:
    """Ask the dispatcher to dispatch ``children`` in order, starting from ``state``."""

    children: Sequence[Node]
    state: RenderState


@dataclass(frozen=True)
class Handled:
    """The handler emitted everything for the node, including any children."""

    state: RenderState


HandlerResult = Union[ContinueInto, Handled]

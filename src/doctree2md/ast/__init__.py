#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Read-only node tree consumed by the doctree2md renderers."""

from doctree2md.ast.nodes import Node, element, text

__all__ = ["Node", "element", "text"]

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doctree2md/ast/nodes.py
"""Node model for parsed structured documents.

This module defines the read-only tree the renderers traverse. A node is
an element with a kind name (the Docutils tag name, e.g. ``section`` or
``bullet_list``), a mapping of string attributes and an ordered sequence
of children. Character data lives in *text nodes* interleaved with the
element children, so mixed content such as::

    <paragraph>See <literal>x</literal> for details.</paragraph>

keeps its order: ``paragraph`` has three children, a text node, a
``literal`` element and another text node.

The query API mirrors what an XML tree offers:

- ``elements()`` iterates direct element children
- ``iter_elements()`` iterates all descendant elements
- ``get(name)`` reads an attribute
- ``text`` is the first direct text child (like an XML ``.text``)
- ``text_content()`` concatenates every text node of the subtree

"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Union

from doctree2md.constants import TEXT_NODE_KIND


@dataclass(frozen=True)
class Node:
    """A node of the parsed document tree.

    Parameters
    ----------
    kind : str
        Element kind name, or ``"#text"`` for text nodes
    children : tuple of Node, default ()
        Ordered child nodes (elements and text nodes)
    attributes : Mapping[str, str], default empty
        Attribute name to string value
    value : str, default ""
        Character data of a text node; unused for elements

    """

    kind: str
    children: tuple[Node, ...] = ()
    attributes: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    value: str = ""

    @property
    def is_text(self) -> bool:
        """Whether this node carries character data rather than an element."""
        return self.kind == TEXT_NODE_KIND

    @property
    def text(self) -> Optional[str]:
        """Return the first direct text child, or None when there is none."""
        for child in self.children:
            if child.is_text:
                return child.value
        return None

    def elements(self) -> tuple[Node, ...]:
        """Return the direct element children, skipping text nodes."""
        return tuple(child for child in self.children if not child.is_text)

    def iter_elements(self) -> Iterator[Node]:
        """Iterate over all descendant elements in document order."""
        for child in self.children:
            if child.is_text:
                continue
            yield child
            yield from child.iter_elements()

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Read an attribute value by name."""
        return self.attributes.get(name, default)

    def text_content(self) -> str:
        """Return the concatenated text of this node and all of its descendants."""
        if self.is_text:
            return self.value
        return "".join(child.text_content() for child in self.children)

    def find(self, kind: str) -> Optional[Node]:
        """Return the first direct element child of the given kind."""
        for child in self.children:
            if child.kind == kind:
                return child
        return None


def text(value: str) -> Node:
    """Create a text node."""
    return Node(kind=TEXT_NODE_KIND, value=value)


def element(kind: str, *children: Union[Node, str], **attributes: str) -> Node:
    """Create an element node.

    String children become text nodes. A trailing underscore on an attribute
    keyword is dropped so reserved words can be passed (``class_="x"``).

    Examples
    --------
        >>> para = element("paragraph", "See ", element("literal", "x"), ".")
        >>> para.text
        'See '
        >>> para.text_content()
        'See x.'

    """
    nodes = tuple(text(child) if isinstance(child, str) else child for child in children)
    attrs = {name.rstrip("_"): value for name, value in attributes.items()}
    return Node(kind=kind, children=nodes, attributes=MappingProxyType(attrs))

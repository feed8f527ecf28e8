#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doctree2md/renderers/base.py
"""Base classes for node tree renderers.

This module defines the abstract base class renderers inherit from. The
BaseRenderer provides a consistent interface for turning a parsed node
tree into an output format.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from doctree2md.ast.nodes import Node
from doctree2md.exceptions import InvalidOptionsError
from doctree2md.options.base import BaseRendererOptions


class BaseRenderer(ABC):
    """Abstract base class for all node tree renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render(self, doc: Node, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the tree to a file path or writable stream.

        Parameters
        ----------
        doc : Node
            Root node of the parsed document
        output : str, Path, IO[bytes] or IO[str]
            Output destination

        Raises
        ------
        OutputWriteError
            If the output file cannot be written

        """

    def render_to_string(self, doc: Node) -> str:
        """Render the tree to a string (if applicable).

        Raises
        ------
        NotImplementedError
            If the renderer does not support string output

        """
        raise NotImplementedError(f"{self.__class__.__name__} does not support rendering to a string.")

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

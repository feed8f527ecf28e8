#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Shared helpers for doctree2md parsers, renderers and the CLI."""

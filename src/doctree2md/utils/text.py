#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doctree2md/utils/text.py
"""Text processing utilities for the Markdown handlers.

Functions
---------
slugify : Build an anchor identifier from heading or link text
squeeze_spaces : Drop every space character from a string

Examples
--------
    >>> from doctree2md.utils.text import slugify
    >>> slugify("My Heading  Title")
    'my-heading-title'

"""

from __future__ import annotations

from typing import Optional


def slugify(text: Optional[str], separator: str = "-") -> str:
    """Create the anchor slug used by section titles and internal references.

    The string is lowercased and every run of whitespace becomes a single
    separator. Leading and trailing whitespace is dropped. The function is
    pure, so a title anchor and a reference to that title always agree.

    Parameters
    ----------
    text : str or None
        Text to slugify; None yields an empty slug
    separator : str, default "-"
        The separator between words in the slug

    Returns
    -------
    str
        The slug

    """
    if not text:
        return ""
    return separator.join(text.split()).lower()


def squeeze_spaces(text: Optional[str]) -> str:
    """Remove all space characters, e.g. ``"1.2 "`` becomes ``"1.2"``."""
    return (text or "").replace(" ", "")

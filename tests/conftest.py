"""Pytest configuration and shared fixtures for the doctree2md test suite.

This module provides shared fixtures, test configuration, and sample
documents that are used across the entire test suite.
"""

import logging
import os
from pathlib import Path
from typing import Generator

import pytest
from hypothesis import Phase, Verbosity, settings

from doctree2md.options import MarkdownRendererOptions
from doctree2md.renderers.dispatch import Dispatcher
from doctree2md.renderers.sink import OutputSink

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture(autouse=True)
def restore_root_logging() -> Generator[None, None, None]:
    """Undo any handler changes ``configure_logging`` makes on the root logger."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    try:
        yield
    finally:
        for handler in root_logger.handlers:
            if handler not in handlers:
                handler.close()
        root_logger.handlers[:] = handlers
        root_logger.setLevel(level)


class RecordingDispatcher:
    """Build a dispatcher writing into an in-memory buffer."""

    def __init__(self, options: MarkdownRendererOptions | None = None):
        from io import StringIO

        self.buffer = StringIO()
        self.dispatcher = Dispatcher(OutputSink(self.buffer), options or MarkdownRendererOptions())

    @property
    def output(self) -> str:
        return self.buffer.getvalue()


@pytest.fixture
def recorder() -> RecordingDispatcher:
    """Provide a dispatcher with default options and a readable output buffer."""
    return RecordingDispatcher()


@pytest.fixture
def make_recorder():
    """Provide a factory for dispatchers with custom options."""
    return RecordingDispatcher


@pytest.fixture
def sample_xml() -> str:
    """Provide a Docutils XML document exercising most node kinds.

    Returns
    -------
    str
        Pretty-printed XML as written by ``rst2xml``.

    """
    return """<?xml version="1.0" encoding="utf-8"?>
<!DOCTYPE document PUBLIC "+//IDN docutils.sourceforge.net//DTD Docutils Generic//EN//XML" "http://docutils.sourceforge.net/docs/ref/docutils.dtd">
<document ids="user-guide" names="user\\ guide" source="guide.rst" title="User Guide">
    <title>User Guide</title>
    <docinfo>
        <author>Jane Doe</author>
        <version>1.0</version>
    </docinfo>
    <paragraph>Welcome to the <strong>guide</strong>.</paragraph>
    <section ids="getting-started" names="getting\\ started">
        <title>Getting Started</title>
        <paragraph>Install with <literal>pip</literal>.</paragraph>
        <bullet_list bullet="*">
            <list_item>
                <paragraph>first</paragraph>
            </list_item>
            <list_item>
                <paragraph>second</paragraph>
            </list_item>
        </bullet_list>
        <literal_block classes="code python" xml:space="preserve">print("hi")</literal_block>
    </section>
</document>
"""


@pytest.fixture
def sample_rst() -> str:
    """Provide a reStructuredText document equivalent in shape to ``sample_xml``."""
    return """==========
User Guide
==========

:Author: Jane Doe
:Version: 1.0

Getting Started
===============

Install with ``pip``.

* first
* second
"""


@pytest.fixture
def xml_file(tmp_path: Path, sample_xml: str) -> Path:
    """Write the sample XML document to a temporary file."""
    path = tmp_path / "guide.xml"
    path.write_text(sample_xml, encoding="utf-8")
    return path


@pytest.fixture
def rst_file(tmp_path: Path, sample_rst: str) -> Path:
    """Write the sample reStructuredText document to a temporary file."""
    path = tmp_path / "guide.rst"
    path.write_text(sample_rst, encoding="utf-8")
    return path

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doctree2md/cli.py
"""Command-line interface for doctree2md.

This module provides the ``doctree2md`` command, which converts a Docutils
XML or reStructuredText document to Markdown.

Examples
--------
Basic conversion to stdout:
    $ doctree2md guide.xml

Write to a file:
    $ doctree2md guide.rst --out guide.md

Markdown for Qiita (no HTML anchors after titles):
    $ doctree2md guide.xml --qiita

Read from stdin:
    $ rst2xml guide.rst | doctree2md -

Use environment variables for defaults:
    $ export DOCTREE2MD_PROFILE=qiita
    $ export DOCTREE2MD_LOG_LEVEL=DEBUG
    $ doctree2md guide.xml
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import fields
from pathlib import Path
from typing import Any, Optional

from doctree2md.constants import (
    DEFAULT_PROFILE,
    ENV_VAR_PREFIX,
    EXIT_DEPENDENCY_ERROR,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_FORMAT_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_RENDERING_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    SUPPORTED_SOURCE_FORMATS,
)
from doctree2md.exceptions import (
    DependencyError,
    Doctree2MdError,
    FileError,
    FileNotFoundError,
    FormatError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from doctree2md.logging_utils import configure_logging
from doctree2md.options import PROFILES, MarkdownRendererOptions, RstParserOptions, XmlParserOptions, get_profile
from doctree2md.options.base import BaseParserOptions

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def get_env_var_value(key: str) -> Optional[str]:
    """Get environment variable with the DOCTREE2MD_ prefix.

    Parameters
    ----------
    key : str
        The parameter name (e.g., 'profile', 'log_level')

    Returns
    -------
    Optional[str]
        Environment variable value or None if not set

    """
    env_key = f"{ENV_VAR_PREFIX}{key.upper().replace('-', '_')}"
    return os.environ.get(env_key)


def _parse_env_bool(key: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValidationError(
        f"Invalid boolean value '{value}' for {ENV_VAR_PREFIX}{key.upper()}",
        parameter_name=key,
        parameter_value=value,
    )


def _add_renderer_option_flags(parser: argparse.ArgumentParser) -> None:
    """Add one CLI flag per MarkdownRendererOptions field.

    Flags default to None so that only toggles given explicitly override
    the selected profile.
    """
    group = parser.add_argument_group("rendering options")
    for option_field in fields(MarkdownRendererOptions):
        cli_name = option_field.metadata.get("cli_name", option_field.name.replace("_", "-"))
        group.add_argument(
            f"--{cli_name}",
            dest=option_field.name,
            action="store_const",
            const=not option_field.default,
            default=None,
            help=option_field.metadata.get("help"),
        )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the doctree2md command."""
    parser = argparse.ArgumentParser(
        prog="doctree2md",
        description="Convert Docutils XML or reStructuredText documents to Markdown.",
    )
    parser.add_argument("input", help="Path to the input document, or '-' to read from stdin")
    parser.add_argument("-o", "--out", help="Output file (default: stdout)")
    parser.add_argument(
        "-f",
        "--format",
        choices=["auto", *SUPPORTED_SOURCE_FORMATS],
        default="auto",
        help="Input format (default: detect from extension or content)",
    )
    parser.add_argument(
        "--profile",
        choices=sorted(PROFILES),
        default=DEFAULT_PROFILE,
        help="Output profile (default: %(default)s)",
    )
    parser.add_argument(
        "--qiita",
        dest="profile",
        action="store_const",
        const="qiita",
        help="Shorthand for --profile qiita (titles without HTML anchors)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Stop on reStructuredText errors instead of recording them in the document",
    )
    _add_renderer_option_flags(parser)

    logging_group = parser.add_argument_group("logging")
    logging_group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Logging level for diagnostics on stderr (default: %(default)s)",
    )
    logging_group.add_argument("--log-file", help="Also append log output to this file")
    logging_group.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")
    return parser


def apply_env_vars_to_parser(parser: argparse.ArgumentParser) -> None:
    """Apply DOCTREE2MD_* environment variables as argument defaults.

    Command-line arguments still take precedence.

    Raises
    ------
    ValidationError
        If a boolean toggle variable holds an unrecognized value

    """
    defaults: dict[str, Any] = {}
    for key in ("profile", "format", "log_level", "log_file"):
        value = get_env_var_value(key)
        if value:
            defaults[key] = value
    if get_env_var_value("strict"):
        defaults["strict"] = _parse_env_bool("strict", get_env_var_value("strict") or "")
    for option_field in fields(MarkdownRendererOptions):
        value = get_env_var_value(option_field.name)
        if value:
            defaults[option_field.name] = _parse_env_bool(option_field.name, value)
    if defaults:
        parser.set_defaults(**defaults)


def resolve_renderer_options(parsed_args: argparse.Namespace) -> MarkdownRendererOptions:
    """Build renderer options from the profile plus explicit toggles."""
    options = get_profile(parsed_args.profile)
    overrides = {
        option_field.name: getattr(parsed_args, option_field.name)
        for option_field in fields(MarkdownRendererOptions)
        if getattr(parsed_args, option_field.name, None) is not None
    }
    return options.create_updated(**overrides) if overrides else options


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    log_level = logging.DEBUG if parsed_args.trace else getattr(logging, parsed_args.log_level.upper())
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code."""
    if isinstance(exception, (DependencyError, ImportError)):
        return EXIT_DEPENDENCY_ERROR
    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR
    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR
    if isinstance(exception, FormatError):
        return EXIT_FORMAT_ERROR
    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR
    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR
    return EXIT_ERROR


def _convert(parsed_args: argparse.Namespace) -> None:
    from doctree2md.parsers import detect_source_format, parse_document
    from doctree2md.renderers.markdown import MarkdownRenderer

    options = resolve_renderer_options(parsed_args)
    source: Any
    if parsed_args.input == "-":
        source = sys.stdin.buffer.read()
    else:
        source = Path(parsed_args.input)
        if not source.is_file():
            raise FileNotFoundError(parsed_args.input)

    source_format = parsed_args.format
    if source_format == "auto":
        source_format = detect_source_format(source)

    parser_options: BaseParserOptions
    if source_format == "rst":
        parser_options = RstParserOptions(strict_mode=parsed_args.strict)
    else:
        parser_options = XmlParserOptions()

    document = parse_document(source, source_format, parser_options)
    renderer = MarkdownRenderer(options)

    if parsed_args.out:
        renderer.render(document, parsed_args.out)
        logger.info("Wrote %s", parsed_args.out)
    else:
        sys.stdout.flush()
        stdout = getattr(sys.stdout, "buffer", sys.stdout)
        renderer.render(document, stdout)
        stdout.flush()


def main(args: list[str] | None = None) -> int:
    """Execute the CLI and return a process exit code.

    Unknown node kinds in the input are reported on stderr but do not
    affect the exit code.
    """
    parser = create_parser()
    try:
        apply_env_vars_to_parser(parser)
    except ValidationError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    parsed_args = parser.parse_args(args)
    _setup_logging_level(parsed_args)

    try:
        _convert(parsed_args)
    except Doctree2MdError as e:
        logger.error("%s", e.message)
        return get_exit_code_for_exception(e)
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_cli.py
"""Unit tests for the doctree2md command-line interface."""

from pathlib import Path

import pytest

from doctree2md.cli import (
    create_parser,
    get_env_var_value,
    get_exit_code_for_exception,
    main,
    resolve_renderer_options,
)
from doctree2md.constants import (
    EXIT_DEPENDENCY_ERROR,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_FORMAT_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_RENDERING_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
)
from doctree2md.exceptions import (
    DependencyError,
    FileNotFoundError,
    FormatError,
    OutputWriteError,
    ParsingError,
    ValidationError,
)
from doctree2md.options import MarkdownRendererOptions

SECTION_XML = '<document><section ids="intro"><title>Intro</title><paragraph>Body.</paragraph></section></document>'


@pytest.fixture
def section_xml(tmp_path: Path) -> Path:
    path = tmp_path / "section.xml"
    path.write_text(SECTION_XML, encoding="utf-8")
    return path


@pytest.mark.unit
@pytest.mark.cli
class TestArgumentParsing:
    """Tests for the argument parser and option resolution."""

    def test_defaults(self):
        """Without flags the default profile applies unchanged."""
        args = create_parser().parse_args(["doc.xml"])
        assert args.profile == "default"
        assert args.format == "auto"
        assert resolve_renderer_options(args) == MarkdownRendererOptions()

    def test_qiita_shorthand(self):
        """--qiita selects the Qiita profile."""
        args = create_parser().parse_args(["doc.xml", "--qiita"])
        assert args.profile == "qiita"
        assert not resolve_renderer_options(args).emit_anchors

    def test_toggles_override_profile(self):
        """Explicit toggles are applied on top of the profile."""
        args = create_parser().parse_args(["doc.xml", "--no-code-blocks", "--header-paragraphs-as-body"])
        options = resolve_renderer_options(args)
        assert not options.render_code_blocks
        assert options.header_paragraphs_as_body
        assert options.emit_anchors

    def test_help_exits_cleanly(self, capsys):
        """--help prints usage and exits with status 0."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0
        assert "--no-anchors" in capsys.readouterr().out

    def test_env_var_lookup(self, monkeypatch):
        """Environment variables use the DOCTREE2MD_ prefix."""
        monkeypatch.setenv("DOCTREE2MD_LOG_LEVEL", "DEBUG")
        assert get_env_var_value("log_level") == "DEBUG"
        assert get_env_var_value("log-level") == "DEBUG"


@pytest.mark.unit
@pytest.mark.cli
class TestConversion:
    """Tests for running conversions through main()."""

    def test_output_file(self, section_xml: Path, tmp_path: Path):
        """Markdown is written to --out."""
        out = tmp_path / "out.md"
        assert main([str(section_xml), "--out", str(out)]) == EXIT_SUCCESS
        assert out.read_text(encoding="utf-8") == '# <a name="intro">Intro</a>\n\nBody.\n\n'

    def test_stdout(self, section_xml: Path, capsys):
        """Without --out the Markdown goes to stdout."""
        assert main([str(section_xml)]) == EXIT_SUCCESS
        assert capsys.readouterr().out == '# <a name="intro">Intro</a>\n\nBody.\n\n'

    def test_qiita(self, section_xml: Path, tmp_path: Path):
        """--qiita leaves anchors out."""
        out = tmp_path / "out.md"
        assert main([str(section_xml), "--qiita", "-o", str(out)]) == EXIT_SUCCESS
        assert out.read_text(encoding="utf-8").startswith("# Intro\n\n")

    def test_profile_from_env(self, section_xml: Path, tmp_path: Path, monkeypatch):
        """The profile can come from the environment."""
        monkeypatch.setenv("DOCTREE2MD_PROFILE", "qiita")
        out = tmp_path / "out.md"
        assert main([str(section_xml), "-o", str(out)]) == EXIT_SUCCESS
        assert out.read_text(encoding="utf-8").startswith("# Intro\n\n")

    def test_toggle_from_env(self, section_xml: Path, tmp_path: Path, monkeypatch):
        """Toggles can come from the environment."""
        monkeypatch.setenv("DOCTREE2MD_EMIT_ANCHORS", "false")
        out = tmp_path / "out.md"
        assert main([str(section_xml), "-o", str(out)]) == EXIT_SUCCESS
        assert out.read_text(encoding="utf-8").startswith("# Intro\n\n")

    def test_rst_input(self, tmp_path: Path):
        """reStructuredText files are detected by extension."""
        source = tmp_path / "doc.rst"
        source.write_text("Title\n=====\n", encoding="utf-8")
        out = tmp_path / "out.md"
        assert main([str(source), "-o", str(out)]) == EXIT_SUCCESS
        assert out.read_text(encoding="utf-8") == "Title\n---\n"

    def test_explicit_format(self, tmp_path: Path):
        """--format overrides detection."""
        source = tmp_path / "doc.txt"
        source.write_text("<document><title>T</title></document>", encoding="utf-8")
        out = tmp_path / "out.md"
        assert main([str(source), "--format", "xml", "-o", str(out)]) == EXIT_SUCCESS
        assert out.read_text(encoding="utf-8") == "T\n---\n"

    def test_unknown_kind_still_succeeds(self, tmp_path: Path, capsys):
        """Unknown node kinds are reported on stderr without failing."""
        source = tmp_path / "doc.xml"
        source.write_text("<document><section><table/></section></document>", encoding="utf-8")
        out = tmp_path / "out.md"
        assert main([str(source), "-o", str(out)]) == EXIT_SUCCESS
        assert "Unknown node kind 'table'" in capsys.readouterr().err

    def test_log_file(self, section_xml: Path, tmp_path: Path):
        """--log-file receives the diagnostics too."""
        log_file = tmp_path / "run.log"
        out = tmp_path / "out.md"
        assert main([str(section_xml), "-o", str(out), "--log-level", "INFO", "--log-file", str(log_file)]) == 0
        assert "Wrote" in log_file.read_text(encoding="utf-8")


@pytest.mark.unit
@pytest.mark.cli
class TestExitCodes:
    """Tests for error handling and exit codes."""

    def test_missing_file(self, tmp_path: Path):
        """A missing input file is a file error."""
        assert main([str(tmp_path / "missing.xml")]) == EXIT_FILE_ERROR

    @pytest.mark.parametrize("name", ["guide", "notes.md"])
    def test_missing_file_without_known_extension(self, tmp_path: Path, name: str, capsys):
        """A missing input is a file error whatever its extension, and is never read as content."""
        assert main([str(tmp_path / name), "--header-paragraphs-as-body"]) == EXIT_FILE_ERROR
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "File not found" in captured.err

    def test_missing_docutils(self, rst_file: Path, monkeypatch):
        """reStructuredText input without docutils installed is a dependency error."""
        import doctree2md.utils.decorators as decorators

        real_import = decorators.importlib.import_module

        def fake_import(name, *args, **kwargs):
            if name == "docutils":
                raise ImportError("No module named 'docutils'")
            return real_import(name, *args, **kwargs)

        monkeypatch.setattr(decorators.importlib, "import_module", fake_import)
        assert main([str(rst_file)]) == EXIT_DEPENDENCY_ERROR

    def test_malformed_xml(self, tmp_path: Path, capsys):
        """Malformed XML is a parsing error."""
        source = tmp_path / "bad.xml"
        source.write_text("<document><title>", encoding="utf-8")
        assert main([str(source)]) == EXIT_PARSING_ERROR
        assert "Malformed Docutils XML" in capsys.readouterr().err

    def test_strict_rst(self, tmp_path: Path):
        """Strict mode turns reStructuredText errors into a parsing error."""
        source = tmp_path / "bad.rst"
        source.write_text("Text.\n\n.. nosuchdirective::\n", encoding="utf-8")
        assert main([str(source), "--strict"]) == EXIT_PARSING_ERROR

    def test_unwritable_output(self, section_xml: Path, tmp_path: Path):
        """An output path that cannot be written is a rendering error."""
        assert main([str(section_xml), "-o", str(tmp_path)]) == EXIT_RENDERING_ERROR

    def test_invalid_env_bool(self, section_xml: Path, monkeypatch):
        """An unreadable boolean environment value is a validation error."""
        monkeypatch.setenv("DOCTREE2MD_EMIT_ANCHORS", "maybe")
        assert main([str(section_xml)]) == EXIT_VALIDATION_ERROR

    def test_invalid_env_profile(self, section_xml: Path, monkeypatch):
        """An unknown profile from the environment is a validation error."""
        monkeypatch.setenv("DOCTREE2MD_PROFILE", "github")
        assert main([str(section_xml)]) == EXIT_VALIDATION_ERROR

    @pytest.mark.parametrize(
        "exception,expected",
        [
            (DependencyError("rst", [("docutils", ">=0.18")]), EXIT_DEPENDENCY_ERROR),
            (ValidationError("bad"), EXIT_VALIDATION_ERROR),
            (FileNotFoundError("x.xml"), EXIT_FILE_ERROR),
            (FormatError(format_type="pdf"), EXIT_FORMAT_ERROR),
            (ParsingError("bad"), EXIT_PARSING_ERROR),
            (OutputWriteError("out.md"), EXIT_RENDERING_ERROR),
            (RuntimeError("boom"), EXIT_ERROR),
        ],
    )
    def test_exit_code_mapping(self, exception, expected):
        """Each error category has its own exit code."""
        assert get_exit_code_for_exception(exception) == expected

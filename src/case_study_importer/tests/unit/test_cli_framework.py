"""
Tests for the case study CLI.

This module tests command routing, global options, configuration and
logging wiring, exit codes and the document commands' output.
"""

import json
import logging
from unittest.mock import patch

import pytest
import typer
from rich.logging import RichHandler
from typer.testing import CliRunner

from case_study_importer import __version__
from case_study_importer.cli.cli import (
    app,
    cli_main,
    get_config_manager,
    setup_logging,
)
from case_study_importer.cli.output import dump_json, handle_cli_error
from case_study_importer.core.document_processor import EXAMPLE_TEMPLATE
from case_study_importer.exceptions import ConfigurationError
from case_study_importer.utils.config import ConfigManager

VALID_IMPORT = (
    "---\n"
    'title: "Demo"\n'
    "slug: demo\n"
    'category: "Operations"\n'
    'short_description: "A test."\n'
    "---\n"
    "## Problem\nThings were slow.\n"
    "## Appendix\nNot imported.\n"
    "## Solution\nWe fixed it.\n"
)


@pytest.fixture
def import_file(workspace):
    path = workspace / "demo.md"
    path.write_text(VALID_IMPORT, encoding="utf-8")
    return path


@pytest.mark.usefixtures("workspace", "restore_logging")
class TestCLIFramework:
    """Test suite for app structure and global options."""

    def setup_method(self):
        """Set up test fixtures."""
        self.runner = CliRunner()

    def test_cli_app_creation(self):
        """Test that the app registers every command."""
        assert app.info.name == "case-study"

        result = self.runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        for command in ["import", "compile", "normalize", "template", "sections", "info", "version"]:
            assert command in result.output

    def test_version(self):
        """Test the version command prints the package version."""
        result = self.runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert f"Case Study Importer v{__version__}" in result.output

    def test_info(self):
        """Test the info command shows the configuration panel."""
        result = self.runner.invoke(app, ["info"])

        assert result.exit_code == 0
        assert "System Information" in result.output
        assert "Case Study Importer Information" in result.output
        assert "Log level: INFO" in result.output

    def test_missing_explicit_config_exits(self):
        """Test a --config-path that does not exist is a configuration error."""
        result = self.runner.invoke(app, ["--config-path", "nope.json", "version"])

        assert result.exit_code == 1
        assert "Configuration Error" in result.output
        assert "Configuration file not found" in result.output

    def test_invalid_config_file_exits(self, workspace):
        """Test schema violations in the default config file stop the CLI."""
        (workspace / "casestudy.config.json").write_text('{"output": {"indent": -1}}', encoding="utf-8")

        result = self.runner.invoke(app, ["version"])

        assert result.exit_code == 1
        assert "Configuration validation failed with 1 error(s)" in result.output
        assert "1. output.indent:" in result.output

    def test_setup_logging_verbose(self):
        """Test verbose mode overrides the configured level."""
        logger = setup_logging(verbose=True)

        assert logger.name == "case_study_importer"
        assert logger.level == logging.DEBUG

    def test_setup_logging_from_config(self, workspace):
        """Test level and format come from the configuration."""
        (workspace / "casestudy.config.json").write_text(
            '{"logging": {"level": "WARNING", "format": "json"}}', encoding="utf-8"
        )
        manager = ConfigManager(load_env=False)

        logger = setup_logging(config_manager=manager)

        assert logger.level == logging.WARNING
        assert not isinstance(logging.getLogger().handlers[0], RichHandler)

    def test_get_config_manager_reports_errors(self):
        """Test configuration errors become a clean exit."""
        with patch("case_study_importer.cli.cli.handle_cli_error") as mock_handle:
            with pytest.raises(typer.Exit):
                get_config_manager("does-not-exist.json")

        mock_handle.assert_called_once()
        assert isinstance(mock_handle.call_args[0][0], ConfigurationError)

    def test_verbose_flag_shows_debug_logs(self, import_file, workspace):
        """Test -v surfaces debug messages such as dropped sections."""
        output_file = workspace / "out.json"

        quiet = self.runner.invoke(app, ["import", str(import_file), "-o", str(output_file)])
        verbose = self.runner.invoke(app, ["-v", "import", str(import_file), "-o", str(output_file)])

        assert "Dropping unrecognized section" not in quiet.output
        assert "Dropping unrecognized section" in verbose.output

    def test_cli_main_handles_unexpected_errors(self):
        """Test the entry point turns unexpected exceptions into exit code 1."""
        with patch("case_study_importer.cli.cli.app", side_effect=RuntimeError("boom")):
            with patch("case_study_importer.cli.cli.handle_cli_error") as mock_handle:
                with pytest.raises(typer.Exit) as exc_info:
                    cli_main()

        assert exc_info.value.exit_code == 1
        mock_handle.assert_called_once()

    def test_cli_main_handles_keyboard_interrupt(self):
        """Test Ctrl-C exits with code 130."""
        with patch("case_study_importer.cli.cli.app", side_effect=KeyboardInterrupt):
            with pytest.raises(typer.Exit) as exc_info:
                cli_main()

        assert exc_info.value.exit_code == 130


@pytest.mark.usefixtures("workspace", "restore_logging")
class TestImportCommand:
    """Tests for ``case-study import``."""

    def setup_method(self):
        self.runner = CliRunner()

    def test_import_writes_payload(self, import_file, workspace):
        """Test a valid file is written as a JSON payload."""
        output_file = workspace / "out" / "demo.json"

        result = self.runner.invoke(app, ["import", str(import_file), "--output", str(output_file)])

        assert result.exit_code == 0
        assert "Wrote" in result.output
        payload = json.loads(output_file.read_text(encoding="utf-8"))
        assert payload["slug"] == "demo"
        assert sorted(payload["section_content"]) == ["problem", "solution"]
        assert "raw_sections" not in payload

    def test_import_raw_sections(self, import_file, workspace):
        """Test --raw-sections adds the section Markdown."""
        output_file = workspace / "demo.json"

        self.runner.invoke(app, ["import", str(import_file), "--raw-sections", "-o", str(output_file)])

        payload = json.loads(output_file.read_text(encoding="utf-8"))
        assert payload["raw_sections"] == {"problem": "Things were slow.", "solution": "We fixed it."}

    def test_import_failure_lists_every_error(self, workspace):
        """Test a failed import exits 1 and reports each problem."""
        bad = workspace / "bad.md"
        bad.write_text('---\ntitle: "Demo"\ncategory: "Marketing"\n---\n', encoding="utf-8")
        output_file = workspace / "bad.json"

        result = self.runner.invoke(app, ["import", str(bad), "-o", str(output_file)])

        assert result.exit_code == 1
        assert "Import failed" in result.output
        assert "Missing required field: slug" in result.output
        assert "Missing required field: short_description" in result.output
        assert 'Invalid category: "Marketing"' in result.output
        assert not output_file.exists()

    def test_import_missing_frontmatter(self, workspace):
        """Test a file without frontmatter reports the single fatal error."""
        bad = workspace / "plain.md"
        bad.write_text("## Problem\nNo metadata.\n", encoding="utf-8")

        result = self.runner.invoke(app, ["import", str(bad)])

        assert result.exit_code == 1
        assert "missing or malformed frontmatter" in result.output
        assert "Make sure the very first line of the file is exactly ---" in result.output

    def test_import_nonexistent_file(self):
        """Test Typer rejects a path that does not exist."""
        result = self.runner.invoke(app, ["import", "missing.md"])

        assert result.exit_code == 2

    def test_indent_from_config(self, import_file, workspace):
        """Test output.indent 0 produces compact JSON."""
        (workspace / "casestudy.config.json").write_text('{"output": {"indent": 0}}', encoding="utf-8")
        output_file = workspace / "demo.json"

        result = self.runner.invoke(app, ["import", str(import_file), "-o", str(output_file)])

        assert result.exit_code == 0
        assert output_file.read_text(encoding="utf-8").count("\n") == 1

    def test_ensure_ascii_from_environment(self, workspace, monkeypatch):
        """Test CASE_STUDY_ENSURE_ASCII escapes non-ASCII characters."""
        source = workspace / "arrow.md"
        source.write_text(VALID_IMPORT.replace("Things were slow.", "8 days → 2 days"), encoding="utf-8")
        output_file = workspace / "arrow.json"
        monkeypatch.setenv("CASE_STUDY_ENSURE_ASCII", "true")

        self.runner.invoke(app, ["import", str(source), "-o", str(output_file)])

        text = output_file.read_text(encoding="utf-8")
        assert "\\u2192" in text
        assert "→" not in text


@pytest.mark.usefixtures("workspace", "restore_logging")
class TestDocumentCommands:
    """Tests for compile, normalize, template and sections."""

    def setup_method(self):
        self.runner = CliRunner()

    def test_compile_from_stdin(self):
        """Test '-' reads Markdown from standard input."""
        result = self.runner.invoke(app, ["compile", "-"], input="# Title\n\n- a\n- b\n")

        assert result.exit_code == 0
        document = json.loads(result.output)
        assert [node["type"] for node in document["content"]] == ["heading", "bulletList"]

    def test_compile_file(self, workspace):
        """Test compiling a Markdown file to a JSON file."""
        source = workspace / "body.md"
        source.write_text("Some **bold** text.", encoding="utf-8")
        output_file = workspace / "body.json"

        result = self.runner.invoke(app, ["compile", str(source), "-o", str(output_file)])

        assert result.exit_code == 0
        paragraph = json.loads(output_file.read_text(encoding="utf-8"))["content"][0]
        assert paragraph["content"][1] == {"type": "text", "text": "bold", "marks": [{"type": "bold"}]}

    def test_compile_missing_file(self):
        """Test a missing source file exits 1."""
        result = self.runner.invoke(app, ["compile", "missing.md"])

        assert result.exit_code == 1
        assert "File not found: missing.md" in result.output

    def test_normalize(self, workspace):
        """Test editor JSON with pasted Markdown is repaired."""
        source = workspace / "content.json"
        source.write_text(json.dumps({
            "type": "doc",
            "content": [{"type": "paragraph", "content": [{"type": "text", "text": "# Heading\nSome text"}]}],
        }), encoding="utf-8")

        result = self.runner.invoke(app, ["normalize", str(source)])

        assert result.exit_code == 0
        document = json.loads(result.output)
        assert [node["type"] for node in document["content"]] == ["heading", "paragraph"]

    def test_normalize_invalid_json(self, workspace):
        """Test unparsable JSON exits 1."""
        source = workspace / "broken.json"
        source.write_text("{not json", encoding="utf-8")

        result = self.runner.invoke(app, ["normalize", str(source)])

        assert result.exit_code == 1
        assert "Invalid JSON" in result.output

    def test_normalize_invalid_tree(self, workspace):
        """Test JSON that is not a document tree exits 1."""
        source = workspace / "list.json"
        source.write_text("[]", encoding="utf-8")

        result = self.runner.invoke(app, ["normalize", str(source)])

        assert result.exit_code == 1
        assert "Document node must be an object" in result.output

    def test_normalize_invalid_attrs(self, workspace):
        """Test a node with non-object attrs is reported as a normalize failure."""
        source = workspace / "attrs.json"
        source.write_text(json.dumps({"type": "doc", "attrs": "x", "content": []}), encoding="utf-8")

        result = self.runner.invoke(app, ["normalize", str(source)])

        assert result.exit_code == 1
        assert "Normalize failed" in result.output
        assert "'attrs' of doc node must be an object" in result.output

    def test_template_to_stdout(self):
        """Test the template is printed unchanged."""
        result = self.runner.invoke(app, ["template"])

        assert result.exit_code == 0
        assert result.output == EXAMPLE_TEMPLATE

    def test_template_to_file(self, workspace):
        """Test the template can be written to a file."""
        output_file = workspace / "new-study.md"

        result = self.runner.invoke(app, ["template", "-o", str(output_file)])

        assert result.exit_code == 0
        assert output_file.read_text(encoding="utf-8") == EXAMPLE_TEMPLATE

    def test_sections_table(self):
        """Test the section table lists every heading and key."""
        result = self.runner.invoke(app, ["sections"])

        assert result.exit_code == 0
        assert "Recognized Sections" in result.output
        assert "## Goals / Success Criteria" in result.output
        assert "results_narrative" in result.output


class TestOutputHelpers:
    """Tests for output helpers."""

    def test_dump_json_indent(self):
        """Test indent 0 means compact output."""
        assert dump_json({"a": [1]}, indent=0) == '{"a": [1]}'
        assert dump_json({"a": 1}, indent=2) == '{\n  "a": 1\n}'

    def test_dump_json_ascii(self):
        """Test ensure_ascii controls escaping."""
        assert dump_json("→") == '"→"'
        assert dump_json("→", ensure_ascii=True) == '"\\u2192"'

    @pytest.mark.parametrize("error, label", [
        (ConfigurationError("bad"), "Configuration Error"),
        (FileNotFoundError("gone"), "File Not Found"),
        (PermissionError("locked"), "Permission Denied"),
        (RuntimeError("other"), "Error"),
    ])
    def test_handle_cli_error(self, capsys, error, label):
        """Test each error family gets its own label."""
        handle_cli_error(error)

        assert label in capsys.readouterr().err

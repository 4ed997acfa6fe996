"""Tests for the Click command line interface."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from formatkit.cli.main import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestFormatCommand:
    def test_format_file_infers_language(self, runner: CliRunner, fixtures_dir: Path):
        result = runner.invoke(cli, ["format", str(fixtures_dir / "style.css")])
        assert result.exit_code == 0
        assert result.output == "body {\n  color: red;\n}\n"

    def test_format_stdin(self, runner: CliRunner, person_json: str):
        result = runner.invoke(cli, ["format", "-l", "json", "-i", "4"], input=person_json)
        assert result.exit_code == 0
        assert '    "name": "John",' in result.output

    def test_tab_indent(self, runner: CliRunner):
        result = runner.invoke(cli, ["format", "-l", "json", "-i", "tab"], input='{"a":1}')
        assert result.exit_code == 0
        assert result.output == '{\n    "a": 1\n}\n'

    def test_invalid_input_exits_1(self, runner: CliRunner, fixtures_dir: Path):
        result = runner.invoke(cli, ["format", str(fixtures_dir / "broken.json")])
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_bad_indent(self, runner: CliRunner):
        result = runner.invoke(cli, ["format", "-l", "json", "-i", "zero"], input="{}")
        assert result.exit_code == 1
        assert "Invalid indent option" in result.output

    def test_output_file(self, runner: CliRunner, tmp_path: Path, person_json: str):
        out = tmp_path / "formatted.json"
        result = runner.invoke(cli, ["format", "-l", "json", "-o", str(out)], input=person_json)
        assert result.exit_code == 0
        assert out.read_text(encoding="utf-8") == '{\n  "name": "John",\n  "age": 30\n}\n'

    def test_save_uses_default_filename(self, runner: CliRunner):
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["format", "-l", "css", "--save"], input="a{b:c}")
            assert result.exit_code == 0
            assert Path("formatted.css").read_text(encoding="utf-8") == "a {\n  b: c;\n}\n"

    def test_config_indent_applies(self, runner: CliRunner, tmp_path: Path):
        config = tmp_path / "formatkit.yml"
        config.write_text("indent: 8\n")
        result = runner.invoke(
            cli, ["--config", str(config), "format", "-l", "json"], input='{"a":1}'
        )
        assert result.exit_code == 0
        assert result.output == '{\n        "a": 1\n}\n'

    def test_missing_config(self, runner: CliRunner, tmp_path: Path):
        result = runner.invoke(cli, ["--config", str(tmp_path / "nope.yml"), "languages"])
        assert result.exit_code == 1
        assert "Config file not found" in result.output

    def test_unknown_language_is_usage_error(self, runner: CliRunner):
        result = runner.invoke(cli, ["format", "-l", "yaml"], input="a: 1")
        assert result.exit_code == 2


class TestValidateCommand:
    def test_valid(self, runner: CliRunner, fixtures_dir: Path):
        result = runner.invoke(cli, ["validate", str(fixtures_dir / "users.xml")])
        assert result.exit_code == 0
        assert "VALID" in result.output
        assert "INVALID" not in result.output

    def test_invalid(self, runner: CliRunner):
        result = runner.invoke(cli, ["validate", "-l", "xml"], input="<a><b></a></b>")
        assert result.exit_code == 1
        assert "INVALID" in result.output
        assert "mismatched tag" in result.output


class TestOtherCommands:
    def test_minify(self, runner: CliRunner):
        result = runner.invoke(cli, ["minify", "-l", "json"], input='{\n  "a": 1\n}')
        assert result.exit_code == 0
        assert result.output == '{"a":1}\n'

    def test_sample(self, runner: CliRunner):
        result = runner.invoke(cli, ["sample", "css"])
        assert result.exit_code == 0
        assert result.output.startswith("body{margin:0;")

    def test_languages(self, runner: CliRunner):
        result = runner.invoke(cli, ["languages"])
        assert result.exit_code == 0
        for name in ("json", "typescript", "xml", "css", "html"):
            assert name in result.output
        assert "PARSER" in result.output
        assert "HEURISTIC" in result.output

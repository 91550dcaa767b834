"""Tests for CLI commands."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from figtokens.cli import app


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Run every command from an empty directory without TOKENS_SOURCE."""
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    monkeypatch.delenv("TOKENS_SOURCE", raising=False)
    return work


class TestGenerate:
    """Test the generate command."""

    def test_generate(self, cli_runner: CliRunner, tokens_file: Path, tmp_path: Path):
        output_dir = tmp_path / "out"
        result = cli_runner.invoke(app, ["generate", str(tokens_file), "-o", str(output_dir)])
        assert result.exit_code == 0, result.output
        assert "SCSS files generated" in result.output
        assert (output_dir / "index.scss").exists()
        assert (output_dir / "components/_button.scss").exists()

    def test_dry_run_writes_nothing(
        self, cli_runner: CliRunner, tokens_file: Path, tmp_path: Path
    ):
        output_dir = tmp_path / "out"
        result = cli_runner.invoke(
            app, ["generate", str(tokens_file), "-o", str(output_dir), "--dry-run"]
        )
        assert result.exit_code == 0, result.output
        assert "index.scss" in result.output
        assert not output_dir.exists()

    def test_source_from_manifest(
        self, cli_runner: CliRunner, tokens_file: Path, isolated_cwd: Path
    ):
        (isolated_cwd / "figtokens.toml").write_text(
            f'[source]\nlocation = {json.dumps(str(tokens_file))}\n\n[output]\ndirectory = "dist"\n'
        )
        result = cli_runner.invoke(app, ["generate"])
        assert result.exit_code == 0, result.output
        assert (isolated_cwd / "dist/base/_variables.scss").exists()

    def test_source_from_environment(
        self, cli_runner: CliRunner, tokens_file: Path, isolated_cwd: Path
    ):
        result = cli_runner.invoke(app, ["generate"], env={"TOKENS_SOURCE": str(tokens_file)})
        assert result.exit_code == 0, result.output
        assert (isolated_cwd / "css/index.scss").exists()

    def test_missing_source(self, cli_runner: CliRunner):
        result = cli_runner.invoke(app, ["generate"])
        assert result.exit_code == 1

    def test_bad_source(self, cli_runner: CliRunner, tmp_path: Path):
        bad = tmp_path / "bad.json"
        bad.write_text("{oops")
        result = cli_runner.invoke(app, ["generate", str(bad)])
        assert result.exit_code == 1

    def test_strict_fails_on_dangling(self, cli_runner: CliRunner, tmp_path: Path):
        tokens = tmp_path / "dangling.json"
        tokens.write_text(json.dumps({"core": {"a": {"type": "color", "value": "{nope.x}"}}}))
        result = cli_runner.invoke(app, ["generate", str(tokens), "--strict", "--dry-run"])
        assert result.exit_code == 1


class TestCheck:
    """Test the check command."""

    def test_clean(self, cli_runner: CliRunner, tokens_file: Path):
        result = cli_runner.invoke(app, ["check", str(tokens_file)])
        assert result.exit_code == 0, result.output
        assert "No dangling references" in result.output

    def test_themed_tokens_clean(self, cli_runner: CliRunner, tmp_path: Path):
        tokens = tmp_path / "themed.json"
        tokens.write_text(
            json.dumps({"Color Dark": {"text-color-dark": {"type": "color", "value": "#000"}}})
        )
        result = cli_runner.invoke(app, ["check", str(tokens)])
        assert result.exit_code == 0, result.output

    def test_dangling(self, cli_runner: CliRunner, tmp_path: Path):
        tokens = tmp_path / "dangling.json"
        tokens.write_text(json.dumps({"core": {"a": {"type": "color", "value": "{nope.x}"}}}))
        result = cli_runner.invoke(app, ["check", str(tokens)])
        assert result.exit_code == 1
        assert "--nope-x" in result.output
        assert "✗ 1 dangling reference(s)" in result.output


def test_version(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "figtokens version" in result.output

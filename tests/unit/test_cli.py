"""Tests for the tokencss command."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from tokencss import __version__
from tokencss.cli import app


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


def test_build_defaults(cli_runner: CliRunner, token_project: Path):
    """Test building with no manifest and only --project."""
    result = cli_runner.invoke(app, ["--project", str(token_project)])
    assert result.exit_code == 0
    assert "Tokens compiled to" in result.output
    css = (token_project / "dist" / "tokens.css").read_text(encoding="utf-8")
    assert css.startswith("/* Design Tokens - Auto-generated */")


def test_build_no_arguments(cli_runner: CliRunner, token_project: Path, monkeypatch):
    """Test that a bare invocation builds from the working directory."""
    monkeypatch.chdir(token_project)
    result = cli_runner.invoke(app, [])
    assert result.exit_code == 0
    assert "dist/tokens.css" in result.output
    assert (token_project / "dist" / "tokens.css").exists()


def test_build_with_manifest(cli_runner: CliRunner, token_project: Path):
    manifest = token_project / "tokens.toml"
    manifest.write_text(
        """
[tokens.themes]
default = "themes/default.json"
soft = "themes/soft.json"

[output]
path = "out/vars.css"
"""
    )
    result = cli_runner.invoke(app, ["--manifest", str(manifest)])
    assert result.exit_code == 0
    css = (token_project / "out" / "vars.css").read_text(encoding="utf-8")
    assert '[data-theme="soft"]' in css
    assert '[data-theme="noir"]' not in css


def test_output_override(cli_runner: CliRunner, token_project: Path, tmp_path: Path):
    target = tmp_path / "public" / "tokens.css"
    result = cli_runner.invoke(app, ["-p", str(token_project), "-o", str(target)])
    assert result.exit_code == 0
    assert target.exists()


def test_missing_document_fails(cli_runner: CliRunner, token_project: Path):
    """Test that a missing input exits non-zero and writes nothing."""
    (token_project / "semantics.json").unlink()
    result = cli_runner.invoke(app, ["--project", str(token_project)])
    assert result.exit_code == 1
    assert "Token document not found" in result.output
    assert not (token_project / "dist" / "tokens.css").exists()


def test_fail_policy(cli_runner: CliRunner, token_project: Path):
    (token_project / "themes" / "soft.json").write_text('{"accent": {"value": "{nowhere}"}}')
    result = cli_runner.invoke(app, ["--project", str(token_project), "--policy", "fail"])
    assert result.exit_code == 1
    assert "nowhere" in result.output
    assert not (token_project / "dist" / "tokens.css").exists()


def test_keep_policy(cli_runner: CliRunner, token_project: Path):
    (token_project / "themes" / "soft.json").write_text('{"accent": {"value": "{nowhere}"}}')
    result = cli_runner.invoke(app, ["--project", str(token_project), "--policy", "keep"])
    assert result.exit_code == 0
    css = (token_project / "dist" / "tokens.css").read_text(encoding="utf-8")
    assert "  --accent: {nowhere};\n" in css


def test_invalid_manifest(cli_runner: CliRunner, token_project: Path):
    (token_project / "tokens.toml").write_text('[resolve]\npolicy = "guess"\n')
    result = cli_runner.invoke(app, ["--project", str(token_project)])
    assert result.exit_code == 1
    assert "Unknown reference policy" in result.output


def test_version(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_malformed_manifest_reports_error(cli_runner: CliRunner, token_project: Path):
    """Test that a wrongly typed manifest value is reported, not raised."""
    (token_project / "tokens.toml").write_text("[tokens.themes]\ndefault = 1\n")
    result = cli_runner.invoke(app, ["--project", str(token_project)])
    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "tokens.themes.default must be a string" in result.output

"""Tests for CLI commands."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from canvas_studio.cli import app
from canvas_studio.core import configure_logging
from canvas_studio.domain.factory import button, container, text
from canvas_studio.engine import Document


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def restore_logging():
    """The CLI points logging at the runner's stderr; reset it afterwards."""
    yield
    configure_logging("WARNING")


@pytest.fixture
def document_file(tmp_path: Path) -> Path:
    doc = Document([container(text("Hello"), button("Go 🚀"))])
    path = tmp_path / "layout.json"
    path.write_text(doc.to_json(indent=2), encoding="utf-8")
    return path


def test_export_to_stdout(cli_runner: CliRunner, document_file: Path):
    result = cli_runner.invoke(app, ["export", str(document_file), "--target", "html"])
    assert result.exit_code == 0
    assert "<!DOCTYPE html>" in result.stdout
    assert "Go 🚀" in result.stdout


def test_export_to_file(cli_runner: CliRunner, document_file: Path, tmp_path: Path):
    output = tmp_path / "out" / "App.tsx"
    result = cli_runner.invoke(app, ["export", str(document_file), "-t", "react", "-o", str(output)])
    assert result.exit_code == 0
    assert "GeneratedLayout" in output.read_text(encoding="utf-8")


def test_export_unknown_target(cli_runner: CliRunner, document_file: Path):
    result = cli_runner.invoke(app, ["export", str(document_file), "--target", "cobol"])
    assert result.exit_code == 1
    assert "Unknown export target" in result.output


def test_export_missing_document(cli_runner: CliRunner, tmp_path: Path):
    result = cli_runner.invoke(app, ["export", str(tmp_path / "nope.json")])
    assert result.exit_code == 1
    assert "Document not found" in result.output


def test_export_invalid_document(cli_runner: CliRunner, tmp_path: Path):
    bad = tmp_path / "bad.json"
    bad.write_text('{"components": [{"kind": "custom", "name": "1x", "template": "<b>x</b>"}]}')
    result = cli_runner.invoke(app, ["export", str(bad)])
    assert result.exit_code == 1
    assert "Validation failed" in result.output


def test_targets_command(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["targets"])
    assert result.exit_code == 0
    assert "json_schema" in result.stdout
    assert ".d.ts" in result.stdout


def test_templates_command(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["templates", "--search", "login"])
    assert result.exit_code == 0
    assert "login-form" in result.stdout


def test_new_from_template(cli_runner: CliRunner, tmp_path: Path):
    output = tmp_path / "hero.json"
    result = cli_runner.invoke(app, ["new", "hero-section", "-o", str(output)])
    assert result.exit_code == 0
    doc = Document.from_json(output.read_text(encoding="utf-8"))
    assert len(doc) > 1


def test_new_unknown_template(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["new", "nope"])
    assert result.exit_code == 1


def test_version(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "canvas-studio" in result.stdout

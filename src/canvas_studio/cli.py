"""
Command-line interface.

    canvas-studio export layout.json --target react --output App.tsx
    canvas-studio targets
    canvas-studio templates
    canvas-studio new login-form --output layout.json
"""

from pathlib import Path

import pydantic
import typer
from returns.result import Failure

from . import __version__
from .core import JSONParseError, LogContext, configure_logging, get_settings
from .domain.errors import ValidationError
from .engine import Document
from .export import GENERATORS, ExportService
from .templates import TemplateLibrary

app = typer.Typer(
    help="Canvas Studio: export component layouts to code.",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"canvas-studio {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
) -> None:
    """Configure logging from settings before any command runs."""
    settings = get_settings()
    configure_logging(settings.log_level, settings.json_logs)


def _load_document(path: Path) -> Document:
    if not path.exists():
        typer.echo(f"Document not found: {path}", err=True)
        raise typer.Exit(code=1)
    try:
        return Document.from_json(path.read_text(encoding="utf-8"))
    except JSONParseError as e:
        typer.echo(f"Invalid JSON in {path}: {e}", err=True)
    except pydantic.ValidationError as e:
        typer.echo(f"Not a canvas document: {path}\n{e}", err=True)
    except ValidationError as e:
        typer.echo(e.user_message(), err=True)
    raise typer.Exit(code=1)


def _write(content: str, output: Path | None) -> None:
    if output is None:
        typer.echo(content, nl=False)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(content, encoding="utf-8")
    typer.echo(f"✓ Wrote {output}", err=True)


@app.command("export")
def export_command(
    document: Path = typer.Argument(..., help="Document JSON file"),
    target: str = typer.Option("leptos", "--target", "-t", help="Export target (see 'targets')"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Output file (default: stdout)"),
) -> None:
    """Generate code for a document."""
    with LogContext(document=str(document), target=target):
        doc = _load_document(document)
        result = ExportService().export(doc.components, target)
    if isinstance(result, Failure):
        typer.echo(result.failure().user_message(), err=True)
        raise typer.Exit(code=1)
    _write(result.unwrap(), output)


@app.command("targets")
def targets_command() -> None:
    """List export targets and their file extensions."""
    for name, generator_cls in GENERATORS.items():
        typer.echo(f"{name:<12} .{generator_cls.extension}")


@app.command("templates")
def templates_command(
    query: str | None = typer.Option(None, "--search", "-s", help="Filter by name, description or tag"),
) -> None:
    """List built-in layout templates."""
    templates = TemplateLibrary.search(query) if query else TemplateLibrary.list_all()
    if not templates:
        typer.echo("No templates found.")
        return
    for template in templates:
        typer.echo(f"{template.id:<18} {template.category.value:<12} {template.description}")


@app.command("new")
def new_command(
    template_id: str = typer.Argument(..., help="Template to start from (see 'templates')"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Output file (default: stdout)"),
) -> None:
    """Create a document from a built-in template."""
    template = TemplateLibrary.get(template_id)
    if template is None:
        typer.echo(f"Unknown template: {template_id}", err=True)
        raise typer.Exit(code=1)
    doc = Document()
    doc.apply_template(template)
    _write(doc.to_json(indent=2) + "\n", output)


__all__ = ["app"]

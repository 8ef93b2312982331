#!/usr/bin/env python3
"""
Command-line interface for placeholder-based document rendering.

Subcommands:
- render: Render a YAML/JSON document with a template from the store
- project: Print the placeholder map projected from a document
- catalog: Print the placeholder reference documentation
- check: Report placeholders in a template file that no document can fill
- list: List templates available in the store
"""

import os
import sys
from datetime import datetime
from pathlib import Path

import typer
from dotenv import load_dotenv
from jinja2 import TemplateNotFound
from omegaconf import OmegaConf

from vitae.contexts.rendering import TemplateStore, check_template, render_document_file
from vitae.contexts.rendering.logger import setup_rendering_logger
from vitae.contexts.templating import (
    PLACEHOLDER_CATALOG,
    InvalidDocumentStructureError,
    format_catalog_markdown,
    load_document,
    project,
)

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(
    add_completion=False,
    help="Render resume and cover-letter documents into placeholder templates",
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("render")
def render_command(
    document_file: Path = typer.Argument(
        ...,
        help="Path to .yaml or .json document file",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    template_name: str = typer.Argument(..., help="Template name in the store"),
    output: Path = typer.Option(
        None,
        "--output",
        "-o",
        help="Output HTML path (if not specified, prints to stdout)",
    ),
    templates_path: Path = typer.Option(
        None,
        "--templates-path",
        "-t",
        help="Template store directory (default: VITAE_TEMPLATES_PATH)",
    ),
    css: bool = typer.Option(
        True,
        "--css/--no-css",
        help="Prepend the template's stylesheet as a <style> block",
    ),
):
    """
    Render a document with a template from the store.

    Examples:\n

        $ render_document.py render jane.yaml classic -o jane.html

        $ render_document.py render jane.json plain --no-css
    """
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_dir = LOGS_PATH / f"render_{timestamp}"
    # Keep stdout clean for the HTML when no output file is given
    console_sink = sys.stderr if output is None else sys.stdout
    log_file = setup_rendering_logger(
        log_dir, template_name=template_name, console_sink=console_sink
    )

    try:
        result = render_document_file(
            document_file,
            template_name,
            output_path=output,
            store=TemplateStore(templates_path),
            include_css=css,
        )
    except (InvalidDocumentStructureError, TemplateNotFound) as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if output is None:
        typer.echo(result.html)
    else:
        typer.secho(f"✓ Rendered {document_file.name} -> {output}", fg=typer.colors.GREEN)

    if result.unknown_placeholders:
        typer.secho(
            f"Warning: {len(result.unknown_placeholders)} undocumented placeholders were stripped: "
            f"{', '.join(result.unknown_placeholders)}",
            fg=typer.colors.YELLOW,
            err=True,
        )

    typer.echo(f"  Log: {log_file}", err=True)


@app.command("project")
def project_command(
    document_file: Path = typer.Argument(
        ...,
        help="Path to .yaml or .json document file",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    non_empty: bool = typer.Option(
        False,
        "--non-empty",
        help="Only show placeholders with a value",
    ),
):
    """
    Print the placeholder map projected from a document, as YAML.

    Example:\n

        $ render_document.py project jane.yaml --non-empty
    """
    try:
        placeholders = project(load_document(document_file))
    except InvalidDocumentStructureError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if non_empty:
        placeholders = {key: value for key, value in placeholders.items() if value}

    typer.echo(OmegaConf.to_yaml(OmegaConf.create(dict(sorted(placeholders.items())))))


@app.command("catalog")
def catalog_command(
    category: str = typer.Option(
        None,
        "--category",
        "-c",
        help=f"Only show one category ({', '.join(PLACEHOLDER_CATALOG)})",
    ),
):
    """Print the placeholder reference as markdown."""
    if category is not None and category not in PLACEHOLDER_CATALOG:
        typer.secho(
            f"Unknown category '{category}'. Available: {', '.join(PLACEHOLDER_CATALOG)}",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1)

    typer.echo(format_catalog_markdown(category))


@app.command("check")
def check_command(
    template_file: Path = typer.Argument(
        ...,
        help="Path to template HTML file",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
):
    """
    Report placeholders in a template that no document can fill.

    Exits with code 1 when any are found.
    """
    unknown = check_template(template_file.read_text(encoding="utf-8"))

    if not unknown:
        typer.secho(f"✓ {template_file.name}: all placeholders documented", fg=typer.colors.GREEN)
        return

    typer.secho(
        f"✗ {template_file.name}: {len(unknown)} undocumented placeholders", fg=typer.colors.RED
    )
    for key in unknown:
        typer.echo(f"  • {{{key}}}")
    raise typer.Exit(code=1)


@app.command("list")
def list_command(
    templates_path: Path = typer.Option(
        None,
        "--templates-path",
        "-t",
        help="Template store directory (default: VITAE_TEMPLATES_PATH)",
    ),
):
    """List templates available in the store."""
    store = TemplateStore(templates_path)
    names = store.list_templates()

    if not names:
        typer.secho(f"No templates found in {store.templates_path}", fg=typer.colors.YELLOW, err=True)
        raise typer.Exit(code=1)

    typer.secho(f"\nTemplates in {store.templates_path} ({len(names)}):", fg=typer.colors.BLUE, bold=True)
    for name in names:
        has_css = store.get_template(name).css is not None
        typer.echo(f"  • {name}{' (+css)' if has_css else ''}")


if __name__ == "__main__":
    app()

"""
Document commands for the case study CLI.

This module implements the import pipeline commands: extracting a case
study from an import file, compiling Markdown, normalizing editor JSON,
and emitting the author template and the section heading table.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import typer
from rich.table import Table

from ..core.document_processor import (
    EXAMPLE_TEMPLATE,
    SECTION_HEADINGS,
    extract,
    markdown_to_document,
    normalize_json,
)
from ..exceptions.import_exceptions import CaseStudyImportError, DocumentTreeError
from .output import console, dump_json, emit, print_errors, print_suggestions

logger = logging.getLogger(__name__)


def _json_settings(ctx: typer.Context) -> Dict[str, Any]:
    """Output settings from the loaded configuration, if any."""
    config_manager = (ctx.obj or {}).get("config_manager")
    if config_manager is None:
        return {"indent": 2, "ensure_ascii": False}
    return {
        "indent": config_manager.get("output.indent", 2),
        "ensure_ascii": config_manager.get("output.ensure_ascii", False),
    }


def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def import_case_study(
    ctx: typer.Context,
    file: Path = typer.Argument(
        ...,
        help="Markdown import file",
        exists=True,
        dir_okay=False,
        readable=True,
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the JSON payload to this file instead of stdout",
    ),
    raw_sections: bool = typer.Option(
        False,
        "--raw-sections",
        help="Include the raw Markdown of each section in the payload",
    ),
) -> None:
    """
    Extract and validate a case study from a Markdown import file.

    Every validation problem is reported at once; nothing is written when
    the file fails validation.
    """
    try:
        case_study = extract(_read_text(file)).raise_for_failure()
    except CaseStudyImportError as e:
        logger.debug(f"Import of {file} failed ({type(e).__name__})")
        print_errors(f"Import failed: {file}", e.errors or [e.args[0]])
        print_suggestions(e.suggestions)
        raise typer.Exit(1)

    payload = case_study.to_dict(include_raw_sections=raw_sections)
    emit(dump_json(payload, **_json_settings(ctx)), output)


def compile_markdown(
    ctx: typer.Context,
    source: str = typer.Argument(
        ...,
        help="Markdown file to compile, or - to read standard input",
        metavar="FILE",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the document JSON to this file instead of stdout",
    ),
) -> None:
    """Compile Markdown text into rich-document JSON."""
    if source == "-":
        text = sys.stdin.read()
    else:
        path = Path(source)
        if not path.is_file():
            print_errors("Compile failed", [f"File not found: {source}"])
            raise typer.Exit(1)
        text = _read_text(path)

    document = markdown_to_document(text)
    emit(dump_json(document.to_dict(), **_json_settings(ctx)), output)


def normalize_document_file(
    ctx: typer.Context,
    file: Path = typer.Argument(
        ...,
        help="Rich-document JSON file",
        exists=True,
        dir_okay=False,
        readable=True,
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the normalized JSON to this file instead of stdout",
    ),
) -> None:
    """Convert raw Markdown left inside rich-document JSON into structure."""
    try:
        data = json.loads(_read_text(file))
        normalized = normalize_json(data)
    except json.JSONDecodeError as e:
        print_errors(f"Normalize failed: {file}", [f"Invalid JSON: {e}"])
        raise typer.Exit(1)
    except DocumentTreeError as e:
        print_errors(f"Normalize failed: {file}", [e.args[0]])
        raise typer.Exit(1)

    emit(dump_json(normalized, **_json_settings(ctx)), output)


def write_template(
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the template to this file instead of stdout",
    ),
) -> None:
    """Emit the Markdown import template for authors."""
    emit(EXAMPLE_TEMPLATE, output)


def list_sections() -> None:
    """Show the recognized section headings and the keys they map to."""
    table = Table(title="Recognized Sections")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Heading", style="cyan")
    table.add_column("Key", style="green")

    for position, entry in enumerate(SECTION_HEADINGS, 1):
        table.add_row(str(position), f"## {entry.heading}", entry.key)

    console.print(table)

"""
Console output helpers shared by the CLI commands.

Command results (JSON, the template) go to stdout; logs and error
reports go to stderr so results can be piped.
"""

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Optional

import typer
from rich.console import Console
from rich.markup import escape

from ..exceptions.config_exceptions import ConfigurationError
from ..exceptions.import_exceptions import CaseStudyImportError

# Initialize consoles for rich output
console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)

logger = logging.getLogger(__name__)


def print_errors(title: str, errors: Iterable[str]) -> None:
    """Print a red title followed by one line per error."""
    err_console.print(f"[red]{escape(title)}[/red]")
    for error in errors:
        err_console.print(f"  [red]✗[/red] {escape(error)}")


def print_suggestions(suggestions: Iterable[str]) -> None:
    for suggestion in suggestions:
        err_console.print(f"  [yellow]→[/yellow] {escape(suggestion)}")


def print_success(message: str) -> None:
    err_console.print(f"[green]✓[/green] {escape(message)}")


def dump_json(data: Any, indent: Optional[int] = 2, ensure_ascii: bool = False) -> str:
    return json.dumps(data, indent=indent or None, ensure_ascii=ensure_ascii)


def emit(text: str, output: Optional[Path] = None) -> None:
    """Write text to a file, or to stdout when no file is given."""
    if output is None:
        typer.echo(text, nl=not text.endswith("\n"))
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text if text.endswith("\n") else text + "\n", encoding="utf-8")
    print_success(f"Wrote {output}")


def handle_cli_error(error: Exception) -> None:
    """
    Handle CLI errors with user-friendly messages.

    Args:
        error: The exception that occurred
    """
    if isinstance(error, ConfigurationError):
        err_console.print(f"[red]Configuration Error:[/red] {escape(str(error))}")
        logger.debug("Configuration error details", exc_info=True)
    elif isinstance(error, CaseStudyImportError):
        err_console.print(f"[red]Import Error:[/red] {escape(str(error))}")
        logger.debug("Import error details", exc_info=True)
    elif isinstance(error, FileNotFoundError):
        err_console.print(f"[red]File Not Found:[/red] {escape(str(error))}")
        logger.debug("File not found details", exc_info=True)
    elif isinstance(error, PermissionError):
        err_console.print(f"[red]Permission Denied:[/red] {escape(str(error))}")
        logger.debug("Permission error details", exc_info=True)
    else:
        err_console.print(f"[red]Error:[/red] {escape(str(error))}")
        logger.debug("Unexpected error details", exc_info=True)

"""
Command-line interface for the case study importer.

Exposes the Typer application and the console script entry point.
"""

from .cli import app, cli_main

__all__ = ["app", "cli_main"]

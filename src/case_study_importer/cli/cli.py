"""
Case Study Importer CLI Application.

Main entry point for the ``case-study`` command-line interface. Wires the
document commands to a Typer app and sets up configuration and logging
from the global options.
"""

import logging
from typing import Optional

import typer
from rich.panel import Panel
from rich.text import Text

from .. import __version__
from ..exceptions.config_exceptions import ConfigurationError
from ..utils.config import ConfigManager
from ..utils.logging_config import LogFormat, LoggingManager, LogLevel
from .documents import (
    compile_markdown,
    import_case_study,
    list_sections,
    normalize_document_file,
    write_template,
)
from .output import console, err_console, handle_cli_error

# Create main Typer app
app = typer.Typer(
    name="case-study",
    help="Import Markdown case studies into rich-document JSON",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("import")(import_case_study)
app.command("compile")(compile_markdown)
app.command("normalize")(normalize_document_file)
app.command("template")(write_template)
app.command("sections")(list_sections)

# Global state
_config_manager: Optional[ConfigManager] = None
_logger: Optional[logging.Logger] = None


def setup_logging(verbose: bool = False, config_manager: Optional[ConfigManager] = None) -> logging.Logger:
    """
    Set up logging configuration.

    Args:
        verbose: Enable verbose (DEBUG) logging, overriding the configured level
        config_manager: Source of ``logging.level`` and ``logging.format``

    Returns:
        Configured logger instance
    """
    log_level = LogLevel.INFO
    log_format = LogFormat.STANDARD

    if config_manager is not None:
        log_level = LogLevel.from_name(config_manager.get("logging.level", "INFO"))
        log_format = LogFormat(config_manager.get("logging.format", "standard"))

    if verbose:
        log_level = LogLevel.DEBUG

    LoggingManager(log_level=log_level, log_format=log_format, console=err_console)

    logger = logging.getLogger("case_study_importer")
    logger.setLevel(log_level.value)

    return logger


def get_config_manager(config_path: Optional[str] = None) -> ConfigManager:
    """
    Get or create the global configuration manager.

    Args:
        config_path: Optional path to configuration file

    Returns:
        ConfigManager instance with its configuration loaded

    Raises:
        typer.Exit: If configuration loading fails
    """
    global _config_manager

    if _config_manager is None or config_path:
        try:
            manager = ConfigManager(config_file=config_path, load_env=True)
            manager.load_config()
        except ConfigurationError as e:
            handle_cli_error(e)
            raise typer.Exit(1)
        _config_manager = manager

    return _config_manager


def get_logger() -> logging.Logger:
    """Get the global logger instance."""
    global _logger
    if _logger is None:
        _logger = setup_logging()
    return _logger


# Global callback for common options
@app.callback()
def main(
    ctx: typer.Context,
    config_path: Optional[str] = typer.Option(
        None,
        "--config-path",
        "-c",
        help="Path to configuration file (default: casestudy.config.json)",
        metavar="PATH",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging (DEBUG level)",
    ),
) -> None:
    """
    Case Study Importer - turn Markdown import files into structured content.

    Common workflows:
    • Start a new case study: case-study template -o my-study.md
    • Check and convert it: case-study import my-study.md -o my-study.json
    • Repair pasted Markdown in editor JSON: case-study normalize content.json

    For detailed help on any command, use: case-study <command> --help
    """
    global _config_manager, _logger

    _config_manager = None
    config_manager = get_config_manager(config_path)
    _logger = setup_logging(verbose, config_manager)

    ctx.obj = {
        "config_path": config_path,
        "verbose": verbose,
        "config_manager": config_manager,
        "logger": _logger,
    }


@app.command()
def info() -> None:
    """Show configuration status and the recognized section count."""
    config_manager = get_config_manager()
    summary = config_manager.get_config_summary()

    info_text = Text()
    info_text.append("Case Study Importer Information\n\n", style="bold blue")
    info_text.append(f"Version: {__version__}\n")
    info_text.append(f"Config file: {summary['config_file']}")
    info_text.append(" (found)\n" if summary["config_file_exists"] else " (not found, using defaults)\n")
    info_text.append(f"Project root: {summary['project_root']}\n\n")

    info_text.append("Configuration:\n", style="bold")
    info_text.append(f"• Log level: {config_manager.get('logging.level')}\n")
    info_text.append(f"• Log format: {config_manager.get('logging.format')}\n")
    info_text.append(f"• JSON indent: {config_manager.get('output.indent')}\n")
    for config_key, env_var in summary["environment_overrides"].items():
        info_text.append(f"• {config_key} overridden by {env_var}\n")

    console.print(Panel(info_text, title="System Information", border_style="blue"))


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"Case Study Importer [blue]v{__version__}[/blue]")


def cli_main() -> None:
    """
    Main CLI entry point with error handling.

    This function is called by the console script entry point.
    """
    try:
        app()
    except typer.Exit:
        raise
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Operation cancelled by user[/yellow]")
        raise typer.Exit(130)
    except Exception as e:
        handle_cli_error(e)
        raise typer.Exit(1)


if __name__ == "__main__":
    cli_main()

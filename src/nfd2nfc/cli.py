# Author: PB
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/nfd2nfc/cli.py

"""
Command line entry point for nfd2nfc.

Parses options, builds the run configuration and hands off to the
renamer. Only startup problems change the exit code; per-entry failures
are reported on stderr and the run still exits 0.
"""

# Standard library imports
from pathlib import Path
from typing import Optional

# Third-party imports
import typer
from loguru import logger
from rich.console import Console

# Local imports
from nfd2nfc import __version__
from nfd2nfc.config import build_run_config
from nfd2nfc.exceptions import ConfigError
from nfd2nfc.logging_setup import setup_logging
from nfd2nfc.renamer import convert_tree
from nfd2nfc.reporting import ConsoleReporter

app = typer.Typer(
    help="Convert file and directory names from NFD to NFC Unicode normalization form.",
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        Console().print(f"nfd2nfc version {__version__}")
        raise typer.Exit()


def handle_startup_error(console: Console, operation: str, error: Exception) -> None:
    """Report a fatal startup error and exit 1."""
    console.print(f"[red]✗[/red] Error {operation}: {error}")
    raise typer.Exit(1)


@app.command()
def main(
    directory: Optional[Path] = typer.Option(
        None, "--directory", "-d",
        help="Directory to process (default: current directory)"
    ),
    recursive: bool = typer.Option(False, "--recursive", "-r", help="Process directories recursively"),
    dry_run: bool = typer.Option(
        False, "--dry-run",
        help="Show what would be done without actually renaming files"
    ),
    max_depth: Optional[int] = typer.Option(
        None, "--max-depth",
        help="Limit recursion to this many levels below the directory (implies --recursive)"
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress per-file rename lines"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=version_callback, is_eager=True,
        help="Show version and exit"
    ),
) -> None:
    """Rename NFD-encoded names under DIRECTORY to their NFC form."""
    setup_logging(debug=debug)

    console = Console()
    error_console = Console(stderr=True)

    try:
        config = build_run_config(
            directory=directory,
            recursive=recursive,
            dry_run=dry_run,
            max_depth=max_depth,
        )
    except ConfigError as e:
        logger.debug(f"Startup failed: {e}")
        handle_startup_error(error_console, "validating options", e)

    reporter = ConsoleReporter(console, error_console, quiet=quiet)
    convert_tree(config, reporter)

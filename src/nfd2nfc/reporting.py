# Author: PB
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/nfd2nfc/reporting.py

"""
Presentation layer for a conversion run.

The renamer only talks to the Reporter protocol. ConsoleReporter is the
rich implementation used by the CLI; tests can plug in their own.
"""

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from rich.console import Console
from rich.markup import escape

from nfd2nfc import __version__
from nfd2nfc.config import RunConfig

if TYPE_CHECKING:
    from nfd2nfc.renamer import RunSummary


class Reporter(Protocol):
    """Sink for everything a run wants to tell the user."""

    def report_start(self, config: RunConfig) -> None:
        ...

    def report_rename(self, source: Path, target: Path, dry_run: bool) -> None:
        """Called once per entry whose name changes, in both modes."""
        ...

    def report_error(self, path: Path, error: Exception) -> None:
        """Called for each per-entry traversal or rename failure."""
        ...

    def report_summary(self, summary: "RunSummary", dry_run: bool) -> None:
        ...


def _display(value: object) -> str:
    # Undecodable names carry lone surrogates that rich cannot render
    return escape(str(value).encode("utf-8", "backslashreplace").decode("utf-8"))


class ConsoleReporter:
    """Rich console output for the nfd2nfc command."""

    def __init__(self, console: Console, error_console: Console, quiet: bool = False):
        self.console = console
        self.error_console = error_console
        self.quiet = quiet

    def report_start(self, config: RunConfig) -> None:
        tag = " [bright_yellow]\\[DRY RUN][/bright_yellow]" if config.dry_run else ""
        self.console.print(
            f"[bold bright_green]NFD to NFC Filename Converter[/bold bright_green] "
            f"[bright_blue]v{__version__}[/bright_blue]{tag}"
        )
        self.console.print(f"Processing directory: [cyan]{_display(config.directory)}[/cyan]")
        if config.recursive:
            depth = "unlimited" if config.max_depth is None else str(config.max_depth)
            self.console.print(f"Recursive: depth {depth}")

    def report_rename(self, source: Path, target: Path, dry_run: bool) -> None:
        if self.quiet:
            return
        self.console.print(
            f"[bright_yellow]Renaming:[/bright_yellow] "
            f"'[red]{_display(source)}[/red]' → '[green]{_display(target)}[/green]'"
        )

    def report_error(self, path: Path, error: Exception) -> None:
        self.error_console.print(f"[red]✗[/red] Error processing {_display(path)}: {_display(error)}")

    def report_summary(self, summary: "RunSummary", dry_run: bool) -> None:
        self.console.print()
        self.console.print(f"[bold bright_cyan]Summary:[/bold bright_cyan] {'-' * 30}")
        self.console.print(f"Total files/directories processed: [bold]{summary.total_processed}[/bold]")
        self.console.print(f"Files/directories converted: [bold]{summary.total_converted}[/bold]")
        if summary.total_failed:
            self.console.print(f"[red]Failed renames (included in converted): {summary.total_failed}[/red]")

        if dry_run:
            self.console.print()
            self.console.print("[bright_yellow]This was a dry run. No files were actually renamed.[/bright_yellow]")
            self.console.print("[bright_yellow]Run without --dry-run to perform the conversion.[/bright_yellow]")

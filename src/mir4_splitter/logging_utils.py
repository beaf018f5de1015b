"""
Console logging and Rich output for split runs.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

# Excel readers and writers that log below WARNING during a split
QUIET_LOGGERS = ("openpyxl", "xlsxwriter", "xlrd")


def setup_logging(verbose: bool = False) -> None:
    """
    Route split-run log records to stderr through Rich.

    Per-language skips are logged at DEBUG, so they only show with --verbose.

    Args:
        verbose: Show DEBUG records as well as INFO
    """
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        markup=True,
        rich_tracebacks=True
    )

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[handler]
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def print_summary_table(summary: dict, console: Optional[Console] = None) -> None:
    """
    Print a formatted summary table of the split operation.

    Args:
        summary: Summary dictionary from split_workbook
        console: Rich console instance (creates new one if None)
    """
    if console is None:
        console = Console()

    table = Table(title="MIR4 Split Summary", show_header=True, header_style="bold magenta")
    table.add_column("Property", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")

    table.add_row("Input File", summary.get('input_file', 'Unknown'))
    table.add_row("Mode", summary.get('mode', 'Unknown'))
    table.add_row("Total Input Rows", str(summary.get('total_rows', 0)))
    table.add_row("Header Columns", str(summary.get('header_columns', 0)))
    table.add_row("Languages Found", ", ".join(summary.get('languages_found', [])) or "-")
    table.add_row("Languages Skipped", ", ".join(summary.get('languages_skipped', [])) or "-")
    table.add_row("Files Created", str(summary.get('files_created', 0)))

    console.print()
    console.print(table)


def print_manifest_table(manifest_entries: list, console: Optional[Console] = None) -> None:
    """
    Print a formatted table of created files.

    Args:
        manifest_entries: List of manifest entry dictionaries
        console: Rich console instance (creates new one if None)
    """
    if console is None:
        console = Console()

    if not manifest_entries:
        console.print("[yellow]No files were created.[/yellow]")
        return

    table = Table(title="Created Files", show_header=True, header_style="bold green")
    table.add_column("Language", style="cyan", no_wrap=True)
    table.add_column("Rows", justify="right", style="magenta")
    table.add_column("Columns", justify="right", style="blue")
    table.add_column("File", style="white", no_wrap=False)

    for entry in manifest_entries:
        table.add_row(
            entry.get('language', 'Unknown'),
            str(entry.get('row_count', 0)),
            str(entry.get('column_count', 0)),
            entry.get('filename', 'Unknown')
        )

    console.print()
    console.print(table)


def print_success_message(files_created: int, archive_path: str, console: Optional[Console] = None) -> None:
    """
    Print a success message with file count and archive path.

    Args:
        files_created: Number of language workbooks in the archive
        archive_path: Path of the written ZIP file
        console: Rich console instance (creates new one if None)
    """
    if console is None:
        console = Console()

    console.print()
    console.print(f"✅ [bold green]Split complete: {files_created} files packaged in:[/bold green]")
    console.print(f"   [cyan]{archive_path}[/cyan]")


def print_error_message(error: str, console: Optional[Console] = None) -> None:
    """Report a failed split (unreadable workbook, empty sheet, bad option)."""
    console = console or Console()
    console.print()
    console.print(f"❌ [bold red]Error:[/bold red] {error}")


def print_warning_message(warning: str, console: Optional[Console] = None) -> None:
    """Report a run that finished without producing anything useful."""
    console = console or Console()
    console.print(f"⚠️ [bold yellow]Nothing to package:[/bold yellow] {warning}")


def print_progress_step(step: str, console: Optional[Console] = None) -> None:
    """Show the current phase or percentage of a split run."""
    console = console or Console()
    console.print(f"⏳ [blue]{step}[/blue]")

"""
Command-line interface for the MIR4 splitter using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from . import __version__
from .core import split_file, validate_inputs
from .exporters import write_zip_archive
from .logging_utils import (
    setup_logging,
    print_summary_table,
    print_manifest_table,
    print_success_message,
    print_error_message,
    print_warning_message,
    print_progress_step
)

app = typer.Typer(
    name="mir4-split",
    help="Split a MIR4 localization workbook into one workbook per language",
    add_completion=False
)

console = Console()


@app.command()
def split(
    input_file: Annotated[
        Path,
        typer.Option("--input", "-i", help="Path to input Excel file", exists=True, file_okay=True, dir_okay=False)
    ],
    mode: Annotated[
        str,
        typer.Option("--mode", "-m", help="Split mode: 'dialogue' ((M)/(F) columns) or 'master' (single column)")
    ] = "dialogue",
    out: Annotated[
        Path,
        typer.Option("--out", "-o", help="Output directory for the ZIP archive")
    ] = Path("./MIR4_Splits"),
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging")
    ] = False,
) -> None:
    """
    Split the first sheet of a workbook into one workbook per language.

    Every output keeps the mode's common columns followed by the language's
    own columns, and all outputs are packaged as MIR4_<Mode>_Split.zip.

    Examples:

        # Dialogue table, (M)/(F) columns per language
        mir4-split split --input "ABC_v2.xlsx"

        # String master table into a custom directory
        mir4-split split --input "XYZ.xlsx" --mode master --out ./splits
    """
    setup_logging(verbose)

    try:
        mode = mode.lower()
        validate_inputs(input_file, out, mode)

        print_progress_step("Splitting workbook by language...")

        def report(percent: int, completed: bool) -> None:
            if not completed:
                print_progress_step(f"{percent}%", console)

        result = split_file(input_file, mode, progress_callback=report)

        print_summary_table(result, console)

        if not result['archive']:
            print_warning_message("No language columns matched. No archive written.", console)
            return

        print_manifest_table(result['manifest_entries'], console)

        archive_path = write_zip_archive(result['archive'], out, mode)
        print_success_message(result['files_created'], str(archive_path), console)

    except Exception as e:
        print_error_message(str(e), console)
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"mir4-split version {__version__}")


@app.command()
def info() -> None:
    """Show information about the tool."""
    console.print("""
[bold blue]MIR4 Excel Splitter[/bold blue]

Splits a multi-language localization workbook into one workbook per language.

[bold]Languages:[/bold]
EN, CT, CS, JA, TH, ES-LATAM, PT-BR

[bold]Modes:[/bold]
• dialogue: columns A-H and the last column, plus '<LANG> (M)' and '<LANG> (F)'
• master: columns A-F, N and O, plus '<LANG>'

[bold]Supported file formats:[/bold]
• .xlsx / .xlsm (Excel 2007+)
• .xls (Excel 97-2003)

Languages without matching header columns are left out of the archive.

Use --help for detailed usage information.
""")


if __name__ == "__main__":
    app()

"""
Core orchestration logic for per-language workbook splitting.
"""

from pathlib import Path
from typing import Any, Callable, Dict, Optional
import logging

from .detect import LANGUAGES, MODES, SplitMode, build_column_selection, project_grid
from .exceptions import EmptySheetError, SplitCancelledError
from .exporters import export_language_workbook
from .io_utils import (
    SUPPORTED_SUFFIXES,
    derive_prefix,
    ensure_out_dir,
    output_filename,
    read_grid_from_bytes
)

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, bool], None]


def split_workbook(
    input_bytes: bytes,
    filename: str,
    mode: SplitMode,
    progress_callback: Optional[ProgressCallback] = None,
    cancel_event: Optional[Any] = None
) -> Dict[str, Any]:
    """
    Split a localization workbook into one workbook per language.

    Only the first sheet is read. Its first row is the header, used to
    look up each language's columns by name. Languages whose columns are
    missing are skipped without error.

    Args:
        input_bytes: Raw bytes of the input workbook
        filename: Original input filename, used for the output prefix
        mode: Split mode ('dialogue' or 'master')
        progress_callback: Called with (percent, completed) after each
            language written and once at the end
        cancel_event: Object with is_set(), checked before each language

    Returns:
        Summary dictionary; 'archive' maps output filenames to workbook bytes

    Raises:
        ParseError: If the input is not a readable workbook
        EmptySheetError: If the first sheet has no rows
        SplitCancelledError: If cancel_event was set during the run
    """
    if mode not in MODES:
        raise ValueError(f"Mode must be 'dialogue' or 'master', got: {mode}")

    logger.info(f"Starting workbook split: {filename} ({mode} mode)")

    grid = read_grid_from_bytes(input_bytes)
    if not grid:
        raise EmptySheetError("The first sheet contains no data")

    header = grid[0]
    logger.info(f"Loaded {len(grid)} rows, header has {len(header)} columns")

    prefix = derive_prefix(filename)
    archive: Dict[str, bytes] = {}
    manifest_entries = []
    skipped = []

    for i, language in enumerate(LANGUAGES):
        if cancel_event is not None and cancel_event.is_set():
            logger.info(f"Split of {filename} cancelled before {language}")
            raise SplitCancelledError(f"Split of '{filename}' was cancelled")

        selection = build_column_selection(header, language, mode)
        if selection is None:
            logger.debug(f"No {mode} columns for {language}, skipping")
            skipped.append(language)
            continue

        rows = project_grid(grid, selection)
        output_name = output_filename(prefix, mode, language)
        archive[output_name] = export_language_workbook(rows)

        manifest_entries.append({
            'language': language,
            'filename': output_name,
            'row_count': len(rows),
            'column_count': len(selection)
        })
        logger.info(f"Created {output_name} with {len(rows)} rows")

        if progress_callback:
            progress_callback(round(100 * (i + 1) / len(LANGUAGES)), False)

    if progress_callback:
        progress_callback(100, True)

    return {
        'input_file': filename,
        'mode': mode,
        'total_rows': len(grid),
        'header_columns': len(header),
        'languages_found': [entry['language'] for entry in manifest_entries],
        'languages_skipped': skipped,
        'files_created': len(archive),
        'archive': archive,
        'manifest_entries': manifest_entries
    }


def split_file(
    input_path: Path,
    mode: SplitMode,
    progress_callback: Optional[ProgressCallback] = None,
    cancel_event: Optional[Any] = None
) -> Dict[str, Any]:
    """
    Split a workbook read from disk.

    Args:
        input_path: Path to the input workbook
        mode: Split mode
        progress_callback: See split_workbook
        cancel_event: See split_workbook

    Returns:
        Summary dictionary from split_workbook
    """
    return split_workbook(
        input_path.read_bytes(),
        input_path.name,
        mode,
        progress_callback=progress_callback,
        cancel_event=cancel_event
    )


def validate_inputs(
    input_path: Path,
    out_dir: Path,
    mode: str
) -> None:
    """
    Validate input parameters.

    Args:
        input_path: Path to input file
        out_dir: Output directory
        mode: Split mode

    Raises:
        ValueError: If validation fails
    """
    if not input_path.exists():
        raise ValueError(f"Input file does not exist: {input_path}")

    if not input_path.suffix.lower() in SUPPORTED_SUFFIXES:
        raise ValueError(f"Input file must be Excel format (.xlsx, .xlsm or .xls): {input_path}")

    if mode not in MODES:
        raise ValueError(f"Mode must be 'dialogue' or 'master', got: {mode}")

    try:
        ensure_out_dir(out_dir)
    except Exception as e:
        raise ValueError(f"Cannot create output directory {out_dir}: {e}")

"""
I/O utilities for reading workbooks and naming output files.
"""

import io
import logging
from pathlib import Path
from typing import Any, List

import openpyxl
import xlrd

from .detect import MODE_DISPLAY_NAMES, MODE_FILE_SUFFIXES, SplitMode
from .exceptions import ParseError

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = ['.xlsx', '.xlsm', '.xls']

ZIP_MAGIC = b"PK\x03\x04"
OLE2_MAGIC = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1"

Grid = List[List[Any]]


def read_grid_from_bytes(data: bytes) -> Grid:
    """
    Read the first worksheet of a workbook into a row-major grid.

    Empty cells become empty strings. Trailing empty cells of each row and
    trailing empty rows are dropped; other values keep their type.

    Args:
        data: Raw bytes of an .xlsx/.xlsm or .xls file

    Returns:
        List of rows, each a list of cell values

    Raises:
        ParseError: If the bytes are not a readable workbook
    """
    if data.startswith(ZIP_MAGIC):
        rows = _read_xlsx_rows(data)
    elif data.startswith(OLE2_MAGIC):
        rows = _read_xls_rows(data)
    else:
        raise ParseError("File is not an Excel workbook (.xlsx or .xls)")

    grid = [_trim_row(row) for row in rows]
    while grid and not grid[-1]:
        grid.pop()

    return grid


def _read_xlsx_rows(data: bytes) -> List[tuple]:
    try:
        wb = openpyxl.load_workbook(io.BytesIO(data), data_only=True)
    except Exception as e:
        raise ParseError(f"Failed to load Excel file: {e}") from e

    try:
        if not wb.worksheets:
            raise ParseError("Workbook contains no sheets")
        ws = wb.worksheets[0]
        logger.debug(f"Reading sheet '{ws.title}' ({ws.max_row} rows x {ws.max_column} columns)")
        return list(ws.iter_rows(values_only=True))
    finally:
        wb.close()


def _read_xls_rows(data: bytes) -> List[list]:
    try:
        book = xlrd.open_workbook(file_contents=data)
    except Exception as e:
        raise ParseError(f"Failed to load Excel file: {e}") from e

    if book.nsheets == 0:
        raise ParseError("Workbook contains no sheets")

    sheet = book.sheet_by_index(0)
    logger.debug(f"Reading sheet '{sheet.name}' ({sheet.nrows} rows x {sheet.ncols} columns)")
    return [sheet.row_values(row_idx) for row_idx in range(sheet.nrows)]


def _trim_row(row) -> List[Any]:
    values = ["" if value is None else value for value in row]
    while values and values[-1] == "":
        values.pop()
    return values


def derive_prefix(filename: str) -> str:
    """
    Get the leading token of an input filename.

    The base name is cut at its first '.', then at its first '_'.

    Args:
        filename: Original input filename, optionally with directories

    Returns:
        Prefix used to namespace output filenames
    """
    base_name = Path(filename).name.split(".")[0]
    return base_name.split("_")[0]


def output_filename(prefix: str, mode: SplitMode, language: str) -> str:
    """
    Build the output workbook filename for one language.

    Example: ('ABC', 'dialogue', 'EN') -> 'ABC_MIR4_MASTER_DIALOGUE_EN.xlsx'
    """
    return f"{prefix}_{MODE_FILE_SUFFIXES[mode]}_{language.replace('-', '')}.xlsx"


def archive_name(mode: SplitMode) -> str:
    """Get the download name of the ZIP archive for a mode."""
    return f"MIR4_{MODE_DISPLAY_NAMES[mode]}_Split.zip"


def ensure_out_dir(path: Path) -> Path:
    """
    Ensure output directory exists.

    Args:
        path: Directory path to create

    Returns:
        The created directory path
    """
    path.mkdir(parents=True, exist_ok=True)
    return path

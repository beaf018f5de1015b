"""
MIR4 Splitter - split a localization workbook into one workbook per language.

This package reads the first sheet of a multi-language workbook, keeps a fixed
set of common columns plus each language's own columns, and packages the
per-language workbooks into a ZIP archive.
"""

__version__ = "0.1.0"

from .core import split_workbook, split_file
from .detect import LANGUAGES, MODES, build_column_selection
from .exceptions import SplitterError, ParseError, EmptySheetError, SplitCancelledError
from .exporters import create_zip_archive, write_zip_archive
from .io_utils import archive_name, read_grid_from_bytes

__all__ = [
    "split_workbook",
    "split_file",
    "LANGUAGES",
    "MODES",
    "build_column_selection",
    "SplitterError",
    "ParseError",
    "EmptySheetError",
    "SplitCancelledError",
    "create_zip_archive",
    "write_zip_archive",
    "archive_name",
    "read_grid_from_bytes"
]

"""
Export utilities for per-language workbooks and the ZIP archive.
"""

import io
import logging
import zipfile
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Sequence

import pandas as pd

from .detect import SplitMode
from .io_utils import archive_name, ensure_out_dir

logger = logging.getLogger(__name__)

OUTPUT_SHEET_NAME = "Sheet1"

# Stamped into every output so repeated runs produce identical bytes
FIXED_CREATED = datetime(2000, 1, 1)
ZIP_DATE_TIME = (1980, 1, 1, 0, 0, 0)

XLSXWRITER_OPTIONS = {
    'strings_to_formulas': False,
    'strings_to_urls': False,
    'in_memory': True,
}


def export_language_workbook(rows: Sequence[Sequence[Any]]) -> bytes:
    """
    Serialize a projected grid as a single-sheet .xlsx workbook.

    Rows are written as-is with no header styling, the first row being the
    projected header. Empty strings leave the cell blank.

    Args:
        rows: Projected grid, header row first

    Returns:
        Bytes of the compressed .xlsx file
    """
    df = pd.DataFrame([list(row) for row in rows], dtype=object)
    buffer = io.BytesIO()

    with pd.ExcelWriter(
        buffer,
        engine='xlsxwriter',
        engine_kwargs={'options': XLSXWRITER_OPTIONS}
    ) as writer:
        df.to_excel(writer, sheet_name=OUTPUT_SHEET_NAME, index=False, header=False)
        writer.book.set_properties({'created': FIXED_CREATED})

    return buffer.getvalue()


def create_zip_archive(archive: Dict[str, bytes]) -> bytes:
    """
    Package output workbooks into a ZIP file in memory.

    Args:
        archive: Mapping of filename to workbook bytes, in insertion order

    Returns:
        Bytes of the ZIP file
    """
    zip_buffer = io.BytesIO()

    with zipfile.ZipFile(zip_buffer, 'w', zipfile.ZIP_DEFLATED) as zip_file:
        for filename, file_data in archive.items():
            info = zipfile.ZipInfo(filename, date_time=ZIP_DATE_TIME)
            info.compress_type = zipfile.ZIP_DEFLATED
            zip_file.writestr(info, file_data)

    return zip_buffer.getvalue()


def write_zip_archive(archive: Dict[str, bytes], out_dir: Path, mode: SplitMode) -> Path:
    """
    Write the archive as a ZIP file named after the mode.

    Args:
        archive: Mapping of filename to workbook bytes
        out_dir: Output directory
        mode: Split mode, used for the archive name

    Returns:
        Path of the written ZIP file
    """
    ensure_out_dir(out_dir)
    output_path = out_dir / archive_name(mode)
    output_path.write_bytes(create_zip_archive(archive))
    logger.info(f"Wrote {len(archive)} files to {output_path}")
    return output_path


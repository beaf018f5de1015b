"""
Column selection for per-language splitting.
"""

from typing import Any, List, Literal, Optional, Sequence

SplitMode = Literal["dialogue", "master"]

MODES = ("dialogue", "master")

LANGUAGES = ("EN", "CT", "CS", "JA", "TH", "ES-LATAM", "PT-BR")

MODE_DISPLAY_NAMES = {
    "dialogue": "Dialogue",
    "master": "Master",
}

MODE_FILE_SUFFIXES = {
    "dialogue": "MIR4_MASTER_DIALOGUE",
    "master": "MIR4_MASTER_STRING",
}

MODE_DESCRIPTIONS = {
    "dialogue": "Extracts the (M) and (F) columns of each language.",
    "master": "Extracts the single column of each language.",
}


def common_columns(header: Sequence[Any], mode: SplitMode) -> List[int]:
    """
    Get the positional columns every language output keeps.

    Args:
        header: The header row of the input grid
        mode: Split mode ('dialogue' or 'master')

    Returns:
        List of 0-based column indices, in output order
    """
    if mode == "dialogue":
        # Key columns A..H plus the trailing column
        return list(range(0, 8)) + [len(header) - 1]
    if mode == "master":
        return list(range(0, 6)) + [13, 14]
    raise ValueError(f"Mode must be 'dialogue' or 'master', got: {mode}")


def language_header_names(language: str, mode: SplitMode) -> List[str]:
    """
    Get the header names that hold a language's text.

    Args:
        language: Language code, e.g. 'ES-LATAM'
        mode: Split mode

    Returns:
        Header names in output order
    """
    if mode == "dialogue":
        return [f"{language} (M)", f"{language} (F)"]
    return [language]


def find_header_index(header: Sequence[Any], name: str) -> Optional[int]:
    """Return the index of the first header cell equal to name, or None."""
    for idx, value in enumerate(header):
        if value == name:
            return idx
    return None


def find_language_columns(
    header: Sequence[Any],
    language: str,
    mode: SplitMode
) -> Optional[List[int]]:
    """
    Locate the language-specific columns in the header row.

    Args:
        header: The header row of the input grid
        language: Language code
        mode: Split mode

    Returns:
        List of column indices, or None if any required header is missing
    """
    indices = []
    for name in language_header_names(language, mode):
        idx = find_header_index(header, name)
        if idx is None:
            return None
        indices.append(idx)
    return indices


def build_column_selection(
    header: Sequence[Any],
    language: str,
    mode: SplitMode
) -> Optional[List[int]]:
    """
    Build the full column selection for one language.

    Args:
        header: The header row of the input grid
        language: Language code
        mode: Split mode

    Returns:
        Common columns followed by the language columns, or None when the
        language has no matching header
    """
    language_cols = find_language_columns(header, language, mode)
    if language_cols is None:
        return None
    return common_columns(header, mode) + language_cols


def project_row(row: Sequence[Any], selection: Sequence[int]) -> List[Any]:
    """
    Pick the selected cells from a row.

    Indices outside the row (including negative ones) read as empty cells.
    """
    width = len(row)
    return [row[idx] if 0 <= idx < width else "" for idx in selection]


def project_grid(grid: Sequence[Sequence[Any]], selection: Sequence[int]) -> List[List[Any]]:
    """Project every row of the grid, header included, preserving order."""
    return [project_row(row, selection) for row in grid]

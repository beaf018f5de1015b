"""
Exception types raised by the workbook splitter.
"""


class SplitterError(ValueError):
    """Base class for errors that abort a split run."""


class ParseError(SplitterError):
    """Input bytes are not a readable workbook."""


class EmptySheetError(SplitterError):
    """The first sheet of the workbook has no rows."""


class SplitCancelledError(SplitterError):
    """A superseding run asked this one to stop."""

# qif_csv/utilities/errors.py
"""
Exception hierarchy for QIF parsing.

All fatal parse failures derive from :class:`QifError`, which is a
``ValueError`` so callers that only know "malformed input" can catch that.
Each error carries the identity of the failing source and the 1-based line
number once they are known. The field decoder raises without a source; the
record parser attaches both before re-raising.
"""

from __future__ import annotations

from typing import Optional


class QifError(ValueError):
    """Base class for fatal QIF parse failures."""

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        line_number: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.source = source
        self.line_number = line_number

    def with_context(
        self, source: Optional[str], line_number: Optional[int] = None
    ) -> "QifError":
        """Attach source identity (and line) if not already set; returns self."""
        if self.source is None:
            self.source = source
        if self.line_number is None:
            self.line_number = line_number
        return self

    def __str__(self) -> str:
        where = ""
        if self.source is not None:
            where = f"'{self.source}'"
            if self.line_number is not None:
                where += f" line {self.line_number}"
            where += ": "
        return f"{where}{self.message}"


class InvalidHeaderError(QifError):
    """The mandatory ``!Type:`` declaration is missing or malformed."""


class DateFormatError(QifError):
    """A ``D`` field does not match ``DD/MM/YYYY``."""


class AmountFormatError(QifError):
    """A ``T`` field is not numeric after stripping thousands separators."""


class ReadFailureError(QifError):
    """The underlying stream could not be opened, read or decoded."""

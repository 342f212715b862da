"""Custom exception hierarchy for the word search solver."""

from __future__ import annotations

from typing import Optional


class WordSearchError(Exception):
    """Base exception for solver failures."""


class MalformedGridError(WordSearchError):
    """Raised when grid rows do not fit the configured dimension."""

    def __init__(
        self,
        message: str,
        *,
        row: Optional[int] = None,
        length: Optional[int] = None,
        row_count: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.row = row
        self.length = length
        self.row_count = row_count


class OutOfRangeError(WordSearchError, IndexError):
    """Raised when a coordinate or word index falls outside its domain."""

    def __init__(self, message: str, *, value: object = None) -> None:
        super().__init__(message)
        self.value = value


class EmptyInputError(WordSearchError):
    """Raised when the grid or the word list has no entries."""

    def __init__(self, what: str) -> None:
        super().__init__(f"No entries supplied for {what}")
        self.what = what


class GridStateError(WordSearchError):
    """Raised when a grid is loaded twice."""


class WordStateError(WordSearchError):
    """Raised when a word is marked found more than once in a run."""


class SearchStateError(WordSearchError):
    """Raised when engine results are requested before the run is done."""


class ValidationError(WordSearchError):
    """Raised when a finished run breaks a consistency check."""


class PuzzleSourceError(WordSearchError):
    """Raised when puzzle text cannot be read or fetched."""

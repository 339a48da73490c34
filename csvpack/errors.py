"""
Exception hierarchy for csvpack.

    CsvPackError
      ├── SchemaError         invalid column declaration
      ├── AllocationError     per-type export file could not be created
      ├── PathTraversalError  archive entry resolves outside the sandbox
      └── ParseError          CSV entry or row could not be converted

Only PathTraversalError terminates an import call. The others are recovered
locally by the exporter / importer and reported through their hooks.
"""

from __future__ import annotations

from typing import Optional


class CsvPackError(Exception):
    """Base class for all csvpack errors."""


class SchemaError(CsvPackError):
    """Raised when a RecordSchema is declared with invalid columns."""


class AllocationError(CsvPackError):
    """
    Raised when the exporter cannot create the CSV file for one pack.
    """

    def __init__(self, file_name: str, reason: str = "") -> None:
        self.file_name = file_name
        self.reason = reason
        msg = f"Error creating file {file_name}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class PathTraversalError(CsvPackError):
    """
    Raised when an archive entry name would be extracted outside the
    extraction root ("zip slip").
    """

    def __init__(self, entry_name: str, root: str) -> None:
        self.entry_name = entry_name
        self.root = root
        super().__init__(f"Archive entry escapes extraction root {root}: {entry_name!r}")


class ParseError(CsvPackError):
    """
    Raised when a CSV entry, or one of its rows, cannot be converted.

    Attributes
    ----------
    entry_name:
        Archive entry being parsed, if known.
    row_index:
        Zero-based index of the offending data row, if known.
    """

    def __init__(
        self,
        message: str,
        *,
        entry_name: Optional[str] = None,
        row_index: Optional[int] = None,
    ) -> None:
        self.entry_name = entry_name
        self.row_index = row_index
        prefix = ""
        if entry_name is not None:
            prefix = f"{entry_name}: "
        if row_index is not None:
            prefix = f"{prefix}row {row_index}: "
        super().__init__(f"{prefix}{message}")


__all__ = [
    "CsvPackError",
    "SchemaError",
    "AllocationError",
    "PathTraversalError",
    "ParseError",
]

"""
CSV reader for imported archive entries.

Tables are read with pandas, with every cell kept as the literal string
from the file (no NA detection, no dtype inference), and returned as a
header list plus one header -> value dict per data row.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, Dict, FrozenSet, List, Union

import pandas as pd

from ..errors import ParseError


@dataclass
class ParsedTable:
    headers: List[str] = field(default_factory=list)
    rows: List[Dict[str, str]] = field(default_factory=list)

    @property
    def header_set(self) -> FrozenSet[str]:
        """
        Header names used for schema matching.

        Taken from the data rows, so a header-only table has an empty
        header set and matches no schema.
        """
        if not self.rows:
            return frozenset()
        return frozenset(self.rows[0].keys())


def read_table(source: Union[str, Path, BinaryIO], *, name: str = "") -> ParsedTable:
    """
    Parse a CSV file or binary buffer into a ParsedTable.

    A zero-byte source gives an empty table.

    Raises
    ------
    ParseError
        If the content is not decodable UTF-8 CSV.
    """
    try:
        frame = pd.read_csv(
            source,
            dtype=str,
            keep_default_na=False,
            na_filter=False,
            encoding="utf-8",
        )
    except pd.errors.EmptyDataError:
        return ParsedTable()
    except ValueError as exc:
        # pandas ParserError and UnicodeDecodeError are both ValueErrors
        raise ParseError(f"unreadable CSV: {exc}", entry_name=name or None) from exc

    headers = [str(c) for c in frame.columns]
    rows = [
        {str(k): v for k, v in record.items()}
        for record in frame.to_dict(orient="records")
    ]
    return ParsedTable(headers=headers, rows=rows)


__all__ = [
    "ParsedTable",
    "read_table",
]

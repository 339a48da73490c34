"""
CSV writer for export packs.

Every value is rendered as a string before it reaches pandas, so the
file holds exactly what the record's accessors returned (None becomes an
empty field) rather than pandas' inferred numeric formatting.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Union

import pandas as pd

from ..packs import ExportPack


def _cell(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def write_pack_csv(path: Union[str, Path], pack: ExportPack) -> Path:
    """
    Write ``pack`` to ``path``: one header row, then one row per item.

    An empty pack produces a header-only file.

    Raises
    ------
    ValueError
        If a flattened row does not have one value per header.
    """
    path = Path(path)
    rows = [[_cell(v) for v in row] for row in pack.rows()]

    for i, row in enumerate(rows):
        if len(row) != len(pack.header_list):
            raise ValueError(
                f"{pack.file_name}: row {i} has {len(row)} values "
                f"for {len(pack.header_list)} headers"
            )

    frame = pd.DataFrame(rows, columns=list(pack.header_list), dtype=object)
    frame.to_csv(path, index=False, encoding="utf-8", lineterminator="\n")
    return path


__all__ = [
    "write_pack_csv",
]

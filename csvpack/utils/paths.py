"""
File-name builders and sandbox path resolution.

These helpers produce deterministic names for exported archives and
per-type CSV files, and resolve archive entry names against an extraction
root without letting them escape it.
"""

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path
from typing import Union

from ..errors import PathTraversalError


# ----------------------------------------------------------------------
# Export naming
# ----------------------------------------------------------------------

def build_archive_name(prefix: str, day: date, separator: str = "_") -> str:
    """
    Name of the export archive for a given day.

    Example:
        prefix = "csv_bundle_", day = 2024-03-07
        -> "csv_bundle_2024_03_07.zip"

    Archives from the same day share a name; the newer one overwrites.
    """
    stamp = separator.join(
        (f"{day.year:04d}", f"{day.month:02d}", f"{day.day:02d}")
    )
    return f"{prefix}{stamp}.zip"


def build_export_file_name(
    base_name: str,
    when: datetime,
    *,
    timestamp_format: str,
    suffix: str = "",
) -> str:
    """
    Name of one record type's CSV file inside the archive.

    Example:
        base_name = "people", when = 2024-03-07 09:15
        -> "people_2024_03_07_09_15.csv"
    """
    return f"{base_name}_{when.strftime(timestamp_format)}{suffix}"


# ----------------------------------------------------------------------
# Sandbox resolution
# ----------------------------------------------------------------------

def resolve_inside(root: Union[str, Path], name: str) -> Path:
    """
    Resolve ``name`` below ``root`` and make sure it stays there.

    The resolved path must be strictly inside the resolved root: the root
    itself, absolute names and ``..`` components that climb out all fail.

    Raises
    ------
    PathTraversalError
    """
    base = Path(root).resolve()
    target = (base / name).resolve()

    if target == base or base not in target.parents:
        raise PathTraversalError(name, str(base))

    return target


__all__ = [
    "build_archive_name",
    "build_export_file_name",
    "resolve_inside",
]

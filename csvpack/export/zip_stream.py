"""
ZIP writer for csvpack exports.

ZipStreamWriter bundles an explicit list of files into one archive, each
stored under its bare file name, in the order given.
"""

from __future__ import annotations

import zipfile
from pathlib import Path
from typing import Iterable, List, Union


class ZipStreamWriter:
    """
    Flat ZIP builder.

    Parameters
    ----------
    files :
        Files to archive. Entry names are the files' base names; the
        exporter allocates each name once per batch.
    """

    def __init__(self, files: Iterable[Union[str, Path]]) -> None:
        self.files: List[Path] = [Path(f) for f in files]

    def write_to_path(self, zip_path: Union[str, Path]) -> Path:
        """
        Write the ZIP archive to a file path, replacing any existing one.

        Returns the path to the written archive.
        """
        zip_path = Path(zip_path)
        zip_path.parent.mkdir(parents=True, exist_ok=True)

        with zipfile.ZipFile(zip_path, "w", zipfile.ZIP_DEFLATED) as zf:
            for full in self.files:
                zf.write(full, full.name)

        return zip_path


__all__ = [
    "ZipStreamWriter",
]

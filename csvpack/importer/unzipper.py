"""
Safe ZIP unpacking for csvpack imports.

ZipUnpacker:
    - extracts entries one at a time, in archive order
    - refuses any entry whose name resolves outside the destination
      ("zip slip") by raising PathTraversalError before writing it
    - skips directory entries
"""

from __future__ import annotations

import shutil
import zipfile
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Iterator, Tuple, Union

from ..utils.paths import resolve_inside


@dataclass
class ZipUnpacker:
    """
    Safe ZIP extraction helper.

    Parameters
    ----------
    chunk_size: int
        Buffer size used when copying entry bytes to disk.
    """

    chunk_size: int = 64 * 1024

    def iter_extract(
        self,
        source: Union[str, Path, BinaryIO],
        dest_dir: Union[str, Path],
    ) -> Iterator[Tuple[str, Path]]:
        """
        Extract ``source`` into ``dest_dir`` lazily.

        Yields
        ------
        (entry_name, extracted_path)
            After each entry has been written. The caller may process the
            file before the next entry is extracted.

        Raises
        ------
        PathTraversalError
            For the first entry that would land outside ``dest_dir``.
            Nothing is written for that entry or any later one.
        zipfile.BadZipFile
        """
        dest = Path(dest_dir)
        dest.mkdir(parents=True, exist_ok=True)

        with zipfile.ZipFile(source, "r") as zf:
            for member in zf.infolist():
                name = member.filename

                # Skip empty and directory entries
                if not name or member.is_dir():
                    continue

                target = resolve_inside(dest, name)
                target.parent.mkdir(parents=True, exist_ok=True)

                with zf.open(member, "r") as src, open(target, "wb") as dst:
                    shutil.copyfileobj(src, dst, self.chunk_size)

                yield name, target


__all__ = [
    "ZipUnpacker",
]

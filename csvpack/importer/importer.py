"""
Archive importer - route unlabeled CSV entries to their record parsers.

An archive carries no type information: each entry is identified only by
the set of column headers in its CSV. For every entry, in archive order,
CsvImporter

    1) extracts it into a per-call sandbox below the work directory,
       aborting the whole import if its name escapes the sandbox
    2) reads it as a CSV table
    3) looks up the table's header set among the registered ImportPacks
       (exact, order-independent match; unknown entries are skipped)
    4) parses every row with the matched pack; any failing row drops the
       whole entry, which is reported through ``on_error``
    5) stores the parsed list in the ResultMap, replacing any earlier
       entry of the same type

The completion callback receives the ResultMap exactly once, after the
last entry, however many entries were skipped or dropped.
"""

from __future__ import annotations

import io
import logging
import shutil
import tempfile
from pathlib import Path
from typing import (
    Any,
    BinaryIO,
    Callable,
    Dict,
    FrozenSet,
    Hashable,
    Iterable,
    List,
    Optional,
    Tuple,
    Union,
)

from ..config import CsvPackConfig
from ..errors import ParseError
from ..packs import ImportPack
from ..result_map import ResultMap
from ..utils.temp import cleanup_temp_dir, ensure_temp_dir
from .table_reader import ParsedTable, read_table
from .unzipper import ZipUnpacker

logger = logging.getLogger(__name__)

HeaderMap = Dict[FrozenSet[str], ImportPack]
Resolved = Tuple[Hashable, List[Any]]
CompletionCallback = Callable[[ResultMap], None]
ErrorHandler = Callable[[Exception], None]


# ----------------------------------------------------------------------
# Matching
# ----------------------------------------------------------------------

def build_header_map(packs: Iterable[ImportPack]) -> HeaderMap:
    """
    Index import packs by header set.

    Packs registered with identical header sets cannot be told apart;
    the last one registered wins.
    """
    header_map: HeaderMap = {}
    for pack in packs:
        if pack.header_set in header_map:
            logger.warning(
                "Import packs %r and %r share header set %s",
                header_map[pack.header_set].type_id,
                pack.type_id,
                sorted(pack.header_set),
            )
        header_map[pack.header_set] = pack
    return header_map


def resolve_table(
    entry_name: str,
    table: ParsedTable,
    header_map: HeaderMap,
) -> Optional[Resolved]:
    """
    Parse ``table`` with the pack whose header set it matches.

    Returns None when no pack matches. Rows for which the parser returns
    None are left out.

    Raises
    ------
    ParseError
        On the first row that fails to parse.
    """
    pack = header_map.get(table.header_set)
    if pack is None:
        return None

    items: List[Any] = []
    for index, row in enumerate(table.rows):
        try:
            item = pack.parse_row(row)
        except Exception as exc:
            raise ParseError(str(exc), entry_name=entry_name, row_index=index) from exc
        if item is not None:
            items.append(item)

    return pack.type_id, items


def match_and_parse(
    entry_name: str,
    entry_bytes: bytes,
    packs: Iterable[ImportPack],
) -> Optional[Resolved]:
    """
    Identify and parse one in-memory CSV entry.

    Returns ``(type_id, items)`` for a recognised entry, None otherwise.

    Raises
    ------
    ParseError
    """
    table = read_table(io.BytesIO(entry_bytes), name=entry_name)
    return resolve_table(entry_name, table, build_header_map(packs))


# ----------------------------------------------------------------------
# Importer
# ----------------------------------------------------------------------

class CsvImporter:
    """
    High-level importer for csvpack archives.

    Used by:
        - CsvBundle.import_archive
        - ImportLauncher
        - the ``inspect`` command
    """

    def __init__(
        self,
        config: CsvPackConfig,
        unzipper: Optional[ZipUnpacker] = None,
    ) -> None:
        self.config = config
        self.unzipper = unzipper or ZipUnpacker()

    @property
    def work_dir(self) -> Path:
        return Path(self.config.work_dir).resolve()

    # ------------------------------------------------------------------
    # Public import API
    # ------------------------------------------------------------------

    def import_archive(
        self,
        stream: BinaryIO,
        packs: Iterable[ImportPack],
        on_complete: Optional[CompletionCallback] = None,
        on_error: Optional[ErrorHandler] = None,
    ) -> ResultMap:
        """
        Import a ZIP provided as a readable binary stream.

        The stream is spooled to a temporary file first so that non-seekable
        sources work.

        Raises
        ------
        PathTraversalError
            If any entry name escapes the sandbox; ``on_complete`` is not
            called in that case.
        zipfile.BadZipFile
        """
        self.work_dir.mkdir(parents=True, exist_ok=True)
        with tempfile.TemporaryFile(prefix="archive_", suffix=".zip", dir=str(self.work_dir)) as tmp:
            shutil.copyfileobj(stream, tmp)
            tmp.seek(0)
            return self._import(tmp, packs, on_complete, on_error)

    def import_from_path(
        self,
        zip_path: Union[str, Path],
        packs: Iterable[ImportPack],
        on_complete: Optional[CompletionCallback] = None,
        on_error: Optional[ErrorHandler] = None,
    ) -> ResultMap:
        """Import a ZIP already on disk."""
        return self._import(Path(zip_path), packs, on_complete, on_error)

    def match_and_parse(
        self,
        entry_name: str,
        entry_bytes: bytes,
        packs: Iterable[ImportPack],
    ) -> Optional[Resolved]:
        return match_and_parse(entry_name, entry_bytes, packs)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _import(
        self,
        source: Union[Path, BinaryIO],
        packs: Iterable[ImportPack],
        on_complete: Optional[CompletionCallback],
        on_error: Optional[ErrorHandler],
    ) -> ResultMap:
        header_map = build_header_map(packs)
        results = ResultMap()

        sandbox = ensure_temp_dir(prefix="import_", parent=self.work_dir)
        try:
            for entry_name, path in self.unzipper.iter_extract(source, sandbox):
                try:
                    table = read_table(path, name=entry_name)
                    resolved = resolve_table(entry_name, table, header_map)
                except ParseError as exc:
                    logger.warning("Dropping archive entry %s: %s", entry_name, exc)
                    if on_error is not None:
                        on_error(exc)
                    continue

                if resolved is None:
                    logger.debug(
                        "Skipping unrecognised archive entry %s (headers: %s)",
                        entry_name,
                        sorted(table.header_set),
                    )
                    continue

                type_id, items = resolved
                results.put(type_id, items)
                logger.info(
                    "Imported %d %s record(s) from %s",
                    len(items),
                    getattr(type_id, "__name__", type_id),
                    entry_name,
                )
        finally:
            cleanup_temp_dir(sandbox)

        if on_complete is not None:
            on_complete(results)
        return results


__all__ = [
    "build_header_map",
    "resolve_table",
    "match_and_parse",
    "CsvImporter",
]

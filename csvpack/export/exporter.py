"""
Core export logic for csvpack.

CsvExporter turns a batch of ExportPacks into one shareable archive:

    1) each pack is written to its own CSV file in a fresh staging
       directory; a pack whose file cannot be created is reported to the
       Notifier and skipped, the rest of the batch continues
    2) the written files are bundled into one ZIP named after today's date
       (a second export on the same day overwrites the first)
    3) the staging directory is removed, whether or not bundling succeeded
    4) the archive is handed to the ShareTarget, exactly once per batch
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from ..collaborators import LoggingNotifier, Notifier, ShareTarget
from ..config import CsvPackConfig
from ..errors import AllocationError
from ..packs import ExportPack
from ..utils.paths import build_archive_name
from ..utils.temp import cleanup_temp_dir, ensure_temp_dir
from .writer import write_pack_csv
from .zip_stream import ZipStreamWriter

logger = logging.getLogger(__name__)


class CsvExporter:
    """
    Export pipeline bound to a configuration and host collaborators.

    Parameters
    ----------
    config:
        Supplies the work directory and archive naming.
    share_target:
        Receives the finished archive. If None, the archive is only
        written to the work directory.
    notifier:
        Receives one message per pack that could not be allocated.
        Defaults to LoggingNotifier.
    clock:
        Returns the current time; used to date the archive.
    """

    def __init__(
        self,
        config: CsvPackConfig,
        share_target: Optional[ShareTarget] = None,
        notifier: Optional[Notifier] = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.config = config
        self.share_target = share_target
        self.notifier = notifier or LoggingNotifier()
        self.clock = clock

    @property
    def work_dir(self) -> Path:
        return Path(self.config.work_dir).resolve()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def export(self, packs: Iterable[ExportPack]) -> Path:
        """
        Export all ``packs`` into one archive and share it.

        Returns the path of the archive in the work directory.
        """
        staging = ensure_temp_dir(prefix="export_", parent=self.work_dir)
        written: List[Path] = []

        try:
            for pack in packs:
                try:
                    csv_path = self._allocate(staging, pack.file_name)
                except AllocationError as exc:
                    logger.warning("%s", exc)
                    self.notifier.notify(f"Error creating file {exc.file_name}")
                    continue

                write_pack_csv(csv_path, pack)
                written.append(csv_path)
                logger.info("Wrote %d %s row(s) to %s", len(pack.items), pack.file_name, csv_path)

            archive = self.archive_path()
            ZipStreamWriter(written).write_to_path(archive)
            logger.info("Bundled %d file(s) into %s", len(written), archive)
        finally:
            cleanup_temp_dir(staging)

        if self.share_target is not None:
            self.share_target.share(archive)

        return archive

    def archive_path(self) -> Path:
        """Where today's archive is written."""
        name = build_archive_name(
            self.config.archive_prefix,
            self.clock().date(),
            separator=self.config.date_separator,
        )
        return self.work_dir / name

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _allocate(self, staging: Path, file_name: str) -> Path:
        """
        Create an empty file named ``file_name`` in ``staging``.

        Raises AllocationError if the name is not a plain file name, is
        already taken in this export, or the file cannot be created.
        """
        if not file_name or file_name in (".", "..") or Path(file_name).name != file_name:
            raise AllocationError(file_name, "not a plain file name")

        path = staging / file_name
        try:
            with open(path, "x", encoding="utf-8"):
                pass
        except FileExistsError as exc:
            raise AllocationError(file_name, "already exported in this batch") from exc
        except OSError as exc:
            raise AllocationError(file_name, exc.strerror or str(exc)) from exc

        return path


__all__ = [
    "CsvExporter",
]

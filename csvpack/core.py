from __future__ import annotations

"""
Core façade for csvpack.

CsvBundle is the single, high-level entrypoint a host application uses to:

    - export several record collections as one shareable archive,
    - import such an archive back into a type-indexed ResultMap,
    - wire a file picker to the importer.

It wraps:

    - configuration (work directory, naming)
    - CsvExporter + ShareTarget + Notifier
    - CsvImporter
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import BinaryIO, Iterable, List, Optional, TypeVar

from .collaborators import FilePicker, LoggingNotifier, Notifier, ShareTarget
from .config import CsvPackConfig, load_config
from .export.exporter import CsvExporter
from .importer.importer import CompletionCallback, CsvImporter, ErrorHandler
from .importer.launcher import ImportLauncher
from .packs import ExportPack, ImportPack
from .result_map import ResultMap
from .schema.record_schema import RecordSchema

logger = logging.getLogger(__name__)

T = TypeVar("T")


# ---------------------------------------------------------------------------
# CsvBundle façade
# ---------------------------------------------------------------------------

@dataclass
class CsvBundle:
    """
    High-level façade over the export and import pipelines.

    Attributes
    ----------
    config:
        CsvPackConfig used to construct this instance.

    exporter:
        CsvExporter bound to the host's ShareTarget and Notifier.

    importer:
        CsvImporter extracting into sandboxes below config.work_dir.

    file_picker:
        Optional host FilePicker, required by get_content_launcher().
    """

    config: CsvPackConfig
    exporter: CsvExporter
    importer: CsvImporter
    file_picker: Optional[FilePicker] = None

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_config(
        cls,
        config: Optional[CsvPackConfig] = None,
        *,
        share_target: Optional[ShareTarget] = None,
        notifier: Optional[Notifier] = None,
        file_picker: Optional[FilePicker] = None,
    ) -> "CsvBundle":
        cfg = config or load_config()

        if cfg.enable_logging:
            logging.basicConfig(level=logging.INFO)
            logger.info("Initializing CsvBundle with config: %s", cfg)

        exporter = CsvExporter(
            cfg,
            share_target=share_target,
            notifier=notifier or LoggingNotifier(),
        )
        importer = CsvImporter(cfg)

        return cls(
            config=cfg,
            exporter=exporter,
            importer=importer,
            file_picker=file_picker,
        )

    @classmethod
    def from_env(cls, **collaborators) -> "CsvBundle":
        """Construct CsvBundle using environment variables."""
        return cls.from_config(load_config(), **collaborators)

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def export_pack(
        self,
        schema: RecordSchema[T],
        items: Iterable[T],
        *,
        now: Optional[datetime] = None,
    ) -> ExportPack[T]:
        """Build an ExportPack named with this bundle's timestamp format."""
        return schema.export_pack(
            items,
            now=now,
            timestamp_format=self.config.timestamp_format,
            suffix=self.config.file_suffix,
        )

    def export(self, *packs: ExportPack) -> Path:
        """
        Export ``packs`` into one archive and hand it to the ShareTarget.

        Returns the archive path.
        """
        return self.exporter.export(packs)

    # ------------------------------------------------------------------
    # Import
    # ------------------------------------------------------------------

    def import_archive(
        self,
        stream: BinaryIO,
        packs: Iterable[ImportPack],
        on_complete: Optional[CompletionCallback] = None,
        on_error: Optional[ErrorHandler] = None,
    ) -> ResultMap:
        return self.importer.import_archive(stream, packs, on_complete, on_error)

    def get_content_launcher(
        self,
        packs: List[ImportPack],
        action: CompletionCallback,
        exception_handler: Optional[ErrorHandler] = None,
        *,
        prefix: Optional[str] = None,
    ) -> ImportLauncher:
        """
        Build an ImportLauncher over this bundle's FilePicker.

        ``prefix`` defaults to the configured archive prefix, so only
        archives exported by csvpack are accepted.
        """
        if self.file_picker is None:
            raise ValueError("CsvBundle was created without a file_picker")

        return ImportLauncher(
            self.importer,
            self.file_picker,
            prefix if prefix is not None else self.config.archive_prefix,
            packs,
            action,
            exception_handler,
        )


__all__ = [
    "CsvBundle",
]

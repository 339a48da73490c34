"""
csvpack

Bundle typed record collections into one ZIP of CSV files, and route the
CSV files of such an archive back to their record types by header set.

Submodules include:
    - schema/      Column, RecordSchema
    - export/      CsvExporter, ZipStreamWriter, CSV writer
    - importer/    CsvImporter, ImportLauncher, ZipUnpacker, CSV reader
    - utils/       naming and temp-directory helpers

The root package exports the public API for convenience.
"""

from .config import CsvPackConfig, load_config
from .errors import (
    AllocationError,
    CsvPackError,
    ParseError,
    PathTraversalError,
    SchemaError,
)
from .packs import ExportPack, ImportPack
from .result_map import ResultMap
from .schema import Column, RecordSchema
from .export import CsvExporter
from .importer import CsvImporter, ImportLauncher, match_and_parse
from .core import CsvBundle

__all__ = [
    "CsvPackConfig",
    "load_config",
    "CsvPackError",
    "SchemaError",
    "AllocationError",
    "PathTraversalError",
    "ParseError",
    "ExportPack",
    "ImportPack",
    "ResultMap",
    "Column",
    "RecordSchema",
    "CsvExporter",
    "CsvImporter",
    "ImportLauncher",
    "match_and_parse",
    "CsvBundle",
]

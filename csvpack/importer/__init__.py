"""
csvpack - Importer package.

Utilities for turning a csvpack archive back into typed records.

Primary entrypoints:

    - CsvImporter     : sandboxed unzip + CSV read + header-set dispatch
    - ImportLauncher  : file-picker driven import with prefix check
    - ZipUnpacker     : safe ZIP unpacking with directory traversal protection
    - read_table      : CSV -> ParsedTable (every cell a string)
    - match_and_parse : identify and parse one in-memory entry
"""

from .table_reader import ParsedTable, read_table
from .unzipper import ZipUnpacker
from .importer import CsvImporter, build_header_map, match_and_parse, resolve_table
from .launcher import ImportLauncher, ZIP_MIME_TYPE

__all__ = [
    "ParsedTable",
    "read_table",
    "ZipUnpacker",
    "CsvImporter",
    "build_header_map",
    "match_and_parse",
    "resolve_table",
    "ImportLauncher",
    "ZIP_MIME_TYPE",
]

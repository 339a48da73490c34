"""
csvpack.export

Export side of csvpack:

    - CsvExporter     : packs -> CSV files -> one dated ZIP -> ShareTarget
    - ZipStreamWriter : flat ZIP builder over an explicit file list
    - write_pack_csv  : header row + one row per item
"""

from .writer import write_pack_csv
from .zip_stream import ZipStreamWriter
from .exporter import CsvExporter

__all__ = [
    "write_pack_csv",
    "ZipStreamWriter",
    "CsvExporter",
]

"""
csvpack.schema

Declarative record schemas:

    - Column        : header name + field accessor
    - RecordSchema  : per-type column table, base file name and row parser
"""

from .columns import Column
from .record_schema import RecordSchema

__all__ = [
    "Column",
    "RecordSchema",
]

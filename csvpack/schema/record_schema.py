"""
RecordSchema - the per-type CSV contract.

A record type becomes importable / exportable by declaring one schema:

    PERSON_SCHEMA = RecordSchema(
        record_type=Person,
        save_base_name="people",
        columns=(
            Column.attr("Name", "name"),
            Column.attr("Age", "age"),
        ),
        parser=lambda row: Person(row["Name"], int(row["Age"])),
    )

The column table drives both directions: the ordered header list and row
flattening on export, the header set used to recognise files on import.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import (
    Any,
    Callable,
    FrozenSet,
    Generic,
    Iterable,
    List,
    Mapping,
    Optional,
    Sequence,
    Type,
    TypeVar,
)

from ..config import DEFAULT_FILE_SUFFIX, DEFAULT_TIMESTAMP_FORMAT
from ..errors import ParseError, SchemaError
from ..packs import ExportPack, ImportPack
from ..utils.paths import build_export_file_name
from .columns import Column

T = TypeVar("T")


@dataclass(frozen=True)
class RecordSchema(Generic[T]):
    """
    Declarative CSV schema for one record type.

    Parameters
    ----------
    record_type:
        The class of the records. It doubles as the type id under which
        imported records are stored in a ResultMap.
    save_base_name:
        Base name of the exported CSV file. An underscore, the export
        timestamp and the file suffix are appended.
    columns:
        Ordered column descriptors. Header names must be unique.
    parser:
        Builds a record from one header -> value row. Every value is a
        string; conversion is up to the parser. ValueError, KeyError and
        TypeError raised here are reported as ParseError.
    """

    record_type: Type[T]
    save_base_name: str
    columns: Sequence[Column[T]]
    parser: Callable[[Mapping[str, str]], Optional[T]]

    def __post_init__(self) -> None:
        # Freeze the column table so the schema stays immutable.
        object.__setattr__(self, "columns", tuple(self.columns))

        seen = set()
        for col in self.columns:
            if not col.header_name:
                raise SchemaError(f"{self.type_name}: empty header name")
            if col.header_name in seen:
                raise SchemaError(
                    f"{self.type_name}: duplicate header name {col.header_name!r}"
                )
            seen.add(col.header_name)

    @property
    def type_name(self) -> str:
        return getattr(self.record_type, "__name__", str(self.record_type))

    # ------------------------------------------------------------------
    # Headers
    # ------------------------------------------------------------------

    def header_list(self) -> List[str]:
        """Header names in column order (the order written on export)."""
        return [col.header_name for col in self.columns]

    def header_set(self) -> FrozenSet[str]:
        """Unordered header names (the key matched on import)."""
        return frozenset(col.header_name for col in self.columns)

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def row_of(self, item: T) -> List[Any]:
        """
        Flatten a record into one value per column, in column order.

        Null fields stay None; the CSV writer renders them as empty fields.
        """
        return [col.value_of(item) for col in self.columns]

    def parse_row(self, row: Mapping[str, str]) -> Optional[T]:
        """
        Build a record from one header -> value row.

        Raises
        ------
        ParseError
            If a declared header is missing from the row, or the parser
            fails to convert a value.
        """
        missing = [h for h in self.header_list() if h not in row]
        if missing:
            raise ParseError(
                f"{self.type_name}: missing column(s) {', '.join(missing)}"
            )

        try:
            return self.parser(row)
        except ParseError:
            raise
        except (ValueError, KeyError, TypeError) as exc:
            raise ParseError(f"{self.type_name}: {exc}") from exc

    # ------------------------------------------------------------------
    # Pack builders
    # ------------------------------------------------------------------

    def export_file_name(
        self,
        *,
        now: Optional[datetime] = None,
        timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
        suffix: str = DEFAULT_FILE_SUFFIX,
    ) -> str:
        return build_export_file_name(
            self.save_base_name,
            now or datetime.now(),
            timestamp_format=timestamp_format,
            suffix=suffix,
        )

    def export_pack(
        self,
        items: Iterable[T],
        *,
        now: Optional[datetime] = None,
        timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
        suffix: str = DEFAULT_FILE_SUFFIX,
    ) -> ExportPack[T]:
        """
        Bundle ``items`` with this schema's file name, flattener and headers.
        """
        return ExportPack(
            items=list(items),
            file_name=self.export_file_name(
                now=now,
                timestamp_format=timestamp_format,
                suffix=suffix,
            ),
            row_of=self.row_of,
            header_list=self.header_list(),
        )

    def import_pack(self) -> ImportPack[T]:
        """Register this schema for one import call."""
        return ImportPack(
            type_id=self.record_type,
            header_set=self.header_set(),
            parse_row=self.parse_row,
        )


__all__ = [
    "RecordSchema",
]

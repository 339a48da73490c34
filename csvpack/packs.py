"""
Per-call request descriptors.

ExportPack
    One record type's export request: items, target file name, row
    flattener and ordered header list.

ImportPack
    One record type's import registration: type id, the header set that
    identifies its files, and the row parser. A list of ImportPacks is the
    explicit dispatch table the importer matches archive entries against.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, FrozenSet, Generic, Hashable, List, Mapping, Optional, TypeVar

T = TypeVar("T")


@dataclass
class ExportPack(Generic[T]):
    items: List[T]
    file_name: str
    row_of: Callable[[T], List[Any]]
    header_list: List[str] = field(default_factory=list)

    def rows(self) -> List[List[Any]]:
        return [list(self.row_of(item)) for item in self.items]


@dataclass(frozen=True)
class ImportPack(Generic[T]):
    type_id: Hashable
    header_set: FrozenSet[str]
    parse_row: Callable[[Mapping[str, str]], Optional[T]]

    def __post_init__(self) -> None:
        object.__setattr__(self, "header_set", frozenset(self.header_set))


__all__ = [
    "ExportPack",
    "ImportPack",
]

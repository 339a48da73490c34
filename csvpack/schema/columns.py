"""
Column descriptors.

A Column pairs the header name written to / read from a CSV file with the
accessor that extracts that field from one record.
"""

from __future__ import annotations

from dataclasses import dataclass
from operator import attrgetter
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Column(Generic[T]):
    """
    Describes one CSV column of a record type.

    Attributes
    ----------
    header_name:
        Value written in the header row; also part of the matching key
        used on import.
    accessor:
        Callable returning the column's value for a record.
    """

    header_name: str
    accessor: Callable[[T], Any]

    @classmethod
    def attr(cls, header_name: str, attribute: str) -> "Column[T]":
        """Column reading a (possibly dotted) attribute of the record."""
        return cls(header_name, attrgetter(attribute))

    def value_of(self, item: T) -> Any:
        return self.accessor(item)


__all__ = [
    "Column",
]

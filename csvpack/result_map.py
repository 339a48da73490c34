"""
ResultMap - type-indexed container for imported records.

The importer stores one list of parsed records per matched type id.
Retrieval is typed and fails closed: asking for a type that was not
imported, or whose stored list does not hold instances of that type,
yields an empty list rather than an error or mis-typed data.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, Hashable, Iterator, List, Mapping, Optional, Type, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ResultMap:
    """
    Mutable mapping of type id -> list of parsed records.

    Type ids are normally record classes (``RecordSchema.record_type``),
    which lets ``get`` verify the stored items.
    """

    def __init__(self) -> None:
        self._models: Dict[Hashable, List[Any]] = {}

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def put(self, type_id: Hashable, items: List[Any]) -> None:
        """Store ``items`` under ``type_id``, replacing any earlier list."""
        if type_id in self._models:
            logger.debug("Replacing imported records for %r", type_id)
        self._models[type_id] = list(items)

    __setitem__ = put

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get(self, type_id: Type[T]) -> List[T]:
        """
        Return the records imported for ``type_id``, or an empty list.

        When ``type_id`` is a class, every stored item must be an instance
        of it; otherwise the lookup fails closed and returns [].
        """
        items = self._models.get(type_id)
        if items is None:
            return []

        if isinstance(type_id, type) and not all(isinstance(i, type_id) for i in items):
            logger.warning(
                "Stored records for %s are not all of that type; returning none",
                type_id.__name__,
            )
            return []

        return list(items)

    def raw(self, type_id: Hashable) -> Optional[List[Any]]:
        """Untyped lookup: the stored list, or None if absent."""
        return self._models.get(type_id)

    def __getitem__(self, type_id: Hashable) -> List[Any]:
        """Stored list for ``type_id``; raises KeyError when absent."""
        return self._models[type_id]

    @property
    def models(self) -> Mapping[Hashable, List[Any]]:
        """Read-only view of the underlying mapping."""
        return MappingProxyType(self._models)

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __contains__(self, type_id: object) -> bool:
        return type_id in self._models

    def __len__(self) -> int:
        return len(self._models)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._models)

    def __repr__(self) -> str:
        counts = ", ".join(
            f"{getattr(k, '__name__', k)}={len(v)}" for k, v in self._models.items()
        )
        return f"ResultMap({counts})"


__all__ = [
    "ResultMap",
]

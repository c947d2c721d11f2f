"""Stable-key lookup for records shown in the UI.

Views register the records they render and put only the key on each clickable
element. Activation dereferences the key here instead of re-parsing a
serialized record from the element.
"""

from typing import Any, Dict, Iterable, List, Optional

from greppy_filters.filtering.predicate import record_field


class RecordIndex:
    """Ordered collection of records addressable by key."""

    def __init__(self, records: Optional[Iterable] = None, key_field: str = "id"):
        """
        Args:
            records: Initial records.
            key_field: Record field used as the key. Records without it are
                keyed by their position.
        """
        self.key_field = key_field
        self._records: List[Any] = []
        self._by_key: Dict[str, int] = {}
        if records is not None:
            self.replace(records)

    def replace(self, records: Iterable) -> None:
        """Swap in a new record set (e.g. after the filter changes)."""
        self._records = list(records)
        self._by_key = {}
        for position, record in enumerate(self._records):
            self._by_key.setdefault(self.key_for(record, position), position)

    def key_for(self, record: Any, position: int) -> str:
        value = record_field(record, self.key_field)
        return str(value) if value is not None else f"#{position}"

    def keys(self) -> List[str]:
        return [self.key_for(record, i) for i, record in enumerate(self._records)]

    def get(self, key: str) -> Optional[Any]:
        """Record for key, or None if it is no longer in the collection."""
        position = self._by_key.get(str(key))
        return None if position is None else self._records[position]

    def at(self, position: int) -> Optional[Any]:
        if 0 <= position < len(self._records):
            return self._records[position]
        return None

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self):
        return iter(self._records)

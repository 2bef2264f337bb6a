"""
In-memory catalog store.

Holds the authoritative ordered list of product records. Records are keyed by
their `id`; newly added records go to the front of the list.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Iterable, List, Mapping, Optional

from .errors import DuplicateIdError, ImmutableIdError
from .models import Record

logger = logging.getLogger(__name__)


class CatalogStore:
    def __init__(self, records: Optional[Iterable[Mapping[str, Any]]] = None) -> None:
        self._records: List[Record] = []
        if records is not None:
            self.load(records)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, key: object) -> bool:
        return self._index_of(key) is not None

    def _index_of(self, key: Any) -> Optional[int]:
        if key is None:
            return None
        for i, record in enumerate(self._records):
            if record.get("id") == key:
                return i
        return None

    def load(self, records: Iterable[Mapping[str, Any]]) -> None:
        """Replace the whole catalog. Source data is trusted and not validated."""
        self._records = [copy.deepcopy(dict(r)) for r in records]
        logger.debug("Catalog loaded with %d records", len(self._records))

    def all(self) -> List[Record]:
        """Full catalog in current order (copies)."""
        return copy.deepcopy(self._records)

    def get(self, key: str) -> Optional[Record]:
        idx = self._index_of(key)
        return copy.deepcopy(self._records[idx]) if idx is not None else None

    def add(self, record: Mapping[str, Any]) -> Record:
        """Insert a new record at the front.

        Raises:
            DuplicateIdError: if a record with the same id already exists.
        """
        record_id = record.get("id")
        if self._index_of(record_id) is not None:
            raise DuplicateIdError(record_id)
        stored = copy.deepcopy(dict(record))
        self._records.insert(0, stored)
        return copy.deepcopy(stored)

    def upsert(self, record: Mapping[str, Any], existing_key: Optional[str] = None) -> Record:
        """Replace the record identified by `existing_key` (default: the record's
        own id) or insert it when no such record exists.

        Replacement is a shallow field-by-field overwrite: fields of the old
        record that `record` does not carry are kept as they were.
        """
        key = existing_key if existing_key is not None else record.get("id")
        idx = self._index_of(key)
        if idx is None:
            return self.add(record)

        old = self._records[idx]
        new_id = record.get("id", old.get("id"))
        if new_id != old.get("id"):
            raise ImmutableIdError(old.get("id"), new_id)

        merged = {**old, **copy.deepcopy(dict(record))}
        self._records[idx] = merged
        return copy.deepcopy(merged)

    def delete(self, key: str) -> Optional[Record]:
        """Remove the record with id `key`. Absent keys are ignored."""
        idx = self._index_of(key)
        if idx is None:
            return None
        return self._records.pop(idx)

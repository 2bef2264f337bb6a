"""Filtered views over the catalog.

The view is recomputed from scratch on every query or category change; there
is no index to keep in sync.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping

from .models import Record

SEARCH_FIELDS = ("id", "name", "category", "brand", "model")


def _text(v: Any) -> str:
    return str(v) if v else ""


@dataclass
class CatalogFilter:
    """Free-text query plus an optional category selection."""

    query: str = ""
    category: str = ""

    def matches(self, record: Mapping[str, Any]) -> bool:
        q = (self.query or "").strip().lower()
        c = (self.category or "").strip().lower()
        if q:
            haystack = " ".join(_text(record.get(f)) for f in SEARCH_FIELDS).lower()
            if q not in haystack:
                return False
        if c and _text(record.get("category")).lower() != c:
            return False
        return True

    def apply(self, records: Iterable[Record]) -> List[Record]:
        return [r for r in records if self.matches(r)]


def filter_records(records: Iterable[Record], query: str = "", category: str = "") -> List[Record]:
    """Records matching both the query and the category, in catalog order."""
    return CatalogFilter(query=query, category=category).apply(records)


def list_categories(records: Iterable[Mapping[str, Any]]) -> List[str]:
    """Distinct non-empty categories, sorted, for the category selector."""
    return sorted({_text(r.get("category")).strip() for r in records} - {""})

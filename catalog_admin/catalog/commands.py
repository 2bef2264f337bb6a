"""Operator commands dispatched to a `CatalogSession`."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .models import Record


@dataclass
class AddCommand:
    form: Dict[str, Any]


@dataclass
class EditCommand:
    key: str
    form: Dict[str, Any]


@dataclass
class DeleteCommand:
    key: str


@dataclass
class FilterCommand:
    query: str = ""
    category: str = ""


@dataclass
class CommandResult:
    message: str
    view: List[Record] = field(default_factory=list)
    record: Optional[Record] = None

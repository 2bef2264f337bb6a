"""
Catalog editing session.

One `CatalogSession` owns the store, the current filter and the persistence
coordinator. Operator actions arrive as commands; reload and save go through
the coordinator.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List

from . import codec
from .commands import AddCommand, CommandResult, DeleteCommand, EditCommand, FilterCommand
from .errors import RecordNotFoundError
from .filters import CatalogFilter, list_categories
from .models import Record
from .persistence import LoadResult, OperationStatus, PersistenceCoordinator, SaveResult, serialize_catalog
from .store import CatalogStore
from .validation import validate_record

logger = logging.getLogger(__name__)


class CatalogSession:
    def __init__(self, coordinator: PersistenceCoordinator) -> None:
        self.coordinator = coordinator
        self.store: CatalogStore = coordinator.store
        self.filter = CatalogFilter()
        self._handlers: Dict[type, Callable[[Any], CommandResult]] = {
            AddCommand: self._add,
            EditCommand: self._edit,
            DeleteCommand: self._delete,
            FilterCommand: self._filter,
        }

    @property
    def status(self) -> OperationStatus:
        return self.coordinator.status

    # --- Commands --------------------------------------------------------------

    def dispatch(self, command: Any) -> CommandResult:
        handler = self._handlers.get(type(command))
        if handler is None:
            raise TypeError(f"Unsupported command: {type(command).__name__}")
        return handler(command)

    def _add(self, command: AddCommand) -> CommandResult:
        candidate = validate_record(codec.decode_form(command.form))
        record = self.store.add(candidate)
        logger.info("Added product %s", record["id"])
        return CommandResult("Added. Click Save All to persist.", self.view(), record)

    def _edit(self, command: EditCommand) -> CommandResult:
        if command.key not in self.store:
            raise RecordNotFoundError(command.key)
        candidate = validate_record(codec.decode_form(command.form))
        record = self.store.upsert(candidate, existing_key=command.key)
        logger.info("Updated product %s", record["id"])
        return CommandResult("Updated. Click Save All to persist.", self.view(), record)

    def _delete(self, command: DeleteCommand) -> CommandResult:
        removed = self.store.delete(command.key)
        if removed is None:
            raise RecordNotFoundError(command.key)
        logger.info("Deleted product %s", command.key)
        return CommandResult("Deleted. Click Save All to persist.", self.view(), removed)

    def _filter(self, command: FilterCommand) -> CommandResult:
        self.filter = CatalogFilter(query=command.query, category=command.category)
        view = self.view()
        return CommandResult(f"{len(view)} of {len(self.store)} products", view)

    # --- Views -----------------------------------------------------------------

    def view(self) -> List[Record]:
        return self.filter.apply(self.store.all())

    def categories(self) -> List[str]:
        return list_categories(self.store.all())

    def edit_form(self, key: str) -> Dict[str, str]:
        record = self.store.get(key)
        if record is None:
            raise RecordNotFoundError(key)
        return codec.encode_form(record)

    def blank_form(self) -> Dict[str, str]:
        return codec.blank_form()

    def export_bytes(self) -> bytes:
        return serialize_catalog(self.store.all())

    # --- Persistence -----------------------------------------------------------

    async def reload(self) -> LoadResult:
        return await self.coordinator.load()

    async def save_all(self) -> SaveResult:
        return await self.coordinator.save(self.store.all())

"""
Persistence coordinator.

Loads the catalog from an ordered list of sources (first one that answers
wins) and saves it to the primary sink. When the sink is unavailable the full
catalog is handed to the export sink instead, and the save reports a degraded
outcome rather than failing.

Only one load or save runs at a time; `status` shows which one.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from catalog_admin.integrations.contracts.interfaces import (
    CatalogSink,
    CatalogSource,
    CatalogUnavailableError,
    ExportSink,
)

from .errors import ExportFailedError, OperationInProgressError, SourceUnavailableError
from .models import Record
from .store import CatalogStore

logger = logging.getLogger(__name__)

DEFAULT_EXPORT_FILENAME = "products.json"


class OperationStatus(str, Enum):
    IDLE = "Idle"
    LOADING = "Loading"
    SAVING = "Saving"


class SaveOutcome(str, Enum):
    SAVED = "saved"
    EXPORTED = "exported"


@dataclass
class LoadResult:
    source: str
    count: int
    fallback: bool = False


@dataclass
class SaveResult:
    outcome: SaveOutcome
    message: str
    count: int
    export_filename: Optional[str] = None
    export_location: Optional[Union[str, Path]] = None
    error: Optional[str] = None

    @property
    def degraded(self) -> bool:
        return self.outcome is SaveOutcome.EXPORTED

    def to_dict(self) -> Dict[str, Any]:
        return {
            "outcome": self.outcome.value,
            "degraded": self.degraded,
            "message": self.message,
            "count": self.count,
            "export_filename": self.export_filename,
            "export_location": str(self.export_location) if self.export_location is not None else None,
            "error": self.error,
        }


def serialize_catalog(records: Sequence[Record]) -> bytes:
    """Pretty-printed JSON bytes of the whole catalog (the export payload)."""
    return json.dumps(list(records), indent=2, ensure_ascii=False).encode("utf-8")


class PersistenceCoordinator:
    def __init__(
        self,
        store: CatalogStore,
        sources: Sequence[CatalogSource],
        sink: CatalogSink,
        exporter: ExportSink,
        export_filename: str = DEFAULT_EXPORT_FILENAME,
    ) -> None:
        self.store = store
        self.sources = list(sources)
        self.sink = sink
        self.exporter = exporter
        self.export_filename = export_filename
        self.status = OperationStatus.IDLE

    def _begin(self, status: OperationStatus) -> None:
        if self.status is not OperationStatus.IDLE:
            raise OperationInProgressError(self.status.value)
        self.status = status

    async def load(self) -> LoadResult:
        """Populate the store from the first available source.

        Raises:
            SourceUnavailableError: if every source failed. The store keeps
                whatever it held before.
            OperationInProgressError: if a load or save is already running.
        """
        self._begin(OperationStatus.LOADING)
        try:
            attempts = []
            for position, source in enumerate(self.sources):
                try:
                    records = await source.fetch_records()
                except CatalogUnavailableError as e:
                    logger.warning("Catalog source %s unavailable: %s", source.name, e)
                    attempts.append((source.name, str(e)))
                    continue

                self.store.load(records)
                logger.info("Loaded %d products from %s", len(records), source.name)
                return LoadResult(source=source.name, count=len(records), fallback=position > 0)

            logger.error("No catalog source available (%d tried)", len(attempts))
            raise SourceUnavailableError(attempts)
        finally:
            self.status = OperationStatus.IDLE

    async def save(self, catalog: Optional[Sequence[Record]] = None) -> SaveResult:
        """Write the full catalog to the sink, exporting locally if it is down."""
        self._begin(OperationStatus.SAVING)
        try:
            records: List[Record] = list(catalog) if catalog is not None else self.store.all()
            try:
                await self.sink.store_records(records)
            except CatalogUnavailableError as e:
                logger.warning("Cannot write products to %s, exporting %s instead: %s", self.sink.name, self.export_filename, e)
                try:
                    location = self.exporter.emit(serialize_catalog(records), self.export_filename)
                except OSError as export_error:
                    logger.error("Export of %s failed as well, products were not persisted: %s", self.export_filename, export_error)
                    raise ExportFailedError(str(e), str(export_error)) from export_error
                return SaveResult(
                    outcome=SaveOutcome.EXPORTED,
                    message=f"Cannot write on server. Exported {self.export_filename} instead.",
                    count=len(records),
                    export_filename=self.export_filename,
                    export_location=location,
                    error=str(e),
                )

            return SaveResult(
                outcome=SaveOutcome.SAVED,
                message=f"Products saved to {self.export_filename}",
                count=len(records),
            )
        finally:
            self.status = OperationStatus.IDLE

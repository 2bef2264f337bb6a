from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Union


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class CatalogUnavailableError(Exception):
    """A source or sink could not serve the request.

    Raised for transport errors, non-success responses and bodies that are not
    a list of product objects. The persistence coordinator treats it as the
    signal to try the next source, or to fall back to a local export.
    """

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


# ---------------------------------------------------------------------------
# Interfaces
# ---------------------------------------------------------------------------

class CatalogSource(ABC):
    """Read side: returns the full list of product records."""

    name: str = "source"

    @abstractmethod
    async def fetch_records(self) -> List[Dict[str, Any]]:
        ...


class CatalogSink(ABC):
    """Write side: replaces the full list of product records."""

    name: str = "sink"

    @abstractmethod
    async def store_records(self, records: List[Dict[str, Any]]) -> None:
        ...


class ExportSink(ABC):
    """Hands serialized bytes to the operator (download, file on disk, ...)."""

    @abstractmethod
    def emit(self, data: bytes, filename: str) -> Union[str, Path, None]:
        ...


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def ensure_record_list(body: Any, source: str) -> List[Dict[str, Any]]:
    """Check that a decoded body has the record-list shape."""
    if not isinstance(body, list) or not all(isinstance(item, dict) for item in body):
        raise CatalogUnavailableError(f"{source} did not return a list of products")
    return body

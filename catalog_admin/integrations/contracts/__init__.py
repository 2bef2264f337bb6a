"""
Contracts for catalog sources and sinks.

Both the HTTP client and the local file clients implement these interfaces, so
the persistence coordinator never needs to know which one it is talking to.
"""

from .interfaces import (
    CatalogSink,
    CatalogSource,
    CatalogUnavailableError,
    ExportSink,
    ensure_record_list,
)

__all__ = [
    "CatalogSink",
    "CatalogSource",
    "CatalogUnavailableError",
    "ExportSink",
    "ensure_record_list",
]

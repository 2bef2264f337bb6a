"""
Local clients.

These never make network calls. They read the static products file and write
exports to disk, and follow the SAME interfaces as the HTTP client.
"""

from .file_export import FileExportSink, MemoryExportSink
from .static_catalog import StaticFileCatalogSource

__all__ = ["FileExportSink", "MemoryExportSink", "StaticFileCatalogSource"]

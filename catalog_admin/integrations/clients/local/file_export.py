"""
Local export sinks.

`FileExportSink` drops the exported catalog into a directory on disk so the
operator keeps a copy when the products API could not be written.
`MemoryExportSink` keeps the last export in memory for in-process callers
and tests. The admin download at `/admin/export` is built from the session,
not from either sink.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from catalog_admin.integrations.contracts.interfaces import ExportSink

logger = logging.getLogger(__name__)


class FileExportSink(ExportSink):
    def __init__(self, output_dir: Union[str, Path] = "exports") -> None:
        self.output_dir = Path(output_dir)

    def emit(self, data: bytes, filename: str) -> Path:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        target = self.output_dir / Path(filename).name
        tmp = target.with_suffix(target.suffix + ".tmp")
        tmp.write_bytes(data)
        tmp.replace(target)
        logger.info("Exported %d bytes to %s", len(data), target)
        return target


class MemoryExportSink(ExportSink):
    def __init__(self) -> None:
        self.data: Optional[bytes] = None
        self.filename: Optional[str] = None

    def emit(self, data: bytes, filename: str) -> None:
        self.data = data
        self.filename = filename

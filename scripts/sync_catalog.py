#!/usr/bin/env python3
"""
Load the product catalog from the configured sources and either:
- export it to a local products.json (default), or
- push it back to the products API (--push), exporting if the API is down.

Useful as an offline backup of the catalog.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

load_dotenv()

from catalog_admin.catalog import SourceUnavailableError
from catalog_admin.dependencies import build_session
from catalog_admin.integrations.clients.local import FileExportSink
from catalog_admin.utils.config_loader import load_admin_config

logger = logging.getLogger("sync_catalog")


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


async def run(config_path: Optional[Path], output_dir: Optional[Path], push: bool) -> int:
    cfg = load_admin_config(config_path)
    session = build_session(cfg)
    if output_dir is not None:
        session.coordinator.exporter = FileExportSink(output_dir)

    try:
        loaded = await session.reload()
    except SourceUnavailableError as e:
        logger.error("%s", e)
        return 1

    print(f"Loaded {loaded.count} products from {loaded.source}" + (" (fallback)" if loaded.fallback else ""))

    if push:
        result = await session.save_all()
        print(result.message)
        if result.degraded:
            print(f"Export written to {result.export_location}")
        return 0

    exporter = session.coordinator.exporter
    location = exporter.emit(session.export_bytes(), session.coordinator.export_filename)
    print(f"Exported {loaded.count} products to {location}")
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Export or push the product catalog.")
    parser.add_argument("--config", type=Path, default=None, help="Path to admin_config.yml")
    parser.add_argument("--output-dir", type=Path, default=None, help="Override export.output_dir from config")
    parser.add_argument("--push", action="store_true", help="Save the loaded catalog to the products API")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    args = parser.parse_args()

    setup_logging(args.verbose)
    return asyncio.run(run(args.config, args.output_dir, args.push))


if __name__ == "__main__":
    raise SystemExit(main())

"""
Client selection for the catalog session.

The choice of sources, sink and export target is made here and nowhere else:
API first, then the optional static URL, then the static file on disk.
"""

from __future__ import annotations

from pathlib import Path

from catalog_admin.catalog import CatalogSession, CatalogStore, PersistenceCoordinator
from catalog_admin.integrations.clients.local import FileExportSink, StaticFileCatalogSource
from catalog_admin.integrations.clients.real_http import HttpCatalogClient
from catalog_admin.utils.config_loader import AdminConfig

PROJECT_ROOT = Path(__file__).parent.parent


def resolve_path(path: str) -> Path:
    p = Path(path)
    return p if p.is_absolute() else PROJECT_ROOT / p


def build_session(config: AdminConfig) -> CatalogSession:
    api_client = HttpCatalogClient(
        base_url=config.api.base_url,
        products_path=config.api.products_path,
        timeout_seconds=config.api.timeout_seconds,
    )

    sources = [api_client]
    if config.fallback.static_url:
        sources.append(
            HttpCatalogClient(
                base_url=config.fallback.static_url,
                products_path="",
                timeout_seconds=config.api.timeout_seconds,
                name="static_url",
                read_only=True,
            )
        )
    sources.append(StaticFileCatalogSource(resolve_path(config.fallback.static_path)))

    coordinator = PersistenceCoordinator(
        store=CatalogStore(),
        sources=sources,
        sink=api_client,
        exporter=FileExportSink(resolve_path(config.export.output_dir)),
        export_filename=config.export.filename,
    )
    return CatalogSession(coordinator)

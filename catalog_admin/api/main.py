"""
FastAPI application - Main entry point
"""

from dotenv import load_dotenv

load_dotenv()

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog_admin import __version__
from catalog_admin.api.admin_router import router as admin_router
from catalog_admin.api.products_router import router as products_router
from catalog_admin.catalog import CatalogSession, SourceUnavailableError
from catalog_admin.dependencies import build_session, resolve_path
from catalog_admin.utils.config_loader import AdminConfig, load_admin_config

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


# ============================================================================
# STARTUP/SHUTDOWN
# ============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the catalog on startup"""
    logger.info("Starting Catalog Admin API...")
    try:
        loaded = await app.state.session.reload()
        logger.info("Catalog ready: %d products from %s", loaded.count, loaded.source)
    except SourceUnavailableError as e:
        logger.error(f"Could not load catalog on startup: {e}")

    yield

    logger.info("Shutting down Catalog Admin API...")


def create_app(config: Optional[AdminConfig] = None, session: Optional[CatalogSession] = None) -> FastAPI:
    config = config or load_admin_config()

    app = FastAPI(
        title="Catalog Admin API",
        description="Search, add, edit and delete catalog products; save to the products API or export",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.config = config
    app.state.session = session or build_session(config)
    app.state.products_path = resolve_path(config.server.data_path)

    app.include_router(products_router)
    app.include_router(admin_router)

    @app.get("/health", tags=["Health"])
    async def health_check():
        return {"status": "healthy", "catalog_status": app.state.session.status.value}

    return app


app = create_app()

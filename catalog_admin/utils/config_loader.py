"""
Configuration loader for the catalog admin
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "admin_config.yml"


class ApiConfig(BaseModel):
    """Products API (primary source and sink)"""

    base_url: str = ""
    products_path: str = "/api/products"
    timeout_seconds: float = Field(default=10.0, gt=0, le=300)


class FallbackConfig(BaseModel):
    """Static products data used when the API is unavailable"""

    static_url: str = ""
    static_path: str = "data/products.json"


class ExportConfig(BaseModel):
    """Local export written when a save cannot reach the API"""

    output_dir: str = "exports"
    filename: str = "products.json"


class ServerConfig(BaseModel):
    """File backing the bundled /api/products endpoint"""

    data_path: str = "data/products.json"


class AdminConfig(BaseModel):
    api: ApiConfig = Field(default_factory=ApiConfig)
    fallback: FallbackConfig = Field(default_factory=FallbackConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)


def load_admin_config(config_path: Optional[Path] = None) -> AdminConfig:
    """
    Load and validate admin configuration from YAML file

    Args:
        config_path: Path to config file. Defaults to $CATALOG_ADMIN_CONFIG,
            then config/admin_config.yml

    Returns:
        Validated AdminConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    if config_path is None:
        env_path = os.getenv("CATALOG_ADMIN_CONFIG")
        config_path = Path(env_path) if env_path else DEFAULT_CONFIG_PATH

    if not config_path.exists():
        raise FileNotFoundError(f"Admin config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    try:
        config = AdminConfig(**data)
    except ValidationError as e:
        logger.error(f"Admin config validation failed: {e}")
        raise

    api_url = os.getenv("CATALOG_API_URL")
    if api_url:
        config.api.base_url = api_url

    logger.info(f"Loaded admin config from {config_path}")
    return config

"""
Products API HTTP Client.

Reads the product list with `GET {base_url}{products_path}` and writes the full
list back with `PUT`. Any transport error or non-2xx response surfaces as
`CatalogUnavailableError`.

The same client doubles as the static fallback source when the products file
is published at a plain URL (construct it with `read_only=True`).
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional

import httpx

from catalog_admin.integrations.contracts.interfaces import (
    CatalogSink,
    CatalogSource,
    CatalogUnavailableError,
    ensure_record_list,
)

logger = logging.getLogger(__name__)


class HttpCatalogClient(CatalogSource, CatalogSink):
    def __init__(
        self,
        base_url: Optional[str] = None,
        products_path: str = "/api/products",
        timeout_seconds: float = 10.0,
        name: str = "api",
        read_only: bool = False,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = (base_url or os.getenv("CATALOG_API_URL", "")).rstrip("/")
        self.products_path = products_path
        self.timeout_seconds = timeout_seconds
        self.name = name
        self.read_only = read_only
        self._transport = transport

    @property
    def url(self) -> str:
        return f"{self.base_url}{self.products_path}"

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout_seconds, transport=self._transport)

    async def fetch_records(self) -> List[Dict[str, Any]]:
        if not self.base_url:
            raise CatalogUnavailableError(f"{self.name}: base URL is not configured")

        try:
            async with self._client() as client:
                response = await client.get(self.url, headers={"Cache-Control": "no-store"})
                response.raise_for_status()
                body = response.json()
        except httpx.HTTPStatusError as e:
            raise CatalogUnavailableError(
                f"{self.name}: GET {self.url} returned {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise CatalogUnavailableError(f"{self.name}: GET {self.url} failed: {e}") from e
        except ValueError as e:
            raise CatalogUnavailableError(f"{self.name}: response is not JSON") from e

        return ensure_record_list(body, self.name)

    async def store_records(self, records: List[Dict[str, Any]]) -> None:
        if self.read_only:
            raise CatalogUnavailableError(f"{self.name} is read-only")
        if not self.base_url:
            raise CatalogUnavailableError(f"{self.name}: base URL is not configured")

        try:
            async with self._client() as client:
                response = await client.put(self.url, json=records, headers={"Content-Type": "application/json"})
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise CatalogUnavailableError(
                f"{self.name}: PUT {self.url} returned {e.response.status_code}: {e.response.text}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise CatalogUnavailableError(f"{self.name}: PUT {self.url} failed: {e}") from e

        logger.info("Stored %d products at %s", len(records), self.url)

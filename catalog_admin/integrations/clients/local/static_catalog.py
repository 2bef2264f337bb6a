"""
Static Product Catalogue Source (local file).

Reads the product list from a JSON file on disk. Used as the fallback source
when the products API is not reachable, e.g. when the admin runs without a
backing service.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Union

from catalog_admin.integrations.contracts.interfaces import (
    CatalogSource,
    CatalogUnavailableError,
    ensure_record_list,
)


class StaticFileCatalogSource(CatalogSource):
    def __init__(self, path: Union[str, Path], name: str = "static") -> None:
        self.path = Path(path)
        self.name = name

    async def fetch_records(self) -> List[Dict[str, Any]]:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            raise CatalogUnavailableError(f"{self.name}: {self.path} not found") from e
        except (OSError, ValueError) as e:
            raise CatalogUnavailableError(f"{self.name}: cannot read {self.path}: {e}") from e
        return ensure_record_list(data, self.name)

"""
HTTP integration clients.

Must implement the interfaces in catalog_admin.integrations.contracts and
return records shaped as a list of JSON objects.
"""

from .catalog_api import HttpCatalogClient

__all__ = ["HttpCatalogClient"]

"""Pytest fixtures for catalog store, session and API tests."""

import pytest

from catalog_admin.catalog import CatalogStore


@pytest.fixture
def records():
    return [
        {
            "id": "A1",
            "name": "Widget",
            "category": "Tools",
            "brand": "Acme",
            "model": "W-1",
            "tags": ["metal"],
            "spec": {"weight": "1kg"},
            "warehouse": "north",
        },
        {"id": "B2", "name": "Desk Lamp", "category": "Lighting", "brand": "Lumo", "model": "L2"},
        {"id": "C3", "name": "Hammer", "category": "tools", "brand": "Acme", "model": "H-9"},
    ]


@pytest.fixture
def store(records):
    return CatalogStore(records)

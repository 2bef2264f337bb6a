import json

import pytest
from fastapi.testclient import TestClient

from catalog_admin.api.main import create_app
from catalog_admin.catalog import CatalogSession, CatalogStore, PersistenceCoordinator
from catalog_admin.integrations.clients.local import FileExportSink
from catalog_admin.integrations.contracts import CatalogSink, CatalogSource, CatalogUnavailableError
from catalog_admin.utils.config_loader import AdminConfig


class DummySource(CatalogSource):
    def __init__(self, name, records=None):
        self.name = name
        self.records = records

    async def fetch_records(self):
        if self.records is None:
            raise CatalogUnavailableError(f"{self.name} down")
        return self.records


class DummySink(CatalogSink):
    name = "api"

    def __init__(self, available=True):
        self.available = available
        self.stored = None

    async def store_records(self, records):
        if not self.available:
            raise CatalogUnavailableError("PUT /api/products returned 503")
        self.stored = records


def _build(tmp_path, records, sources=None, sink=None):
    config = AdminConfig(
        export={"output_dir": str(tmp_path / "exports")},
        server={"data_path": str(tmp_path / "products.json")},
    )
    coordinator = PersistenceCoordinator(
        store=CatalogStore(),
        sources=sources or [DummySource("api"), DummySource("static", records)],
        sink=sink or DummySink(),
        exporter=FileExportSink(tmp_path / "exports"),
    )
    session = CatalogSession(coordinator)
    return create_app(config=config, session=session), session


@pytest.fixture
def app_and_session(tmp_path, records):
    return _build(tmp_path, records)


def test_startup_loads_from_fallback(app_and_session):
    app, session = app_and_session
    with TestClient(app) as client:
        assert len(session.store) == 3
        res = client.get("/admin/status")
        assert res.json()["status"] == "Idle"
        assert res.json()["total"] == 3


def test_startup_survives_all_sources_down(tmp_path, records):
    app, session = _build(tmp_path, records, sources=[DummySource("api"), DummySource("static")])
    with TestClient(app) as client:
        assert len(session.store) == 0
        assert client.get("/health").status_code == 200
        res = client.post("/admin/reload")
        assert res.status_code == 503
        assert [a["source"] for a in res.json()["detail"]["attempts"]] == ["api", "static"]


def test_list_and_filter_products(app_and_session):
    app, _ = app_and_session
    with TestClient(app) as client:
        res = client.get("/admin/products")
        assert [p["id"] for p in res.json()["products"]] == ["A1", "B2", "C3"]

        res = client.get("/admin/products", params={"q": "acme", "category": "TOOLS"})
        assert [p["id"] for p in res.json()["products"]] == ["A1", "C3"]

        assert client.get("/admin/categories").json() == {"categories": ["Lighting", "Tools", "tools"]}


def test_add_edit_delete_flow(app_and_session):
    app, session = app_and_session
    with TestClient(app) as client:
        assert client.get("/admin/products/new/form").json()["spec"] == "{}"

        res = client.post("/admin/products", json={"id": "D4", "name": "Saw", "category": "Tools", "tags": "a, b"})
        assert res.status_code == 201
        assert res.json()["product"]["tags"] == ["a", "b"]
        assert session.store.all()[0]["id"] == "D4"

        form = client.get("/admin/products/A1/form").json()
        form["name"] = "Widget Pro"
        res = client.put("/admin/products/A1", json=form)
        assert res.status_code == 200
        assert session.store.get("A1")["name"] == "Widget Pro"
        assert session.store.get("A1")["warehouse"] == "north"

        res = client.delete("/admin/products/B2")
        assert res.status_code == 200
        assert client.delete("/admin/products/B2").status_code == 404


def test_error_mapping(app_and_session):
    app, session = app_and_session
    with TestClient(app) as client:
        res = client.post("/admin/products", json={"id": "A1", "name": "Again", "category": "Tools"})
        assert res.status_code == 409

        res = client.post("/admin/products", json={"id": "X", "name": "", "category": ""})
        assert res.status_code == 422
        assert set(res.json()["detail"]["field_errors"]) == {"name", "category"}

        res = client.post("/admin/products", json={"id": "X", "name": "n", "category": "c", "spec": "nope"})
        assert res.status_code == 422
        assert "spec" in res.json()["detail"]["field_errors"]

        res = client.put("/admin/products/A1", json={"id": "B9", "name": "n", "category": "c"})
        assert res.status_code == 422

        assert client.get("/admin/products/ZZ/form").status_code == 404
        assert len(session.store) == 3


def test_save_success(tmp_path, records):
    sink = DummySink()
    app, _ = _build(tmp_path, records, sink=sink)
    with TestClient(app) as client:
        res = client.post("/admin/save")
        assert res.status_code == 200
        assert res.json()["outcome"] == "saved"
        assert res.json()["degraded"] is False
        assert [r["id"] for r in sink.stored] == ["A1", "B2", "C3"]


def test_save_degrades_to_file_export(tmp_path, records):
    app, session = _build(tmp_path, records, sink=DummySink(available=False))
    with TestClient(app) as client:
        client.delete("/admin/products/C3")
        res = client.post("/admin/save")
        body = res.json()
        assert res.status_code == 200
        assert body["outcome"] == "exported"
        assert body["degraded"] is True

        exported = tmp_path / "exports" / "products.json"
        assert exported.read_bytes() == session.export_bytes()
        assert [r["id"] for r in json.loads(exported.read_text(encoding="utf-8"))] == ["A1", "B2"]


def test_save_fails_when_export_also_fails(tmp_path, records):
    (tmp_path / "exports").write_text("occupied", encoding="utf-8")
    app, session = _build(tmp_path, records, sink=DummySink(available=False))
    with TestClient(app) as client:
        res = client.post("/admin/save")
        detail = res.json()["detail"]
        assert res.status_code == 503
        assert detail["sink_error"] == "PUT /api/products returned 503"
        assert detail["export_error"]
        assert client.get("/admin/status").json()["status"] == "Idle"


def test_export_download(app_and_session):
    app, session = app_and_session
    with TestClient(app) as client:
        res = client.get("/admin/export")
        assert res.headers["content-disposition"] == 'attachment; filename="products.json"'
        assert res.content == session.export_bytes()


def test_products_endpoint_round_trip(app_and_session, tmp_path):
    app, _ = app_and_session
    with TestClient(app) as client:
        assert client.get("/api/products").status_code == 404

        res = client.put("/api/products", json=[{"id": "A1", "name": "Widget", "category": "Tools"}])
        assert res.json() == {"success": True, "count": 1}
        assert client.get("/api/products").json() == [{"id": "A1", "name": "Widget", "category": "Tools"}]
        assert (tmp_path / "products.json").read_text(encoding="utf-8").startswith("[\n  {")


def test_products_endpoint_rejects_undecodable_file(app_and_session, tmp_path):
    app, _ = app_and_session
    (tmp_path / "products.json").write_bytes(b'[{"id":"A1","name":"\xff\xfe"}]')
    with TestClient(app) as client:
        res = client.get("/api/products")
        assert res.status_code == 500
        assert res.json()["detail"] == "Failed to read products"

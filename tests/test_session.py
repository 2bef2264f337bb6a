import pytest

from catalog_admin.catalog import (
    AddCommand,
    CatalogSession,
    CatalogStore,
    DeleteCommand,
    EditCommand,
    FilterCommand,
    PersistenceCoordinator,
)
from catalog_admin.catalog.errors import (
    DuplicateIdError,
    InvalidSpecFormatError,
    MissingRequiredFieldError,
    RecordNotFoundError,
)
from catalog_admin.integrations.clients.local import MemoryExportSink
from catalog_admin.integrations.contracts import CatalogSink, CatalogSource, CatalogUnavailableError


class FixedSource(CatalogSource):
    name = "api"

    def __init__(self, records):
        self.records = records

    async def fetch_records(self):
        return self.records


class DownSink(CatalogSink):
    name = "api"

    async def store_records(self, records):
        raise CatalogUnavailableError("connection refused")


@pytest.fixture
def session(records):
    coordinator = PersistenceCoordinator(
        store=CatalogStore(records),
        sources=[FixedSource(records)],
        sink=DownSink(),
        exporter=MemoryExportSink(),
    )
    return CatalogSession(coordinator)


def _form(**overrides):
    form = {"id": "D4", "name": "Saw", "category": "Tools", "tags": "wood, cut", "spec": '{"teeth": 24}'}
    form.update(overrides)
    return form


def test_add_command_inserts_decoded_record_first(session):
    result = session.dispatch(AddCommand(form=_form()))
    assert result.message == "Added. Click Save All to persist."
    assert result.record["tags"] == ["wood", "cut"]
    assert result.record["spec"] == {"teeth": 24}
    assert session.store.all()[0]["id"] == "D4"
    assert result.view[0]["id"] == "D4"


def test_add_command_duplicate_id_blocks_insert(session):
    before = session.store.all()
    with pytest.raises(DuplicateIdError):
        session.dispatch(AddCommand(form=_form(id="A1")))
    assert session.store.all() == before


@pytest.mark.parametrize(
    "form, error",
    [
        (_form(name="  "), MissingRequiredFieldError),
        (_form(spec="not json"), InvalidSpecFormatError),
    ],
)
def test_invalid_forms_leave_catalog_unmodified(session, form, error):
    before = session.store.all()
    with pytest.raises(error):
        session.dispatch(AddCommand(form=form))
    with pytest.raises(error):
        session.dispatch(EditCommand(key="A1", form={**form, "id": "A1"}))
    assert session.store.all() == before


def test_edit_round_trip_preserves_unknown_fields(session):
    form = session.edit_form("A1")
    form["name"] = "Widget Pro"
    result = session.dispatch(EditCommand(key="A1", form=form))

    assert result.message == "Updated. Click Save All to persist."
    updated = session.store.get("A1")
    assert updated["name"] == "Widget Pro"
    assert updated["warehouse"] == "north"
    assert updated["spec"] == {"weight": "1kg"}
    assert updated["tags"] == ["metal"]


def test_edit_unknown_key_is_not_found(session):
    with pytest.raises(RecordNotFoundError):
        session.dispatch(EditCommand(key="ZZ", form=_form(id="ZZ")))


def test_delete_command(session):
    result = session.dispatch(DeleteCommand(key="B2"))
    assert result.message == "Deleted. Click Save All to persist."
    assert "B2" not in session.store
    with pytest.raises(RecordNotFoundError):
        session.dispatch(DeleteCommand(key="B2"))


def test_filter_command_sets_view_and_survives_edits(session):
    result = session.dispatch(FilterCommand(query="", category="tools"))
    assert [r["id"] for r in result.view] == ["A1", "C3"]

    session.dispatch(AddCommand(form=_form()))
    assert [r["id"] for r in session.view()] == ["D4", "A1", "C3"]


def test_categories(session):
    assert session.categories() == ["Lighting", "Tools", "tools"]


def test_unknown_command_type(session):
    with pytest.raises(TypeError):
        session.dispatch("add")


@pytest.mark.asyncio
async def test_save_all_degrades_to_export(session):
    session.dispatch(DeleteCommand(key="C3"))
    result = await session.save_all()
    assert result.degraded is True
    assert session.coordinator.exporter.data == session.export_bytes()


@pytest.mark.asyncio
async def test_reload_discards_unsaved_edits(session, records):
    session.dispatch(DeleteCommand(key="A1"))
    loaded = await session.reload()
    assert loaded.count == 3
    assert session.store.all() == records

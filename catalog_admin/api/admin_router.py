"""
Admin endpoints: the operator surface over a `CatalogSession`.

Add/edit take the flat text form (`RecordForm`); list/filter returns the
current filtered view. Catalog errors are translated into HTTP errors here.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response

from catalog_admin.catalog import (
    AddCommand,
    CatalogError,
    CatalogSession,
    DeleteCommand,
    DuplicateIdError,
    EditCommand,
    ExportFailedError,
    FilterCommand,
    ImmutableIdError,
    InvalidSpecFormatError,
    MissingRequiredFieldError,
    OperationInProgressError,
    RecordNotFoundError,
    SourceUnavailableError,
)
from catalog_admin.catalog.commands import CommandResult
from catalog_admin.catalog.models import RecordForm

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["Admin"])

_STATUS_CODES = [
    (MissingRequiredFieldError, 422),
    (InvalidSpecFormatError, 422),
    (ImmutableIdError, 422),
    (DuplicateIdError, 409),
    (OperationInProgressError, 409),
    (RecordNotFoundError, 404),
    (SourceUnavailableError, 503),
    (ExportFailedError, 503),
]


def get_session(request: Request) -> CatalogSession:
    return request.app.state.session


def _http_error(e: CatalogError) -> HTTPException:
    code = next((c for cls, c in _STATUS_CODES if isinstance(e, cls)), 400)
    return HTTPException(status_code=code, detail={"message": e.message, **e.payload})


def _result(result: CommandResult, session: CatalogSession) -> Dict[str, Any]:
    return {
        "success": True,
        "message": result.message,
        "product": result.record,
        "products": result.view,
        "total": len(session.store),
    }


@router.get("/products")
async def list_products(
    q: str = Query(default="", description="Search id, name, category, brand, model"),
    category: str = Query(default="", description="Exact category (case-insensitive)"),
    session: CatalogSession = Depends(get_session),
):
    return _result(session.dispatch(FilterCommand(query=q, category=category)), session)


@router.get("/categories")
async def list_categories(session: CatalogSession = Depends(get_session)):
    return {"categories": session.categories()}


@router.get("/products/new/form")
async def new_product_form(session: CatalogSession = Depends(get_session)):
    return session.blank_form()


@router.get("/products/{product_id}/form")
async def edit_product_form(product_id: str, session: CatalogSession = Depends(get_session)):
    try:
        return session.edit_form(product_id)
    except CatalogError as e:
        raise _http_error(e)


@router.post("/products", status_code=201)
async def add_product(form: RecordForm, session: CatalogSession = Depends(get_session)):
    try:
        result = session.dispatch(AddCommand(form=form.model_dump()))
    except CatalogError as e:
        logger.info("Add rejected: %s", e)
        raise _http_error(e)
    return _result(result, session)


@router.put("/products/{product_id}")
async def edit_product(product_id: str, form: RecordForm, session: CatalogSession = Depends(get_session)):
    try:
        result = session.dispatch(EditCommand(key=product_id, form=form.model_dump()))
    except CatalogError as e:
        logger.info("Edit of %s rejected: %s", product_id, e)
        raise _http_error(e)
    return _result(result, session)


@router.delete("/products/{product_id}")
async def delete_product(product_id: str, session: CatalogSession = Depends(get_session)):
    try:
        result = session.dispatch(DeleteCommand(key=product_id))
    except CatalogError as e:
        raise _http_error(e)
    return _result(result, session)


@router.post("/reload")
async def reload_products(session: CatalogSession = Depends(get_session)):
    try:
        loaded = await session.reload()
    except CatalogError as e:
        raise _http_error(e)
    return {"success": True, "source": loaded.source, "fallback": loaded.fallback, "count": loaded.count}


@router.post("/save")
async def save_products(session: CatalogSession = Depends(get_session)):
    try:
        saved = await session.save_all()
    except CatalogError as e:
        raise _http_error(e)
    return {"success": True, **saved.to_dict()}


@router.get("/export")
async def export_products(session: CatalogSession = Depends(get_session)):
    filename = session.coordinator.export_filename
    return Response(
        content=session.export_bytes(),
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/status")
async def get_status(session: CatalogSession = Depends(get_session)):
    return {
        "status": session.status.value,
        "total": len(session.store),
        "query": session.filter.query,
        "category": session.filter.category,
    }

"""
Products endpoint backed by a JSON file.

This is the server side the admin talks to: `GET` returns the stored list,
`PUT` replaces it wholesale.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from fastapi import APIRouter, HTTPException, Request

logger = logging.getLogger(__name__)

router = APIRouter()


def _data_path(request: Request) -> Path:
    return request.app.state.products_path


@router.get("/api/products", tags=["Products"])
async def get_products(request: Request):
    path = _data_path(request)
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise HTTPException(status_code=404, detail="products.json not found")
    except (OSError, ValueError) as e:
        logger.error(f"Error reading {path}: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to read products")


@router.put("/api/products", tags=["Products"])
async def put_products(products: List[Dict[str, Any]], request: Request):
    path = _data_path(request)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_suffix(path.suffix + ".tmp")
        tmp.write_text(json.dumps(products, indent=2, ensure_ascii=False), encoding="utf-8")
        tmp.replace(path)
    except OSError as e:
        logger.error(f"Error writing {path}: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to write products")
    logger.info("Wrote %d products to %s", len(products), path)
    return {"success": True, "count": len(products)}

"""Product API routes for the mock catalog"""

import logging
from typing import Optional

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from powerplay.models.product import ErrorResponse, ProductsResponse
from .database import PageOutOfRangeError, product_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["Products"])


@router.get(
    "",
    response_model=ProductsResponse,
    responses={404: {"model": ErrorResponse}},
)
async def list_products(
    page: int = Query(0, ge=0, description="Zero-based page number"),
    limit: int = Query(10, ge=1, le=100, description="Products per page"),
    category: Optional[str] = Query(None, description="Filter by category"),
):
    """Get one page of products"""
    try:
        return product_db.get_page(page=page, limit=limit, category=category)
    except PageOutOfRangeError as e:
        logger.info(f"Rejected request: {e}")
        body = ErrorResponse(error="not_found", message=str(e), code=404)
        return JSONResponse(status_code=404, content=body.model_dump())


@router.get("/categories", response_model=list[str])
async def list_categories():
    """List all product categories"""
    return product_db.get_categories()

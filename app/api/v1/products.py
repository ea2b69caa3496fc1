from __future__ import annotations

from typing import List

from fastapi import APIRouter

from app.core.errors import ProductNotFoundError
from app.schemas.error import ErrorResponse
from app.schemas.product import ProductCatalogEntry
from app.services.product_catalog import get_product_by_slug, list_products

router = APIRouter()


@router.get(
    "/products",
    response_model=List[ProductCatalogEntry],
    summary="List catalog products",
)
async def get_products() -> List[ProductCatalogEntry]:
    return list(list_products())


@router.get(
    "/products/{slug}",
    response_model=ProductCatalogEntry,
    summary="Get a catalog product by slug",
    responses={404: {"model": ErrorResponse, "description": "Unknown slug"}},
)
async def get_product(slug: str) -> ProductCatalogEntry:
    product = get_product_by_slug(slug)
    if product is None:
        raise ProductNotFoundError(slug)
    return product

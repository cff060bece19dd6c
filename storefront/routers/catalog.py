"""
Storefront Catalog Router

Public product listings: home page, sections (women, men, sale, ...) and
product detail.
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from storefront.errors import ERROR_PRODUCT_NOT_FOUND
from storefront.services.database import Database, get_database
from .serializers import serialize_category, serialize_product

router = APIRouter(tags=["storefront"])


@router.get("/products")
async def list_products(section: Optional[str] = None, db: Database = Depends(get_database)):
    """Featured products, or one section when ?section= is given."""
    if section is None:
        products = await db.catalog.featured()
    else:
        try:
            products = await db.catalog.section(section)
        except ValueError as ve:
            raise HTTPException(status_code=404, detail=str(ve))
    return {"products": [serialize_product(p) for p in products]}


@router.get("/products/{product_id}")
async def get_product(product_id: str, db: Database = Depends(get_database)):
    product = await db.catalog.get_product(product_id)
    if not product:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)
    return serialize_product(product)


@router.get("/categories")
async def list_categories(db: Database = Depends(get_database)):
    categories = await db.products_domain.list_categories()
    return {"categories": [serialize_category(c) for c in categories]}

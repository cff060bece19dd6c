"""
Admin Products Router

Product management endpoints.
"""
from fastapi import APIRouter, Depends, HTTPException

from storefront.auth import verify_admin
from storefront.errors import ERROR_PRODUCT_NOT_FOUND
from storefront.services.database import Database, get_database
from storefront.services.domains import parse_sizes
from ..models import ProductRequest
from ..serializers import serialize_product

router = APIRouter(tags=["admin-products"])


def _product_fields(request: ProductRequest) -> dict:
    fields = request.model_dump()
    fields["sizes"] = parse_sizes(request.sizes)
    fields["category_id"] = request.category_id or None
    return fields


@router.get("/products")
async def admin_list_products(admin=Depends(verify_admin), db: Database = Depends(get_database)):
    """All products, including inactive ones"""
    products = await db.products_domain.list_products()
    return {"products": [serialize_product(p) for p in products]}


@router.post("/products")
async def admin_create_product(
    request: ProductRequest, admin=Depends(verify_admin), db: Database = Depends(get_database)
):
    product = await db.products_domain.save_product(_product_fields(request))
    return {"success": True, "product": serialize_product(product)}


@router.put("/products/{product_id}")
async def admin_update_product(
    product_id: str,
    request: ProductRequest,
    admin=Depends(verify_admin),
    db: Database = Depends(get_database),
):
    product = await db.products_domain.save_product(_product_fields(request), product_id)
    if not product:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)
    return {"success": True, "product": serialize_product(product)}


@router.post("/products/{product_id}/toggle-active")
async def admin_toggle_product(product_id: str, admin=Depends(verify_admin), db: Database = Depends(get_database)):
    product = await db.products_domain.toggle_active(product_id)
    if not product:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)
    return {"success": True, "is_active": product.is_active}


@router.delete("/products/{product_id}")
async def admin_delete_product(product_id: str, admin=Depends(verify_admin), db: Database = Depends(get_database)):
    deleted = await db.products_domain.delete_product(product_id)
    if not deleted:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)
    return {"success": True}

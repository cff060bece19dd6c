"""Admin Categories Router"""
from fastapi import APIRouter, Depends, HTTPException

from storefront.auth import verify_admin
from storefront.errors import ERROR_CATEGORY_NOT_FOUND
from storefront.services.database import Database, get_database
from ..models import CategoryRequest
from ..serializers import serialize_category

router = APIRouter(tags=["admin-categories"])


@router.post("/categories")
async def admin_create_category(
    request: CategoryRequest, admin=Depends(verify_admin), db: Database = Depends(get_database)
):
    category = await db.products_domain.save_category(request.model_dump())
    return {"success": True, "category": serialize_category(category)}


@router.put("/categories/{category_id}")
async def admin_update_category(
    category_id: str,
    request: CategoryRequest,
    admin=Depends(verify_admin),
    db: Database = Depends(get_database),
):
    category = await db.products_domain.save_category(request.model_dump(), category_id)
    if not category:
        raise HTTPException(status_code=404, detail=ERROR_CATEGORY_NOT_FOUND)
    return {"success": True, "category": serialize_category(category)}


@router.delete("/categories/{category_id}")
async def admin_delete_category(category_id: str, admin=Depends(verify_admin), db: Database = Depends(get_database)):
    if not await db.products_domain.delete_category(category_id):
        raise HTTPException(status_code=404, detail=ERROR_CATEGORY_NOT_FOUND)
    return {"success": True}

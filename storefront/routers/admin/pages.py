"""
Admin Pages Router

Content page management and image insertion.
"""
from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from storefront.auth import verify_admin
from storefront.errors import ERROR_PAGE_NOT_FOUND
from storefront.services.database import Database, get_database
from ..models import PageRequest
from ..serializers import serialize_page

router = APIRouter(tags=["admin-pages"])


@router.get("/pages")
async def admin_list_pages(admin=Depends(verify_admin), db: Database = Depends(get_database)):
    pages = await db.pages_domain.list_pages()
    return {"pages": [serialize_page(p) for p in pages]}


@router.post("/pages")
async def admin_create_page(request: PageRequest, admin=Depends(verify_admin), db: Database = Depends(get_database)):
    page = await db.pages_domain.save_page(request.model_dump())
    return {"success": True, "page": serialize_page(page)}


@router.post("/pages/seed")
async def admin_seed_pages(admin=Depends(verify_admin), db: Database = Depends(get_database)):
    """Create drafts for About, Contact, FAQ, Track Order and Privacy Policy if missing"""
    created = await db.pages_domain.seed_managed_pages()
    return {"success": True, "created": [serialize_page(p) for p in created]}


@router.put("/pages/{page_id}")
async def admin_update_page(
    page_id: str,
    request: PageRequest,
    admin=Depends(verify_admin),
    db: Database = Depends(get_database),
):
    page = await db.pages_domain.save_page(request.model_dump(), page_id)
    if not page:
        raise HTTPException(status_code=404, detail=ERROR_PAGE_NOT_FOUND)
    return {"success": True, "page": serialize_page(page)}


@router.delete("/pages/{page_id}")
async def admin_delete_page(page_id: str, admin=Depends(verify_admin), db: Database = Depends(get_database)):
    if not await db.pages_domain.delete_page(page_id):
        raise HTTPException(status_code=404, detail=ERROR_PAGE_NOT_FOUND)
    return {"success": True}


@router.post("/pages/{page_id}/images")
async def admin_insert_page_image(
    page_id: str,
    file: UploadFile = File(...),
    admin=Depends(verify_admin),
    db: Database = Depends(get_database),
):
    """Upload an image (pasted or dropped in the editor) and append it to the page"""
    data = await file.read()
    result = await db.pages_domain.insert_image(
        page_id, file.filename or "image", data, content_type=file.content_type
    )
    if result is None:
        raise HTTPException(status_code=404, detail=ERROR_PAGE_NOT_FOUND)
    page, url = result
    return {"success": True, "url": url, "page": serialize_page(page)}


@router.get("/storage/buckets")
async def admin_list_buckets(admin=Depends(verify_admin), db: Database = Depends(get_database)):
    return {"buckets": await db.storage.list_buckets()}

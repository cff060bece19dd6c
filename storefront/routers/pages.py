"""Public content pages and order tracking."""
from fastapi import APIRouter, Depends, HTTPException

from storefront.errors import ERROR_ORDER_NOT_FOUND, ERROR_PAGE_NOT_FOUND
from storefront.services.database import Database, get_database
from .serializers import serialize_page

router = APIRouter(tags=["pages"])


@router.get("/pages/{slug}")
async def get_page(slug: str, db: Database = Depends(get_database)):
    """Published page by slug."""
    page = await db.pages_domain.get_published(slug)
    if not page:
        raise HTTPException(status_code=404, detail=ERROR_PAGE_NOT_FOUND)
    return serialize_page(page)


@router.get("/orders/{order_id}/track")
async def track_order(order_id: str, db: Database = Depends(get_database)):
    order = await db.orders_domain.get_order(order_id.strip())
    if not order:
        raise HTTPException(status_code=404, detail=ERROR_ORDER_NOT_FOUND)
    return {
        "order_id": order.id,
        "status": order.status,
        "created_at": order.created_at.isoformat() if order.created_at else None,
    }

"""Admin Orders Router"""
from fastapi import APIRouter, Depends, HTTPException

from storefront.auth import verify_admin
from storefront.errors import ERROR_ORDER_NOT_FOUND
from storefront.services.database import Database, get_database
from ..models import OrderStatusRequest
from ..serializers import serialize_order

router = APIRouter(tags=["admin-orders"])


@router.get("/orders")
async def admin_list_orders(admin=Depends(verify_admin), db: Database = Depends(get_database)):
    orders = await db.orders_domain.list_orders()
    return {"orders": [serialize_order(o) for o in orders]}


@router.post("/orders/{order_id}/advance")
async def admin_advance_order(order_id: str, admin=Depends(verify_admin), db: Database = Depends(get_database)):
    """Process -> Ship -> Deliver"""
    try:
        order = await db.orders_domain.advance(order_id)
    except ValueError as ve:
        raise HTTPException(status_code=400, detail=str(ve))
    if not order:
        raise HTTPException(status_code=404, detail=ERROR_ORDER_NOT_FOUND)
    return {"success": True, "status": order.status}


@router.post("/orders/{order_id}/cancel")
async def admin_cancel_order(order_id: str, admin=Depends(verify_admin), db: Database = Depends(get_database)):
    try:
        order = await db.orders_domain.cancel(order_id)
    except ValueError as ve:
        raise HTTPException(status_code=400, detail=str(ve))
    if not order:
        raise HTTPException(status_code=404, detail=ERROR_ORDER_NOT_FOUND)
    return {"success": True, "status": order.status}


@router.patch("/orders/{order_id}")
async def admin_update_order_status(
    order_id: str,
    request: OrderStatusRequest,
    admin=Depends(verify_admin),
    db: Database = Depends(get_database),
):
    try:
        order = await db.orders_domain.set_status(order_id, request.status)
    except ValueError as ve:
        raise HTTPException(status_code=400, detail=str(ve))
    if not order:
        raise HTTPException(status_code=404, detail=ERROR_ORDER_NOT_FOUND)
    return {"success": True, "status": order.status}

"""
Cart Router

Add and remove single units from the visitor's in-memory cart. Cart responses
carry cart_id in the body and in the X-Cart-Id header; clients send it back in
the X-Cart-Id header.
"""
from fastapi import APIRouter, Depends, HTTPException, Response

from storefront.cart import CartLedger, get_cart_manager
from storefront.config import get_settings
from storefront.errors import ERROR_PRODUCT_NOT_FOUND
from storefront.services.money import format_money
from storefront.services.database import Database, get_database
from .deps import CART_ID_HEADER, get_cart_ledger, peek_cart_ledger
from .models import AddToCartRequest

router = APIRouter(tags=["cart"])


def _cart_response(ledger: CartLedger, response: Response) -> dict:
    if ledger.cart_id:
        response.headers[CART_ID_HEADER] = ledger.cart_id
    summary = ledger.to_dict()
    summary["total_display"] = format_money(ledger.total_price(), get_settings().currency)
    return summary


@router.get("/cart")
async def get_cart(response: Response, ledger: CartLedger = Depends(peek_cart_ledger)):
    """Current cart; an empty summary (cart_id null) when the visitor has none."""
    return _cart_response(ledger, response)


@router.post("/cart/items")
async def add_cart_unit(
    request: AddToCartRequest,
    response: Response,
    ledger: CartLedger = Depends(get_cart_ledger),
    db: Database = Depends(get_database),
):
    """Add one unit of a product (name and price captured now)."""
    item = await db.catalog.add_to_cart(ledger, request.product_id)
    if item is None:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)
    return _cart_response(ledger, response)


@router.delete("/cart/items/{product_id}")
async def remove_cart_unit(
    product_id: str,
    response: Response,
    ledger: CartLedger = Depends(peek_cart_ledger),
):
    """Remove one unit; removing a product that is not in the cart changes nothing."""
    ledger.remove_unit(product_id)
    return _cart_response(ledger, response)


@router.delete("/cart")
async def discard_cart(ledger: CartLedger = Depends(peek_cart_ledger)):
    """Drop the cart when the shopper's view goes away."""
    get_cart_manager().discard(ledger.cart_id)
    return {"success": True}

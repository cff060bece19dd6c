"""
Shared Dependencies for Routers

Cart ledger injection and StorefrontError -> HTTP mapping.
"""

from fastapi import Header
from fastapi.responses import JSONResponse

from storefront.cart import CartLedger, get_cart_manager
from storefront.errors import (
    FetchFailure,
    StorageNotConfigured,
    StorefrontError,
    UploadRejected,
    WriteFailure,
)

CART_ID_HEADER = "X-Cart-Id"


def get_cart_ledger(cart_id: str = Header(None, alias=CART_ID_HEADER)) -> CartLedger:
    """
    The visitor's CartLedger.

    Clients echo back the cart_id from any cart response; an unknown or missing
    id opens a new empty cart.
    """
    return get_cart_manager().get_or_open(cart_id)


def peek_cart_ledger(cart_id: str = Header(None, alias=CART_ID_HEADER)) -> CartLedger:
    """
    The visitor's CartLedger for read-only views.

    Does not register a cart: a missing or unknown id yields an empty ledger
    without a cart_id.
    """
    return get_cart_manager().get_cart(cart_id) or CartLedger()


# Ordered most specific first
_STATUS_BY_ERROR = (
    (StorageNotConfigured, 503),
    (UploadRejected, 422),
    (FetchFailure, 502),
    (WriteFailure, 502),
)


def http_status_for(error: StorefrontError) -> int:
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status
    return 500


def storefront_error_response(error: StorefrontError) -> JSONResponse:
    """Response body the admin UI turns into a toast."""
    return JSONResponse(
        status_code=http_status_for(error),
        content={"detail": error.message, "code": error.code},
    )

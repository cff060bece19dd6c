"""Cart package: line items, the per-visitor ledger and its registry."""
from .models import LineItem
from .ledger import CartLedger
from .service import CartManager, get_cart_manager

__all__ = [
    "LineItem",
    "CartLedger",
    "CartManager",
    "get_cart_manager",
]

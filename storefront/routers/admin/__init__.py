"""
Admin API Router

Admin-only endpoints for products, categories, pages and orders.
Combines all sub-routers into a single router with tag "admin".
"""
from fastapi import APIRouter

from .products import router as products_router
from .categories import router as categories_router
from .pages import router as pages_router
from .orders import router as orders_router

router = APIRouter(tags=["admin"])

router.include_router(products_router)
router.include_router(categories_router)
router.include_router(pages_router)
router.include_router(orders_router)

__all__ = ["router"]

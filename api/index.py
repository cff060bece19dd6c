"""
Storefront API - Main FastAPI Application

Single entry point for the storefront, cart, content pages and admin console.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from storefront.config import get_settings
from storefront.errors import StorefrontError
from storefront.logging import get_logger
from storefront.services.database import close_database, init_database
from storefront.routers.admin import router as admin_router
from storefront.routers.auth import router as auth_router
from storefront.routers.cart import router as cart_router
from storefront.routers.catalog import router as catalog_router
from storefront.routers.deps import CART_ID_HEADER, storefront_error_response
from storefront.routers.pages import router as pages_router

logger = get_logger(__name__)


# ==================== FASTAPI APP ====================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    await init_database()
    yield
    await close_database()


app = FastAPI(
    title="Storefront",
    description="Storefront, cart and admin console API",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[CART_ID_HEADER],
)


@app.exception_handler(StorefrontError)
async def handle_storefront_error(request: Request, exc: StorefrontError):
    logger.warning("%s %s failed: %s", request.method, request.url.path, exc.message)
    return storefront_error_response(exc)


app.include_router(catalog_router, prefix="/api")
app.include_router(cart_router, prefix="/api")
app.include_router(pages_router, prefix="/api")
app.include_router(auth_router, prefix="/api")
app.include_router(admin_router, prefix="/api/admin")


# ==================== HEALTH CHECK ====================

@app.get("/api/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok", "service": "storefront"}

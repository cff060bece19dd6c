"""
Supabase Database Service

Provides the Database facade: repositories per record kind, object storage
and the domain services built on them.

Usage:
    from storefront.services.database import get_database

    # At FastAPI startup (lifespan):
    await init_database()

    db = get_database()
    products = await db.catalog.section("women")
"""

import asyncio
from typing import Optional

from supabase._async.client import AsyncClient
from supabase._async.client import create_client as acreate_client

from storefront.config import DEFAULT_STORAGE_BUCKET, get_settings
from storefront.logging import get_logger
from storefront.services.domains import CatalogService, OrdersService, PagesService, ProductsDomain
from storefront.services.models import Profile
from storefront.services.repositories import (
    CategoryRepository,
    OrderRepository,
    PageRepository,
    ProductRepository,
    ProfileRepository,
)
from storefront.services.storage import StorageService

logger = get_logger(__name__)


class Database:
    """
    Supabase-backed data access for the storefront.

    Must be created through the async factory `create()` or `init_database()`.
    """

    def __init__(self, client: AsyncClient, storage_bucket: str = DEFAULT_STORAGE_BUCKET):
        self.client = client

        self.products = ProductRepository(client)
        self.categories = CategoryRepository(client)
        self.pages = PageRepository(client)
        self.orders = OrderRepository(client)
        self.profiles = ProfileRepository(client)
        self.storage = StorageService(client, storage_bucket)

        # Domains
        self.catalog = CatalogService(self.products)
        self.products_domain = ProductsDomain(self.products, self.categories)
        self.pages_domain = PagesService(self.pages, self.storage)
        self.orders_domain = OrdersService(self.orders)

    @classmethod
    async def create(cls) -> "Database":
        """Async factory: builds the async Supabase client from settings."""
        settings = get_settings()
        if not settings.supabase_url or not settings.supabase_key:
            raise ValueError("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set")

        client = await acreate_client(settings.supabase_url, settings.supabase_key)
        return cls(client, settings.storage_bucket)

    async def get_profile(self, user_id: str) -> Optional[Profile]:
        return await self.profiles.get(user_id)


# ==================== SINGLETON ====================

_db: Optional[Database] = None
_db_lock: Optional[asyncio.Lock] = None


def _get_lock() -> asyncio.Lock:
    global _db_lock
    if _db_lock is None:
        _db_lock = asyncio.Lock()
    return _db_lock


async def init_database() -> Database:
    """
    Initialize the Database singleton.

    Call once at FastAPI startup (lifespan).
    """
    global _db
    if _db is not None:
        return _db

    async with _get_lock():
        if _db is None:
            logger.info("Initializing async Supabase client...")
            _db = await Database.create()
            logger.info("Async Supabase client initialized")
    return _db


async def close_database() -> None:
    """Drop the singleton at shutdown."""
    global _db
    if _db is not None:
        try:
            await _db.client.auth.sign_out()
        except Exception as e:
            logger.warning(f"Error closing Supabase client: {e}")
        _db = None
        logger.info("Supabase client closed")


def get_database() -> Database:
    """
    Get database instance (sync accessor, also used as a FastAPI dependency).

    Raises:
        RuntimeError: If init_database() has not run
    """
    if _db is None:
        raise RuntimeError(
            "Database not initialized. Call 'await init_database()' at startup."
        )
    return _db

"""Page Repository - Content-managed pages."""
from typing import Optional

from storefront.services.models import Page

from .base import BaseRepository


class PageRepository(BaseRepository[Page]):
    """Page database operations."""

    table = "pages"
    model = Page

    async def get_published_by_slug(self, slug: str) -> Optional[Page]:
        return await self.find_one({"slug": slug, "is_published": True})

    async def get_by_slug(self, slug: str) -> Optional[Page]:
        return await self.find_one({"slug": slug})

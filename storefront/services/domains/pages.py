"""
Content Pages Service

CRUD for the content-managed pages (About, Contact, FAQ, ...) plus image
insertion: the file goes to object storage and an <img> tag pointing at its
public URL is appended to the page body.
"""

from html import escape
from typing import Any, Dict, List, Optional, Tuple

from storefront.logging import get_logger, sanitize_id_for_logging
from storefront.services.models import Page
from storefront.services.repositories import PageRepository
from storefront.services.storage import StorageService

logger = get_logger(__name__)

# Slug -> default title for the pages the storefront links to
MANAGED_PAGES: Dict[str, str] = {
    "about": "About Us",
    "contact": "Contact Us",
    "faq": "FAQ",
    "track-order": "Track Order",
    "privacy-policy": "Privacy Policy",
}

PAGE_IMAGE_FOLDER = "pages"


def image_html(url: str, alt: str) -> str:
    return f'<img src="{escape(url)}" alt="{escape(alt)}" class="max-w-full h-auto my-4" />'


class PagesService:
    """Content page operations."""

    def __init__(self, pages: PageRepository, storage: StorageService):
        self.pages = pages
        self.storage = storage

    async def get_published(self, slug: str) -> Optional[Page]:
        return await self.pages.get_published_by_slug(slug)

    async def list_pages(self) -> List[Page]:
        return await self.pages.list()

    async def save_page(self, fields: Dict[str, Any], page_id: Optional[str] = None) -> Optional[Page]:
        if page_id:
            return await self.pages.update(page_id, fields)
        return await self.pages.create(fields)

    async def delete_page(self, page_id: str) -> bool:
        return await self.pages.delete(page_id)

    async def seed_managed_pages(self) -> List[Page]:
        """Create an unpublished draft for every managed page that is missing."""
        created = []
        for slug, title in MANAGED_PAGES.items():
            if await self.pages.get_by_slug(slug) is not None:
                continue
            page = await self.pages.create(
                {"slug": slug, "title": title, "content": "", "is_published": False}
            )
            created.append(page)
        if created:
            logger.info("Seeded %d managed pages", len(created))
        return created

    async def insert_image(
        self,
        page_id: str,
        file_name: str,
        data: bytes,
        content_type: Optional[str] = None,
    ) -> Optional[Tuple[Page, str]]:
        """
        Upload an image and append it to the page content.

        Returns (updated page, public URL), or None if the page does not exist.
        Upload errors propagate as UploadFailure subclasses.
        """
        page = await self.pages.get(page_id)
        if page is None:
            return None

        url = await self.storage.upload(
            file_name, data, content_type=content_type, folder=PAGE_IMAGE_FOLDER
        )
        content = page.content + image_html(url, file_name)
        updated = await self.pages.update(page_id, {"content": content})
        logger.info("Inserted image into page %s", sanitize_id_for_logging(page_id))
        return (updated or page.model_copy(update={"content": content})), url

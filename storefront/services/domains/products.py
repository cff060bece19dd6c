"""Admin product and category management."""
import re
from typing import Any, Dict, List, Optional

from storefront.logging import get_logger, sanitize_id_for_logging
from storefront.services.models import Category, Product
from storefront.services.repositories import CategoryRepository, ProductRepository

logger = get_logger(__name__)

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")


def slugify(name: str) -> str:
    """Turn "Summer Tee #2" into "summer-tee-2"."""
    return _NON_SLUG_CHARS.sub("-", name.lower()).strip("-")


def parse_sizes(raw: Optional[str]) -> List[str]:
    """Comma-separated sizes from the admin form, trimmed, empties dropped."""
    if not raw:
        return []
    return [size.strip() for size in raw.split(",") if size.strip()]


class ProductsDomain:
    """Product and category writes behind the admin console."""

    def __init__(self, products: ProductRepository, categories: CategoryRepository):
        self.products = products
        self.categories = categories

    # ==================== PRODUCTS ====================

    async def list_products(self) -> List[Product]:
        """All products, active or not, newest first."""
        return await self.products.list()

    async def save_product(self, fields: Dict[str, Any], product_id: Optional[str] = None) -> Optional[Product]:
        """
        Create a product, or update it when product_id is given.

        The slug is always derived from the name and saved products are active.
        Returns None when updating a product that does not exist.
        """
        data = {
            **fields,
            "slug": slugify(fields["name"]),
            "product_type": fields.get("product_type") or "general",
            "is_active": True,
        }
        if product_id:
            product = await self.products.update(product_id, data)
            logger.info("Updated product %s", sanitize_id_for_logging(product_id))
            return product

        product = await self.products.create(data)
        logger.info("Created product %s", sanitize_id_for_logging(product.id))
        return product

    async def delete_product(self, product_id: str) -> bool:
        deleted = await self.products.delete(product_id)
        if deleted:
            logger.info("Deleted product %s", sanitize_id_for_logging(product_id))
        return deleted

    async def toggle_active(self, product_id: str) -> Optional[Product]:
        """Flip is_active. Returns None if the product does not exist."""
        product = await self.products.get(product_id)
        if product is None:
            return None
        return await self.products.set_active(product_id, not product.is_active)

    # ==================== CATEGORIES ====================

    async def list_categories(self) -> List[Category]:
        return await self.categories.list()

    async def save_category(self, fields: Dict[str, Any], category_id: Optional[str] = None) -> Optional[Category]:
        data = {**fields, "slug": slugify(fields["name"])}
        if category_id:
            return await self.categories.update(category_id, data)
        return await self.categories.create(data)

    async def delete_category(self, category_id: str) -> bool:
        return await self.categories.delete(category_id)

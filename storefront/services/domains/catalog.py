"""
Catalog Domain Service

Storefront reads (home page, section listings, product detail) and the
catalog lookup behind "add to cart". Listing reads never fail the page: a
record-store error is logged and the shopper sees an empty list.
"""

from typing import Any, Dict, List, Optional

from storefront.cart import CartLedger, LineItem
from storefront.errors import FetchFailure
from storefront.logging import get_logger, sanitize_id_for_logging
from storefront.services.models import Product
from storefront.services.repositories import ProductRepository

logger = get_logger(__name__)

FEATURED_LIMIT = 6

# Section name -> equality filters on top of is_active
STOREFRONT_SECTIONS: Dict[str, Dict[str, Any]] = {
    "women": {"product_type": "women"},
    "men": {"product_type": "men"},
    "general": {"product_type": "general"},
    "sale": {"is_sale": True},
}


class CatalogService:
    """Read side of the product catalog."""

    def __init__(self, products: ProductRepository):
        self.products = products

    async def _list_or_empty(self, label: str, **kwargs) -> List[Product]:
        try:
            return await self.products.list_active(**kwargs)
        except FetchFailure as e:
            logger.warning("Showing empty %s listing: %s", label, e.message)
            return []

    async def featured(self) -> List[Product]:
        """Products for the home page."""
        return await self._list_or_empty("featured", limit=FEATURED_LIMIT)

    async def section(self, name: str) -> List[Product]:
        """
        Active products of one storefront section, newest first.

        Raises:
            ValueError: unknown section name
        """
        filters = STOREFRONT_SECTIONS.get(name)
        if filters is None:
            raise ValueError(f"Unknown section: {name}")
        return await self._list_or_empty(name, filters=filters)

    async def get_product(self, product_id: str) -> Optional[Product]:
        """Active product by ID (inactive products are hidden from shoppers)."""
        product = await self.products.get(product_id)
        if product is None or not product.is_active:
            return None
        return product

    async def add_to_cart(self, ledger: CartLedger, product_id: str) -> Optional[LineItem]:
        """
        Add one unit of a catalog product to the ledger.

        Name and effective price are copied at this moment; they are not
        re-synced if the catalog changes later. Returns None if the product is
        not available.
        """
        product = await self.get_product(product_id)
        if product is None:
            return None
        item = ledger.add_unit(product.id, product.name, product.effective_price)
        logger.info(
            "Cart %s: %s x%d",
            sanitize_id_for_logging(ledger.cart_id),
            sanitize_id_for_logging(product.id),
            item.quantity,
        )
        return item

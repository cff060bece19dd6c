"""Product Repository - Product catalog operations."""
from typing import Any, Dict, List, Optional

from storefront.services.models import Product

from .base import BaseRepository


class ProductRepository(BaseRepository[Product]):
    """Product database operations."""

    table = "products"
    model = Product
    columns = "*, categories(name)"

    async def list_active(
        self,
        filters: Optional[Dict[str, Any]] = None,
        limit: Optional[int] = None,
    ) -> List[Product]:
        """Active products only, newest first."""
        return await self.list({"is_active": True, **(filters or {})}, limit=limit)

    async def set_active(self, product_id: str, is_active: bool) -> Optional[Product]:
        return await self.update(product_id, {"is_active": is_active})

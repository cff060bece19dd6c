"""Order Repository - Orders with their line items."""
from typing import Optional

from storefront.services.models import Order

from .base import BaseRepository


class OrderRepository(BaseRepository[Order]):
    """Order database operations."""

    table = "orders"
    model = Order
    columns = "*, order_items(*, products(name))"

    async def update_status(self, order_id: str, status: str) -> Optional[Order]:
        return await self.update(order_id, {"status": status})

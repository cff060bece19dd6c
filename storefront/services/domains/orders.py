"""Order workflow: listing, status changes and public tracking."""
from typing import Dict, List, Optional

from storefront.errors import ERROR_ORDER_FINAL_STATUS, ERROR_ORDER_INVALID_STATUS
from storefront.logging import get_logger, sanitize_id_for_logging
from storefront.services.models import Order
from storefront.services.repositories import OrderRepository

logger = get_logger(__name__)

ORDER_STATUSES = ("pending", "processing", "shipped", "delivered", "cancelled")

# One step forward per admin action
NEXT_STATUS: Dict[str, str] = {
    "pending": "processing",
    "processing": "shipped",
    "shipped": "delivered",
}

CANCELLABLE_STATUSES = frozenset({"pending", "processing"})


class OrdersService:
    """Order operations for the admin console and order tracking."""

    def __init__(self, orders: OrderRepository):
        self.orders = orders

    async def list_orders(self) -> List[Order]:
        """All orders with items, newest first."""
        return await self.orders.list()

    async def get_order(self, order_id: str) -> Optional[Order]:
        return await self.orders.get(order_id)

    async def set_status(self, order_id: str, status: str) -> Optional[Order]:
        """
        Set an order's status.

        Raises:
            ValueError: status is not one of ORDER_STATUSES
        """
        if status not in ORDER_STATUSES:
            raise ValueError(f"{ERROR_ORDER_INVALID_STATUS}: {status}")
        order = await self.orders.update_status(order_id, status)
        if order is not None:
            logger.info("Order %s -> %s", sanitize_id_for_logging(order_id), status)
        return order

    async def advance(self, order_id: str) -> Optional[Order]:
        """
        Move an order one step along pending -> processing -> shipped -> delivered.

        Raises:
            ValueError: the order is already delivered or cancelled
        """
        order = await self.orders.get(order_id)
        if order is None:
            return None
        next_status = NEXT_STATUS.get(order.status)
        if next_status is None:
            raise ValueError(ERROR_ORDER_FINAL_STATUS)
        return await self.set_status(order_id, next_status)

    async def cancel(self, order_id: str) -> Optional[Order]:
        order = await self.orders.get(order_id)
        if order is None:
            return None
        if order.status not in CANCELLABLE_STATUSES:
            raise ValueError(ERROR_ORDER_FINAL_STATUS)
        return await self.set_status(order_id, "cancelled")

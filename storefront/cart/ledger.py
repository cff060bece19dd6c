"""
Cart Ledger

In-memory, insertion-ordered collection of line items keyed by product id.

Per product id the ledger is either absent or present with quantity n >= 1:
- add_unit:    absent -> present(1), present(n) -> present(n + 1)
- remove_unit: present(1) -> absent, present(n) -> present(n - 1), absent -> absent
"""
from decimal import Decimal
from typing import Iterator, Optional

from storefront.services.money import round_money

from .models import LineItem


class CartLedger:
    """Products a shopper intends to buy during one view's lifetime."""

    def __init__(self, cart_id: Optional[str] = None):
        self.cart_id = cart_id
        # dict keeps insertion order
        self._items: dict[str, LineItem] = {}

    def add_unit(self, product_id: str, display_name: str, unit_price) -> LineItem:
        """
        Add one unit of a product.

        The name and price captured by the first add are kept; later calls for
        the same product only bump the quantity.
        """
        item = self._items.get(product_id)
        if item is not None:
            item.quantity += 1
            return item

        item = LineItem(product_id=product_id, display_name=display_name, unit_price=unit_price)
        self._items[product_id] = item
        return item

    def remove_unit(self, product_id: str) -> int:
        """
        Remove one unit of a product.

        Returns the number of units actually removed: 1, or 0 when the
        product is not in the cart.
        """
        item = self._items.get(product_id)
        if item is None:
            return 0

        if item.quantity > 1:
            item.quantity -= 1
        else:
            del self._items[product_id]
        return 1

    def total_price(self) -> Decimal:
        """Sum of unit_price * quantity over all lines."""
        return round_money(sum((item.total_price for item in self._items.values()), Decimal("0")))

    def item_count(self) -> int:
        """Total units in the cart (badge counter)."""
        return sum(item.quantity for item in self._items.values())

    def get(self, product_id: str) -> Optional[LineItem]:
        return self._items.get(product_id)

    @property
    def items(self) -> list[LineItem]:
        return list(self._items.values())

    @property
    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._items

    def __iter__(self) -> Iterator[LineItem]:
        return iter(list(self._items.values()))

    def __len__(self) -> int:
        return len(self._items)

    def to_dict(self) -> dict:
        """Summary used by the cart endpoints."""
        return {
            "cart_id": self.cart_id,
            "items": [item.to_dict() for item in self._items.values()],
            "item_count": self.item_count(),
            "total_price": str(self.total_price()),
        }

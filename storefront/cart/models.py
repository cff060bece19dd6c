"""Cart line item with Decimal-based pricing."""
from dataclasses import dataclass
from decimal import Decimal

from storefront.services.money import multiply, round_money, to_decimal


@dataclass
class LineItem:
    """One distinct product held in the cart."""
    product_id: str
    display_name: str
    unit_price: Decimal
    quantity: int = 1

    def __post_init__(self):
        # Prices are held in cents
        self.unit_price = round_money(to_decimal(self.unit_price))
        if self.unit_price < 0:
            raise ValueError("unit_price must be non-negative")
        if not isinstance(self.quantity, int) or self.quantity < 1:
            raise ValueError("quantity must be a positive integer")

    @property
    def total_price(self) -> Decimal:
        """Price for all units of this line."""
        return round_money(multiply(self.unit_price, self.quantity))

    def to_dict(self) -> dict:
        return {
            "product_id": self.product_id,
            "display_name": self.display_name,
            "unit_price": str(self.unit_price),
            "quantity": self.quantity,
            "total_price": str(self.total_price),
        }

"""Database Models - Pydantic models for the store's record kinds."""
from decimal import Decimal
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, field_validator

from storefront.services.money import discount_percent as _discount_percent, to_decimal as _to_decimal


class Category(BaseModel):
    """Category model."""
    id: str
    name: str
    slug: Optional[str] = None
    description: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        extra = "ignore"


class Product(BaseModel):
    """Product model."""
    id: str
    name: str
    slug: Optional[str] = None
    description: Optional[str] = None
    price: Decimal
    sale_price: Optional[Decimal] = None
    category_id: Optional[str] = None
    image_url: Optional[str] = None
    stock_quantity: int = 0
    is_active: bool = True
    product_type: Optional[str] = "general"  # general, men, women
    is_new: bool = False
    is_sale: bool = False
    sizes: list[str] = []
    created_at: Optional[datetime] = None
    # Joined via select("*, categories(name)")
    categories: Optional[dict] = None

    class Config:
        extra = "ignore"  # Ignore unknown fields from DB

    @field_validator("price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v):
        return _to_decimal(v)

    @field_validator("sale_price", mode="before")
    @classmethod
    def convert_sale_price_to_decimal(cls, v):
        return _to_decimal(v) if v is not None else None

    @field_validator("sizes", mode="before")
    @classmethod
    def default_sizes(cls, v):
        return v or []

    @property
    def category_name(self) -> Optional[str]:
        return (self.categories or {}).get("name")

    @property
    def on_sale(self) -> bool:
        return self.is_sale and self.sale_price is not None

    @property
    def effective_price(self) -> Decimal:
        """Price a shopper pays right now."""
        return self.sale_price if self.on_sale else self.price

    @property
    def discount_percent(self) -> int:
        if not self.on_sale:
            return 0
        return _discount_percent(self.price, self.sale_price)


class Page(BaseModel):
    """Content-managed page (About, FAQ, ...)."""
    id: str
    slug: str
    title: str
    content: str = ""
    is_published: bool = False
    created_at: Optional[datetime] = None

    class Config:
        extra = "ignore"

    @field_validator("content", mode="before")
    @classmethod
    def default_content(cls, v):
        return v or ""


class OrderItem(BaseModel):
    """Order item model (per-product line in an order)."""
    id: str
    product_id: Optional[str] = None
    quantity: int = 1
    size: Optional[str] = None
    price: Optional[Decimal] = None
    # Joined via order_items(*, products(name))
    products: Optional[dict] = None

    class Config:
        extra = "ignore"

    @field_validator("price", mode="before")
    @classmethod
    def convert_item_price_to_decimal(cls, v):
        return _to_decimal(v) if v is not None else None

    @property
    def product_name(self) -> str:
        return (self.products or {}).get("name") or "Unknown"


class Order(BaseModel):
    """Order model."""
    id: str
    user_id: Optional[str] = None
    total_amount: Decimal = Decimal("0")
    status: str = "pending"  # pending | processing | shipped | delivered | cancelled
    shipping_address: Optional[dict] = None
    created_at: Optional[datetime] = None
    order_items: list[OrderItem] = []

    class Config:
        extra = "ignore"

    @field_validator("total_amount", mode="before")
    @classmethod
    def convert_amount_to_decimal(cls, v):
        return _to_decimal(v)

    @field_validator("order_items", mode="before")
    @classmethod
    def default_items(cls, v):
        return v or []


class Profile(BaseModel):
    """User profile with role (admin gate)."""
    id: str
    full_name: Optional[str] = None
    email: Optional[str] = None
    role: str = "customer"

    class Config:
        extra = "ignore"

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

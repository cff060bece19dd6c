"""
API Pydantic Models

Request bodies for storefront and admin endpoints.
"""
from typing import Optional
from pydantic import BaseModel, Field


# ==================== CART MODELS ====================

class AddToCartRequest(BaseModel):
    product_id: str


# ==================== PRODUCT MODELS ====================

class ProductRequest(BaseModel):
    name: str = Field(min_length=1)
    description: str = ""
    price: float = Field(ge=0)
    sale_price: Optional[float] = Field(default=None, ge=0)
    category_id: Optional[str] = None
    image_url: Optional[str] = None
    stock_quantity: int = Field(default=0, ge=0)
    product_type: str = "general"
    is_new: bool = False
    is_sale: bool = False
    sizes: str = ""  # comma-separated, as typed in the admin form


class CategoryRequest(BaseModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None


# ==================== PAGE MODELS ====================

class PageRequest(BaseModel):
    title: str = Field(min_length=1)
    slug: str = Field(min_length=1)
    content: str
    is_published: bool = False


# ==================== ORDER MODELS ====================

class OrderStatusRequest(BaseModel):
    status: str

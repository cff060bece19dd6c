"""
Repository Pattern for Database Operations

One repository per record kind, all exposing list/get/create/update/delete:
- ProductRepository: catalog products (with category join)
- CategoryRepository: product categories
- PageRepository: content-managed pages
- OrderRepository: orders with their items
- ProfileRepository: user profiles and roles
"""
from .base import BaseRepository
from .product_repo import ProductRepository
from .category_repo import CategoryRepository
from .page_repo import PageRepository
from .order_repo import OrderRepository
from .profile_repo import ProfileRepository

__all__ = [
    "BaseRepository",
    "ProductRepository",
    "CategoryRepository",
    "PageRepository",
    "OrderRepository",
    "ProfileRepository",
]

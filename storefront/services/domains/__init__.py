"""Domain services wrapping repositories."""
from .catalog import CatalogService, STOREFRONT_SECTIONS
from .products import ProductsDomain, slugify, parse_sizes
from .pages import PagesService, MANAGED_PAGES
from .orders import OrdersService, ORDER_STATUSES

__all__ = [
    "CatalogService",
    "STOREFRONT_SECTIONS",
    "ProductsDomain",
    "slugify",
    "parse_sizes",
    "PagesService",
    "MANAGED_PAGES",
    "OrdersService",
    "ORDER_STATUSES",
]

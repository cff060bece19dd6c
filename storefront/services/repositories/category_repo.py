"""Category Repository."""
from storefront.services.models import Category

from .base import BaseRepository


class CategoryRepository(BaseRepository[Category]):
    """Category database operations (alphabetical)."""

    table = "categories"
    model = Category
    order_by = "name"
    order_desc = False

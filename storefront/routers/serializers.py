"""JSON shapes returned to the storefront and admin clients."""
from storefront.config import get_settings
from storefront.services.models import Category, Order, Page, Product
from storefront.services.money import format_money, to_float


def serialize_product(product: Product) -> dict:
    currency = get_settings().currency
    return {
        "id": product.id,
        "name": product.name,
        "slug": product.slug,
        "description": product.description or "",
        "price": to_float(product.price),
        "sale_price": to_float(product.sale_price) if product.sale_price is not None else None,
        "effective_price": to_float(product.effective_price),
        "display_price": format_money(product.effective_price, currency),
        "discount_percent": product.discount_percent,
        "category_id": product.category_id,
        "category": product.category_name,
        "image_url": product.image_url,
        "stock_quantity": product.stock_quantity,
        "product_type": product.product_type or "general",
        "is_new": product.is_new,
        "is_sale": product.is_sale,
        "is_active": product.is_active,
        "sizes": product.sizes,
        "created_at": product.created_at.isoformat() if product.created_at else None,
    }


def serialize_category(category: Category) -> dict:
    return category.model_dump(mode="json")


def serialize_page(page: Page) -> dict:
    return page.model_dump(mode="json")


def serialize_order(order: Order) -> dict:
    return {
        "id": order.id,
        "user_id": order.user_id,
        "status": order.status,
        "total_amount": to_float(order.total_amount),
        "shipping_address": order.shipping_address,
        "created_at": order.created_at.isoformat() if order.created_at else None,
        "items": [
            {
                "id": item.id,
                "product_id": item.product_id,
                "product_name": item.product_name,
                "size": item.size,
                "quantity": item.quantity,
                "price": to_float(item.price) if item.price is not None else None,
            }
            for item in order.order_items
        ],
    }

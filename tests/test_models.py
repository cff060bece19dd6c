"""Tests for record models"""
from decimal import Decimal

from storefront.services.models import Order, Page, Product, Profile


def test_product_from_row(sample_product):
    product = Product(**sample_product)

    assert product.price == Decimal("40.0")
    assert product.category_name == "Hoodies"
    assert product.sizes == ["S", "M", "L"]
    assert product.effective_price == Decimal("40.0")
    assert product.discount_percent == 0


def test_sale_product_prices(sample_sale_product):
    product = Product(**sample_sale_product)

    assert product.on_sale
    assert product.effective_price == Decimal("37.5")
    assert product.discount_percent == 25
    assert product.category_name is None


def test_sale_flag_without_sale_price_uses_list_price(sample_product):
    product = Product(**{**sample_product, "is_sale": True, "sale_price": None})

    assert not product.on_sale
    assert product.effective_price == Decimal("40.0")


def test_product_null_sizes_and_unknown_columns(sample_product):
    product = Product(**{**sample_product, "sizes": None, "legacy_column": 1})
    assert product.sizes == []


def test_order_with_items(sample_order):
    order = Order(**sample_order)

    assert order.total_amount == Decimal("105.0")
    assert len(order.order_items) == 2
    assert order.order_items[0].product_name == "Cropped Hoodie"
    assert order.order_items[1].product_name == "Unknown"


def test_order_without_items_join():
    order = Order(id="order-1", status="shipped", total_amount="12.5", order_items=None)
    assert order.order_items == []
    assert order.total_amount == Decimal("12.5")


def test_page_defaults():
    page = Page(id="p", slug="faq", title="FAQ")
    assert page.content == ""
    assert page.is_published is False


def test_profile_role():
    assert Profile(id="u", role="admin").is_admin
    assert not Profile(id="u").is_admin

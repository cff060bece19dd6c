"""Pytest configuration and fixtures"""
import os
from types import SimpleNamespace
from unittest.mock import AsyncMock, Mock

import pytest

# Set test environment variables
os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test_key")
os.environ.setdefault("STORAGE_BUCKET", "page-images")
os.environ.setdefault("CURRENCY", "USD")

PUBLIC_URL_BASE = "https://test.supabase.co/storage/v1/object/public/page-images/"


def set_rows(client, rows):
    """Make every query on the mock client resolve to `rows`."""
    client.table.return_value.execute.return_value = Mock(data=rows)


@pytest.fixture
def mock_supabase_client():
    """Mock async Supabase client"""
    client = Mock()

    # Query builder: every filter returns the same builder, execute() is awaited
    table_mock = Mock()
    for method in ("select", "insert", "update", "delete", "eq", "order", "limit"):
        getattr(table_mock, method).return_value = table_mock
    table_mock.execute = AsyncMock(return_value=Mock(data=[]))
    client.table.return_value = table_mock

    # Storage
    bucket_mock = Mock()
    bucket_mock.upload = AsyncMock(return_value=Mock(path="pages/x.png"))
    bucket_mock.get_public_url = AsyncMock(
        side_effect=lambda path, *args, **kwargs: f"{PUBLIC_URL_BASE}{path}?"
    )
    client.storage.from_.return_value = bucket_mock
    client.storage.list_buckets = AsyncMock(
        return_value=[SimpleNamespace(id="page-images", name="page-images")]
    )

    # Auth
    client.auth.get_user = AsyncMock(
        return_value=SimpleNamespace(user=SimpleNamespace(id="user-123", email="shopper@example.com"))
    )
    client.auth.admin.sign_out = AsyncMock(return_value=None)
    client.auth.sign_out = AsyncMock(return_value=None)

    return client


@pytest.fixture
def mock_database(mock_supabase_client):
    """Database facade over the mock client"""
    from storefront.services.database import Database

    return Database(mock_supabase_client, storage_bucket="page-images")


@pytest.fixture
def sample_product():
    """Sample product row"""
    return {
        "id": "product-123",
        "name": "Cropped Hoodie",
        "slug": "cropped-hoodie",
        "description": "Heavyweight fleece",
        "price": 40.0,
        "sale_price": None,
        "category_id": "category-1",
        "image_url": "https://cdn.example.com/hoodie.jpg",
        "stock_quantity": 12,
        "is_active": True,
        "product_type": "women",
        "is_new": True,
        "is_sale": False,
        "sizes": ["S", "M", "L"],
        "created_at": "2025-01-01T00:00:00Z",
        "categories": {"name": "Hoodies"},
    }


@pytest.fixture
def sample_sale_product(sample_product):
    return {
        **sample_product,
        "id": "product-456",
        "name": "Track Pants",
        "price": 50.0,
        "sale_price": 37.5,
        "is_sale": True,
        "categories": None,
    }


@pytest.fixture
def sample_page():
    """Sample content page row"""
    return {
        "id": "page-123",
        "slug": "about",
        "title": "About Us",
        "content": "<p>Founded in 2024.</p>",
        "is_published": True,
        "created_at": "2025-01-01T00:00:00Z",
    }


@pytest.fixture
def sample_order():
    """Sample order row with joined items"""
    return {
        "id": "order-123",
        "user_id": "user-123",
        "total_amount": 105.0,
        "status": "pending",
        "shipping_address": {"city": "Austin"},
        "created_at": "2025-01-01T00:00:00Z",
        "order_items": [
            {
                "id": "item-1",
                "product_id": "product-123",
                "quantity": 2,
                "size": "M",
                "price": 40.0,
                "products": {"name": "Cropped Hoodie"},
            },
            {
                "id": "item-2",
                "product_id": "product-789",
                "quantity": 1,
                "size": None,
                "price": 25.0,
                "products": None,
            },
        ],
    }

"""Tests for the Supabase-backed repositories"""
import httpx
import pytest
from postgrest.exceptions import APIError
from unittest.mock import AsyncMock

from storefront.errors import ERROR_FETCH_FAILED, ERROR_WRITE_FAILED, FetchFailure, WriteFailure
from storefront.services.repositories import (
    CategoryRepository,
    OrderRepository,
    PageRepository,
    ProductRepository,
)

from conftest import set_rows


def _api_error(message="boom"):
    return APIError({"message": message, "code": "500", "hint": None, "details": None})


@pytest.mark.asyncio
async def test_list_applies_filters_and_order(mock_supabase_client, sample_product):
    set_rows(mock_supabase_client, [sample_product])
    repo = ProductRepository(mock_supabase_client)

    products = await repo.list({"is_active": True, "product_type": "women"})

    table = mock_supabase_client.table.return_value
    mock_supabase_client.table.assert_called_with("products")
    table.select.assert_called_with("*, categories(name)")
    table.eq.assert_any_call("is_active", True)
    table.eq.assert_any_call("product_type", "women")
    table.order.assert_called_with("created_at", desc=True)
    assert products[0].name == "Cropped Hoodie"


@pytest.mark.asyncio
async def test_list_active_with_limit(mock_supabase_client, sample_product):
    set_rows(mock_supabase_client, [sample_product])
    repo = ProductRepository(mock_supabase_client)

    await repo.list_active(limit=6)

    table = mock_supabase_client.table.return_value
    table.eq.assert_called_with("is_active", True)
    table.limit.assert_called_with(6)


@pytest.mark.asyncio
async def test_categories_sorted_by_name(mock_supabase_client):
    set_rows(mock_supabase_client, [{"id": "c1", "name": "Hoodies"}])
    repo = CategoryRepository(mock_supabase_client)

    categories = await repo.list()

    mock_supabase_client.table.return_value.order.assert_called_with("name", desc=False)
    assert categories[0].name == "Hoodies"


@pytest.mark.asyncio
async def test_get_not_found(mock_supabase_client):
    repo = PageRepository(mock_supabase_client)
    assert await repo.get("missing") is None


@pytest.mark.asyncio
async def test_get_published_by_slug(mock_supabase_client, sample_page):
    set_rows(mock_supabase_client, [sample_page])
    repo = PageRepository(mock_supabase_client)

    page = await repo.get_published_by_slug("about")

    table = mock_supabase_client.table.return_value
    table.eq.assert_any_call("slug", "about")
    table.eq.assert_any_call("is_published", True)
    assert page.title == "About Us"


@pytest.mark.asyncio
async def test_create_inserts_row(mock_supabase_client, sample_page):
    set_rows(mock_supabase_client, [sample_page])
    repo = PageRepository(mock_supabase_client)

    page = await repo.create({"slug": "about", "title": "About Us", "content": ""})

    mock_supabase_client.table.return_value.insert.assert_called_once()
    assert page.id == "page-123"


@pytest.mark.asyncio
async def test_create_without_returned_row_is_write_failure(mock_supabase_client):
    repo = PageRepository(mock_supabase_client)

    with pytest.raises(WriteFailure):
        await repo.create({"slug": "about", "title": "About Us"})


@pytest.mark.asyncio
async def test_update_by_id(mock_supabase_client, sample_order):
    set_rows(mock_supabase_client, [{**sample_order, "status": "processing", "order_items": None}])
    repo = OrderRepository(mock_supabase_client)

    order = await repo.update_status("order-123", "processing")

    table = mock_supabase_client.table.return_value
    table.update.assert_called_with({"status": "processing"})
    table.eq.assert_called_with("id", "order-123")
    assert order.status == "processing"


@pytest.mark.asyncio
async def test_delete_reports_missing_record(mock_supabase_client):
    repo = ProductRepository(mock_supabase_client)
    assert await repo.delete("missing") is False

    set_rows(mock_supabase_client, [{"id": "product-123"}])
    assert await repo.delete("product-123") is True


@pytest.mark.asyncio
async def test_read_error_becomes_fetch_failure(mock_supabase_client):
    mock_supabase_client.table.return_value.execute = AsyncMock(side_effect=_api_error("relation missing"))
    repo = ProductRepository(mock_supabase_client)

    with pytest.raises(FetchFailure) as exc_info:
        await repo.list()

    assert exc_info.value.message == ERROR_FETCH_FAILED
    assert exc_info.value.raw_error.message == "relation missing"
    assert exc_info.value.code == "FETCH_FAILED"


@pytest.mark.asyncio
async def test_transport_error_becomes_fetch_failure(mock_supabase_client):
    mock_supabase_client.table.return_value.execute = AsyncMock(
        side_effect=httpx.ConnectError("connection refused")
    )
    repo = CategoryRepository(mock_supabase_client)

    with pytest.raises(FetchFailure):
        await repo.list()


@pytest.mark.asyncio
async def test_write_error_becomes_write_failure(mock_supabase_client):
    mock_supabase_client.table.return_value.execute = AsyncMock(side_effect=_api_error("duplicate key"))
    repo = PageRepository(mock_supabase_client)

    with pytest.raises(WriteFailure) as exc_info:
        await repo.update("page-123", {"title": "New"})

    assert exc_info.value.message == ERROR_WRITE_FAILED
    assert exc_info.value.raw_error.message == "duplicate key"


@pytest.mark.asyncio
async def test_malformed_id_is_not_found(mock_supabase_client):
    mock_supabase_client.table.return_value.execute = AsyncMock(
        side_effect=APIError(
            {
                "message": 'invalid input syntax for type uuid: "ABC-1"',
                "code": "22P02",
                "hint": None,
                "details": None,
            }
        )
    )
    repo = OrderRepository(mock_supabase_client)

    assert await repo.get("ABC-1") is None
    assert await repo.find_one({"id": "ABC-1"}) is None


@pytest.mark.asyncio
async def test_malformed_filter_in_listing_still_fails(mock_supabase_client):
    mock_supabase_client.table.return_value.execute = AsyncMock(
        side_effect=APIError({"message": "invalid input syntax", "code": "22P02", "hint": None, "details": None})
    )
    repo = OrderRepository(mock_supabase_client)

    with pytest.raises(FetchFailure):
        await repo.list({"user_id": "ABC-1"})

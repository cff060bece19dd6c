"""Tests for the object storage service"""
from unittest.mock import AsyncMock

import pytest
from storage3.utils import StorageException

from storefront.errors import FetchFailure, StorageNotConfigured, UploadFailure, UploadRejected
from storefront.services.storage import StorageService, safe_file_name

from conftest import PUBLIC_URL_BASE


@pytest.fixture
def storage(mock_supabase_client):
    return StorageService(mock_supabase_client, "page-images")


def test_safe_file_name():
    assert safe_file_name("../../etc/My Photo (1).PNG") == "My-Photo-1-.PNG"
    assert safe_file_name("C:\\Users\\me\\pic.jpg") == "pic.jpg"
    assert safe_file_name("???") == "file"


@pytest.mark.asyncio
async def test_list_buckets(storage):
    assert await storage.list_buckets() == ["page-images"]


@pytest.mark.asyncio
async def test_list_buckets_failure(storage, mock_supabase_client):
    mock_supabase_client.storage.list_buckets = AsyncMock(side_effect=StorageException("forbidden"))

    with pytest.raises(FetchFailure):
        await storage.list_buckets()


@pytest.mark.asyncio
async def test_upload_returns_public_url(storage, mock_supabase_client):
    url = await storage.upload("hero.png", b"\x89PNG", content_type="image/png", folder="pages")

    bucket = mock_supabase_client.storage.from_.return_value
    mock_supabase_client.storage.from_.assert_called_with("page-images")
    path, data = bucket.upload.call_args.args
    assert path.startswith("pages/") and path.endswith("-hero.png")
    assert data == b"\x89PNG"
    assert bucket.upload.call_args.kwargs["file_options"]["content-type"] == "image/png"
    assert url == f"{PUBLIC_URL_BASE}{path}"


@pytest.mark.asyncio
async def test_upload_without_any_bucket(storage, mock_supabase_client):
    mock_supabase_client.storage.list_buckets = AsyncMock(return_value=[])

    with pytest.raises(StorageNotConfigured) as exc_info:
        await storage.upload("hero.png", b"data")

    assert exc_info.value.code == "STORAGE_NOT_CONFIGURED"
    mock_supabase_client.storage.from_.return_value.upload.assert_not_called()


@pytest.mark.asyncio
async def test_upload_to_missing_bucket(storage, mock_supabase_client):
    mock_supabase_client.storage.list_buckets = AsyncMock(return_value=[{"name": "avatars"}])

    with pytest.raises(StorageNotConfigured) as exc_info:
        await storage.upload("hero.png", b"data")

    assert "page-images" in exc_info.value.message


@pytest.mark.asyncio
async def test_upload_rejected(storage, mock_supabase_client):
    bucket = mock_supabase_client.storage.from_.return_value
    bucket.upload = AsyncMock(side_effect=StorageException("Payload too large"))

    with pytest.raises(UploadRejected) as exc_info:
        await storage.upload("huge.png", b"data")

    assert isinstance(exc_info.value, UploadFailure)
    assert not isinstance(exc_info.value, StorageNotConfigured)
    assert exc_info.value.code == "UPLOAD_REJECTED"

"""
Object Storage Service

Uploads page and product images to Supabase Storage and hands back their
public URLs. "No bucket" and "upload refused" are raised as different errors
so the admin UI can tell the operator which one to fix.
"""

import re
import uuid
from typing import List, Optional

import httpx
from storage3.utils import StorageException
from supabase._async.client import AsyncClient

from storefront.errors import FetchFailure, StorageNotConfigured, UploadRejected
from storefront.logging import get_logger, sanitize_string_for_logging

logger = get_logger(__name__)

STORAGE_ERRORS = (StorageException, httpx.HTTPError)

_UNSAFE_NAME_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def safe_file_name(file_name: str) -> str:
    """Strip directories and characters that are awkward in object paths."""
    base = file_name.replace("\\", "/").rsplit("/", 1)[-1]
    cleaned = _UNSAFE_NAME_CHARS.sub("-", base).strip("-.")
    return cleaned or "file"


def _bucket_name(bucket) -> str:
    if isinstance(bucket, dict):
        return bucket.get("name") or bucket.get("id") or ""
    return getattr(bucket, "name", None) or getattr(bucket, "id", "") or ""


class StorageService:
    """Bucket listing, upload and public URL lookup."""

    def __init__(self, client: AsyncClient, default_bucket: str) -> None:
        self.client = client
        self.default_bucket = default_bucket

    async def list_buckets(self) -> List[str]:
        """Names of all buckets in the project."""
        try:
            buckets = await self.client.storage.list_buckets()
        except STORAGE_ERRORS as e:
            logger.error("Failed to list storage buckets: %s", e)
            raise FetchFailure(raw_error=e) from e
        return [_bucket_name(b) for b in buckets or []]

    async def _ensure_bucket(self, bucket: str) -> None:
        names = await self.list_buckets()
        if not names:
            raise StorageNotConfigured()
        if bucket not in names:
            raise StorageNotConfigured(f"Storage bucket '{bucket}' does not exist")

    async def public_url(self, path: str, bucket: Optional[str] = None) -> str:
        """Public retrieval URL for a stored object."""
        url = await self.client.storage.from_(bucket or self.default_bucket).get_public_url(path)
        # Some storage3 versions append a bare "?" when no transform is given
        return url.rstrip("?")

    async def upload(
        self,
        file_name: str,
        data: bytes,
        content_type: Optional[str] = None,
        folder: str = "",
        bucket: Optional[str] = None,
    ) -> str:
        """
        Upload a file and return its public URL.

        Raises:
            StorageNotConfigured: the target bucket (or any bucket) is missing
            UploadRejected: the storage service refused the file
        """
        bucket = bucket or self.default_bucket
        await self._ensure_bucket(bucket)

        path = f"{uuid.uuid4().hex}-{safe_file_name(file_name)}"
        if folder:
            path = f"{folder.strip('/')}/{path}"

        options = {"upsert": "false"}
        if content_type:
            options["content-type"] = content_type

        try:
            await self.client.storage.from_(bucket).upload(path, data, file_options=options)
        except STORAGE_ERRORS as e:
            logger.warning(
                "Upload of %s rejected: %s",
                sanitize_string_for_logging(file_name),
                e,
            )
            raise UploadRejected(raw_error=e) from e

        logger.info("Uploaded %s to %s/%s", sanitize_string_for_logging(file_name), bucket, path)
        return await self.public_url(path, bucket)

"""
Storefront errors.

Exception hierarchy for record-store and object-storage failures, plus
centralized user-facing messages.
"""

from typing import Any

# Record messages
ERROR_PRODUCT_NOT_FOUND = "Product not found"
ERROR_CATEGORY_NOT_FOUND = "Category not found"
ERROR_PAGE_NOT_FOUND = "Page not found"
ERROR_ORDER_NOT_FOUND = "Order not found"
ERROR_ORDER_INVALID_STATUS = "Invalid order status"
ERROR_ORDER_FINAL_STATUS = "Order cannot be advanced from its current status"

# Auth messages
ERROR_UNAUTHORIZED = "Unauthorized"
ERROR_ADMIN_REQUIRED = "Admin access required"
ERROR_ADMIN_CHECK_UNAVAILABLE = "Could not verify admin role"

# Storage messages
ERROR_STORAGE_NOT_CONFIGURED = "Image storage is not configured. Create a storage bucket first."
ERROR_UPLOAD_REJECTED = "Image upload was rejected"

# Generic
ERROR_FETCH_FAILED = "Failed to load data"
ERROR_WRITE_FAILED = "Failed to save changes"
ERROR_INTERNAL = "Internal server error"


class StorefrontError(Exception):
    """Base error for failures of the external collaborators."""

    default_message = ERROR_INTERNAL

    def __init__(
        self,
        message: str | None = None,
        code: str | None = None,
        raw_error: Any = None,
    ) -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        self.code = code
        self.raw_error = raw_error


class FetchFailure(StorefrontError):
    """A read against the record store failed."""

    default_message = ERROR_FETCH_FAILED

    def __init__(self, message: str | None = None, raw_error: Any = None) -> None:
        super().__init__(message, code="FETCH_FAILED", raw_error=raw_error)


class WriteFailure(StorefrontError):
    """An insert, update or delete against the record store failed."""

    default_message = ERROR_WRITE_FAILED

    def __init__(self, message: str | None = None, raw_error: Any = None) -> None:
        super().__init__(message, code="WRITE_FAILED", raw_error=raw_error)


class UploadFailure(StorefrontError):
    """Object storage could not accept a file."""

    default_message = ERROR_UPLOAD_REJECTED


class StorageNotConfigured(UploadFailure):
    """No bucket exists to upload into."""

    default_message = ERROR_STORAGE_NOT_CONFIGURED

    def __init__(self, message: str | None = None, raw_error: Any = None) -> None:
        super().__init__(message, code="STORAGE_NOT_CONFIGURED", raw_error=raw_error)


class UploadRejected(UploadFailure):
    """The storage service refused the upload."""

    default_message = ERROR_UPLOAD_REJECTED

    def __init__(self, message: str | None = None, raw_error: Any = None) -> None:
        super().__init__(message, code="UPLOAD_REJECTED", raw_error=raw_error)

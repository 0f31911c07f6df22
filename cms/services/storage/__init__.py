"""
Storage services package.

This package provides storage backends for file uploads.
"""

from cms.services.storage.base import StorageService
from cms.services.storage.local import LocalStorage


def get_storage_service() -> StorageService:
    """
    Get the configured storage service.

    Returns:
        StorageService: Local filesystem storage rooted at ``UPLOADS_DIR``
    """
    return LocalStorage()


__all__ = [
    "LocalStorage",
    "StorageService",
    "get_storage_service",
]

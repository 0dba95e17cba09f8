"""
Storage for exported Sell-or-Keep reports.

Provides a backend-neutral interface for storing and retrieving report files.
"""

from .base import (
    StorageError,
    StorageNotFoundError,
    StoragePermissionError,
    StorageService,
)
from .factory import create_storage_service, get_storage_service
from .local import LocalStorageService

__all__ = [
    "StorageService",
    "StorageError",
    "StorageNotFoundError",
    "StoragePermissionError",
    "LocalStorageService",
    "create_storage_service",
    "get_storage_service",
]

"""
Storage interface for exported report artifacts.

Backends store opaque bytes under forward-slash keys such as
``reports/verkopen-of-behouden-analyse-2025-01-31.pdf``.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


class StorageError(Exception):
    """Base exception for storage-related errors."""


class StorageNotFoundError(StorageError):
    """Raised when a requested file is not found in storage."""


class StoragePermissionError(StorageError):
    """Raised when a key is not allowed or the backend denies access."""


class StorageService(ABC):
    """Abstract base class for report storage backends."""

    @abstractmethod
    def store_file(
        self, file_path: str, content: bytes, metadata: Optional[Dict[str, Any]] = None
    ) -> str:
        """
        Store a file.

        Args:
            file_path: Storage key
            content: File content
            metadata: Optional metadata (e.g. ``content_type``) kept with the file

        Returns:
            str: The normalised key the file was stored under

        Raises:
            StorageError: If the file cannot be stored
        """

    @abstractmethod
    def retrieve_file(self, file_path: str) -> bytes:
        """
        Retrieve a file.

        Raises:
            StorageNotFoundError: If the file is not found
        """

    @abstractmethod
    def delete_file(self, file_path: str) -> bool:
        """Delete a file; return False if it did not exist."""

    @abstractmethod
    def file_exists(self, file_path: str) -> bool:
        """Check whether a file exists."""

    @abstractmethod
    def get_file_metadata(self, file_path: str) -> Dict[str, Any]:
        """
        Get metadata for a stored file.

        Raises:
            StorageNotFoundError: If the file is not found
        """

    @abstractmethod
    def list_files(self, prefix: str = "") -> List[str]:
        """List stored keys under a prefix, sorted."""

    def content_type(self, file_path: str) -> str:
        """Return the stored content type, falling back to octet-stream."""
        return self.get_file_metadata(file_path).get(
            "content_type", "application/octet-stream"
        )

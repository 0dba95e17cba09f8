"""
Tests for the report storage service.
"""

import os
from unittest.mock import patch

import pytest

from property_planner.config import Settings, reset_global_settings
from property_planner.storage import (
    LocalStorageService,
    StorageNotFoundError,
    StoragePermissionError,
    create_storage_service,
    get_storage_service,
)


@pytest.fixture
def storage(tmp_path):
    """Local storage rooted in a temporary directory."""
    return LocalStorageService(base_path=str(tmp_path / "storage"))


class TestLocalStorageService:
    """Test cases for LocalStorageService."""

    def test_store_and_retrieve(self, storage):
        """Stored content comes back unchanged."""
        key = storage.store_file("reports/a.pdf", b"%PDF-1.4 test")

        assert key == "reports/a.pdf"
        assert storage.retrieve_file(key) == b"%PDF-1.4 test"
        assert storage.file_exists(key)

    def test_key_is_normalised(self, storage):
        """Leading slashes and backslashes are normalised."""
        key = storage.store_file("/reports\\b.csv", b"year\n1\n")

        assert key == "reports/b.csv"
        assert storage.retrieve_file("reports/b.csv") == b"year\n1\n"

    def test_metadata(self, storage):
        """Metadata is stored in a sidecar and merged with file stats."""
        storage.store_file(
            "reports/a.pdf", b"12345", {"content_type": "application/pdf", "language": "nl"}
        )

        metadata = storage.get_file_metadata("reports/a.pdf")

        assert metadata["size"] == 5
        assert metadata["content_type"] == "application/pdf"
        assert metadata["language"] == "nl"
        assert storage.content_type("reports/a.pdf") == "application/pdf"

    def test_default_content_type(self, storage):
        """Files without metadata are octet-stream."""
        storage.store_file("reports/raw.bin", b"x")

        assert storage.content_type("reports/raw.bin") == "application/octet-stream"

    def test_missing_file(self, storage):
        """Missing files raise StorageNotFoundError."""
        with pytest.raises(StorageNotFoundError):
            storage.retrieve_file("reports/missing.pdf")
        with pytest.raises(StorageNotFoundError):
            storage.get_file_metadata("reports/missing.pdf")

    def test_directory_traversal_rejected(self, storage):
        """Keys cannot escape the storage root."""
        with pytest.raises(StoragePermissionError):
            storage.retrieve_file("../secrets.txt")
        with pytest.raises(StoragePermissionError):
            storage.store_file("reports/../../x", b"x")

    def test_list_files_skips_metadata(self, storage):
        """Listing returns data files only, sorted."""
        storage.store_file("reports/b.csv", b"b", {"content_type": "text/csv"})
        storage.store_file("reports/a.pdf", b"a", {"content_type": "application/pdf"})
        storage.store_file("other/c.txt", b"c")

        assert storage.list_files("reports") == ["reports/a.pdf", "reports/b.csv"]
        assert len(storage.list_files()) == 3
        assert storage.list_files("nothing-here") == []

    def test_delete(self, storage):
        """Deleting removes the file and its metadata."""
        storage.store_file("reports/a.pdf", b"a", {"content_type": "application/pdf"})

        assert storage.delete_file("reports/a.pdf") is True
        assert not storage.file_exists("reports/a.pdf")
        assert storage.list_files() == []
        assert storage.delete_file("reports/a.pdf") is False


class TestStorageFactory:
    """Test cases for the storage factory."""

    def test_create_local_storage(self, tmp_path):
        """Local storage is created at the configured path."""
        with patch.dict(
            os.environ,
            {"SECRET_KEY": "valid-secret-123", "STORAGE_BASE_PATH": str(tmp_path / "s")},
            clear=True,
        ):
            service = create_storage_service(Settings(_env_file=None))

        assert isinstance(service, LocalStorageService)
        assert (tmp_path / "s").is_dir()

    def test_get_storage_service_uses_global_settings(self, app_env):
        """The global helper reads the global settings."""
        service = get_storage_service()

        assert isinstance(service, LocalStorageService)
        assert str(service.base_path) == app_env["STORAGE_BASE_PATH"]

    def test_unsupported_storage_type(self):
        """Only local storage can be configured."""
        reset_global_settings()
        with patch.dict(
            os.environ, {"SECRET_KEY": "valid-secret-123", "STORAGE_TYPE": "s3"}, clear=True
        ):
            with pytest.raises(ValueError):
                Settings(_env_file=None)

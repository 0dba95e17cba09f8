"""Storage service factory driven by application settings."""

from property_planner.config import Settings

from .base import StorageService
from .local import LocalStorageService


def create_storage_service(settings: Settings) -> StorageService:
    """
    Create the storage service configured in the settings.

    Args:
        settings: Application settings

    Returns:
        StorageService: Configured storage service instance

    Raises:
        ValueError: If the storage type is not supported
    """
    if settings.storage_type == "local":
        return LocalStorageService(base_path=settings.storage_base_path, create_dirs=True)

    raise ValueError(f"Unsupported storage type: {settings.storage_type}")


def get_storage_service() -> StorageService:
    """Get a storage service instance using global settings."""
    from property_planner.config import get_global_settings

    return create_storage_service(get_global_settings())

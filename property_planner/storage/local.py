"""
Local filesystem storage for report artifacts.

Each file may carry a JSON sidecar ``<name>.meta`` holding its metadata.
Keys are resolved inside the base directory; a key that would escape it is
rejected.
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from .base import (
    StorageError,
    StorageNotFoundError,
    StoragePermissionError,
    StorageService,
)

METADATA_SUFFIX = ".meta"

logger = logging.getLogger(__name__)


class LocalStorageService(StorageService):
    """Stores report files in a local directory."""

    def __init__(self, base_path: str = "storage", create_dirs: bool = True):
        """
        Initialize the local storage service.

        Args:
            base_path: Base directory for stored files
            create_dirs: Whether to create missing directories
        """
        self.base_path = Path(base_path)
        self.create_dirs = create_dirs

        if self.create_dirs:
            self.base_path.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def normalize_key(file_path: str) -> str:
        """Normalise separators and strip leading slashes and ``.`` parts."""
        parts = file_path.replace("\\", "/").split("/")
        return "/".join(part for part in parts if part and part != ".")

    def _get_file_path(self, file_path: str) -> Path:
        key = self.normalize_key(file_path)
        if not key or ".." in key.split("/"):
            raise StoragePermissionError(f"Invalid storage key: {file_path}")
        return self.base_path / key

    def _get_metadata_path(self, file_path: str) -> Path:
        local_path = self._get_file_path(file_path)
        return local_path.with_name(local_path.name + METADATA_SUFFIX)

    def store_file(
        self, file_path: str, content: bytes, metadata: Optional[Dict[str, Any]] = None
    ) -> str:
        """Write a file and, when given, its metadata sidecar."""
        key = self.normalize_key(file_path)
        local_path = self._get_file_path(key)
        try:
            if self.create_dirs:
                local_path.parent.mkdir(parents=True, exist_ok=True)
            local_path.write_bytes(content)

            if metadata is not None:
                sidecar = {
                    "created_at": datetime.now(timezone.utc).isoformat(),
                    "size": len(content),
                    "content_type": "application/octet-stream",
                    **metadata,
                }
                self._get_metadata_path(key).write_text(json.dumps(sidecar, indent=2))
        except PermissionError as e:
            raise StoragePermissionError(
                f"Permission denied storing file {file_path}: {e}"
            )
        except OSError as e:
            raise StorageError(f"Failed to store file {file_path}: {e}")

        logger.info(f"Stored {key} ({len(content)} bytes)")
        return key

    def retrieve_file(self, file_path: str) -> bytes:
        """Read a stored file."""
        local_path = self._get_file_path(file_path)
        if not local_path.is_file():
            raise StorageNotFoundError(f"File not found: {file_path}")
        try:
            return local_path.read_bytes()
        except PermissionError as e:
            raise StoragePermissionError(
                f"Permission denied retrieving file {file_path}: {e}"
            )
        except OSError as e:
            raise StorageError(f"Failed to retrieve file {file_path}: {e}")

    def delete_file(self, file_path: str) -> bool:
        """Delete a file and its sidecar."""
        local_path = self._get_file_path(file_path)
        metadata_path = self._get_metadata_path(file_path)
        try:
            if metadata_path.exists():
                metadata_path.unlink()
            if not local_path.exists():
                return False
            local_path.unlink()
            return True
        except OSError as e:
            raise StorageError(f"Failed to delete file {file_path}: {e}")

    def file_exists(self, file_path: str) -> bool:
        """Check whether a file exists."""
        return self._get_file_path(file_path).is_file()

    def get_file_metadata(self, file_path: str) -> Dict[str, Any]:
        """Return file stats merged with the stored sidecar, if any."""
        local_path = self._get_file_path(file_path)
        if not local_path.is_file():
            raise StorageNotFoundError(f"File not found: {file_path}")

        stat = local_path.stat()
        metadata: Dict[str, Any] = {
            "size": stat.st_size,
            "modified_at": datetime.fromtimestamp(
                stat.st_mtime, tz=timezone.utc
            ).isoformat(),
            "content_type": "application/octet-stream",
        }

        metadata_path = self._get_metadata_path(file_path)
        if metadata_path.exists():
            try:
                metadata.update(json.loads(metadata_path.read_text()))
            except (json.JSONDecodeError, OSError) as e:
                logger.warning(f"Ignoring unreadable metadata for {file_path}: {e}")

        return metadata

    def list_files(self, prefix: str = "") -> List[str]:
        """List stored keys under a prefix, skipping metadata sidecars."""
        root = self._get_file_path(prefix) if self.normalize_key(prefix) else self.base_path
        if not root.exists():
            return []

        return sorted(
            path.relative_to(self.base_path).as_posix()
            for path in root.rglob("*")
            if path.is_file() and not path.name.endswith(METADATA_SUFFIX)
        )

"""File adapter for read-only file system queries."""

import os
from collections.abc import Iterator
from pathlib import Path

from drupal_artifact_builder.protocols.file_adapter_protocol import FileAdapterProtocol


class FileSystemAdapter:
    """File system adapter implementation."""

    def exists(self, path: Path) -> bool:
        """Check if a file system entry is present, dangling symlinks included."""
        return path.is_symlink() or path.exists()

    def is_symlink(self, path: Path) -> bool:
        """Check if a path is a symbolic link."""
        return path.is_symlink()

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory."""
        return path.is_dir()

    def walk_files(self, path: Path) -> Iterator[Path]:
        """Yield regular files below a directory, symlinks are not followed."""
        for dirpath, _dirnames, filenames in os.walk(path, followlinks=False):
            for filename in filenames:
                file_path = Path(dirpath) / filename
                if not file_path.is_symlink():
                    yield file_path


def create_file_adapter() -> FileAdapterProtocol:
    """Create a file adapter with default implementation."""
    return FileSystemAdapter()


__all__ = ["FileSystemAdapter", "create_file_adapter"]

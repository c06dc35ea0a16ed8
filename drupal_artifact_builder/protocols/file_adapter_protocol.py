"""Protocol definition for read-only file system queries."""

from collections.abc import Iterator
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class FileAdapterProtocol(Protocol):
    """Protocol for the file system questions asked about a project tree."""

    def exists(self, path: Path) -> bool:
        """Check if a file system entry is present.

        Symbolic links count as present even when their target is missing.
        """
        ...

    def is_symlink(self, path: Path) -> bool:
        """Check if a path is a symbolic link."""
        ...

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory (following symlinks)."""
        ...

    def walk_files(self, path: Path) -> Iterator[Path]:
        """Yield every regular file below a directory without following symlinks."""
        ...

"""Adapters for external systems: the shell and the file system."""

from .file_adapter import FileSystemAdapter, create_file_adapter
from .shell_adapter import DEFAULT_TIMEOUT, ShellAdapter, create_shell_adapter


__all__ = [
    "DEFAULT_TIMEOUT",
    "FileSystemAdapter",
    "ShellAdapter",
    "create_file_adapter",
    "create_shell_adapter",
]

"""
Local file system implementation for the release scripts.

This module binds the :class:`~release_scripts.core.interfaces.FileSystem`
interface to the real disk and provides the safe file operations it is built
on:
- Atomic writes (temp file + rename)
- Safe recursive deletion (read-only files on Windows)
"""

import os
import shutil
import stat
import sys
import tempfile
from pathlib import Path
from typing import Union

from .interfaces import FileSystem

IS_WINDOWS = os.name == "nt"


class FilesystemError(Exception):
    """Base exception for filesystem operations."""

    pass


# ============================================================================
# Safe File Operations
# ============================================================================


def atomic_write(
    file_path: Union[str, Path], content: str, encoding: str = "utf-8"
) -> None:
    """
    Write a text file atomically using temp file + rename.

    The file is never left partially written. If the write fails, the original
    file (if any) remains unchanged.

    Args:
        file_path: Path to write to
        content: Text content to write
        encoding: Text encoding

    Example:
        >>> atomic_write('gemini-extension.json', '{"version": "1.0.1"}\\n')
    """
    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    # Same directory as the target so the rename stays on one filesystem
    temp_fd, temp_path_str = tempfile.mkstemp(
        dir=file_path.parent, prefix=f".{file_path.name}.", suffix=".tmp"
    )
    temp_path = Path(temp_path_str)

    try:
        with open(temp_fd, "w", encoding=encoding, newline="") as f:
            f.write(content)
        temp_path.replace(file_path)
    except Exception:
        try:
            temp_path.unlink(missing_ok=True)
        except OSError:
            pass
        raise


def _remove_readonly(func, path, _exc):
    """Clear the read-only bit and retry (Windows marks git objects read-only)."""
    if not os.access(path, os.W_OK):
        os.chmod(path, stat.S_IWRITE)
        func(path)
    else:
        raise


def safe_rmtree(path: Union[str, Path]) -> None:
    """
    Remove a directory tree, handling read-only files on Windows.

    Args:
        path: Directory to remove

    Raises:
        FilesystemError: If the path is not a directory or deletion fails
    """
    path = Path(path)

    if not path.exists():
        return

    if not path.is_dir():
        raise FilesystemError(f"Path is not a directory: {path}")

    try:
        if IS_WINDOWS:
            if sys.version_info >= (3, 12):
                shutil.rmtree(path, onexc=_remove_readonly)
            else:
                shutil.rmtree(path, onerror=_remove_readonly)
        else:
            shutil.rmtree(path)
    except OSError as e:
        raise FilesystemError(f"Failed to remove directory '{path}': {e}") from e


# ============================================================================
# FileSystem Implementation
# ============================================================================


class LocalFileSystem(FileSystem):
    """FileSystem backed by the real disk."""

    @property
    def path(self):
        return os.path

    @property
    def current_directory(self) -> str:
        return os.getcwd()

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def is_file(self, path: str) -> bool:
        return os.path.isfile(path)

    def is_dir(self, path: str) -> bool:
        return os.path.isdir(path)

    def read_text(self, path: str) -> str:
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()

    def write_text(self, path: str, content: str) -> None:
        atomic_write(path, content)

    def append_text(self, path: str, content: str) -> None:
        with open(path, "a", encoding="utf-8", newline="") as f:
            f.write(content)

    def delete_file(self, path: str) -> None:
        os.remove(path)

    def delete_tree(self, path: str) -> None:
        safe_rmtree(path)

    def make_dirs(self, path: str) -> None:
        os.makedirs(path, exist_ok=True)


__all__ = [
    "FilesystemError",
    "LocalFileSystem",
    "atomic_write",
    "safe_rmtree",
]

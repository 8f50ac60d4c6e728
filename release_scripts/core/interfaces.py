"""
Core interfaces for the release scripts.

This module defines the abstract interfaces that every command depends on.
Production code binds them to the real operating system (see
:mod:`release_scripts.core.filesystem`, :mod:`release_scripts.core.platform`
and :mod:`release_scripts.core.process`); tests bind them to in-memory fakes.

Paths are plain strings throughout. Each :class:`FileSystem` exposes the path
module (``posixpath`` or ``ntpath``) that matches its path style, so commands
can join and split paths without knowing which style is in use.
"""

import subprocess
from abc import ABC, abstractmethod
from types import ModuleType
from typing import List, Mapping, Optional


class FileSystem(ABC):
    """
    Abstract interface for the filesystem operations the scripts need.
    """

    @property
    @abstractmethod
    def path(self) -> ModuleType:
        """Path module (``os.path``, ``posixpath`` or ``ntpath``) for this filesystem."""
        pass

    @property
    @abstractmethod
    def current_directory(self) -> str:
        """Absolute path of the current working directory."""
        pass

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Return True if ``path`` exists as a file or directory."""
        pass

    @abstractmethod
    def is_file(self, path: str) -> bool:
        """Return True if ``path`` exists and is a regular file."""
        pass

    @abstractmethod
    def is_dir(self, path: str) -> bool:
        """Return True if ``path`` exists and is a directory."""
        pass

    @abstractmethod
    def read_text(self, path: str) -> str:
        """
        Read a text file.

        Raises:
            FileNotFoundError: If the file does not exist
        """
        pass

    @abstractmethod
    def write_text(self, path: str, content: str) -> None:
        """Replace the content of a text file, creating it if needed."""
        pass

    @abstractmethod
    def append_text(self, path: str, content: str) -> None:
        """Append to a text file, creating it if needed."""
        pass

    @abstractmethod
    def delete_file(self, path: str) -> None:
        """Delete a single file."""
        pass

    @abstractmethod
    def delete_tree(self, path: str) -> None:
        """Recursively delete a directory. Missing directories are ignored."""
        pass

    @abstractmethod
    def make_dirs(self, path: str) -> None:
        """Create a directory and any missing parents (idempotent)."""
        pass


class Platform(ABC):
    """
    Abstract interface for host platform information.
    """

    @property
    @abstractmethod
    def operating_system(self) -> str:
        """
        Host operating system name.

        One of 'linux', 'macos', 'windows', or another lower-case name for
        systems the scripts do not support.
        """
        pass

    @property
    @abstractmethod
    def environment(self) -> Mapping[str, str]:
        """Process environment variables."""
        pass


class ProcessManager(ABC):
    """
    Abstract interface for launching subprocesses.
    """

    @abstractmethod
    def run(
        self, command: List[str], working_directory: Optional[str] = None
    ) -> subprocess.CompletedProcess:
        """
        Run a command to completion and capture its output.

        Args:
            command: Argument vector, executable first
            working_directory: Directory to run in (default: current directory)

        Returns:
            CompletedProcess with ``returncode`` and text ``stdout``/``stderr``

        Raises:
            OSError: If the executable cannot be started
        """
        pass


__all__ = [
    "FileSystem",
    "Platform",
    "ProcessManager",
]

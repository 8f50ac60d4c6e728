"""
Mock implementations for testing the release scripts.

This package provides in-memory implementations of the filesystem, platform
and process interfaces to enable isolated, deterministic testing.
"""

from .filesystem import MemoryFileSystem
from .platform import FakePlatform
from .process import MockProcessManager

__all__ = [
    "MemoryFileSystem",
    "FakePlatform",
    "MockProcessManager",
]

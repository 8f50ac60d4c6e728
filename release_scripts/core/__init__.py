"""
Core functionality for the release scripts.

This package contains the execution context and the foundational helpers
(platform resolution, repository discovery, subprocesses) the commands use.
"""

from .context import ScriptContext, run_script

from .platform import (
    PlatformInfo,
    LocalPlatform,
    get_platform_info,
)

from .repository import find_repo_root

from .process import (
    LocalProcessManager,
    run_process,
    capture_process_output,
)

from .filesystem import LocalFileSystem

from .exceptions import (
    ExitException,
    UsageError,
    ConfigNotFoundError,
    RepositoryRootNotFoundError,
    HomeDirectoryNotFoundError,
    UnknownPlatformError,
    ProcessError,
    ParseError,
    MissingFieldError,
    ArtifactNotFoundError,
)

__all__ = [
    # Context
    "ScriptContext",
    "run_script",
    # Platform
    "PlatformInfo",
    "LocalPlatform",
    "get_platform_info",
    # Repository
    "find_repo_root",
    # Processes
    "LocalProcessManager",
    "run_process",
    "capture_process_output",
    # Filesystem
    "LocalFileSystem",
    # Exceptions
    "ExitException",
    "UsageError",
    "ConfigNotFoundError",
    "RepositoryRootNotFoundError",
    "HomeDirectoryNotFoundError",
    "UnknownPlatformError",
    "ProcessError",
    "ParseError",
    "MissingFieldError",
    "ArtifactNotFoundError",
]

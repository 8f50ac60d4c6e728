"""
Platform resolution for the release scripts.

This module decides which operating system, CPU architecture and archive
format a release archive is built for.

Resolution order:
- GITHUB_MATRIX_OS (CI job matrix identifier such as 'ubuntu-latest'),
  with RUNNER_ARCH overriding the architecture
- The live host platform, with the architecture taken from ``uname -m``

Usage:
    from release_scripts.core.context import ScriptContext
    from release_scripts.core.platform import get_platform_info

    info = get_platform_info(ScriptContext())
    print(info.archive_name("flutter"))  # e.g. 'linux.x86_64.flutter.tar.gz'
"""

import logging
import os
import platform
from dataclasses import dataclass
from typing import Mapping

from .exceptions import UnknownPlatformError
from .interfaces import Platform
from .process import capture_process_output

logger = logging.getLogger(__name__)

MATRIX_OS_ENV = "GITHUB_MATRIX_OS"
RUNNER_ARCH_ENV = "RUNNER_ARCH"

# CI runner image prefix -> canonical OS name
_MATRIX_OS_PREFIXES = (
    ("macos", "darwin"),
    ("windows", "windows"),
    ("ubuntu", "linux"),
)

WINDOWS_DEFAULT_ARCH = "x64"


@dataclass(frozen=True)
class PlatformInfo:
    """
    Target platform of a release archive.

    Attributes:
        os: Operating system ('linux', 'darwin', 'windows')
        arch: Lower-cased CPU architecture ('arm64', 'x86_64', 'x64', ...)
        ext: Final archive extension ('tar.gz' or 'zip')
    """

    os: str
    arch: str
    ext: str

    @property
    def is_windows(self) -> bool:
        return self.os == "windows"

    def archive_name(self, product: str) -> str:
        """
        Get the release archive file name.

        Example:
            >>> PlatformInfo('linux', 'arm64', 'tar.gz').archive_name('flutter')
            'linux.arm64.flutter.tar.gz'
        """
        return f"{self.os}.{self.arch}.{product}.{self.ext}"

    def __str__(self) -> str:
        return f"{self.os}-{self.arch} ({self.ext})"


class LocalPlatform(Platform):
    """Platform backed by the running interpreter."""

    @property
    def operating_system(self) -> str:
        system = platform.system().lower()
        if system == "darwin":
            return "macos"
        return system

    @property
    def environment(self) -> Mapping[str, str]:
        return os.environ


def _archive_extension(os_name: str) -> str:
    return "zip" if os_name == "windows" else "tar.gz"


def _uname_arch(context) -> str:
    return capture_process_output(context, ["uname", "-m"]).lower()


def _os_from_matrix(matrix_os: str) -> str:
    for prefix, os_name in _MATRIX_OS_PREFIXES:
        if matrix_os.startswith(prefix):
            return os_name
    raise UnknownPlatformError(f"Unknown {MATRIX_OS_ENV}: {matrix_os}")


def get_platform_info(context) -> PlatformInfo:
    """
    Determine the target platform of the release archive.

    Runs at most one subprocess (``uname -m``).

    Args:
        context: ScriptContext to resolve against

    Returns:
        PlatformInfo for the target

    Raises:
        UnknownPlatformError: If the OS cannot be mapped
        ProcessError: If ``uname -m`` fails
    """
    env = context.platform.environment
    matrix_os = env.get(MATRIX_OS_ENV)

    if matrix_os:
        os_name = _os_from_matrix(matrix_os)
        runner_arch = env.get(RUNNER_ARCH_ENV)
        if runner_arch:
            arch = runner_arch.lower()
        elif os_name == "windows":
            arch = WINDOWS_DEFAULT_ARCH
        else:
            arch = _uname_arch(context)
        logger.debug(f"Platform from {MATRIX_OS_ENV}={matrix_os}: {os_name}-{arch}")
    else:
        os_name = context.platform.operating_system
        if os_name == "macos":
            os_name = "darwin"

        if os_name in ("darwin", "linux"):
            arch = _uname_arch(context)
        elif os_name == "windows":
            arch = WINDOWS_DEFAULT_ARCH
        else:
            raise UnknownPlatformError(f"Unknown OS: {os_name}")

    return PlatformInfo(os=os_name, arch=arch, ext=_archive_extension(os_name))


__all__ = [
    "PlatformInfo",
    "LocalPlatform",
    "get_platform_info",
    "MATRIX_OS_ENV",
    "RUNNER_ARCH_ENV",
]

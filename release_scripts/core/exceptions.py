"""
Centralized exception hierarchy for the release scripts.

Every failure a script reports on purpose is an :class:`ExitException`. The
script runner prints its message to stderr and exits with its code, without a
traceback. Anything else is treated as an unexpected error.
"""

from typing import List, Optional


# ============================================================================
# Base Exceptions
# ============================================================================


class ExitException(Exception):
    """
    Controlled exit with a message and a process exit code.

    Attributes:
        message: Text shown to the user on stderr (may be empty)
        exit_code: Exit code returned to the shell
    """

    exit_code = 1

    def __init__(self, message: str = "", exit_code: Optional[int] = None):
        self.message = message
        if exit_code is not None:
            self.exit_code = exit_code
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class UsageError(ExitException):
    """Raised when a script is called with invalid arguments."""

    exit_code = 2


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigNotFoundError(ExitException):
    """Base exception when required configuration cannot be located."""

    pass


class RepositoryRootNotFoundError(ConfigNotFoundError):
    """Raised when no parent directory contains the repository marker file."""

    def __init__(self, marker: str):
        self.marker = marker
        super().__init__(f"Could not find repository root (looked for {marker})")


class HomeDirectoryNotFoundError(ConfigNotFoundError):
    """Raised when neither HOME nor USERPROFILE is set."""

    def __init__(self):
        super().__init__(
            "Could not determine home directory (neither HOME nor USERPROFILE is set)"
        )


# ============================================================================
# Platform Exceptions
# ============================================================================


class UnknownPlatformError(ExitException):
    """Raised when the target operating system cannot be mapped."""

    pass


# ============================================================================
# Process Exceptions
# ============================================================================


class ProcessError(ExitException):
    """
    Raised when a subprocess exits with a non-zero code.

    Attributes:
        command: Argument vector that failed
        returncode: Exit code of the failed process
        stderr: Captured standard error (may be empty)
    """

    def __init__(self, command: List[str], returncode: int, stderr: str = ""):
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
        msg = f"Command failed with exit code {returncode}: {' '.join(command)}"
        if stderr and stderr.strip():
            msg += f"\nStderr: {stderr.strip()}"
        super().__init__(msg)


# ============================================================================
# Manifest Exceptions
# ============================================================================


class ParseError(ExitException):
    """Raised when a JSON manifest or YAML config cannot be parsed."""

    pass


class MissingFieldError(ExitException):
    """Raised when a manifest lacks an expected field."""

    def __init__(self, field_name: str, file_name: str):
        self.field_name = field_name
        self.file_name = file_name
        super().__init__(f'Could not find "{field_name}" field in {file_name}')


class ArtifactNotFoundError(ExitException):
    """Raised when an expected build artifact is missing."""

    pass


__all__ = [
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

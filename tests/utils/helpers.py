"""
Test helper utilities for the release scripts.
"""

import shutil


def has_command(command: str) -> bool:
    """True if ``command`` resolves to an executable on PATH."""
    return shutil.which(command) is not None

"""
Repository root discovery.

The repository root is the closest directory, starting from the current one
and walking up, that contains the extension manifest file.
"""

import logging

from .exceptions import RepositoryRootNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_MARKER = "gemini-extension.json"


def find_repo_root(context, marker: str = DEFAULT_MARKER) -> str:
    """
    Find the repository root by looking for ``marker``.

    Args:
        context: ScriptContext whose filesystem and current directory are used
        marker: File name that identifies the repository root

    Returns:
        Path of the directory containing ``marker``

    Raises:
        RepositoryRootNotFoundError: If the filesystem root is reached first
    """
    fs = context.fs
    current = fs.current_directory

    while True:
        if fs.is_file(fs.path.join(current, marker)):
            logger.debug(f"Found {marker} in {current}")
            return current
        parent = fs.path.dirname(current)
        if parent == current:
            break
        current = parent

    raise RepositoryRootNotFoundError(marker)


__all__ = ["find_repo_root", "DEFAULT_MARKER"]

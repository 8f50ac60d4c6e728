"""
Local installer for the extension.

Builds a fresh release archive and unpacks it into the user's extension
directory (``~/.gemini/extensions/flutter`` by default), replacing whatever
was installed there before.
"""

import logging
from typing import Optional

from release_scripts.config import ReleaseConfig
from release_scripts.core.exceptions import (
    ArtifactNotFoundError,
    HomeDirectoryNotFoundError,
)
from release_scripts.core.process import run_process
from release_scripts.release.archive import BuildReleaseCommand

logger = logging.getLogger(__name__)


def resolve_home_directory(environment) -> str:
    """
    Get the user's home directory from HOME, falling back to USERPROFILE.

    Raises:
        HomeDirectoryNotFoundError: If neither variable is set
    """
    home = environment.get("HOME") or environment.get("USERPROFILE")
    if not home:
        raise HomeDirectoryNotFoundError()
    return home


def _expand_archive_command(archive_path: str, install_dir: str) -> str:
    return (
        f'Expand-Archive -Path "{archive_path}" '
        f'-DestinationPath "{install_dir}" -Force'
    )


class UpdateLocalCommand:
    """Rebuilds the extension and installs it into the local extension directory."""

    def __init__(self, context, config: Optional[ReleaseConfig] = None):
        self.context = context
        self.config = config or ReleaseConfig()

    def run(self) -> None:
        """
        Build, clear the install directory, and extract.

        Raises:
            HomeDirectoryNotFoundError: If no home directory is configured
            ArtifactNotFoundError: If the archive is missing after the build
            ProcessError: If building or extracting fails
        """
        fs = self.context.fs

        logger.info("Building the release...")
        builder = BuildReleaseCommand(self.context, self.config)
        archive_path = builder.run()

        home = resolve_home_directory(self.context.platform.environment)
        install_dir = self.config.install_dir(fs, home)

        logger.info(f"Clearing the installation directory ({install_dir})...")
        if fs.exists(install_dir):
            fs.delete_tree(install_dir)
        fs.make_dirs(install_dir)

        logger.info("Extracting the archive...")
        if not fs.is_file(archive_path):
            raise ArtifactNotFoundError(
                f"Archive not found at {archive_path} after build."
            )

        if builder.platform_info.is_windows:
            command = [
                "powershell",
                "-command",
                _expand_archive_command(archive_path, install_dir),
            ]
        else:
            command = ["tar", "-xzf", archive_path, "-C", install_dir]
        run_process(self.context, command)

        self.context.stdout.write("Installation complete.\n")


__all__ = ["UpdateLocalCommand", "resolve_home_directory"]

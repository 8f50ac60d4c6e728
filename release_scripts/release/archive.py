"""
Release archive builder.

Builds the extension archive from a git revision:
1. Resolves the target platform and the repository root
2. Picks the revision from GITHUB_REF (tags) or falls back to HEAD
3. Runs ``git archive`` (zip on Windows, tar + gzip elsewhere)
4. Reports the archive name through GITHUB_ENV when running in CI
"""

import logging
from typing import Optional

from release_scripts.config import ReleaseConfig
from release_scripts.core.platform import PlatformInfo, get_platform_info
from release_scripts.core.process import run_process
from release_scripts.core.repository import find_repo_root

logger = logging.getLogger(__name__)

GITHUB_REF_ENV = "GITHUB_REF"
GITHUB_ENV_ENV = "GITHUB_ENV"
TAG_REF_PREFIX = "refs/tags/"
DEFAULT_REVISION = "HEAD"


def resolve_tag_name(environment) -> str:
    """
    Get the revision to archive from the CI git ref.

    Examples:
        'refs/tags/v1.2.3' -> 'v1.2.3'
        unset or empty -> 'HEAD'
    """
    tag_name = environment.get(GITHUB_REF_ENV) or DEFAULT_REVISION
    if tag_name.startswith(TAG_REF_PREFIX):
        tag_name = tag_name[len(TAG_REF_PREFIX) :]
    return tag_name or DEFAULT_REVISION


class BuildReleaseCommand:
    """Builds the release archive for the current (or CI matrix) platform."""

    def __init__(self, context, config: Optional[ReleaseConfig] = None):
        self.context = context
        self.config = config or ReleaseConfig()
        self.platform_info: Optional[PlatformInfo] = None

    def run(self) -> str:
        """
        Build the release archive.

        Returns:
            Absolute path of the archive

        Raises:
            UnknownPlatformError: If the target OS cannot be determined
            RepositoryRootNotFoundError: If the manifest file cannot be found
            ProcessError: If git or gzip fails
        """
        fs = self.context.fs
        env = self.context.platform.environment

        platform_info = self.platform_info = get_platform_info(self.context)
        archive_name = platform_info.archive_name(self.config.product)

        repo_path = find_repo_root(self.context, self.config.manifest_file)
        logger.info(f"Repository root: {repo_path}")

        tag_name = resolve_tag_name(env)

        archive_path = fs.path.join(repo_path, archive_name)
        if fs.is_file(archive_path):
            logger.debug(f"Removing stale archive {archive_path}")
            fs.delete_file(archive_path)

        logger.info(f"Creating archive {archive_name} from {tag_name}...")

        files_to_archive = list(self.config.archive_files)

        if platform_info.is_windows:
            self._git_archive("zip", archive_name, tag_name, files_to_archive, repo_path)
        else:
            tar_name = f"{platform_info.os}.{platform_info.arch}.{self.config.product}.tar"
            self._git_archive("tar", tar_name, tag_name, files_to_archive, repo_path)
            run_process(
                self.context,
                ["gzip", "--force", tar_name],
                working_directory=repo_path,
            )

        self._report(archive_name)

        return archive_path

    def _git_archive(self, fmt, output, tag_name, files, repo_path):
        run_process(
            self.context,
            ["git", "archive", f"--format={fmt}", "-o", output, tag_name, *files],
            working_directory=repo_path,
        )

    def _report(self, archive_name: str) -> None:
        """Publish the archive name to GitHub Actions, or tell the user."""
        fs = self.context.fs
        github_env = self.context.platform.environment.get(GITHUB_ENV_ENV)
        if github_env and fs.is_file(github_env):
            fs.append_text(github_env, f"ARCHIVE_NAME={archive_name}\n")
        else:
            self.context.stdout.write(f"Archive written to {archive_name}\n")


__all__ = ["BuildReleaseCommand", "resolve_tag_name"]

"""
Version bump for the extension.

Updates the "version" field of the extension manifest and adds a section for
the new version to the changelog.
"""

import json
import logging
import re
from typing import Optional

from packaging.version import InvalidVersion, Version

from release_scripts.config import ReleaseConfig
from release_scripts.core.exceptions import (
    ArtifactNotFoundError,
    MissingFieldError,
    ParseError,
    UsageError,
)
from release_scripts.core.repository import find_repo_root

logger = logging.getLogger(__name__)

VERSION_FIELD = "version"

# First level-2 heading ("## 1.0.0", "## Unreleased", ...)
_SECTION_HEADING = re.compile(r"^##\s", re.MULTILINE)


def changelog_section(version: str, newline: str = "\n") -> str:
    """Get the placeholder changelog section for ``version``."""
    return (
        f"## {version}{newline}{newline}"
        f"- TODO: Describe the changes in this version.{newline}{newline}"
    )


def insert_changelog_section(content: str, version: str) -> Optional[str]:
    """
    Add a section for ``version`` to changelog ``content``.

    The section goes right before the first ``## `` heading, or at the top
    when there is none. It uses CRLF line endings if the content does.

    Returns:
        The new content, or None if a ``## <version>`` heading already exists
    """
    existing = re.compile(rf"^## {re.escape(version)}[ \t]*\r?$", re.MULTILINE)
    if existing.search(content):
        return None

    newline = "\r\n" if "\r\n" in content else "\n"
    section = changelog_section(version, newline)
    match = _SECTION_HEADING.search(content)
    if match is None:
        return section + content
    return content[: match.start()] + section + content[match.start() :]


def _warn_if_not_newer(current, new_version: str) -> None:
    try:
        if Version(new_version) <= Version(str(current)):
            logger.warning(
                f"New version {new_version} is not greater than current version {current}"
            )
    except InvalidVersion:
        logger.warning(
            f"Could not compare versions '{current}' and '{new_version}'"
        )


class BumpVersionCommand:
    """Sets a new version in the manifest and changelog."""

    def __init__(
        self, context, new_version: str, config: Optional[ReleaseConfig] = None
    ):
        self.context = context
        self.new_version = new_version
        self.config = config or ReleaseConfig()

    def run(self) -> None:
        """
        Bump the version.

        Raises:
            UsageError: If the new version is empty
            RepositoryRootNotFoundError: If the manifest cannot be located
            ParseError: If the manifest is not a JSON object
            MissingFieldError: If the manifest has no "version" field
        """
        if not self.new_version:
            raise UsageError("Usage: bump_version <new_version>")

        repo_path = find_repo_root(self.context, self.config.manifest_file)

        self._update_manifest(repo_path)
        self._update_changelog(repo_path)

        self.context.stdout.write(f"Version bumped to {self.new_version}\n")

    def _update_manifest(self, repo_path: str) -> None:
        fs = self.context.fs
        name = self.config.manifest_file
        manifest_path = fs.path.join(repo_path, name)

        if not fs.is_file(manifest_path):
            raise ArtifactNotFoundError(f"{name} not found at {manifest_path}")

        try:
            manifest = json.loads(fs.read_text(manifest_path))
        except json.JSONDecodeError as e:
            raise ParseError(f"Failed to parse {name}: {e.msg}") from e

        if not isinstance(manifest, dict):
            raise ParseError(f"Failed to parse {name}: expected a JSON object")

        if VERSION_FIELD not in manifest:
            raise MissingFieldError(VERSION_FIELD, name)

        _warn_if_not_newer(manifest[VERSION_FIELD], self.new_version)
        manifest[VERSION_FIELD] = self.new_version

        fs.write_text(
            manifest_path, json.dumps(manifest, indent=2, ensure_ascii=False) + "\n"
        )

    def _update_changelog(self, repo_path: str) -> None:
        fs = self.context.fs
        name = self.config.changelog_file
        changelog_path = fs.path.join(repo_path, name)

        if not fs.is_file(changelog_path):
            logger.warning(f"{name} not found.")
            return

        updated = insert_changelog_section(fs.read_text(changelog_path), self.new_version)
        if updated is None:
            logger.debug(f"{name} already has a section for {self.new_version}")
            return

        logger.info(f"Adding version {self.new_version} to {name}")
        fs.write_text(changelog_path, updated)


__all__ = [
    "BumpVersionCommand",
    "changelog_section",
    "insert_changelog_section",
]

"""
Release workflows for the extension.

This module provides:
- Release archive building
- Version bumping (manifest and changelog)
- Local installation of a fresh build
"""

from release_scripts.release.archive import BuildReleaseCommand, resolve_tag_name
from release_scripts.release.installer import (
    UpdateLocalCommand,
    resolve_home_directory,
)
from release_scripts.release.version import (
    BumpVersionCommand,
    insert_changelog_section,
)

__all__ = [
    "BuildReleaseCommand",
    "BumpVersionCommand",
    "UpdateLocalCommand",
    "insert_changelog_section",
    "resolve_home_directory",
    "resolve_tag_name",
]

"""YAML configuration for the release scripts.

The defaults describe the Flutter extension repository. An optional
``release_scripts.yaml`` file can override them, for example:

    product: flutter
    namespace: .gemini
    manifest_file: gemini-extension.json
    changelog_file: CHANGELOG.md
    archive_files:
      - gemini-extension.json
      - commands/
      - LICENSE
      - README.md
      - flutter.md
"""

import logging
from dataclasses import dataclass, field, fields, replace
from typing import List, Optional

import yaml

from release_scripts.core.exceptions import ConfigNotFoundError, ParseError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "release_scripts.yaml"


def _default_archive_files() -> List[str]:
    return [
        "gemini-extension.json",
        "commands/",
        "LICENSE",
        "README.md",
        "flutter.md",
    ]


@dataclass(frozen=True)
class ReleaseConfig:
    """
    Repository layout the release scripts work on.

    Attributes:
        product: Product name used in archive and install directory names
        namespace: Dot-directory under the home directory that holds extensions
        manifest_file: Extension manifest; also marks the repository root
        changelog_file: Changelog updated by bump-version
        archive_files: Paths (relative to the repository root) put in the archive
    """

    product: str = "flutter"
    namespace: str = ".gemini"
    manifest_file: str = "gemini-extension.json"
    changelog_file: str = "CHANGELOG.md"
    archive_files: List[str] = field(default_factory=_default_archive_files)

    def install_dir(self, fs, home: str) -> str:
        """Get the install directory under ``home``."""
        return fs.path.join(home, self.namespace, "extensions", self.product)


def _validate(data: dict, source: str) -> dict:
    known = {f.name for f in fields(ReleaseConfig)}
    values = {}
    for key, value in data.items():
        if key not in known:
            logger.warning(f"Ignoring unknown key '{key}' in {source}")
            continue
        if key == "archive_files":
            if not isinstance(value, list) or not all(
                isinstance(item, str) for item in value
            ):
                raise ParseError(f"'archive_files' in {source} must be a list of strings")
            if not value:
                raise ParseError(f"'archive_files' in {source} must not be empty")
        elif not isinstance(value, str) or not value:
            raise ParseError(f"'{key}' in {source} must be a non-empty string")
        values[key] = value
    return values


def load_release_config(
    context, config_file: Optional[str] = None, required: bool = False
) -> ReleaseConfig:
    """
    Load the release configuration.

    Args:
        context: ScriptContext whose filesystem is read
        config_file: Path to a YAML file (default: release_scripts.yaml in the
            current directory)
        required: If True, a missing file is an error

    Returns:
        ReleaseConfig with the file's values applied over the defaults

    Raises:
        ConfigNotFoundError: If required=True and the file doesn't exist
        ParseError: If the YAML is invalid or a value has the wrong type
    """
    fs = context.fs
    if config_file is None:
        config_file = fs.path.join(fs.current_directory, DEFAULT_CONFIG_FILE)

    if not fs.is_file(config_file):
        if required:
            raise ConfigNotFoundError(f"Configuration file not found: {config_file}")
        logger.debug(f"Config file not found (optional): {config_file}")
        return ReleaseConfig()

    logger.debug(f"Loading configuration from {config_file}")

    try:
        data = yaml.safe_load(fs.read_text(config_file))
    except yaml.YAMLError as e:
        raise ParseError(f"Invalid YAML in {config_file}: {e}") from e

    if data is None:
        return ReleaseConfig()
    if not isinstance(data, dict):
        raise ParseError(f"Configuration in {config_file} must be a mapping")

    return replace(ReleaseConfig(), **_validate(data, config_file))


__all__ = [
    "ReleaseConfig",
    "load_release_config",
    "DEFAULT_CONFIG_FILE",
]

"""
Bump-version command implementation.

Sets a new version in the extension manifest and changelog.
"""

import logging
import sys

from release_scripts.cli.utils import run_standalone
from release_scripts.core.exceptions import UsageError
from release_scripts.release.version import BumpVersionCommand

logger = logging.getLogger(__name__)

USAGE = "Usage: bump_version <new_version>"


def run(args, context, config) -> None:
    """
    Run the bump-version command.

    Args:
        args: Parsed command-line arguments with:
            - new_version: Version to set
        context: ScriptContext to run in
        config: Release configuration
    """
    BumpVersionCommand(context, args.new_version, config).run()


def _script(context, config, argv) -> None:
    if not argv:
        raise UsageError(USAGE)
    if len(argv) > 1:
        raise UsageError(f"Unexpected arguments: {' '.join(argv[1:])}\n{USAGE}")
    BumpVersionCommand(context, argv[0], config).run()


def main(argv=None, context=None) -> int:
    """Stand-alone ``bump_version`` entry point."""
    return run_standalone(_script, argv, context)


def entry_point():
    sys.exit(main())


if __name__ == "__main__":
    entry_point()

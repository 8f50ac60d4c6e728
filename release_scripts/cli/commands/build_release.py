"""
Build-release command implementation.

Builds the release archive for the current (or CI matrix) platform.
"""

import logging
import sys

from release_scripts.cli.utils import run_standalone
from release_scripts.core.exceptions import UsageError
from release_scripts.release.archive import BuildReleaseCommand

logger = logging.getLogger(__name__)


def run(args, context, config) -> None:
    """
    Run the build-release command.

    Args:
        args: Parsed command-line arguments
        context: ScriptContext to run in
        config: Release configuration
    """
    logger.debug(f"Arguments: {args}")
    BuildReleaseCommand(context, config).run()


def _script(context, config, argv) -> None:
    if argv:
        raise UsageError(f"Unexpected arguments: {' '.join(argv)}\nUsage: build_release")
    BuildReleaseCommand(context, config).run()


def main(argv=None, context=None) -> int:
    """Stand-alone ``build_release`` entry point."""
    return run_standalone(_script, argv, context)


def entry_point():
    sys.exit(main())


if __name__ == "__main__":
    entry_point()

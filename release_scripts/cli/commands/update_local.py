"""
Update-local command implementation.

Rebuilds the extension and installs it into the local extension directory.
"""

import argparse
import logging
import sys

from release_scripts.cli.utils import run_standalone
from release_scripts.core.exceptions import UsageError
from release_scripts.release.installer import UpdateLocalCommand

logger = logging.getLogger(__name__)


def run(args, context, config) -> None:
    """
    Run the update-local command.

    Args:
        args: Parsed command-line arguments
        context: ScriptContext to run in
        config: Release configuration
    """
    logger.debug(f"Arguments: {args}")
    UpdateLocalCommand(context, config).run()


def _create_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="update_local",
        description="Build the extension and install it into the local extension directory",
    )


def _script(context, config, argv) -> None:
    parser = _create_parser()
    _, rest = parser.parse_known_args(argv)
    if rest:
        raise UsageError(f"Unexpected arguments: {' '.join(rest)}\nUsage: update_local")
    UpdateLocalCommand(context, config).run()


def main(argv=None, context=None) -> int:
    """Stand-alone ``update_local`` entry point."""
    return run_standalone(_script, argv, context)


def entry_point():
    sys.exit(main())


if __name__ == "__main__":
    entry_point()

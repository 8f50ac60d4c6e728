"""
Shared utilities for CLI commands.

Provides common functionality used by the umbrella CLI and the stand-alone
script entry points so they behave the same way.
"""

import logging
import sys
from typing import Callable, List, Optional

from release_scripts.config import ReleaseConfig, load_release_config
from release_scripts.core.context import ScriptContext, run_script


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure logging based on verbose/quiet flags.

    Args:
        verbose: DEBUG level with logger names
        quiet: Errors only
    """
    if verbose:
        level = logging.DEBUG
        format_str = "%(levelname)s [%(name)s] %(message)s"
    elif quiet:
        level = logging.ERROR
        format_str = "%(levelname)s: %(message)s"
    else:
        level = logging.INFO
        format_str = "%(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        force=True,  # Reconfigure if already configured
    )


def run_standalone(
    body: Callable[[ScriptContext, ReleaseConfig, List[str]], None],
    argv: Optional[List[str]] = None,
    context: Optional[ScriptContext] = None,
) -> int:
    """
    Run a stand-alone script entry point.

    Loads the default configuration, runs ``body`` with the remaining
    command-line arguments and maps failures to an exit code.

    Args:
        body: Script body taking (context, config, argv)
        argv: Arguments (default: sys.argv[1:])
        context: Context to run with (default: a fresh ScriptContext)

    Returns:
        Process exit code
    """
    argv = sys.argv[1:] if argv is None else list(argv)
    configure_logging()

    def _script(ctx: ScriptContext) -> None:
        body(ctx, load_release_config(ctx), argv)

    return run_script(_script, context)


__all__ = ["configure_logging", "run_standalone"]

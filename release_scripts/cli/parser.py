"""
Release scripts CLI argument parser.

This module implements the ``release-scripts`` command-line interface using
argparse.
"""

import argparse
import importlib
import logging
import sys
from typing import List, Optional

from release_scripts.cli.utils import configure_logging
from release_scripts.config import load_release_config
from release_scripts.core.context import ScriptContext, run_script

# Get version from package
try:
    from importlib.metadata import version

    __version__ = version("flutter-extension-release-scripts")
except Exception:
    __version__ = "0.1.0"

logger = logging.getLogger(__name__)


class CLI:
    """Release scripts command-line interface."""

    def __init__(self):
        """Initialize CLI with argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser with all subcommands.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog="release-scripts",
            description="Release tooling for the Flutter Gemini CLI extension",
            epilog='Use "release-scripts COMMAND --help" for command-specific help',
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        # Global options
        parser.add_argument(
            "--version", action="version", version=f"release-scripts {__version__}"
        )
        parser.add_argument(
            "--verbose", "-v", action="store_true", help="Enable verbose output"
        )
        parser.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Enable minimal output (errors only)",
        )
        parser.add_argument(
            "--config",
            metavar="PATH",
            help="Path to configuration file (default: ./release_scripts.yaml)",
        )

        # Subcommands
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands", metavar="COMMAND"
        )

        self._add_build_release_command(subparsers)
        self._add_bump_version_command(subparsers)
        self._add_update_local_command(subparsers)

        return parser

    def _add_build_release_command(self, subparsers):
        """Add 'build-release' subcommand."""
        subparsers.add_parser(
            "build-release",
            help="Build the release archive",
            description=(
                "Create a .tar.gz (Linux/macOS) or .zip (Windows) archive of the "
                "extension from GITHUB_REF or HEAD"
            ),
        )

    def _add_bump_version_command(self, subparsers):
        """Add 'bump-version' subcommand."""
        parser = subparsers.add_parser(
            "bump-version",
            help="Bump the extension version",
            description="Update the manifest version and add a CHANGELOG section",
        )
        parser.add_argument(
            "new_version", metavar="VERSION", help="New version (e.g., 1.0.1)"
        )

    def _add_update_local_command(self, subparsers):
        """Add 'update-local' subcommand."""
        subparsers.add_parser(
            "update-local",
            help="Build and install the extension locally",
            description=(
                "Build the release archive and extract it into "
                "~/.gemini/extensions/flutter"
            ),
        )

    def parse_args(self, args: Optional[List[str]] = None):
        """
        Parse command-line arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Parsed arguments namespace
        """
        return self.parser.parse_args(args)

    def run(
        self,
        args: Optional[List[str]] = None,
        context: Optional[ScriptContext] = None,
    ) -> int:
        """
        Run CLI with given arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)
            context: Context to run with (default: a fresh ScriptContext)

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        parsed_args = self.parse_args(args)

        self._configure_logging(parsed_args)

        if not parsed_args.command:
            self.parser.print_help()
            return 1

        return run_script(
            lambda ctx: self._dispatch_command(parsed_args, ctx), context
        )

    def _configure_logging(self, args):
        """
        Configure logging based on verbose/quiet flags.

        Args:
            args: Parsed arguments with verbose/quiet flags
        """
        configure_logging(verbose=args.verbose, quiet=args.quiet)

    def _dispatch_command(self, args, context: ScriptContext) -> None:
        """
        Dispatch to appropriate command handler.

        Args:
            args: Parsed arguments with command field
            context: ScriptContext to run the command in
        """
        command_map = {
            "build-release": "release_scripts.cli.commands.build_release",
            "bump-version": "release_scripts.cli.commands.bump_version",
            "update-local": "release_scripts.cli.commands.update_local",
        }

        module_name = command_map[args.command]
        module = importlib.import_module(module_name)

        config = load_release_config(
            context, args.config, required=args.config is not None
        )
        module.run(args, context, config)


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()

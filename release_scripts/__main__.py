"""
Entry point for running the release scripts CLI as a module.

Usage: python -m release_scripts [command] [options]
"""

from release_scripts.cli.parser import main

if __name__ == "__main__":
    main()

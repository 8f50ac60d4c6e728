"""
Entry point for running the release scripts CLI as a module.

Usage: python -m release_scripts.cli [command] [options]
"""

from .parser import main

if __name__ == "__main__":
    main()

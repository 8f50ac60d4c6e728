"""
Test utilities for the release scripts.

This package provides test data builders and helper utilities to simplify
test writing and improve test readability.
"""

from .builders import ContextBuilder
from .helpers import has_command

__all__ = [
    "ContextBuilder",
    "has_command",
]

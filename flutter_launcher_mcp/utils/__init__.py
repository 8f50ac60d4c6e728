"""
Utilities for the Flutter launcher.
"""

from flutter_launcher_mcp.utils.sdk import Sdk

__all__ = ["Sdk"]

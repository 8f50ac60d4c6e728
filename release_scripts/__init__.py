"""
Release scripts for the Flutter Gemini CLI extension.

Builds release archives, bumps version metadata and installs local builds.
"""

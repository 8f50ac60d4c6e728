"""
Pytest configuration and shared fixtures for the release scripts tests.
"""

import pytest

from release_scripts.core.context import ScriptContext
from tests.utils.builders import ContextBuilder


def pytest_addoption(parser):
    """Add custom command-line options."""
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="run integration tests that call real git, tar and gzip",
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless --integration flag is provided."""
    if not config.getoption("--integration"):
        skip_integration = pytest.mark.skip(reason="need --integration option to run")
        for item in items:
            if "integration" in item.keywords:
                item.add_marker(skip_integration)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests that run real git/tar/gzip subprocesses (requires --integration)",
    )


# ============================================================================
# Shared Test Fixtures
# ============================================================================


@pytest.fixture
def linux_context() -> ScriptContext:
    """Linux host, POSIX paths, repository at /repo, HOME=/home/user."""
    return ContextBuilder().build()


@pytest.fixture
def windows_context() -> ScriptContext:
    """Windows host, Windows paths, repository at C:\\repo."""
    return ContextBuilder().windows().build()


@pytest.fixture
def macos_context() -> ScriptContext:
    """macOS host, POSIX paths, repository at /repo."""
    return ContextBuilder().with_os("macos").build()


@pytest.fixture
def isolated_home(tmp_path, monkeypatch):
    """Create isolated home directory for tests."""
    fake_home = tmp_path / "home"
    fake_home.mkdir()

    monkeypatch.setenv("HOME", str(fake_home))
    monkeypatch.setenv("USERPROFILE", str(fake_home))

    return fake_home

"""
Unit tests for the local installer.
"""

import pytest

from release_scripts.core.exceptions import (
    ArtifactNotFoundError,
    ConfigNotFoundError,
    HomeDirectoryNotFoundError,
)
from release_scripts.release import archive
from release_scripts.release.installer import (
    UpdateLocalCommand,
    resolve_home_directory,
)
from tests.utils.builders import ContextBuilder

INSTALL_DIR = "/home/user/.gemini/extensions/flutter"


class TestResolveHomeDirectory:
    """Tests for resolve_home_directory."""

    def test_home(self):
        assert resolve_home_directory({"HOME": "/home/a", "USERPROFILE": "C:\\b"}) == "/home/a"

    def test_userprofile_fallback(self):
        assert resolve_home_directory({"USERPROFILE": "C:\\Users\\b"}) == "C:\\Users\\b"

    def test_empty_home_falls_back(self):
        assert resolve_home_directory({"HOME": "", "USERPROFILE": "C:\\b"}) == "C:\\b"

    def test_missing(self):
        with pytest.raises(HomeDirectoryNotFoundError) as exc_info:
            resolve_home_directory({})

        assert isinstance(exc_info.value, ConfigNotFoundError)


class TestUpdateLocalLinux:
    """Tests for installing on a Linux host."""

    def test_updates_local_installation(self, linux_context):
        UpdateLocalCommand(linux_context).run()

        fs = linux_context.fs
        assert fs.is_dir(INSTALL_DIR)
        assert fs.listdir(INSTALL_DIR) == ["gemini-extension.json"]
        assert (
            f"tar -xzf /repo/linux.arm64.flutter.tar.gz -C {INSTALL_DIR}"
            in linux_context.pm.executed_commands
        )
        assert "Installation complete." in linux_context.stdout.getvalue()

    def test_replaces_existing_installation(self, linux_context):
        fs = linux_context.fs
        fs.create_file(f"{INSTALL_DIR}/stale.md", "old")
        fs.create_file(f"{INSTALL_DIR}/commands/old.toml", "old")

        UpdateLocalCommand(linux_context).run()

        assert not fs.exists(f"{INSTALL_DIR}/stale.md")
        assert not fs.exists(f"{INSTALL_DIR}/commands")
        assert fs.listdir(INSTALL_DIR) == ["gemini-extension.json"]

    def test_builds_before_extracting(self, linux_context):
        UpdateLocalCommand(linux_context).run()

        commands = linux_context.pm.executed_commands
        assert commands.index("gzip --force linux.arm64.flutter.tar") < next(
            i for i, c in enumerate(commands) if c.startswith("tar -xzf")
        )
        # Platform is resolved once, by the build
        assert linux_context.pm.count("uname -m") == 1

    def test_missing_home(self):
        context = ContextBuilder().with_env().build()

        with pytest.raises(HomeDirectoryNotFoundError):
            UpdateLocalCommand(context).run()

        assert context.pm.count("tar -xzf") == 0

    def test_archive_missing_after_build(self, linux_context, monkeypatch):
        original_run = archive.BuildReleaseCommand.run

        def run_and_lose_archive(self):
            path = original_run(self)
            self.context.fs.delete_file(path)
            return path

        monkeypatch.setattr(archive.BuildReleaseCommand, "run", run_and_lose_archive)

        with pytest.raises(ArtifactNotFoundError) as exc_info:
            UpdateLocalCommand(linux_context).run()

        assert "Archive not found at /repo/linux.arm64.flutter.tar.gz after build." in str(
            exc_info.value
        )


class TestUpdateLocalWindows:
    """Tests for installing on a Windows host."""

    def test_uses_expand_archive(self, windows_context):
        UpdateLocalCommand(windows_context).run()

        install_dir = "C:\\Users\\user\\.gemini\\extensions\\flutter"
        assert windows_context.fs.is_dir(install_dir)
        assert windows_context.pm.calls[-1][0] == [
            "powershell",
            "-command",
            'Expand-Archive -Path "C:\\repo\\windows.x64.flutter.zip" '
            f'-DestinationPath "{install_dir}" -Force',
        ]
        assert windows_context.pm.count("tar") == 0
        assert "Installation complete." in windows_context.stdout.getvalue()

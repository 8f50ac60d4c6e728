"""
Unit tests for the release archive builder.

Tests cover:
- git archive / gzip command lines on Linux, macOS and Windows
- Tag resolution from GITHUB_REF
- Stale archive removal
- GITHUB_ENV reporting
- Failure propagation
"""

import pytest

from release_scripts.config import ReleaseConfig
from release_scripts.core.exceptions import (
    ProcessError,
    RepositoryRootNotFoundError,
)
from release_scripts.release.archive import BuildReleaseCommand, resolve_tag_name
from tests.utils.builders import ContextBuilder

FILES = "gemini-extension.json commands/ LICENSE README.md flutter.md"


class TestResolveTagName:
    """Tests for resolve_tag_name."""

    @pytest.mark.parametrize(
        "env,expected",
        [
            ({"GITHUB_REF": "refs/tags/v1.2.3"}, "v1.2.3"),
            ({}, "HEAD"),
            ({"GITHUB_REF": ""}, "HEAD"),
            ({"GITHUB_REF": "refs/tags/"}, "HEAD"),
            ({"GITHUB_REF": "refs/heads/main"}, "refs/heads/main"),
        ],
    )
    def test_resolve(self, env, expected):
        assert resolve_tag_name(env) == expected


class TestBuildReleaseLinux:
    """Tests for building on a Linux host."""

    def test_builds_release_archive(self, linux_context):
        archive_path = BuildReleaseCommand(linux_context).run()

        assert archive_path == "/repo/linux.arm64.flutter.tar.gz"
        assert linux_context.fs.is_file(archive_path)
        assert not linux_context.fs.exists("/repo/linux.arm64.flutter.tar")
        assert "Archive written to linux.arm64.flutter.tar.gz" in (
            linux_context.stdout.getvalue()
        )
        assert linux_context.pm.executed_commands == [
            "uname -m",
            f"git archive --format=tar -o linux.arm64.flutter.tar HEAD {FILES}",
            "gzip --force linux.arm64.flutter.tar",
        ]

    def test_commands_run_in_repo_root(self, linux_context):
        linux_context.fs.make_dirs("/repo/commands")
        linux_context.fs.current_directory = "/repo/commands"

        BuildReleaseCommand(linux_context).run()

        archive_calls = [
            (argv, cwd)
            for argv, cwd in linux_context.pm.calls
            if argv[0] in ("git", "gzip")
        ]
        assert len(archive_calls) == 2
        assert all(cwd == "/repo" for _, cwd in archive_calls)

    def test_exactly_one_archive_and_one_compression(self, linux_context):
        BuildReleaseCommand(linux_context).run()

        assert linux_context.pm.count("git archive") == 1
        assert linux_context.pm.count("gzip") == 1

    def test_uses_tag_from_github_ref(self, linux_context):
        linux_context.platform.environment["GITHUB_REF"] = "refs/tags/v1.2.3"

        archive_path = BuildReleaseCommand(linux_context).run()

        assert archive_path == "/repo/linux.arm64.flutter.tar.gz"
        git_commands = [c for c in linux_context.pm.executed_commands if "git archive" in c]
        assert git_commands == [
            f"git archive --format=tar -o linux.arm64.flutter.tar v1.2.3 {FILES}"
        ]
        assert "--prefix" not in git_commands[0]

    def test_runner_arch_override(self, linux_context):
        linux_context.platform.environment["GITHUB_MATRIX_OS"] = "ubuntu-latest"
        linux_context.platform.environment["RUNNER_ARCH"] = "ARM64"

        archive_path = BuildReleaseCommand(linux_context).run()

        assert archive_path == "/repo/linux.arm64.flutter.tar.gz"
        assert "uname -m" not in linux_context.pm.executed_commands

    def test_detects_architecture_with_uname(self):
        context = ContextBuilder().with_uname("x86_64").build()

        archive_path = BuildReleaseCommand(context).run()

        assert archive_path == "/repo/linux.x86_64.flutter.tar.gz"
        assert context.pm.count("uname -m") == 1

    def test_removes_stale_archive(self, linux_context):
        fs = linux_context.fs
        fs.create_file("/repo/linux.arm64.flutter.tar.gz", "stale")

        BuildReleaseCommand(linux_context).run()

        assert fs.read_text("/repo/linux.arm64.flutter.tar.gz") == "archive"

    def test_appends_to_github_env(self, linux_context):
        fs = linux_context.fs
        fs.create_file("/runner/env", "EXISTING=1\n")
        linux_context.platform.environment["GITHUB_ENV"] = "/runner/env"

        BuildReleaseCommand(linux_context).run()

        assert fs.read_text("/runner/env") == (
            "EXISTING=1\nARCHIVE_NAME=linux.arm64.flutter.tar.gz\n"
        )
        assert "Archive written" not in linux_context.stdout.getvalue()

    def test_missing_github_env_file_prints(self, linux_context):
        linux_context.platform.environment["GITHUB_ENV"] = "/runner/missing"

        BuildReleaseCommand(linux_context).run()

        assert not linux_context.fs.exists("/runner/missing")
        assert "Archive written to" in linux_context.stdout.getvalue()

    def test_git_failure_stops_build(self, linux_context):
        linux_context.pm.add_command(
            ["git", "archive", "--format=tar", "-o", "linux.arm64.flutter.tar", "HEAD"]
            + FILES.split(),
            stderr="fatal: not a valid object name",
            returncode=128,
        )

        with pytest.raises(ProcessError) as exc_info:
            BuildReleaseCommand(linux_context).run()

        assert exc_info.value.returncode == 128
        assert linux_context.pm.count("gzip") == 0
        assert "fatal: not a valid object name" in linux_context.stderr.getvalue()

    def test_no_repository(self):
        context = ContextBuilder().build()
        context.fs.delete_file("/repo/gemini-extension.json")

        with pytest.raises(RepositoryRootNotFoundError):
            BuildReleaseCommand(context).run()

    def test_custom_config(self, linux_context):
        config = ReleaseConfig(product="dart", archive_files=["gemini-extension.json"])

        archive_path = BuildReleaseCommand(linux_context, config).run()

        assert archive_path == "/repo/linux.arm64.dart.tar.gz"
        assert (
            "git archive --format=tar -o linux.arm64.dart.tar HEAD gemini-extension.json"
            in linux_context.pm.executed_commands
        )


class TestBuildReleaseMacos:
    """Tests for building on a macOS host."""

    def test_builds_darwin_archive(self, macos_context):
        archive_path = BuildReleaseCommand(macos_context).run()

        assert archive_path == "/repo/darwin.arm64.flutter.tar.gz"
        assert "gzip --force darwin.arm64.flutter.tar" in macos_context.pm.executed_commands


class TestBuildReleaseWindows:
    """Tests for building on a Windows host."""

    def test_builds_zip(self, windows_context):
        archive_path = BuildReleaseCommand(windows_context).run()

        assert archive_path == "C:\\repo\\windows.x64.flutter.zip"
        assert windows_context.fs.is_file(archive_path)
        assert windows_context.pm.executed_commands == [
            f"git archive --format=zip -o windows.x64.flutter.zip HEAD {FILES}"
        ]
        assert windows_context.pm.calls[0][1] == "C:\\repo"

    def test_never_compresses(self, windows_context):
        BuildReleaseCommand(windows_context).run()

        assert windows_context.pm.count("gzip") == 0

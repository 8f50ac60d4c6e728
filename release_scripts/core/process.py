"""
Subprocess helpers for the release scripts.

All commands run synchronously: each call waits for the process to exit and
drains its output before returning. There are no timeouts.
"""

import logging
import shutil
import subprocess
from typing import List, Optional

from .exceptions import ProcessError
from .interfaces import ProcessManager

logger = logging.getLogger(__name__)


class LocalProcessManager(ProcessManager):
    """
    ProcessManager that launches real subprocesses.

    The executable is looked up on PATH first, so wrappers such as
    ``flutter.bat`` on Windows are found through PATHEXT. A name that cannot
    be resolved is passed through unchanged and fails with FileNotFoundError.
    """

    def run(
        self, command: List[str], working_directory: Optional[str] = None
    ) -> subprocess.CompletedProcess:
        executable = shutil.which(command[0])
        if executable:
            command = [executable, *command[1:]]
        return subprocess.run(
            command,
            cwd=working_directory,
            capture_output=True,
            text=True,
            check=False,
        )


def run_process(
    context, command: List[str], working_directory: Optional[str] = None
) -> None:
    """
    Run a command and forward its output to the context's stdout/stderr.

    Output is captured and written once the process has exited, not streamed
    while it runs.

    Args:
        context: ScriptContext to run in
        command: Argument vector
        working_directory: Directory to run in (default: current directory)

    Raises:
        ProcessError: If the command exits with a non-zero code
    """
    logger.debug(f"Running: {' '.join(command)} (cwd={working_directory or '.'})")
    result = context.pm.run(command, working_directory=working_directory)

    if result.stdout:
        context.stdout.write(result.stdout)
    if result.stderr:
        context.stderr.write(result.stderr)

    if result.returncode != 0:
        raise ProcessError(command, result.returncode)


def capture_process_output(
    context, command: List[str], working_directory: Optional[str] = None
) -> str:
    """
    Run a command and return its stdout, trimmed.

    Args:
        context: ScriptContext to run in
        command: Argument vector
        working_directory: Directory to run in (default: current directory)

    Returns:
        Standard output with surrounding whitespace removed

    Raises:
        ProcessError: If the command exits with a non-zero code (carries stderr)
    """
    logger.debug(f"Capturing: {' '.join(command)}")
    result = context.pm.run(command, working_directory=working_directory)

    if result.returncode != 0:
        raise ProcessError(command, result.returncode, result.stderr or "")

    return (result.stdout or "").strip()


__all__ = [
    "LocalProcessManager",
    "run_process",
    "capture_process_output",
]

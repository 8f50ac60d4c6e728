"""
Script execution context.

A :class:`ScriptContext` bundles the filesystem, host platform, process
manager and output streams a script works with. It is created once per
command invocation and passed to every operation, so tests can swap any part
of it for an in-memory fake.
"""

import logging
import sys
import traceback
from dataclasses import dataclass, field
from typing import Callable, Optional, TextIO

from .exceptions import ExitException
from .filesystem import LocalFileSystem
from .interfaces import FileSystem, Platform, ProcessManager
from .platform import LocalPlatform
from .process import LocalProcessManager

logger = logging.getLogger(__name__)


@dataclass
class ScriptContext:
    """
    Runtime context for the release scripts.

    Attributes:
        fs: Filesystem (default: the real disk)
        platform: Host platform and environment (default: the running host)
        pm: Process manager (default: real subprocesses)
        stdout: Sink for user-facing output (default: sys.stdout)
        stderr: Sink for error output (default: sys.stderr)
    """

    fs: FileSystem = field(default_factory=LocalFileSystem)
    platform: Platform = field(default_factory=LocalPlatform)
    pm: ProcessManager = field(default_factory=LocalProcessManager)
    stdout: TextIO = field(default_factory=lambda: sys.stdout)
    stderr: TextIO = field(default_factory=lambda: sys.stderr)


def run_script(
    callback: Callable[[ScriptContext], None],
    context: Optional[ScriptContext] = None,
) -> int:
    """
    Run a script body and translate failures into an exit code.

    ExitException: its message (if any) is written to stderr and its exit code
    returned. KeyboardInterrupt returns 130. Any other exception is reported as
    unexpected, with a traceback, and returns 1.

    Args:
        callback: Script body taking the context
        context: Context to run with (default: a fresh ScriptContext)

    Returns:
        Process exit code (0 for success)
    """
    context = context or ScriptContext()
    try:
        callback(context)
    except ExitException as e:
        if e.message:
            context.stderr.write(f"{e.message}\n")
        logger.debug(f"Controlled exit ({type(e).__name__}, code {e.exit_code})")
        return e.exit_code
    except KeyboardInterrupt:
        logger.info("Operation cancelled by user")
        return 130
    except Exception as e:
        context.stderr.write(f"Unexpected error: {e}\n{traceback.format_exc()}")
        return 1
    return 0


__all__ = [
    "ScriptContext",
    "run_script",
]

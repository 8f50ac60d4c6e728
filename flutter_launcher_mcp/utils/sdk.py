"""
flutter_launcher_mcp/utils/sdk.py

Flutter SDK detection - finds the Flutter and bundled Dart SDKs on the system.

Runs ``flutter --version --machine`` and reads the ``flutterRoot`` field of its
JSON output. The Dart SDK is the one Flutter caches under
``bin/cache/dart-sdk``. Nothing here raises: whatever cannot be found is left
as None.
"""

import json
import logging
from typing import Optional

from release_scripts.core.filesystem import LocalFileSystem
from release_scripts.core.interfaces import FileSystem, ProcessManager
from release_scripts.core.process import LocalProcessManager

logger = logging.getLogger(__name__)

FLUTTER_VERSION_COMMAND = ["flutter", "--version", "--machine"]
FLUTTER_ROOT_KEY = "flutterRoot"


class Sdk:
    """
    Paths of the Flutter and Dart SDKs.

    Attributes:
        flutter_sdk_path: Flutter SDK root
        flutter_executable_path: ``<flutter root>/bin/flutter``
        dart_sdk_path: ``<flutter root>/bin/cache/dart-sdk``
        dart_executable_path: ``<dart sdk>/bin/dart``
    """

    def __init__(self):
        self.flutter_sdk_path: Optional[str] = None
        self.flutter_executable_path: Optional[str] = None
        self.dart_sdk_path: Optional[str] = None
        self.dart_executable_path: Optional[str] = None

    def init(
        self,
        process_manager: Optional[ProcessManager] = None,
        file_system: Optional[FileSystem] = None,
    ) -> "Sdk":
        """
        Detect SDK paths.

        Args:
            process_manager: Used to run flutter (default: real subprocesses)
            file_system: Used to look for the Dart SDK (default: the real disk)

        Returns:
            self, for chaining
        """
        process_manager = process_manager or LocalProcessManager()
        fs = file_system or LocalFileSystem()

        flutter_root = self._query_flutter_root(process_manager)
        if flutter_root is None:
            return self

        self.flutter_sdk_path = flutter_root
        self.flutter_executable_path = fs.path.join(flutter_root, "bin", "flutter")

        dart_sdk = fs.path.join(flutter_root, "bin", "cache", "dart-sdk")
        if fs.is_file(fs.path.join(dart_sdk, "version")):
            self.dart_sdk_path = dart_sdk
            self.dart_executable_path = fs.path.join(dart_sdk, "bin", "dart")
        else:
            logger.debug(f"No Dart SDK found under {dart_sdk}")

        return self

    def _query_flutter_root(self, process_manager: ProcessManager) -> Optional[str]:
        try:
            result = process_manager.run(FLUTTER_VERSION_COMMAND)
        except OSError as e:
            logger.debug(f"flutter is not installed or could not be started: {e}")
            return None

        if result.returncode != 0:
            logger.debug(
                f"{' '.join(FLUTTER_VERSION_COMMAND)} returned {result.returncode}"
            )
            return None

        try:
            info = json.loads(result.stdout or "")
        except json.JSONDecodeError:
            output = (result.stdout or "")[:200]
            logger.debug(f"Could not parse flutter version output: {output}")
            return None

        root = info.get(FLUTTER_ROOT_KEY) if isinstance(info, dict) else None
        if not isinstance(root, str) or not root:
            logger.debug(f"{FLUTTER_ROOT_KEY} missing from flutter version output")
            return None
        return root

    def __str__(self) -> str:
        return f"Flutter SDK: {self.flutter_sdk_path}, Dart SDK: {self.dart_sdk_path}"


__all__ = ["Sdk"]

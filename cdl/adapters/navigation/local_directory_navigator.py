"""
Local navigator implementation changing the process working directory.
"""

import logging
import os
from typing import Optional

from typing_extensions import override

from cdl.exceptions import DirectoryChangeError
from cdl.ports.navigation.directory_navigator_port import DirectoryNavigatorPort


class LocalDirectoryNavigator(DirectoryNavigatorPort):
    """Changes the working directory of the current process."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    @override
    def home_directory(self) -> str:
        return os.environ.get("HOME") or "/"

    @override
    def change_directory(self, path: str) -> str:
        try:
            os.chdir(path)
        except (OSError, ValueError) as e:
            self._logger.debug(f"chdir({path!r}) failed: {e}")
            raise DirectoryChangeError(
                f"Directory does not exist or cannot be accessed: '{path}'"
            )
        cwd = os.getcwd()
        self._logger.info(f"Changed directory to {cwd}")
        return cwd

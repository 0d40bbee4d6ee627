"""
Use case for entering the target directory.
"""

import logging
from typing import Optional

from cdl.exceptions import BaseAppError, DirectoryChangeError
from cdl.ports.navigation.directory_navigator_port import DirectoryNavigatorPort


class ChangeDirectoryUseCase:
    """Use case for changing into a directory."""

    def __init__(
        self,
        navigator: DirectoryNavigatorPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._navigator = navigator
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, directory: str) -> str:
        """
        Change into a directory.

        Args:
            directory: Directory to enter

        Returns:
            The absolute path of the new working directory

        Raises:
            DirectoryChangeError: If the directory cannot be entered
        """
        try:
            self._logger.info(f"Changing directory to: {directory}")
            return self._navigator.change_directory(directory)
        except BaseAppError:
            raise
        except Exception as e:
            self._logger.error(f"Error changing directory: {e}")
            raise DirectoryChangeError(
                f"Directory does not exist or cannot be accessed: '{directory}'"
            )

"""
Navigator port interface for changing the working directory.
"""

from abc import ABC, abstractmethod


class DirectoryNavigatorPort(ABC):
    """Port interface for directory changes."""

    @abstractmethod
    def home_directory(self) -> str:
        """
        Get the fallback directory used when no target is given.

        Returns:
            The user's home directory, or "/" when it is unknown
        """
        pass

    @abstractmethod
    def change_directory(self, path: str) -> str:
        """
        Change the current working directory.

        Args:
            path: Directory to enter

        Returns:
            The absolute path of the new working directory

        Raises:
            DirectoryChangeError: If the directory does not exist or cannot be accessed
        """
        pass

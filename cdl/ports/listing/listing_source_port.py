"""
Listing source port interface defining the contract for retrieving directory listings.
"""

from abc import ABC, abstractmethod


class ListingSourcePort(ABC):
    """Port interface for the external `ls` program."""

    @abstractmethod
    def supports_rich_listing(self) -> bool:
        """
        Check whether the listing program understands the GNU flags we rely on.

        Returns:
            True if a long, colored, directories-first listing can be produced
        """
        pass

    @abstractmethod
    def long_listing(self, directory: str) -> list[str]:
        """
        Get the raw long listing of a directory, one line per entry.

        Args:
            directory: Directory to list

        Returns:
            Raw lines including the aggregate "total" header

        Raises:
            ListingError: If the listing program fails
        """
        pass

    @abstractmethod
    def plain_listing(self, directory: str) -> str:
        """
        Get the unprocessed fallback listing of a directory.

        Args:
            directory: Directory to list

        Returns:
            The listing program's output as-is

        Raises:
            ListingError: If the listing program fails
        """
        pass

"""
Use case for producing the listing of a directory.
"""

import logging
from typing import Optional

from cdl.exceptions import BaseAppError, ListingError
from cdl.ports.listing.listing_source_port import ListingSourcePort
from cdl.ports.listing.listing_strategy_port import ListingStrategyPort


class PrintListingUseCase:
    """Use case for listing a directory with the best strategy available."""

    def __init__(
        self,
        source: ListingSourcePort,
        adaptive: ListingStrategyPort,
        passthrough: ListingStrategyPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            source: Listing source, probed for GNU support
            adaptive: Strategy used when GNU flags are supported
            passthrough: Strategy used otherwise
            logger: Logger instance to use for logging
        """
        self._source = source
        self._adaptive = adaptive
        self._passthrough = passthrough
        self._logger = logger or logging.getLogger(__name__)

    def select_strategy(self) -> ListingStrategyPort:
        if self._source.supports_rich_listing():
            return self._adaptive
        self._logger.info("GNU ls flags unavailable, using plain listing")
        return self._passthrough

    def execute(self, directory: str = ".") -> str:
        """
        Build the listing text for a directory.

        Args:
            directory: Directory to list

        Returns:
            Text ready to be written to stdout

        Raises:
            ListingError: If listing fails
        """
        try:
            self._logger.info(f"Listing directory: {directory}")
            return self.select_strategy().render(directory)
        except BaseAppError:
            raise
        except Exception as e:
            self._logger.error(f"Error listing directory: {e}")
            raise ListingError(f"Failed to list {directory}: {str(e)}")

"""
The two ways of showing a listing: adaptive columns or raw passthrough.
"""

import logging
from typing import Optional

from typing_extensions import override

from cdl.formatting.renderer import format_listing
from cdl.ports.listing.listing_source_port import ListingSourcePort
from cdl.ports.listing.listing_strategy_port import ListingStrategyPort
from cdl.ports.terminal.terminal_port import TerminalPort


class AdaptiveListingStrategy(ListingStrategyPort):
    """Compact size/date/name listing in one or two columns (needs GNU `ls`)."""

    def __init__(
        self,
        source: ListingSourcePort,
        terminal: TerminalPort,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._source = source
        self._terminal = terminal
        self._logger = logger or logging.getLogger(__name__)

    @override
    def render(self, directory: str) -> str:
        lines = self._source.long_listing(directory)
        width = self._terminal.width()
        self._logger.debug(f"Formatting {len(lines)} lines for width {width}")
        return format_listing(lines, width)


class PassthroughListingStrategy(ListingStrategyPort):
    """Plain `ls -AlhG` output, used when the GNU flags are unavailable."""

    def __init__(self, source: ListingSourcePort) -> None:
        self._source = source

    @override
    def render(self, directory: str) -> str:
        return self._source.plain_listing(directory)

"""
Listing entry domain entity.
"""

from dataclasses import dataclass
from typing import Optional

from cdl.formatting.constants import SIZE_WIDTH


@dataclass(frozen=True)
class ListingEntry:
    """
    One record of a long directory listing, split into the fields we display.

    A record that could not be split (fewer than seven fields) only carries
    ``raw`` and is rendered unchanged.
    """

    raw: str
    name: str = ""
    size: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None

    @property
    def is_malformed(self) -> bool:
        return self.size is None

    @property
    def formatted(self) -> str:
        """
        Render the compact form: ``SIZE  DATE TIME  NAME``.

        Returns:
            The formatted entry, with escape sequences in the name kept verbatim
        """
        if self.is_malformed:
            return self.raw
        return f"{self.size:>{SIZE_WIDTH}}  {self.date} {self.time}  {self.name}"

"""
Decide between a one- and two-column layout for a formatted listing.
"""

from typing import Sequence

from cdl.entities.layout import LayoutDecision
from cdl.formatting.ansi import visible_length
from cdl.formatting.constants import GUTTER, TWO_COLUMN_MIN_WIDTH


def _max_visible(lines: Sequence[str]) -> int:
    return max((visible_length(line) for line in lines), default=0)


def decide(entries: Sequence[str], terminal_width: int) -> LayoutDecision:
    """
    Choose the layout for already formatted entries.

    Two columns are used only when the terminal is wide enough and both
    halves, measured without color codes, fit side by side. Entries are
    split by position: the left column gets the ceiling half.

    Args:
        entries: Formatted entries in display order
        terminal_width: Terminal width in columns

    Returns:
        The layout decision
    """
    count = len(entries)
    if count == 0 or terminal_width < TWO_COLUMN_MIN_WIDTH:
        return LayoutDecision.single_column(count)

    rows = (count + 1) // 2
    max_left = _max_visible(entries[:rows])
    max_right = _max_visible(entries[rows:])

    if max_left + GUTTER + max_right < terminal_width:
        return LayoutDecision(
            columns=2, rows=rows, max_left=max_left, max_right=max_right
        )
    return LayoutDecision.single_column(count)

"""
Render formatted entries according to a layout decision.
"""

from typing import Iterable, Sequence

from cdl.entities.layout import LayoutDecision
from cdl.formatting.ansi import visible_length
from cdl.formatting.constants import GUTTER
from cdl.formatting.layout import decide
from cdl.formatting.parser import parse_lines


def render(entries: Sequence[str], decision: LayoutDecision) -> str:
    """
    Produce the final text block.

    Args:
        entries: Formatted entries in display order
        decision: Layout computed by ``decide`` for the same entries

    Returns:
        Newline-terminated rows, or an empty string when there are no entries
    """
    if not entries:
        return ""

    if not decision.is_two_column:
        return "".join(f"{entry}\n" for entry in entries)

    rows = decision.rows
    out: list[str] = []
    for i in range(rows):
        left = entries[i]
        # Padding is per entry so the right column starts at the same visual column.
        pad = decision.max_left - visible_length(left) + GUTTER
        right = entries[i + rows] if i + rows < len(entries) else ""
        out.append(f"{left}{' ' * pad}{right}\n")
    return "".join(out)


def format_listing(lines: Iterable[str], terminal_width: int) -> str:
    """
    Parse raw `ls` lines, pick a layout and render it.

    Args:
        lines: Raw listing lines, header included
        terminal_width: Terminal width in columns

    Returns:
        The rendered listing
    """
    entries = [entry.formatted for entry in parse_lines(lines)]
    return render(entries, decide(entries, terminal_width))

"""
Parser turning raw `ls -Alh` lines into listing entries.

Expected field layout (C locale, `--time-style='+%Y-%m-%d %H:%M'`):

    perms links owner group size date time name...

The name is everything after the seventh field, rejoined with single
spaces, so names with spaces, color codes and `-> target` suffixes survive.
"""

import re
from typing import Iterable, Optional

from cdl.entities.entry import ListingEntry

# The aggregate "total 24" / "total 1.5K" line printed before the entries.
_TOTAL_RE = re.compile(r"total [0-9.]+[KMGTP]?")

_FIELD_COUNT = 7

# Fields are separated by runs of blanks only; other control characters
# belong to the name.
_FIELD_SEP_RE = re.compile(r"[ \t]+")


def is_total_line(line: str) -> bool:
    return _TOTAL_RE.fullmatch(line) is not None


def parse_line(raw: str) -> Optional[ListingEntry]:
    """
    Parse one listing line.

    Args:
        raw: A single line of `ls` output, with or without its line terminator

    Returns:
        The parsed entry, or None for the aggregate header line
    """
    line = raw.rstrip("\n")
    if is_total_line(line):
        return None

    stripped = line.strip(" \t")
    fields = _FIELD_SEP_RE.split(stripped) if stripped else []
    if len(fields) < _FIELD_COUNT:
        # Best effort: show the line as-is instead of failing the whole listing.
        return ListingEntry(raw=line)

    _perms, _links, _owner, _group, size, date, time = fields[:_FIELD_COUNT]
    # Name words are rejoined with single spaces.
    name = " ".join(fields[_FIELD_COUNT:])
    return ListingEntry(raw=line, name=name, size=size, date=date, time=time)


def parse_lines(lines: Iterable[str]) -> list[ListingEntry]:
    """Parse a whole listing, dropping the header and keeping input order."""
    entries: list[ListingEntry] = []
    for raw in lines:
        entry = parse_line(raw)
        if entry is not None:
            entries.append(entry)
    return entries

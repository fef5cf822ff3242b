"""Document outline built from headings, for navigating by position."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

from quillmark.markdownnode import MarkdownNode

_HEADING_RE = re.compile(r"^\s*#*(.*?)\s*#*?\s*$")


@dataclass(frozen=True)
class OutlineEntry:
    """One heading in the outline."""

    label: str
    position: int
    level: int


def heading_label(level: int, line_text: str) -> str:
    """Return the indented outline label for a heading line."""
    label = "   " + "    " * max(level - 1, 0)
    match = _HEADING_RE.match(line_text)
    if match:
        label += match.group(1)
    return label


class Outline:
    """Headings of a document in order, with the position each begins at."""

    def __init__(self) -> None:
        self.entries: List[OutlineEntry] = []

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[OutlineEntry]:
        return iter(self.entries)

    def __getitem__(self, row: int) -> OutlineEntry:
        return self.entries[row]

    def reload(self, headings: Iterable[MarkdownNode], text: str) -> None:
        """Rebuild the outline from heading nodes of ``text``.

        A heading whose start line lies outside the text is left out.
        """
        lines = text.split("\n")
        starts = [0]
        for line in lines[:-1]:
            starts.append(starts[-1] + len(line) + 1)

        self.entries = []
        for heading in headings:
            number = heading.start_line - 1
            if not 0 <= number < len(lines):
                continue
            self.entries.append(
                OutlineEntry(
                    heading_label(heading.heading_level, lines[number]),
                    starts[number],
                    heading.heading_level,
                )
            )

    def find_heading(self, position: int, exact_match: bool = True) -> int:
        """Binary search for the row of the heading at ``position``.

        Without a match, returns -1, or with ``exact_match`` false the row
        where such a heading would be inserted.
        """
        low, high, mid = 0, len(self.entries) - 1, 0
        while low <= high:
            mid = low + (high - low) // 2
            item_position = self.entries[mid].position
            if item_position == position:
                return mid
            if item_position < position:
                mid += 1
                low = mid
            else:
                high = mid - 1
        return -1 if exact_match else mid

    def current_row(self, position: int) -> Optional[int]:
        """Return the row of the section holding ``position``, or None before any."""
        if not self.entries or position < 0:
            return None
        row = self.find_heading(position, False)
        if row == len(self.entries) or (
            0 <= row < len(self.entries) and self.entries[row].position != position
        ):
            row -= 1
        return row if row >= 0 else None
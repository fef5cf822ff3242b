"""A plain-text document split into blocks (lines), with a text cursor."""

from __future__ import annotations

from itertools import accumulate
from typing import List, Optional


class TextBuffer:
    """Editable text with a cursor and an anchor that may span a selection.

    The text is divided into blocks at each newline.  Positions are offsets
    into the whole text, from 0 to ``len(text)`` inclusive.  The cursor
    position and the anchor are equal when nothing is selected.
    """

    def __init__(self, text: str = "", cursor: Optional[int] = None) -> None:
        self._text = text
        position = 0 if cursor is None else cursor
        self._check_position(position)
        self._position = position
        self._anchor = position

    def __repr__(self) -> str:
        return (
            f"TextBuffer({self._text!r}, cursor={self._position}, "
            f"anchor={self._anchor})"
        )

    @property
    def text(self) -> str:
        return self._text

    @property
    def cursor(self) -> int:
        """The cursor position (the moving end of any selection)."""
        return self._position

    @property
    def anchor(self) -> int:
        """The fixed end of the selection; equals the cursor without one."""
        return self._anchor

    def _check_position(self, position: int) -> None:
        if not 0 <= position <= len(self._text):
            raise IndexError(
                f"position {position} outside 0..{len(self._text)}"
            )

    def _lines(self) -> List[str]:
        return self._text.split("\n")

    def _check_block(self, number: int) -> List[str]:
        lines = self._lines()
        if not 0 <= number < len(lines):
            raise IndexError(f"block {number} outside 0..{len(lines) - 1}")
        return lines

    def block_count(self) -> int:
        """Return the number of blocks; an empty text has one empty block."""
        return self._text.count("\n") + 1

    def block_number_at(self, position: int) -> int:
        """Return the number of the block holding ``position``."""
        self._check_position(position)
        return self._text.count("\n", 0, position)

    def block_start(self, number: int) -> int:
        """Return the position of the first character of block ``number``."""
        lines = self._check_block(number)
        starts = accumulate((len(line) + 1 for line in lines[:number]), initial=0)
        return list(starts)[-1]

    def block_text(self, number: int) -> str:
        """Return the text of block ``number`` without its newline."""
        return self._check_block(number)[number]

    def char_at(self, position: int) -> str:
        """Return the character at ``position``, or "" past either end."""
        if 0 <= position < len(self._text):
            return self._text[position]
        return ""

    def insert(self, text: str) -> None:
        """Replace the selection (if any) with ``text`` and place the cursor after it."""
        start, end = self.selection_start(), self.selection_end()
        self._text = self._text[:start] + text + self._text[end:]
        self._position = self._anchor = start + len(text)

    def delete_range(self, start: int, end: int) -> None:
        """Remove the text between ``start`` and ``end``, keeping the cursor in place."""
        if start > end:
            start, end = end, start
        self._check_position(start)
        self._check_position(end)
        removed = end - start

        def shift(point: int) -> int:
            if point <= start:
                return point
            if point >= end:
                return point - removed
            return start

        self._text = self._text[:start] + self._text[end:]
        self._position = shift(self._position)
        self._anchor = shift(self._anchor)

    def set_cursor(self, position: int, anchor: Optional[int] = None) -> None:
        """Move the cursor; with ``anchor`` given, select the text between them."""
        self._check_position(position)
        if anchor is None:
            anchor = position
        else:
            self._check_position(anchor)
        self._position = position
        self._anchor = anchor

    def has_selection(self) -> bool:
        return self._position != self._anchor

    def selection_start(self) -> int:
        return min(self._position, self._anchor)

    def selection_end(self) -> int:
        return max(self._position, self._anchor)

    def selected_text(self) -> str:
        return self._text[self.selection_start():self.selection_end()]

    def selection_block_range(self) -> range:
        """Return the numbers of the blocks touched by the selection or cursor."""
        first = self.block_number_at(self.selection_start())
        last = self.block_number_at(self.selection_end())
        return range(first, last + 1)

    def current_block(self) -> int:
        """Return the number of the block holding the cursor."""
        return self.block_number_at(self._position)

    def position_in_block(self) -> int:
        """Return the cursor's offset from the start of its block."""
        return self._position - self.block_start(self.current_block())
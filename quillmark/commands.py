"""Formatting commands that edit the blocks touched by the cursor or selection."""

from __future__ import annotations

import re

from quillmark.blocks import (
    EMPTY_BULLET_LIST_RE,
    EMPTY_NUMBERED_LIST_RE,
    EMPTY_TASK_LIST_RE,
    TASK_LIST_RE,
    LineKind,
    classify_lines,
)
from quillmark.textbuffer import TextBuffer

_NUMBER_RE = re.compile(r"\d+")

_INDENT_BULLET_CYCLE = {"*": "-", "-": "+"}
_UNINDENT_BULLET_CYCLE = {"*": "+", "-": "*"}


def _replace(buffer: TextBuffer, start: int, end: int, text: str) -> None:
    """Replace ``start:end`` with ``text``, carrying the cursor and anchor along.

    A point inside the replaced range, or exactly at an insertion point,
    ends up just after the new text.
    """
    cursor, anchor = buffer.cursor, buffer.anchor
    removed = end - start

    def shift(point: int) -> int:
        if point < start:
            return point
        if point <= end:
            return start + len(text)
        return point - removed + len(text)

    buffer.set_cursor(start, end)
    buffer.insert(text)
    buffer.set_cursor(shift(cursor), shift(anchor))


def _block_end(buffer: TextBuffer, number: int) -> int:
    return buffer.block_start(number) + len(buffer.block_text(number))


def _line_kind(buffer: TextBuffer, number: int) -> LineKind:
    return classify_lines(buffer.text.split("\n"))[number]


def _replace_block_text(buffer: TextBuffer, number: int, text: str) -> None:
    _replace(buffer, buffer.block_start(number), _block_end(buffer, number), text)


def wrap_selection(buffer: TextBuffer, markup: str) -> None:
    """Surround the selection with ``markup``, or insert a pair around the cursor."""
    size = len(markup)
    if buffer.has_selection():
        start = buffer.selection_start()
        end = buffer.selection_end() + size
        _replace(buffer, start, start, markup)
        _replace(buffer, end, end, markup)
        buffer.set_cursor(buffer.cursor - size, buffer.anchor)
    else:
        position = buffer.cursor
        _replace(buffer, position, position, markup + markup)
        buffer.set_cursor(position + size)


def insert_comment(buffer: TextBuffer) -> None:
    """Wrap the selection in an HTML comment, or insert an empty one."""
    if buffer.has_selection():
        text = "<!-- " + buffer.selected_text() + " -->"
        _replace(buffer, buffer.selection_start(), buffer.selection_end(), text)
    else:
        position = buffer.cursor
        comment = "<!--  -->"
        _replace(buffer, position, position, comment)
        buffer.set_cursor(position + len(comment) - 4)


def insert_prefix(buffer: TextBuffer, prefix: str) -> None:
    """Insert ``prefix`` at the start of every block touched by the selection."""
    for number in buffer.selection_block_range():
        start = buffer.block_start(number)
        _replace(buffer, start, start, prefix)


def create_numbered_list(buffer: TextBuffer, marker: str) -> None:
    """Number the touched blocks from 1, using ``marker`` after each number."""
    for count, number in enumerate(buffer.selection_block_range(), start=1):
        start = buffer.block_start(number)
        _replace(buffer, start, start, f"{count}{marker} ")


def remove_blockquote(buffer: TextBuffer) -> None:
    """Remove a leading '>' and one following space from each touched block."""
    for number in buffer.selection_block_range():
        start = buffer.block_start(number)
        if buffer.char_at(start) != ">":
            continue
        _replace(buffer, start, start + 1, "")
        following = buffer.char_at(start)
        if following and following != "\n" and following.isspace():
            _replace(buffer, start, start + 1, "")


def _indent_text(tab_width: int, count: int, insert_spaces: bool) -> str:
    return " " * count if insert_spaces else "\t"


def indent(
    buffer: TextBuffer,
    tab_width: int = 4,
    insert_spaces: bool = False,
    cycle_bullets: bool = True,
) -> None:
    """Indent the touched blocks, or insert an indent at the cursor.

    An empty list item is indented as a whole: a numbered item restarts at 1
    and, with ``cycle_bullets``, a bullet changes its marker.
    """
    if tab_width < 1:
        raise ValueError(f"tab width must be positive, not {tab_width}")

    if buffer.has_selection():
        text = _indent_text(tab_width, tab_width, insert_spaces)
        for number in buffer.selection_block_range():
            start = buffer.block_start(number)
            _replace(buffer, start, start, text)
        return

    block = buffer.current_block()
    block_text = buffer.block_text(block)
    kind = _line_kind(buffer, block)
    width = tab_width
    at = buffer.cursor

    if kind == LineKind.NUMBERED_LIST:
        if EMPTY_NUMBERED_LIST_RE.match(block_text):
            _replace_block_text(buffer, block, _NUMBER_RE.sub("1", block_text))
            at = buffer.block_start(block)
        else:
            at = buffer.cursor
    elif kind == LineKind.TASK_LIST:
        if EMPTY_TASK_LIST_RE.match(block_text):
            at = buffer.block_start(block)
    elif kind == LineKind.BULLET_LIST:
        if EMPTY_BULLET_LIST_RE.match(block_text):
            if cycle_bullets:
                old = block_text.strip()[0]
                new = _INDENT_BULLET_CYCLE.get(old, "*")
                _replace_block_text(buffer, block, block_text.replace(old, new))
            at = buffer.block_start(block)
    else:
        width = tab_width - (buffer.position_in_block() % tab_width)

    _replace(buffer, at, at, _indent_text(tab_width, width, insert_spaces))


def unindent(
    buffer: TextBuffer, tab_width: int = 4, cycle_bullets: bool = True
) -> None:
    """Remove one tab, or up to ``tab_width`` spaces, from each touched block.

    With ``cycle_bullets``, an empty bullet item in the last touched block
    changes its marker back.
    """
    blocks = buffer.selection_block_range()
    for number in blocks:
        start = buffer.block_start(number)
        if buffer.char_at(start) == "\t":
            _replace(buffer, start, start + 1, "")
            continue
        removed = 0
        while buffer.char_at(start) == " " and removed < tab_width:
            _replace(buffer, start, start + 1, "")
            removed += 1

    last = blocks[-1]
    last_text = buffer.block_text(last)
    if (
        cycle_bullets
        and _line_kind(buffer, last) == LineKind.BULLET_LIST
        and EMPTY_BULLET_LIST_RE.match(last_text)
    ):
        old = last_text.strip()[0]
        new = _UNINDENT_BULLET_CYCLE.get(old, "-")
        _replace_block_text(buffer, last, last_text.replace(old, new))


def toggle_task_complete(buffer: TextBuffer) -> bool:
    """Check or uncheck the task list items in the touched blocks."""
    for number in buffer.selection_block_range():
        text = buffer.block_text(number)
        if _line_kind(buffer, number) != LineKind.TASK_LIST:
            continue
        match = TASK_LIST_RE.match(text)
        if match is None:
            continue
        index = text.find(" [")
        if index >= 0:
            index += 2
        replacement = " " if match.group(1) == "x" else "x"
        at = buffer.block_start(number) + index
        _replace(buffer, at, at + 1, replacement)
    return True
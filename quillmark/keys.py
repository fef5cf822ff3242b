"""Key handling for Markdown editing: list continuation, backspace and auto-pairing."""

from __future__ import annotations

import re
from typing import Dict, Optional

from quillmark.blocks import (
    BLOCKQUOTE_RE,
    BULLET_LIST_RE,
    EMPTY_BLOCKQUOTE_RE,
    EMPTY_BULLET_LIST_RE,
    EMPTY_NUMBERED_LIST_RE,
    EMPTY_TASK_LIST_RE,
    NUMBERED_LIST_RE,
    TASK_LIST_RE,
    LineKind,
    classify_lines,
    leading_whitespace,
)
from quillmark.textbuffer import TextBuffer

_NUMBER_RE = re.compile(r"\d+")
_DIGIT_RE = re.compile(r"\d")
_BULLET_MARK_RE = re.compile(r"[+*-]")

# Opening characters that pair up even right after a non-space character,
# as in mathematical or programming expressions.
_PAIR_AFTER_WORD = frozenset("([{<")


def _line_kind(buffer: TextBuffer, number: int) -> LineKind:
    return classify_lines(buffer.text.split("\n"))[number]


def _matched_prefix(pattern: re.Pattern, text: str) -> str:
    match = pattern.search(text)
    return match.group(0) if match else ""


def handle_return(buffer: TextBuffer) -> None:
    """Start a new line, continuing the list or quote the cursor is in.

    An empty list item ends the list instead: its marker is removed and
    only its indentation is kept.
    """
    block = buffer.current_block()
    text = buffer.block_text(block)
    column = buffer.position_in_block()
    end_list = False

    if column < len(text):
        auto_insert = leading_whitespace(text)[:column]
    else:
        kind = _line_kind(buffer, block)
        if kind == LineKind.NUMBERED_LIST:
            match = NUMBERED_LIST_RE.search(text)
            if match and match.group(0):
                auto_insert = match.group(0)
                if len(text) == len(auto_insert):
                    end_list = True
                else:
                    number = int(match.group(1)) + 1
                    auto_insert = _NUMBER_RE.sub(str(number), auto_insert)
            else:
                auto_insert = leading_whitespace(text)
        elif kind == LineKind.TASK_LIST:
            auto_insert = _matched_prefix(TASK_LIST_RE, text)
            if len(text) == len(auto_insert):
                end_list = True
            else:
                auto_insert = auto_insert.replace("x", " ")
        elif kind == LineKind.BULLET_LIST:
            auto_insert = _matched_prefix(BULLET_LIST_RE, text)
            if not auto_insert:
                auto_insert = leading_whitespace(text)
            elif len(text) == len(auto_insert):
                end_list = True
        elif kind == LineKind.BLOCKQUOTE:
            auto_insert = _matched_prefix(BLOCKQUOTE_RE, text)
        else:
            auto_insert = leading_whitespace(text)

    if end_list:
        start = buffer.block_start(block)
        buffer.set_cursor(start + len(text), start)
        buffer.insert(leading_whitespace(text))
        auto_insert = ""

    buffer.insert("\n" + auto_insert)


def handle_backspace(buffer: TextBuffer, matcher: Optional["AutoMatcher"] = None) -> bool:
    """Handle backspace specially where Markdown calls for it.

    Returns True if the key was handled here, False if an ordinary
    backspace should take place.
    """
    if buffer.has_selection():
        return False

    block = buffer.current_block()
    text = buffer.block_text(block)
    kind = _line_kind(buffer, block)
    backtrack = -1

    if kind == LineKind.NUMBERED_LIST:
        if EMPTY_NUMBERED_LIST_RE.match(text):
            found = _DIGIT_RE.search(text)
            backtrack = found.start() if found else -1
    elif kind == LineKind.TASK_LIST:
        if EMPTY_BULLET_LIST_RE.match(text) or EMPTY_TASK_LIST_RE.match(text):
            found = _BULLET_MARK_RE.search(text)
            backtrack = found.start() if found else -1
    elif kind == LineKind.BLOCKQUOTE:
        if EMPTY_BLOCKQUOTE_RE.match(text):
            backtrack = text.rfind(">")
    elif matcher is not None and matcher.delete_pair(buffer):
        return True

    if backtrack >= 0:
        start = buffer.block_start(block)
        buffer.delete_range(start + backtrack, start + len(text))
        return True
    return False


class AutoMatcher:
    """Inserts, skips over and removes matching pairs of markup characters."""

    def __init__(self) -> None:
        self.enabled = True
        self.pairs: Dict[str, str] = {
            '"': '"',
            "'": "'",
            "(": ")",
            "[": "]",
            "{": "}",
            "*": "*",
            "_": "_",
            "`": "`",
            "<": ">",
        }
        self.filter: Dict[str, bool] = {opening: True for opening in self.pairs}
        # Pairs between which whitespace is not allowed to stay empty.
        self.non_empty_pairs: Dict[str, str] = {"*": "*", "_": "_", "<": ">"}

    def set_enabled(self, character: str, enabled: bool) -> None:
        """Enable or disable auto-matching for one opening character."""
        self.filter[character] = enabled

    def _active(self, opening: str) -> bool:
        return self.enabled and opening in self.pairs and self.filter.get(opening, False)

    def insert_pair(self, buffer: TextBuffer, ch: str) -> bool:
        """Insert ``ch`` with its closing partner; return True if done."""
        if not self._active(ch):
            return False
        closing = self.pairs[ch]

        if buffer.has_selection():
            start, end = buffer.selection_start(), buffer.selection_end()
            if buffer.block_number_at(start) != buffer.block_number_at(end):
                return False
            selected = buffer.selected_text()
            buffer.insert(ch + selected + closing)
            buffer.set_cursor(end + 1, start + 1)
            return True

        text = buffer.block_text(buffer.current_block())
        column = buffer.position_in_block()
        do_match = True

        if column > 0 and not text[column - 1].isspace():
            if ch not in _PAIR_AFTER_WORD:
                do_match = False

        if column < len(text) and not text[column].isspace():
            do_match = False

        if not do_match:
            return False

        buffer.insert(ch + closing)
        buffer.set_cursor(buffer.cursor - 1)
        return True

    def skip_closing(self, buffer: TextBuffer, ch: str) -> bool:
        """Step over ``ch`` if it is a closing character already at the cursor."""
        if not self.enabled or buffer.has_selection():
            return False
        openings = [key for key, value in self.pairs.items() if value == ch]
        if not openings or not self.filter.get(openings[0], False):
            return False

        text = buffer.block_text(buffer.current_block())
        column = buffer.position_in_block()
        if column < len(text) and text[column] == ch:
            buffer.set_cursor(buffer.cursor + 1)
            return True
        return False

    def handle_whitespace(self, buffer: TextBuffer, whitespace: str) -> bool:
        """Replace the closing character of an empty emphasis pair with whitespace."""
        text = buffer.block_text(buffer.current_block())
        column = buffer.position_in_block()
        if not (0 < column < len(text)):
            return False
        previous = text[column - 1]
        if previous not in self.non_empty_pairs or text[column] != self.non_empty_pairs[previous]:
            return False

        if buffer.has_selection():
            buffer.insert(whitespace)
        else:
            buffer.delete_range(buffer.cursor, buffer.cursor + 1)
            buffer.insert(whitespace)
        return True

    def delete_pair(self, buffer: TextBuffer) -> bool:
        """Delete an opening character together with its partner after the cursor."""
        if not self.enabled or buffer.has_selection():
            return False
        column = buffer.position_in_block()
        if column <= 0:
            return False
        text = buffer.block_text(buffer.current_block())
        if column >= len(text):
            return False
        if self.pairs.get(text[column - 1]) != text[column]:
            return False
        buffer.delete_range(buffer.cursor - 1, buffer.cursor + 1)
        return True
"""Line classification and focus-mode fading for Markdown text."""

from __future__ import annotations

import re
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from quillmark.textbuffer import TextBuffer

BLOCKQUOTE_RE = re.compile(r"^ {0,3}(>\s*)+")
NUMBERED_LIST_RE = re.compile(r"^\s*([0-9]+)[.)]\s+")
BULLET_LIST_RE = re.compile(r"^\s*[+*-]\s+")
TASK_LIST_RE = re.compile(r"^\s*[-*+] \[([x ])\]\s+")
EMPTY_BLOCKQUOTE_RE = re.compile(r"^ {0,3}(>\s*)+$")
EMPTY_NUMBERED_LIST_RE = re.compile(r"^\s*([0-9]+)[.)]\s+$")
EMPTY_BULLET_LIST_RE = re.compile(r"^\s*[+*-]\s+$")
EMPTY_TASK_LIST_RE = re.compile(r"^\s*[-*+] \[([x ])\]\s+$")

_THEMATIC_BREAK_RE = re.compile(r"^ {0,3}([-*_])(?:[ \t]*\1){2,}[ \t]*$")
_ATX_HEADING_RE = re.compile(r"^ {0,3}#{1,6}(?:\s|$)")
_FENCE_RE = re.compile(r"^ {0,3}(`{3,}|~{3,})")
_SENTENCE_END_RE = re.compile(r"[.!?]+[\"')\]]*\s+")


class LineKind(Enum):
    """The Markdown construct a line of text belongs to."""

    PARAGRAPH_BREAK = "paragraph_break"
    PARAGRAPH = "paragraph"
    HEADING = "heading"
    NUMBERED_LIST = "numbered_list"
    BULLET_LIST = "bullet_list"
    TASK_LIST = "task_list"
    BLOCKQUOTE = "blockquote"
    CODE_BLOCK = "code_block"
    HORIZONTAL_RULE = "horizontal_rule"


class FocusMode(Enum):
    """Which part of the text stays unfaded around the cursor."""

    DISABLED = "disabled"
    CURRENT_LINE = "current_line"
    THREE_LINES = "three_lines"
    PARAGRAPH = "paragraph"
    SENTENCE = "sentence"
    TYPEWRITER = "typewriter"


def classify_line(text: str) -> LineKind:
    """Return the kind of a single line, judged on its own text."""
    if not text.strip():
        return LineKind.PARAGRAPH_BREAK
    if BLOCKQUOTE_RE.match(text):
        return LineKind.BLOCKQUOTE
    if _FENCE_RE.match(text):
        return LineKind.CODE_BLOCK
    if _THEMATIC_BREAK_RE.match(text):
        return LineKind.HORIZONTAL_RULE
    if _ATX_HEADING_RE.match(text):
        return LineKind.HEADING
    if TASK_LIST_RE.match(text):
        return LineKind.TASK_LIST
    if NUMBERED_LIST_RE.match(text):
        return LineKind.NUMBERED_LIST
    if BULLET_LIST_RE.match(text):
        return LineKind.BULLET_LIST
    return LineKind.PARAGRAPH


def classify_lines(lines: Iterable[str]) -> List[LineKind]:
    """Classify each line, treating fenced code blocks as a whole."""
    kinds: List[LineKind] = []
    fence: Optional[str] = None
    for line in lines:
        if fence is not None:
            kinds.append(LineKind.CODE_BLOCK)
            closing = re.match(
                r"^ {0,3}(" + re.escape(fence[0]) + r"{" + str(len(fence)) + r",})\s*$",
                line,
            )
            if closing:
                fence = None
            continue
        opening = _FENCE_RE.match(line)
        if opening and not (opening.group(1)[0] == "`" and "`" in line[opening.end():]):
            fence = opening.group(1)
            kinds.append(LineKind.CODE_BLOCK)
            continue
        kinds.append(classify_line(line))
    return kinds


def leading_whitespace(text: str) -> str:
    """Return the run of whitespace characters that starts ``text``."""
    return text[: len(text) - len(text.lstrip())]


def _block_end(buffer: TextBuffer, number: int) -> int:
    return buffer.block_start(number) + len(buffer.block_text(number))


def _sentence_boundaries(text: str) -> List[int]:
    boundaries = {0, len(text)}
    boundaries.update(match.end() for match in _SENTENCE_END_RE.finditer(text))
    return sorted(boundaries)


def faded_ranges(buffer: TextBuffer, mode: FocusMode) -> List[Tuple[int, int]]:
    """Return the (start, end) ranges of text to fade for a focus mode."""
    mode = FocusMode(mode)
    total = len(buffer.text)
    block = buffer.current_block()
    ranges: List[Tuple[int, int]] = []

    if mode == FocusMode.CURRENT_LINE:
        if block >= 1:
            ranges.append((0, _block_end(buffer, block - 1)))
        ranges.append((_block_end(buffer, block), total))
    elif mode == FocusMode.THREE_LINES:
        if block >= 2:
            ranges.append((0, _block_end(buffer, block - 2)))
        following = block + 1 if block + 1 < buffer.block_count() else block
        ranges.append((_block_end(buffer, following), total))
    elif mode == FocusMode.PARAGRAPH:
        ranges.append((0, buffer.block_start(block)))
        ranges.append((_block_end(buffer, block), total))
    elif mode == FocusMode.SENTENCE:
        start = buffer.block_start(block)
        boundaries = _sentence_boundaries(buffer.block_text(block))
        current = buffer.position_in_block()
        previous = max((b for b in boundaries if b < current), default=None)
        following = min((b for b in boundaries if b > current), default=None)
        before_end = start if previous is None else start + previous
        after_start = (
            _block_end(buffer, block) if following is None else start + following
        )
        ranges.append((0, before_end))
        ranges.append((after_start, total))
    return ranges
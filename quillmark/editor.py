"""A Markdown editing session: text, cursor, settings and key handling."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Callable, Iterator, List, Optional, Tuple

from quillmark import blocks, commands
from quillmark.blocks import FocusMode
from quillmark.keys import AutoMatcher, handle_backspace, handle_return
from quillmark.textbuffer import TextBuffer

_BULLET_MARKERS = frozenset("*-+")
_NUMBER_MARKERS = frozenset(".)")


class _Signal:
    """A list of callbacks notified together."""

    def __init__(self) -> None:
        self._callbacks: List[Callable[..., None]] = []

    def connect(self, callback: Callable[..., None]) -> None:
        self._callbacks.append(callback)

    def disconnect(self, callback: Callable[..., None]) -> None:
        self._callbacks.remove(callback)

    def emit(self, *args: object) -> None:
        for callback in list(self._callbacks):
            callback(*args)


class MarkdownEditor:
    """Markdown editing with list continuation, auto-pairing and formatting commands.

    Callbacks connected to ``typing_resumed``, ``typing_paused`` and
    ``font_size_changed`` are told when typing resumes after a pause, when it
    pauses again, and when the font size changes.
    """

    def __init__(self, text: str = "") -> None:
        self.buffer = TextBuffer(text)
        self.auto_matcher = AutoMatcher()
        self.hemingway_mode_enabled = False
        self.focus_mode = FocusMode.DISABLED
        self.bullet_point_cycling_enabled = True
        self.insert_spaces_for_tabs = False
        self.tab_width = 4
        self.font_size = 12

        self.typing_resumed = _Signal()
        self.typing_paused = _Signal()
        self.font_size_changed = _Signal()

        self._typing_has_paused = True
        self._typing_paused_signal_sent = True

    @property
    def text(self) -> str:
        return self.buffer.text

    @contextmanager
    def _editing(self) -> Iterator[TextBuffer]:
        before = self.buffer.text
        yield self.buffer
        if self.buffer.text != before:
            self.contents_changed()

    # Formatting commands.

    def bold(self) -> None:
        with self._editing() as buffer:
            commands.wrap_selection(buffer, "**")

    def italic(self) -> None:
        with self._editing() as buffer:
            commands.wrap_selection(buffer, "*")

    def strikethrough(self) -> None:
        with self._editing() as buffer:
            commands.wrap_selection(buffer, "~~")

    def insert_comment(self) -> None:
        with self._editing() as buffer:
            commands.insert_comment(buffer)

    def create_bullet_list(self, marker: str = "*") -> None:
        """Prefix the touched lines with a bullet marker: '*', '-' or '+'."""
        if marker not in _BULLET_MARKERS:
            raise ValueError(f"not a bullet marker: {marker!r}")
        with self._editing() as buffer:
            commands.insert_prefix(buffer, marker + " ")

    def create_numbered_list(self, marker: str = ".") -> None:
        """Number the touched lines, with '.' or ')' after each number."""
        if marker not in _NUMBER_MARKERS:
            raise ValueError(f"not a numbered list marker: {marker!r}")
        with self._editing() as buffer:
            commands.create_numbered_list(buffer, marker)

    def create_task_list(self) -> None:
        with self._editing() as buffer:
            commands.insert_prefix(buffer, "- [ ] ")

    def create_blockquote(self) -> None:
        with self._editing() as buffer:
            commands.insert_prefix(buffer, "> ")

    def remove_blockquote(self) -> None:
        with self._editing() as buffer:
            commands.remove_blockquote(buffer)

    def indent_text(self) -> None:
        with self._editing() as buffer:
            commands.indent(
                buffer,
                self.tab_width,
                self.insert_spaces_for_tabs,
                self.bullet_point_cycling_enabled,
            )

    def unindent_text(self) -> None:
        with self._editing() as buffer:
            commands.unindent(buffer, self.tab_width, self.bullet_point_cycling_enabled)

    def toggle_task_complete(self) -> bool:
        with self._editing() as buffer:
            return commands.toggle_task_complete(buffer)

    # Keys.

    def key_return(self, shift: bool = False, control: bool = False) -> None:
        """Shift adds a Markdown line break; Control skips list continuation."""
        with self._editing() as buffer:
            if buffer.has_selection():
                buffer.insert("\n")
                return
            if shift:
                buffer.insert("  ")
            if control:
                buffer.insert("\n")
            else:
                handle_return(buffer)

    def key_backspace(self) -> None:
        if self.hemingway_mode_enabled:
            return
        with self._editing() as buffer:
            if handle_backspace(buffer, self.auto_matcher):
                return
            if buffer.has_selection():
                buffer.insert("")
            elif buffer.cursor > 0:
                buffer.delete_range(buffer.cursor - 1, buffer.cursor)

    def key_delete(self) -> None:
        if self.hemingway_mode_enabled:
            return
        with self._editing() as buffer:
            if buffer.has_selection():
                buffer.insert("")
            elif buffer.cursor < len(buffer.text):
                buffer.delete_range(buffer.cursor, buffer.cursor + 1)

    def key_tab(self) -> None:
        with self._editing() as buffer:
            handled = self.auto_matcher.handle_whitespace(buffer, "\t")
        if not handled:
            self.indent_text()

    def key_backtab(self) -> None:
        self.unindent_text()

    def key_space(self) -> None:
        with self._editing() as buffer:
            if not self.auto_matcher.handle_whitespace(buffer, " "):
                buffer.insert(" ")

    def type_character(self, ch: str) -> None:
        """Type text; a single character may be paired or step over its partner."""
        with self._editing() as buffer:
            if len(ch) == 1 and (
                self.auto_matcher.skip_closing(buffer, ch)
                or self.auto_matcher.insert_pair(buffer, ch)
            ):
                return
            buffer.insert(ch)

    def set_auto_match(self, character: Optional[str] = None, enabled: bool = True) -> None:
        """Enable auto-matching for one opening character, or for all with None."""
        if character is None:
            self.auto_matcher.enabled = enabled
        else:
            self.auto_matcher.set_enabled(character, enabled)

    def navigate_document(self, position: int) -> None:
        self.buffer.set_cursor(position)

    # Font size.

    def increase_font_size(self) -> None:
        self.font_size += 1
        self.font_size_changed.emit(self.font_size)

    def decrease_font_size(self) -> None:
        self.font_size = max(self.font_size - 1, 1)
        self.font_size_changed.emit(self.font_size)

    # Typing pauses.

    def contents_changed(self) -> None:
        """Record a change to the text, announcing resumed typing after a pause."""
        if self._typing_has_paused:
            self._typing_has_paused = False
            self._typing_paused_signal_sent = False
            self.typing_resumed.emit()

    def check_typing_paused(self) -> None:
        """Run once per pause interval; announces a pause once per pause."""
        if self._typing_has_paused and not self._typing_paused_signal_sent:
            self._typing_paused_signal_sent = True
            self.typing_paused.emit()
        self._typing_has_paused = True

    def faded_ranges(self) -> List[Tuple[int, int]]:
        """Return the text ranges faded by the current focus mode."""
        if self.focus_mode == FocusMode.DISABLED:
            return []
        return blocks.faded_ranges(self.buffer, self.focus_mode)
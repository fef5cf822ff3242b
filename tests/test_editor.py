import pytest

from quillmark.blocks import FocusMode
from quillmark.editor import MarkdownEditor


def selected(editor, start, end):
    editor.buffer.set_cursor(end, start)
    return editor


def test_bold_without_selection_places_cursor_between_markers():
    editor = MarkdownEditor("")
    editor.bold()
    assert editor.text == "**" * 2
    assert editor.buffer.cursor == len("**")


def test_bold_wraps_selection_and_keeps_it_selected():
    editor = selected(MarkdownEditor("word"), 0, 4)
    editor.bold()
    assert editor.text == "**" + "word" + "**"
    assert editor.buffer.selected_text() == "word"


def test_italic_and_strikethrough_wrap_selection():
    editor = selected(MarkdownEditor("word"), 0, 4)
    editor.italic()
    assert editor.text == "*word*"
    other = selected(MarkdownEditor("word"), 0, 4)
    other.strikethrough()
    assert other.text == "~~word~~"


def test_insert_comment_without_selection():
    editor = MarkdownEditor("")
    editor.insert_comment()
    assert editor.text == "<!--  -->"
    assert editor.text[: editor.buffer.cursor] == "<!-- "


def test_create_bullet_list_over_selection():
    editor = selected(MarkdownEditor("a\nb"), 0, 3)
    editor.create_bullet_list("-")
    assert editor.text == "- a\n- b"


def test_create_bullet_list_rejects_bad_marker():
    with pytest.raises(ValueError):
        MarkdownEditor("a").create_bullet_list("#")


def test_create_numbered_list_with_parenthesis():
    editor = selected(MarkdownEditor("a\nb"), 0, 3)
    editor.create_numbered_list(")")
    assert editor.text == "1) a\n2) b"
    with pytest.raises(ValueError):
        editor.create_numbered_list(":")


def test_task_list_and_toggle():
    editor = MarkdownEditor("task")
    editor.create_task_list()
    assert editor.text == "- [ ] task"
    assert editor.toggle_task_complete() is True
    assert editor.text == "- [x] task"
    editor.toggle_task_complete()
    assert editor.text == "- [ ] task"


def test_blockquote_round_trip():
    editor = MarkdownEditor("quote")
    editor.create_blockquote()
    assert editor.text == "> quote"
    editor.remove_blockquote()
    assert editor.text == "quote"


def test_return_continues_bullet_list():
    editor = MarkdownEditor("- item")
    editor.navigate_document(len("- item"))
    editor.key_return()
    assert editor.text == "- item\n- "


def test_return_on_empty_item_ends_list():
    editor = MarkdownEditor("- ")
    editor.navigate_document(2)
    editor.key_return()
    assert editor.text == "\n"


def test_return_with_shift_adds_line_break():
    editor = MarkdownEditor("a")
    editor.navigate_document(1)
    editor.key_return(shift=True)
    assert editor.text == "a  \n"


def test_return_with_control_skips_continuation():
    editor = MarkdownEditor("- a")
    editor.navigate_document(3)
    editor.key_return(control=True)
    assert editor.text == "- a\n"


def test_hemingway_mode_blocks_deletion():
    editor = MarkdownEditor("abc")
    editor.navigate_document(3)
    editor.hemingway_mode_enabled = True
    editor.key_backspace()
    editor.navigate_document(0)
    editor.key_delete()
    assert editor.text == "abc"


def test_backspace_and_delete_remove_characters():
    editor = MarkdownEditor("abc")
    editor.navigate_document(3)
    editor.key_backspace()
    assert editor.text == "ab"
    editor.navigate_document(0)
    editor.key_delete()
    assert editor.text == "b"


def test_backspace_removes_auto_matched_pair():
    editor = MarkdownEditor("()")
    editor.navigate_document(1)
    editor.key_backspace()
    assert editor.text == ""


def test_typing_pairs_and_skips_closing():
    editor = MarkdownEditor("")
    editor.type_character("(")
    assert editor.text == "()"
    assert editor.buffer.cursor == 1
    editor.type_character(")")
    assert editor.text == "()"
    assert editor.buffer.cursor == 2


def test_auto_match_can_be_disabled():
    editor = MarkdownEditor("")
    editor.set_auto_match("(", False)
    editor.type_character("(")
    assert editor.text == "("
    other = MarkdownEditor("")
    other.set_auto_match(None, False)
    other.type_character("[")
    assert other.text == "["


def test_tab_indents_with_spaces_and_backtab_undoes_it():
    editor = MarkdownEditor("x")
    editor.insert_spaces_for_tabs = True
    editor.key_tab()
    assert editor.text == " " * editor.tab_width + "x"
    editor.key_backtab()
    assert editor.text == "x"


def test_tab_inserts_tab_character_by_default():
    editor = MarkdownEditor("x")
    editor.key_tab()
    assert editor.text == "\tx"


def test_space_inserts_space():
    editor = MarkdownEditor("ab")
    editor.navigate_document(1)
    editor.key_space()
    assert editor.text == "a b"


def test_navigate_document_out_of_range():
    editor = MarkdownEditor("abc")
    editor.navigate_document(2)
    assert editor.buffer.cursor == 2
    with pytest.raises(IndexError):
        editor.navigate_document(10)


def test_font_size_changes_are_announced_and_clamped():
    editor = MarkdownEditor()
    sizes = []
    editor.font_size_changed.connect(sizes.append)
    start = editor.font_size
    editor.increase_font_size()
    assert sizes == [start + 1]
    editor.font_size = 1
    editor.decrease_font_size()
    assert editor.font_size == 1
    assert sizes[-1] == 1


def test_typing_pause_cycle():
    editor = MarkdownEditor()
    resumed, paused = [], []
    editor.typing_resumed.connect(lambda: resumed.append(True))
    editor.typing_paused.connect(lambda: paused.append(True))
    editor.type_character("a")
    editor.type_character("b")
    assert len(resumed) == 1
    editor.check_typing_paused()
    assert paused == []
    editor.check_typing_paused()
    editor.check_typing_paused()
    assert len(paused) == 1


def test_faded_ranges_disabled_and_paragraph():
    editor = MarkdownEditor("a\nb\nc")
    editor.navigate_document(2)
    assert editor.faded_ranges() == []
    editor.focus_mode = FocusMode.PARAGRAPH
    before, after = editor.faded_ranges()
    assert before[0] == 0
    assert after[1] == len(editor.text)
    assert editor.text[before[1]:after[0]] == "b"